# sblex

Morphology lookup for Swedish lexical resources in the `.lex` format: one
JSON object per line, with `word`, `head`, `id`, `pos`, `inhs`, `param` and
`p` fields.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library

- `sblex.morphology`: the `Morphology` and `MorphologyBuilder` interfaces,
  their errors (`MorphologyBuilderError` and its subclasses
  `DuplicateWordError`, `CouldNotOpenFileError`, `CouldNotReadLineError`,
  `DeserializeError`, plus `MorphologyLookupError`), and
  `build_from_path(builder, path)`. That function reads a `.lex` file and
  inserts, for each line's `word`, the analysis
  `{"gf": head, "id": id, "is": inhs, "msd": param, "p": p, "pos": pos}` as
  compact JSON.
- `sblex.trie`: `TrieBuilder` and `Trie`, a trie over extended grapheme
  clusters (`graphemes(text)`). `TrieBuilder.build()` gives every state the
  precomputed value `{"a":[analyses...],"c":"<sorted continuations>"}`.
  `Trie.to_dict()` and `Trie.from_dict()` convert a trie to and from JSON-ready
  data.
- `sblex.trie_morphology.TrieMorphology`: a `Morphology` on top of a `Trie`.
- `sblex.kv_morphology.KvMorphology`: a `Morphology` and `MorphologyBuilder`
  kept in a database folder (an SQLite file `saldo_morph.sqlite3` inside it).
  Each insert appends to the word's JSON array and commits at once. It can be
  used as a context manager and has `close()`.
- `sblex.naive_trie` (`NaiveTrie`, `NaiveTrieBuilder`) and `sblex.char_trie`
  (`CharTrie`, `CharTrieBuilder`): two simpler character tries.
- `sblex.lids`: `Lexeme`, `Lemma`, `is_lexeme`, `is_lemma` and `parse_lid`.
- `sblex.fm_errors.AppError`: a JSON error body with a random `error_id`.

```python
from sblex.morphology import build_from_path
from sblex.trie import TrieBuilder
from sblex.trie_morphology import TrieMorphology

builder = TrieBuilder()
build_from_path(builder, "saldo.lex")
morph = TrieMorphology(builder.build())

morph.lookup("dväljes")            # JSON array of analyses as bytes, or None
morph.lookup_with_cont("dväl")     # b'{"a":[...],"c":"..."}'
```

`lookup` returns the analyses stored for an exact word form. It returns
`None` when there are none. `lookup_with_cont` also reports, under `"c"`, the
characters that follow the fragment in some word of the lexicon.
`TrieMorphology.lookup_with_cont` raises `MorphologyLookupError` for a fragment
that is not a prefix of any word. `KvMorphology.lookup_with_cont` answers
`{"a":[],"c":""}` in that case.

## Commands

### sblex-load-morphology

```
sblex-load-morphology [INPUT] [OUTPUT]
```

Reads `INPUT` (default `assets/testing/saldo.lex`) into a `TrieMorphology`.
It prints the stored value for `dväljes` and writes the morphology as JSON to
`OUTPUT` (default `output.<unix time>.json`).

### sblex-morph-builder

```
sblex-morph-builder saldo.lex fjall --db path/to/db
sblex-morph-builder saldo.lex trie
```

`fjall` fills a `KvMorphology` in the folder given by `--db`. `trie` builds an
in-memory trie and discards it, so it only checks that the file loads. On
failure the command prints the error and exits with status 1.

### sblex-fm-server

```
sblex-fm-server db saldo.lex
sblex-fm-server serve --host 127.0.0.1 --port 8765
```

The command reads a `.env` file in the working directory, if there is one,
and needs these environment variables:

- `FM_SERVER__OTEL_SERVICE_NAME`: required. It is copied to
  `OTEL_SERVICE_NAME`.
- `MORPHOLOGY_PATH` or `FM_SERVER__MORPHOLOGY_PATH`: the `KvMorphology`
  folder. Names are matched without regard to case, and the prefixed name
  wins.

`db` fills the store from a `.lex` file. `serve` starts the HTTP server.
Host and port default to `127.0.0.1` and `8765`. `FM_SERVER_APP_HOST` and
`FM_SERVER_APP_PORT` override those defaults.

Endpoints:

- `GET /morph/{fragment}`: the analyses of a word form. If there are none,
  the answer is `404` with
  `{"status_code": 404, "data": {"message": "<fragment>"}}`.
- `GET /morph-w-cont/{fragment}`: analyses plus continuations.

A failed lookup gives `500` with the message `Internal server error`. A
lookup that takes longer than 10 seconds gives `408`. For embedding,
`sblex.fm_http.create_app(morphology)` returns the Starlette application for
any `Morphology`.

### sblex-server

```
sblex-server
```

The command reads `.env` and requires `SALDO_WS__OTEL_SERVICE_NAME`. It
listens on `0.0.0.0:3003` and serves:

- `GET /health`: `{"status": "UP"}`
- `GET /version/json`: `{"version": "26005"}`
- `GET /lid/json/{lid}`: `{"lid": {"Lemma": "..."}}` or
  `{"lid": {"Lexeme": "..."}}`.
- `GET /lid/xml/{lid}` and `GET /lid/html/{lid}`: always answer `<r></r>`.

A lemma is an identifier whose last `.` follows some other character, such as
`dväljas..vb.1`. A lexeme is one whose last `.` follows another `.`, such as
`dväljas..1`. Anything else gives `400`. `sblex.sblex_app.create_app()`
returns the application.

## What the package does not do

- The lexicon server does not look up entries. The `/lid/...` routes only
  check and echo the identifier.
- No traces or metrics are exported. The service-name variables are required
  and copied to `OTEL_SERVICE_NAME`, but nothing else uses them.
- The `trie` backend of `sblex-morph-builder` stores nothing. Use
  `sblex-load-morphology` to save a trie morphology to a file.