import json

import pytest

from sblex.morphology import MorphologyLookupError, build_from_path
from sblex.trie import Trie, TrieBuilder
from sblex.trie_morphology import TrieMorphology, main


def _entry(word):
    return {
        "word": word,
        "head": word,
        "id": f"dalinm--{word}..vb.1",
        "pos": "vb",
        "inhs": [],
        "param": "-",
        "p": "vb",
    }


@pytest.fixture
def dalin_lex(tmp_path):
    path = tmp_path / "dalin.lex"
    words = ["ögna", "ökning", "ömma", "öra", "ösa"]
    path.write_text(
        "".join(json.dumps(_entry(w), ensure_ascii=False) + "\n" for w in words),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def morph(dalin_lex):
    builder = TrieBuilder()
    build_from_path(builder, dalin_lex)
    return TrieMorphology(builder.build())


def test_load_morphology_from_file(morph):
    assert morph.lookup("ö") is None

    result = json.loads(morph.lookup_with_cont("ö"))
    assert "".join(sorted(result["c"])) == "gkmrs"

    result = morph.lookup_with_cont("ögna").decode("utf-8")
    assert result == (
        '{"a":[{"gf":"ögna","id":"dalinm--ögna..vb.1","is":[],"msd":"-",'
        '"p":"vb","pos":"vb"}],"c":""}'
    )

    result = morph.lookup("ögna")
    assert result is not None
    assert result.decode("utf-8") == (
        '[{"gf":"ögna","id":"dalinm--ögna..vb.1","is":[],"msd":"-",'
        '"p":"vb","pos":"vb"}]'
    )


def test_can_create_morphology():
    morph = TrieMorphology(Trie.builder().build())
    assert morph.lookup("") is None
    assert morph.lookup_with_cont("") == b'{"a":[],"c":""}'


def test_lookup_with_cont_missing_raises(morph):
    with pytest.raises(MorphologyLookupError) as info:
        morph.lookup_with_cont("löparsko")
    assert "löparsko" in str(info.value)


def test_lookup_missing_returns_none(morph):
    assert morph.lookup("löparsko") is None


def test_lookup_with_state_matches_raw(morph):
    assert morph.lookup_with_state("ögna", 0) == morph.lookup_raw("ögna")


def test_invalid_stored_json_raises():
    morph = TrieMorphology(Trie({0: ({}, "not json")}))
    with pytest.raises(MorphologyLookupError):
        morph.lookup("")


def test_round_trip_through_json(morph):
    restored = TrieMorphology.from_dict(json.loads(json.dumps(morph.to_dict())))
    for word in ["ö", "ögna", "ösa", "öx"]:
        assert restored.lookup(word) == morph.lookup(word)
        assert restored.lookup_raw(word) == morph.lookup_raw(word)


def test_main_writes_morphology(dalin_lex, tmp_path, capsys):
    output = tmp_path / "out.json"
    assert main([str(dalin_lex), str(output)]) == 0
    printed = capsys.readouterr().out
    assert printed.startswith(f"loading from {dalin_lex} ...")
    restored = TrieMorphology.from_dict(json.loads(output.read_text(encoding="utf-8")))
    assert json.loads(restored.lookup("ösa"))[0]["gf"] == "ösa"