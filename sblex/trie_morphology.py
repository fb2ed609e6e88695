"""A morphology backed by an in-memory grapheme trie."""

from __future__ import annotations

import argparse
import json
import time
from collections.abc import Mapping, Sequence
from typing import Any

from sblex.morphology import Morphology, MorphologyLookupError, build_from_path
from sblex.trie import Trie, TrieBuilder


def _to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=True)


class TrieMorphology(Morphology):
    """Answers morphology lookups from a built :class:`Trie`."""

    def __init__(self, trie: Trie) -> None:
        self.trie = trie

    def lookup_raw(self, fragment: str) -> str | None:
        """Return the stored JSON object for ``fragment`` as text, or None."""
        return self.trie.lookup_with_state(fragment, 0)

    def lookup_with_state(self, fragment: str, state: int) -> str | None:
        """Return the stored JSON object reached from ``state``, or None."""
        return self.trie.lookup_with_state(fragment, state)

    def lookup(self, fragment: str) -> bytes | None:
        data = self.lookup_raw(fragment)
        if data is None:
            return None
        try:
            value = json.loads(data)
        except json.JSONDecodeError as error:
            raise MorphologyLookupError() from error
        if not isinstance(value, dict) or "a" not in value:
            return None
        analyses = value["a"]
        if not isinstance(analyses, list):
            raise MorphologyLookupError(f"analyses for '{fragment}' are not an array")
        if not analyses:
            return None
        return _to_json(analyses).encode("utf-8")

    def lookup_with_cont(self, fragment: str) -> bytes:
        data = self.lookup_raw(fragment)
        if data is None:
            raise MorphologyLookupError(f"Found no data for '{fragment}'")
        return data.encode("utf-8")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation."""
        return {"trie": self.trie.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TrieMorphology:
        """Rebuild a morphology from the output of :meth:`to_dict`."""
        return cls(Trie.from_dict(data["trie"]))


def main(argv: Sequence[str] | None = None) -> int:
    """Load a lexicon into a trie morphology and save it as JSON."""
    parser = argparse.ArgumentParser(
        description="Build a trie morphology from a '.lex' file and write it as JSON."
    )
    parser.add_argument("input", nargs="?", default="assets/testing/saldo.lex")
    parser.add_argument("output", nargs="?")
    args = parser.parse_args(argv)
    output = args.output or f"output.{int(time.time())}.json"

    print(f"loading from {args.input} ...")
    builder = TrieBuilder()
    build_from_path(builder, args.input)
    morph = TrieMorphology(builder.build())
    print(repr(morph.lookup_raw("dväljes")))
    with open(output, "w", encoding="utf-8") as file:
        json.dump(morph.to_dict(), file, ensure_ascii=False, separators=(",", ":"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())