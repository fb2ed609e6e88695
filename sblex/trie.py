"""A grapheme trie whose states carry precomputed JSON answers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import regex

from sblex.morphology import MorphologyBuilder

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split ``text`` into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


class Trie:
    """A built trie mapping states to transitions and a JSON value."""

    def __init__(self, states: Mapping[int, tuple[Mapping[str, int], str]] | None = None) -> None:
        self._states: dict[int, tuple[dict[str, int], str]] = {
            state: (dict(transitions), value)
            for state, (transitions, value) in (states or {}).items()
        }

    @classmethod
    def builder(cls) -> TrieBuilder:
        """Return a new, empty builder."""
        return TrieBuilder()

    def lookup(self, word: str) -> str | None:
        """Return the value stored for ``word``, or None."""
        return self.lookup_with_state(word, 0)

    def lookup_with_state(self, word: str, start_state: int) -> str | None:
        """Follow ``word`` from ``start_state`` and return the value reached."""
        state = start_state
        for cluster in graphemes(word):
            entry = self._states.get(state)
            if entry is None:
                return None
            target = entry[0].get(cluster)
            if target is None:
                return None
            state = target
        entry = self._states.get(state)
        return None if entry is None else entry[1]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation."""
        return {
            "trie": {
                str(state): [dict(transitions), value]
                for state, (transitions, value) in self._states.items()
            }
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Trie:
        """Rebuild a trie from the output of :meth:`to_dict`."""
        return cls(
            {
                int(state): (dict(transitions), value)
                for state, (transitions, value) in data["trie"].items()
            }
        )


class TrieBuilder(MorphologyBuilder):
    """Collects words and their decorations and builds a :class:`Trie`."""

    def __init__(self) -> None:
        self._count = 0
        self._last_state = 0
        self._states: dict[int, tuple[dict[str, int], list[str]]] = {0: ({}, [])}

    def insert(self, word: str, decoration: str) -> None:
        """Add ``decoration`` to the state reached by ``word``."""
        self._count += 1
        clusters = graphemes(word)
        state = 0
        for position, cluster in enumerate(clusters):
            target = self._states[state][0].get(cluster)
            if target is None:
                self._complete(state, clusters[position:], decoration)
                return
            state = target
        self._states[state][1].append(decoration)

    def _complete(self, state: int, clusters: Iterable[str], decoration: str) -> None:
        for cluster in clusters:
            self._last_state += 1
            self._states[state][0][cluster] = self._last_state
            self._states[self._last_state] = ({}, [])
            state = self._last_state
        self._states[state][1].append(decoration)

    def build(self) -> Trie:
        """Precompute every state's JSON value and return the trie."""
        states = {}
        for state in range(self._last_state + 1):
            transitions, decorations = self._states[state]
            cont = "".join(sorted(transitions))
            analyses = ",".join(decorations)
            states[state] = (dict(transitions), f'{{"a":[{analyses}],"c":"{cont}"}}')
        return Trie(states)

    def number_of_insertions(self) -> int:
        """Return how many words were inserted."""
        return self._count

    def finish(self) -> None:
        """Nothing to flush: the trie is produced by :meth:`build`."""