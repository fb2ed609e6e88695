"""A minimal character trie with precomputed JSON answers."""

from __future__ import annotations

from collections.abc import Mapping


class CharTrie:
    """A built trie; missing words look up as the empty string."""

    def __init__(self, states: Mapping[int, tuple[Mapping[str, int], str]]) -> None:
        self._states: dict[int, tuple[dict[str, int], str]] = {
            state: (dict(transitions), value)
            for state, (transitions, value) in states.items()
        }

    def lookup(self, word: str) -> str:
        """Return the value stored for ``word``, or an empty string."""
        return self.lookup_with_state(word, 0)

    def lookup_with_state(self, word: str, start_state: int) -> str:
        """Follow ``word`` from ``start_state``; raise KeyError on an unknown final state."""
        state = start_state
        for char in word:
            entry = self._states.get(state)
            if entry is None:
                return ""
            target = entry[0].get(char)
            if target is None:
                return ""
            state = target
        return self._states[state][1]


class CharTrieBuilder:
    """Collects words and decorations and builds a :class:`CharTrie`."""

    def __init__(self) -> None:
        self._states: dict[int, tuple[dict[str, int], list[str]]] = {0: ({}, [])}
        self._count = 0
        self._last_state = 0

    def insert(self, word: str, decoration: str) -> None:
        """Add ``decoration`` at the end of a newly created path for ``word``."""
        self._count += 1
        state = 0
        for position, char in enumerate(word):
            entry = self._states.get(state)
            target = None if entry is None else entry[0].get(char)
            if target is None:
                self._complete(state, word[position:], decoration)
                return
            state = target
        # A word whose whole path already exists is left undecorated.

    def _complete(self, state: int, rest: str, decoration: str) -> None:
        for char in rest:
            self._last_state += 1
            if state in self._states:
                self._states[state][0][char] = self._last_state
            self._states[self._last_state] = ({}, [])
            state = self._last_state
        if state in self._states:
            self._states[state][1].append(decoration)

    def build(self) -> CharTrie:
        """Precompute every state's JSON value and return the trie."""
        states = {}
        for state in range(self._last_state + 1):
            transitions, decorations = self._states[state]
            analyses = ",".join(decorations)
            cont = "".join(transitions)
            states[state] = (transitions, f'{{"a":[{analyses}],"c":"{cont}"}}')
        return CharTrie(states)

    def number_of_insertions(self) -> int:
        """Return how many words were inserted."""
        return self._count