"""A pointer-based character trie with sorted children."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field


def _to_bytes(decoration: str | bytes) -> bytes:
    return decoration.encode("utf-8") if isinstance(decoration, str) else bytes(decoration)


@dataclass
class NaiveTrie:
    """A trie node; the root has no label."""

    label: str | None = None
    is_terminal: bool = False
    decoration: bytes | None = None
    children: list[NaiveTrie] = field(default_factory=list)

    @classmethod
    def make_root(cls) -> NaiveTrie:
        """Return an empty root node."""
        return cls()

    @classmethod
    def make_node(
        cls, label: str, is_terminal: bool, decoration: str | bytes | None
    ) -> NaiveTrie:
        """Return an intermediate or leaf node."""
        return cls(
            label=label,
            is_terminal=is_terminal,
            decoration=None if decoration is None else _to_bytes(decoration),
        )

    @property
    def is_root(self) -> bool:
        return self.label is None

    def insert(self, word: str, decoration: str | bytes) -> None:
        """Add the path for ``word``; a newly created last node gets ``decoration``."""
        data = _to_bytes(decoration)
        last = len(word) - 1
        node = self
        for position, char in enumerate(word):
            index = bisect_left(node.children, char, key=lambda child: child.label)
            if index < len(node.children) and node.children[index].label == char:
                node = node.children[index]
                continue
            is_terminal = position == last
            child = NaiveTrie.make_node(char, is_terminal, data if is_terminal else None)
            node.children.insert(index, child)
            node = child

    def num_children(self) -> int:
        """Return the number of direct children."""
        return len(self.children)


@dataclass
class NaiveTrieBuilder:
    """Counts insertions into a :class:`NaiveTrie`."""

    root: NaiveTrie = field(default_factory=NaiveTrie.make_root)
    count: int = 0

    def insert(self, word: str, decoration: str | bytes) -> None:
        """Insert ``word`` with ``decoration`` into the trie."""
        self.count += 1
        self.root.insert(word, decoration)

    def number_of_insertions(self) -> int:
        """Return how many words were inserted."""
        return self.count