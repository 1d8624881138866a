"""Prefix tree that counts whole words and longer words under a prefix."""

from __future__ import annotations

from dataclasses import dataclass, field

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


@dataclass
class _Node:
    words: int = 0
    prefixes: int = 0
    edges: dict[str, _Node] = field(default_factory=dict)


def _normalise(text: str) -> str:
    lowered = text.lower()
    for char in lowered:
        if char not in _ALPHABET:
            raise ValueError(f"character {char!r} is not a letter a-z")
    return lowered


class Trie:
    """A trie over the letters a-z; input is folded to lower case."""

    def __init__(self) -> None:
        self._root = _Node()

    def add(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        node = self._root
        for char in _normalise(word):
            node.prefixes += 1
            node = node.edges.setdefault(char, _Node())
        node.words += 1

    def _find(self, text: str) -> _Node | None:
        node = self._root
        for char in _normalise(text):
            child = node.edges.get(char)
            if child is None:
                return None
            node = child
        return node

    def count(self, word: str) -> int:
        """Return how many times ``word`` was added."""
        node = self._find(word)
        return 0 if node is None else node.words

    def count_prefix(self, prefix: str) -> int:
        """Return how many added words are strictly longer than and start with ``prefix``."""
        node = self._find(prefix)
        return 0 if node is None else node.prefixes