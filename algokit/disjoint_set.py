"""Disjoint-set forest with union by rank and path compression."""

from __future__ import annotations

from collections.abc import Hashable


class DisjointSet:
    """A partition of hashable items into disjoint sets."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._rank: dict[Hashable, int] = {}

    def __contains__(self, item: Hashable) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def make_set(self, item: Hashable) -> None:
        """Put ``item`` into a new set of its own, with rank 0."""
        self._parent[item] = item
        self._rank[item] = 0

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``.

        Raises KeyError if ``item`` was never added.
        """
        if item not in self._parent:
            raise KeyError(item)
        path = []
        while self._parent[item] != item:
            path.append(item)
            item = self._parent[item]
        for node in path:
            self._parent[node] = item
        return item

    def link(self, x: Hashable, y: Hashable) -> Hashable:
        """Attach the lower-ranked of two roots below the other; return the new root."""
        for item in (x, y):
            if item not in self._parent:
                raise KeyError(item)
        if x == y:
            return x
        if self._rank[x] > self._rank[y]:
            self._parent[y] = x
            return x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        return y

    def union(self, x: Hashable, y: Hashable) -> Hashable:
        """Merge the sets holding ``x`` and ``y``; return the new representative."""
        return self.link(self.find(x), self.find(y))

    def rank(self, item: Hashable) -> int:
        """Return the rank recorded for ``item``."""
        if item not in self._rank:
            raise KeyError(item)
        return self._rank[item]