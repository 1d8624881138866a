"""Priority queue kept in ascending order of priority."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any


class PriorityQueue:
    """Values ordered by ascending priority.

    A value queued with a priority equal to existing ones goes before them.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[Any, int]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def queue(self, value: Any, priority: int) -> None:
        """Insert ``value`` before the first entry of equal or greater priority."""
        index = bisect_left(self._entries, priority, key=lambda entry: entry[1])
        self._entries.insert(index, (value, priority))

    def top(self) -> tuple[Any, int]:
        """Return the front (value, priority) pair."""
        if not self._entries:
            raise IndexError("top of an empty priority queue")
        return self._entries[0]

    def dequeue(self) -> None:
        """Drop the front entry; an empty queue is left as it is."""
        if self._entries:
            del self._entries[0]