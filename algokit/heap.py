"""Bounded binary min-heap of key/data pairs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class HeapItem:
    """A key with the data it orders."""

    key: int
    data: Any


class Heap:
    """A min-heap on integer keys holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[HeapItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, data: Any) -> bool:
        return any(item.data == data for item in self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def push(self, key: int, data: Any) -> bool:
        """Insert a pair; return False and leave the heap alone if it is full."""
        if len(self._items) >= self._capacity:
            return False
        self._items.append(HeapItem(key, data))
        self._up(len(self._items) - 1)
        return True

    def pop(self) -> HeapItem:
        """Remove and return the item with the smallest key."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        last = len(items) - 1
        items[0], items[last] = items[last], items[0]
        self._down(0, last)
        return items.pop()

    def remove(self, data: Any) -> bool:
        """Remove the first item holding ``data``; return whether one was found."""
        items = self._items
        for index, item in enumerate(items):
            if item.data == data:
                last = len(items) - 1
                if index != last:
                    items[index], items[last] = items[last], items[index]
                    self._down(index, last)
                    self._up(index)
                items.pop()
                return True
        return False

    def decrease_key(self, data: Any, new_key: int) -> None:
        """Give ``data`` a new key, if present, by removing and pushing it again."""
        if self.remove(data):
            self.push(new_key, data)

    def _up(self, j: int) -> None:
        items = self._items
        while j > 0:
            parent = (j - 1) // 2
            if not items[j].key < items[parent].key:
                break
            items[parent], items[j] = items[j], items[parent]
            j = parent

    def _down(self, i: int, n: int) -> None:
        items = self._items
        while True:
            child = 2 * i + 1
            if child >= n:
                break
            right = child + 1
            if right < n and not items[child].key < items[right].key:
                child = right
            if not items[child].key < items[i].key:
                break
            items[i], items[child] = items[child], items[i]
            i = child