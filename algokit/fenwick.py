"""Fenwick (binary indexed) tree for prefix sums with point updates."""

from __future__ import annotations


class FenwickTree:
    """Prefix sums over positions 1..size, each update and query in O(log n)."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def prefix_sum(self, index: int) -> int:
        """Return the sum of positions 1..index (0 gives 0)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range 0..{self._size}")
        total = 0
        while index:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, low: int, high: int) -> int:
        """Return the sum of positions low..high inclusive."""
        if low < 1:
            raise IndexError(f"low {low} must be at least 1")
        return self.prefix_sum(high) - self.prefix_sum(low - 1)

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at position ``index``."""
        if not 1 <= index <= self._size:
            raise IndexError(f"index {index} out of range 1..{self._size}")
        while index <= self._size:
            self._tree[index] += delta
            index += index & -index