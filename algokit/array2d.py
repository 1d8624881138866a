"""Fixed-shape two-dimensional array stored in one flat list."""

from __future__ import annotations

from typing import Any


class Array2D:
    """A rows x cols grid indexed as ``grid[row, col]``."""

    def __init__(self, rows: int, cols: int, fill: Any = None) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        self._data = [fill] * (rows * cols)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _offset(self, index: tuple[int, int]) -> int:
        try:
            row, col = index
        except (TypeError, ValueError):
            raise TypeError("index must be a (row, col) pair") from None
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"index ({row}, {col}) out of range")
        return row * self._cols + col

    def __getitem__(self, index: tuple[int, int]) -> Any:
        return self._data[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        self._data[self._offset(index)] = value

    def row(self, index: int) -> list[Any]:
        """Return a copy of one row."""
        if not 0 <= index < self._rows:
            raise IndexError(f"row {index} out of range")
        start = index * self._cols
        return self._data[start:start + self._cols]

    def clear(self, value: Any) -> None:
        """Set every cell to ``value``."""
        self._data = [value] * len(self._data)