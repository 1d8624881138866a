"""Array helpers: duplicate removal and the maximum subarray."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import NamedTuple


class Subarray(NamedTuple):
    """A contiguous run with inclusive bounds and its sum."""

    begin: int
    end: int
    total: int


def remove_duplicates(items: Iterable[Hashable]) -> list[Hashable]:
    """Return the items with later repeats removed, keeping first occurrences."""
    return list(dict.fromkeys(items))


def max_subarray(values: Sequence[int]) -> Subarray:
    """Find the contiguous run with the largest sum (Kadane's algorithm).

    The earliest run wins on ties. Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("max_subarray() requires at least one value")

    running = best = values[0]
    begin = end = new_begin = 0
    for index, value in enumerate(values[1:], start=1):
        if running > 0:
            running += value
        else:
            running = value
            new_begin = index
        if best < running:
            best = running
            begin, end = new_begin, index
    return Subarray(begin, end, best)