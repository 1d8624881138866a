"""Comparison and distribution sorts."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise
from typing import Any

_UINT32_MAX = 0xFFFFFFFF
_RADIX_SHIFTS = (0, 8, 16, 24)


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted in ascending order by insertion sort."""
    result = list(items)
    for pos in range(1, len(result)):
        current = result[pos]
        j = pos - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted in ascending order by top-down merge sort.

    The left half holds the middle element when the length is odd.
    """
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) + 1) // 2
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _counting_pass(values: list[int], shift: int) -> list[int]:
    buckets: list[list[int]] = [[] for _ in range(256)]
    for value in values:
        buckets[(value >> shift) & 0xFF].append(value)
    return [value for bucket in buckets for value in bucket]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort unsigned 32-bit integers with four byte-wise counting passes.

    Raises ValueError for values outside the unsigned 32-bit range.
    """
    data = list(values)
    for value in data:
        if not 0 <= value <= _UINT32_MAX:
            raise ValueError(f"value {value} is not an unsigned 32-bit integer")
    for shift in _RADIX_SHIFTS:
        data = _counting_pass(data, shift)
    return data


def check_order(values: Iterable[Any]) -> None:
    """Raise ValueError unless the values are in non-decreasing order."""
    for index, (first, second) in enumerate(pairwise(values)):
        if not first <= second:
            raise ValueError(
                f"values out of order at position {index}: {first!r} > {second!r}"
            )