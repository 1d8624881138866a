"""String algorithms: KMP search, longest common subsequence, string hashes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

_MASK32 = 0xFFFFFFFF
_FNV_PRIME = 16777619
_FNV_OFFSET = 2166136261


def kmp_table(word: Sequence[Any]) -> list[int]:
    """Build the Knuth-Morris-Pratt partial match table for ``word``."""
    length = len(word)
    if length == 0:
        return []
    table = [-1] + [0] * (length - 1)
    pos, cnd = 2, 0
    while pos < length:
        if word[pos - 1] == word[cnd]:
            cnd += 1
            table[pos] = cnd
            pos += 1
        elif cnd > 0:
            cnd = table[cnd]
        else:
            table[pos] = 0
            pos += 1
    return table


def kmp_search(text: Sequence[Any], word: Sequence[Any]) -> int:
    """Return the first index of ``word`` in ``text``, or -1 if absent."""
    if not word:
        return 0
    table = kmp_table(word)
    last = len(word) - 1
    m = i = 0
    while m + i < len(text):
        if word[i] == text[m + i]:
            if i == last:
                return m
            i += 1
        else:
            m = m + i - table[i]
            i = max(table[i], 0)
    return -1


def lcs_length(x: Sequence[Any], y: Sequence[Any]) -> list[list[int]]:
    """Return the (len(x)+1) x (len(y)+1) table of LCS lengths of prefixes."""
    table = [[0] * (len(y) + 1) for _ in range(len(x) + 1)]
    for i, x_item in enumerate(x, start=1):
        row, above = table[i], table[i - 1]
        for j, y_item in enumerate(y, start=1):
            if x_item == y_item:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(row[j - 1], above[j])
    return table


def lcs_backtrack(
    table: list[list[int]], x: Sequence[Any], y: Sequence[Any]
) -> list[Any]:
    """Recover a longest common subsequence, in order, from a length table."""
    result: list[Any] = []
    i, j = len(x), len(y)
    while i and j:
        if x[i - 1] == y[j - 1]:
            result.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    result.reverse()
    return result


def lcs(x: Sequence[Any], y: Sequence[Any]) -> list[Any]:
    """Return a longest common subsequence of ``x`` and ``y``."""
    return lcs_backtrack(lcs_length(x, y), x, y)


def _as_bytes(data: str | bytes) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def hash_string(data: str | bytes) -> int:
    """Hash to an unsigned 32-bit integer with the ``31*h + c`` scheme."""
    value = 0
    for byte in _as_bytes(data):
        value = (31 * value + byte) & _MASK32
    return value


def hash_fnv1a(data: str | bytes) -> int:
    """Hash to an unsigned 32-bit integer with FNV-1a.

    Bytes of 0x80 and above are sign-extended before the xor, as happens
    when the input is read through a signed character type.
    """
    value = _FNV_OFFSET
    for byte in _as_bytes(data):
        if byte >= 0x80:
            byte |= 0xFFFFFF00
        value = ((value ^ byte) * _FNV_PRIME) & _MASK32
    return value