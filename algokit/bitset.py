"""Fixed-size set of bits, stored most significant bit first in each byte."""

from __future__ import annotations


class BitSet:
    """A bit set whose size is rounded up to whole bytes, plus one spare byte."""

    def __init__(self, num_bits: int) -> None:
        if num_bits < 0:
            raise ValueError("num_bits must not be negative")
        self._bits = bytearray(num_bits // 8 + 1)

    def __len__(self) -> int:
        return len(self._bits) * 8

    def set(self, bit: int) -> None:
        """Set ``bit`` to 1; positions outside the set are ignored."""
        if 0 <= bit < len(self):
            self._bits[bit // 8] |= 0x80 >> (bit % 8)

    def unset(self, bit: int) -> None:
        """Set ``bit`` to 0; positions outside the set are ignored."""
        if 0 <= bit < len(self):
            self._bits[bit // 8] &= ~(0x80 >> (bit % 8)) & 0xFF

    def test(self, bit: int) -> bool:
        """Return whether ``bit`` is set; positions outside the set read as 0."""
        if not 0 <= bit < len(self):
            return False
        return bool(self._bits[bit // 8] & (0x80 >> (bit % 8)))

    def __bytes__(self) -> bytes:
        return bytes(self._bits)