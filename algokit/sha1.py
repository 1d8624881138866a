"""SHA-1 message digest (FIPS 180-1) over byte strings."""

from __future__ import annotations

import struct
import sys
from collections.abc import Sequence

_MASK32 = 0xFFFFFFFF
_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_K = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)
_BLOCK = 64
_MAX_BITS = 1 << 64
_DEMO_TEXT = "abc\n"


class SHA1Error(Exception):
    """Raised when a digest is used after it was finalised or corrupted."""


def _rotl(word: int, bits: int) -> int:
    return ((word << bits) & _MASK32) | (word >> (32 - bits))


def _as_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


class SHA1:
    """Incremental SHA-1 hasher.

    Once the digest has been computed the hasher is closed: further input
    corrupts it and raises SHA1Error until ``reset`` is called.
    """

    def __init__(self, data: str | bytes = b"") -> None:
        self.reset()
        if data:
            self.update(data)

    def reset(self) -> None:
        """Return to the initial state, ready for a new message."""
        self._state = list(_INITIAL)
        self._buffer = bytearray()
        self._length_bits = 0
        self._computed = False
        self._corrupted = False

    def update(self, data: str | bytes) -> None:
        """Feed the next part of the message; strings are hashed as UTF-8."""
        chunk = _as_bytes(data)
        if not chunk:
            return
        if self._computed or self._corrupted:
            self._corrupted = True
            raise SHA1Error("digest already computed or corrupted; call reset()")
        if self._length_bits + 8 * len(chunk) >= _MAX_BITS:
            self._corrupted = True
            raise SHA1Error("message is too long")
        self._length_bits += 8 * len(chunk)
        self._buffer.extend(chunk)
        full = len(self._buffer) - len(self._buffer) % _BLOCK
        for start in range(0, full, _BLOCK):
            self._process_block(self._buffer[start:start + _BLOCK])
        del self._buffer[:full]

    def _process_block(self, block: bytes | bytearray) -> None:
        w = list(struct.unpack(">16I", block))
        for t in range(16, 80):
            w.append(_rotl(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16], 1))

        a, b, c, d, e = self._state
        for t, word in enumerate(w):
            if t < 20:
                f = (b & c) | (~b & d)
            elif t < 40 or t >= 60:
                f = b ^ c ^ d
            else:
                f = (b & c) | (b & d) | (c & d)
            temp = (_rotl(a, 5) + f + e + word + _K[t // 20]) & _MASK32
            e, d, c, b, a = d, c, _rotl(b, 30), a, temp

        self._state = [
            (x + y) & _MASK32 for x, y in zip(self._state, (a, b, c, d, e))
        ]

    def _finalise(self) -> None:
        if self._corrupted:
            raise SHA1Error("digest is corrupted; call reset()")
        if self._computed:
            return
        tail = bytearray(self._buffer)
        tail.append(0x80)
        tail.extend(b"\x00" * ((56 - len(tail)) % _BLOCK))
        tail.extend(self._length_bits.to_bytes(8, "big"))
        for start in range(0, len(tail), _BLOCK):
            self._process_block(tail[start:start + _BLOCK])
        self._buffer.clear()
        self._computed = True

    def words(self) -> tuple[int, int, int, int, int]:
        """Finalise and return the digest as five 32-bit words."""
        self._finalise()
        return tuple(self._state)  # type: ignore[return-value]

    def digest(self) -> bytes:
        """Finalise and return the 20-byte digest."""
        return b"".join(word.to_bytes(4, "big") for word in self.words())

    def hexdigest(self) -> str:
        """Finalise and return the digest as 40 lowercase hex digits."""
        return self.digest().hex()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the digest words of each argument, or of a sample text."""
    args = list(sys.argv[1:] if argv is None else argv) or [_DEMO_TEXT]
    for text in args:
        words = SHA1(text).words()
        print(f"sha {text} --> " + "".join(f"{word:x}" for word in words))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())