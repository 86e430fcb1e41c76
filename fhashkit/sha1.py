"""SHA-1 message digest."""

from __future__ import annotations

import enum
import os

_MASK = 0xFFFFFFFF
_READ_CHUNK = 8000
_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)


class ReportType(enum.IntEnum):
    """Formats accepted by :meth:`SHA1.report_hash`."""

    HEX = 0
    DIGIT = 1


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & _MASK


def _transform(state: list[int], block: bytes) -> list[int]:
    w = [int.from_bytes(block[i:i + 4], "big") for i in range(0, 64, 4)]
    for i in range(16, 80):
        w.append(_rotl(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))
    a, b, c, d, e = state
    for i in range(80):
        if i < 20:
            f = ((b & (c ^ d)) ^ d)
            k = 0x5A827999
        elif i < 40:
            f = b ^ c ^ d
            k = 0x6ED9EBA1
        elif i < 60:
            f = ((b | c) & d) | (b & c)
            k = 0x8F1BBCDC
        else:
            f = b ^ c ^ d
            k = 0xCA62C1D6
        temp = (_rotl(a, 5) + f + e + k + w[i]) & _MASK
        a, b, c, d, e = temp, a, _rotl(b, 30), c, d
    return [(x + y) & _MASK for x, y in zip(state, (a, b, c, d, e))]


class SHA1:
    """Incremental SHA-1 hasher with an explicit finalisation step."""

    def __init__(self) -> None:
        self._digest = bytes(20)
        self.reset()

    def reset(self) -> None:
        """Restart hashing from the initial state."""
        self._state = list(_INITIAL)
        self._length = 0
        self._buffer = bytearray()

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        data = bytes(data)
        self._length += len(data)
        self._buffer.extend(data)
        whole = len(self._buffer) - len(self._buffer) % 64
        for start in range(0, whole, 64):
            self._state = _transform(self._state, bytes(self._buffer[start:start + 64]))
        del self._buffer[:whole]

    def hash_file(self, path: str | os.PathLike[str]) -> None:
        """Feed a file's whole contents into the hash.

        Raises OSError if the file cannot be opened.
        """
        with open(path, "rb") as stream:
            while chunk := stream.read(_READ_CHUNK):
                self.update(chunk)

    def final(self) -> None:
        """Finish the hash, store the digest and wipe the working state."""
        bits = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % 64)
        tail += bits.to_bytes(8, "big")
        state = self._state
        for start in range(0, len(tail), 64):
            state = _transform(state, tail[start:start + 64])
        self._digest = b"".join(word.to_bytes(4, "big") for word in state)

        self._buffer = bytearray()
        self._length = 0
        self._state = _transform([0] * 5, bytes(64))

    def report_hash(self, report_type: ReportType = ReportType.HEX) -> str:
        """Format the final digest as upper-case hex or as decimal bytes."""
        if report_type == ReportType.HEX:
            return self._digest.hex().upper()
        if report_type == ReportType.DIGIT:
            return "".join(str(byte) for byte in self._digest)
        raise ValueError(f"unknown report type: {report_type!r}")

    def digest(self) -> bytes:
        """Return the raw 20-byte digest computed by :meth:`final`."""
        return self._digest