"""MD5 message digest with optional seeded initialisation constants."""

from __future__ import annotations

_MASK = 0xFFFFFFFF

_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)

_K = (
    3614090360, 3905402710, 606105819, 3250441966,
    4118548399, 1200080426, 2821735955, 4249261313,
    1770035416, 2336552879, 4294925233, 2304563134,
    1804603682, 4254626195, 2792965006, 1236535329,
    4129170786, 3225465664, 643717713, 3921069994,
    3593408605, 38016083, 3634488961, 3889429448,
    568446438, 3275163606, 4107603335, 1163531501,
    2850285829, 4243563512, 1735328473, 2368359562,
    4294588738, 2272392833, 1839030562, 4259657740,
    2763975236, 1272893353, 4139469664, 3200236656,
    681279174, 3936430074, 3572445317, 76029189,
    3654602809, 3873151461, 530742520, 3299628645,
    4096336452, 1126891415, 2878612391, 4237533241,
    1700485571, 2399980690, 4293915773, 2240044497,
    1873313359, 4264355552, 2734768916, 1309151649,
    4149444226, 3174756917, 718787259, 3951481745,
)


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & _MASK


def _transform(state: list[int], block: bytes) -> list[int]:
    words = [int.from_bytes(block[i:i + 4], "little") for i in range(0, 64, 4)]
    a, b, c, d = state
    for i in range(64):
        if i < 16:
            f = (b & c) | ((b ^ _MASK) & d)
            g = i
        elif i < 32:
            f = (b & d) | (c & (d ^ _MASK))
            g = (5 * i + 1) % 16
        elif i < 48:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = c ^ (b | (d ^ _MASK))
            g = (7 * i) % 16
        f = (a + f + _K[i] + words[g]) & _MASK
        a, d, c, b = d, c, b, (b + _rotl(f, _SHIFTS[i])) & _MASK
    return [(x + y) & _MASK for x, y in zip(state, (a, b, c, d))]


class MD5:
    """Incremental MD5 hasher.

    A non-zero ``seed`` perturbs the initialisation constants, giving a
    keyed variant; with the default seed of 0 the result is standard MD5.
    """

    def __init__(self, seed: int = 0) -> None:
        seed &= _MASK
        self._state = [
            (0x67452301 + seed * 11) & _MASK,
            (0xEFCDAB89 + seed * 71) & _MASK,
            (0x98BADCFE + seed * 37) & _MASK,
            (0x10325476 + seed * 97) & _MASK,
        ]
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

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        bits = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % 64)
        tail += bits.to_bytes(8, "little")
        state = list(self._state)
        for start in range(0, len(tail), 64):
            state = _transform(state, tail[start:start + 64])
        return b"".join(word.to_bytes(4, "little") for word in state)

    def hexdigest(self) -> str:
        """Return the digest as upper-case hexadecimal."""
        return self.digest().hex().upper()