"""SHA-256 message digest."""

from __future__ import annotations

DIGEST_SIZE = 32
BLOCK_SIZE = 64

_MASK = 0xFFFFFFFF

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INITIAL = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _rotr(value: int, bits: int) -> int:
    return ((value >> bits) | (value << (32 - bits))) & _MASK


def _transform(state: list[int], block: bytes) -> list[int]:
    w = [int.from_bytes(block[i:i + 4], "big") for i in range(0, 64, 4)]
    for i in range(16, 64):
        s0 = _rotr(w[i - 15], 7) ^ _rotr(w[i - 15], 18) ^ (w[i - 15] >> 3)
        s1 = _rotr(w[i - 2], 17) ^ _rotr(w[i - 2], 19) ^ (w[i - 2] >> 10)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & _MASK)

    a, b, c, d, e, f, g, h = state
    for k, word in zip(_K, w):
        big_s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        choice = g ^ (e & (f ^ g))
        t1 = (h + big_s1 + choice + k + word) & _MASK
        big_s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        majority = (a & b) ^ (c & (a ^ b))
        t2 = (big_s0 + majority) & _MASK
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK, c, b, a, (t1 + t2) & _MASK
    return [(x + y) & _MASK for x, y in zip(state, (a, b, c, d, e, f, g, h))]


class SHA256:
    """Incremental SHA-256 hasher.

    :meth:`final` closes the hash; :meth:`digest` and :meth:`hexdigest`
    close it on first use if that has not happened yet.
    """

    def __init__(self) -> None:
        self._state = list(_INITIAL)
        self._length = 0
        self._buffer = bytearray()
        self._finished = False

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        if self._finished:
            raise ValueError("cannot update a finalised SHA-256 hash")
        data = bytes(data)
        self._length += len(data)
        self._buffer.extend(data)
        whole = len(self._buffer) - len(self._buffer) % BLOCK_SIZE
        for start in range(0, whole, BLOCK_SIZE):
            self._state = _transform(self._state, bytes(self._buffer[start:start + BLOCK_SIZE]))
        del self._buffer[:whole]

    def final(self) -> None:
        """Pad the message, append its bit length and process the last block(s)."""
        if self._finished:
            return
        bits = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % BLOCK_SIZE)
        tail += bits.to_bytes(8, "big")
        for start in range(0, len(tail), BLOCK_SIZE):
            self._state = _transform(self._state, tail[start:start + BLOCK_SIZE])
        self._buffer = bytearray()
        self._finished = True

    def digest(self) -> bytes:
        """Return the 32-byte digest."""
        self.final()
        return b"".join(word.to_bytes(4, "big") for word in self._state)

    def hexdigest(self) -> str:
        """Return the digest as upper-case hexadecimal."""
        return self.digest().hex().upper()