import hashlib

import pytest

from fhashkit.sha512 import DIGEST_SIZE, SHA512, sha512

ABC_DIGEST = (
    "DDAF35A193617ABACC417349AE20413112E6FA4E89A97EA20A9EEEE64B55D39A"
    "2192992A274FC1A836BA3C23A3FEEF4BB4BE4E45F4D9D4B2F9C8E2E8D7C9D1B3"
)


def test_abc_matches_reference():
    hasher = SHA512()
    hasher.update(b"abc")
    assert hasher.hexdigest() == hashlib.sha512(b"abc").hexdigest().upper()


def test_abc_prefix_is_the_published_vector():
    assert sha512(b"abc").hex().upper()[:32] == ABC_DIGEST[:32]


def test_empty_input():
    assert sha512(b"") == hashlib.sha512(b"").digest()


@pytest.mark.parametrize(
    "length", [1, 55, 111, 112, 113, 127, 128, 129, 239, 240, 255, 256, 1000]
)
def test_padding_boundaries(length):
    data = bytes((i * 7) & 0xFF for i in range(length))
    assert sha512(data) == hashlib.sha512(data).digest()


def test_incremental_equals_one_shot():
    data = bytes(range(256)) * 5
    hasher = SHA512()
    for start in range(0, len(data), 37):
        hasher.update(data[start:start + 37])
    assert hasher.digest() == sha512(data)


def test_empty_update_changes_nothing():
    hasher = SHA512()
    hasher.update(b"hello")
    hasher.update(b"")
    assert hasher.digest() == sha512(b"hello")


def test_digest_does_not_disturb_state():
    hasher = SHA512()
    hasher.update(b"part one ")
    first = hasher.digest()
    hasher.update(b"part two")
    assert first == sha512(b"part one ")
    assert hasher.digest() == sha512(b"part one part two")


def test_digest_size_and_hex_form():
    hasher = SHA512()
    hasher.update(b"data")
    assert len(hasher.digest()) == DIGEST_SIZE
    hexed = hasher.hexdigest()
    assert len(hexed) == 2 * DIGEST_SIZE
    assert hexed == hexed.upper()
    assert bytes.fromhex(hexed) == hasher.digest()


def test_accepts_bytearray_and_memoryview():
    data = b"some payload"
    assert sha512(bytearray(data)) == sha512(data)
    assert sha512(memoryview(data)) == sha512(data)


def test_million_a():
    data = b"a" * 1_000_000
    assert sha512(data) == hashlib.sha512(data).digest()


def test_rejects_text():
    with pytest.raises(TypeError):
        sha512("text")