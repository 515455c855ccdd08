import hashlib

import pytest

from minissl.sha256 import sha224, sha256

SAMPLES = [
    b"",
    b"a",
    b"abc",
    b"hello world\n",
    b"x" * 55,
    b"x" * 56,
    b"x" * 63,
    b"x" * 64,
    b"x" * 65,
    b"y" * 119,
    b"y" * 120,
    b"y" * 128,
    bytes(range(256)) * 3,
    b"\x00\xff\x80" * 50,
]


def test_sha256_empty_pinned():
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_sha256_abc_pinned():
    assert sha256(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_sha224_abc_pinned():
    assert sha224(b"abc").hex() == (
        "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7"
    )


@pytest.mark.parametrize("data", SAMPLES)
def test_sha256_matches_stdlib(data):
    assert sha256(data) == hashlib.sha256(data).digest()


@pytest.mark.parametrize("data", SAMPLES)
def test_sha224_matches_stdlib(data):
    assert sha224(data) == hashlib.sha224(data).digest()


@pytest.mark.parametrize("data", SAMPLES)
def test_digest_lengths(data):
    assert len(sha256(data)) == 32
    assert len(sha224(data)) == 28


def test_accepts_bytearray_and_memoryview():
    data = b"some message"
    assert sha256(bytearray(data)) == hashlib.sha256(data).digest()
    assert sha224(memoryview(data)) == hashlib.sha224(data).digest()


def test_repeated_calls_give_the_correct_digest():
    expected256 = hashlib.sha256(b"repeat").digest()
    expected224 = hashlib.sha224(b"repeat").digest()
    for _ in range(3):
        assert sha256(b"repeat") == expected256
        assert sha224(b"repeat") == expected224


def test_single_bit_change_alters_digest():
    assert sha256(b"message0") != sha256(b"message1")
    assert sha224(b"message0") != sha224(b"message1")


def test_sha224_differs_from_truncated_sha256():
    data = b"abc"
    assert sha224(data) != sha256(data)[:28]


def test_large_input_matches_stdlib():
    data = bytes(range(251)) * 40
    assert sha256(data) == hashlib.sha256(data).digest()
    assert sha224(data) == hashlib.sha224(data).digest()


def test_rejects_text_input():
    with pytest.raises(TypeError):
        sha256("not bytes")