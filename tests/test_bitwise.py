import pytest

from minissl.bitwise import (
    rotate_left32,
    rotate_right32,
    rotate_right64,
    swap32,
    swap64,
)

SAMPLES32 = [0, 1, 0x12345678, 0xFFFFFFFF, 0x80000001, 0xDEADBEEF]
SAMPLES64 = [0, 1, 0x0123456789ABCDEF, 0xFFFFFFFFFFFFFFFF, 0x8000000000000001]


@pytest.mark.parametrize("value", SAMPLES32)
@pytest.mark.parametrize("bits", [1, 5, 7, 16, 31])
def test_rotate32_round_trip(value, bits):
    assert rotate_right32(rotate_left32(value, bits), bits) == value
    assert rotate_left32(rotate_right32(value, bits), bits) == value


@pytest.mark.parametrize("value", SAMPLES32)
@pytest.mark.parametrize("bits", [1, 3, 13, 22, 31])
def test_rotate_right_equals_complementary_left(value, bits):
    assert rotate_right32(value, bits) == rotate_left32(value, 32 - bits)


@pytest.mark.parametrize("bits", [0, 32, 40])
def test_rotate32_out_of_range_is_identity(bits):
    assert rotate_right32(0x12345678, bits) == 0x12345678
    assert rotate_left32(0x12345678, bits) == 0x12345678


def test_rotate_right32_single_bit():
    assert rotate_right32(1, 1) == 0x80000000


def test_swap32_value():
    assert swap32(0x12345678) == 0x78563412


@pytest.mark.parametrize("value", SAMPLES32)
def test_swap32_is_involution(value):
    assert swap32(swap32(value)) == value


def test_swap64_value():
    assert swap64(0x0123456789ABCDEF) == 0xEFCDAB8967452301


@pytest.mark.parametrize("value", SAMPLES64)
def test_swap64_is_involution(value):
    assert swap64(swap64(value)) == value


@pytest.mark.parametrize("value", SAMPLES64)
@pytest.mark.parametrize("bits", [1, 8, 19, 41, 63])
def test_rotate_right64_composes(value, bits):
    once = rotate_right64(value, bits)
    assert rotate_right64(once, 64 - bits) == value
    assert once < 2 ** 64


@pytest.mark.parametrize("bits", [0, 64])
def test_rotate_right64_out_of_range_is_identity(bits):
    assert rotate_right64(0x0123456789ABCDEF, bits) == 0x0123456789ABCDEF