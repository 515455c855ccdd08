"""MD5 message digest."""

import struct

from minissl.bitwise import MASK32, MASK64, rotate_left32

BLOCK_SIZE = 64

_INITS = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_SINE_ADD = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE, 0xF57C0FAF, 0x4787C62A,
    0xA8304613, 0xFD469501, 0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821, 0xF61E2562, 0xC040B340,
    0x265E5A51, 0xE9B6C7AA, 0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED, 0xA9E3E905, 0xFCEFA3F8,
    0x676F02D9, 0x8D2A4C8A, 0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70, 0x289B7EC6, 0xEAA127FA,
    0xD4EF3085, 0x04881D05, 0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039, 0x655B59C3, 0x8F0CCC92,
    0xFFEFF47D, 0x85845DD1, 0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_ROTATIONS = (
    7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21,
)

_INDEX = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    1, 6, 11, 0, 5, 10, 15, 4, 9, 14, 3, 8, 13, 2, 7, 12,
    5, 8, 11, 14, 1, 4, 7, 10, 13, 0, 3, 6, 9, 12, 15, 2,
    0, 7, 14, 5, 12, 3, 10, 1, 8, 15, 6, 13, 4, 11, 2, 9,
)


def _pad(data):
    """Pad to a multiple of 64 bytes with 0x80, zeros and the little-endian bit length."""
    padded_len = ((len(data) + 8) // BLOCK_SIZE + 1) * BLOCK_SIZE
    zeros = padded_len - len(data) - 1 - 8
    return data + b"\x80" + b"\x00" * zeros + struct.pack("<Q", (len(data) * 8) & MASK64)


def _mix(i, b, c, d):
    if i < 16:
        return (b & c) | (~b & d)
    if i < 32:
        return (b & d) | (c & ~d)
    if i < 48:
        return b ^ c ^ d
    return c ^ (b | ~d)


def md5(data):
    """Return the 16-byte MD5 digest of ``data``."""
    message = _pad(bytes(data))
    digest = list(_INITS)
    for offset in range(0, len(message), BLOCK_SIZE):
        words = struct.unpack_from("<16I", message, offset)
        a, b, c, d = digest
        for i, (sine, shift, index) in enumerate(zip(_SINE_ADD, _ROTATIONS, _INDEX)):
            f = (_mix(i, b, c, d) + a + sine + words[index]) & MASK32
            a, d, c, b = d, c, b, (rotate_left32(f, shift) + b) & MASK32
        digest = [(x + y) & MASK32 for x, y in zip(digest, (a, b, c, d))]
    return struct.pack("<4I", *digest)