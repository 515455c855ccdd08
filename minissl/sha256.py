"""SHA-256 and SHA-224 message digests."""

import struct

from minissl.bitwise import MASK32, MASK64, rotate_right32

BLOCK_SIZE = 64

_SHA256_INITS = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_SHA224_INITS = (
    0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
    0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4,
)

_ROOTS_ADD = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1,
    0x923F82A4, 0xAB1C5ED5, 0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174, 0xE49B69C1, 0xEFBE4786,
    0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147,
    0x06CA6351, 0x14292967, 0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85, 0xA2BFE8A1, 0xA81A664B,
    0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A,
    0x5B9CCA4F, 0x682E6FF3, 0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _pad(data):
    """Pad to a multiple of 64 bytes with 0x80, zeros and the big-endian bit length."""
    padded_len = ((len(data) + 8) // BLOCK_SIZE + 1) * BLOCK_SIZE
    zeros = padded_len - len(data) - 1 - 8
    return data + b"\x80" + b"\x00" * zeros + struct.pack(">Q", (len(data) * 8) & MASK64)


def _schedule(message, offset):
    """Expand one 64-byte block into the 64-word message schedule."""
    w = list(struct.unpack_from(">16I", message, offset))
    for i in range(16, 64):
        s0 = rotate_right32(w[i - 15], 7) ^ rotate_right32(w[i - 15], 18) ^ (w[i - 15] >> 3)
        s1 = rotate_right32(w[i - 2], 17) ^ rotate_right32(w[i - 2], 19) ^ (w[i - 2] >> 10)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & MASK32)
    return w


def _compress(digest, schedule):
    a, b, c, d, e, f, g, h = digest
    for k, w in zip(_ROOTS_ADD, schedule):
        s1 = rotate_right32(e, 6) ^ rotate_right32(e, 11) ^ rotate_right32(e, 25)
        ch = (e & f) ^ (~e & g)
        tmp1 = (h + s1 + ch + k + w) & MASK32
        s0 = rotate_right32(a, 2) ^ rotate_right32(a, 13) ^ rotate_right32(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        tmp2 = (s0 + maj) & MASK32
        h, g, f, e, d, c, b, a = g, f, e, (d + tmp1) & MASK32, c, b, a, (tmp1 + tmp2) & MASK32
    return [(x + y) & MASK32 for x, y in zip(digest, (a, b, c, d, e, f, g, h))]


def _digest_words(data, inits):
    message = _pad(bytes(data))
    digest = list(inits)
    for offset in range(0, len(message), BLOCK_SIZE):
        digest = _compress(digest, _schedule(message, offset))
    return digest


def sha256(data):
    """Return the 32-byte SHA-256 digest of ``data``."""
    return struct.pack(">8I", *_digest_words(data, _SHA256_INITS))


def sha224(data):
    """Return the 28-byte SHA-224 digest of ``data``."""
    return struct.pack(">7I", *_digest_words(data, _SHA224_INITS)[:7])