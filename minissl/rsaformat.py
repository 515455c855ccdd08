"""ASN.1 DER layout of 64-bit RSA public and private keys."""

from dataclasses import dataclass

from minissl.bitwise import MASK32, MASK64

INTEGER_TAG = 0x02
PUBLIC_KEY_LENGTH = 38
PRIVATE_KEY_MAX_LENGTH = 89

# SEQUENCE { SEQUENCE { rsaEncryption OID, NULL }, BIT STRING { SEQUENCE { n, e } } }
_PUBLIC_TEMPLATE = bytes((
    0x30, 0x24, 0x30, 0x0D, 0x06, 0x09, 0x2A, 0x86, 0x48, 0x86, 0xF7, 0x0D,
    0x01, 0x01, 0x01, 0x05, 0x00, 0x03, 0x13, 0x00, 0x30, 0x10, 0x02, 0x09,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x02, 0x03, 0x01,
    0x00, 0x01,
))
_PUBLIC_MODULUS_OFFSET = 25

# PKCS#8 wrapper up to and including the public exponent; the lengths at
# offsets 1, 21 and 23 are filled in once the whole key is laid out.
_PRIVATE_HEADER = bytes((
    0x30, 0x00, 0x02, 0x01, 0x00, 0x30, 0x0D, 0x06, 0x09, 0x2A, 0x86, 0x48,
    0x86, 0xF7, 0x0D, 0x01, 0x01, 0x01, 0x05, 0x00, 0x04, 0x00, 0x30, 0x00,
    0x02, 0x01, 0x00, 0x02, 0x09, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x02, 0x03, 0x01, 0x00, 0x01,
))
_PRIVATE_MODULUS_OFFSET = 30


@dataclass
class RsaKey:
    """Components of a 64-bit RSA key."""

    p: int = 0
    q: int = 0
    n: int = 0
    phi: int = 0
    e: int = 65537
    d: int = 0
    dmp1: int = 0
    dmq1: int = 0
    iqmp: int = 0


def _integer(value, width):
    """Encode ``value`` as a DER INTEGER of ``width`` bytes, adding a zero byte when the top bit is set."""
    raw = value.to_bytes(width, "big")
    if raw[0] & 0x80:
        raw = b"\x00" + raw
    return bytes((INTEGER_TAG, len(raw))) + raw


def _prime(value):
    """Encode a prime factor, always with a leading zero byte."""
    return bytes((INTEGER_TAG, 5, 0x00)) + (value & MASK32).to_bytes(4, "big")


def format_public_key(key):
    """Return the 38-byte DER public key holding ``key.n`` and the exponent 65537."""
    body = bytearray(_PUBLIC_TEMPLATE)
    start = _PUBLIC_MODULUS_OFFSET
    body[start:start + 8] = (key.n & MASK64).to_bytes(8, "big")
    return bytes(body)


def format_private_key(key):
    """Return the DER private key (PKCS#8 wrapping PKCS#1) for ``key``."""
    body = bytearray(_PRIVATE_HEADER)
    start = _PRIVATE_MODULUS_OFFSET
    body[start:start + 8] = (key.n & MASK64).to_bytes(8, "big")
    body += _integer(key.d & MASK64, 8)
    body += _prime(key.p)
    body += _prime(key.q)
    body += _integer(key.dmp1 & MASK32, 4)
    body += _integer(key.dmq1 & MASK32, 4)
    body += _integer(key.iqmp & MASK32, 4)
    total = len(body)
    body[1] = (total - 2) & 0xFF
    body[21] = (total - 22) & 0xFF
    body[23] = (total - 24) & 0xFF
    return bytes(body)