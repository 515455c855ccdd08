"""Fixed-width bit rotations and byte-order swaps."""

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def rotate_right32(value, bits):
    """Rotate a 32-bit value right by ``bits``; counts outside 1..31 leave it unchanged."""
    value &= MASK32
    if 0 < bits < 32:
        value = ((value >> bits) | (value << (32 - bits))) & MASK32
    return value


def rotate_left32(value, bits):
    """Rotate a 32-bit value left by ``bits``; counts outside 1..31 leave it unchanged."""
    value &= MASK32
    if 0 < bits < 32:
        value = ((value << bits) | (value >> (32 - bits))) & MASK32
    return value


def swap32(value):
    """Reverse the byte order of a 32-bit value."""
    return int.from_bytes((value & MASK32).to_bytes(4, "big"), "little")


def swap64(value):
    """Reverse the byte order of a 64-bit value."""
    return int.from_bytes((value & MASK64).to_bytes(8, "big"), "little")


def rotate_right64(value, bits):
    """Rotate a 64-bit value right by ``bits``; counts outside 1..63 leave it unchanged."""
    value &= MASK64
    if 0 < bits < 64:
        value = ((value >> bits) | (value << (64 - bits))) & MASK64
    return value