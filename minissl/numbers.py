"""Reading interactive input and parsing unsigned decimal numbers."""

UINT64_MAX = 0xFFFFFFFFFFFFFFFF

_DIGITS = frozenset("0123456789")
_SPACES = " \t\n\v\f\r"


def read_interactive(stream):
    """Read lines from ``stream`` until end of input and return them joined as bytes.

    Each line is cut at its first NUL byte, as a C string would be.
    """
    chunks = []
    for line in stream:
        if isinstance(line, str):
            line = line.encode()
        chunks.append(bytes(line).split(b"\x00", 1)[0])
    return b"".join(chunks)


def only_digits(text):
    """Return True when every character of ``text`` is an ASCII digit."""
    return all(char in _DIGITS for char in text)


def parse_uint64(text):
    """Parse ``text`` as a base-10 unsigned 64-bit integer.

    Leading whitespace and a sign are accepted; a negative value wraps around
    modulo 2**64. Raises ValueError on empty input, trailing characters or
    values out of range.
    """
    body = text.lstrip(_SPACES)
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]
    if not body or not only_digits(body):
        raise ValueError(f"not an unsigned 64-bit integer: {text!r}")
    magnitude = int(body)
    if magnitude > UINT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return (-magnitude) % (UINT64_MAX + 1) if negative else magnitude