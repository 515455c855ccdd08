import io

import pytest

from minissl.numbers import UINT64_MAX, only_digits, parse_uint64, read_interactive


def test_read_interactive_joins_lines():
    assert read_interactive(io.BytesIO(b"first\nsecond\n")) == b"first\nsecond\n"


def test_read_interactive_text_stream():
    assert read_interactive(io.StringIO("abc\ndef")) == b"abc\ndef"


def test_read_interactive_empty_stream():
    assert read_interactive(io.BytesIO(b"")) == b""


def test_read_interactive_cuts_each_line_at_nul():
    assert read_interactive(io.BytesIO(b"ab\x00cd\nef\n")) == b"abef\n"


@pytest.mark.parametrize("text", ["", "0", "123", "18446744073709551615"])
def test_only_digits_true(text):
    assert only_digits(text) is True


@pytest.mark.parametrize("text", ["12a", "-1", " 1", "1.5", "\u0663"])
def test_only_digits_false(text):
    assert only_digits(text) is False


@pytest.mark.parametrize("text", ["0", "1", "65537", "4294967296"])
def test_parse_uint64_round_trip(text):
    assert parse_uint64(text) == int(text)
    assert str(parse_uint64(text)) == text


def test_parse_uint64_max():
    assert parse_uint64("18446744073709551615") == UINT64_MAX == 2 ** 64 - 1


def test_parse_uint64_leading_space_and_plus():
    assert parse_uint64("  +42") == 42


def test_parse_uint64_negative_wraps():
    assert parse_uint64("-1") == UINT64_MAX


@pytest.mark.parametrize(
    "text", ["", "   ", "-", "12a", "1 ", "abc", "18446744073709551616"]
)
def test_parse_uint64_rejects(text):
    with pytest.raises(ValueError):
        parse_uint64(text)