import io
import sys

import pytest

from minissl.cli import CommandKind, command_kind, hex_bytes, main, total_usage
from minissl.md5 import md5
from minissl.sha256 import sha256
from minissl.sha512 import sha512


def _stdin(monkeypatch, data):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


@pytest.mark.parametrize("data", [b"", b"\x00\x0f\xab", bytes(range(256))])
def test_hex_bytes_round_trip(data):
    text = hex_bytes(data)
    assert bytes.fromhex(text) == data
    assert len(text) == 2 * len(data)
    assert text == text.lower()


def test_total_usage_lists_all_families():
    text = total_usage()
    for section in ("Hash options:", "Encode options:", "Cipher options:", "RSA options:"):
        assert section in text
    assert text.endswith("  -crack          crack RSA public key\n")


@pytest.mark.parametrize(
    "name,kind",
    [
        ("md5", CommandKind.HASH),
        ("sha224", CommandKind.HASH),
        ("sha512", CommandKind.HASH),
        ("base64", CommandKind.ENCODE),
        ("des", CommandKind.ENCRYPT),
        ("des-cbc", CommandKind.ENCRYPT),
        ("genrsa", CommandKind.RSA),
        ("rsautl", CommandKind.RSA),
    ],
)
def test_command_kind_known(name, kind):
    assert command_kind(name) is kind


@pytest.mark.parametrize("name", ["md5x", "sha", "", "-h", "DES"])
def test_command_kind_unknown(name):
    assert command_kind(name) is None


def test_main_without_command(capsys):
    assert main([]) == 1
    assert "Hash/Cypher/RSA function required" in capsys.readouterr().err


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == total_usage()


def test_main_wrong_command(capsys):
    assert main(["nothing"]) == 1
    assert "Wrong Hash/Cipher/RSA command" in capsys.readouterr().err


def test_main_unsupported_family(capsys):
    assert main(["base64"]) == 1
    assert "base64" in capsys.readouterr().err


def test_main_hash_string(monkeypatch, capsys):
    _stdin(monkeypatch, b"")
    assert main(["md5", "-s", "abc"]) == 0
    assert capsys.readouterr().out == f'MD5 ("abc") = {md5(b"abc").hex()}\n'


def test_main_hash_quiet(monkeypatch, capsys):
    _stdin(monkeypatch, b"")
    assert main(["sha256", "-q", "-s", "abc"]) == 0
    assert capsys.readouterr().out == sha256(b"abc").hex() + "\n"


def test_main_hash_pipe(monkeypatch, capsys):
    _stdin(monkeypatch, b"hello\n")
    assert main(["md5"]) == 0
    assert capsys.readouterr().out == "(stdin)= " + md5(b"hello\n").hex() + "\n"


def test_main_hash_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"file content")
    _stdin(monkeypatch, b"")
    assert main(["sha512", str(path)]) == 0
    expected = f"SHA512 ({path}) = {sha512(b'file content').hex()}\n"
    assert capsys.readouterr().out == expected


def test_main_missing_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "absent"
    _stdin(monkeypatch, b"")
    assert main(["md5", str(path)]) == 1
    assert str(path) in capsys.readouterr().err


def test_main_too_many_files(monkeypatch, capsys, tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"a")
    second.write_bytes(b"b")
    _stdin(monkeypatch, b"")
    assert main(["md5", str(first), str(second)]) == 1
    assert capsys.readouterr().err.startswith("hash: ")


def test_main_hash_help(monkeypatch, capsys):
    _stdin(monkeypatch, b"")
    assert main(["md5", "-h"]) == 0
    assert "Hash options:" in capsys.readouterr().out