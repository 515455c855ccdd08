"""Command-line handling and output formatting for the digest commands."""

import errno
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from minissl.md5 import md5
from minissl.numbers import read_interactive
from minissl.sha256 import sha224, sha256
from minissl.sha512 import sha384, sha512

PROGRAM = "minissl"

ALGORITHMS = {
    "md5": md5,
    "sha224": sha224,
    "sha256": sha256,
    "sha384": sha384,
    "sha512": sha512,
}

_FLAGS = "hpqrs"


class Origin(Enum):
    """Where a message to digest came from, in processing order."""

    PIPE = 0
    STRING = 1
    FILE = 2


class HashUsageError(ValueError):
    """Raised when a digest command line is malformed."""


@dataclass
class HashRequest:
    """Everything a digest command needs: algorithm, flags and inputs.

    ``notices`` are lines meant for standard output, ``warnings`` lines meant
    for standard error; both are produced while parsing.
    """

    algorithm: str = ""
    echo_stdin: bool = False
    quiet: bool = False
    reverse: bool = False
    input_str: str | None = None
    pipe: bytes | None = None
    file_data: bytes | None = None
    file_name: str | None = None
    show_help: bool = False
    notices: list = field(default_factory=list)
    warnings: list = field(default_factory=list)


def hash_usage():
    """Return the help text of the digest commands."""
    return (
        "Usage\n"
        f"  {PROGRAM} <command> [flags] [file]\n\n"
        "Hash options:\n"
        "  command     md5, sha224, sha256, sha384 or sha512\n"
        "  -h          print help and exit\n"
        "  -p          echo STDIN to STDOUT and append the checksum to STDOUT\n"
        "  -q          quiet mode\n"
        "  -r          reverse the format of the output\n"
        "  -s <string> print the sum of the given string\n"
    )


def _scan(args):
    """Yield (option, value) pairs in command-line order, permuting operands.

    Operands come out as (None, arg); bad options as ("?", message).
    """
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "--":
            for operand in args[index + 1:]:
                yield None, operand
            return
        if not arg.startswith("-") or arg == "-":
            yield None, arg
            index += 1
            continue
        for pos, char in enumerate(arg[1:], start=1):
            if char not in _FLAGS:
                yield "?", f"{PROGRAM}: invalid option -- '{char}'"
                continue
            if char != "s":
                yield char, None
                continue
            rest = arg[pos + 1:]
            if rest:
                yield "s", rest
            elif index + 1 < len(args):
                index += 1
                yield "s", args[index]
            else:
                yield "?", f"{PROGRAM}: option requires an argument -- 's'"
            break
        index += 1


def _isatty(stream):
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _read_all(stream):
    data = stream.read()
    return data.encode() if isinstance(data, str) else bytes(data)


def parse_hash_arguments(argv, stdin):
    """Build a HashRequest from ``argv`` (the words after the program name).

    Standard input is read whole unless it is a terminal; with no other input
    it is read line by line. Raises HashUsageError for an unknown algorithm
    and OSError when the file cannot be read or more than one file is given.
    """
    request = HashRequest()
    operands = []
    for option, value in _scan(list(argv)):
        if option is None:
            operands.append(value)
        elif option == "?":
            request.warnings.append(value)
        elif option == "h":
            request.show_help = True
            return request
        elif option == "p":
            request.echo_stdin = True
        elif option == "q":
            request.quiet = True
        elif option == "r":
            request.reverse = True
        elif request.input_str is None:
            request.input_str = value
        else:
            request.notices.append(f"{PROGRAM}: -s: No such file or directory")
            request.notices.append(f"{PROGRAM}: {value}: No such file or directory")

    if not operands or operands[0] not in ALGORITHMS:
        raise HashUsageError("Incorrect hash function")
    request.algorithm = operands[0]

    source = getattr(stdin, "buffer", stdin)
    if not _isatty(stdin):
        request.pipe = _read_all(source) or None
    if len(operands) < 2 and request.input_str is None and request.pipe is None:
        request.pipe = read_interactive(source)
    if len(operands) >= 2:
        request.file_name = operands[1]
        request.file_data = Path(operands[1]).read_bytes()
    if len(operands) > 2:
        raise OSError(errno.E2BIG, os.strerror(errno.E2BIG), "hash")
    return request


def _as_bytes(value):
    if value is None:
        return b""
    return os.fsencode(value) if isinstance(value, str) else bytes(value)


def _echoed(message):
    """The piped message as echoed: one trailing newline is dropped."""
    message = _as_bytes(message)
    return message[:-1] if message.endswith(b"\n") else message


def render_digest(algorithm, digest, origin, message, request):
    """Return the output line(s) for one digest, or b"" when it is not shown."""
    label = algorithm.upper().encode()
    hex_digest = digest.hex().encode()
    is_pipe = origin is Origin.PIPE
    if is_pipe and not request.echo_stdin and request.file_data is not None:
        return b""
    if request.quiet:
        echo = _echoed(message) + b"\n" if request.echo_stdin and is_pipe else b""
        return echo + hex_digest + b"\n"

    text = _as_bytes(message)
    file_name = _as_bytes(request.file_name)
    prefix = b""
    suffix = b""
    if is_pipe:
        prefix = b'("' + _echoed(message) + b'")= ' if request.echo_stdin else b"(stdin)= "
    elif origin is Origin.STRING:
        if request.reverse:
            suffix = b' "' + text + b'"'
        else:
            prefix = label + b' ("' + text + b'") = '
    elif request.reverse:
        suffix = b" " + file_name
    else:
        prefix = label + b" (" + file_name + b") = "
    return prefix + hex_digest + suffix + b"\n"


def run_hash(request, out):
    """Write the notices and digests of ``request`` to ``out``.

    Warnings are left for the caller to report on standard error.
    """
    sink = getattr(out, "buffer", out)
    for notice in request.notices:
        sink.write(notice.encode() + b"\n")
    if request.show_help:
        sink.write(hash_usage().encode())
        return
    function = ALGORITHMS.get(request.algorithm)
    if function is None:
        raise HashUsageError("Incorrect hash function")
    inputs = (
        (Origin.PIPE, request.pipe),
        (Origin.STRING, request.input_str),
        (Origin.FILE, request.file_data),
    )
    for origin, message in inputs:
        if message is None:
            continue
        digest = function(_as_bytes(message))
        sink.write(render_digest(request.algorithm, digest, origin, message, request))