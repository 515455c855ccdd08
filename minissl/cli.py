"""Command-line entry point: picks the command family and runs it."""

import sys
from enum import Enum

from minissl.hashing import (
    ALGORITHMS,
    PROGRAM,
    HashUsageError,
    parse_hash_arguments,
    run_hash,
)


class CommandKind(Enum):
    """Family a command name belongs to."""

    HASH = 1
    ENCODE = 2
    ENCRYPT = 3
    RSA = 4


_COMMANDS = {
    **{name: CommandKind.HASH for name in ALGORITHMS},
    "base64": CommandKind.ENCODE,
    **{
        name: CommandKind.ENCRYPT
        for name in ("des", "des-ecb", "des-cfb", "des-ofb", "des-cbc")
    },
    **{name: CommandKind.RSA for name in ("genrsa", "rsa", "rsautl")},
}

_HELP = ("-h", "print help and exit")

# Each section: title, flag column width, list of (flag, description) rows.
_USAGE_SECTIONS = (
    (
        "Hash",
        12,
        [
            ("command", "md5, sha224, sha256, sha384 or sha512"),
            _HELP,
            ("-p", "echo STDIN to STDOUT and append the checksum to STDOUT"),
            ("-q", "quiet mode"),
            ("-r", "reverse the format of the output"),
            ("-s <string>", "print the sum of the given string"),
        ],
    ),
    (
        "Encode",
        12,
        [
            ("command", "base64"),
            _HELP,
            ("-d", "decode mode"),
            ("-e", "encode mode (default)"),
            ("-i <file>", "input file"),
            ("-o <file>", "output file"),
        ],
    ),
    (
        "Cipher",
        12,
        [
            ("command", "des, des-ecb, des-cbc, des-cfb, des-ofb"),
            _HELP,
            ("-a", "decode/encode the input/output in base64"),
            ("-d", "decrypt mode"),
            ("-e", "encrypt mode (default)"),
            ("-i <file>", "input file"),
            ("-k <key>", "key in hexadecimal"),
            ("-o <file>", "output file"),
            ("-p", "password in ASCII"),
            ("-s <salt>", "salt in hexadecimal"),
            ("-v", "initialization vector in hexadecimal"),
        ],
    ),
    (
        "RSA",
        16,
        [
            ("command", "genrsa, rsa, rsautl"),
            _HELP,
            ("-inform PEM", "input format is PEM (default)"),
            ("-outform PEM", "output format is PEM (default)"),
            ("-in <file>", "input file"),
            ("-passin arg", "input file password source"),
            ("-out <file>", "output file"),
            ("-passout arg", "output file password source"),
            ("-des", "encrypt the output with DES in CBC mode"),
            ("-text", "print the key in plain text"),
            ("-noout", "do not output encoded version of key"),
            ("-modulus", "print value of key modulus"),
            ("-check", "verify key consistency"),
            ("-pubin", "read public key from input file"),
            ("-pubout", "print public key"),
            ("-inkey <file>", "input key (RSA private key by default)"),
            ("-encrypt", "encrypt input data with public key"),
            ("-decrypt", "decrypt input data with private key"),
            ("-hexdump", "print the key in hexadecimal"),
            ("-verbose", "print details during key generation"),
            ("-test <n> <p>", "test if n is prime at p probability"),
            ("-crack", "crack RSA public key"),
        ],
    ),
)


class UsageError(Exception):
    """Raised when the command line cannot be used."""


def hex_bytes(data):
    """Return ``data`` as lowercase hexadecimal text."""
    return bytes(data).hex()


def _format_section(title, width, rows):
    lines = [f"{title} options:"]
    lines.extend(f"  {flag:<{width}}{text}" for flag, text in rows)
    return "\n".join(lines) + "\n"


def total_usage():
    """Return the help text covering every command family."""
    header = f"Usage\n  {PROGRAM} <command> [flags] [file]\n\n"
    sections = (_format_section(*section) for section in _USAGE_SECTIONS)
    return header + "\n".join(sections)


def command_kind(name):
    """Return the CommandKind of ``name``, or None when it is not a known command."""
    return _COMMANDS.get(name)


def _report_usage(message):
    print(
        f"{PROGRAM}: usage error: {message}\n"
        f"Try '{PROGRAM} -h' for more information.",
        file=sys.stderr,
    )
    return 1


def _run_hash_command(argv):
    try:
        request = parse_hash_arguments(argv, sys.stdin)
    except HashUsageError as error:
        raise UsageError(str(error)) from error
    for warning in request.warnings:
        print(warning, file=sys.stderr)
    sys.stdout.flush()
    run_hash(request, sys.stdout)
    sys.stdout.flush()


def main(argv=None):
    """Run one command; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if not args:
            raise UsageError("Hash/Cypher/RSA function required")
        if args[0] == "-h":
            sys.stdout.write(total_usage())
            sys.stdout.flush()
            return 0
        kind = command_kind(args[0])
        if kind is None:
            raise UsageError("Wrong Hash/Cipher/RSA command")
        if kind is not CommandKind.HASH:
            raise UsageError(f"{args[0]}: command not supported")
        _run_hash_command(args)
    except UsageError as error:
        return _report_usage(str(error))
    except OSError as error:
        name = error.filename if error.filename is not None else PROGRAM
        print(f"{name}: {error.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())