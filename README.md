# minissl

A small command-line tool and library that computes message digests with
hand-written implementations of MD5, SHA-224, SHA-256, SHA-384 and SHA-512.
It also carries modular arithmetic and ASN.1 DER layout helpers for tiny
64-bit RSA keys.

Nothing outside the Python standard library is needed.

## Installing

```
pip install .
```

## Command line

```
minissl <command> [flags] [file]
```

`<command>` is one of `md5`, `sha224`, `sha256`, `sha384` or `sha512`.

| Flag          | Meaning                                                     |
|---------------|-------------------------------------------------------------|
| `-h`          | print help and exit                                         |
| `-p`          | echo standard input to standard output, then its checksum   |
| `-q`          | quiet mode: print only the digest                           |
| `-r`          | reverse the output format (digest first, then the source)   |
| `-s <string>` | print the sum of the given string                           |

Messages are taken from three places, and each one present is hashed and
printed in this order:

1. standard input, when it is not a terminal (piped or redirected);
2. the string given with `-s`;
3. the file named after the command.

When no string, file or piped input is given, standard input is read line by
line until end of input. When a file is given, the digest of piped input is
printed only if `-p` is also set. A second `-s` is not used; it prints
`minissl: -s: No such file or directory` and a matching line for its
argument instead.

```
$ minissl md5 -s abc
MD5 ("abc") = 900150983cd24fb0d6963f7d28e17f72

$ minissl md5 -r -s abc
900150983cd24fb0d6963f7d28e17f72 "abc"

$ echo hello | minissl sha256 -q
5891b5b522d5df086d0ff0b110fbd9d21bb4fc7163af34d08286a2e846f6be03
```

`minissl -h` prints the help for every command family. Usage errors (no
command, an unknown command, an unknown algorithm) are reported on standard
error with a hint to try `minissl -h`, and the command exits with status 1.
A file that cannot be read, or more than one file name, is reported as
`<name>: <reason>` on standard error, also with status 1.

## What it does not do

The help text also lists encoding (`base64`), DES cipher (`des`, `des-ecb`,
`des-cbc`, `des-cfb`, `des-ofb`) and RSA (`genrsa`, `rsa`, `rsautl`)
commands. These names are recognised, but running them only reports
`command not supported` and exits with status 1: there is no Base64 coding,
no DES encryption, and no RSA key generation, inspection or encryption from
the command line. The RSA helpers below are available as library functions
only.

## Library

Each digest function takes the message as bytes and returns the raw digest:

```python
from minissl.md5 import md5
from minissl.sha256 import sha224, sha256
from minissl.sha512 import sha384, sha512

digest = sha256(b"abc")
```

`minissl.cli.hex_bytes` turns a digest into the lowercase hex used on the
command line.

Other modules:

- `minissl.bitwise` – 32- and 64-bit rotations and byte swaps
  (`rotate_right32`, `rotate_left32`, `rotate_right64`, `swap32`, `swap64`).
- `minissl.rsamath` – `modular_multiplication`, `modular_exponentiation`,
  `modular_inverse` (raises `ValueError` when no inverse exists) and `gcd`.
- `minissl.rsaformat` – the `RsaKey` dataclass and `format_public_key` /
  `format_private_key`, which return the DER bytes of a 64-bit RSA public
  key (38 bytes) and private key.
- `minissl.numbers` – `only_digits`, `parse_uint64` (raises `ValueError` on
  bad or out-of-range input) and `read_interactive`.
- `minissl.hashing` – `parse_hash_arguments` builds a `HashRequest`
  (raising `HashUsageError` for an unknown algorithm), `render_digest`
  formats one output line and `run_hash` writes all of them; `hash_usage`
  returns the help text of the digest commands.
- `minissl.cli` – `main`, `command_kind`, `total_usage` and `hex_bytes`.

## Running the tests

```
pip install .[test]
pytest
```