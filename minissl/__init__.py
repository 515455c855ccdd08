"""MD5 and SHA-2 message digests with a command-line front end, plus small RSA helpers."""

__version__ = "1.0.0"