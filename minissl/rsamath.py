"""Modular arithmetic used for RSA key generation and checking."""


def modular_multiplication(a, b, mod):
    """Return ``a * b mod mod``."""
    return (a % mod) * b % mod


def modular_exponentiation(base, exp, mod):
    """Return ``base ** exp mod mod``; a modulus of 1 yields 0."""
    if mod == 1:
        return 0
    result = 1
    base %= mod
    while exp > 0:
        if exp & 1:
            result = modular_multiplication(result, base, mod)
        exp >>= 1
        base = modular_multiplication(base, base, mod)
    return result


def modular_inverse(e, phi):
    """Return the inverse of ``e`` modulo ``phi`` by the extended Euclidean algorithm.

    A modulus of 1 yields 0. Raises ValueError when no inverse exists.
    """
    if phi == 1:
        return 0
    modulus = phi
    x0, x1 = 0, 1
    while e > 1:
        if phi == 0:
            raise ValueError("no modular inverse: values are not coprime")
        q = e // phi
        e, phi = phi, e % phi
        x0, x1 = x1 - q * x0, x0
    if x1 < 0:
        x1 += modulus
    return x1


def gcd(a, b):
    """Return the greatest common divisor of ``a`` and ``b``."""
    while b:
        a, b = b, a % b
    return a