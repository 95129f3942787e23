"""Modular arithmetic over arbitrary-precision integers."""

from __future__ import annotations

from pedersen.errors import InvalidInput, NotInvertible


def gcd(a: int, b: int) -> int:
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """Compute base^exponent mod modulus by square-and-multiply.

    ``base`` is reduced first, so negative bases are fine. The result for a
    zero exponent is ``1 % modulus``.
    """
    if modulus <= 0:
        raise InvalidInput(f"modulus must be positive, got {modulus}")
    if exponent < 0:
        raise InvalidInput(f"exponent must be non-negative, got {exponent}")
    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def mod_inverse(a: int, p: int) -> int:
    """Modular inverse using extended Euclid; result lies in [0, p)."""
    if p <= 0:
        raise InvalidInput(f"modulus must be positive, got {p}")
    t, new_t = 0, 1
    r, new_r = p, a % p
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r > 1:
        raise NotInvertible(a, p)
    return t % p


__all__ = ["gcd", "mod_exp", "mod_inverse"]
