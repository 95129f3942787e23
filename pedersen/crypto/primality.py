"""Probabilistic Miller–Rabin primality test."""

from __future__ import annotations


from pedersen.config import SETTINGS
from pedersen.crypto.modmath import mod_exp
from pedersen.crypto.randomness import RandomSource, random_in_range, resolve
from pedersen.errors import InvalidInput


def is_probable_prime(n: int, rounds: int | None = None, rng: RandomSource | None = None) -> bool:
    """Miller–Rabin with ``rounds`` random witnesses.

    A composite survives with probability at most 4^-rounds. Witnesses are
    drawn from ``rng`` (the CSPRNG-backed default when omitted).
    """
    if rounds is None:
        rounds = SETTINGS.miller_rabin_rounds
    if rounds < 1:
        raise InvalidInput(f"rounds must be at least 1, got {rounds}")
    if n == 2 or n == 3:
        return True
    if n < 2 or n % 2 == 0:
        return False

    # write n-1 as d * 2^r
    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1

    source = resolve(rng)
    for _ in range(rounds):
        a = random_in_range(2, n - 2, source)
        x = mod_exp(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = mod_exp(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


__all__ = ["is_probable_prime"]
