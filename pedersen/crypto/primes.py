"""Safe-prime search used as the external prime source for parameter generation.

Candidates come from the secure RandomSource; small factors are sieved out
before ``sympy.isprime`` (BPSW) confirms both q and p = 2q + 1.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from sympy import isprime, primerange

from pedersen.crypto.primality import is_probable_prime
from pedersen.crypto.randomness import RandomSource, resolve
from pedersen.errors import PrimeGenerationFailure

logger = logging.getLogger(__name__)

_SMALL_PRIMES = tuple(primerange(3, 2000))


class SafePrimeSource(Protocol):
    def __call__(
        self,
        bits: int,
        *,
        rng: RandomSource | None = None,
        cancel: threading.Event | None = None,
    ) -> int: ...


def _has_small_factor(q: int) -> bool:
    # q and 2q+1 must both avoid every small prime
    for sp in _SMALL_PRIMES:
        if sp >= q:
            break
        rem = q % sp
        if rem == 0 or (2 * rem + 1) % sp == 0:
            return True
    return False


def generate_safe_prime(
    bits: int,
    *,
    rng: RandomSource | None = None,
    cancel: threading.Event | None = None,
) -> int:
    """Return a safe prime p = 2q + 1 with exactly ``bits`` bits."""
    if bits < 3:
        raise PrimeGenerationFailure(f"no safe prime has {bits} bits")
    source = resolve(rng)
    qbits = bits - 1
    attempts = 0
    while True:
        if cancel is not None and cancel.is_set():
            logger.debug("safe prime search for %d bits abandoned after %d candidates", bits, attempts)
            raise PrimeGenerationFailure("safe prime search cancelled")
        attempts += 1
        q = source.randbits(qbits) | 1 | (1 << (qbits - 1))
        if _has_small_factor(q):
            continue
        if isprime(q) and isprime(2 * q + 1):
            logger.debug("found %d-bit safe prime after %d candidates", bits, attempts)
            return 2 * q + 1


def is_safe_prime(p: int, rounds: int | None = None, rng: RandomSource | None = None) -> bool:
    if p < 5 or p % 2 == 0:
        return False
    return is_probable_prime(p, rounds, rng) and is_probable_prime((p - 1) // 2, rounds, rng)


__all__ = ["SafePrimeSource", "generate_safe_prime", "is_safe_prime"]
