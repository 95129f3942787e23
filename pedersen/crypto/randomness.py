"""Injectable source of security-grade randomness.

Every random draw in the package (Miller–Rabin witnesses, generator
sampling, blinding factors, prime candidates) goes through a RandomSource,
so a weaker generator can only appear if a caller passes one in explicitly.
"""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from pedersen.errors import InvalidInput


@runtime_checkable
class RandomSource(Protocol):
    def randbelow(self, n: int) -> int: ...

    def randbits(self, k: int) -> int: ...

    def token_bytes(self, n: int) -> bytes: ...


class SystemRandomSource:
    """RandomSource backed by the OS CSPRNG through ``secrets``."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)

    def randbits(self, k: int) -> int:
        return secrets.randbits(k)

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)

    def __repr__(self) -> str:
        return "SystemRandomSource()"


_DEFAULT = SystemRandomSource()


def default_source() -> RandomSource:
    return _DEFAULT


def resolve(rng: RandomSource | None) -> RandomSource:
    return _DEFAULT if rng is None else rng


def random_in_range(low: int, high: int, rng: RandomSource | None = None) -> int:
    """Uniform integer in the closed interval [low, high]."""
    if high < low:
        raise InvalidInput(f"empty range [{low}, {high}]")
    return low + resolve(rng).randbelow(high - low + 1)


__all__ = ["RandomSource", "SystemRandomSource", "default_source", "resolve", "random_in_range"]
