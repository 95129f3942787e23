"""Pedersen commitments C = g^m * h^r mod p and their homomorphic algebra.

Commitments are plain ints in [0, p). Every operation returns a new value
and reads nothing but its arguments, so calls are safe from any thread.
Exponents (messages, blinding factors, scalars) are never reduced here;
a caller who reduces blinding factors must do it modulo the group order,
consistently on both sides of any comparison.
"""

from __future__ import annotations

from typing import Tuple

from pedersen.config import SETTINGS
from pedersen.crypto.modmath import mod_exp, mod_inverse
from pedersen.crypto.randomness import RandomSource, resolve
from pedersen.errors import InvalidInput
from pedersen.params import Parameters


def random_blinding(n_bytes: int | None = None, rng: RandomSource | None = None) -> int:
    """Fresh blinding factor built from ``n_bytes`` CSPRNG bytes."""
    if n_bytes is None:
        n_bytes = SETTINGS.blinding_bytes
    if n_bytes < 1:
        raise InvalidInput(f"blinding size must be at least 1 byte, got {n_bytes}")
    return int.from_bytes(resolve(rng).token_bytes(n_bytes), "big")


def commit(m: int, r: int, params: Parameters) -> int:
    if m < 0:
        raise InvalidInput(f"m cannot be less than zero - {m}")
    if r < 0:
        raise InvalidInput(f"r cannot be less than zero - {r}")
    gm = mod_exp(params.g, m, params.p)
    hr = mod_exp(params.h, r, params.p)
    return (gm * hr) % params.p


def commit_random(m: int, params: Parameters, rng: RandomSource | None = None) -> Tuple[int, int]:
    """Commit to m under a fresh blinding factor; returns (commitment, r)."""
    r = random_blinding(rng=rng)
    return commit(m, r, params), r


def verify(c: int, m: int, r: int, params: Parameters) -> bool:
    """Check that (m, r) opens commitment c."""
    return commit(m, r, params) == c % params.p


def add(c1: int, c2: int, params: Parameters) -> int:
    # commit(m1, r1) * commit(m2, r2) == commit(m1 + m2, r1 + r2)
    return (c1 * c2) % params.p


def subtract(c1: int, c2: int, params: Parameters) -> int:
    # raises NotInvertible only when p is not actually prime
    return (c1 * mod_inverse(c2, params.p)) % params.p


def scale(c: int, k: int, params: Parameters) -> int:
    """commit(m, r) ** k == commit(k*m, k*r); a negative k inverts c first."""
    if k < 0:
        return mod_exp(mod_inverse(c, params.p), -k, params.p)
    return mod_exp(c, k, params.p)


__all__ = ["random_blinding", "commit", "commit_random", "verify", "add", "subtract", "scale"]
