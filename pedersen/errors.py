"""Exception types raised by the commitment package."""

from __future__ import annotations


class PedersenError(ValueError):
    """Base class for every error raised by this package."""


class InvalidInput(PedersenError):
    """An argument violates an operation's precondition (e.g. a negative message)."""


class NotInvertible(PedersenError):
    """A modular inverse was requested for a value that shares a factor with the modulus."""

    def __init__(self, a: int, modulus: int) -> None:
        super().__init__(f"{a} is not invertible modulo {modulus}")
        self.a = a
        self.modulus = modulus


class PrimeGenerationFailure(PedersenError):
    """The safe-prime source could not produce a prime of the requested size."""


__all__ = ["PedersenError", "InvalidInput", "NotInvertible", "PrimeGenerationFailure"]
