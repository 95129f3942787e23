import random

import pytest

from pedersen.params import DEFAULT_PARAMETERS, Parameters


class SeededSource:
    """Deterministic RandomSource for reproducible tests."""

    def __init__(self, seed=1234):
        self._rng = random.Random(seed)
        self.calls = []

    def randbelow(self, n):
        value = self._rng.randrange(n)
        self.calls.append(("randbelow", n, value))
        return value

    def randbits(self, k):
        return self._rng.getrandbits(k)

    def token_bytes(self, n):
        return self._rng.getrandbits(8 * n).to_bytes(n, "big")


class ScriptedSource:
    """RandomSource that replays fixed randbelow outputs."""

    def __init__(self, values, blob=b""):
        self._values = list(values)
        self._blob = blob

    def randbelow(self, n):
        value = self._values.pop(0)
        assert 0 <= value < n
        return value

    def randbits(self, k):
        raise AssertionError("randbits not expected")

    def token_bytes(self, n):
        assert len(self._blob) == n
        return self._blob


@pytest.fixture
def seeded():
    return SeededSource()


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def tiny_params():
    # not a safe prime; only used for the fixed-value commitment scenario
    return Parameters(p=101, g=2, h=5)


@pytest.fixture
def small_safe_params():
    # 1019 = 2 * 509 + 1, and 2 is a non-residue mod 1019
    return Parameters(p=1019, g=2, h=3)


@pytest.fixture
def default_params():
    return DEFAULT_PARAMETERS


@pytest.fixture
def seeded_factory():
    return SeededSource
