import threading

import pytest
from sympy import isprime

from pedersen.crypto.primality import is_probable_prime
from pedersen.crypto.primes import generate_safe_prime, is_safe_prime
from pedersen.errors import PrimeGenerationFailure


@pytest.mark.parametrize("bits", [3, 4, 8, 16, 32, 64])
def test_generate_safe_prime_has_requested_size(bits):
    p = generate_safe_prime(bits)
    assert p.bit_length() == bits
    assert isprime(p)
    assert isprime((p - 1) // 2)


def test_generate_safe_prime_is_reproducible_with_injected_source(seeded, seeded_factory):
    assert generate_safe_prime(32, rng=seeded) == generate_safe_prime(32, rng=seeded_factory())


@pytest.mark.parametrize("bits", [-1, 0, 1, 2])
def test_generate_safe_prime_rejects_tiny_sizes(bits):
    with pytest.raises(PrimeGenerationFailure):
        generate_safe_prime(bits)


def test_generate_safe_prime_honours_cancel():
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(PrimeGenerationFailure):
        generate_safe_prime(256, cancel=cancel)


def test_generated_prime_passes_local_oracle():
    p = generate_safe_prime(48)
    assert is_probable_prime(p, rounds=20)
    assert is_safe_prime(p, rounds=20)


@pytest.mark.parametrize("p", [5, 7, 11, 23, 47, 59, 1019])
def test_is_safe_prime_true(p):
    assert is_safe_prime(p)


@pytest.mark.parametrize("p", [2, 3, 13, 17, 101, 999983, 15])
def test_is_safe_prime_false(p):
    assert not is_safe_prime(p)
