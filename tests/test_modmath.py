import pytest

from pedersen.crypto.modmath import gcd, mod_exp, mod_inverse
from pedersen.errors import InvalidInput, NotInvertible, PedersenError


@pytest.mark.parametrize(
    "base,exponent,modulus,expected",
    [
        (2, 10, 101, 14),
        (5, 7, 101, 52),
        (3, 200, 1019, pow(3, 200, 1019)),
        (-4, 3, 7, pow(-4, 3, 7)),
        (123456789, 987654321, 2**61 - 1, pow(123456789, 987654321, 2**61 - 1)),
        (7, 1, 13, 7),
    ],
)
def test_mod_exp_values(base, exponent, modulus, expected):
    assert mod_exp(base, exponent, modulus) == expected


@pytest.mark.parametrize("base", [0, 1, 17, 101, -3])
def test_mod_exp_zero_exponent_is_one(base):
    assert mod_exp(base, 0, 101) == 1


def test_mod_exp_modulus_one():
    assert mod_exp(5, 0, 1) == 0
    assert mod_exp(5, 3, 1) == 0


def test_mod_exp_reduces_base_first():
    assert mod_exp(101 + 2, 10, 101) == mod_exp(2, 10, 101)


@pytest.mark.parametrize("args", [(2, -1, 7), (2, 3, 0), (2, 3, -5)])
def test_mod_exp_rejects_bad_arguments(args):
    with pytest.raises(InvalidInput):
        mod_exp(*args)


@pytest.mark.parametrize("a,p,expected", [(3, 11, 4), (7, 13, 2), (5, 17, 7), (1, 19, 1), (-3, 11, 7), (14, 11, 4)])
def test_mod_inverse_known_values(a, p, expected):
    assert mod_inverse(a, p) == expected


@pytest.mark.parametrize("p", [2, 3, 101, 1019, 999983])
def test_mod_inverse_of_one(p):
    assert mod_inverse(1, p) == 1


def test_mod_inverse_all_units_mod_prime():
    p = 101
    for a in range(1, p):
        inv = mod_inverse(a, p)
        assert 0 <= inv < p
        assert (a * inv) % p == 1


@pytest.mark.parametrize("a,p", [(2, 4), (0, 7), (6, 9), (15, 25), (7, 7)])
def test_mod_inverse_not_invertible(a, p):
    with pytest.raises(NotInvertible) as excinfo:
        mod_inverse(a, p)
    assert excinfo.value.a == a
    assert excinfo.value.modulus == p
    assert isinstance(excinfo.value, PedersenError)
    assert isinstance(excinfo.value, ValueError)


def test_mod_inverse_rejects_non_positive_modulus():
    with pytest.raises(InvalidInput):
        mod_inverse(3, 0)


def test_gcd():
    assert gcd(12, 18) == 6
    assert gcd(-12, 18) == 6
    assert gcd(0, 9) == 9
    assert gcd(17, 5) == 1
