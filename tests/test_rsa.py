import random

import pytest

from cryptolab.protocols import mod_pow
from cryptolab.rsa import RSA, RSAError, lehman_peralta, mod_inverse


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        return self.value


@pytest.mark.parametrize("value,modulus", [(1619, 2520), (5, 2346 * 346), (3, 7), (10, 17)])
def test_mod_inverse_property(value, modulus):
    inv = mod_inverse(value, modulus)
    assert 0 <= inv < modulus
    assert (inv * value) % modulus == 1


def test_mod_inverse_not_coprime():
    with pytest.raises(ValueError):
        mod_inverse(4, 2520)


def test_lehman_small_composite():
    assert lehman_peralta(15, random.Random(1)) is False


def test_lehman_square_of_prime_is_composite():
    assert lehman_peralta(529, random.Random(3)) is False


def test_lehman_prime_with_fixed_witness():
    assert lehman_peralta(7, _FixedRng(3)) is True


def test_lehman_all_ones_is_composite():
    assert lehman_peralta(7, _FixedRng(2)) is False


def test_check_rejects_bad_d():
    with pytest.raises(RSAError):
        RSA(421, 7, 4, rng=_FixedRng(2)).check()


def test_check_rejects_composite_p():
    with pytest.raises(RSAError):
        RSA(15, 7, 1619).check()


def test_encrypt_round_trip():
    rsa = RSA(421, 7, 1619)
    rsa.e = mod_inverse(rsa.d, rsa.phi)
    result = rsa.encrypt("HOLA")
    assert result.block_size == 2
    assert len(result.encoded) == 2
    assert [mod_pow(c, rsa.d, rsa.n) for c in result.encrypted] == result.encoded


def test_encrypt_rejects_lowercase():
    rsa = RSA(421, 7, 1619)
    rsa.e = mod_inverse(rsa.d, rsa.phi)
    with pytest.raises(ValueError):
        rsa.encrypt("hola")