"""RSA with a Lehman-Peralta primality check and base-26 block encoding."""

from __future__ import annotations

import math
import random
import string
from dataclasses import dataclass

from .protocols import mod_pow

ALPHABET = string.ascii_uppercase
_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19)
_WITNESSES = 6


class RSAError(ValueError):
    """Raised when the parameters of an RSA instance are unusable."""


@dataclass(frozen=True)
class RSAResult:
    """Block size, encoded blocks and their encryptions."""

    block_size: int
    encoded: list[int]
    encrypted: list[int]


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def mod_inverse(value: int, modulus: int) -> int:
    """Inverse of `value` modulo `modulus` by the extended Euclidean algorithm."""
    if value == 0 or modulus == 0:
        raise ValueError("cannot invert with a zero operand")
    x = [modulus, value]
    z = [0, 1]
    while _trunc_mod(x[-2], x[-1]) != 0:
        quotient = _trunc_div(x[-2], x[-1])
        x.append(_trunc_mod(x[-2], x[-1]))
        z.append(_trunc_mod(-quotient * z[-1] + z[-2], modulus))
    if x[-1] != 1:
        raise ValueError(f"{value} has no inverse modulo {modulus}")
    return z[-1] + modulus if z[-1] < 0 else z[-1]


def lehman_peralta(candidate: int, rng: random.Random | None = None) -> bool:
    """Probabilistic primality test with six random witnesses."""
    if candidate < 2:
        raise ValueError("candidate must be at least 2")
    if candidate == 2:
        return True
    if any(candidate % p == 0 and candidate != p for p in _SMALL_PRIMES):
        return False
    source = rng if rng is not None else random.SystemRandom()
    half = (candidate - 1) // 2
    powers = [
        mod_pow(source.randint(2, candidate - 1), half, candidate)
        for _ in range(_WITNESSES)
    ]
    if all(value == 1 for value in powers):
        return False
    return all(value == 1 or value - candidate == -1 for value in powers)


class RSA:
    """RSA key built from primes `p`, `q` and private exponent `d`."""

    def __init__(self, p: int, q: int, d: int, rng: random.Random | None = None) -> None:
        self.p = p
        self.q = q
        self.d = d
        self.phi = (p - 1) * (q - 1)
        self.n = p * q
        self.e = 0
        self._rng = rng

    def check(self) -> int:
        """Verify p, q and d; return the public exponent."""
        if not lehman_peralta(self.p, self._rng):
            raise RSAError("P no es primo.")
        if not lehman_peralta(self.q, self._rng):
            raise RSAError("Q no es primo.")
        try:
            self.e = mod_inverse(self.d, self.phi)
        except ValueError as exc:
            raise RSAError("D no es primo con Fi(n).") from exc
        return self.e

    @property
    def block_size(self) -> int:
        """Letters per block."""
        return int(math.log(self.n)) // int(math.log(len(ALPHABET)))

    def encrypt(self, message: str) -> RSAResult:
        """Encode uppercase letters in base-26 blocks and encrypt each block."""
        if not self.e:
            self.check()
        size = self.block_size
        if size <= 0:
            raise RSAError("modulus too small for a single letter")
        if any(ch not in ALPHABET for ch in message):
            raise ValueError("message must contain only the letters A-Z")
        if len(message) % size:
            raise ValueError(f"message length must be a multiple of {size}")
        encoded = [
            sum(
                ALPHABET.index(ch) * len(ALPHABET) ** (size - offset - 1)
                for offset, ch in enumerate(message[start:start + size])
            )
            for start in range(0, len(message), size)
        ]
        encrypted = [mod_pow(code, self.e, self.n) for code in encoded]
        return RSAResult(size, encoded, encrypted)