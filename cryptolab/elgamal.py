"""ElGamal encryption over a small elliptic curve y^2 = x^3 + ax + b mod p."""

from __future__ import annotations

from dataclasses import dataclass

from .rsa import mod_inverse

Point = tuple[int, int]


def _cmod(a: int, m: int) -> int:
    r = abs(a) % m
    return -r if a < 0 else r


class EllipticCurve:
    """Curve over the integers modulo a prime, with its affine points listed."""

    def __init__(self, a: int, b: int, prime: int) -> None:
        if prime <= 1:
            raise ValueError("prime must be greater than 1")
        self.a = a
        self.b = b
        self.prime = prime
        squares = [(y * y) % prime for y in range(prime)]
        self.points: list[Point] = [
            (x, y)
            for x in range(prime)
            for y, square in enumerate(squares)
            if _cmod(x ** 3 + a * x + b, prime) == square
        ]

    def inverse(self, value: int) -> int:
        """Inverse of `value` modulo the prime."""
        return mod_inverse(value, self.prime)

    def add(self, p: Point, q: Point) -> Point:
        """Sum of two points; equal points are doubled."""
        if p == q:
            lam = _cmod((3 * p[0] * p[0] + self.a) * self.inverse(2 * p[1]), self.prime)
        else:
            lam = _cmod((q[1] - p[1]) * self.inverse(q[0] - p[0]), self.prime)
        x3 = _cmod(lam * lam - p[0] - q[0], self.prime)
        if x3 < 0:
            x3 += self.prime
        y3 = _cmod(lam * (p[0] - x3) - p[1], self.prime)
        if y3 < 0:
            y3 += self.prime
        return x3, y3

    def encode(self, message: int) -> Point:
        """Map a number onto the first point with x at or above message*h."""
        m = 2
        while m <= message:
            m *= 2
        h = self.prime // m
        abscissas = dict(reversed(self.points))
        for offset in range(len(self.points)):
            x = message * h + offset
            if x in abscissas:
                return x, abscissas[x]
        raise ValueError(f"no curve point encodes {message}")


@dataclass(frozen=True)
class ElGamalCiphertext:
    """Intermediate values and the ciphertext pair."""

    encoded: Point
    a_point: Point
    b_point: Point
    shared: Point
    first: Point
    second: Point


def _double_times(curve: EllipticCurve, point: Point, factor: int) -> Point:
    for _ in range(2, factor + 1, 2):
        point = curve.add(point, point)
    return point


def elgamal_encrypt(
    curve: EllipticCurve, message: int, base: Point, private_a: int, private_b: int
) -> ElGamalCiphertext:
    """Encrypt `message` from A to B with the given base point and private keys."""
    encoded = curve.encode(message)
    a_point = _double_times(curve, base, private_a)
    b_point = _double_times(curve, base, private_b)
    shared = _double_times(curve, b_point, private_a * private_b)
    return ElGamalCiphertext(
        encoded=encoded,
        a_point=a_point,
        b_point=b_point,
        shared=shared,
        first=curve.add(encoded, shared),
        second=a_point,
    )