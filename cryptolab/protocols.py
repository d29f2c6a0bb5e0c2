"""Diffie-Hellman key exchange and Fiat-Shamir identification walkthroughs."""

from __future__ import annotations

from dataclasses import dataclass, field


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Square-and-multiply exponentiation modulo `modulus`.

    The loop stops as soon as the running base reduces to 0 or 1, so a base
    that is a multiple of the modulus gives 1, as does a non-positive exponent.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    result = 1
    y = base % modulus
    while exponent > 0 and y > 1:
        if exponent % 2:
            result = (result * y) % modulus
            exponent -= 1
        else:
            y = (y * y) % modulus
            exponent //= 2
    return result


@dataclass(frozen=True)
class DiffieHellmanExchange:
    """Public values and the key each party derives."""

    p: int
    alpha: int
    x_a: int
    x_b: int
    y_a: int
    y_b: int
    key_a: int
    key_b: int


def diffie_hellman(p: int, alpha: int, x_a: int, x_b: int) -> DiffieHellmanExchange:
    """Run an exchange between A and B with secrets `x_a` and `x_b`."""
    y_a = mod_pow(alpha, x_a, p)
    y_b = mod_pow(alpha, x_b, p)
    return DiffieHellmanExchange(
        p=p,
        alpha=alpha,
        x_a=x_a,
        x_b=x_b,
        y_a=y_a,
        y_b=y_b,
        key_a=mod_pow(y_b, x_a, p),
        key_b=mod_pow(y_a, x_b, p),
    )


@dataclass(frozen=True)
class FiatShamirRound:
    """One challenge and response; `lhs` is Y^2 mod N, `rhs` what B compares it with."""

    index: int
    x: int
    a: int
    e: int
    y: int
    lhs: int
    rhs: int

    @property
    def accepted(self) -> bool:
        """Whether B accepts the response."""
        return self.lhs == self.rhs


@dataclass(frozen=True)
class FiatShamirRun:
    """Public modulus, secret, public value and the rounds played."""

    n: int
    s: int
    v: int
    rounds: list[FiatShamirRound] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        """Whether every round was accepted."""
        return all(r.accepted for r in self.rounds)


def fiat_shamir(
    p: int, q: int, s: int, x_1: int, x_2: int, bit_e: int, iterations: int
) -> FiatShamirRun:
    """Play `iterations` rounds: the first with witness `x_1`, the rest with `x_2`.

    The challenge starts at `bit_e` and grows by one every round; any non-zero
    challenge asks for X*S.
    """
    if p <= 0 or q <= 0:
        raise ValueError("p and q must be positive")
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    n = p * q
    v = (s * s) % n
    rounds = []
    x = x_1
    e = bit_e
    for index in range(iterations):
        a = (x * x) % n
        if e == 0:
            y = x % n
            rhs = a
        else:
            y = (x * s) % n
            rhs = (a * v) % n
        rounds.append(
            FiatShamirRound(index=index, x=x, a=a, e=e, y=y, lhs=(y * y) % n, rhs=rhs)
        )
        x = x_2
        e += 1
    return FiatShamirRun(n=n, s=s, v=v, rounds=rounds)