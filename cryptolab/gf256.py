"""Multiplication in GF(2^8) with the SNOW 3G or AES reduction byte."""

from __future__ import annotations

from enum import Enum


class Algorithm(Enum):
    """Which field the multiplication takes place in."""

    SNOW_3G = 1
    AES = 2

    @property
    def reduction(self) -> int:
        """Byte added back when a shift carries out of the top bit."""
        return 0xA9 if self is Algorithm.SNOW_3G else 0x1B


def multiply(first: int, second: int, algorithm: Algorithm | int) -> int:
    """Multiply two bytes; only their low 8 bits are used."""
    reduction = Algorithm(algorithm).reduction
    first &= 0xFF
    second &= 0xFF
    result = first if second & 1 else 0
    for bit in range(1, 8):
        carry = first & 0x80
        first = (first << 1) & 0xFF
        if carry:
            first ^= reduction
        if (second >> bit) & 1:
            result ^= first
    return result