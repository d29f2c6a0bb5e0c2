"""RC4 stream cipher."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator


def parse_numbers(text: str) -> list[int]:
    """Parse a comma-separated list of decimal numbers; empty fields give 0."""
    return [
        sum((ord(ch) - 48) * 10 ** power for power, ch in enumerate(reversed(field)))
        for field in text.split(",")
    ]


def random_key(rng: random.Random | None = None) -> list[int]:
    """Return 1 to 30 random key values, each between 1 and 256."""
    source = rng if rng is not None else random.Random()
    return [source.randint(1, 256) for _ in range(source.randint(1, 30))]


class RC4:
    """RC4 keyed with a list of integers; every operation starts from a fresh state."""

    def __init__(self, key: Iterable[int]) -> None:
        self.key = list(key)
        if not self.key:
            raise ValueError("key must not be empty")

    def _schedule(self) -> list[int]:
        state = list(range(256))
        j = 0
        for i in range(256):
            j = (j + self.key[i % len(self.key)] + state[i]) % 256
            state[i], state[j] = state[j], state[i]
        return state

    def keystream(self) -> Iterator[int]:
        """Yield keystream bytes from a freshly scheduled state."""
        state = self._schedule()
        i = j = 0
        while True:
            i = (i + 1) % 256
            j = (j + state[i]) % 256
            state[i], state[j] = state[j], state[i]
            yield state[(state[i] + state[j]) % 256]

    def encrypt(self, data: Iterable[int]) -> list[int]:
        """XOR the low 8 bits of each value with the keystream."""
        return [(value & 0xFF) ^ mask for value, mask in zip(data, self.keystream())]

    def decrypt(self, data: Iterable[int]) -> list[int]:
        """Decrypt values; the same operation as encryption."""
        return self.encrypt(data)