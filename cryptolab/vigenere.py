"""Vigenère cipher over the 26-letter Latin alphabet."""

from __future__ import annotations

import random
import string

ALPHABET = string.ascii_uppercase
_SIZE_T = 2 ** 64


def _upper(text: str) -> str:
    """Uppercase ASCII lowercase letters only, leaving everything else intact."""
    return "".join(
        chr(ord(ch) - 32) if "a" <= ch <= "z" else ch for ch in text
    )


def _wrap(value: int) -> int:
    """Reduce modulo the alphabet size with unsigned word arithmetic."""
    return (value % _SIZE_T) % len(ALPHABET)


def random_key(rng: random.Random | None = None) -> str:
    """Return a random key of 1 to 26 uppercase letters."""
    source = rng if rng is not None else random.Random()
    return "".join(source.choice(ALPHABET) for _ in range(source.randint(1, 26)))


class Vigenere:
    """Shift each letter by the matching key letter."""

    def __init__(self, key: str) -> None:
        if not key:
            raise ValueError("key must not be empty")
        self.key = _upper(key)

    def _shifts(self, text: str):
        for index, ch in enumerate(_upper(text)):
            yield ord(ch) - 65, ord(self.key[index % len(self.key)]) - 65

    def encrypt(self, text: str) -> str:
        """Encrypt text; lowercase letters are treated as uppercase."""
        return "".join(
            ALPHABET[_wrap(message + key)] for message, key in self._shifts(text)
        )

    def decrypt(self, text: str) -> str:
        """Decrypt text; lowercase letters are treated as uppercase."""
        result = []
        for message, key in self._shifts(text):
            difference = message - key
            if difference < 0:
                difference += len(ALPHABET)
            result.append(ALPHABET[_wrap(difference)])
        return "".join(result)