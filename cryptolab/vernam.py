"""Vernam cipher over bytes with a key given as a string of bits."""

from __future__ import annotations

import random

_BYTE_BITS = 8


def _parse_key(key: str) -> bytes:
    """Turn a string of '0'/'1' characters into key bytes, 8 bits per byte."""
    if any(bit not in "01" for bit in key):
        raise ValueError("key must contain only the characters '0' and '1'")
    whole = len(key) - len(key) % _BYTE_BITS
    return bytes(
        int(key[start:start + _BYTE_BITS], 2)
        for start in range(0, whole, _BYTE_BITS)
    )


def _fold(value: int) -> int:
    """Map a byte into the character range the cipher emits."""
    if value > 125:
        value %= 125
    if value < 32:
        value += value % 32
    return value


def random_key(length: int, rng: random.Random | None = None) -> str:
    """Return a bit-string key for `length` characters, each byte below 64."""
    if length < 0:
        raise ValueError("length must not be negative")
    source = rng if rng is not None else random.Random()
    return "".join(format(source.randrange(64), "08b") for _ in range(length))


class Vernam:
    """XOR each byte of the text with the matching key byte."""

    def __init__(self, key: str) -> None:
        self._key = _parse_key(key)

    @property
    def key(self) -> bytes:
        """The key bytes."""
        return self._key

    def _apply(self, text: str) -> str:
        data = text.encode("utf-8")
        if len(data) > len(self._key):
            raise ValueError(
                f"key covers {len(self._key)} bytes but the text has {len(data)}"
            )
        return "".join(chr(_fold(byte ^ mask)) for byte, mask in zip(data, self._key))

    def encrypt(self, plaintext: str) -> str:
        """Encrypt a message."""
        return self._apply(plaintext)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a message."""
        return self._apply(ciphertext)