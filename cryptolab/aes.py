"""AES-128 block encryption with a per-round trace."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .gf256 import Algorithm, multiply

_BLOCK_SIZE = 16
_ROUNDS = 10


def _inverse(value: int) -> int:
    if value == 0:
        return 0
    result, base, exponent = 1, value, 254
    while exponent:
        if exponent & 1:
            result = multiply(result, base, Algorithm.AES)
        base = multiply(base, base, Algorithm.AES)
        exponent >>= 1
    return result


def _rotl8(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (8 - shift))) & 0xFF


def _affine(value: int) -> int:
    return (
        value
        ^ _rotl8(value, 1)
        ^ _rotl8(value, 2)
        ^ _rotl8(value, 3)
        ^ _rotl8(value, 4)
        ^ 0x63
    )


def _round_constants() -> tuple[int, ...]:
    constants = []
    value = 1
    for _ in range(_ROUNDS):
        constants.append(value)
        value = multiply(value, 2, Algorithm.AES)
    return tuple(constants)


_SBOX = bytes(_affine(_inverse(x)) for x in range(256))
_RCON = _round_constants()


def _as_block(data: Iterable[int], what: str) -> bytes:
    block = bytes(data)
    if len(block) != _BLOCK_SIZE:
        raise ValueError(f"{what} must be {_BLOCK_SIZE} bytes, got {len(block)}")
    return block


def _xtime(value: int) -> int:
    shifted = (value << 1) & 0xFF
    return shifted ^ 0x1B if value & 0x80 else shifted


def _shift_rows(state: list[int]) -> list[int]:
    return [state[row + 4 * ((col + row) % 4)] for col in range(4) for row in range(4)]


def _mix_columns(state: list[int]) -> list[int]:
    mixed: list[int] = []
    for col in range(4):
        a = state[4 * col:4 * col + 4]
        b = [_xtime(x) for x in a]
        mixed += [
            b[0] ^ a[1] ^ b[1] ^ a[2] ^ a[3],
            a[0] ^ b[1] ^ a[2] ^ b[2] ^ a[3],
            a[0] ^ a[1] ^ b[2] ^ a[3] ^ b[3],
            a[0] ^ b[0] ^ a[1] ^ a[2] ^ b[3],
        ]
    return mixed


def format_block(block: Iterable[int]) -> str:
    """Hex digits of each byte, column by column, without zero padding."""
    return "".join(format(byte, "x") for byte in block)


def expand_key(key: Iterable[int]) -> list[bytes]:
    """Return the eleven 16-byte round keys of an AES-128 key."""
    key = _as_block(key, "key")
    words = [list(key[i:i + 4]) for i in range(0, _BLOCK_SIZE, 4)]
    for index in range(4, 4 * (_ROUNDS + 1)):
        temp = words[index - 1]
        if index % 4 == 0:
            temp = [_SBOX[b] for b in temp[1:] + temp[:1]]
            temp[0] ^= _RCON[index // 4 - 1]
        words.append([x ^ y for x, y in zip(words[index - 4], temp)])
    return [
        bytes(byte for word in words[4 * r:4 * r + 4] for byte in word)
        for r in range(_ROUNDS + 1)
    ]


@dataclass(frozen=True)
class RoundTrace:
    """State right after the round key of one round was added."""

    round: int
    subkey: bytes
    state: bytes

    def __str__(self) -> str:
        return (
            f"R{self.round} (Subclave: {format_block(self.subkey)}) = "
            f"{format_block(self.state)}"
        )


class AES:
    """AES-128 encryption of single 16-byte blocks."""

    def __init__(self, key: Iterable[int]) -> None:
        self.key = _as_block(key, "key")
        self.round_keys = expand_key(self.key)

    def trace_block(self, block: Iterable[int]) -> list[RoundTrace]:
        """Encrypt a block, recording the state after every round key."""
        block = _as_block(block, "block")
        state = [x ^ k for x, k in zip(block, self.round_keys[0])]
        traces = [RoundTrace(0, self.round_keys[0], bytes(state))]
        for rnd in range(1, _ROUNDS + 1):
            state = _shift_rows([_SBOX[b] for b in state])
            if rnd < _ROUNDS:
                state = _mix_columns(state)
            subkey = self.round_keys[rnd]
            state = [x ^ k for x, k in zip(state, subkey)]
            traces.append(RoundTrace(rnd, subkey, bytes(state)))
        return traces

    def encrypt_block(self, block: Iterable[int]) -> bytes:
        """Encrypt one 16-byte block."""
        return self.trace_block(block)[-1].state