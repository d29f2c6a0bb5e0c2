"""AES-128 in CBC mode, with ciphertext stealing for a short final block."""

from __future__ import annotations

from collections.abc import Iterable

from .aes import AES

_BLOCK_SIZE = 16


def _as_block(data: Iterable[int], what: str) -> bytes:
    block = bytes(data)
    if len(block) != _BLOCK_SIZE:
        raise ValueError(f"{what} must be {_BLOCK_SIZE} bytes, got {len(block)}")
    return block


def xor_blocks(block: Iterable[int], other: Iterable[int]) -> bytes:
    """XOR every byte of `block` with the byte at the same place in `other`."""
    block = bytes(block)
    other = bytes(other)
    if len(other) < len(block):
        raise ValueError(
            f"cannot mask {len(block)} bytes with only {len(other)} bytes"
        )
    return bytes(x ^ y for x, y in zip(block, other))


def cbc_encrypt(
    key: Iterable[int], iv: Iterable[int], blocks: Iterable[Iterable[int]]
) -> list[bytes]:
    """Encrypt full 16-byte blocks in CBC mode, chaining from `iv`."""
    cipher = AES(key)
    chain = _as_block(iv, "iv")
    ciphertext = []
    for block in blocks:
        chain = cipher.encrypt_block(xor_blocks(_as_block(block, "block"), chain))
        ciphertext.append(chain)
    return ciphertext


def cipher_stealing_encrypt(
    key: Iterable[int],
    iv: Iterable[int],
    first: Iterable[int],
    last: Iterable[int],
) -> tuple[bytes, bytes]:
    """Encrypt a full block followed by a block of 1 to 16 bytes.

    The last block is masked with the first ciphertext and completed with the
    bytes of that ciphertext it does not cover. Returns the encryption of the
    completed block, then the first ciphertext cut to the length of `last`.
    """
    cipher = AES(key)
    chain = _as_block(iv, "iv")
    first = _as_block(first, "first block")
    last = bytes(last)
    if not 1 <= len(last) <= _BLOCK_SIZE:
        raise ValueError(
            f"last block must hold 1 to {_BLOCK_SIZE} bytes, got {len(last)}"
        )
    head = cipher.encrypt_block(xor_blocks(first, chain))
    completed = xor_blocks(last, head) + head[len(last):]
    tail = cipher.encrypt_block(completed)
    return tail, head[:len(last)]