"""E0 style keystream generator: four LFSRs and a two-bit combiner state."""

from __future__ import annotations

from collections.abc import Sequence

_WIDTHS = (25, 31, 33, 39)
# Feedback is written one place above the visible width of the third and
# fourth registers, so there it only shows up on the following clock.
_FEEDBACK_POSITIONS = (24, 30, 33, 39)
_FEEDBACK_TAPS = (7, 11, 19, 24)
_COMBINER_WIDTH = 2

_DEFAULT_SEEDS = (
    "0101010101010101010101111",
    "0101010101010101010101010101111",
    "010101010101010101010101010101111",
    "010101010101010101010101010101010101010",
    "01",
)


def _parse(seed: str, width: int) -> int:
    """Read a seed the way a fixed-width bit set reads a string: leading chars first."""
    if any(ch not in "01" for ch in seed):
        raise ValueError("seeds must contain only the characters '0' and '1'")
    return int(seed[:width] or "0", 2)


def _swap_bits(value: int) -> int:
    return ((value & 1) << 1) | ((value >> 1) & 1)


class E0:
    """Keystream generator; each clock yields one bit and updates the registers."""

    def __init__(self, seeds: Sequence[str]) -> None:
        if len(seeds) != len(_WIDTHS) + 1:
            raise ValueError("E0 needs four register seeds and one combiner seed")
        self._registers = [
            _parse(seed, width) for seed, width in zip(seeds, _WIDTHS)
        ]
        self._combiner = _parse(seeds[-1], _COMBINER_WIDTH)
        self._output: list[str] = []

    @property
    def registers(self) -> tuple[str, ...]:
        """Visible contents of the four registers, most significant bit first."""
        return tuple(
            format(value & ((1 << width) - 1), f"0{width}b")
            for value, width in zip(self._registers, _WIDTHS)
        )

    @property
    def combiner(self) -> str:
        """The two-bit combiner state, most significant bit first."""
        return format(self._combiner, f"0{_COMBINER_WIDTH}b")

    @property
    def output(self) -> str:
        """Every bit produced so far."""
        return "".join(self._output)

    def _feedback(self) -> None:
        first = self._registers[0]
        bit = 0
        for tap in _FEEDBACK_TAPS:
            bit ^= (first >> tap) & 1
        updated = []
        for value, position in zip(self._registers, _FEEDBACK_POSITIONS):
            value >>= 1
            value &= (1 << position) - 1
            updated.append(value | (bit << position))
        self._registers = updated

    def step(self) -> int:
        """Produce one output bit and clock the generator."""
        low_bits = [value & 1 for value in self._registers]
        box1 = sum(low_bits)

        self._combiner = _swap_bits(self._combiner)
        delayed = _swap_bits(self._combiner)
        box2 = self._combiner + box1
        carry = (box2 // 2) & 0b11

        bit = self._combiner & 1
        for low in low_bits:
            bit ^= low
        self._output.append(str(bit))

        d0 = delayed & 1
        d1 = (delayed >> 1) & 1
        t2 = (d0 << 1) | (d1 ^ d0)
        self._combiner ^= t2 ^ carry

        self._feedback()
        return bit

    def generate(self, count: int) -> str:
        """Produce `count` output bits as a string."""
        return "".join(str(self.step()) for _ in range(count))


def default_generator() -> E0:
    """Generator with the stock register and combiner seeds."""
    return E0(_DEFAULT_SEEDS)