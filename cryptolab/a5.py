"""A5/1 style keystream generator built from three clocked LFSRs."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor

_DEFAULT_SEEDS = (
    "1000101100010001001",
    "0101100100011110011010",
    "11110000111101100111101",
)
_DEFAULT_MAJORITY = (9 - 1, 11 - 1, 11 - 1)
_DEFAULT_TAPS = (
    (19 - 1, 18 - 1, 17 - 1, 14 - 1),
    (22 - 1, 21 - 1),
    (23 - 1, 22 - 1, 21 - 1, 8 - 1),
)


def _bits(seed: str) -> list[int]:
    if not seed or any(ch not in "01" for ch in seed):
        raise ValueError("seeds must be non-empty strings of '0' and '1'")
    return [int(ch) for ch in seed]


class A5:
    """Three registers clocked by a majority rule; output is the XOR of their last bits."""

    def __init__(
        self,
        seeds: Sequence[str],
        majority_positions: Sequence[int],
        feedback_taps: Sequence[Sequence[int]],
    ) -> None:
        if not (len(seeds) == len(majority_positions) == len(feedback_taps) == 3):
            raise ValueError("A5 needs exactly three seeds, positions and tap lists")
        self._registers = [_bits(seed) for seed in seeds]
        self.majority_positions = tuple(majority_positions)
        self.feedback_taps = tuple(tuple(taps) for taps in feedback_taps)
        for register, position, taps in zip(
            self._registers, self.majority_positions, self.feedback_taps
        ):
            if not all(0 <= p < len(register) for p in (position, *taps)):
                raise ValueError("position outside its register")
        self._output: list[str] = []

    @property
    def registers(self) -> tuple[str, str, str]:
        """Current contents of the three registers."""
        return tuple("".join(map(str, register)) for register in self._registers)

    @property
    def output(self) -> str:
        """Every bit produced so far."""
        return "".join(self._output)

    def step(self) -> int:
        """Produce one output bit and clock the registers."""
        feedback = [
            reduce(xor, (register[tap] for tap in taps), 0)
            for register, taps in zip(self._registers, self.feedback_taps)
        ]
        bit = reduce(xor, (register[-1] for register in self._registers))
        self._output.append(str(bit))

        control = [
            register[position]
            for register, position in zip(self._registers, self.majority_positions)
        ]
        majority = 1 if sum(control) >= 2 else 0
        for index, register in enumerate(self._registers):
            if control[index] == majority:
                self._registers[index] = [feedback[index], *register[:-1]]
        return bit

    def generate(self, count: int) -> str:
        """Produce `count` output bits as a string."""
        return "".join(str(self.step()) for _ in range(count))


def default_generator() -> A5:
    """Generator with the stock seeds, majority positions and feedback taps."""
    return A5(_DEFAULT_SEEDS, _DEFAULT_MAJORITY, _DEFAULT_TAPS)