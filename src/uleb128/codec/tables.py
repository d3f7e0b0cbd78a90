"""Bit-group tables for the word-array encoder.

A machine word is processed as two halves (32-bit halves for 64-bit words,
16-bit halves for 32-bit words). Each half is merged into an accumulator that
still holds the bits left over from the previous half, then every complete
7-bit group is flushed. Because 7 and the half width are coprime the leftover
count cycles with period 14, so a 14-step table describes every word.

64-bit words, split into 32-bit halves:

| Step | Half | shift | groups | remainder |
| ---- | ---- | ----- | ------ | --------- |
|    0 |  L   |  <<0  |    4   |     4     |
|    1 |  H   | >>28  |    5   |     1     |
|    2 |  L   |  <<1  |    4   |     5     |
|    3 |  H   | >>27  |    5   |     2     |
|    4 |  L   |  <<2  |    4   |     6     |
|    5 |  H   | >>26  |    5   |     3     |
|    6 |  L   |  <<3  |    5   |     0     |
|    7 |  H   | >>32  |    4   |     4     |
|    8 |  L   |  <<4  |    5   |     1     |
|    9 |  H   | >>31  |    4   |     5     |
|   10 |  L   |  <<5  |    5   |     2     |
|   11 |  H   | >>30  |    4   |     6     |
|   12 |  L   |  <<6  |    5   |     3     |
|   13 |  H   | >>29  |    5   |     0     |

The 32-bit table follows the same construction with 16-bit halves.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .words import check_word_size

GROUP_BITS = 7
STEP_PERIOD = 14


class Half(enum.Enum):
    """Which half of a machine word a step consumes."""

    LOW = "L"
    HIGH = "H"


@dataclass(frozen=True)
class BitGroupStep:
    """One entry of a bit-group table.

    Attributes:
        half: Half of the word merged at this step
        shift: Left shift for LOW halves, right shift for HIGH halves
        group_count: Complete 7-bit groups available after the merge
        remainder: Bits left in the accumulator after flushing
    """

    half: Half
    shift: int
    group_count: int
    remainder: int


@dataclass(frozen=True)
class BitGroupTable:
    """Step table and masks for one machine word size."""

    word_size: int
    half_width: int
    low_mask: int
    high_mask: int
    steps: tuple[BitGroupStep, ...]

    @property
    def group_counts(self) -> tuple[int, ...]:
        return tuple(step.group_count for step in self.steps)

    @property
    def shifts(self) -> tuple[int, ...]:
        return tuple(step.shift for step in self.steps)

    def align(self, step: BitGroupStep, word: int) -> int:
        """Return the bits of word's half positioned above the leftover bits."""
        if step.half is Half.LOW:
            return (word & self.low_mask) << step.shift
        return (word & self.high_mask) >> step.shift


def build_table(word_size: int) -> BitGroupTable:
    """Derive the bit-group table for a word size from the 7-bit alignment cycle.

    Args:
        word_size: Machine word width in bits (32 or 64)

    Returns:
        Table with STEP_PERIOD alternating LOW/HIGH steps

    Raises:
        ValueError: If word_size is unsupported
    """
    check_word_size(word_size)
    half_width = word_size // 2
    low_mask = (1 << half_width) - 1
    high_mask = low_mask << half_width

    steps = []
    remainder = 0
    for index in range(STEP_PERIOD):
        half = Half.LOW if index % 2 == 0 else Half.HIGH
        # LOW halves start at bit 0 and move up; HIGH halves start at half_width and move down
        shift = remainder if half is Half.LOW else half_width - remainder
        available = remainder + half_width
        group_count, remainder = divmod(available, GROUP_BITS)
        steps.append(BitGroupStep(half, shift, group_count, remainder))

    if remainder != 0:
        raise ValueError(f"Bit-group cycle for {word_size}-bit words did not close")

    return BitGroupTable(word_size, half_width, low_mask, high_mask, tuple(steps))


TABLE_64 = build_table(64)
TABLE_32 = build_table(32)

_TABLES = {64: TABLE_64, 32: TABLE_32}


def table_for(word_size: int) -> BitGroupTable:
    """Return the precomputed table for a word size.

    Raises:
        ValueError: If word_size is not 32 or 64
    """
    check_word_size(word_size)
    return _TABLES[word_size]
