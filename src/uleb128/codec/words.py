"""Machine-word representation of arbitrary-precision values.

The encoder and decoder never operate on a whole Python ``int`` when a value
is wider than 64 bits. Instead they work on a little-endian sequence of
fixed-width machine words, the same shape a native big-integer library keeps
internally.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterable

SUPPORTED_WORD_SIZES = (32, 64)

UINT64_MAX = (1 << 64) - 1


def platform_word_size() -> int:
    """Return the native machine word width of this interpreter in bits.

    Returns:
        32 or 64
    """
    bits = struct.calcsize("P") * 8
    return 32 if bits <= 32 else 64


def check_word_size(word_size: int) -> int:
    """Validate a word size.

    Raises:
        ValueError: If word_size is not 32 or 64
    """
    if word_size not in SUPPORTED_WORD_SIZES:
        raise ValueError(f"word_size must be 32 or 64, got {word_size}")
    return word_size


@dataclass(frozen=True)
class BigUInt:
    """Arbitrary-precision unsigned integer stored as machine words.

    Words are ordered least significant first. Superfluous high zero words are
    stripped on construction, so zero is the empty tuple.

    Attributes:
        words: Little-endian word tuple
        word_size: Width of each word in bits (32 or 64)

    Example:
        >>> big = BigUInt.from_int(2**64, word_size=64)
        >>> big.words
        (0, 1)
        >>> int(big) == 2**64
        True
    """

    words: tuple[int, ...] = ()
    word_size: int = 64

    def __post_init__(self) -> None:
        """Validate the words and drop high zero words."""
        check_word_size(self.word_size)
        words = tuple(self.words)
        limit = 1 << self.word_size
        for word in words:
            if not 0 <= word < limit:
                raise ValueError(
                    f"Word {word:#x} does not fit in {self.word_size} bits"
                )
        object.__setattr__(self, "words", normalize_words(words))

    @classmethod
    def from_int(cls, value: int, word_size: int = 64) -> BigUInt:
        """Split a non-negative integer into words.

        Args:
            value: Non-negative integer
            word_size: Word width in bits (32 or 64)

        Raises:
            ValueError: If value is negative
        """
        if value < 0:
            raise ValueError(f"BigUInt requires non-negative value, got {value}")
        check_word_size(word_size)
        mask = (1 << word_size) - 1
        words = []
        while value:
            words.append(value & mask)
            value >>= word_size
        return cls(tuple(words), word_size)

    def __int__(self) -> int:
        value = 0
        for word in reversed(self.words):
            value = (value << self.word_size) | word
        return value

    def __index__(self) -> int:
        return int(self)

    def is_zero(self) -> bool:
        return not self.words

    def bit_length(self) -> int:
        """Return the number of significant bits."""
        if not self.words:
            return 0
        return self.words[-1].bit_length() + self.word_size * (len(self.words) - 1)

    def fits_uint64(self) -> bool:
        return len(self.words) * self.word_size <= 64


def normalize_words(words: Iterable[int]) -> tuple[int, ...]:
    """Strip most-significant zero words."""
    result = list(words)
    while result and result[-1] == 0:
        result.pop()
    return tuple(result)
