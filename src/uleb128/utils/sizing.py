"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of a value
without actually encoding it, so callers can size output buffers exactly.
"""

from __future__ import annotations

from typing import Sequence, Union

from ..codec.words import UINT64_MAX, BigUInt, check_word_size
from ..exceptions import EncodeError

# ceil(64 / 7): the last byte of a full 64-bit value carries a single bit
MAX_UINT64_ENCODED_SIZE = 10


def encoded_size_uint64(value: int) -> int:
    """Calculate the encoded size of a fixed-width 64-bit value in bytes.

    Args:
        value: Unsigned integer in [0, 2**64 - 1]

    Returns:
        Size in bytes (1-10)

    Raises:
        EncodeError: If value is outside the uint64 range

    Example:
        >>> encoded_size_uint64(127)
        1
        >>> encoded_size_uint64(128)
        2
    """
    if not 0 <= value <= UINT64_MAX:
        raise EncodeError(f"Value {value} is outside the uint64 range")

    if value == 0:
        return 1

    group_count = 0
    while value != 0:
        group_count += 1
        value >>= 7
    return group_count


def encoded_size_words(words: Sequence[int], word_size: int = 64) -> int:
    """Calculate the encoded size of a little-endian word sequence in bytes.

    Args:
        words: Machine words, least significant first
        word_size: Width of each word in bits (32 or 64)

    Returns:
        Size in bytes (at least 1)

    Raises:
        ValueError: If word_size is unsupported
        EncodeError: If a word does not fit in word_size bits
    """
    check_word_size(word_size)
    limit = 1 << word_size
    for word in words:
        if not 0 <= word < limit:
            raise EncodeError(f"Word {word:#x} does not fit in {word_size} bits")

    end = len(words)
    while end and words[end - 1] == 0:
        end -= 1
    if end == 0:
        return 1

    bits = words[end - 1].bit_length() + word_size * (end - 1)
    return (bits + 6) // 7


def encoded_size(value: Union[int, BigUInt]) -> int:
    """Calculate the encoded size of any supported value in bytes.

    Args:
        value: Non-negative int or BigUInt

    Returns:
        Size in bytes

    Raises:
        EncodeError: If value is negative or not an integer
    """
    if isinstance(value, BigUInt):
        return encoded_size_words(value.words, value.word_size)
    if not isinstance(value, int):
        raise EncodeError(f"Expected int or BigUInt, got {type(value).__name__}")
    if value < 0:
        raise EncodeError(f"Cannot encode negative value {value}")
    if value <= UINT64_MAX:
        return encoded_size_uint64(value)
    return max(1, (value.bit_length() + 6) // 7)
