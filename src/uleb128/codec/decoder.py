"""ULEB128 decoder.

This module provides the decode() function that turns ULEB128 bytes back into
a value. Payload groups are accumulated into machine words; a value that fits
in 64 bits is returned as a plain int and anything wider as a BigUInt.

Decoding can resume a value split across several reads: the bits already known
from earlier chunks are passed in as a pre-value and bit count and the new
bytes are appended above them.
"""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import DecodeError
from ..models.continuation import ContinuationState
from .results import UNTERMINATED, DecodeResult
from .words import BigUInt

PAYLOAD_MASK = 0x7F
CONTINUATION_FLAG = 0x80


def decode(
    data: bytes,
    pre_value: int = 0,
    pre_bit_count: int = 0,
    *,
    config: Optional[CodecConfig] = None,
) -> DecodeResult:
    """Decode one ULEB128 value from the start of data.

    Bytes after the terminator are ignored. If data ends before a terminator
    the result has ``ok=False`` and ``byte_count=0``; call again once more
    bytes are available.

    Non-minimal encodings (trailing zero groups) are accepted and decode to
    the value their bits imply.

    Args:
        data: Bytes to decode (bytes, bytearray or memoryview)
        pre_value: Low-order bits already known from an earlier read
        pre_bit_count: Number of valid bits in pre_value (0-64)
        config: Codec configuration (word size of BigUInt results)

    Returns:
        DecodeResult with the value, bytes consumed and ok flag

    Raises:
        DecodeError: If pre_value is negative or pre_bit_count is outside 0-64

    Examples:
        ```python
        from uleb128 import decode

        decode(b"\\xcd\\xea\\xec\\x31").uint  # 104543565

        # Continue a value whose low 4 bits (0b0101) were read earlier
        decode(b"\\x01", pre_value=5, pre_bit_count=4).uint  # 21
        ```
    """
    word_size = (config or DEFAULT_CONFIG).word_size
    word_mask = (1 << word_size) - 1

    if pre_value or pre_bit_count:
        try:
            state = ContinuationState(pre_value=pre_value, bit_count=pre_bit_count)
        except ValidationError as e:
            raise DecodeError(f"Invalid continuation state: {e}") from e
        accum = state.masked_value()
        bit_index = state.bit_count
    else:
        accum = 0
        bit_index = 0

    words: list[int] = []

    # Spill seeded bits that already fill whole words
    while bit_index >= word_size:
        words.append(accum & word_mask)
        accum >>= word_size
        bit_index -= word_size

    for position, byte in enumerate(data):
        payload = byte & PAYLOAD_MASK
        accum |= payload << bit_index
        bit_index += 7
        if bit_index >= word_size:
            words.append(accum & word_mask)
            bit_index -= word_size
            accum = payload >> (7 - bit_index)

        if not byte & CONTINUATION_FLAG:
            return _finish(words, accum, position + 1, word_size)

    return UNTERMINATED


def _finish(words: list[int], accum: int, byte_count: int, word_size: int) -> DecodeResult:
    """Close out the accumulator and choose the result representation."""
    if not words:
        return DecodeResult(uint=accum, byte_count=byte_count, ok=True)

    if accum != 0:
        words.append(accum)
    big = BigUInt(tuple(words), word_size)

    if big.fits_uint64():
        return DecodeResult(uint=int(big), byte_count=byte_count, ok=True)

    return DecodeResult(big=big, byte_count=byte_count, ok=True)
