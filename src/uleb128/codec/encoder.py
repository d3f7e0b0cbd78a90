"""ULEB128 encoder.

This module provides two encoding paths that write into a caller-owned buffer:

- ``encode_uint64_into``: fixed-width fast path for values up to 2**64 - 1
- ``encode_words_into``: table-driven path for arbitrary-precision values
  held as machine words

Neither path raises when the buffer is too small. The returned EncodeResult
has ``ok=False`` and nothing is written past the end of the buffer.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import EncodeError
from ..utils.sizing import encoded_size
from .results import EncodeResult
from .tables import STEP_PERIOD, table_for
from .words import UINT64_MAX, BigUInt, normalize_words

PAYLOAD_MASK = 0x7F
CONTINUATION_FLAG = 0x80

WritableBuffer = Union[bytearray, memoryview]


def encode(value: Union[int, BigUInt], config: Optional[CodecConfig] = None) -> bytes:
    """Encode a value to ULEB128 bytes.

    Args:
        value: Non-negative int or BigUInt
        config: Codec configuration (word size for values over 64 bits)

    Returns:
        Canonical ULEB128 encoding

    Raises:
        EncodeError: If value is negative or not an integer

    Examples:
        ```python
        from uleb128 import encode

        encode(104543565)  # b'\\xcd\\xea\\xec1'
        encode(2**64)      # b'\\x80\\x80\\x80\\x80\\x80\\x80\\x80\\x80\\x80\\x02'
        ```
    """
    buffer = bytearray(encoded_size(value))
    result = encode_into(value, buffer, config)
    if not result.ok:
        raise EncodeError(
            f"Encoding overran its estimated size of {len(buffer)} bytes"
        )
    return bytes(buffer)


def encode_into(
    value: Union[int, BigUInt],
    buffer: WritableBuffer,
    config: Optional[CodecConfig] = None,
) -> EncodeResult:
    """Encode a value into a buffer, choosing the fast path when possible.

    Args:
        value: Non-negative int or BigUInt
        buffer: Writable buffer; the encoding starts at offset 0
        config: Codec configuration used when an int needs the word path

    Returns:
        EncodeResult with the byte count and ok flag

    Raises:
        EncodeError: If value is negative or not an integer
    """
    if isinstance(value, BigUInt):
        return encode_words_into(value.words, buffer, value.word_size)
    if not isinstance(value, int):
        raise EncodeError(f"Expected int or BigUInt, got {type(value).__name__}")
    if value < 0:
        raise EncodeError(f"Cannot encode negative value {value}")
    if value <= UINT64_MAX:
        return encode_uint64_into(value, buffer)

    word_size = (config or DEFAULT_CONFIG).word_size
    big = BigUInt.from_int(value, word_size)
    return encode_words_into(big.words, buffer, word_size)


def encode_uint64_into(value: int, buffer: WritableBuffer) -> EncodeResult:
    """Encode a fixed-width 64-bit value.

    Args:
        value: Unsigned integer in [0, 2**64 - 1]
        buffer: Writable buffer

    Returns:
        EncodeResult with the byte count and ok flag

    Raises:
        EncodeError: If value is outside the uint64 range
    """
    if not 0 <= value <= UINT64_MAX:
        raise EncodeError(f"Value {value} is outside the uint64 range")

    capacity = len(buffer)
    if value & ~PAYLOAD_MASK == 0:
        if capacity < 1:
            return EncodeResult(0, False)
        buffer[0] = value
        return EncodeResult(1, True)

    byte_count = 0
    while value != 0:
        if byte_count >= capacity:
            return EncodeResult(byte_count, False)
        group = value & PAYLOAD_MASK
        value >>= 7
        if value != 0:
            group |= CONTINUATION_FLAG
        buffer[byte_count] = group
        byte_count += 1
    return EncodeResult(byte_count, True)


def encode_words_into(
    words: Sequence[int], buffer: WritableBuffer, word_size: int = 64
) -> EncodeResult:
    """Encode an arbitrary-precision value given as machine words.

    Each word is consumed as a low half and a high half. The bit-group table
    for the word size says where each half lands relative to the bits left
    over from the previous half and how many complete 7-bit groups can then be
    flushed, so the work per word is constant instead of per bit.

    Args:
        words: Machine words, least significant first
        buffer: Writable buffer
        word_size: Width of each word in bits (32 or 64)

    Returns:
        EncodeResult with the byte count and ok flag

    Raises:
        ValueError: If word_size is unsupported
        EncodeError: If a word does not fit in word_size bits
    """
    table = table_for(word_size)
    limit = 1 << word_size
    for word in words:
        if not 0 <= word < limit:
            raise EncodeError(f"Word {word:#x} does not fit in {word_size} bits")
    words = normalize_words(words)

    capacity = len(buffer)
    if not words:
        if capacity < 1:
            return EncodeResult(0, False)
        buffer[0] = 0
        return EncodeResult(1, True)

    steps = table.steps
    accum = 0
    byte_count = 0
    index = 0

    for word in words[:-1]:
        for _ in range(2):
            step = steps[index]
            accum |= table.align(step, word)
            for _ in range(step.group_count):
                if byte_count >= capacity:
                    return EncodeResult(byte_count, False)
                buffer[byte_count] = (accum & PAYLOAD_MASK) | CONTINUATION_FLAG
                byte_count += 1
                accum >>= 7
            index = (index + 1) % STEP_PERIOD

    # Last word: stop as soon as nothing is left to emit
    word = words[-1]
    high_bits = word & table.high_mask

    step = steps[index]
    accum |= table.align(step, word)
    for _ in range(step.group_count):
        if byte_count >= capacity:
            return EncodeResult(byte_count, False)
        group = accum & PAYLOAD_MASK
        accum >>= 7
        if accum == 0 and high_bits == 0:
            buffer[byte_count] = group
            return EncodeResult(byte_count + 1, True)
        buffer[byte_count] = group | CONTINUATION_FLAG
        byte_count += 1

    index = (index + 1) % STEP_PERIOD
    step = steps[index]
    accum |= table.align(step, word)
    while True:
        if byte_count >= capacity:
            return EncodeResult(byte_count, False)
        group = accum & PAYLOAD_MASK
        accum >>= 7
        if accum == 0:
            buffer[byte_count] = group
            return EncodeResult(byte_count + 1, True)
        buffer[byte_count] = group | CONTINUATION_FLAG
        byte_count += 1
