"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Callable

import pytest

from uleb128 import CodecConfig


def _reference_encode(value: int) -> bytes:
    """Encode one bit at a time, independent of the bit-group tables."""
    if value == 0:
        return b"\x00"
    bits = []
    while value:
        bits.append(value & 1)
        value >>= 1
    while len(bits) % 7:
        bits.append(0)

    result = bytearray()
    for start in range(0, len(bits), 7):
        group = 0
        for offset, bit in enumerate(bits[start : start + 7]):
            group |= bit << offset
        result.append(group | 0x80)
    result[-1] &= 0x7F
    return bytes(result)


@pytest.fixture(scope="session")
def reference_encode() -> Callable[[int], bytes]:
    """Bit-by-bit ULEB128 encoder to compare against."""
    return _reference_encode


@pytest.fixture(params=[32, 64], ids=["word32", "word64"])
def word_size(request: pytest.FixtureRequest) -> int:
    """Both supported machine word sizes."""
    return request.param


@pytest.fixture
def config(word_size: int) -> CodecConfig:
    """Codec configuration for each word size."""
    return CodecConfig(word_size=word_size)


@pytest.fixture
def sample_value() -> int:
    """Sample value spanning three 64-bit words."""
    return (0x0123456789ABCDEF << 128) | (0x0123456789ABCDEF << 64) | 0x0123456789ABCDEF
