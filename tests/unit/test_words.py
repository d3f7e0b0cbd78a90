"""Unit tests for the word-array value type and configuration."""

from __future__ import annotations

import pytest

from uleb128 import DEFAULT_CONFIG, BigUInt, CodecConfig
from uleb128.codec.words import normalize_words, platform_word_size


class TestBigUInt:
    """Test BigUInt construction and conversion."""

    def test_from_int_64(self) -> None:
        """Test splitting into 64-bit words."""
        big = BigUInt.from_int(2**64 + 5, 64)
        assert big.words == (5, 1)
        assert big.word_size == 64

    def test_from_int_32(self) -> None:
        """Test splitting into 32-bit words."""
        big = BigUInt.from_int(0x0123456789ABCDEF, 32)
        assert big.words == (0x89ABCDEF, 0x01234567)

    def test_zero(self, word_size: int) -> None:
        """Test zero is the empty word tuple."""
        big = BigUInt.from_int(0, word_size)
        assert big.words == ()
        assert big.is_zero()
        assert int(big) == 0
        assert big.bit_length() == 0

    def test_int_roundtrip(self, word_size: int) -> None:
        """Test conversion back to int."""
        for value in (1, 2**31, 2**64 - 1, 2**64, 3**100):
            assert int(BigUInt.from_int(value, word_size)) == value

    def test_index(self) -> None:
        """Test BigUInt works where an index is expected."""
        big = BigUInt.from_int(255, 64)
        assert hex(big) == "0xff"

    def test_normalizes_high_zero_words(self) -> None:
        """Test superfluous high zero words are dropped."""
        assert BigUInt((1, 0, 0), 64).words == (1,)
        assert BigUInt((0, 0), 32).words == ()

    def test_bit_length(self) -> None:
        """Test bit length spans words."""
        assert BigUInt((0, 1), 64).bit_length() == 65
        assert BigUInt((0, 0, 1), 32).bit_length() == 65

    def test_fits_uint64(self) -> None:
        """Test the 64-bit fit check on both word sizes."""
        assert BigUInt((1,), 64).fits_uint64()
        assert not BigUInt((0, 1), 64).fits_uint64()
        assert BigUInt((0, 1), 32).fits_uint64()
        assert not BigUInt((0, 0, 1), 32).fits_uint64()

    def test_word_out_of_range(self) -> None:
        """Test words wider than the word size are rejected."""
        with pytest.raises(ValueError, match="does not fit"):
            BigUInt((2**32,), 32)
        with pytest.raises(ValueError, match="does not fit"):
            BigUInt((-1,), 64)

    def test_negative_rejected(self) -> None:
        """Test negative values are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            BigUInt.from_int(-1)

    def test_unsupported_word_size(self) -> None:
        """Test unsupported word sizes are rejected."""
        with pytest.raises(ValueError, match="word_size"):
            BigUInt((1,), 8)

    def test_normalize_words(self) -> None:
        """Test the normalization helper."""
        assert normalize_words([0, 1, 0]) == (0, 1)
        assert normalize_words([]) == ()


class TestCodecConfig:
    """Test codec configuration."""

    def test_default_is_platform(self) -> None:
        """Test the default word size comes from the interpreter."""
        assert CodecConfig().word_size == platform_word_size()
        assert DEFAULT_CONFIG.word_size in (32, 64)

    def test_explicit(self, word_size: int) -> None:
        """Test explicit word sizes."""
        assert CodecConfig(word_size=word_size).word_size == word_size

    def test_invalid(self) -> None:
        """Test invalid word sizes."""
        with pytest.raises(ValueError, match="word_size"):
            CodecConfig(word_size=48)
