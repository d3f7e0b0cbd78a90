"""Property-based tests using hypothesis."""

from __future__ import annotations

from typing import Callable

from hypothesis import given
from hypothesis import strategies as st

from uleb128 import (
    BigUInt,
    CodecConfig,
    decode,
    encode,
    encode_uint64_into,
    encode_words_into,
    encoded_size,
)

word_sizes = st.sampled_from([32, 64])
uint64s = st.integers(min_value=0, max_value=2**64 - 1)
big_values = st.integers(min_value=0, max_value=2**1024)


class TestCodecProperties:
    """Property-based tests for the codec."""

    @given(value=big_values, word_size=word_sizes)
    def test_encode_decode_roundtrip(self, value: int, word_size: int) -> None:
        """Test encode/decode is invertible and sized exactly."""
        config = CodecConfig(word_size=word_size)
        data = encode(value, config)
        result = decode(data, config=config)

        assert result.ok
        assert result.value == value
        assert result.byte_count == len(data) == encoded_size(value)
        assert (result.big is None) == (value < 2**64)

    @given(value=big_values, word_size=word_sizes)
    def test_matches_reference(
        self,
        value: int,
        word_size: int,
        reference_encode: Callable[[int], bytes],
    ) -> None:
        """Test the table-driven encoder against the bit-by-bit encoder."""
        words = BigUInt.from_int(value, word_size).words
        buffer = bytearray(encoded_size(value))
        result = encode_words_into(words, buffer, word_size)

        assert result.ok
        assert bytes(buffer) == reference_encode(value)

    @given(value=uint64s, word_size=word_sizes)
    def test_fast_path_equals_word_path(self, value: int, word_size: int) -> None:
        """Test both encoder paths agree on 64-bit values."""
        fast = bytearray(10)
        slow = bytearray(10)
        fast_result = encode_uint64_into(value, fast)
        slow_result = encode_words_into(BigUInt.from_int(value, word_size).words, slow, word_size)

        assert fast_result == slow_result
        assert fast == slow

    @given(value=big_values, data=st.data(), word_size=word_sizes)
    def test_short_buffer_never_overruns(
        self, value: int, data: st.DataObject, word_size: int
    ) -> None:
        """Test short buffers report not ok and leave the rest untouched."""
        size = encoded_size(value)
        capacity = data.draw(st.integers(min_value=0, max_value=size - 1))
        backing = bytearray(b"\xaa" * (size + 1))

        result = encode_words_into(
            BigUInt.from_int(value, word_size).words, memoryview(backing)[:capacity], word_size
        )

        assert not result.ok
        assert backing[capacity:] == bytearray(b"\xaa" * (size + 1 - capacity))

    @given(value=big_values, trailing=st.binary(max_size=8))
    def test_trailing_bytes_ignored(self, value: int, trailing: bytes) -> None:
        """Test decoding consumes only the encoded value."""
        data = encode(value)
        result = decode(data + trailing)

        assert result.value == value
        assert result.byte_count == len(data)

    @given(value=uint64s, data=st.data(), word_size=word_sizes)
    def test_continuation_split(self, value: int, data: st.DataObject, word_size: int) -> None:
        """Test a decode resumed from seeded bits matches a whole decode."""
        encoded = encode(value)
        split = data.draw(st.integers(min_value=0, max_value=len(encoded) - 1))
        pre_value = 0
        for index, byte in enumerate(encoded[:split]):
            pre_value |= (byte & 0x7F) << (7 * index)

        result = decode(
            encoded[split:], pre_value, 7 * split, config=CodecConfig(word_size=word_size)
        )

        assert result.ok
        assert result.uint == value
        assert result.byte_count == len(encoded) - split

    @given(data=st.lists(st.integers(min_value=0x80, max_value=0xFF), max_size=40).map(bytes))
    def test_unterminated_consumes_nothing(self, data: bytes) -> None:
        """Test input with no terminator is reported as not ok."""
        result = decode(data)

        assert not result.ok
        assert result.byte_count == 0
