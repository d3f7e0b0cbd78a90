"""End-to-end integration tests."""

from __future__ import annotations

import io

from uleb128 import (
    BigUInt,
    ChunkedDecoder,
    CodecConfig,
    decode,
    encode,
    encode_into,
    encoded_size,
    read_value,
    write_value,
)


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_buffer_workflow(self) -> None:
        """Test sizing, encoding into a buffer, retrying and decoding."""
        value = 100000000000000**2

        # 1. Too small a buffer is reported, not raised
        buffer = bytearray(4)
        result = encode_into(value, buffer)
        assert not result.ok

        # 2. Retry with the estimated size
        buffer = bytearray(encoded_size(value))
        result = encode_into(value, buffer)
        assert result.ok
        assert result.byte_count == len(buffer)

        # 3. Decode
        decoded = decode(bytes(buffer))
        assert decoded.ok
        assert decoded.big is not None
        assert decoded.value == value

    def test_stream_workflow(self) -> None:
        """Test writing a record of values and reading it back."""
        values = [0, 1, 127, 128, 104543565, 2**64 - 1, 2**64, 2**128 - 1]
        stream = io.BytesIO()
        total = sum(write_value(value, stream) for value in values)
        assert total == sum(encoded_size(value) for value in values)

        stream.seek(0)
        assert [read_value(stream).value for _ in values] == values

    def test_chunked_workflow_across_word_sizes(self) -> None:
        """Test bytes written on one word size decode on the other."""
        values = [BigUInt.from_int(5**k, 32) for k in range(0, 200, 13)]
        data = b"".join(encode(value) for value in values)

        decoder = ChunkedDecoder(CodecConfig(word_size=64))
        results = []
        for start in range(0, len(data), 4):
            results.extend(decoder.feed(data[start : start + 4]))

        assert [r.value for r in results] == [int(value) for value in values]
        for result in results:
            if result.big is not None:
                assert result.big.word_size == 64
