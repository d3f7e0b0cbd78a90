"""Reader/writer adapters.

Thin helpers that move encoded values through binary file-like objects.
"""

from __future__ import annotations

from typing import BinaryIO, Optional, Union

from ..codec.decoder import decode
from ..codec.encoder import encode
from ..codec.results import DecodeResult
from ..codec.words import BigUInt
from ..config import CodecConfig
from ..exceptions import DecodeError


def write_value(
    value: Union[int, BigUInt],
    stream: BinaryIO,
    config: Optional[CodecConfig] = None,
) -> int:
    """Encode a value and write it to a binary stream.

    Args:
        value: Non-negative int or BigUInt
        stream: Writable binary stream
        config: Codec configuration

    Returns:
        Number of bytes written

    Raises:
        EncodeError: If value cannot be encoded
    """
    data = encode(value, config)
    stream.write(data)
    return len(data)


def read_value(stream: BinaryIO, config: Optional[CodecConfig] = None) -> DecodeResult:
    """Read exactly one encoded value from a binary stream.

    Bytes are read one at a time so nothing past the terminator is consumed.

    Args:
        stream: Readable binary stream
        config: Codec configuration

    Returns:
        DecodeResult for the value

    Raises:
        DecodeError: If the stream ends before a terminator byte
    """
    data = bytearray()
    while True:
        chunk = stream.read(1)
        if not chunk:
            if data:
                raise DecodeError(
                    f"Stream ended after {len(data)} bytes without a terminator"
                )
            raise DecodeError("Stream ended before any bytes were read")
        data += chunk
        if not chunk[0] & 0x80:
            return decode(data, config=config)
