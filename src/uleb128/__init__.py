"""uleb128: Unsigned LEB128 variable-length integer codec

Encodes and decodes non-negative integers, fixed-width 64-bit and
arbitrary-precision, in the Unsigned Little-Endian Base-128 format used by
DWARF, WebAssembly, protobuf-style varints and many other binary formats.

Key Features:
- Exact encoded size without encoding
- Buffer-based encoding that never writes past the caller's buffer
- Table-driven encoding of arbitrary-precision values, one machine word at a time
- Continuation decoding for values split across reads

Quick Start:
    >>> from uleb128 import decode, encode, encoded_size
    >>>
    >>> data = encode(104543565)
    >>> data.hex()
    'cdeaec31'
    >>> encoded_size(104543565)
    4
    >>> decode(data).uint
    104543565
"""

from __future__ import annotations

from .codec import (
    BigUInt,
    DecodeResult,
    EncodeResult,
    decode,
    encode,
    encode_into,
    encode_uint64_into,
    encode_words_into,
)
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import DecodeError, EncodeError, Uleb128Error
from .models import ContinuationState
from .streaming import ChunkedDecoder, read_value, write_value
from .utils import (
    MAX_UINT64_ENCODED_SIZE,
    encoded_size,
    encoded_size_uint64,
    encoded_size_words,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "encode_into",
    "encode_uint64_into",
    "encode_words_into",
    "decode",
    # Sizing
    "encoded_size",
    "encoded_size_uint64",
    "encoded_size_words",
    "MAX_UINT64_ENCODED_SIZE",
    # Types
    "BigUInt",
    "ContinuationState",
    "EncodeResult",
    "DecodeResult",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Streaming
    "write_value",
    "read_value",
    "ChunkedDecoder",
    # Exceptions
    "Uleb128Error",
    "EncodeError",
    "DecodeError",
    # Version
    "__version__",
]
