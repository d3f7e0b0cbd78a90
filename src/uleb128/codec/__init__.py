"""ULEB128 codec.

This module provides the size estimator, encoder and decoder for unsigned
little-endian base-128 integers, including arbitrary-precision values held as
machine words.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode, encode_into, encode_uint64_into, encode_words_into
from .results import DecodeResult, EncodeResult
from .tables import BitGroupTable, table_for
from .words import BigUInt

__all__ = [
    "encode",
    "encode_into",
    "encode_uint64_into",
    "encode_words_into",
    "decode",
    "EncodeResult",
    "DecodeResult",
    "BigUInt",
    "BitGroupTable",
    "table_for",
]
