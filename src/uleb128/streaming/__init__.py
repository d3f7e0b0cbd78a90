"""Stream and chunk adapters for uleb128.

This module provides helpers for moving encoded values through file-like
objects and for decoding input that arrives split into arbitrary chunks.
"""

from __future__ import annotations

from .adapters import read_value, write_value
from .chunked import ChunkedDecoder

__all__ = [
    "read_value",
    "write_value",
    "ChunkedDecoder",
]
