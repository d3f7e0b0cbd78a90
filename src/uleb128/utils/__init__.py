"""Utility functions for uleb128.

This module provides size calculation ahead of encoding.
"""

from __future__ import annotations

from .sizing import (
    MAX_UINT64_ENCODED_SIZE,
    encoded_size,
    encoded_size_uint64,
    encoded_size_words,
)

__all__ = [
    "MAX_UINT64_ENCODED_SIZE",
    "encoded_size",
    "encoded_size_uint64",
    "encoded_size_words",
]
