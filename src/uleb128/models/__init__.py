"""Validated models for uleb128.

This module provides the pydantic models used to validate caller-supplied state.
"""

from __future__ import annotations

from .continuation import MAX_CONTINUATION_BITS, ContinuationState

__all__ = [
    "ContinuationState",
    "MAX_CONTINUATION_BITS",
]
