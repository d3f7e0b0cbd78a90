"""Exception hierarchy for uleb128.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Uleb128Error for easy catching of any uleb128-specific error.

Running out of output space or input bytes is not an exception: those
conditions are reported through the ``ok`` flag of the encode/decode results.
"""

from __future__ import annotations


class Uleb128Error(Exception):
    """Base exception for all uleb128 errors."""

    pass


class EncodeError(Uleb128Error):
    """Raised when a value cannot be encoded.

    Examples:
        - Negative value (sign is not part of the format)
        - Value larger than 2**64 - 1 passed to the fixed-width path
        - Word outside the range of the declared word size
        - Object that is not an integer
    """

    pass


class DecodeError(Uleb128Error):
    """Raised when decoding cannot proceed.

    Examples:
        - Continuation bit count outside 0-64
        - Negative continuation value
        - Stream closed before a terminator byte was read
    """

    pass
