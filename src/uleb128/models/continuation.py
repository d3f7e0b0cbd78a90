"""Continuation state for decoding a value split across reads.

A ContinuationState holds the low-order bits of a value that were already
read before the next chunk of bytes arrived.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_CONTINUATION_BITS = 64


class ContinuationState(BaseModel):
    """Pre-seeded low-order bits for resuming a decode.

    Only the low ``bit_count`` bits of ``pre_value`` are used; any higher bits
    are masked away.

    Example:
        >>> from uleb128 import decode
        >>> state = ContinuationState(pre_value=5, bit_count=4)
        >>> decode(b"\\x01", state.pre_value, state.bit_count).uint
        21
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=True,
    )

    pre_value: int = Field(default=0, ge=0)
    bit_count: int = Field(default=0, ge=0, le=MAX_CONTINUATION_BITS)

    def masked_value(self) -> int:
        """Return pre_value limited to its bit_count valid bits."""
        return self.pre_value & ((1 << self.bit_count) - 1)

    def extend(self, data: bytes) -> ContinuationState:
        """Append the payload groups of unterminated bytes above the known bits.

        Args:
            data: Bytes that all carry the continuation flag

        Returns:
            New state with 7 more bits per byte

        Raises:
            ValueError: If the result would exceed 64 bits
        """
        bit_count = self.bit_count + 7 * len(data)
        if bit_count > MAX_CONTINUATION_BITS:
            raise ValueError(
                f"Continuation would hold {bit_count} bits "
                f"(max: {MAX_CONTINUATION_BITS})"
            )
        value = self.masked_value()
        shift = self.bit_count
        for byte in data:
            value |= (byte & 0x7F) << shift
            shift += 7
        return ContinuationState(pre_value=value, bit_count=bit_count)
