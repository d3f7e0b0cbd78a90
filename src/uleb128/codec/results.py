"""Result types returned by the encoder and decoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .words import BigUInt


@dataclass(frozen=True)
class EncodeResult:
    """Outcome of writing an encoding into a caller-owned buffer.

    Attributes:
        byte_count: Bytes written (the full encoding when ok is True)
        ok: False if the buffer was too small; only a prefix was written
    """

    byte_count: int
    ok: bool


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding one value.

    Exactly one representation is populated on success: ``uint`` when the value
    fits in 64 bits, otherwise ``big``. When ``ok`` is False the input ended
    before a terminator byte and ``byte_count`` is 0.

    Attributes:
        uint: Value when it fits in 64 bits
        big: Value as words when it does not
        byte_count: Bytes consumed from the input
        ok: True if a terminator byte was found
    """

    uint: int = 0
    big: Optional[BigUInt] = None
    byte_count: int = 0
    ok: bool = False

    @property
    def value(self) -> int:
        """Decoded value regardless of representation."""
        if self.big is not None:
            return int(self.big)
        return self.uint


UNTERMINATED = DecodeResult()
