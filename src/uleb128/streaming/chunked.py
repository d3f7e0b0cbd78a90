"""Incremental decoding of values arriving in arbitrary chunks."""

from __future__ import annotations

from typing import Optional

from ..codec.decoder import decode
from ..codec.results import DecodeResult
from ..config import CodecConfig
from ..models.continuation import MAX_CONTINUATION_BITS, ContinuationState


class ChunkedDecoder:
    """Decodes a sequence of ULEB128 values from split input.

    Bytes of an unfinished value are folded into a ContinuationState while
    they fit in 64 bits, so a retry only re-reads what did not fit. Wider
    values keep their remaining bytes pending until the terminator arrives.

    Example:
        >>> decoder = ChunkedDecoder()
        >>> decoder.feed(b"\\xcd\\xea")
        []
        >>> [r.uint for r in decoder.feed(b"\\xec\\x31\\x05")]
        [104543565, 5]
    """

    def __init__(self, config: Optional[CodecConfig] = None) -> None:
        """Initialize an empty decoder.

        Args:
            config: Codec configuration passed to every decode call
        """
        self._config = config
        self._state = ContinuationState()
        self._pending = bytearray()

    def feed(self, chunk: bytes) -> list[DecodeResult]:
        """Consume a chunk and return every value it completes.

        Args:
            chunk: Next bytes from the source

        Returns:
            Decode results in stream order (possibly empty)
        """
        data = self._pending + chunk
        self._pending = bytearray()
        results = []
        position = 0

        while position < len(data):
            view = memoryview(data)[position:]
            result = decode(
                view, self._state.pre_value, self._state.bit_count, config=self._config
            )
            if not result.ok:
                self._stash(bytes(view))
                break
            results.append(result)
            position += result.byte_count
            self._state = ContinuationState()

        return results

    def has_partial(self) -> bool:
        """Return True if a value has started but not terminated."""
        return self._state.bit_count > 0 or bool(self._pending)

    def reset(self) -> None:
        """Drop any partially decoded value."""
        self._state = ContinuationState()
        self._pending = bytearray()

    def _stash(self, data: bytes) -> None:
        room = (MAX_CONTINUATION_BITS - self._state.bit_count) // 7
        folded = data[:room]
        if folded:
            self._state = self._state.extend(folded)
        self._pending = bytearray(data[room:])
