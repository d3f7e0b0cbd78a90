"""Codec configuration.

The only platform-dependent behavior of the codec is the machine word size
used for arbitrary-precision values. It is chosen once at import time from the
running interpreter and can be overridden per call, so both word sizes can be
exercised on any host.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .codec.words import SUPPORTED_WORD_SIZES, platform_word_size


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for the ULEB128 codec.

    Attributes:
        word_size: Machine word width in bits used for arbitrary-precision
            values (default: the interpreter's pointer width).
            - 64: words are split into 32-bit halves
            - 32: words are split into 16-bit halves
            The encoded bytes never depend on this setting; only the shape of
            decoded BigUInt results and the encoder tables do.

    Examples:
        ```python
        from uleb128 import CodecConfig, decode, encode

        config = CodecConfig(word_size=32)
        data = encode(2**100, config=config)
        result = decode(data, config=config)
        assert result.big.word_size == 32
        ```
    """

    word_size: int = field(default_factory=platform_word_size)

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.word_size not in SUPPORTED_WORD_SIZES:
            raise ValueError(f"word_size must be 32 or 64, got {self.word_size}")


DEFAULT_CONFIG = CodecConfig()
