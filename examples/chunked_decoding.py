"""Chunked decoding example for uleb128.

Values arriving over a socket or serial link rarely line up with read
boundaries. ChunkedDecoder keeps the bits of an unfinished value between
reads and hands back every value a chunk completes.
"""

from __future__ import annotations

import random

from uleb128 import ChunkedDecoder, encode


def main() -> None:
    values = [0, 1, 300, 2**32, 2**64 - 1, 2**64, 3**150]
    stream = b"".join(encode(value) for value in values)
    print(f"Sending {len(values)} values in {len(stream)} bytes")

    rng = random.Random(7)
    decoder = ChunkedDecoder()
    position = 0
    while position < len(stream):
        size = rng.randint(1, 6)
        chunk = stream[position : position + size]
        position += size
        for result in decoder.feed(chunk):
            kind = "big" if result.big is not None else "uint"
            print(f"  {chunk.hex(' '):<20} -> {kind:>4} {result.value}")

    print(f"Partial value left over: {decoder.has_partial()}")


if __name__ == "__main__":
    main()
