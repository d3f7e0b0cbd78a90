"""Basic usage example for uleb128.

This example demonstrates:
1. Encoding fixed-width and arbitrary-precision values
2. Encoding into a caller-owned buffer and retrying when it is too small
3. Decoding, including a value split across two reads
"""

from __future__ import annotations

from uleb128 import decode, encode, encode_into, encoded_size


def main() -> None:
    print("=" * 60)
    print("uleb128 Basic Usage Example")
    print("=" * 60)
    print()

    # 1. Fixed-width value
    value = 104543565
    data = encode(value)
    print(f"1. {value} encodes to {data.hex(' ')} ({len(data)} bytes)")
    print(f"   decodes to {decode(data).uint}")
    print()

    # 2. Arbitrary-precision value
    big = 100000000000000**2
    data = encode(big)
    result = decode(data)
    print(f"2. {big} encodes to {len(data)} bytes")
    print(f"   decoded as {len(result.big.words)} words of {result.big.word_size} bits")
    print(f"   decodes to {result.value}")
    print()

    # 3. Caller-owned buffer
    buffer = bytearray(2)
    result = encode_into(big, buffer)
    print(f"3. 2-byte buffer ok={result.ok}")
    buffer = bytearray(encoded_size(big))
    result = encode_into(big, buffer)
    print(f"   {len(buffer)}-byte buffer ok={result.ok}, wrote {result.byte_count} bytes")
    print()

    # 4. Value split across two reads
    data = encode(value)
    head, tail = data[:2], data[2:]
    partial = decode(head)
    print(f"4. First read {head.hex(' ')}: ok={partial.ok}")
    pre_value = sum((byte & 0x7F) << (7 * i) for i, byte in enumerate(head))
    resumed = decode(tail, pre_value, 7 * len(head))
    print(f"   Resumed with {tail.hex(' ')}: {resumed.uint}")
    print()


if __name__ == "__main__":
    main()
