"""Main CLI entry point for uleb128."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .. import __version__
from ..codec.decoder import decode
from ..codec.encoder import encode
from ..config import CodecConfig
from ..exceptions import Uleb128Error
from ..utils.sizing import encoded_size


def parse_int(text: str) -> int:
    """Parse a decimal, 0x-hex, 0o-octal or 0b-binary integer argument."""
    try:
        return int(text, 0)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from err


def parse_hex(text: str) -> bytes:
    """Parse hex bytes, allowing spaces, colons and an optional 0x prefix."""
    cleaned = text.lower().replace(":", "").replace(" ", "")
    if cleaned.startswith("0x"):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid hex bytes: {text!r}") from err


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uleb128",
        description="uleb128: Unsigned LEB128 variable-length integer codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uleb128 encode 104543565              Print cdeaec31
  uleb128 decode cdeaec31               Print 104543565
  uleb128 size 0xffffffffffffffff       Print 10
  uleb128 --version                     Show version
        """,
    )

    parser.add_argument(
        "--word-size",
        type=int,
        choices=(32, 64),
        default=None,
        help="Machine word size for values over 64 bits (default: platform)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"uleb128 {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    encode_parser = subparsers.add_parser("encode", help="Encode integers to hex bytes")
    encode_parser.add_argument("values", nargs="+", type=parse_int, metavar="VALUE")

    decode_parser = subparsers.add_parser("decode", help="Decode hex bytes to integers")
    decode_parser.add_argument("data", nargs="+", type=parse_hex, metavar="HEX")

    size_parser = subparsers.add_parser("size", help="Print encoded sizes in bytes")
    size_parser.add_argument("values", nargs="+", type=parse_int, metavar="VALUE")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the uleb128 CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = CodecConfig(word_size=args.word_size) if args.word_size else CodecConfig()

    try:
        if args.command == "encode":
            for value in args.values:
                print(encode(value, config).hex())
        elif args.command == "size":
            for value in args.values:
                print(encoded_size(value))
        elif args.command == "decode":
            for data in args.data:
                _print_decoded(data, config)
    except Uleb128Error as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _print_decoded(data: bytes, config: CodecConfig) -> None:
    """Print every value in data, one per line."""
    position = 0
    while position < len(data):
        result = decode(data[position:], config=config)
        if not result.ok:
            raise Uleb128Error(
                f"Unterminated value at byte {position}: {data[position:].hex()}"
            )
        print(result.value)
        position += result.byte_count


if __name__ == "__main__":
    sys.exit(main())
