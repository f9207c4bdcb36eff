# cli.py

"""
Command line front end for the codec.

    bencoding dump FILE     pretty-print the decoded value tree
    bencoding check FILE    verify FILE is a single canonical value
    bencoding json FILE     print the decoded value as JSON

FILE may be ``-`` to read standard input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .config import DecoderOptions
from .decoder import decode_all
from .digits import int_to_ascii
from .encoder import encode
from .errors import BencodeError
from .values import BDict, BInteger, BList, BString, Value

logger = logging.getLogger(__name__)

# Byte strings longer than this are shortened in dump output
_HEX_PREVIEW = 32

# json prints ints with str(), which stops at 4300 digits
_JSON_MAX_INT_BITS = 13000


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _as_text(raw: bytes) -> str | None:
    """Returns *raw* as text when it is valid UTF-8, else None."""
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError:
        return None


def _fmt_bytes(raw: bytes) -> str:
    text = _as_text(raw)
    if text is not None:
        return json.dumps(text, ensure_ascii=False)
    preview = raw[:_HEX_PREVIEW].hex()
    if len(raw) > _HEX_PREVIEW:
        preview += "..."
    return f"<{len(raw)} bytes> {preview}"


def _fmt_key(raw: bytes) -> str:
    text = _as_text(raw)
    if text is None:
        return "hex:" + raw.hex()
    return text if text.isprintable() else json.dumps(text, ensure_ascii=False)


def format_value(value: Value, indent: int = 0) -> str:
    """Pretty-print a value tree, one scalar or key per line."""
    pad = "  " * indent
    if isinstance(value, BInteger):
        return int_to_ascii(value.value).decode('ascii')
    if isinstance(value, BString):
        return _fmt_bytes(value.value)
    if isinstance(value, BList):
        if not value.items:
            return "list []"
        lines = ["list ["]
        for item in value.items:
            lines.append(f"{pad}  {format_value(item, indent + 1)}")
        lines.append(f"{pad}]")
        return "\n".join(lines)
    if isinstance(value, BDict):
        if not value.entries:
            return "dict {}"
        lines = ["dict {"]
        for key, item in value.entries:
            lines.append(f"{pad}  {_fmt_key(key)}: {format_value(item, indent + 1)}")
        lines.append(f"{pad}}}")
        return "\n".join(lines)
    raise TypeError(f"Not a bencode value: {value!r}")


def _json_text(raw: bytes) -> str:
    text = _as_text(raw)
    return text if text is not None else "hex:" + raw.hex()


def to_json_compatible(value: Value):
    """Converts a value to JSON types; non-UTF-8 byte strings become ``hex:...``.

    Raises BencodeError when two keys of a dictionary map to the same JSON
    key, or an integer is too long for the json module to print.
    """
    if isinstance(value, BInteger):
        if value.value.bit_length() > _JSON_MAX_INT_BITS:
            raise BencodeError(f"integer of {value.value.bit_length()} bits is too large for JSON")
        return value.value
    if isinstance(value, BString):
        return _json_text(value.value)
    if isinstance(value, BList):
        return [to_json_compatible(item) for item in value.items]
    if isinstance(value, BDict):
        converted = {}
        for key, item in value.entries:
            json_key = _json_text(key)
            if json_key in converted:
                raise BencodeError(f"keys {key!r} and another key both map to JSON key {json_key!r}")
            converted[json_key] = to_json_compatible(item)
        return converted
    raise TypeError(f"Not a bencode value: {value!r}")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, 'rb') as f:
        return f.read()


def _format_json(value: Value) -> str:
    return json.dumps(to_json_compatible(value), indent=2, ensure_ascii=False)


def check_canonical(value: Value, data: bytes) -> None:
    """Raises BencodeError unless *data* is exactly the encoding of *value*."""
    reencoded = encode(value)
    if reencoded != data:
        offset = next(
            (i for i, (a, b) in enumerate(zip(reencoded, data)) if a != b),
            min(len(reencoded), len(data)),
        )
        raise BencodeError(f"not canonical: re-encoding differs at offset {offset}")


_FORMATTERS = {
    "dump": format_value,
    "json": _format_json,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bencoding", description="Inspect bencoded files.")
    parser.add_argument("command", choices=["check", "dump", "json"])
    parser.add_argument("file", help="bencoded file, or - for stdin")
    parser.add_argument("--lenient", action="store_true",
                        help="accept dictionary keys in any order")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="reject lists/dicts nested deeper than this")
    parser.add_argument("--integer-bits", type=int, default=None,
                        help="reject integers wider than this many bits (signed)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


## helper function to write to stderr and fail
def _error(message: str) -> int:
    sys.stderr.write("Error: " + message + "\n")
    return 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        options = DecoderOptions(
            strict_key_order=not args.lenient,
            integer_bits=args.integer_bits,
            max_depth=args.max_depth,
        )
    except ValueError as e:
        return _error(str(e))

    try:
        data = _read_input(args.file)
    except OSError as e:
        return _error(f"Could not read {args.file} - {e}")
    logger.debug("Read %d bytes from %s", len(data), args.file)

    try:
        value = decode_all(data, options)
        if args.command == "check":
            check_canonical(value, data)
            output = "ok"
        else:
            output = _FORMATTERS[args.command](value)
    except BencodeError as e:
        return _error(f"{args.file}: {e}")

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
