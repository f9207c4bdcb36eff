# decoder.py

"""
Recursive-descent decoder for bencode.

Each production has its own function taking the buffer and the offset of
its first byte and returning ``(value, end)``, where ``end`` is the offset
just past what it consumed. Any malformed input raises DecodeError with the
offset of the offending byte; there is no partial result.
"""

from __future__ import annotations

import logging

from .config import DEFAULT_OPTIONS, DecoderOptions
from .digits import ascii_to_int
from .errors import DecodeError, ErrorKind
from .values import BDict, BInteger, BList, BString, Value, to_python

logger = logging.getLogger(__name__)


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        raise TypeError("Bencoded data must be bytes, not str")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Bencoded data must be bytes-like, got {type(data).__name__}")
    return bytes(data)


def _end_of_input(data, what):
    return DecodeError(ErrorKind.UnexpectedEndOfInput, len(data), what)


def decode_int(bencoded_bytes, start, options=DEFAULT_OPTIONS):
    """Decodes a bencoded integer."""
    pos = start + 1  # Skip 'i'
    negative = bencoded_bytes[pos:pos+1] == b'-'
    if negative:
        pos += 1

    digits_start = pos
    while bencoded_bytes[pos:pos+1].isdigit():
        pos += 1
    digits = bencoded_bytes[digits_start:pos]

    if not digits:
        if pos >= len(bencoded_bytes):
            raise _end_of_input(bencoded_bytes, "input ends inside an integer")
        raise DecodeError(ErrorKind.InvalidIntegerFormat, pos,
                          f"expected a digit, found {bencoded_bytes[pos:pos+1]!r}")
    if len(digits) > 1 and digits[:1] == b'0':
        raise DecodeError(ErrorKind.InvalidIntegerFormat, digits_start, "leading zero in integer")
    if negative and digits == b'0':
        raise DecodeError(ErrorKind.InvalidIntegerFormat, start + 1, "negative zero")

    terminator = bencoded_bytes[pos:pos+1]
    if terminator != b'e':
        if not terminator:
            raise _end_of_input(bencoded_bytes, "integer missing terminating 'e'")
        raise DecodeError(ErrorKind.InvalidIntegerFormat, pos,
                          f"unexpected byte {terminator!r} in integer")

    val = ascii_to_int(digits)
    if negative:
        val = -val

    bounds = options.integer_range()
    if bounds is not None and not bounds[0] <= val <= bounds[1]:
        raise DecodeError(ErrorKind.IntegerOverflow, start,
                          f"{val} does not fit in {options.integer_bits} bits")
    return BInteger(val), pos + 1


def decode_string(bencoded_bytes, start):
    """Decodes a bencoded string."""
    pos = start
    while bencoded_bytes[pos:pos+1].isdigit():
        pos += 1
    length_digits = bencoded_bytes[start:pos]

    if len(length_digits) > 1 and length_digits[:1] == b'0':
        raise DecodeError(ErrorKind.InvalidLengthPrefix, start, "leading zero in string length")

    separator = bencoded_bytes[pos:pos+1]
    if separator != b':':
        if not separator:
            raise _end_of_input(bencoded_bytes, "input ends inside a string length")
        raise DecodeError(ErrorKind.InvalidLengthPrefix, pos,
                          f"expected ':' after string length, found {separator!r}")

    string_start = pos + 1
    available = len(bencoded_bytes) - string_start
    # A prefix with more digits than the buffer size has can never be satisfied
    if len(length_digits) > len(str(len(bencoded_bytes))):
        raise _end_of_input(bencoded_bytes, f"string length {length_digits[:20]!r}... exceeds input")
    length = int(length_digits)
    if length > available:
        raise _end_of_input(bencoded_bytes, f"string needs {length} bytes, {available} left")

    string_end = string_start + length
    return BString(bencoded_bytes[string_start:string_end]), string_end


def _enter(start, options, depth):
    if options.max_depth is not None and depth > options.max_depth:
        raise DecodeError(ErrorKind.NestingTooDeep, start,
                          f"nesting exceeds max_depth={options.max_depth}")


def decode_list(bencoded_bytes, start, options=DEFAULT_OPTIONS, depth=1):
    """Decodes a bencoded list."""
    _enter(start, options, depth)
    decoded_list = []
    current_pos = start + 1  # Skip 'l'
    while True:
        token = bencoded_bytes[current_pos:current_pos+1]
        if not token:
            raise _end_of_input(bencoded_bytes, "list missing terminating 'e'")
        if token == b'e':
            break
        val, current_pos = decode_value(bencoded_bytes, current_pos, options, depth)
        decoded_list.append(val)
    return BList(tuple(decoded_list)), current_pos + 1  # Skip 'e'


def decode_dict(bencoded_bytes, start, options=DEFAULT_OPTIONS, depth=1):
    """Decodes a bencoded dictionary, checking key order as *options* require."""
    _enter(start, options, depth)
    pairs = []
    seen = set()
    previous_key = None
    current_pos = start + 1  # Skip 'd'
    while True:
        token = bencoded_bytes[current_pos:current_pos+1]
        if not token:
            raise _end_of_input(bencoded_bytes, "dictionary missing terminating 'e'")
        if token == b'e':
            break
        if not token.isdigit():
            raise DecodeError(ErrorKind.InvalidDictionaryKeyType, current_pos,
                              f"dictionary key must be a string, found {token!r}")

        key_pos = current_pos
        key, key_end = decode_string(bencoded_bytes, key_pos)
        if key.value in seen:
            raise DecodeError(ErrorKind.UnsortedOrDuplicateKeys, key_pos,
                              f"duplicate key {key.value!r}")
        if previous_key is not None and key.value < previous_key:
            if options.strict_key_order:
                raise DecodeError(ErrorKind.UnsortedOrDuplicateKeys, key_pos,
                                  f"key {key.value!r} sorts before {previous_key!r}")
            logger.debug("Accepting out-of-order key %r at offset %d", key.value, key_pos)

        value, current_pos = decode_value(bencoded_bytes, key_end, options, depth)
        pairs.append((key.value, value))
        seen.add(key.value)
        previous_key = key.value
    return BDict(pairs), current_pos + 1  # Skip 'e'


def decode_value(bencoded_bytes, start, options=DEFAULT_OPTIONS, depth=0):
    """Determines the type of bencoded value and calls the appropriate decoder."""
    prefix = bencoded_bytes[start:start+1]
    if prefix == b'i':
        return decode_int(bencoded_bytes, start, options)
    elif prefix.isdigit():
        return decode_string(bencoded_bytes, start)
    elif prefix in (b'l', b'd'):
        decode_container = decode_list if prefix == b'l' else decode_dict
        try:
            return decode_container(bencoded_bytes, start, options, depth + 1)
        except RecursionError:
            # the innermost frames may fail again while building the error;
            # a shallower container then reports it
            raise DecodeError(ErrorKind.NestingTooDeep, start,
                              "nesting exceeds the interpreter recursion limit") from None
    elif not prefix:
        raise _end_of_input(bencoded_bytes, "expected a value")
    else:
        raise DecodeError(ErrorKind.InvalidLeadByte, start, f"unknown type prefix {prefix!r}")


def decode(bencoded_bytes, options: DecoderOptions | None = None) -> tuple[Value, int]:
    """Decodes one value from the start of the buffer.

    Returns the value and the number of bytes it took up. Anything after
    it is ignored; use decode_all() to insist on a single value.
    """
    data = _as_bytes(bencoded_bytes)
    try:
        return decode_value(data, 0, options or DEFAULT_OPTIONS)
    except DecodeError as err:
        logger.debug("Decode failed: %s", err)
        raise


def decode_all(bencoded_bytes, options: DecoderOptions | None = None) -> Value:
    """Decodes a buffer that must hold exactly one value."""
    data = _as_bytes(bencoded_bytes)
    value, consumed = decode(data, options)
    if consumed != len(data):
        err = DecodeError(ErrorKind.TrailingData, consumed,
                          f"{len(data) - consumed} bytes after the value")
        logger.debug("Decode failed: %s", err)
        raise err
    return value


def bdecode(bencoded_bytes, options: DecoderOptions | None = None):
    """Main function to decode bencoded bytes into native Python data."""
    return to_python(decode_all(bencoded_bytes, options))
