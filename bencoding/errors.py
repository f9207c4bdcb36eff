# errors.py

"""Exceptions raised by the bencode codec."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    UnexpectedEndOfInput = "UnexpectedEndOfInput"
    InvalidLeadByte = "InvalidLeadByte"
    InvalidIntegerFormat = "InvalidIntegerFormat"
    InvalidLengthPrefix = "InvalidLengthPrefix"
    InvalidDictionaryKeyType = "InvalidDictionaryKeyType"
    UnsortedOrDuplicateKeys = "UnsortedOrDuplicateKeys"
    IntegerOverflow = "IntegerOverflow"      # only with DecoderOptions.integer_bits
    NestingTooDeep = "NestingTooDeep"        # only with DecoderOptions.max_depth
    TrailingData = "TrailingData"            # decode_all


class BencodeError(ValueError):
    """Base class for every error the codec raises on bad data."""


class DecodeError(BencodeError):
    """The input is not valid bencode.

    ``kind`` says what went wrong and ``offset`` is the index of the byte
    where it was detected.
    """

    def __init__(self, kind: ErrorKind, offset: int, detail: str = "") -> None:
        self.kind = kind
        self.offset = offset
        self.detail = detail
        message = f"{kind.value} at offset {offset}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class DuplicateKeyError(BencodeError):
    """A dictionary was built with the same key twice."""

    def __init__(self, key: bytes) -> None:
        self.key = key
        super().__init__(f"Duplicate dictionary key: {key!r}")
