# __init__.py

"""bencoding: canonical Bencode encoder and decoder."""

from .config import DecoderOptions
from .decoder import bdecode, decode, decode_all
from .encoder import bencode, encode
from .errors import BencodeError, DecodeError, DuplicateKeyError, ErrorKind
from .values import (
    BDict,
    BInteger,
    BList,
    BString,
    Value,
    from_python,
    to_python,
)

__all__ = [
    "encode",
    "bencode",
    "decode",
    "decode_all",
    "bdecode",
    "DecoderOptions",
    "Value",
    "BInteger",
    "BString",
    "BList",
    "BDict",
    "from_python",
    "to_python",
    "ErrorKind",
    "BencodeError",
    "DecodeError",
    "DuplicateKeyError",
]
