# encoder.py

"""
Serializes Values into canonical bencode.

Dictionary keys are always written in ascending byte order and integers
in plain decimal, so a given logical value has exactly one encoding.
Nested lists and dicts are walked with an explicit stack, so nesting depth
is not limited by the interpreter's recursion limit.
"""

from .digits import int_to_ascii
from .values import BDict, BInteger, BList, BString, from_python


def _string_token(raw):
    return str(len(raw)).encode('ascii') + b':' + raw


def encode(value):
    """Encodes a Value into bencoded bytes."""
    if not isinstance(value, (BInteger, BString, BList, BDict)):
        raise TypeError(f"Unsupported type for bencoding: {type(value).__name__}")
    out = bytearray()
    # holds Values still to encode and raw bytes still to write
    pending = [value]
    while pending:
        item = pending.pop()
        if isinstance(item, bytes):
            out += item
        elif isinstance(item, BInteger):
            out += b'i' + int_to_ascii(item.value) + b'e'
        elif isinstance(item, BString):
            out += _string_token(item.value)
        elif isinstance(item, BList):
            out += b'l'
            pending.append(b'e')
            pending.extend(reversed(item.items))
        else:
            out += b'd'
            pending.append(b'e')
            # entries are stored sorted by key already
            for key, entry in reversed(item.entries):
                pending.append(entry)
                pending.append(_string_token(key))
    return bytes(out)


def bencode(obj):
    """Encodes native Python data (int, bytes, str, list, dict) into bencoded bytes."""
    return encode(from_python(obj))
