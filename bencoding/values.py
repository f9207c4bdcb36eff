# values.py

"""
The in-memory model for bencoded data.

A Value is exactly one of four frozen dataclasses: BInteger, BString,
BList or BDict. Values are immutable and hashable, and a BDict always
keeps its entries sorted by raw key bytes, so two dictionaries built from
the same pairs in a different order compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import DuplicateKeyError


def _to_bytes(raw) -> bytes:
    """Coerces text or a bytes-like object to an owned bytes copy."""
    if isinstance(raw, str):
        return raw.encode('utf-8')
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return bytes(raw)
    raise TypeError(f"Expected bytes or str, got {type(raw).__name__}")


def _check_value(item) -> None:
    if not isinstance(item, (BInteger, BString, BList, BDict)):
        raise TypeError(f"Not a bencode value: {item!r}")


@dataclass(frozen=True, slots=True)
class BInteger:
    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but has no place in the format
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"BInteger needs an int, got {type(self.value).__name__}")


@dataclass(frozen=True, slots=True)
class BString:
    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, 'value', _to_bytes(self.value))

    def __len__(self) -> int:
        return len(self.value)


@dataclass(frozen=True, slots=True)
class BList:
    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            _check_value(item)
        object.__setattr__(self, 'items', items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]


@dataclass(frozen=True, slots=True)
class BDict:
    """Read-only mapping from byte-string keys to Values.

    Accepts a mapping or an iterable of (key, value) pairs. Keys may be
    bytes, str or BString. A key that appears twice raises
    DuplicateKeyError.
    """

    entries: tuple[tuple[bytes, Value], ...] = ()

    def __post_init__(self) -> None:
        raw = self.entries
        pairs = raw.items() if hasattr(raw, 'items') else raw

        seen: dict[bytes, Value] = {}
        for key, item in pairs:
            if isinstance(key, BString):
                key = key.value
            key = _to_bytes(key)
            _check_value(item)
            if key in seen:
                raise DuplicateKeyError(key)
            seen[key] = item

        object.__setattr__(self, 'entries', tuple(sorted(seen.items(), key=lambda kv: kv[0])))

    def _lookup(self, key):
        if isinstance(key, BString):
            key = key.value
        elif isinstance(key, str):
            key = key.encode('utf-8')
        for entry_key, item in self.entries:
            if entry_key == key:
                return item
        raise KeyError(key)

    def __getitem__(self, key) -> Value:
        return self._lookup(key)

    def get(self, key, default=None):
        try:
            return self._lookup(key)
        except KeyError:
            return default

    def __contains__(self, key) -> bool:
        try:
            self._lookup(key)
        except KeyError:
            return False
        return True

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return (key for key, _ in self.entries)

    def keys(self) -> list[bytes]:
        return [key for key, _ in self.entries]

    def values(self) -> list[Value]:
        return [item for _, item in self.entries]

    def items(self) -> list[tuple[bytes, Value]]:
        return list(self.entries)


Value = Union[BInteger, BString, BList, BDict]


def from_python(obj) -> Value:
    """Wraps native Python data (int, bytes, str, list, tuple, dict) into a Value."""
    if isinstance(obj, (BInteger, BString, BList, BDict)):
        return obj
    if isinstance(obj, bool):
        raise TypeError("Cannot bencode a bool")
    if isinstance(obj, int):
        return BInteger(obj)
    if isinstance(obj, (bytes, bytearray, memoryview, str)):
        return BString(obj)
    if isinstance(obj, (list, tuple)):
        return BList(tuple(from_python(item) for item in obj))
    if isinstance(obj, dict):
        return BDict([(key, from_python(item)) for key, item in obj.items()])
    raise TypeError(f"Unsupported type for bencoding: {type(obj).__name__}")


def to_python(value: Value):
    """Unwraps a Value into int, bytes, list and dict (with bytes keys)."""
    if isinstance(value, BInteger):
        return value.value
    elif isinstance(value, BString):
        return value.value
    elif isinstance(value, BList):
        return [to_python(item) for item in value.items]
    elif isinstance(value, BDict):
        return {key: to_python(item) for key, item in value.entries}
    else:
        raise TypeError(f"Not a bencode value: {value!r}")
