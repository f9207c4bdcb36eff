"""Tests for bencoding.values."""

import pytest

from bencoding import (
    BDict,
    BInteger,
    BList,
    BString,
    DuplicateKeyError,
    from_python,
    to_python,
)


class TestBInteger:
    def test_holds_int(self):
        assert BInteger(3).value == 3

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            BInteger(True)

    def test_rejects_float(self):
        with pytest.raises(TypeError):
            BInteger(1.5)

    def test_immutable(self):
        n = BInteger(1)
        with pytest.raises(AttributeError):
            n.value = 2


class TestBString:
    def test_str_is_utf8_encoded(self):
        assert BString("spam") == BString(b"spam")
        assert BString("é").value == b"\xc3\xa9"

    def test_bytearray_is_copied(self):
        buf = bytearray(b"abc")
        s = BString(buf)
        buf[0] = ord("x")
        assert s.value == b"abc"
        assert isinstance(s.value, bytes)

    def test_empty_is_valid(self):
        assert len(BString(b"")) == 0

    def test_rejects_int(self):
        with pytest.raises(TypeError):
            BString(5)


class TestBList:
    def test_list_frozen_to_tuple(self):
        lst = BList([BInteger(1), BInteger(2)])
        assert lst.items == (BInteger(1), BInteger(2))
        assert list(lst) == [BInteger(1), BInteger(2)]
        assert lst[1] == BInteger(2)

    def test_rejects_native_items(self):
        with pytest.raises(TypeError):
            BList([1, 2])

    def test_hashable(self):
        assert hash(BList([BString(b"a")])) == hash(BList([BString(b"a")]))


class TestBDict:
    def test_entries_sorted(self):
        d = BDict({b"spam": BString(b"eggs"), b"cow": BString(b"moo")})
        assert d.keys() == [b"cow", b"spam"]

    def test_insertion_order_irrelevant(self):
        a = BDict([(b"b", BInteger(1)), (b"a", BInteger(2))])
        b = BDict([(b"a", BInteger(2)), (b"b", BInteger(1))])
        assert a == b
        assert hash(a) == hash(b)

    def test_duplicate_keys_rejected(self):
        with pytest.raises(DuplicateKeyError) as exc_info:
            BDict([(b"a", BInteger(1)), (b"a", BInteger(2))])
        assert exc_info.value.key == b"a"

    def test_str_and_bstring_keys_collide(self):
        with pytest.raises(DuplicateKeyError):
            BDict([("a", BInteger(1)), (BString(b"a"), BInteger(2))])

    def test_mapping_access(self):
        d = BDict({"cow": BString(b"moo")})
        assert d[b"cow"] == BString(b"moo")
        assert d["cow"] == BString(b"moo")
        assert "cow" in d
        assert b"pig" not in d
        assert d.get("pig") is None
        assert len(d) == 1
        assert list(d) == [b"cow"]
        assert d.items() == [(b"cow", BString(b"moo"))]

    def test_missing_key(self):
        with pytest.raises(KeyError):
            BDict()[b"nope"]

    def test_byte_order_not_text_order(self):
        d = BDict({b"a": BInteger(1), b"B": BInteger(2), b"\xff": BInteger(3)})
        assert d.keys() == [b"B", b"a", b"\xff"]


class TestNativeConversion:
    def test_from_python_nested(self):
        value = from_python({"list": [1, b"x", "y"], "n": -4})
        assert value == BDict({
            b"list": BList([BInteger(1), BString(b"x"), BString(b"y")]),
            b"n": BInteger(-4),
        })

    def test_from_python_passes_values_through(self):
        v = BInteger(7)
        assert from_python(v) is v

    @pytest.mark.parametrize("obj", [1.0, None, True, {1, 2}])
    def test_from_python_rejects(self, obj):
        with pytest.raises(TypeError):
            from_python(obj)

    def test_to_python(self):
        value = BDict({b"a": BList([BInteger(1), BString(b"z")])})
        assert to_python(value) == {b"a": [1, b"z"]}

    def test_to_python_rejects_native(self):
        with pytest.raises(TypeError):
            to_python([1])
