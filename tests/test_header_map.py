import pytest

from typedheaders.core import Header, InvalidHeader, header_value, just_one
from typedheaders.header_map import HeaderMap
from typedheaders.strict_transport_security import StrictTransportSecurity


class Dnt(Header):
    name = "dnt"

    def __init__(self, enabled):
        self.enabled = enabled

    @classmethod
    def decode(cls, values):
        value = just_one(values)
        if value == b"0":
            return cls(False)
        if value == b"1":
            return cls(True)
        raise InvalidHeader("bad dnt")

    def encode(self):
        return [header_value("1" if self.enabled else "0")]


class Pair(Header):
    name = "x-pair"

    def __init__(self, first, second):
        self.first = first
        self.second = second

    @classmethod
    def decode(cls, values):
        items = list(values)
        if len(items) != 2:
            raise InvalidHeader("need two")
        return cls(items[0], items[1])

    def encode(self):
        return [self.first, self.second]


class Nothing(Header):
    name = "x-pair"

    @classmethod
    def decode(cls, values):
        return cls()

    def encode(self):
        return []


def test_typed_round_trip():
    headers = HeaderMap()
    headers.typed_insert(Dnt(True))
    assert headers.get_all("DNT") == [b"1"]
    assert headers.typed_get(Dnt).enabled is True


def test_typed_insert_replaces_existing_values():
    headers = HeaderMap([("dnt", "1"), ("dnt", "1")])
    headers.typed_insert(Dnt(False))
    assert headers.get_all("dnt") == [b"0"]
    assert len(headers) == 1


def test_typed_insert_appends_following_values():
    headers = HeaderMap({"x-pair": "old"})
    headers.typed_insert(Pair(b"a", b"b"))
    assert headers.get_all("x-pair") == [b"a", b"b"]
    got = headers.typed_get(Pair)
    assert (got.first, got.second) == (b"a", b"b")


def test_typed_insert_with_no_values_leaves_map_alone():
    headers = HeaderMap({"x-pair": "keep"})
    headers.typed_insert(Nothing())
    assert headers.get_all("x-pair") == [b"keep"]


def test_typed_get_absent_is_none():
    headers = HeaderMap()
    assert headers.typed_get(Dnt) is None
    assert headers.typed_try_get(Dnt) is None


def test_typed_get_invalid_is_none_but_try_get_raises():
    headers = HeaderMap({"dnt": "maybe"})
    assert headers.typed_get(Dnt) is None
    with pytest.raises(InvalidHeader):
        headers.typed_try_get(Dnt)


def test_typed_with_strict_transport_security():
    headers = HeaderMap()
    sts = StrictTransportSecurity.including_subdomains(31536000)
    headers.typed_insert(sts)
    assert headers.get_all("Strict-Transport-Security") == [b"max-age=31536000; includeSubdomains"]
    assert headers.typed_get(StrictTransportSecurity) == sts


def test_names_are_case_insensitive():
    headers = HeaderMap()
    headers.append("Content-Type", "text/plain")
    assert "content-type" in headers
    assert "CONTENT-TYPE" in headers
    assert headers.get_all("content-TYPE") == [b"text/plain"]
    assert list(headers) == [("content-type", b"text/plain")]


def test_insert_and_remove():
    headers = HeaderMap([("a", "1"), ("a", "2")])
    assert len(headers) == 2
    old = headers.insert("A", "3")
    assert old == [b"1", b"2"]
    assert headers.get_all("a") == [b"3"]
    assert headers.remove("a") == [b"3"]
    assert "a" not in headers
    assert headers.remove("a") == []
    assert len(headers) == 0


def test_invalid_name_and_value_rejected():
    headers = HeaderMap()
    with pytest.raises(InvalidHeader):
        headers.append("bad name", "x")
    with pytest.raises(InvalidHeader):
        headers.append("ok", "line\nbreak")
    assert len(headers) == 0