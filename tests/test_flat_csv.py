import pytest

from typedheaders.core import InvalidHeader
from typedheaders.flat_csv import FlatCsv


def test_comma():
    csv = FlatCsv(b"aaa, b; bb, ccc")
    assert list(csv) == ["aaa", "b; bb", "ccc"]


def test_semicolon():
    csv = FlatCsv(b"aaa; b, bb; ccc", separator=";")
    assert list(csv) == ["aaa", "b, bb", "ccc"]


def test_quoted_text():
    csv = FlatCsv(b'foo="bar,baz", sherlock=holmes')
    assert list(csv) == ['foo="bar,baz"', "sherlock=holmes"]


def test_from_values_joins_with_separator_and_space():
    csv = FlatCsv.from_values([b"gzip", b"chunked"])
    assert csv.value == b"gzip, chunked"
    assert list(csv) == ["gzip", "chunked"]


def test_from_values_semicolon():
    csv = FlatCsv.from_values([b"a", b"b"], ";")
    assert csv.value == b"a; b"
    assert list(csv) == ["a", "b"]


def test_from_values_single_is_unchanged():
    assert FlatCsv.from_values([b"trailers"]).value == b"trailers"


def test_from_values_empty():
    csv = FlatCsv.from_values([])
    assert csv.value == b""
    assert list(csv) == [""]


def test_non_ascii_value_iterates_nothing():
    csv = FlatCsv("caf\u00e9")
    assert list(csv) == []


def test_equality_and_hash():
    assert FlatCsv(b"a, b") == FlatCsv.from_values([b"a", b"b"])
    assert hash(FlatCsv(b"x")) == hash(FlatCsv(b"x"))
    assert FlatCsv(b"a") != FlatCsv(b"a", separator=";")


def test_invalid_value_rejected():
    with pytest.raises(InvalidHeader):
        FlatCsv(b"bad\nvalue")


def test_bad_separator():
    with pytest.raises(ValueError):
        FlatCsv(b"a", separator=",;")