import pytest

from typedheaders.core import (
    Header,
    InvalidHeader,
    header_value,
    just_one,
    value_to_str,
)


class Dnt(Header):
    name = "dnt"

    def __init__(self, enabled):
        self.enabled = enabled

    @classmethod
    def decode(cls, values):
        value = next(iter(values), None)
        if value == b"0":
            return cls(False)
        if value == b"1":
            return cls(True)
        raise InvalidHeader("bad dnt")

    def encode(self):
        return [header_value("1" if self.enabled else "0")]


def test_header_value_from_str_keeps_text():
    assert header_value("max-age=31536000") == b"max-age=31536000"


def test_header_value_from_bytes_is_unchanged():
    assert header_value(b"gzip, chunked") == b"gzip, chunked"


def test_header_value_from_int():
    assert header_value(31536000) == str(31536000).encode()


def test_header_value_allows_tab_and_obs_text():
    raw = b"a\tb\x80"
    assert header_value(raw) == raw


@pytest.mark.parametrize("raw", [b"a\nb", b"a\rb", b"\x00", b"\x7f"])
def test_header_value_rejects_control_characters(raw):
    with pytest.raises(InvalidHeader):
        header_value(raw)


def test_invalid_header_is_a_value_error():
    with pytest.raises(ValueError):
        header_value("line\nbreak")


def test_header_value_rejects_other_types():
    with pytest.raises(TypeError):
        header_value(1.5)


def test_value_to_str_ascii():
    assert value_to_str(b"hello world") == "hello world"


def test_value_to_str_rejects_non_ascii():
    with pytest.raises(InvalidHeader):
        value_to_str("caf\u00e9".encode("utf-8"))


def test_just_one_empty():
    assert just_one([]) is None


def test_just_one_single():
    assert just_one([b"a"]) == b"a"


def test_just_one_many():
    assert just_one([b"a", b"b"]) is None


def test_just_one_on_generator():
    assert just_one(x for x in [b"only"]) == b"only"


def test_header_is_abstract():
    with pytest.raises(TypeError):
        Header()


@pytest.mark.parametrize("enabled", [True, False])
def test_custom_header_round_trip(enabled):
    encoded = Dnt(enabled).encode()
    assert just_one(encoded) == (b"1" if enabled else b"0")
    decoded = Dnt.decode([header_value("1" if enabled else "0")])
    assert decoded.enabled is enabled


def test_custom_header_rejects_bad_value():
    with pytest.raises(InvalidHeader):
        Dnt.decode([header_value("maybe")])