"""Shared building blocks: the decoding error, the Header base and value helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import ClassVar, TypeVar, Union

T = TypeVar("T")

HeaderValueLike = Union[str, bytes, bytearray, memoryview, int]

_MISSING = object()


class InvalidHeader(ValueError):
    """Raised when header values are malformed or cannot be decoded."""


class Header(ABC):
    """A header that can be decoded from, and encoded to, raw header values."""

    name: ClassVar[str]

    @classmethod
    @abstractmethod
    def decode(cls, values):
        """Build the header from an iterable of raw values; raise InvalidHeader on failure."""

    @abstractmethod
    def encode(self):
        """Return the list of raw values (bytes) that represent this header."""


def _is_valid_value_byte(byte: int) -> bool:
    return byte == 0x09 or (byte >= 0x20 and byte != 0x7F)


def _is_visible_ascii(byte: int) -> bool:
    return byte == 0x09 or 0x20 <= byte < 0x7F


def header_value(value: HeaderValueLike) -> bytes:
    """Validate and normalise a raw header value to bytes.

    Strings are encoded as UTF-8 and integers are written in decimal.
    Control characters other than tab (and DEL) are rejected.
    """
    if isinstance(value, bool):
        raise TypeError("a header value cannot be a bool")
    if isinstance(value, int):
        data = str(value).encode("ascii")
    elif isinstance(value, str):
        data = value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
    else:
        raise TypeError(f"cannot make a header value from {type(value).__name__}")
    if not all(_is_valid_value_byte(byte) for byte in data):
        raise InvalidHeader(f"illegal header value: {data!r}")
    return data


def value_to_str(value: HeaderValueLike) -> str:
    """Return the value as text; only visible ASCII (and tab) is accepted."""
    data = header_value(value)
    if not all(_is_visible_ascii(byte) for byte in data):
        raise InvalidHeader(f"header value is not visible ASCII: {data!r}")
    return data.decode("ascii")


def just_one(values: Iterable[T]) -> T | None:
    """Return the single item of ``values``, or None if there are zero or several."""
    iterator = iter(values)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        return None
    if next(iterator, _MISSING) is not _MISSING:
        return None
    return first