"""A header value that is also valid text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .core import HeaderValueLike, InvalidHeader, header_value, just_one, value_to_str


@dataclass(frozen=True, order=True, repr=False)
class HeaderValueString:
    """A raw header value known to be valid UTF-8 text."""

    value: bytes

    def __post_init__(self) -> None:
        data = header_value(self.value)
        try:
            data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise InvalidHeader("header value is not UTF-8 text") from err
        object.__setattr__(self, "value", data)

    @classmethod
    def parse(cls, src: str) -> HeaderValueString:
        """Build from text; raise InvalidHeader if it is not a legal header value."""
        return cls(header_value(src))

    @classmethod
    def from_value(cls, value: HeaderValueLike) -> HeaderValueString:
        """Build from a raw value that must be visible ASCII."""
        value_to_str(value)
        return cls(header_value(value))

    @classmethod
    def from_values(cls, values: Iterable[HeaderValueLike]) -> HeaderValueString:
        """Build from exactly one raw value."""
        one = just_one(values)
        if one is None:
            raise InvalidHeader("expected exactly one value")
        return cls.from_value(one)

    def to_value(self) -> bytes:
        """Return the raw header value."""
        return self.value

    def __str__(self) -> str:
        return self.value.decode("utf-8")

    def __repr__(self) -> str:
        return repr(str(self))