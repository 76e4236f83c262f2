"""Typed forms of the TE, Transfer-Encoding, Upgrade, User-Agent and Vary headers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from .core import Header, HeaderValueLike, InvalidHeader, header_value, value_to_str
from .flat_csv import FlatCsv
from .value_string import HeaderValueString


class InvalidUserAgent(InvalidHeader):
    """Raised when text is not a legal User-Agent value."""


@dataclass(frozen=True)
class Te(Header):
    """The TE request header: acceptable transfer codings besides chunked."""

    name: ClassVar[str] = "te"

    csv: FlatCsv

    @classmethod
    def trailers(cls) -> Te:
        """A ``TE: trailers`` header."""
        return cls(FlatCsv(b"trailers"))

    @classmethod
    def decode(cls, values: Iterable[HeaderValueLike]) -> Te:
        """Join all raw values into one comma-separated list."""
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[bytes]:
        """Return the single raw value."""
        return [self.csv.value]


@dataclass(frozen=True)
class TransferEncoding(Header):
    """The Transfer-Encoding header: codings applied to the payload body."""

    name: ClassVar[str] = "transfer-encoding"

    csv: FlatCsv

    @classmethod
    def chunked(cls) -> TransferEncoding:
        """The common ``Transfer-Encoding: chunked``."""
        return cls(FlatCsv(b"chunked"))

    def is_chunked(self) -> bool:
        """Whether the last coding in the list is ``chunked``."""
        try:
            text = value_to_str(self.csv.value)
        except InvalidHeader:
            return False
        return text.split(",")[-1].strip() == "chunked"

    @classmethod
    def decode(cls, values: Iterable[HeaderValueLike]) -> TransferEncoding:
        """Join all raw values into one comma-separated list."""
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[bytes]:
        """Return the single raw value."""
        return [self.csv.value]


@dataclass(frozen=True)
class Upgrade(Header):
    """The Upgrade header: protocols to switch to on this connection."""

    name: ClassVar[str] = "upgrade"

    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", header_value(self.value))

    @classmethod
    def websocket(cls) -> Upgrade:
        """An ``Upgrade: websocket`` header."""
        return cls(b"websocket")

    @classmethod
    def decode(cls, values: Iterable[HeaderValueLike]) -> Upgrade:
        """Take the first raw value; raise InvalidHeader if there is none."""
        first = next(iter(values), None)
        if first is None:
            raise InvalidHeader("expected an Upgrade value")
        return cls(header_value(first))

    def encode(self) -> list[bytes]:
        """Return the single raw value."""
        return [self.value]


@dataclass(frozen=True, order=True)
class UserAgent(Header):
    """The User-Agent header, kept as unsplit text."""

    name: ClassVar[str] = "user-agent"

    value: HeaderValueString

    @classmethod
    def parse(cls, src: str) -> UserAgent:
        """Build from text; raise InvalidUserAgent if it is not a legal value."""
        try:
            return cls(HeaderValueString.parse(src))
        except InvalidHeader as err:
            raise InvalidUserAgent(f"invalid User-Agent: {src!r}") from err

    def as_str(self) -> str:
        """Return the value as text."""
        return str(self.value)

    def __str__(self) -> str:
        return self.as_str()

    @classmethod
    def decode(cls, values: Iterable[HeaderValueLike]) -> UserAgent:
        """Decode exactly one visible-ASCII raw value."""
        return cls(HeaderValueString.from_values(values))

    def encode(self) -> list[bytes]:
        """Return the single raw value."""
        return [self.value.to_value()]


@dataclass(frozen=True)
class Vary(Header):
    """The Vary header: ``*`` or a list of request header names."""

    name: ClassVar[str] = "vary"

    csv: FlatCsv

    @classmethod
    def any(cls) -> Vary:
        """A ``Vary: *`` header."""
        return cls(FlatCsv(b"*"))

    def is_any(self) -> bool:
        """Whether the list includes ``*``."""
        return any(item == "*" for item in self.csv)

    def iter_strs(self) -> Iterator[str]:
        """Iterate the header names listed."""
        return iter(self.csv)

    @classmethod
    def decode(cls, values: Iterable[HeaderValueLike]) -> Vary:
        """Join all raw values into one comma-separated list."""
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[bytes]:
        """Return the single raw value."""
        return [self.csv.value]