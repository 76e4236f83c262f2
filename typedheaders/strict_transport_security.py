"""The Strict-Transport-Security header (HSTS)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

from .core import Header, HeaderValueLike, InvalidHeader, header_value, just_one, value_to_str
from .seconds import seconds_from_value, seconds_to_value


def _as_seconds(max_age: int | timedelta) -> int:
    return int(seconds_to_value(max_age).decode("ascii"))


def _eq_ignore_ascii_case(text: str, expected: str) -> bool:
    return text.isascii() and text.lower() == expected.lower()


@dataclass(frozen=True)
class StrictTransportSecurity(Header):
    """HSTS policy: a max-age in whole seconds and whether subdomains are included."""

    name: ClassVar[str] = "strict-transport-security"

    include_subdomains: bool
    max_age: int

    @classmethod
    def including_subdomains(cls, max_age: int | timedelta) -> StrictTransportSecurity:
        """A policy that also covers subdomains."""
        return cls(include_subdomains=True, max_age=_as_seconds(max_age))

    @classmethod
    def excluding_subdomains(cls, max_age: int | timedelta) -> StrictTransportSecurity:
        """A policy that covers only this host."""
        return cls(include_subdomains=False, max_age=_as_seconds(max_age))

    @property
    def max_age_delta(self) -> timedelta:
        """The max-age as a timedelta."""
        return timedelta(seconds=self.max_age)

    @classmethod
    def parse(cls, s: str) -> StrictTransportSecurity:
        """Parse the directive list; raise InvalidHeader if it is malformed."""
        max_age: int | None = None
        include = False
        for directive in (part.strip() for part in s.split(";")):
            if _eq_ignore_ascii_case(directive, "includeSubdomains"):
                if include:
                    raise InvalidHeader("duplicate includeSubdomains directive")
                include = True
                continue
            left, sep, right = directive.partition("=")
            if not sep or not _eq_ignore_ascii_case(left.strip(), "max-age"):
                continue
            age = seconds_from_value(right.strip().strip('"'))
            if age is None:
                raise InvalidHeader(f"invalid max-age: {right!r}")
            if max_age is not None:
                raise InvalidHeader("duplicate max-age directive")
            max_age = age
        if max_age is None:
            raise InvalidHeader("missing max-age directive")
        return cls(include_subdomains=include, max_age=max_age)

    @classmethod
    def decode(cls, values: Iterable[HeaderValueLike]) -> StrictTransportSecurity:
        """Decode exactly one raw value."""
        one = just_one(values)
        if one is None:
            raise InvalidHeader("expected exactly one Strict-Transport-Security value")
        return cls.parse(value_to_str(one))

    def encode(self) -> list[bytes]:
        """Return the single raw value for this policy."""
        text = f"max-age={self.max_age}"
        if self.include_subdomains:
            text += "; includeSubdomains"
        return [header_value(text)]