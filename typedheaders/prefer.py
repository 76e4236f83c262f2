"""The Prefer and Preference-Applied headers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .core import Header, HeaderValueLike, InvalidHeader, header_value
from .csv_util import fmt_comma_delimited, from_comma_delimited

_U32_MAX = 2**32 - 1
_U32_RE = re.compile(r"\+?[0-9]+", re.ASCII)


def _parse_u32(text: str) -> int:
    if not _U32_RE.fullmatch(text):
        raise InvalidHeader(f"not an unsigned number: {text!r}")
    number = int(text)
    if number > _U32_MAX:
        raise InvalidHeader(f"number out of range: {text!r}")
    return number


def _split_param(part: str) -> tuple[str, str]:
    name, sep, value = part.partition("=")
    if not sep:
        return name.strip(), ""
    return name.strip(), value.strip().strip('"')


_EXACT = {
    ("respond-async", ""),
    ("return", "representation"),
    ("return", "minimal"),
    ("handling", "strict"),
    ("handling", "lenient"),
}


@dataclass(frozen=True)
class Preference:
    """One preference: a name, an optional value and optional parameters.

    An empty value means the preference has none.
    """

    name: str
    value: str = ""
    params: tuple[tuple[str, str], ...] = ()

    RESPOND_ASYNC: ClassVar[Preference]
    RETURN_REPRESENTATION: ClassVar[Preference]
    RETURN_MINIMAL: ClassVar[Preference]
    HANDLING_STRICT: ClassVar[Preference]
    HANDLING_LENIENT: ClassVar[Preference]

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(tuple(pair) for pair in self.params))

    @classmethod
    def wait(cls, secs: int) -> Preference:
        """A ``wait=secs`` preference."""
        if not 0 <= secs <= _U32_MAX:
            raise ValueError(f"wait seconds out of range: {secs}")
        return cls("wait", str(secs))

    @classmethod
    def parse(cls, s: str) -> Preference:
        """Parse ``name[=value](; param[=value])*``; raise InvalidHeader if malformed.

        The standard preferences take no parameters, and ``wait`` needs an
        unsigned number.
        """
        first, *rest = (_split_param(part) for part in s.split(";"))
        name, value = first
        if first in _EXACT or name == "wait":
            if rest:
                raise InvalidHeader(f"preference {name!r} takes no parameters")
            if name == "wait":
                return cls.wait(_parse_u32(value))
            return cls(name, value)
        return cls(name, value, tuple(rest))

    def without_params(self) -> Preference:
        """Return the same preference with its parameters dropped."""
        return Preference(self.name, self.value)

    def __str__(self) -> str:
        text = self.name
        if self.value:
            text += f"={self.value}"
        for param_name, param_value in self.params:
            text += f"; {param_name}"
            if param_value:
                text += f"={param_value}"
        return text


Preference.RESPOND_ASYNC = Preference("respond-async")
Preference.RETURN_REPRESENTATION = Preference("return", "representation")
Preference.RETURN_MINIMAL = Preference("return", "minimal")
Preference.HANDLING_STRICT = Preference("handling", "strict")
Preference.HANDLING_LENIENT = Preference("handling", "lenient")


def _decode_preferences(values: Iterable[HeaderValueLike]) -> tuple[Preference, ...]:
    preferences = from_comma_delimited(values, Preference.parse)
    if not preferences:
        raise InvalidHeader("expected at least one preference")
    return tuple(preferences)


@dataclass(frozen=True)
class Prefer(Header):
    """The Prefer request header: behaviours asked of the server."""

    name: ClassVar[str] = "prefer"

    preferences: tuple[Preference, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "preferences", tuple(self.preferences))

    @classmethod
    def decode(cls, values: Iterable[HeaderValueLike]) -> Prefer:
        """Decode a comma-separated list of at least one preference."""
        return cls(_decode_preferences(values))

    def encode(self) -> list[bytes]:
        """Return the single raw value."""
        return [header_value(str(self))]

    def __str__(self) -> str:
        return fmt_comma_delimited(self.preferences)


@dataclass(frozen=True)
class PreferenceApplied(Header):
    """The Preference-Applied response header: preferences the server honoured.

    Parameters of extension preferences are not written out.
    """

    name: ClassVar[str] = "preference-applied"

    preferences: tuple[Preference, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "preferences", tuple(self.preferences))

    @classmethod
    def decode(cls, values: Iterable[HeaderValueLike]) -> PreferenceApplied:
        """Decode a comma-separated list of at least one preference."""
        return cls(_decode_preferences(values))

    def encode(self) -> list[bytes]:
        """Return the single raw value."""
        return [header_value(str(self))]

    def __str__(self) -> str:
        return fmt_comma_delimited(pref.without_params() for pref in self.preferences)