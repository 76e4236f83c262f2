"""The Warning header."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .core import Header, HeaderValueLike, InvalidHeader, header_value, just_one
from .http_date import HttpDate

_U16_MAX = 2**16 - 1
_U16_RE = re.compile(r"\+?[0-9]+", re.ASCII)


def _parse_code(text: str) -> int:
    if not _U16_RE.fullmatch(text):
        raise InvalidHeader(f"invalid warn-code: {text!r}")
    code = int(text)
    if code > _U16_MAX:
        raise InvalidHeader(f"warn-code out of range: {text!r}")
    return code


def _parse_date(text: str) -> HttpDate | None:
    try:
        return HttpDate.parse(text)
    except InvalidHeader:
        return None


@dataclass(frozen=True)
class WarningHeader(Header):
    """A warning: a code, the agent that added it, a message and an optional date."""

    name: ClassVar[str] = "warning"

    code: int
    agent: str
    text: str
    date: HttpDate | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.code <= _U16_MAX:
            raise ValueError(f"warn-code out of range: {self.code}")

    @classmethod
    def parse(cls, s: str) -> WarningHeader:
        """Parse ``code agent "text" ["date"]``; raise InvalidHeader if malformed.

        A date that cannot be parsed is dropped rather than rejected.
        """
        words = s.split()
        if not words:
            raise InvalidHeader("missing warn-code")
        code = _parse_code(words[0])
        if len(words) < 2:
            raise InvalidHeader("missing warn-agent")
        agent = words[1]
        quoted = s.split('"')
        if len(quoted) < 2:
            raise InvalidHeader("missing warn-text")
        text = quoted[1]
        date = _parse_date(quoted[3]) if len(quoted) > 3 else None
        return cls(code=code, agent=agent, text=text, date=date)

    def __str__(self) -> str:
        line = f'{self.code:03d} {self.agent} "{self.text}"'
        if self.date is not None:
            line += f' "{self.date}"'
        return line

    @classmethod
    def decode(cls, values: Iterable[HeaderValueLike]) -> WarningHeader:
        """Decode exactly one raw value."""
        one = just_one(values)
        if one is None:
            raise InvalidHeader("expected exactly one Warning value")
        try:
            text = header_value(one).decode("utf-8")
        except UnicodeDecodeError as err:
            raise InvalidHeader("Warning value is not UTF-8 text") from err
        return cls.parse(text)

    def encode(self) -> list[bytes]:
        """Return the single raw value."""
        return [header_value(str(self))]