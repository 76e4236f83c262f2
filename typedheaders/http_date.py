"""Timestamps in the HTTP date formats."""

from __future__ import annotations

import calendar
import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone

from .core import HeaderValueLike, InvalidHeader, header_value, just_one, value_to_str

_SHORT_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_LONG_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_SHORT_DAY_RE = "|".join(_SHORT_DAYS)
_LONG_DAY_RE = "|".join(_LONG_DAYS)
_MONTH_RE = "|".join(_MONTHS)

_IMF_FIXDATE = re.compile(
    rf"({_SHORT_DAY_RE}), (\d{{2}}) ({_MONTH_RE}) (\d{{4}}) (\d{{2}}):(\d{{2}}):(\d{{2}}) GMT",
    re.ASCII,
)
_RFC850 = re.compile(
    rf"({_LONG_DAY_RE}), (\d{{2}})-({_MONTH_RE})-(\d{{2}}) (\d{{2}}):(\d{{2}}):(\d{{2}}) GMT",
    re.ASCII,
)
_ASCTIME = re.compile(
    rf"({_SHORT_DAY_RE}) ({_MONTH_RE}) ( \d|\d{{2}}) (\d{{2}}):(\d{{2}}):(\d{{2}}) (\d{{4}})",
    re.ASCII,
)

_MAX_TIMESTAMP = calendar.timegm((9999, 12, 31, 23, 59, 59))


@dataclass(frozen=True, order=True, repr=False)
class HttpDate:
    """A whole-second UTC timestamp, written in IMF-fixdate form."""

    timestamp: int

    def __post_init__(self) -> None:
        if not 0 <= self.timestamp <= _MAX_TIMESTAMP:
            raise ValueError(f"timestamp out of range for an HTTP date: {self.timestamp}")

    @classmethod
    def parse(cls, s: str) -> HttpDate:
        """Parse IMF-fixdate, RFC 850 or asctime; raise InvalidHeader on failure."""
        if match := _IMF_FIXDATE.fullmatch(s):
            wday, day, month, year, hour, minute, second = match.groups()
            weekday = _SHORT_DAYS.index(wday)
            year_num = int(year)
        elif match := _RFC850.fullmatch(s):
            wday, day, month, year, hour, minute, second = match.groups()
            weekday = _LONG_DAYS.index(wday)
            short_year = int(year)
            year_num = 2000 + short_year if short_year < 70 else 1900 + short_year
        elif match := _ASCTIME.fullmatch(s):
            wday, month, day, hour, minute, second, year = match.groups()
            weekday = _SHORT_DAYS.index(wday)
            year_num = int(year)
        else:
            raise InvalidHeader(f"not an HTTP date: {s!r}")
        return cls._from_fields(
            weekday, year_num, _MONTHS.index(month) + 1, int(day), int(hour), int(minute), int(second)
        )

    @classmethod
    def _from_fields(
        cls, weekday: int, year: int, month: int, day: int, hour: int, minute: int, second: int
    ) -> HttpDate:
        if not 1970 <= year <= 9999:
            raise InvalidHeader(f"year out of range: {year}")
        try:
            moment = datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
        except ValueError as err:
            raise InvalidHeader("invalid date fields") from err
        if moment.weekday() != weekday:
            raise InvalidHeader("weekday does not match the date")
        return cls(calendar.timegm(moment.utctimetuple()))

    @classmethod
    def from_value(cls, value: HeaderValueLike) -> HttpDate | None:
        """Parse a raw value, returning None if it is not an HTTP date."""
        try:
            return cls.parse(value_to_str(value))
        except InvalidHeader:
            return None

    @classmethod
    def from_values(cls, values: Iterable[HeaderValueLike]) -> HttpDate:
        """Parse exactly one raw value; raise InvalidHeader otherwise."""
        one = just_one(values)
        date = None if one is None else cls.from_value(one)
        if date is None:
            raise InvalidHeader("expected exactly one HTTP date")
        return date

    @classmethod
    def from_timestamp(cls, seconds: float) -> HttpDate:
        """Build from seconds since the Unix epoch, dropping any fraction."""
        return cls(int(seconds))

    @classmethod
    def from_datetime(cls, moment: datetime) -> HttpDate:
        """Build from a datetime; a naive datetime is taken to be UTC."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return cls(calendar.timegm(moment.astimezone(timezone.utc).utctimetuple()))

    def to_datetime(self) -> datetime:
        """Return the moment as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    def to_value(self) -> bytes:
        """Return the IMF-fixdate form as a raw header value."""
        return header_value(str(self))

    def __str__(self) -> str:
        moment = self.to_datetime()
        return (
            f"{_SHORT_DAYS[moment.weekday()]}, {moment.day:02d} {_MONTHS[moment.month - 1]} "
            f"{moment.year:04d} {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d} GMT"
        )

    def __repr__(self) -> str:
        return f"HttpDate({str(self)!r})"