"""Whole-second durations carried in header values."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import timedelta

from .core import HeaderValueLike, InvalidHeader, header_value, just_one, value_to_str

_U64_MAX = 2**64 - 1


def seconds_from_value(value: HeaderValueLike) -> int | None:
    """Parse an unsigned decimal count of seconds, or return None."""
    try:
        text = value_to_str(value)
    except InvalidHeader:
        return None
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isdigit():
        return None
    secs = int(digits)
    return secs if secs <= _U64_MAX else None


def seconds_from_values(values: Iterable[HeaderValueLike]) -> int:
    """Parse exactly one value as seconds; raise InvalidHeader otherwise."""
    one = just_one(values)
    secs = None if one is None else seconds_from_value(one)
    if secs is None:
        raise InvalidHeader("expected exactly one count of seconds")
    return secs


def seconds_to_value(secs: int | timedelta) -> bytes:
    """Write a whole number of seconds as a header value."""
    if isinstance(secs, timedelta):
        if secs.microseconds:
            raise ValueError("duration must be a whole number of seconds")
        secs = secs.days * 86400 + secs.seconds
    if secs < 0 or secs > _U64_MAX:
        raise ValueError(f"seconds out of range: {secs}")
    return header_value(int(secs))