"""Quality values (``q=``) attached to header list items."""

from __future__ import annotations

import re
import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .core import InvalidHeader

T = TypeVar("T")

_FLOAT_RE = re.compile(
    r"[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


def _to_f32(number: float) -> float:
    return struct.unpack("f", struct.pack("f", number))[0]


def _parse_f32(text: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"not a number: {text!r}")
    return _to_f32(float(text))


@dataclass(frozen=True, order=True)
class Quality:
    """A quality between 0 and 1 in thousandths: ``Quality(532)`` is ``q=0.532``."""

    value: int = 1000

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 1000:
            raise ValueError(f"quality must be between 0 and 1000: {self.value}")

    @classmethod
    def _from_f32(cls, number: float) -> Quality:
        return cls(int(_to_f32(_to_f32(number) * 1000.0)))


def q(value: int | float) -> Quality:
    """Build a Quality from thousandths (int) or a fraction (float)."""
    if isinstance(value, bool):
        raise TypeError("a quality cannot be a bool")
    if isinstance(value, int):
        if not 0 <= value <= 1000:
            raise ValueError("int quality must be between 0 and 1000")
        return Quality(value)
    if not 0.0 <= value <= 1.0:
        raise ValueError("float quality must be between 0.0 and 1.0")
    return Quality._from_f32(value)


@dataclass(frozen=True)
class QualityValue(Generic[T]):
    """An item with a quality. Ordering compares quality only."""

    value: T
    quality: Quality = field(default_factory=Quality)

    @classmethod
    def parse(
        cls, s: str, parse_item: Callable[[str], Any] = str
    ) -> QualityValue[Any]:
        """Parse ``item[; q=N]``; raise InvalidHeader on a bad quality or item."""
        raw_item = s
        quality = 1.0
        parts = [part.strip() for part in s.rsplit(";", 1)]
        if len(parts) == 2:
            last, first = parts[1], parts[0]
            if len(last.encode("utf-8")) < 2:
                raise InvalidHeader(f"invalid quality item: {s!r}")
            if last.startswith(("q=", "Q=")):
                q_part = last[2:]
                if len(q_part.encode("utf-8")) > 5:
                    raise InvalidHeader(f"quality too long: {q_part!r}")
                try:
                    q_value = _parse_f32(q_part)
                except ValueError as err:
                    raise InvalidHeader(f"invalid quality: {q_part!r}") from err
                if not 0.0 <= q_value <= 1.0:
                    raise InvalidHeader(f"quality out of range: {q_part!r}")
                quality = q_value
                raw_item = first
        try:
            item = parse_item(raw_item)
        except ValueError as err:
            raise InvalidHeader(f"invalid item: {raw_item!r}") from err
        return cls(item, Quality._from_f32(quality))

    def __str__(self) -> str:
        thousandths = self.quality.value
        if thousandths == 1000:
            return str(self.value)
        if thousandths == 0:
            return f"{self.value}; q=0"
        return f"{self.value}; q=0.{f'{thousandths:03d}'.rstrip('0')}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QualityValue):
            return NotImplemented
        return self.quality < other.quality

    def __le__(self, other: object) -> bool:
        if not isinstance(other, QualityValue):
            return NotImplemented
        return self.quality <= other.quality

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, QualityValue):
            return NotImplemented
        return self.quality > other.quality

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, QualityValue):
            return NotImplemented
        return self.quality >= other.quality