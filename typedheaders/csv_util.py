"""Helpers for comma-delimited header values."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from .core import HeaderValueLike, InvalidHeader, value_to_str

T = TypeVar("T")


def from_comma_delimited(
    values: Iterable[HeaderValueLike], parse: Callable[[str], T]
) -> list[T]:
    """Split every value on commas, drop empty items and parse the rest.

    Values that are not visible ASCII are skipped. A ValueError from ``parse``
    becomes InvalidHeader.
    """
    items: list[T] = []
    for value in values:
        try:
            text = value_to_str(value)
        except InvalidHeader:
            continue
        for part in text.split(","):
            part = part.strip()
            if not part:
                continue
            try:
                items.append(parse(part))
            except ValueError as err:
                raise InvalidHeader(f"cannot parse item {part!r}") from err
    return items


def fmt_comma_delimited(items: Iterable[Any]) -> str:
    """Join the text forms of the items with ', '."""
    return ", ".join(str(item) for item in items)