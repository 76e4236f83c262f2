"""A multi-valued, case-insensitive header map with typed access."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator, Mapping
from typing import TypeVar, Union

from .core import Header, HeaderValueLike, InvalidHeader, header_value

H = TypeVar("H", bound=Header)

_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")

HeaderItems = Union[
    Mapping[str, HeaderValueLike], Iterable[tuple[str, HeaderValueLike]], None
]


def _normalise_name(name: str | bytes) -> str:
    if isinstance(name, (bytes, bytearray)):
        try:
            name = bytes(name).decode("ascii")
        except UnicodeDecodeError as err:
            raise InvalidHeader(f"invalid header name: {name!r}") from err
    if not name or not all(char in _TOKEN_CHARS for char in name):
        raise InvalidHeader(f"invalid header name: {name!r}")
    return name.lower()


class HeaderMap:
    """Header names mapped to ordered lists of raw values.

    Names are compared case-insensitively and stored in lower case.
    ``len`` counts values, not distinct names.
    """

    def __init__(self, items: HeaderItems = None):
        self._entries: dict[str, list[bytes]] = {}
        if items is None:
            return
        pairs = items.items() if isinstance(items, Mapping) else items
        for name, value in pairs:
            self.append(name, value)

    def append(self, name: str | bytes, value: HeaderValueLike) -> None:
        """Add a value after any existing values of ``name``."""
        self._entries.setdefault(_normalise_name(name), []).append(header_value(value))

    def insert(self, name: str | bytes, value: HeaderValueLike) -> list[bytes]:
        """Replace all values of ``name`` with one value; return the old values."""
        key = _normalise_name(name)
        old = self._entries.get(key, [])
        self._entries[key] = [header_value(value)]
        return old

    def get_all(self, name: str | bytes) -> list[bytes]:
        """Return every value of ``name`` in insertion order."""
        return list(self._entries.get(_normalise_name(name), []))

    def remove(self, name: str | bytes) -> list[bytes]:
        """Remove ``name`` and return the values it had."""
        return self._entries.pop(_normalise_name(name), [])

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (str, bytes, bytearray)):
            return False
        try:
            return _normalise_name(name) in self._entries
        except InvalidHeader:
            return False

    def __len__(self) -> int:
        return sum(len(values) for values in self._entries.values())

    def __iter__(self) -> Iterator[tuple[str, bytes]]:
        for name, values in self._entries.items():
            for value in values:
                yield name, value

    def __repr__(self) -> str:
        return f"HeaderMap({list(self)!r})"

    def typed_insert(self, header: Header) -> None:
        """Encode ``header`` and store its values, replacing earlier ones.

        If the header encodes to no values, the map is left unchanged.
        """
        values = [header_value(value) for value in header.encode()]
        if not values:
            return
        self._entries[_normalise_name(type(header).name)] = values

    def typed_get(self, header_cls: type[H]) -> H | None:
        """Decode the header, or return None if it is absent or invalid."""
        try:
            return self.typed_try_get(header_cls)
        except InvalidHeader:
            return None

    def typed_try_get(self, header_cls: type[H]) -> H | None:
        """Decode the header; None if absent, InvalidHeader if malformed."""
        values = self._entries.get(_normalise_name(header_cls.name), [])
        if not values:
            return None
        return header_cls.decode(list(values))