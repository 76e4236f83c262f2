"""A single header value that flattens several values with a separator."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .core import HeaderValueLike, InvalidHeader, header_value, value_to_str


def _split_outside_quotes(text: str, separator: str) -> Iterator[str]:
    in_quotes = False
    start = 0
    for pos, char in enumerate(text):
        if in_quotes:
            if char == '"':
                in_quotes = False
        elif char == separator:
            yield text[start:pos].strip()
            start = pos + 1
        elif char == '"':
            in_quotes = True
    yield text[start:].strip()


class FlatCsv:
    """One raw header value whose items are split on a separator outside quotes."""

    __slots__ = ("value", "separator")

    def __init__(self, value: HeaderValueLike = b"", separator: str = ","):
        if len(separator) != 1:
            raise ValueError("separator must be a single character")
        self.value = header_value(value)
        self.separator = separator

    @classmethod
    def from_values(cls, values: Iterable[HeaderValueLike], separator: str = ",") -> FlatCsv:
        """Join several raw values into one, separated by the separator and a space."""
        joiner = (separator + " ").encode("ascii")
        return cls(joiner.join(header_value(value) for value in values), separator)

    def __iter__(self) -> Iterator[str]:
        try:
            text = value_to_str(self.value)
        except InvalidHeader:
            return
        yield from _split_outside_quotes(text, self.separator)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlatCsv):
            return NotImplemented
        return self.value == other.value and self.separator == other.separator

    def __hash__(self) -> int:
        return hash((self.value, self.separator))

    def __repr__(self) -> str:
        return f"FlatCsv({self.value!r}, separator={self.separator!r})"