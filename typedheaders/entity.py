"""Entity tags and entity-tag ranges as used by ETag and the If-* headers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .core import HeaderValueLike, InvalidHeader, header_value, just_one
from .flat_csv import FlatCsv

_DQUOTE = ord('"')
_WEAK = ord("W")
_SLASH = ord("/")


def _opaque_start(data: bytes) -> int | None:
    """Return where the opaque tag starts, or None if the framing is wrong."""
    length = len(data)
    if length < 2 or data[-1] != _DQUOTE:
        return None
    if data[0] == _DQUOTE:
        return 1
    if data[0] == _WEAK and length >= 4 and data[1] == _SLASH and data[2] == _DQUOTE:
        return 3
    return None


@dataclass(frozen=True, repr=False)
class EntityTag:
    """An entity tag such as ``"xyzzy"`` or ``W/"xyzzy"``.

    ``==`` checks that two tags are identical; use ``strong_eq`` or
    ``weak_eq`` to compare them the way HTTP does.
    """

    value: bytes

    def __post_init__(self) -> None:
        data = header_value(self.value)
        start = _opaque_start(data)
        if start is None or _DQUOTE in data[start:-1]:
            raise InvalidHeader(f"invalid entity tag: {data!r}")
        object.__setattr__(self, "value", data)

    @classmethod
    def parse(cls, src: HeaderValueLike) -> EntityTag:
        """Parse a raw value; raise InvalidHeader if it is not an entity tag."""
        return cls(src)

    @classmethod
    def _try_parse(cls, src: HeaderValueLike) -> EntityTag | None:
        try:
            return cls(src)
        except InvalidHeader:
            return None

    @classmethod
    def from_values(cls, values: Iterable[HeaderValueLike]) -> EntityTag:
        """Parse exactly one raw value as an entity tag."""
        one = just_one(values)
        if one is None:
            raise InvalidHeader("expected exactly one entity tag")
        return cls.parse(one)

    def tag(self) -> bytes:
        """Return the opaque tag without quotes or weakness marker."""
        return self.value[3:-1] if self.is_weak() else self.value[1:-1]

    def is_weak(self) -> bool:
        """Return whether this is a weak tag."""
        return self.value[0] == _WEAK

    def strong_eq(self, other: EntityTag) -> bool:
        """Both tags are strong and their opaque tags match exactly."""
        return not self.is_weak() and not other.is_weak() and self.tag() == other.tag()

    def weak_eq(self, other: EntityTag) -> bool:
        """The opaque tags match, whatever their weakness."""
        return self.tag() == other.tag()

    def strong_ne(self, other: EntityTag) -> bool:
        """The inverse of ``strong_eq``."""
        return not self.strong_eq(other)

    def weak_ne(self, other: EntityTag) -> bool:
        """The inverse of ``weak_eq``."""
        return not self.weak_eq(other)

    def to_value(self) -> bytes:
        """Return the raw header value."""
        return self.value

    def __repr__(self) -> str:
        return f"EntityTag({self.value!r})"


@dataclass(frozen=True)
class EntityTagRange:
    """Either ``*`` (``tags`` is None) or a list of entity tags."""

    tags: FlatCsv | None = None

    @classmethod
    def from_values(cls, values: Iterable[HeaderValueLike]) -> EntityTagRange:
        """Flatten the raw values; a lone ``*`` means any tag."""
        flat = FlatCsv.from_values(values)
        if flat.value == b"*":
            return cls(None)
        return cls(flat)

    def matches_strong(self, entity: EntityTag) -> bool:
        """Whether any tag in the range strongly equals ``entity``."""
        return self._matches_if(entity, EntityTag.strong_eq)

    def matches_weak(self, entity: EntityTag) -> bool:
        """Whether any tag in the range weakly equals ``entity``."""
        return self._matches_if(entity, EntityTag.weak_eq)

    def _matches_if(
        self, entity: EntityTag, func: Callable[[EntityTag, EntityTag], bool]
    ) -> bool:
        if self.tags is None:
            return True
        candidates = (EntityTag._try_parse(item) for item in self.tags)
        return any(func(tag, entity) for tag in candidates if tag is not None)

    def to_value(self) -> bytes:
        """Return the raw header value."""
        return b"*" if self.tags is None else self.tags.value