"""Content and transfer codings as named in Transfer-Encoding and Accept-Encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Encoding:
    """A coding name; the well-known ones are class constants."""

    value: str

    CHUNKED: ClassVar[Encoding]
    BROTLI: ClassVar[Encoding]
    GZIP: ClassVar[Encoding]
    DEFLATE: ClassVar[Encoding]
    COMPRESS: ClassVar[Encoding]
    IDENTITY: ClassVar[Encoding]
    TRAILERS: ClassVar[Encoding]

    @classmethod
    def parse(cls, s: str) -> Encoding:
        """Read a coding name; any text is accepted, unknown names as extensions."""
        return _KNOWN.get(s) or cls(s)

    @property
    def is_extension(self) -> bool:
        """Whether this is not one of the well-known codings."""
        return self.value not in _KNOWN

    def __str__(self) -> str:
        return self.value


Encoding.CHUNKED = Encoding("chunked")
Encoding.BROTLI = Encoding("br")
Encoding.GZIP = Encoding("gzip")
Encoding.DEFLATE = Encoding("deflate")
Encoding.COMPRESS = Encoding("compress")
Encoding.IDENTITY = Encoding("identity")
Encoding.TRAILERS = Encoding("trailers")

_KNOWN = {
    encoding.value: encoding
    for encoding in (
        Encoding.CHUNKED,
        Encoding.BROTLI,
        Encoding.GZIP,
        Encoding.DEFLATE,
        Encoding.COMPRESS,
        Encoding.IDENTITY,
        Encoding.TRAILERS,
    )
}