"""Character sets named in Accept-Charset and similar headers."""

from __future__ import annotations

from enum import Enum

from .core import InvalidHeader


def _ascii_upper(text: str) -> str:
    return "".join(char.upper() if char.isascii() else char for char in text)


class Charset(Enum):
    """A known MIME charset; its text form is the registered name."""

    US_ASCII = "US-ASCII"
    ISO_8859_1 = "ISO-8859-1"
    ISO_8859_2 = "ISO-8859-2"
    ISO_8859_3 = "ISO-8859-3"
    ISO_8859_4 = "ISO-8859-4"
    ISO_8859_5 = "ISO-8859-5"
    ISO_8859_6 = "ISO-8859-6"
    ISO_8859_7 = "ISO-8859-7"
    ISO_8859_8 = "ISO-8859-8"
    ISO_8859_9 = "ISO-8859-9"
    ISO_8859_10 = "ISO-8859-10"
    SHIFT_JIS = "Shift-JIS"
    EUC_JP = "EUC-JP"
    ISO_2022_KR = "ISO-2022-KR"
    EUC_KR = "EUC-KR"
    ISO_2022_JP = "ISO-2022-JP"
    ISO_2022_JP_2 = "ISO-2022-JP-2"
    ISO_8859_6_E = "ISO-8859-6-E"
    ISO_8859_6_I = "ISO-8859-6-I"
    ISO_8859_8_E = "ISO-8859-8-E"
    ISO_8859_8_I = "ISO-8859-8-I"
    GB_2312 = "GB2312"
    BIG_5 = "5"
    KOI8_R = "KOI8-R"

    @classmethod
    def parse(cls, s: str) -> Charset:
        """Look a charset up by name, ignoring ASCII case; raise InvalidHeader if unknown."""
        try:
            return _BY_UPPER_NAME[_ascii_upper(s)]
        except KeyError:
            raise InvalidHeader(f"unknown charset: {s!r}") from None

    def __str__(self) -> str:
        return self.value


_BY_UPPER_NAME = {_ascii_upper(member.value): member for member in Charset}