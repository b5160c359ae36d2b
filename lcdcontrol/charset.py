"""Character sets mapping Unicode characters to HD44780 character ROM codes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

_SPACE = ord(" ")
_QUESTION = ord("?")

# Characters above 0x7D that carry the Unicode White_Space property.
_EXTRA_WHITESPACE = frozenset(
    [0x85, 0xA0, 0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000]
)


class Charset(ABC):
    """Maps a character to the code the display ROM uses for it."""

    @abstractmethod
    def code_from_utf8(self, ch: str) -> Optional[int]:
        """Return the ROM code for ``ch``, or ``None`` if it has no glyph."""


@dataclass(frozen=True)
class Fallback(Charset):
    """Wraps a charset and substitutes ``fallback`` for unknown characters."""

    charset: Charset
    fallback: int = _SPACE

    def __post_init__(self) -> None:
        if not 0 <= self.fallback <= 0xFF:
            raise ValueError(f"fallback code {self.fallback} does not fit in a byte")

    def code_from_utf8_with_fallback(self, ch: str) -> int:
        """Return the ROM code for ``ch``, falling back for unknown characters."""
        code = self.charset.code_from_utf8(ch)
        return self.fallback if code is None else code

    def code_from_utf8(self, ch: str) -> Optional[int]:
        return self.code_from_utf8_with_fallback(ch)

    def into_inner(self) -> Charset:
        """Return the wrapped charset."""
        return self.charset


def empty_fallback(charset: Charset) -> Fallback:
    """Wrap ``charset`` so unknown characters become a space."""
    return Fallback(charset, _SPACE)


def question_fallback(charset: Charset) -> Fallback:
    """Wrap ``charset`` so unknown characters become a question mark."""
    return Fallback(charset, _QUESTION)


class CharsetUniversal(Charset):
    """Symbols common to both the A00 and A02 character ROMs."""

    EMPTY_FALLBACK: Fallback
    QUESTION_FALLBACK: Fallback

    def code_from_utf8(self, ch: str) -> Optional[int]:
        code = ord(ch)
        if ch == "\\" or 0x10 <= code <= 0x1F:
            return None
        if code <= 0x7D:
            return code
        return None


_A00_TABLE: dict[str, int] = {
    "\u2192": 0x7E,
    "\u2190": 0x7F,
    "\uff01": ord("!"),
    "\uff1f": ord("?"),
    # Japanese punctuation and katakana
    "\u3002": 0xA1, "\u300c": 0xA2, "\u300d": 0xA3, "\u3001": 0xA4,
    "\u30fb": 0xA5, "\u30f2": 0xA6, "\u30a1": 0xA7, "\u30a3": 0xA8,
    "\u30a5": 0xA9, "\u30a7": 0xAA, "\u30a9": 0xAB, "\u30e3": 0xAC,
    "\u30e5": 0xAD, "\u30e7": 0xAE, "\u30c3": 0xAF, "\u30fc": 0xB0,
    "\u30a2": 0xB1, "\u30a4": 0xB2, "\u30a6": 0xB3, "\u30a8": 0xB4,
    "\u30aa": 0xB5, "\u30ab": 0xB6, "\u30ad": 0xB7, "\u30af": 0xB8,
    "\u30b1": 0xB9, "\u30b3": 0xBA, "\u30b5": 0xBB, "\u30b7": 0xBC,
    "\u30b9": 0xBD, "\u30bb": 0xBE, "\u30bd": 0xBF, "\u30bf": 0xC0,
    "\u30c1": 0xC1, "\u30c4": 0xC2, "\u30c6": 0xC3, "\u30c8": 0xC4,
    "\u30ca": 0xC5, "\u30cb": 0xC6, "\u30cc": 0xC7, "\u30cd": 0xC8,
    "\u30ce": 0xC9, "\u30cf": 0xCA, "\u30d2": 0xCB, "\u30d5": 0xCC,
    "\u30d8": 0xCD, "\u30db": 0xCE, "\u30de": 0xCF, "\u30df": 0xD0,
    "\u30e0": 0xD1, "\u30e1": 0xD2, "\u30e2": 0xD3, "\u30e4": 0xD4,
    "\u30e6": 0xD5, "\u30e8": 0xD6, "\u30e9": 0xD7, "\u30ea": 0xD8,
    "\u30eb": 0xD9, "\u30ec": 0xDA, "\u30ed": 0xDB, "\u30ef": 0xDC,
    "\u30f3": 0xDD,
    "\u309b": 0xDE, "\u3099": 0xDE,
    "\u309c": 0xDF, "\u309a": 0xDF,
    # 5x10 extras
    "\u03b1": 0xE0, "\u00e4": 0xE1, "\u03b2": 0xE2, "\u03b5": 0xE3,
    "\u00b5": 0xE4, "\u03c3": 0xE5, "\u03c1": 0xE6, "\u221a": 0xE8,
    "\u00a2": 0xEC, "\u2c60": 0xED, "\u00f1": 0xEE, "\u00f6": 0xEF,
    "\u03b8": 0xF2, "\u221e": 0xF3, "\u03a9": 0xF4, "\u00fc": 0xF5,
    "\u03a3": 0xF6, "\u03c0": 0xF7, "\u5343": 0xFA, "\u4e07": 0xFB,
    "\u5186": 0xFC, "\u00f7": 0xFD, "\u2588": 0xFF,
}


class CharsetA00(Charset):
    """Japanese standard font character set (ROM code A00)."""

    EMPTY_FALLBACK: Fallback
    QUESTION_FALLBACK: Fallback

    def code_from_utf8(self, ch: str) -> Optional[int]:
        code = ord(ch)
        if ch == "\u00a5":
            return 0x5C
        if ch == "\\" or 0x10 <= code <= 0x1F:
            return None
        if code <= 0x7D:
            return code
        mapped = _A00_TABLE.get(ch)
        if mapped is not None:
            return mapped
        if code in _EXTRA_WHITESPACE:
            return _SPACE
        return None


_A02_LATIN1_GAPS = frozenset([0xA8, 0xAC, 0xAD, 0xAF, 0xB4, 0xB8, 0xD8, 0xF8])

_A02_TABLE: dict[str, int] = {
    "\u23f5": 0x00, "\u23f4": 0x01, "\u201c": 0x02, "\u201d": 0x03,
    "\u23eb": 0x04, "\u23ec": 0x05, "\u23fa": 0x06, "\u21b2": 0x07,
    "\u2191": 0x08, "\u2193": 0x09, "\u2192": 0x0A, "\u2190": 0x0B,
    "\u2264": 0x0C, "\u2265": 0x0D, "\u23f6": 0x0E, "\u23f7": 0x0F,
    "\u2302": 0x7F,
    # Cyrillic
    "\u0410": ord("A"), "\u0411": 0x80, "\u0412": ord("B"), "\u0413": 0x92,
    "\u0414": 0x81, "\u0415": ord("E"), "\u0416": 0x82, "\u0417": 0x83,
    "\u0418": 0x84, "\u0419": 0x85, "\u041a": ord("K"), "\u041b": 0x86,
    "\u041c": ord("M"), "\u041d": ord("H"), "\u041e": ord("O"), "\u041f": 0x87,
    "\u0420": ord("P"), "\u0421": ord("C"), "\u0422": ord("T"), "\u0423": 0x88,
    "\u0425": ord("X"), "\u0426": 0x89, "\u0427": 0x8A, "\u0428": 0x8B,
    "\u0429": 0x8C, "\u042a": 0x8D, "\u042b": 0x8E, "\u042c": ord("b"),
    "\u042d": 0x8F, "\u042e": 0xAC, "\u042f": 0xAD,
    # Other symbols
    "\u03b1": 0x90, "\u266a": 0x91, "\u03c0": 0x93, "\u03a3": 0x94,
    "\u03c3": 0x95, "\u266c": 0x96, "\u03c4": 0x97, "\U0001f514": 0x98,
    "\u03f4": 0x99, "\u03a9": 0x9A, "\u03b4": 0x9B, "\u221e": 0x9C,
    "\u2665": 0x9D, "\u03b5": 0x9E, "\u2229": 0x9F, "\u23f8": 0xA0,
    "\u2a0d": 0xA8, "\u03c9": 0xB8, "\u0278": 0xD8, "\u222e": 0xF8,
    "\u2018": 0xAF, "\u2019": ord("'"),
}


class CharsetA02(Charset):
    """European standard font character set (ROM code A02)."""

    EMPTY_FALLBACK: Fallback
    QUESTION_FALLBACK: Fallback

    def code_from_utf8(self, ch: str) -> Optional[int]:
        code = ord(ch)
        if code <= 0x0F or 0x20 <= code <= 0x7E:
            return code
        if code in _A02_LATIN1_GAPS:
            return None
        if 0xA1 <= code <= 0xFF:
            return code
        return _A02_TABLE.get(ch)


for _cls in (CharsetUniversal, CharsetA00, CharsetA02):
    _cls.EMPTY_FALLBACK = empty_fallback(_cls())
    _cls.QUESTION_FALLBACK = question_fallback(_cls())
del _cls