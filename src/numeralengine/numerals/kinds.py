"""The closed set of numeral systems.

NumeralKind enumerates every numeral system a numbering pattern can use.
Each member has:

    - a representative character used in pattern syntax (to_char/from_char)
    - a conversion from non-negative integers to text (apply)
    - optionally, a CLDR numbering system identifier (numbering_system)

The set is closed on purpose: every dispatch is an exhaustive match ending
in assert_never, so adding a member without handling it everywhere is a
type error.

Simplified and Traditional Chinese share their representative characters
(一 and 壹). Pattern syntax therefore always yields the Simplified kinds;
the Traditional kinds are reachable only by constructing them directly or
via from_numbering_system().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from enum import StrEnum
from typing import assert_never

from numeralengine.constants import MAX_NUMBER
from numeralengine.diagnostics import ErrorTemplate, NumberOutOfRangeError
from numeralengine.enums import ChineseVariant, LetterCase

from . import tables
from .algorithms import (
    decimal,
    greek_numeral,
    hebrew_numeral,
    roman_numeral,
    symbol_numeral,
    zeroless,
)
from .chinese import chinese_numeral

__all__ = ["NumeralKind", "validate_number"]


def validate_number(value: object) -> int:
    """Check that a value is in the numbering domain.

    Args:
        value: Candidate number

    Returns:
        The value, typed as int

    Raises:
        NumberOutOfRangeError: If value is not an int (bool included), is
            negative, or exceeds MAX_NUMBER
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise NumberOutOfRangeError(ErrorTemplate.number_not_integer(value), value=value)
    if value < 0:
        raise NumberOutOfRangeError(ErrorTemplate.number_negative(value), value=value)
    if value > MAX_NUMBER:
        raise NumberOutOfRangeError(ErrorTemplate.number_too_large(value), value=value)
    return value


class NumeralKind(StrEnum):
    """A numeral system usable in numbering patterns.

    StrEnum provides automatic string conversion: str(NumeralKind.ARABIC) == "arabic"

    Example:
        >>> NumeralKind.from_char("I")
        <NumeralKind.UPPER_ROMAN: 'upper-roman'>
        >>> NumeralKind.UPPER_ROMAN.apply(2024)
        'MMXXIV'
        >>> NumeralKind.LOWER_LATIN.apply(27)
        'aa'
    """

    ARABIC = "arabic"
    """Arabic numerals (1, 2, 3, etc.)."""

    LOWER_LATIN = "lower-latin"
    """Lowercase Latin letters (a, b, c, etc.). Items beyond z use base-26."""

    UPPER_LATIN = "upper-latin"
    """Uppercase Latin letters (A, B, C, etc.). Items beyond Z use base-26."""

    LOWER_ROMAN = "lower-roman"
    """Lowercase Roman numerals (i, ii, iii, etc.)."""

    UPPER_ROMAN = "upper-roman"
    """Uppercase Roman numerals (I, II, III, etc.)."""

    LOWER_GREEK = "lower-greek"
    """Lowercase Greek numerals (α, β, γ, etc.)."""

    UPPER_GREEK = "upper-greek"
    """Uppercase Greek numerals (Α, Β, Γ, etc.)."""

    SYMBOL = "symbol"
    """Footnote marks: *, †, ‡, §, ¶ and ‖. Further items repeat the marks."""

    HEBREW = "hebrew"
    """Hebrew numerals, including geresh and gershayim."""

    LOWER_SIMPLIFIED_CHINESE = "lower-simplified-chinese"
    """Simplified Chinese standard numerals (一, 二, 三, etc.)."""

    UPPER_SIMPLIFIED_CHINESE = "upper-simplified-chinese"
    """Simplified Chinese banknote numerals (壹, 贰, 叁, etc.)."""

    LOWER_TRADITIONAL_CHINESE = "lower-traditional-chinese"
    """Traditional Chinese standard numerals. Not reachable from pattern syntax."""

    UPPER_TRADITIONAL_CHINESE = "upper-traditional-chinese"
    """Traditional Chinese banknote numerals (壹, 貳, 參). Not reachable from pattern syntax."""

    HIRAGANA_AIUEO = "hiragana-aiueo"
    """Hiragana in gojūon order. Includes ん but excludes ゐ and ゑ."""

    HIRAGANA_IROHA = "hiragana-iroha"
    """Hiragana in iroha order. Includes ゐ and ゑ but excludes ん."""

    KATAKANA_AIUEO = "katakana-aiueo"
    """Katakana in gojūon order. Includes ン but excludes ヰ and ヱ."""

    KATAKANA_IROHA = "katakana-iroha"
    """Katakana in iroha order. Includes ヰ and ヱ but excludes ン."""

    KOREAN_JAMO = "korean-jamo"
    """Korean jamo (ㄱ, ㄴ, ㄷ, etc.)."""

    KOREAN_SYLLABLE = "korean-syllable"
    """Korean syllables (가, 나, 다, etc.)."""

    EASTERN_ARABIC = "eastern-arabic"
    """Eastern Arabic numerals, used in some Arabic-speaking countries."""

    EASTERN_ARABIC_PERSIAN = "eastern-arabic-persian"
    """The variant of Eastern Arabic numerals used in Persian and Urdu."""

    DEVANAGARI_NUMBER = "devanagari-number"
    """Devanagari numerals."""

    BENGALI_NUMBER = "bengali-number"
    """Bengali numerals."""

    BENGALI_LETTER = "bengali-letter"
    """Bengali letters (ক, খ, গ, ...কক, কখ etc.)."""

    CIRCLED_NUMBER = "circled-number"
    """Circled numbers (①, ②, ③, etc.), up to 50, then base-50."""

    DOUBLE_CIRCLED_NUMBER = "double-circled-number"
    """Double-circled numbers (⓵, ⓶, ⓷, etc.), up to 10, then base-10."""

    @classmethod
    def from_char(cls, c: str) -> NumeralKind | None:
        """Find the numeral kind for a representative character.

        Args:
            c: A single character

        Returns:
            The matching kind, or None if c is not a counting symbol
        """
        match c:
            case "1":
                return cls.ARABIC
            case "a":
                return cls.LOWER_LATIN
            case "A":
                return cls.UPPER_LATIN
            case "i":
                return cls.LOWER_ROMAN
            case "I":
                return cls.UPPER_ROMAN
            case "α":
                return cls.LOWER_GREEK
            case "Α":
                return cls.UPPER_GREEK
            case "*":
                return cls.SYMBOL
            case "א":
                return cls.HEBREW
            case "一":
                return cls.LOWER_SIMPLIFIED_CHINESE
            case "壹":
                return cls.UPPER_SIMPLIFIED_CHINESE
            case "あ":
                return cls.HIRAGANA_AIUEO
            case "い":
                return cls.HIRAGANA_IROHA
            case "ア":
                return cls.KATAKANA_AIUEO
            case "イ":
                return cls.KATAKANA_IROHA
            case "ㄱ":
                return cls.KOREAN_JAMO
            case "가":
                return cls.KOREAN_SYLLABLE
            case "\u0661":
                return cls.EASTERN_ARABIC
            case "\u06f1":
                return cls.EASTERN_ARABIC_PERSIAN
            case "\u0967":
                return cls.DEVANAGARI_NUMBER
            case "\u09e7":
                return cls.BENGALI_NUMBER
            case "\u0995":
                return cls.BENGALI_LETTER
            case "①":
                return cls.CIRCLED_NUMBER
            case "⓵":
                return cls.DOUBLE_CIRCLED_NUMBER
            case _:
                return None

    def to_char(self) -> str:
        """The representative character for this numeral kind."""
        match self:
            case NumeralKind.ARABIC:
                return "1"
            case NumeralKind.LOWER_LATIN:
                return "a"
            case NumeralKind.UPPER_LATIN:
                return "A"
            case NumeralKind.LOWER_ROMAN:
                return "i"
            case NumeralKind.UPPER_ROMAN:
                return "I"
            case NumeralKind.LOWER_GREEK:
                return "α"
            case NumeralKind.UPPER_GREEK:
                return "Α"
            case NumeralKind.SYMBOL:
                return "*"
            case NumeralKind.HEBREW:
                return "א"
            case NumeralKind.LOWER_SIMPLIFIED_CHINESE | NumeralKind.LOWER_TRADITIONAL_CHINESE:
                return "一"
            case NumeralKind.UPPER_SIMPLIFIED_CHINESE | NumeralKind.UPPER_TRADITIONAL_CHINESE:
                return "壹"
            case NumeralKind.HIRAGANA_AIUEO:
                return "あ"
            case NumeralKind.HIRAGANA_IROHA:
                return "い"
            case NumeralKind.KATAKANA_AIUEO:
                return "ア"
            case NumeralKind.KATAKANA_IROHA:
                return "イ"
            case NumeralKind.KOREAN_JAMO:
                return "ㄱ"
            case NumeralKind.KOREAN_SYLLABLE:
                return "가"
            case NumeralKind.EASTERN_ARABIC:
                return "\u0661"
            case NumeralKind.EASTERN_ARABIC_PERSIAN:
                return "\u06f1"
            case NumeralKind.DEVANAGARI_NUMBER:
                return "\u0967"
            case NumeralKind.BENGALI_NUMBER:
                return "\u09e7"
            case NumeralKind.BENGALI_LETTER:
                return "\u0995"
            case NumeralKind.CIRCLED_NUMBER:
                return "①"
            case NumeralKind.DOUBLE_CIRCLED_NUMBER:
                return "⓵"
            case _:
                assert_never(self)

    def apply(self, n: int) -> str:
        """Render a number in this numeral system.

        Args:
            n: Number in the range 0..MAX_NUMBER

        Returns:
            The rendered numeral. Zero renders as "-" in systems without a
            zero (letters, marks, Hebrew), as the zero digit in positional
            systems, as "n"/"N" in Roman and as the Greek zero sign in Greek.

        Raises:
            NumberOutOfRangeError: If n is outside the numbering domain
        """
        n = validate_number(n)
        match self:
            case NumeralKind.ARABIC:
                return str(n)
            case NumeralKind.LOWER_ROMAN:
                return roman_numeral(n, LetterCase.LOWER)
            case NumeralKind.UPPER_ROMAN:
                return roman_numeral(n, LetterCase.UPPER)
            case NumeralKind.LOWER_GREEK:
                return greek_numeral(n, LetterCase.LOWER)
            case NumeralKind.UPPER_GREEK:
                return greek_numeral(n, LetterCase.UPPER)
            case NumeralKind.SYMBOL:
                return symbol_numeral(n)
            case NumeralKind.HEBREW:
                return hebrew_numeral(n)
            case NumeralKind.LOWER_LATIN:
                return zeroless(tables.LOWER_LATIN, n)
            case NumeralKind.UPPER_LATIN:
                return zeroless(tables.UPPER_LATIN, n)
            case NumeralKind.HIRAGANA_AIUEO:
                return zeroless(tables.HIRAGANA_AIUEO, n)
            case NumeralKind.HIRAGANA_IROHA:
                return zeroless(tables.HIRAGANA_IROHA, n)
            case NumeralKind.KATAKANA_AIUEO:
                return zeroless(tables.KATAKANA_AIUEO, n)
            case NumeralKind.KATAKANA_IROHA:
                return zeroless(tables.KATAKANA_IROHA, n)
            case NumeralKind.KOREAN_JAMO:
                return zeroless(tables.KOREAN_JAMO, n)
            case NumeralKind.KOREAN_SYLLABLE:
                return zeroless(tables.KOREAN_SYLLABLE, n)
            case NumeralKind.BENGALI_LETTER:
                return zeroless(tables.BENGALI_LETTER, n)
            case NumeralKind.CIRCLED_NUMBER:
                return zeroless(tables.CIRCLED_NUMBER, n)
            case NumeralKind.DOUBLE_CIRCLED_NUMBER:
                return zeroless(tables.DOUBLE_CIRCLED_NUMBER, n)
            case NumeralKind.LOWER_SIMPLIFIED_CHINESE:
                return chinese_numeral(n, ChineseVariant.SIMPLIFIED, LetterCase.LOWER)
            case NumeralKind.UPPER_SIMPLIFIED_CHINESE:
                return chinese_numeral(n, ChineseVariant.SIMPLIFIED, LetterCase.UPPER)
            case NumeralKind.LOWER_TRADITIONAL_CHINESE:
                return chinese_numeral(n, ChineseVariant.TRADITIONAL, LetterCase.LOWER)
            case NumeralKind.UPPER_TRADITIONAL_CHINESE:
                return chinese_numeral(n, ChineseVariant.TRADITIONAL, LetterCase.UPPER)
            case NumeralKind.EASTERN_ARABIC:
                return decimal(tables.EASTERN_ARABIC_ZERO, n)
            case NumeralKind.EASTERN_ARABIC_PERSIAN:
                return decimal(tables.EASTERN_ARABIC_PERSIAN_ZERO, n)
            case NumeralKind.DEVANAGARI_NUMBER:
                return decimal(tables.DEVANAGARI_ZERO, n)
            case NumeralKind.BENGALI_NUMBER:
                return decimal(tables.BENGALI_ZERO, n)
            case _:
                assert_never(self)

    @property
    def numbering_system(self) -> str | None:
        """CLDR numbering system identifier, if CLDR defines one.

        Example:
            >>> NumeralKind.EASTERN_ARABIC_PERSIAN.numbering_system
            'arabext'
            >>> NumeralKind.KOREAN_JAMO.numbering_system is None
            True
        """
        for system_id, kind in _KINDS_BY_NUMBERING_SYSTEM.items():
            if kind is self:
                return system_id
        return None

    @classmethod
    def from_numbering_system(cls, system_id: str) -> NumeralKind | None:
        """Find the numeral kind for a CLDR numbering system identifier.

        Args:
            system_id: CLDR identifier such as "latn", "arab" or "hebr"

        Returns:
            The matching kind, or None if no kind implements the system
        """
        return _KINDS_BY_NUMBERING_SYSTEM.get(system_id)


# CLDR numbering system identifiers, from common/supplemental/numberingSystems.xml.
_KINDS_BY_NUMBERING_SYSTEM: dict[str, NumeralKind] = {
    "latn": NumeralKind.ARABIC,
    "arab": NumeralKind.EASTERN_ARABIC,
    "arabext": NumeralKind.EASTERN_ARABIC_PERSIAN,
    "deva": NumeralKind.DEVANAGARI_NUMBER,
    "beng": NumeralKind.BENGALI_NUMBER,
    "roman": NumeralKind.UPPER_ROMAN,
    "romanlow": NumeralKind.LOWER_ROMAN,
    "grek": NumeralKind.UPPER_GREEK,
    "greklow": NumeralKind.LOWER_GREEK,
    "hebr": NumeralKind.HEBREW,
    "hans": NumeralKind.LOWER_SIMPLIFIED_CHINESE,
    "hansfin": NumeralKind.UPPER_SIMPLIFIED_CHINESE,
    "hant": NumeralKind.LOWER_TRADITIONAL_CHINESE,
    "hantfin": NumeralKind.UPPER_TRADITIONAL_CHINESE,
}
