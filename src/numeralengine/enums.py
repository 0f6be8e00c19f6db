"""Enumerations for NumeralEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

The closed set of numeral systems lives in numeralengine.numerals.kinds
because each member carries conversion behavior.

Python 3.13+.
"""

from enum import StrEnum


class LetterCase(StrEnum):
    """Letter case of a numeral system with cased glyphs.

    StrEnum provides automatic string conversion: str(LetterCase.LOWER) == "lower"
    """

    LOWER = "lower"
    """Lowercase glyphs: i, ii, iii / α, β, γ"""

    UPPER = "upper"
    """Uppercase glyphs: I, II, III / Α, Β, Γ"""


class ChineseVariant(StrEnum):
    """Script variant of Chinese numerals.

    StrEnum provides automatic string conversion: str(ChineseVariant.SIMPLIFIED) == "simplified"
    """

    SIMPLIFIED = "simplified"
    """Simplified characters: 万, 亿, 贰"""

    TRADITIONAL = "traditional"
    """Traditional characters: 萬, 億, 貳"""


class NumberingSystemStyle(StrEnum):
    """Which of a locale's CLDR numbering systems to look up.

    StrEnum provides automatic string conversion: str(NumberingSystemStyle.NATIVE) == "native"
    """

    DEFAULT = "default"
    """The numbering system the locale uses by default (e.g. latn, arab)"""

    NATIVE = "native"
    """The locale's native digits (e.g. deva for Hindi)"""

    TRADITIONAL = "traditional"
    """Traditional algorithmic system (e.g. grek for Greek, hebr for Hebrew)"""

    FINANCE = "finance"
    """Financial numerals (e.g. hansfin for Chinese)"""


__all__ = [
    "ChineseVariant",
    "LetterCase",
    "NumberingSystemStyle",
]
