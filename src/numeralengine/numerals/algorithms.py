"""Conversion algorithms shared by the built-in numeral systems.

Each function maps a non-negative integer to its rendering in one family of
numeral systems:

    - zeroless: bijective base-K over an alphabet without a zero symbol
    - decimal: positional base-10 over contiguous digit codepoints
    - roman_numeral: greedy subtraction over the Roman value table
    - greek_numeral: myriad-grouped alphabetic Greek numerals
    - hebrew_numeral: additive Hebrew numerals with geresh/gershayim
    - symbol_numeral: repeating footnote marks

Callers validate the number range; these functions assume 0 <= n.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from numeralengine.constants import ZERO_FALLBACK
from numeralengine.enums import LetterCase

from .tables import (
    GREEK_HUNDREDS,
    GREEK_KERAIA,
    GREEK_MYRIAD,
    GREEK_ONES,
    GREEK_TENS,
    GREEK_THOUSANDS,
    GREEK_ZERO_SIGN,
    HEBREW_FIFTEEN,
    HEBREW_GERESH,
    HEBREW_GERSHAYIM,
    HEBREW_SIXTEEN,
    HEBREW_VALUES,
    ROMAN_VALUES,
    SYMBOL_MARKS,
)

__all__ = [
    "decimal",
    "greek_numeral",
    "hebrew_numeral",
    "roman_numeral",
    "symbol_numeral",
    "zeroless",
]


def zeroless(alphabet: Sequence[str], n: int) -> str:
    """Stringify a number using a base-K counting system with no zero digit.

    This is best explained by example. Suppose the digits are 'A', 'B' and 'C':

        1 => "A",   2 => "B",   3 => "C",
        4 => "AA",  5 => "AB",  6 => "AC",
        7 => "BA",  ...        12 => "CC",
       13 => "AAA", etc.

    Spreadsheet software labels its columns the same way.

    Args:
        alphabet: Ordered glyphs for the digits 1..K
        n: Number to convert

    Returns:
        The numeral, or "-" for zero

    Example:
        >>> zeroless("abc", 13)
        'aaa'
    """
    if n == 0:
        return ZERO_FALLBACK
    base = len(alphabet)
    digits: list[str] = []
    while n > 0:
        n -= 1
        digits.append(alphabet[n % base])
        n //= base
    return "".join(reversed(digits))


def decimal(zero: str, n: int) -> str:
    """Stringify a number using a base-10 system with a zero digit.

    Assumes the ten digits occupy contiguous codepoints starting at ``zero``.

    Example:
        >>> decimal("\\u0660", 2024)
        '٢٠٢٤'
    """
    start = ord(zero)
    return "".join(chr(start + int(digit)) for digit in str(n))


def roman_numeral(n: int, case: LetterCase) -> str:
    """Stringify a number as a Roman numeral.

    Values from 4000 upward use overlined letters (x1000). Zero renders as
    "N" (nulla), lowercased for the lowercase variant.

    Example:
        >>> roman_numeral(1994, LetterCase.UPPER)
        'MCMXCIV'
        >>> roman_numeral(14, LetterCase.LOWER)
        'xiv'
    """
    if n == 0:
        return "n" if case is LetterCase.LOWER else "N"

    parts: list[str] = []
    for name, value in ROMAN_VALUES:
        while n >= value:
            n -= value
            parts.append(name)

    numeral = "".join(parts)
    return numeral.lower() if case is LetterCase.LOWER else numeral


def greek_numeral(n: int, case: LetterCase) -> str:
    """Stringify a number as an alphabetic Greek numeral.

    Digits are grouped into myriads (powers of 10000). A myriad power is
    written as a single lowercase digit followed by a capital mu, so nine
    powers are available, enough for any number below 10**40. Groups are
    separated by ", ". Every group without a thousands digit ends with a
    keraia.

    See the Greek Number Converter at
    https://www.russellcottrell.com/greek/utilities/GreekNumberConverter.htm
    and https://mathshistory.st-andrews.ac.uk/HistTopics/Greek_numbers/

    Example:
        >>> greek_numeral(1000, LetterCase.UPPER)
        '͵Α'
    """
    if n == 0:
        return GREEK_ZERO_SIGN

    column = 0 if case is LetterCase.LOWER else 1

    digits = str(n)
    digits = "0" * (-len(digits) % 4) + digits
    m_power = len(digits) // 4
    if m_power > 10:
        msg = f"Greek numerals support at most nine myriad powers, got {n}"
        raise ValueError(msg)

    parts: list[str] = []
    previous_has_number = False
    for start in range(0, len(digits), 4):
        m_power -= 1
        th, h, t, o = (int(d) for d in digits[start : start + 4])
        if th + h + t + o == 0:
            continue

        if previous_has_number:
            parts.append(", ")

        if m_power > 0:
            # The myriad prefix is always a lowercase single digit.
            parts.append(GREEK_ONES[m_power - 1][0])
            parts.append(GREEK_MYRIAD)
        if th:
            parts.append(GREEK_THOUSANDS[th - 1][column])
        if h:
            parts.append(GREEK_HUNDREDS[h - 1][column])
        if t:
            parts.append(GREEK_TENS[t - 1][column])
        if o:
            parts.append(GREEK_ONES[o - 1][column])
        if th == 0:
            parts.append(GREEK_KERAIA)
        previous_has_number = True

    return "".join(parts)


def hebrew_numeral(n: int) -> str:
    """Stringify a number as a Hebrew numeral.

    Letters are emitted greedily from the largest value. 15 and 16 are written
    as 9+6 and 9+7 and end the numeral. A single letter is followed by a
    geresh; otherwise a gershayim precedes the last letter.

    Example:
        >>> hebrew_numeral(5)
        'ה׳'
        >>> hebrew_numeral(11)
        'י״א'
        >>> hebrew_numeral(115)
        'קט״ו'
    """
    if n == 0:
        return ZERO_FALLBACK

    parts: list[str] = []
    for name, value in HEBREW_VALUES:
        while n >= value:
            if n == 15:
                parts.append(HEBREW_FIFTEEN)
                return "".join(parts)
            if n == 16:
                parts.append(HEBREW_SIXTEEN)
                return "".join(parts)

            if n == value:
                if parts:
                    parts.append(HEBREW_GERSHAYIM)
                    parts.append(name)
                else:
                    parts.append(name)
                    parts.append(HEBREW_GERESH)
            else:
                parts.append(name)
            n -= value

    return "".join(parts)


def symbol_numeral(n: int) -> str:
    """Stringify a number with footnote marks.

    The six marks are used in order; past the sixth, marks are repeated.

    Example:
        >>> symbol_numeral(2)
        '†'
        >>> symbol_numeral(7)
        '**'
    """
    if n == 0:
        return ZERO_FALLBACK
    count = len(SYMBOL_MARKS)
    symbol = SYMBOL_MARKS[(n - 1) % count]
    return symbol * ((n - 1) // count + 1)
