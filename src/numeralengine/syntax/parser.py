"""Numbering pattern parser.

Pattern syntax interleaves literal text with counting symbols:

    pattern := (prefix counting-symbol)+ suffix

Counting symbols are the representative characters of the numeral kinds
(1, a, A, i, I, α, Α, *, א, 一, 壹, あ, い, ア, イ, ㄱ, 가, ١, ۱, १, ১, ক, ①, ⓵).
They are recognized greedily left to right; every other character is
literal text.

Python 3.13+. Zero external dependencies.
"""

import functools
import logging

from numeralengine.constants import DEFAULT_PATTERN_CACHE_SIZE
from numeralengine.diagnostics import ErrorTemplate, NumberingPatternSyntaxError
from numeralengine.numerals import NumeralKind

from .ast import NumberingPattern, Piece

__all__ = ["clear_pattern_cache", "parse_pattern", "parse_pattern_cached"]

logger = logging.getLogger(__name__)


def parse_pattern(text: str) -> NumberingPattern:
    """Parse pattern syntax into a NumberingPattern.

    The text is scanned by Unicode code point. Text before each counting
    symbol becomes that piece's prefix; text after the last one becomes the
    suffix.

    Args:
        text: Pattern syntax, e.g. "1.a)"

    Returns:
        Parsed pattern (never trimmed)

    Raises:
        NumberingPatternSyntaxError: If text contains no counting symbol

    Example:
        >>> parse_pattern("(I)")
        NumberingPattern(pieces=(('(', <NumeralKind.UPPER_ROMAN: 'upper-roman'>),), suffix=')', trimmed=False)
        >>> parse_pattern("##")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        NumberingPatternSyntaxError: invalid numbering pattern
    """
    pieces: list[Piece] = []
    handled = 0

    for i, c in enumerate(text):
        kind = NumeralKind.from_char(c)
        if kind is None:
            continue
        pieces.append((text[handled:i], kind))
        handled = i + 1

    if not pieces:
        raise NumberingPatternSyntaxError(ErrorTemplate.pattern_invalid(text), pattern=text)

    logger.debug("Parsed numbering pattern %r into %d piece(s)", text, len(pieces))
    return NumberingPattern(pieces=tuple(pieces), suffix=text[handled:])


@functools.lru_cache(maxsize=DEFAULT_PATTERN_CACHE_SIZE)
def parse_pattern_cached(text: str) -> NumberingPattern:
    """Parse pattern syntax with caching.

    Patterns are immutable, so the same instance can be shared by every
    caller. Failed parses are not cached.

    Thread-safe via lru_cache internal locking.
    """
    return parse_pattern(text)


def clear_pattern_cache() -> None:
    """Clear the parsed pattern cache."""
    parse_pattern_cached.cache_clear()
    logger.debug("Numbering pattern cache cleared")
