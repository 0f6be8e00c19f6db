"""Numbering pattern syntax: value type, parser and serializer.

Public API:
    NumberingPattern - Parsed pattern (pieces, suffix, trimmed flag)
    parse - Parse pattern syntax
    parse_cached - Parse pattern syntax with an LRU cache
    serialize - Convert a pattern back to pattern syntax
    clear_pattern_cache - Reset the parse cache

Python 3.13+. Zero external dependencies.
"""

from .ast import NumberingPattern, Piece
from .parser import clear_pattern_cache, parse_pattern, parse_pattern_cached
from .serializer import serialize_pattern


def parse(text: str) -> NumberingPattern:
    """Parse pattern syntax into a NumberingPattern.

    Convenience wrapper around parse_pattern.

    Raises:
        NumberingPatternSyntaxError: If text contains no counting symbol
    """
    return parse_pattern(text)


def serialize(pattern: NumberingPattern) -> str:
    """Serialize a NumberingPattern to pattern syntax."""
    return serialize_pattern(pattern)


__all__ = [
    "NumberingPattern",
    "Piece",
    "clear_pattern_cache",
    "parse",
    "parse_pattern",
    "parse_pattern_cached",
    "serialize",
    "serialize_pattern",
]
