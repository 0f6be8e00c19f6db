"""Numbering pattern value type.

A numbering pattern is the compiled form of pattern syntax such as "1.a)":
an ordered sequence of (prefix, kind) pieces followed by a suffix.

    "1.a)"  ->  pieces=(("", ARABIC), (".", LOWER_LATIN)), suffix=")"

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from numeralengine.diagnostics import ErrorTemplate, NumberingPatternSyntaxError
from numeralengine.numerals import NumeralKind

__all__ = ["NumberingPattern", "Piece"]

# One counter level: literal prefix text and the numeral kind that follows it.
type Piece = tuple[str, NumeralKind]


@dataclass(frozen=True, slots=True)
class NumberingPattern:
    """How to turn a sequence of numbers into text.

    A pattern consists of counting symbols, for which the actual number is
    substituted, their prefixes, and one suffix. Prefixes and the suffix are
    repeated as-is.

    Examples of valid patterns: "1)", "a.", "(I)", "1.a.i".

    Attributes:
        pieces: Non-empty sequence of (prefix, kind) pairs, one per counter level
        suffix: Text after the last counting symbol
        trimmed: Omit the first prefix and the suffix when applying the
            pattern. Set through with_trimmed(), never in place.

    Immutability:
        pieces is normalized to a tuple of tuples at construction, so a
        pattern built from lists can be hashed and shared between callers.

    Example:
        >>> from numeralengine.syntax import parse
        >>> pattern = parse("1.a)")
        >>> pattern.piece_count
        2
        >>> str(pattern)
        '1.a)'
    """

    pieces: tuple[Piece, ...]
    suffix: str = ""
    trimmed: bool = False

    def __post_init__(self) -> None:
        """Normalize pieces and enforce the non-empty invariant.

        Raises:
            NumberingPatternSyntaxError: If pieces is empty
        """
        pieces = tuple((str(prefix), NumeralKind(kind)) for prefix, kind in self.pieces)
        if not pieces:
            raise NumberingPatternSyntaxError(ErrorTemplate.pattern_empty())
        object.__setattr__(self, "pieces", pieces)

    @property
    def piece_count(self) -> int:
        """How many counting symbols this pattern has."""
        return len(self.pieces)

    def with_trimmed(self) -> NumberingPattern:
        """Return a copy that omits the first prefix and the suffix."""
        return replace(self, trimmed=True)

    @classmethod
    def parse(cls, text: str) -> NumberingPattern:
        """Parse pattern syntax. See numeralengine.syntax.parser.parse_pattern."""
        from .parser import parse_pattern  # noqa: PLC0415 - circular

        return parse_pattern(text)

    def __str__(self) -> str:
        """Return the pattern in pattern syntax."""
        from .serializer import serialize_pattern  # noqa: PLC0415 - circular

        return serialize_pattern(self)
