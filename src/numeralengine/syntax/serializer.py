"""Numbering pattern serializer.

Converts a NumberingPattern back to pattern syntax. Parsing the output
yields a pattern with the same pieces and suffix.

Python 3.13+. Zero external dependencies.
"""

from .ast import NumberingPattern

__all__ = ["serialize_pattern"]


def serialize_pattern(pattern: NumberingPattern) -> str:
    """Serialize a pattern to pattern syntax.

    Each piece contributes its prefix followed by the representative
    character of its kind; the suffix comes last. The trimmed flag is not
    part of pattern syntax and is not serialized.

    Example:
        >>> from numeralengine.syntax.parser import parse_pattern
        >>> serialize_pattern(parse_pattern("(I)"))
        '(I)'
    """
    parts: list[str] = []
    for prefix, kind in pattern.pieces:
        parts.append(prefix)
        parts.append(kind.to_char())
    parts.append(pattern.suffix)
    return "".join(parts)
