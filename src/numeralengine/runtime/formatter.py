"""Apply numbering patterns to sequences of numbers.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from numeralengine.syntax import NumberingPattern

__all__ = ["apply_kth", "apply_pattern", "piece_count"]


def apply_pattern(pattern: NumberingPattern, numbers: Sequence[int]) -> str:
    """Apply the pattern to the given numbers.

    Numbers are paired with pieces positionally. Numbers beyond the last
    piece reuse the last piece's kind, separated by the last piece's prefix,
    or by the suffix when that prefix is empty. Pieces beyond the last number
    are omitted. A trimmed pattern omits the first prefix and the suffix.

    Args:
        pattern: Parsed numbering pattern
        numbers: Counter values, outermost first

    Returns:
        Formatted numbering

    Raises:
        NumberOutOfRangeError: If a number is outside 0..MAX_NUMBER

    Example:
        >>> from numeralengine.syntax import parse
        >>> apply_pattern(parse("1.1)"), [1, 2, 3])
        '1.2.3)'
        >>> apply_pattern(parse("(I)"), [4])
        '(IV)'
    """
    parts: list[str] = []
    paired = min(len(pattern.pieces), len(numbers))

    for i, ((prefix, kind), n) in enumerate(
        zip(pattern.pieces[:paired], numbers[:paired], strict=True)
    ):
        if i > 0 or not pattern.trimmed:
            parts.append(prefix)
        parts.append(kind.apply(n))

    last_prefix, last_kind = pattern.pieces[-1]
    separator = last_prefix or pattern.suffix
    for n in numbers[paired:]:
        parts.append(separator)
        parts.append(last_kind.apply(n))

    if not pattern.trimmed:
        parts.append(pattern.suffix)

    return "".join(parts)


def apply_kth(pattern: NumberingPattern, k: int, number: int) -> str:
    """Apply only the k-th counting symbol of the pattern to one number.

    The first prefix and the suffix are always emitted, regardless of the
    trimmed flag. k past the last piece selects the last piece.

    Raises:
        ValueError: If k is negative
        NumberOutOfRangeError: If number is outside 0..MAX_NUMBER

    Example:
        >>> from numeralengine.syntax import parse
        >>> apply_kth(parse("1.a)"), 1, 2)
        'b)'
    """
    if k < 0:
        msg = f"Piece index must be non-negative, got {k}"
        raise ValueError(msg)

    first_prefix = pattern.pieces[0][0]
    _, kind = pattern.pieces[min(k, len(pattern.pieces) - 1)]
    return f"{first_prefix}{kind.apply(number)}{pattern.suffix}"


def piece_count(pattern: NumberingPattern) -> int:
    """How many counting symbols the pattern has."""
    return pattern.piece_count
