"""Runtime layer: applying patterns and numberings to counter values.

Python 3.13+. Zero external dependencies.
"""

from .formatter import apply_kth, apply_pattern, piece_count
from .numbering import (
    FunctionNumbering,
    Numbering,
    PatternNumbering,
    apply_numbering,
    numbering,
    numbering_function,
    numbering_to_value,
    requires_context,
    to_numbering,
    with_trimmed,
)
from .value_types import NumberingFunction, NumberingValue

__all__ = [
    "FunctionNumbering",
    "Numbering",
    "NumberingFunction",
    "NumberingValue",
    "PatternNumbering",
    "apply_kth",
    "apply_numbering",
    "apply_pattern",
    "numbering",
    "numbering_function",
    "numbering_to_value",
    "piece_count",
    "requires_context",
    "to_numbering",
    "with_trimmed",
]
