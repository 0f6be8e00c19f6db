"""NumeralEngine - numbering patterns and numeral systems.

Turns sequences of counter values into text: "1.a)" applied to [2, 3]
gives "2.c)". Supports 26 numeral systems (Latin and Roman letters, Greek,
Hebrew, Chinese, Japanese kana, Korean, Indic and Eastern Arabic digits,
circled numbers and footnote symbols) and numberings backed by host
callables.

Public API:
    NumeralKind - Closed set of numeral systems
    NumberingPattern - Parsed numbering pattern
    parse_pattern - Parse pattern syntax
    serialize_pattern - Convert a pattern back to pattern syntax
    apply_pattern - Apply a pattern to counter values
    apply_kth - Apply one counting symbol of a pattern
    numbering - Host call convention (pattern string or callable)
    numbering_function - Decorator for callables (context injection support)

Exceptions:
    NumeralError - Base exception class
    NumberingPatternSyntaxError - Pattern contains no counting symbol
    NumberOutOfRangeError - Number outside 0..MAX_NUMBER

Submodules:
    numeralengine.numerals - Numeral kinds and conversion algorithms
    numeralengine.syntax - Pattern value type, parser and serializer
    numeralengine.runtime - Pattern formatter and numbering facade
    numeralengine.diagnostics - Error types and diagnostic formatting
    numeralengine.locale_utils - CLDR numbering systems by locale (Babel)
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import NumberingPatternSyntaxError, NumberOutOfRangeError, NumeralError
from .numerals import NumeralKind
from .runtime import (
    FunctionNumbering,
    Numbering,
    PatternNumbering,
    apply_kth,
    apply_numbering,
    apply_pattern,
    numbering,
    numbering_function,
    numbering_to_value,
    to_numbering,
    with_trimmed,
)
from .syntax import NumberingPattern, parse_pattern, serialize_pattern

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("numeralengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FunctionNumbering",
    "Numbering",
    "NumberOutOfRangeError",
    "NumberingPattern",
    "NumberingPatternSyntaxError",
    "NumeralError",
    "NumeralKind",
    "PatternNumbering",
    "__version__",
    "apply_kth",
    "apply_numbering",
    "apply_pattern",
    "numbering",
    "numbering_function",
    "numbering_to_value",
    "parse_pattern",
    "serialize_pattern",
    "to_numbering",
    "with_trimmed",
]
