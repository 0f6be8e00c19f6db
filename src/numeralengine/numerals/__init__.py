"""Numeral systems and their conversion algorithms.

NumeralKind is the closed registry of numeral systems. The algorithm
modules are exposed for callers that need a single family directly.

Python 3.13+. Zero external dependencies.
"""

from .algorithms import (
    decimal,
    greek_numeral,
    hebrew_numeral,
    roman_numeral,
    symbol_numeral,
    zeroless,
)
from .chinese import chinese_numeral
from .kinds import NumeralKind, validate_number

__all__ = [
    "NumeralKind",
    "chinese_numeral",
    "decimal",
    "greek_numeral",
    "hebrew_numeral",
    "roman_numeral",
    "symbol_numeral",
    "validate_number",
    "zeroless",
]
