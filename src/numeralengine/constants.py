"""Shared constants for NumeralEngine.

This module provides centralized configuration constants used across the
numerals, syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Number limits: The accepted integer domain for numeral conversion
- Cache limits: Memory bounds for caching subsystems
- Fallback strings: Renderings used where a numeral system has no zero

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Number limits
    "MAX_NUMBER",
    # Cache limits
    "DEFAULT_PATTERN_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_NUMBERING_SYSTEM",
    # Fallback strings
    "ZERO_FALLBACK",
    "INVALID_PATTERN_MESSAGE",
]

# ============================================================================
# NUMBER LIMITS
# ============================================================================

# Largest number accepted by numeral conversion.
# Counters in the host document compiler are unsigned 64-bit integers.
# The Greek myriad algorithm supports at most nine myriad powers (< 10**40)
# and the Chinese unit table ends at 京 (10**16), both of which cover this range.
MAX_NUMBER: int = 2**64 - 1

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached parsed patterns.
# Documents typically use a handful of distinct patterns (headings, figures,
# equations, list levels), so 256 entries is far more than needed.
DEFAULT_PATTERN_CACHE_SIZE: int = 256

# Maximum cached Babel Locale instances.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# CLDR identifier of the Western digit system.
DEFAULT_NUMBERING_SYSTEM: str = "latn"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Rendering of zero in systems without a zero symbol
# (zeroless alphabets, symbol marks, Hebrew).
ZERO_FALLBACK: str = "-"

INVALID_PATTERN_MESSAGE: str = "invalid numbering pattern"
