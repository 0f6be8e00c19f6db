"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (numbering pattern construction)
        2000-2999: Number errors (values outside the accepted domain)
        3000-3999: Locale errors (CLDR numbering system lookup)
    """

    # Pattern errors (1000-1999)
    PATTERN_INVALID = 1001
    PATTERN_EMPTY = 1002

    # Number errors (2000-2999)
    NUMBER_NEGATIVE = 2001
    NUMBER_TOO_LARGE = 2002
    NUMBER_NOT_INTEGER = 2003

    # Locale errors (3000-3999)
    LOCALE_UNKNOWN = 3001
    NUMBERING_SYSTEM_UNSUPPORTED = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        pattern: Numbering pattern text involved in the error (pattern errors)
        received_value: Offending value rendered with repr() (number errors)
        locale_code: Locale involved in the error (locale errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    pattern: str | None = None
    received_value: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PATTERN_INVALID]: invalid numbering pattern
              = pattern: ##
              = help: Include at least one counting symbol such as 1, a, A, i or I

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
