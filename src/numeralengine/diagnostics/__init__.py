"""Diagnostic system for NumeralEngine errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    NumberingPatternSyntaxError,
    NumberOutOfRangeError,
    NumeralError,
    UnknownLocaleError,
    UnsupportedNumberingSystemError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "NumberOutOfRangeError",
    "NumberingPatternSyntaxError",
    "NumeralError",
    "OutputFormat",
    "UnknownLocaleError",
    "UnsupportedNumberingSystemError",
]
