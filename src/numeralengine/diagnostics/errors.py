"""NumeralEngine exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class NumeralError(Exception):
    """Base exception for all NumeralEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NumeralError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class NumberingPatternSyntaxError(NumeralError, ValueError):
    """Numbering pattern contains no counting symbol.

    Raised only while constructing a pattern. Patterns with a single counting
    symbol, an empty prefix or an empty suffix are valid.

    Attributes:
        pattern: The offending pattern text ("" for programmatic construction)
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str = "") -> None:
        """Initialize NumberingPatternSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            pattern: The pattern text that failed to parse
        """
        super().__init__(message)
        self.pattern = pattern


class NumberOutOfRangeError(NumeralError, ValueError):
    """Number outside the accepted domain (0 to MAX_NUMBER, integers only).

    Attributes:
        value: The rejected value
    """

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        """Initialize NumberOutOfRangeError.

        Args:
            message: Error message string OR Diagnostic object
            value: The value that was rejected
        """
        super().__init__(message)
        self.value = value


class UnknownLocaleError(NumeralError, LookupError):
    """Locale code not recognized by CLDR.

    Attributes:
        locale_code: The locale code as supplied by the caller
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        """Initialize UnknownLocaleError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: The locale code that failed to resolve
        """
        super().__init__(message)
        self.locale_code = locale_code


class UnsupportedNumberingSystemError(NumeralError, LookupError):
    """CLDR numbering system with no corresponding numeral kind.

    Attributes:
        system_id: CLDR numbering system identifier (e.g. "thai"), or ""
            when the locale defines no system for the requested style
    """

    def __init__(self, message: str | Diagnostic, *, system_id: str = "") -> None:
        """Initialize UnsupportedNumberingSystemError.

        Args:
            message: Error message string OR Diagnostic object
            system_id: The CLDR numbering system identifier
        """
        super().__init__(message)
        self.system_id = system_id
