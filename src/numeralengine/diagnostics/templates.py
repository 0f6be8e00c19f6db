"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from numeralengine.constants import INVALID_PATTERN_MESSAGE, MAX_NUMBER

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def pattern_invalid(pattern: str) -> Diagnostic:
        """Pattern text contains no counting symbol.

        Args:
            pattern: The pattern text that was parsed

        Returns:
            Diagnostic for PATTERN_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.PATTERN_INVALID,
            message=INVALID_PATTERN_MESSAGE,
            hint="Include at least one counting symbol such as 1, a, A, i or I",
            pattern=pattern,
        )

    @staticmethod
    def pattern_empty() -> Diagnostic:
        """Pattern constructed programmatically without pieces.

        Returns:
            Diagnostic for PATTERN_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.PATTERN_EMPTY,
            message=INVALID_PATTERN_MESSAGE,
            hint="A numbering pattern needs at least one (prefix, kind) piece",
        )

    @staticmethod
    def number_negative(value: int) -> Diagnostic:
        """Number below zero.

        Args:
            value: The rejected number

        Returns:
            Diagnostic for NUMBER_NEGATIVE
        """
        msg = f"Number {value} is negative"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_NEGATIVE,
            message=msg,
            hint="Numberings are defined for non-negative integers only",
            received_value=repr(value),
        )

    @staticmethod
    def number_too_large(value: int) -> Diagnostic:
        """Number beyond the 64-bit counter range.

        Args:
            value: The rejected number

        Returns:
            Diagnostic for NUMBER_TOO_LARGE
        """
        msg = f"Number {value} exceeds the maximum of {MAX_NUMBER}"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_TOO_LARGE,
            message=msg,
            hint="Counters are unsigned 64-bit integers",
            received_value=repr(value),
        )

    @staticmethod
    def number_not_integer(value: object) -> Diagnostic:
        """Value that is not an int (bool included).

        Args:
            value: The rejected value

        Returns:
            Diagnostic for NUMBER_NOT_INTEGER
        """
        msg = f"Expected an integer, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_NOT_INTEGER,
            message=msg,
            hint="Convert the value with int() before numbering it",
            received_value=repr(value),
        )

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale not known to CLDR.

        Args:
            locale_code: The locale code as supplied
            reason: Underlying Babel error text

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP-47 or POSIX locale code such as 'en-US' or 'ar_EG'",
            locale_code=locale_code,
        )

    @staticmethod
    def numbering_system_unsupported(locale_code: str, system_id: str) -> Diagnostic:
        """CLDR numbering system with no numeral kind.

        Args:
            locale_code: The locale that was looked up
            system_id: The CLDR identifier found ("" when none is defined)

        Returns:
            Diagnostic for NUMBERING_SYSTEM_UNSUPPORTED
        """
        if system_id:
            msg = f"Numbering system '{system_id}' of locale '{locale_code}' is not supported"
        else:
            msg = f"Locale '{locale_code}' defines no numbering system for this style"
        return Diagnostic(
            code=DiagnosticCode.NUMBERING_SYSTEM_UNSUPPORTED,
            message=msg,
            locale_code=locale_code,
        )
