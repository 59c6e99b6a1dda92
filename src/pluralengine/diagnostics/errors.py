"""Plural exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CLDRDataError",
    "CLDRVersionMismatchError",
    "PluralArgumentError",
    "PluralError",
    "PluralParseError",
    "PluralRuleSyntaxError",
]


class PluralError(Exception):
    """Base exception for all PluralEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PluralError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PluralRuleSyntaxError(PluralError):
    """CLDR plural condition could not be compiled.

    Fatal: a rule table is built completely or not at all. Installing a
    partially compiled table would silently select wrong categories.
    """


class PluralParseError(PluralError):
    """Numeral text could not be parsed into plural operands.

    Never raised by the selector API. Parse failures are reported as
    absence (None) or returned in an error tuple, consistent with the
    (result, errors) convention of parse_operand().

    Attributes:
        input_value: The string that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize PluralParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
        """
        super().__init__(message)
        self.input_value = input_value


class PluralArgumentError(PluralError, ValueError):
    """Invalid caller input: suppressed exponent out of range, non-finite value.

    Subclasses ValueError so callers validating plain arguments can catch it
    without importing PluralEngine exception types.
    """


class CLDRDataError(PluralError):
    """CLDR plural data is missing or malformed."""


class CLDRVersionMismatchError(CLDRDataError):
    """Cardinal and ordinal data come from different CLDR releases.

    Attributes:
        versions: The distinct versions found
    """

    def __init__(self, message: str | Diagnostic, *, versions: tuple[str, ...] = ()) -> None:
        """Initialize CLDRVersionMismatchError.

        Args:
            message: Error message string OR Diagnostic object
            versions: The distinct versions found
        """
        super().__init__(message)
        self.versions = versions
