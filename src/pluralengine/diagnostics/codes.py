"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Rule syntax errors (CLDR condition grammar)
        2000-2999: Ruleset errors (category structure)
        3000-3999: Operand errors (numeral parsing, argument validation)
        4000-4999: CLDR data errors (supplemental documents, Babel data)
        5000-5999: Sample annotation errors
    """

    # Rule syntax errors (1000-1999)
    RULE_UNEXPECTED_CHARACTER = 1001
    RULE_UNEXPECTED_TOKEN = 1002
    RULE_UNEXPECTED_EOF = 1003
    RULE_UNKNOWN_OPERAND = 1004
    RULE_INVALID_RANGE = 1005
    RULE_INVALID_MODULUS = 1006
    RULE_TOO_LONG = 1007

    # Ruleset errors (2000-2999)
    RULESET_EMPTY_CONDITION = 2001
    RULESET_OTHER_HAS_CONDITION = 2002
    RULESET_UNKNOWN_CATEGORY = 2003
    RULESET_COMPILE_FAILED = 2004

    # Operand errors (3000-3999)
    OPERAND_PARSE_FAILED = 3001
    OPERAND_NOT_FINITE = 3002
    EXPONENT_OUT_OF_RANGE = 3003

    # CLDR data errors (4000-4999)
    CLDR_VERSION_MISMATCH = 4001
    CLDR_DATA_MISSING = 4002
    CLDR_DATA_INVALID = 4003

    # Sample annotation errors (5000-5999)
    SAMPLE_INVALID = 5001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Condition strings are normally single-line, but spans still carry
    line and column so multi-line rule text reports correctly.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location inside the condition text (syntax errors only)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        source: The rule text or numeral the error refers to
        locale_code: Locale the failing rule or sample belongs to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    source: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[RULE_UNKNOWN_OPERAND]: Unknown operand 'x'
              --> line 1, column 1
              = source: x = 1
              = help: Operands are n, i, v, w, f, t, c and e
              = note: see https://unicode.org/reports/tr35/tr35-numbers.html#Operands

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
