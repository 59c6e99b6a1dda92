"""Diagnostic system for plural rule errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CLDRDataError,
    CLDRVersionMismatchError,
    PluralArgumentError,
    PluralError,
    PluralParseError,
    PluralRuleSyntaxError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "CLDRDataError",
    "CLDRVersionMismatchError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "PluralArgumentError",
    "PluralError",
    "PluralParseError",
    "PluralRuleSyntaxError",
    "SourceSpan",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
