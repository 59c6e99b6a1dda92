"""Unified validation result for plural rule sample validation.

Consolidates validation feedback for CLDR sample annotations:
- Errors: a sample selects a different category than its annotation claims,
  or a sample annotation cannot be parsed
- Warnings: informational findings (e.g. a category without samples)

Python 3.13+.
"""

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


# ============================================================================
# VALIDATION ERROR & WARNING TYPES
# ============================================================================


# Maximum content length before truncation when sanitizing
_SANITIZE_MAX_CONTENT_LENGTH: int = 100


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured error from sample validation.

    Attributes:
        code: Error code (e.g., "sample-mismatch", "sample-invalid")
        message: Human-readable error message
        content: The sample (or annotation text) the error refers to
        locale_code: Locale tag whose rule was checked ("" for root)
        category: Annotated category of the sample
        rule_type: Rule family ("cardinal" or "ordinal")
    """

    code: str
    message: str
    content: str
    locale_code: str | None = None
    category: str | None = None
    rule_type: str | None = None

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
    ) -> str:
        """Format error as human-readable string.

        Args:
            sanitize: If True, truncate content
            redact_content: If True (and sanitize=True), completely redact
                           content instead of truncating.

        Returns:
            Formatted error string with optional content sanitization.

        Examples:
            >>> error = ValidationError("sample-mismatch", "1 selects other", "1", "en", "one")
            >>> error.format()
            "[sample-mismatch] en/one: 1 selects other (content: '1')"
        """
        if sanitize:
            if redact_content:
                content_display = "[content redacted]"
            elif len(self.content) > _SANITIZE_MAX_CONTENT_LENGTH:
                content_display = self.content[:_SANITIZE_MAX_CONTENT_LENGTH] + "..."
            else:
                content_display = self.content
        else:
            content_display = self.content

        location = ""
        if self.locale_code is not None:
            location = f" {self.locale_code or '(root)'}"
            if self.category is not None:
                location += f"/{self.category}"
            if self.rule_type is not None:
                location += f" ({self.rule_type})"

        return f"[{self.code}]{location}: {self.message} (content: {content_display!r})"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured informational warning from sample validation.

    Attributes:
        code: Warning code (e.g., "no-samples")
        message: Human-readable warning message
        context: Additional context (e.g., the locale tag)
    """

    code: str
    message: str
    context: str | None = None

    def format(self) -> str:
        """Format warning as human-readable string."""
        context = f" ({self.context})" if self.context else ""
        return f"[{self.code}]: {self.message}{context}"


# ============================================================================
# UNIFIED VALIDATION RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating rule samples.

    Immutable result object for thread-safe validation feedback.

    Attributes:
        errors: Sample mismatches and unparseable samples
        warnings: Informational warnings
        checked_count: Number of samples evaluated

    Example:
        >>> result = ValidationResult.valid(checked_count=12)
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]
    checked_count: int = 0

    @property
    def is_valid(self) -> bool:
        """Check if validation passed. Warnings do not affect validity."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @staticmethod
    def valid(checked_count: int = 0) -> "ValidationResult":
        """Create a valid result with no errors or warnings.

        Args:
            checked_count: Number of samples evaluated

        Returns:
            ValidationResult with empty tuples for errors and warnings
        """
        return ValidationResult(errors=(), warnings=(), checked_count=checked_count)

    @staticmethod
    def invalid(
        errors: tuple[ValidationError, ...] = (),
        warnings: tuple[ValidationWarning, ...] = (),
        checked_count: int = 0,
    ) -> "ValidationResult":
        """Create a result carrying errors and/or warnings.

        Args:
            errors: Tuple of validation errors (default: empty)
            warnings: Tuple of validation warnings (default: empty)
            checked_count: Number of samples evaluated

        Returns:
            ValidationResult with provided errors/warnings
        """
        return ValidationResult(errors=errors, warnings=warnings, checked_count=checked_count)

    @staticmethod
    def combine(results: Iterable["ValidationResult"]) -> "ValidationResult":
        """Merge several results into one, preserving order.

        Args:
            results: Results to merge

        Returns:
            ValidationResult holding every error and warning
        """
        errors: list[ValidationError] = []
        warnings: list[ValidationWarning] = []
        checked = 0
        for result in results:
            errors.extend(result.errors)
            warnings.extend(result.warnings)
            checked += result.checked_count
        return ValidationResult(
            errors=tuple(errors), warnings=tuple(warnings), checked_count=checked
        )

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
        include_warnings: bool = True,
    ) -> str:
        """Format validation result as human-readable string.

        Args:
            sanitize: If True, truncate error content.
            redact_content: If True (and sanitize=True), completely redact
                           error content instead of truncating.
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format(sanitize=sanitize, redact_content=redact_content)}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                lines.append(f"  {warning.format()}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
