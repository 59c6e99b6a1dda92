"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _span_at(text: str, start: int, end: int | None = None) -> SourceSpan:
    """Build a SourceSpan for text[start:end], computing line and column."""
    from pluralengine.syntax.cursor import Cursor  # noqa: PLC0415

    start = max(0, min(start, len(text)))
    end = start if end is None else max(start, min(end, len(text)))
    line, column = Cursor(text, start).compute_line_col()
    return SourceSpan(start=start, end=end, line=line, column=column)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://unicode.org/reports/tr35/tr35-numbers.html"

    # ------------------------------------------------------------------
    # Rule syntax
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_character(char: str, text: str, position: int) -> Diagnostic:
        """Character that starts no token of the plural rule grammar.

        Args:
            char: The offending character
            text: Full condition text
            position: Offset of the character

        Returns:
            Diagnostic for RULE_UNEXPECTED_CHARACTER
        """
        return Diagnostic(
            code=DiagnosticCode.RULE_UNEXPECTED_CHARACTER,
            message=f"Unexpected character {char!r}",
            span=_span_at(text, position, position + 1),
            hint="Conditions use operands, digits, '=', '!=', '%', '..', ',' and keywords",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Plural_rules_syntax",
            source=text,
        )

    @staticmethod
    def unexpected_token(found: str, expected: str, text: str, position: int) -> Diagnostic:
        """Token in the wrong place.

        Args:
            found: Text of the token that was found
            expected: Description of what the grammar expected
            text: Full condition text
            position: Offset of the token

        Returns:
            Diagnostic for RULE_UNEXPECTED_TOKEN
        """
        return Diagnostic(
            code=DiagnosticCode.RULE_UNEXPECTED_TOKEN,
            message=f"Expected {expected}, found {found!r}",
            span=_span_at(text, position, position + len(found)),
            help_url=f"{ErrorTemplate._DOCS_BASE}#Plural_rules_syntax",
            source=text,
        )

    @staticmethod
    def unexpected_eof(expected: str, text: str) -> Diagnostic:
        """Condition ended before the grammar was satisfied.

        Args:
            expected: Description of what the grammar expected
            text: Full condition text

        Returns:
            Diagnostic for RULE_UNEXPECTED_EOF
        """
        return Diagnostic(
            code=DiagnosticCode.RULE_UNEXPECTED_EOF,
            message=f"Expected {expected}, found end of condition",
            span=_span_at(text, len(text)),
            hint="The condition is incomplete",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Plural_rules_syntax",
            source=text,
        )

    @staticmethod
    def unknown_operand(name: str, text: str, position: int) -> Diagnostic:
        """Identifier that is neither an operand nor a keyword.

        Args:
            name: The unknown identifier
            text: Full condition text
            position: Offset of the identifier

        Returns:
            Diagnostic for RULE_UNKNOWN_OPERAND
        """
        return Diagnostic(
            code=DiagnosticCode.RULE_UNKNOWN_OPERAND,
            message=f"Unknown operand {name!r}",
            span=_span_at(text, position, position + len(name)),
            hint="Operands are n, i, v, w, f, t, c and e",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Operands",
            source=text,
        )

    @staticmethod
    def invalid_range(low: int, high: int, text: str, position: int) -> Diagnostic:
        """Range whose start exceeds its end.

        Args:
            low: Range start
            high: Range end
            text: Full condition text
            position: Offset of the range start

        Returns:
            Diagnostic for RULE_INVALID_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.RULE_INVALID_RANGE,
            message=f"Range start {low} exceeds range end {high}",
            span=_span_at(text, position),
            hint="Write ranges as low..high",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Relations",
            source=text,
        )

    @staticmethod
    def invalid_modulus(text: str, position: int) -> Diagnostic:
        """Modulus of zero.

        Args:
            text: Full condition text
            position: Offset of the modulus value

        Returns:
            Diagnostic for RULE_INVALID_MODULUS
        """
        return Diagnostic(
            code=DiagnosticCode.RULE_INVALID_MODULUS,
            message="Modulus must be a positive integer, found 0",
            span=_span_at(text, position, position + 1),
            help_url=f"{ErrorTemplate._DOCS_BASE}#Relations",
            source=text,
        )

    @staticmethod
    def condition_too_long(length: int, limit: int) -> Diagnostic:
        """Condition text exceeds MAX_CONDITION_LENGTH.

        Args:
            length: Actual text length
            limit: Maximum accepted length

        Returns:
            Diagnostic for RULE_TOO_LONG
        """
        return Diagnostic(
            code=DiagnosticCode.RULE_TOO_LONG,
            message=f"Condition length {length} exceeds maximum {limit}",
            hint="CLDR conditions are at most a few hundred characters",
        )

    # ------------------------------------------------------------------
    # Ruleset structure
    # ------------------------------------------------------------------

    @staticmethod
    def empty_condition(category: str) -> Diagnostic:
        """Non-OTHER category without a condition.

        Args:
            category: Category name

        Returns:
            Diagnostic for RULESET_EMPTY_CONDITION
        """
        return Diagnostic(
            code=DiagnosticCode.RULESET_EMPTY_CONDITION,
            message=f"Category '{category}' has no condition",
            hint="Only 'other' may be unconditional",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Language_Plural_Rules",
        )

    @staticmethod
    def other_has_condition(condition: str) -> Diagnostic:
        """OTHER category carrying a condition.

        Args:
            condition: The condition text found for 'other'

        Returns:
            Diagnostic for RULESET_OTHER_HAS_CONDITION
        """
        return Diagnostic(
            code=DiagnosticCode.RULESET_OTHER_HAS_CONDITION,
            message="Category 'other' must not have a condition",
            hint="'other' applies whenever no other category matches",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Language_Plural_Rules",
            source=condition,
        )

    @staticmethod
    def unknown_category(key: str) -> Diagnostic:
        """Ruleset key naming no plural category.

        Args:
            key: The offending key

        Returns:
            Diagnostic for RULESET_UNKNOWN_CATEGORY
        """
        return Diagnostic(
            code=DiagnosticCode.RULESET_UNKNOWN_CATEGORY,
            message=f"Unknown plural category {key!r}",
            hint="Categories are zero, one, two, few, many and other",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Language_Plural_Rules",
        )

    @staticmethod
    def ruleset_compile_failed(
        rule_name: str, locales: Iterable[str], reason: str
    ) -> Diagnostic:
        """Ruleset shared by one or more locales failed to compile.

        Args:
            rule_name: Name of the rule being compiled
            locales: Locale tags sharing the ruleset
            reason: Message of the underlying error

        Returns:
            Diagnostic for RULESET_COMPILE_FAILED
        """
        tags = ", ".join(tag or "(root)" for tag in locales)
        return Diagnostic(
            code=DiagnosticCode.RULESET_COMPILE_FAILED,
            message=f"Rule '{rule_name}' for locales [{tags}] failed to compile: {reason}",
            hint="Fix the CLDR data; a rule table is built completely or not at all",
        )

    # ------------------------------------------------------------------
    # Operands
    # ------------------------------------------------------------------

    @staticmethod
    def operand_parse_failed(value: str) -> Diagnostic:
        """Numeral text that is not a finite decimal number.

        Args:
            value: The text that failed to parse

        Returns:
            Diagnostic for OPERAND_PARSE_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.OPERAND_PARSE_FAILED,
            message=f"Cannot parse {value!r} as a decimal number",
            hint="Use digits with an optional '.' fraction, e.g. '1.50'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Operands",
            source=value,
        )

    @staticmethod
    def operand_not_finite(value: object) -> Diagnostic:
        """NaN or infinite numeric input.

        Args:
            value: The non-finite value

        Returns:
            Diagnostic for OPERAND_NOT_FINITE
        """
        return Diagnostic(
            code=DiagnosticCode.OPERAND_NOT_FINITE,
            message=f"Plural operands require a finite number, got {value!r}",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Operands",
        )

    @staticmethod
    def exponent_out_of_range(exponent: int, minimum: int, maximum: int) -> Diagnostic:
        """Suppressed exponent outside the supported range.

        Args:
            exponent: Requested exponent
            minimum: Smallest accepted exponent
            maximum: Largest accepted exponent

        Returns:
            Diagnostic for EXPONENT_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.EXPONENT_OUT_OF_RANGE,
            message=f"Suppressed exponent {exponent} is outside [{minimum}, {maximum}]",
            hint="Compact formats suppress between 10^0 and 10^21",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Operands",
        )

    # ------------------------------------------------------------------
    # CLDR data
    # ------------------------------------------------------------------

    @staticmethod
    def cldr_version_mismatch(versions: Iterable[str]) -> Diagnostic:
        """Cardinal and ordinal documents from different CLDR releases.

        Args:
            versions: Distinct versions found

        Returns:
            Diagnostic for CLDR_VERSION_MISMATCH
        """
        found = ", ".join(sorted(versions))
        return Diagnostic(
            code=DiagnosticCode.CLDR_VERSION_MISMATCH,
            message=f"CLDR plural data versions differ: {found}",
            hint="Load cardinal and ordinal rules from the same CLDR release",
        )

    @staticmethod
    def cldr_data_missing(what: str) -> Diagnostic:
        """Required section absent from the supplied CLDR data.

        Args:
            what: Name of the missing section

        Returns:
            Diagnostic for CLDR_DATA_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.CLDR_DATA_MISSING,
            message=f"CLDR plural data has no {what}",
            hint="Supply both plurals.json and ordinals.json",
        )

    @staticmethod
    def cldr_data_invalid(detail: str) -> Diagnostic:
        """Malformed CLDR data.

        Args:
            detail: What is wrong with the data

        Returns:
            Diagnostic for CLDR_DATA_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.CLDR_DATA_INVALID,
            message=f"Malformed CLDR plural data: {detail}",
        )

    # ------------------------------------------------------------------
    # Samples
    # ------------------------------------------------------------------

    @staticmethod
    def sample_invalid(sample: str, text: str) -> Diagnostic:
        """Sample annotation entry that is not a decimal numeral.

        Args:
            sample: The offending entry
            text: Full annotated rule text

        Returns:
            Diagnostic for SAMPLE_INVALID
        """
        position = text.find(sample)
        return Diagnostic(
            code=DiagnosticCode.SAMPLE_INVALID,
            message=f"Invalid sample {sample!r}",
            span=_span_at(text, position, position + len(sample)) if position >= 0 else None,
            hint="Samples are decimals, a~b ranges, compact forms like 1c6, or '…'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Samples",
            source=text,
        )
