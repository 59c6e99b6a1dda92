"""Check compiled rules against the samples CLDR publishes with them.

Every CLDR rule carries @integer/@decimal examples of numbers in its
category. Selecting each example through the compiled rule and comparing
with the annotated category is the conformance test for the compiler.

Python 3.13+.
"""

import logging
from typing import TYPE_CHECKING

from pluralengine.diagnostics import (
    PluralArgumentError,
    PluralParseError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from pluralengine.enums import PluralCategory, PluralRuleType
from pluralengine.locale_utils import normalize_locale, split_locale
from pluralengine.runtime.compiler import CompiledRule
from pluralengine.runtime.registry import PluralRuleRegistry, build_registry
from pluralengine.runtime.rulesets import Ruleset
from pluralengine.syntax.samples import parse_samples

if TYPE_CHECKING:
    from pluralengine.cldr import PluralData

__all__ = ["validate_plural_data", "validate_ruleset"]

logger = logging.getLogger(__name__)


def validate_ruleset(
    ruleset: Ruleset,
    rule: CompiledRule,
    locale_code: str = "",
    rule_type: PluralRuleType | None = None,
) -> ValidationResult:
    """Select every annotated sample of a ruleset through a compiled rule.

    Args:
        ruleset: Ruleset whose condition texts carry sample annotations
        rule: Compiled rule to check
        locale_code: Locale the ruleset belongs to (for messages)
        rule_type: Rule family of the ruleset (for messages)

    Returns:
        ValidationResult with one error per mismatching or unparseable
        sample, and a warning for each non-OTHER category without samples
        when other categories do have samples
    """
    type_name = None if rule_type is None else str(rule_type)
    errors: list[ValidationError] = []
    without_samples: list[PluralCategory] = []
    checked = 0

    for category, text in ruleset.rules:
        try:
            samples = parse_samples(text)
        except PluralParseError as exc:
            errors.append(
                ValidationError(
                    code="sample-invalid",
                    message=exc.diagnostic.message if exc.diagnostic else str(exc),
                    content=text,
                    locale_code=locale_code,
                    category=str(category),
                    rule_type=type_name,
                )
            )
            continue

        if not samples and category is not PluralCategory.OTHER:
            without_samples.append(category)

        for sample in samples:
            try:
                operand = sample.to_operand()
            except PluralArgumentError as exc:
                errors.append(
                    ValidationError(
                        code="sample-invalid",
                        message=exc.diagnostic.message if exc.diagnostic else str(exc),
                        content=sample.text,
                        locale_code=locale_code,
                        category=str(category),
                        rule_type=type_name,
                    )
                )
                continue
            checked += 1
            actual = rule(operand)
            if actual is not category:
                errors.append(
                    ValidationError(
                        code="sample-mismatch",
                        message=f"{sample.text} selects '{actual}'",
                        content=sample.text,
                        locale_code=locale_code,
                        category=str(category),
                        rule_type=type_name,
                    )
                )

    warnings: list[ValidationWarning] = []
    if checked and without_samples:
        warnings.extend(
            ValidationWarning(
                code="no-samples",
                message=f"Category '{category}' has no samples",
                context=locale_code or "(root)",
            )
            for category in without_samples
        )

    if errors or warnings:
        return ValidationResult.invalid(tuple(errors), tuple(warnings), checked)
    return ValidationResult.valid(checked)


def validate_plural_data(
    data: "PluralData", registry: PluralRuleRegistry | None = None
) -> ValidationResult:
    """Validate every locale/category/sample triple of both rule types.

    Args:
        data: Rulesets with sample annotations
        registry: Registry to check (default: built from data)

    Returns:
        Combined ValidationResult; a locale the registry cannot resolve is
        reported as a "no-rule" error
    """
    active = registry if registry is not None else build_registry(data)
    results: list[ValidationResult] = []

    for rule_type in PluralRuleType:
        table = active.table(rule_type)
        for tag, ruleset in sorted(data.rulesets(rule_type).items()):
            locale_code = normalize_locale(tag)
            language, region = split_locale(locale_code)
            rule = table.lookup(language, region)
            if rule is None:
                results.append(
                    ValidationResult.invalid(
                        errors=(
                            ValidationError(
                                code="no-rule",
                                message=f"No {rule_type} rule resolves for this locale",
                                content=tag,
                                locale_code=locale_code,
                                rule_type=str(rule_type),
                            ),
                        )
                    )
                )
                continue
            results.append(validate_ruleset(ruleset, rule, locale_code, rule_type))

    result = ValidationResult.combine(results)
    logger.debug(
        "Validated %d sample(s): %d error(s), %d warning(s)",
        result.checked_count,
        result.error_count,
        result.warning_count,
    )
    return result
