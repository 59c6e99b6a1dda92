"""Plural category selection for a locale.

PluralRule is the public face of the compiled rules: pick a rule by
language, region and rule type, then select categories for numbers.

Python 3.13+.

Reference: https://www.unicode.org/cldr/charts/latest/supplemental/language_plural_rules.html
"""

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import overload

from pluralengine.enums import PluralCategory, PluralRuleType
from pluralengine.locale_utils import is_root_locale, split_locale

from .compiler import CompiledRule, constant_rule
from .operands import PluralOperand
from .registry import PluralRuleRegistry, get_shared_registry

__all__ = ["PluralRule", "select_plural_category"]


def _is_non_finite(value: int | float | Decimal) -> bool:
    if isinstance(value, Decimal):
        return not value.is_finite()
    return isinstance(value, float) and not math.isfinite(value)


@dataclass(frozen=True, slots=True)
class PluralRule:
    """Plural rule of one locale and rule type.

    Equality uses the identity (rule_type, language, region) only.

    Attributes:
        rule_type: Cardinal or ordinal
        language: Lower-case language subtag ("" for root)
        region: Upper-case region subtag ("" if none was requested)

    Example:
        >>> rule = PluralRule.create("en", "", PluralRuleType.CARDINAL)
        >>> rule.select(1), rule.select("1.0"), rule.select(2)
        (<PluralCategory.ONE: 'one'>, <PluralCategory.OTHER: 'other'>, \
<PluralCategory.OTHER: 'other'>)
    """

    rule_type: PluralRuleType
    language: str
    region: str = ""
    compiled: CompiledRule = field(default_factory=constant_rule, compare=False, repr=False)

    @classmethod
    def create(
        cls,
        language: str,
        region: str | None,
        rule_type: PluralRuleType,
        *,
        registry: PluralRuleRegistry | None = None,
    ) -> "PluralRule | None":
        """Look up the rule for a language and optional region.

        Args:
            language: Language subtag, any case ("", "root" and "und" mean root)
            region: Region subtag, any case; None or "" for none
            rule_type: Cardinal or ordinal
            registry: Registry to use (default: shared Babel-backed registry)

        Returns:
            PluralRule, or None if the language has no rules

        Raises:
            TypeError: If language or rule_type is missing or of the wrong type
        """
        if not isinstance(language, str):
            msg = f"language must be a str, got {type(language).__name__}"
            raise TypeError(msg)
        if not isinstance(rule_type, PluralRuleType):
            msg = f"rule_type must be a PluralRuleType, got {type(rule_type).__name__}"
            raise TypeError(msg)

        normalized_language = language.strip().lower()
        normalized_region = (region or "").strip().upper()
        if is_root_locale(normalized_language):
            normalized_language = ""
            normalized_region = ""

        active = registry if registry is not None else get_shared_registry()
        compiled = active.lookup(normalized_language, normalized_region, rule_type)
        if compiled is None:
            return None
        return cls(rule_type, normalized_language, normalized_region, compiled)

    @classmethod
    def create_or_default(
        cls,
        language: str,
        region: str | None,
        rule_type: PluralRuleType,
        *,
        registry: PluralRuleRegistry | None = None,
    ) -> "PluralRule":
        """Like create(), but substitutes the root rule for unknown languages."""
        rule = cls.create(language, region, rule_type, registry=registry)
        return rule if rule is not None else cls.default(rule_type)

    @classmethod
    def default(cls, rule_type: PluralRuleType = PluralRuleType.CARDINAL) -> "PluralRule":
        """Root rule: always selects OTHER."""
        return cls(rule_type, "", "", constant_rule(f"{rule_type}_root", rule_type))

    @classmethod
    def for_locale(
        cls,
        locale_code: str,
        rule_type: PluralRuleType = PluralRuleType.CARDINAL,
        *,
        registry: PluralRuleRegistry | None = None,
    ) -> "PluralRule | None":
        """Look up the rule for a locale code ("pt-PT", "pt_PT", "en").

        Returns:
            PluralRule, or None if the language has no rules
        """
        language, region = split_locale(locale_code)
        return cls.create(language, region, rule_type, registry=registry)

    @property
    def locale(self) -> str:
        """Locale code in underscore form, e.g. "pt_PT" ("" for root)."""
        if self.region:
            return f"{self.language}_{self.region}"
        return self.language

    @overload
    def select(self, value: PluralOperand) -> PluralCategory: ...

    @overload
    def select(self, value: str) -> PluralCategory | None: ...

    @overload
    def select(self, value: int | float | Decimal) -> PluralCategory: ...

    def select(self, value: PluralOperand | str | int | float | Decimal) -> PluralCategory | None:
        """Select the plural category for a number.

        Args:
            value: Operands, numeral text, or a number. Text keeps trailing
                zeros ("1.0" has one visible fraction digit).

        Returns:
            Category; None only for text that is not a finite numeral.
            NaN and infinite numbers select OTHER.

        Raises:
            TypeError: For bool or other unsupported types
        """
        if isinstance(value, PluralOperand):
            return self.compiled(value)
        if isinstance(value, str):
            operand = PluralOperand.from_text(value)
            return None if operand is None else self.compiled(operand)
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            msg = f"Cannot select a plural category for {type(value).__name__}"
            raise TypeError(msg)
        if _is_non_finite(value):
            return PluralCategory.OTHER
        return self.compiled(PluralOperand.from_value(value))

    def select_compact(
        self, value: int | float | Decimal, suppressed_exponent: int
    ) -> PluralCategory:
        """Select the category for a compact number such as "1.2 million".

        Args:
            value: Displayed mantissa (1.2 for "1.2 million")
            suppressed_exponent: Exponent hidden by the compact form (6)

        Returns:
            Category for the operands with e = suppressed_exponent

        Raises:
            PluralArgumentError: If the exponent is outside [0, 21]
            TypeError: For bool or other unsupported types

        Example:
            >>> PluralRule.create("fr", "", PluralRuleType.CARDINAL).select_compact(1, 6)
            <PluralCategory.MANY: 'many'>
        """
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            msg = f"Cannot select a plural category for {type(value).__name__}"
            raise TypeError(msg)
        if _is_non_finite(value):
            # Validates the exponent before giving up on the value.
            PluralOperand.from_number(0, suppressed_exponent)
            return PluralCategory.OTHER
        return self.compiled(PluralOperand.from_value(value, suppressed_exponent))


def select_plural_category(
    n: int | float | Decimal | PluralOperand,
    locale: str,
    rule_type: PluralRuleType = PluralRuleType.CARDINAL,
) -> PluralCategory:
    """Select CLDR plural category for a number using the shared registry.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en-US", "ar-SA")
        rule_type: Cardinal (default) or ordinal

    Returns:
        Plural category; unknown locales fall back to the root rule (OTHER)

    Examples:
        >>> select_plural_category(0, "lv_LV")
        <PluralCategory.ZERO: 'zero'>
        >>> select_plural_category(1, "en_US")
        <PluralCategory.ONE: 'one'>
        >>> select_plural_category(5, "ru_RU")
        <PluralCategory.MANY: 'many'>
        >>> select_plural_category(2, "ar_SA")
        <PluralCategory.TWO: 'two'>
        >>> select_plural_category(3, "en", PluralRuleType.ORDINAL)
        <PluralCategory.FEW: 'few'>
    """
    rule = PluralRule.for_locale(locale, rule_type)
    if rule is None:
        rule = PluralRule.default(rule_type)
    return rule.select(n)
