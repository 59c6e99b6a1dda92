"""Rulesets and their deduplication into rule classes.

CLDR assigns the same plural rules to many languages (ja, ko, zh, ... all
use the root rule; ru and uk share one). group_rulesets() partitions the
locales of one rule type by identical rule text and compiles each
partition exactly once. alias_equivalent_rules() then lets ordinal
classes reuse cardinal rules that compile to the same structure.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from pluralengine.constants import (
    CARDINAL_RULE_PREFIX,
    ORDINAL_RULE_PREFIX,
    ROOT_LOCALE,
)
from pluralengine.diagnostics import (
    CLDRDataError,
    ErrorTemplate,
    PluralRuleSyntaxError,
)
from pluralengine.enums import PluralCategory, PluralRuleType
from pluralengine.locale_utils import normalize_locale

from .compiler import CompiledRule, compile_ruleset

__all__ = [
    "RuleClass",
    "Ruleset",
    "alias_equivalent_rules",
    "group_rulesets",
]

logger = logging.getLogger(__name__)

_RULE_PREFIXES: dict[PluralRuleType, str] = {
    PluralRuleType.CARDINAL: CARDINAL_RULE_PREFIX,
    PluralRuleType.ORDINAL: ORDINAL_RULE_PREFIX,
}


@dataclass(frozen=True, slots=True)
class Ruleset:
    """Raw CLDR condition text per category, in priority order.

    Equality and hashing use the raw text only, so two locales share a
    ruleset exactly when CLDR lists the same rules for them. OTHER is
    always present and always last; its text holds only samples.

    Attributes:
        rules: (category, text) pairs, unique categories in priority order

    Example:
        >>> ruleset = Ruleset.from_mapping({"pluralRule-count-one": "n = 1"})
        >>> ruleset.categories
        (<PluralCategory.ONE: 'one'>, <PluralCategory.OTHER: 'other'>)
    """

    rules: tuple[tuple[PluralCategory, str], ...]

    def __post_init__(self) -> None:
        categories = [category for category, _ in self.rules]
        if not categories or categories[-1] is not PluralCategory.OTHER:
            msg = "Ruleset.rules must end with OTHER"
            raise ValueError(msg)
        priorities = [category.priority for category in categories]
        if priorities != sorted(set(priorities)):
            msg = "Ruleset.rules must list unique categories in priority order"
            raise ValueError(msg)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str] | Mapping[PluralCategory, str]) -> "Ruleset":
        """Build a ruleset from category keys to condition text.

        Keys may be PluralCategory members, plain names in any case
        ("one", "ONE"), or CLDR JSON keys ("pluralRule-count-one"). A
        missing OTHER is recorded with empty text.

        Raises:
            CLDRDataError: If a key names no category or a value is not text
        """
        rules: dict[PluralCategory, str] = {}
        for key, text in mapping.items():
            category = PluralCategory.from_key(str(key))
            if category is None:
                raise CLDRDataError(ErrorTemplate.unknown_category(str(key)))
            if not isinstance(text, str):
                raise CLDRDataError(
                    ErrorTemplate.cldr_data_invalid(f"rule for '{key}' is not a string")
                )
            rules[category] = text
        rules.setdefault(PluralCategory.OTHER, "")
        return cls(tuple(sorted(rules.items(), key=lambda item: item[0].priority)))

    @classmethod
    def other_only(cls) -> "Ruleset":
        """Ruleset of the CLDR root locale: everything is OTHER."""
        return cls(((PluralCategory.OTHER, ""),))

    @property
    def categories(self) -> tuple[PluralCategory, ...]:
        return tuple(category for category, _ in self.rules)

    def condition(self, category: PluralCategory) -> str | None:
        """Raw text for a category, or None if the ruleset lacks it."""
        for candidate, text in self.rules:
            if candidate is category:
                return text
        return None


@dataclass(frozen=True, slots=True)
class RuleClass:
    """Locales sharing one ruleset, and the rule compiled for them.

    Attributes:
        ruleset: The shared ruleset
        locales: Member locale tags, sorted ("" and "root" for the root locale)
        rule: Compiled rule shared by every member
    """

    ruleset: Ruleset
    locales: tuple[str, ...]
    rule: CompiledRule

    @property
    def name(self) -> str:
        return self.rule.name


def group_rulesets(
    rulesets: Mapping[str, Ruleset], rule_type: PluralRuleType
) -> tuple[RuleClass, ...]:
    """Partition locales by identical rulesets and compile each partition once.

    Locale tags are normalized to underscore form ("pt-PT" -> "pt_PT"); a
    "root" entry is also registered under "". Classes are ordered by their
    smallest member tag and named <prefix><index>, so the same input always
    yields the same names.

    Args:
        rulesets: Ruleset per locale tag
        rule_type: Rule family, selects the name prefix

    Returns:
        Rule classes, one per distinct ruleset

    Raises:
        PluralRuleSyntaxError: If any ruleset fails to compile (the message
            names every locale sharing it)
    """
    members: dict[Ruleset, list[str]] = {}
    for tag, ruleset in rulesets.items():
        normalized = normalize_locale(tag)
        members.setdefault(ruleset, []).append(normalized)
        if normalized == ROOT_LOCALE:
            members[ruleset].append("")

    ordered = sorted(
        ((sorted(set(tags)), ruleset) for ruleset, tags in members.items()),
        key=lambda item: item[0],
    )
    prefix = _RULE_PREFIXES[rule_type]

    classes: list[RuleClass] = []
    for index, (tags, ruleset) in enumerate(ordered):
        name = f"{prefix}{index}"
        try:
            rule = compile_ruleset(ruleset, name=name, rule_type=rule_type)
        except PluralRuleSyntaxError as exc:
            reason = exc.diagnostic.message if exc.diagnostic is not None else str(exc)
            logger.error(
                "Failed to compile %s rule %s for locales %s: %s", rule_type, name, tags, reason
            )
            raise PluralRuleSyntaxError(
                ErrorTemplate.ruleset_compile_failed(name, tags, reason)
            ) from exc
        classes.append(RuleClass(ruleset=ruleset, locales=tuple(tags), rule=rule))

    logger.debug(
        "Grouped %d %s locale(s) into %d rule class(es)", len(rulesets), rule_type, len(classes)
    )
    return tuple(classes)


def alias_equivalent_rules(
    ordinal_classes: Iterable[RuleClass], cardinal_classes: Iterable[RuleClass]
) -> tuple[RuleClass, ...]:
    """Point ordinal classes at structurally identical cardinal rules.

    Args:
        ordinal_classes: Ordinal rule classes
        cardinal_classes: Cardinal rule classes

    Returns:
        Ordinal classes; those whose rule equals a cardinal rule now
        reference that cardinal CompiledRule object

    Example:
        French ordinal "n = 1" and Afrikaans cardinal "n = 1" compile to the
        same branches, so the French ordinal class reuses the cardinal rule.
    """
    cardinal_rules: dict[CompiledRule, CompiledRule] = {}
    for cardinal in cardinal_classes:
        cardinal_rules.setdefault(cardinal.rule, cardinal.rule)

    aliased: list[RuleClass] = []
    for ordinal in ordinal_classes:
        shared = cardinal_rules.get(ordinal.rule)
        if shared is None:
            aliased.append(ordinal)
            continue
        logger.debug("Ordinal rule %s aliased to cardinal rule %s", ordinal.name, shared.name)
        aliased.append(replace(ordinal, rule=shared))
    return tuple(aliased)
