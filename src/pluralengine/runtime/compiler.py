"""Compile rulesets into total functions from operands to plural categories.

A CompiledRule evaluates its branches in category priority order and
returns the first category whose condition matches; OTHER is the
unconditional default. Compiled rules compare structurally (by their
branches), which is what lets identical rules from different locales or
rule types share one object.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pluralengine.diagnostics import ErrorTemplate, PluralRuleSyntaxError
from pluralengine.enums import PluralCategory, PluralRuleType
from pluralengine.syntax.ast import Condition
from pluralengine.syntax.parser import parse_condition, strip_samples
from pluralengine.syntax.serializer import serialize_condition

from .evaluator import EvaluationFrame, Predicate, compile_condition
from .operands import PluralOperand

if TYPE_CHECKING:
    from .rulesets import Ruleset

__all__ = ["CompiledRule", "compile_ruleset", "constant_rule"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompiledRule:
    """Executable plural rule.

    Equality and hashing use only ``branches``; ``name`` and ``rule_type``
    identify where the rule was first compiled.

    Attributes:
        branches: (category, condition) pairs in priority order, OTHER excluded
        name: Rule name, e.g. "cardinal_3"
        rule_type: Rule family the rule was compiled for

    Example:
        >>> rule = CompiledRule(((PluralCategory.ONE, parse_condition("n = 1")),))
        >>> rule(PluralOperand.from_number(1))
        <PluralCategory.ONE: 'one'>
        >>> rule(PluralOperand.from_number(2))
        <PluralCategory.OTHER: 'other'>
    """

    branches: tuple[tuple[PluralCategory, Condition], ...]
    name: str = field(default="", compare=False)
    rule_type: PluralRuleType = field(default=PluralRuleType.CARDINAL, compare=False)
    _predicates: tuple[tuple[PluralCategory, Predicate], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        for category, _ in self.branches:
            if category is PluralCategory.OTHER:
                msg = "CompiledRule.branches must not contain OTHER"
                raise ValueError(msg)
        predicates = tuple(
            (category, compile_condition(condition)) for category, condition in self.branches
        )
        object.__setattr__(self, "_predicates", predicates)

    def __call__(self, operand: PluralOperand) -> PluralCategory:
        """Select the plural category for an operand."""
        if not self._predicates:
            return PluralCategory.OTHER
        frame = EvaluationFrame(operand)
        for category, predicate in self._predicates:
            if predicate(frame):
                return category
        return PluralCategory.OTHER

    @property
    def is_constant(self) -> bool:
        """True if the rule always selects OTHER."""
        return not self.branches

    @property
    def categories(self) -> tuple[PluralCategory, ...]:
        """Categories this rule can select, in priority order (OTHER last)."""
        return (*(category for category, _ in self.branches), PluralCategory.OTHER)

    def describe(self) -> dict[str, str]:
        """Canonical condition text per category, e.g. {"one": "n = 1", "other": ""}."""
        described = {str(category): serialize_condition(c) for category, c in self.branches}
        described[str(PluralCategory.OTHER)] = ""
        return described


def constant_rule(
    name: str = "", rule_type: PluralRuleType = PluralRuleType.CARDINAL
) -> CompiledRule:
    """Rule that always selects OTHER (the CLDR root rule)."""
    return CompiledRule((), name=name, rule_type=rule_type)


def compile_ruleset(
    ruleset: "Ruleset",
    *,
    name: str = "",
    rule_type: PluralRuleType = PluralRuleType.CARDINAL,
) -> CompiledRule:
    """Compile a ruleset into one CompiledRule.

    Args:
        ruleset: Category conditions in priority order
        name: Name given to the compiled rule
        rule_type: Rule family

    Returns:
        CompiledRule; the constant OTHER rule for an OTHER-only ruleset

    Raises:
        PluralRuleSyntaxError: If a condition does not parse, a non-OTHER
            category has no condition, or OTHER has one
    """
    branches: list[tuple[PluralCategory, Condition]] = []
    for category, text in ruleset.rules:
        if category is PluralCategory.OTHER:
            if strip_samples(text):
                raise PluralRuleSyntaxError(ErrorTemplate.other_has_condition(text))
            continue
        condition = parse_condition(text)
        if condition is None:
            raise PluralRuleSyntaxError(ErrorTemplate.empty_condition(str(category)))
        branches.append((category, condition))

    rule = CompiledRule(tuple(branches), name=name, rule_type=rule_type)
    logger.debug("Compiled %s rule %r with %d branch(es)", rule_type, name, len(branches))
    return rule
