"""Plural runtime package.

Provides operand extraction, rule compilation and deduplication, locale
dispatch and the PluralRule selection API.
Depends on syntax package for parsing.

Python 3.13+.
"""

from .compiler import CompiledRule, compile_ruleset, constant_rule
from .dispatch import DispatchTable, LanguageEntry
from .evaluator import EvaluationFrame, compile_condition
from .operands import PluralOperand, parse_operand
from .plural_rules import PluralRule, select_plural_category
from .registry import PluralRuleRegistry, build_registry, get_shared_registry
from .rulesets import RuleClass, Ruleset, alias_equivalent_rules, group_rulesets

__all__ = [
    "CompiledRule",
    "DispatchTable",
    "EvaluationFrame",
    "LanguageEntry",
    "PluralOperand",
    "PluralRule",
    "PluralRuleRegistry",
    "RuleClass",
    "Ruleset",
    "alias_equivalent_rules",
    "build_registry",
    "compile_condition",
    "compile_ruleset",
    "constant_rule",
    "get_shared_registry",
    "group_rulesets",
    "parse_operand",
    "select_plural_category",
]
