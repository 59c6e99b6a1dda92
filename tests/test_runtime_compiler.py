"""Tests for condition evaluation and ruleset compilation."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from pluralengine.diagnostics import DiagnosticCode, PluralRuleSyntaxError
from pluralengine.enums import OperandName, PluralCategory, PluralRuleType
from pluralengine.runtime.compiler import CompiledRule, compile_ruleset, constant_rule
from pluralengine.runtime.evaluator import EvaluationFrame, compile_condition
from pluralengine.runtime.operands import PluralOperand
from pluralengine.runtime.rulesets import Ruleset
from pluralengine.syntax.parser import parse_condition

ENGLISH = Ruleset.from_mapping(
    {
        "pluralRule-count-one": "i = 1 and v = 0 @integer 1",
        "pluralRule-count-other": " @integer 0, 2~16",
    }
)


def _matches(condition: str, value: str) -> bool:
    parsed = parse_condition(condition)
    assert parsed is not None
    operand = PluralOperand.from_text(value)
    assert operand is not None
    return compile_condition(parsed)(EvaluationFrame(operand))


# ============================================================================
# CONDITION EVALUATION
# ============================================================================


class TestCompileCondition:
    """Predicate semantics of each relation form."""

    @pytest.mark.parametrize(
        ("value", "expected"), [("2", True), ("3", True), ("2.5", False), ("4", False)]
    )
    def test_in_range_matches_integers_only(self, value: str, expected: bool) -> None:
        assert _matches("n = 1..3", value) is expected

    @pytest.mark.parametrize(("value", "expected"), [("2.5", True), ("3.0", True), ("3.5", False)])
    def test_within_is_a_real_interval(self, value: str, expected: bool) -> None:
        assert _matches("n within 1..3", value) is expected

    def test_value_matches_integral_float(self) -> None:
        """n = 1 holds for 1.0 (n is 1 whatever the fraction digits)."""
        assert _matches("n = 1", "1.0")
        assert not _matches("i = 1 and v = 0", "1.0")

    def test_modulus_applies_to_n(self) -> None:
        assert _matches("n % 100 = 3..10", "103")
        assert _matches("n % 100 = 3..10", "1003.0")
        assert not _matches("n % 100 = 3..10", "10.1")

    def test_negation(self) -> None:
        assert _matches("n != 11", "1")
        assert not _matches("n != 11", "11")
        assert _matches("n not within 1..2", "2.5")

    def test_and_or(self) -> None:
        breton = "n % 10 = 3..4,9 and n % 100 != 10..19 and n % 100 != 70..79"
        assert _matches(breton, "3")
        assert _matches(breton, "109")
        assert not _matches(breton, "13")
        assert not _matches(breton, "74")
        assert _matches("n = 1 or n = 5", "5")

    def test_fraction_operands(self) -> None:
        assert _matches("v = 2 and f % 100 = 11..19", "0.11")
        assert _matches("t = 5", "1.50")
        assert _matches("w = 1", "1.50")

    def test_compact_operands(self) -> None:
        op = PluralOperand.from_number(1, 6)
        for text in ("e = 6", "c = 6", "e != 0..5"):
            parsed = parse_condition(text)
            assert parsed is not None
            assert compile_condition(parsed)(EvaluationFrame(op))

    def test_unknown_node_rejected(self) -> None:
        with pytest.raises(TypeError):
            compile_condition("n = 1")  # type: ignore[arg-type]


class TestEvaluationFrame:
    """Expression values are computed from the frame's operand."""

    def test_value_with_and_without_modulus(self) -> None:
        frame = EvaluationFrame(PluralOperand.from_number(1234))
        assert frame.value((OperandName.I, None)) == 1234
        assert frame.value((OperandName.I, 100)) == 34
        assert frame.value((OperandName.I, 100)) == 34

    def test_float_modulus(self) -> None:
        operand = PluralOperand.from_text("12.5")
        assert operand is not None
        assert EvaluationFrame(operand).value((OperandName.N, 10)) == 2.5


# ============================================================================
# RULESET COMPILATION
# ============================================================================


class TestCompileRuleset:
    """compile_ruleset builds a total function over operands."""

    def test_english_rule(self) -> None:
        rule = compile_ruleset(ENGLISH, name="cardinal_1")

        assert rule.name == "cardinal_1"
        assert rule(PluralOperand.from_number(1)) is PluralCategory.ONE
        assert rule(PluralOperand.from_number(2)) is PluralCategory.OTHER
        assert rule(PluralOperand.from_decimal(Decimal("1.0"))) is PluralCategory.OTHER

    def test_categories_and_describe(self) -> None:
        rule = compile_ruleset(ENGLISH)

        assert rule.categories == (PluralCategory.ONE, PluralCategory.OTHER)
        assert rule.describe() == {"one": "i = 1 and v = 0", "other": ""}
        assert not rule.is_constant

    def test_branches_evaluated_in_priority_order(self) -> None:
        """The first matching category wins."""
        ruleset = Ruleset.from_mapping({"many": "n = 1..10", "one": "n = 1", "other": ""})
        rule = compile_ruleset(ruleset)

        assert rule(PluralOperand.from_number(1)) is PluralCategory.ONE
        assert rule(PluralOperand.from_number(2)) is PluralCategory.MANY

    def test_other_only_is_constant(self) -> None:
        rule = compile_ruleset(Ruleset.other_only(), rule_type=PluralRuleType.ORDINAL)

        assert rule.is_constant
        assert rule.rule_type is PluralRuleType.ORDINAL
        assert rule(PluralOperand.from_number(1)) is PluralCategory.OTHER
        assert rule == constant_rule()

    def test_other_with_condition_rejected(self) -> None:
        ruleset = Ruleset.from_mapping({"one": "n = 1", "other": "n = 2"})
        with pytest.raises(PluralRuleSyntaxError) as exc_info:
            compile_ruleset(ruleset)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.RULESET_OTHER_HAS_CONDITION

    def test_empty_condition_rejected(self) -> None:
        ruleset = Ruleset.from_mapping({"one": " @integer 1", "other": ""})
        with pytest.raises(PluralRuleSyntaxError) as exc_info:
            compile_ruleset(ruleset)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.RULESET_EMPTY_CONDITION

    def test_syntax_error_propagates(self) -> None:
        ruleset = Ruleset.from_mapping({"one": "n = ", "other": ""})
        with pytest.raises(PluralRuleSyntaxError):
            compile_ruleset(ruleset)

    def test_compilation_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pluralengine.runtime.compiler"):
            compile_ruleset(ENGLISH, name="cardinal_7")
        assert "cardinal_7" in caplog.text


class TestCompiledRuleEquality:
    """Rules compare by branches only."""

    def test_legacy_and_modern_rules_equal(self) -> None:
        modern = compile_ruleset(Ruleset.from_mapping({"one": "n = 1"}), name="a")
        legacy = compile_ruleset(
            Ruleset.from_mapping({"one": "n is 1"}),
            name="b",
            rule_type=PluralRuleType.ORDINAL,
        )

        assert modern == legacy
        assert hash(modern) == hash(legacy)

    def test_different_rules_differ(self) -> None:
        one = compile_ruleset(Ruleset.from_mapping({"one": "n = 1"}))
        other = compile_ruleset(Ruleset.from_mapping({"one": "n = 1,5"}))
        assert one != other

    def test_other_branch_rejected(self) -> None:
        condition = parse_condition("n = 1")
        assert condition is not None
        with pytest.raises(ValueError, match="OTHER"):
            CompiledRule(((PluralCategory.OTHER, condition),))
