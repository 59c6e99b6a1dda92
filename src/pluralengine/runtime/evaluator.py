"""Compile Condition ASTs into predicates over plural operands.

A compiled predicate takes an EvaluationFrame rather than a bare operand:
the frame memoizes each distinct (operand, modulus) value, so a rule that
tests "n % 10" in several branches computes it once per evaluation.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

from pluralengine.enums import OperandName
from pluralengine.syntax.ast import And, Comparison, Condition, Expression, Not, Or, Range, Value

from .operands import PluralOperand

__all__ = ["EvaluationFrame", "Predicate", "compile_condition"]

type _Key = tuple[OperandName, int | None]
type Predicate = Callable[["EvaluationFrame"], bool]


class EvaluationFrame:
    """Per-evaluation view of one operand with memoized expression values."""

    __slots__ = ("_cache", "operand")

    def __init__(self, operand: PluralOperand) -> None:
        self.operand = operand
        self._cache: dict[_Key, int | float] = {}

    def value(self, key: _Key) -> int | float:
        """Value of operand (optionally mod k), computed once per frame."""
        cached = self._cache.get(key)
        if cached is None:
            name, modulus = key
            raw: int | float = getattr(self.operand, name)
            cached = raw if modulus is None else raw % modulus
            self._cache[key] = cached
        return cached


def _is_integral(x: int | float) -> bool:
    return isinstance(x, int) or x.is_integer()


def _compile_comparison(node: Comparison) -> Predicate:
    expression: Expression = node.expression
    key: _Key = (expression.operand, expression.modulus)
    values = frozenset(item.number for item in node.items if Value.guard(item))
    ranges = tuple((item.low, item.high) for item in node.items if Range.guard(item))

    if node.within:

        def within(frame: EvaluationFrame) -> bool:
            x = frame.value(key)
            return x in values or any(low <= x <= high for low, high in ranges)

        return within

    if not ranges:

        def equals(frame: EvaluationFrame) -> bool:
            return frame.value(key) in values

        return equals

    def in_range_list(frame: EvaluationFrame) -> bool:
        x = frame.value(key)
        if x in values:
            return True
        return _is_integral(x) and any(low <= x <= high for low, high in ranges)

    return in_range_list


def compile_condition(condition: Condition) -> Predicate:
    """Compile a condition into a predicate.

    Args:
        condition: Parsed condition

    Returns:
        Callable taking an EvaluationFrame and returning whether it matches

    Example:
        >>> from pluralengine.syntax.parser import parse_condition
        >>> predicate = compile_condition(parse_condition("n % 10 = 2..4"))
        >>> predicate(EvaluationFrame(PluralOperand.from_number(23)))
        True
        >>> predicate(EvaluationFrame(PluralOperand.from_text("2.5")))
        False
    """
    match condition:
        case Comparison():
            return _compile_comparison(condition)
        case Not(condition=inner):
            negated = compile_condition(inner)
            return lambda frame: not negated(frame)
        case And(conditions=conditions):
            all_of = tuple(compile_condition(c) for c in conditions)
            return lambda frame: all(p(frame) for p in all_of)
        case Or(conditions=conditions):
            any_of = tuple(compile_condition(c) for c in conditions)
            return lambda frame: any(p(frame) for p in any_of)
    msg = f"Unknown condition node: {condition!r}"
    raise TypeError(msg)
