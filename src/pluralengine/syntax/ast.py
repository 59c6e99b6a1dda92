"""Plural condition AST node definitions.

Nodes are immutable and compare structurally: two conditions are equal
when they test the same operands against the same values, whatever
surface syntax (modern "=" / "%" or legacy "is" / "in" / "mod") produced
them. Compiled-rule deduplication relies on this equality.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from pluralengine.enums import OperandName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Operands and values
    "Expression",
    "Value",
    "Range",
    # Conditions
    "Comparison",
    "And",
    "Or",
    "Not",
    # Type aliases
    "RangeItem",
    "Condition",
]

# ============================================================================
# OPERANDS AND VALUES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Expression:
    """Operand reference, optionally reduced modulo a positive integer.

    Examples:
        n        -> Expression(OperandName.N)
        i % 10   -> Expression(OperandName.I, 10)
    """

    operand: OperandName
    modulus: int | None = None

    def __post_init__(self) -> None:
        if self.modulus is not None and self.modulus <= 0:
            msg = f"Expression.modulus must be positive, got {self.modulus}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Value:
    """Single non-negative integer in a range list."""

    number: int

    @staticmethod
    def guard(item: object) -> TypeIs["Value"]:
        """Type guard for Value (used in range list evaluation)."""
        return isinstance(item, Value)


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive integer range low..high."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            msg = f"Range.low ({self.low}) must be <= high ({self.high})"
            raise ValueError(msg)

    @staticmethod
    def guard(item: object) -> TypeIs["Range"]:
        """Type guard for Range (used in range list evaluation)."""
        return isinstance(item, Range)


# ============================================================================
# CONDITIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Comparison:
    """Relation between an expression and a range list.

    Matches when the expression value equals one of the values or lies in
    one of the ranges. Ranges match integers only, unless ``within`` is set
    (legacy ``within`` relation), in which case they are real intervals.

    Examples:
        n = 1          -> Comparison(Expression(N), (Value(1),))
        i % 10 = 2..4  -> Comparison(Expression(I, 10), (Range(2, 4),))
    """

    expression: Expression
    items: tuple["RangeItem", ...]
    within: bool = False

    def __post_init__(self) -> None:
        if not self.items:
            msg = "Comparison.items must not be empty"
            raise ValueError(msg)

    @staticmethod
    def guard(node: object) -> TypeIs["Comparison"]:
        """Type guard for Comparison."""
        return isinstance(node, Comparison)


@dataclass(frozen=True, slots=True)
class And:
    """All conditions hold. Binds tighter than Or."""

    conditions: tuple["Condition", ...]


@dataclass(frozen=True, slots=True)
class Or:
    """At least one condition holds."""

    conditions: tuple["Condition", ...]


@dataclass(frozen=True, slots=True)
class Not:
    """Negated condition. Produced by '!=', 'is not', 'not in' and 'not within'."""

    condition: "Condition"


type RangeItem = Value | Range
type Condition = Comparison | And | Or | Not
