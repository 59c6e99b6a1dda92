"""Hypothesis strategies for PluralEngine property-based testing.

Usage:
    from tests.strategies import conditions, decimal_numerals
"""

from .plurals import (
    CLDR_MODULI,
    RULE_OPERANDS,
    comparisons,
    conditions,
    decimal_numerals,
    decimals,
    expressions,
    range_items,
)

__all__ = [
    "CLDR_MODULI",
    "RULE_OPERANDS",
    "comparisons",
    "conditions",
    "decimal_numerals",
    "decimals",
    "expressions",
    "range_items",
]
