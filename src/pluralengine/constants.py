"""Shared constants for PluralEngine.

This module provides centralized configuration constants used across the
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Operand limits: Bounds for the CLDR operand tuple (n, i, v, w, f, t, e)
- Input limits: DoS prevention via size constraints on rule text
- Locale aliases: Tags that resolve to the CLDR root locale
- Rule naming: Prefixes for compiled rule class names
- Sample annotations: Bounds for @integer/@decimal sample expansion

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Operand limits
    "MIN_SUPPRESSED_EXPONENT",
    "MAX_SUPPRESSED_EXPONENT",
    "MAX_FRACTION_DIGITS",
    "MAX_INTEGER_OPERAND",
    # Input limits
    "MAX_CONDITION_LENGTH",
    # Locale aliases
    "ROOT_LOCALE",
    "ROOT_LOCALE_ALIASES",
    # Rule naming
    "CARDINAL_RULE_PREFIX",
    "ORDINAL_RULE_PREFIX",
    # Reference
    "PLURAL_RULES_SPEC_URL",
    # Sample annotations
    "MAX_SAMPLE_RANGE_SIZE",
]

# ============================================================================
# OPERAND LIMITS
# ============================================================================

# Suppressed exponent range for compact numbers ("2.3 million" => 6).
# CLDR defines compact patterns up to 10^21.
MIN_SUPPRESSED_EXPONENT: int = 0
MAX_SUPPRESSED_EXPONENT: int = 21

# Only the first 9 visible fraction digits contribute to operands f and t.
# 999_999_999 is the largest 9-digit value and fits a signed 32-bit integer.
MAX_FRACTION_DIGITS: int = 9

# Integer operand i saturates here instead of growing without bound.
# Matches the signed 64-bit maximum used by other CLDR implementations.
MAX_INTEGER_OPERAND: int = 2**63 - 1

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum length of a single condition string (sample annotations included).
# The longest CLDR condition is a few hundred characters; anything beyond
# this limit is malformed input.
MAX_CONDITION_LENGTH: int = 4096

# ============================================================================
# LOCALE ALIASES
# ============================================================================

# CLDR root locale identifier.
ROOT_LOCALE: str = "root"

# Language tags resolving to the root rule (always OTHER).
ROOT_LOCALE_ALIASES: frozenset[str] = frozenset({"", "root", "und"})

# ============================================================================
# RULE NAMING
# ============================================================================

# Compiled rules are named <prefix><index>, e.g. "cardinal_0".
CARDINAL_RULE_PREFIX: str = "cardinal_"
ORDINAL_RULE_PREFIX: str = "ordinal_"

# ============================================================================
# REFERENCE
# ============================================================================

PLURAL_RULES_SPEC_URL: str = (
    "https://unicode.org/reports/tr35/tr35-numbers.html#Language_Plural_Rules"
)

# ============================================================================
# SAMPLE ANNOTATIONS
# ============================================================================

# Upper bound on the values a single "a~b" sample range may expand to.
MAX_SAMPLE_RANGE_SIZE: int = 10_000
