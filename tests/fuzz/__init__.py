"""Fuzz testing infrastructure for PluralEngine.

This package contains:
- test_rule_properties: Parser robustness, operand invariants and
  compiled rule agreement under generated input

Python 3.13+.
"""
