"""Validation of compiled plural rules against CLDR sample annotations.

Python 3.13+.
"""

from .samples import validate_plural_data, validate_ruleset

__all__ = ["validate_plural_data", "validate_ruleset"]
