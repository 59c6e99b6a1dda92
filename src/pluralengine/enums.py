"""Enumerations for PluralEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category.

    Members are declared in rule priority order: conditions are evaluated
    ZERO first, and OTHER is the unconditional default.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"

    @property
    def priority(self) -> int:
        """Evaluation order of this category within a ruleset (0 = first)."""
        return _CATEGORY_PRIORITY[self]

    @classmethod
    def from_key(cls, key: str) -> "PluralCategory | None":
        """Match a category name without raising.

        Accepts the plain name in any case ("one", "ONE") and the CLDR
        supplemental JSON key form ("pluralRule-count-one").

        Args:
            key: Category name

        Returns:
            Matching PluralCategory, or None if the key names no category

        Example:
            >>> PluralCategory.from_key("pluralRule-count-few")
            <PluralCategory.FEW: 'few'>
            >>> PluralCategory.from_key("several") is None
            True
        """
        name = key.rsplit("-", 1)[-1].strip().lower()
        try:
            return cls(name)
        except ValueError:
            return None


_CATEGORY_PRIORITY: dict[PluralCategory, int] = {
    category: index for index, category in enumerate(PluralCategory)
}


class PluralRuleType(StrEnum):
    """CLDR plural rule family.

    The CLDR "range" type is not supported.

    StrEnum provides automatic string conversion: str(PluralRuleType.ORDINAL) == "ordinal"
    """

    CARDINAL = "cardinal"
    """Counting: "1 item", "5 items"."""

    ORDINAL = "ordinal"
    """Ranking: "1st item", "3rd item"."""


class OperandName(StrEnum):
    """Operand symbols usable in a CLDR plural condition.

    StrEnum provides automatic string conversion: str(OperandName.I) == "i"
    """

    N = "n"
    """Absolute value of the source number."""

    I = "i"  # noqa: E741 - CLDR operand name
    """Integer digits of n."""

    V = "v"
    """Number of visible fraction digits, with trailing zeros."""

    W = "w"
    """Number of visible fraction digits, without trailing zeros."""

    F = "f"
    """Visible fraction digits, with trailing zeros, as an integer."""

    T = "t"
    """Visible fraction digits, without trailing zeros, as an integer."""

    C = "c"
    """Compact decimal exponent (synonym of e)."""

    E = "e"
    """Compact decimal exponent (synonym of c)."""


__all__ = [
    "OperandName",
    "PluralCategory",
    "PluralRuleType",
]
