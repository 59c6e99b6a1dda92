"""CLDR plural operands.

Decomposes a number into the operands plural conditions test:

    n  absolute value
    i  integer digits of n
    v  number of visible fraction digits, with trailing zeros
    w  number of visible fraction digits, without trailing zeros
    f  visible fraction digits, with trailing zeros, as an integer
    t  visible fraction digits, without trailing zeros, as an integer
    e  suppressed exponent of a compact number (c is a synonym)

Visible fraction digits are a property of the written numeral, not of its
value: "1.50" has v=2 while "1.5" has v=1. Decimal preserves them; native
floats cannot, so they are read through their shortest round-trip
representation and integral floats carry no fraction digits.

Python 3.13+. Zero external dependencies.
"""

import math
import re
import sys
from dataclasses import dataclass
from decimal import Decimal

from pluralengine.constants import (
    MAX_FRACTION_DIGITS,
    MAX_INTEGER_OPERAND,
    MAX_SUPPRESSED_EXPONENT,
    MIN_SUPPRESSED_EXPONENT,
)
from pluralengine.diagnostics import ErrorTemplate, PluralArgumentError, PluralParseError

__all__ = ["PluralOperand", "parse_operand"]

_NUMERAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# Digits of MAX_INTEGER_OPERAND; integer parts with more digits saturate.
_MAX_INTEGER_DIGITS = len(str(MAX_INTEGER_OPERAND))


def _check_exponent(suppressed_exponent: int) -> None:
    if not MIN_SUPPRESSED_EXPONENT <= suppressed_exponent <= MAX_SUPPRESSED_EXPONENT:
        raise PluralArgumentError(
            ErrorTemplate.exponent_out_of_range(
                suppressed_exponent, MIN_SUPPRESSED_EXPONENT, MAX_SUPPRESSED_EXPONENT
            )
        )


def _integer_operand(digits: str) -> int:
    """Read integer digits, saturating at MAX_INTEGER_OPERAND."""
    digits = digits.lstrip("0")
    if not digits:
        return 0
    if len(digits) > _MAX_INTEGER_DIGITS:
        return MAX_INTEGER_OPERAND
    return min(int(digits), MAX_INTEGER_OPERAND)


def _magnitude(value: int | Decimal) -> float:
    """Convert to float, capping at the largest finite float."""
    try:
        n = float(value)
    except OverflowError:
        return sys.float_info.max
    return sys.float_info.max if math.isinf(n) else n


@dataclass(frozen=True, slots=True)
class PluralOperand:
    """Operands of one number, as tested by plural conditions.

    Immutable; create one per query through the from_* constructors.

    Invariants:
        n >= 0 and finite; 0 <= w <= v; 0 <= f, t <= 999_999_999;
        MIN_SUPPRESSED_EXPONENT <= e <= MAX_SUPPRESSED_EXPONENT

    Example:
        >>> op = PluralOperand.from_text("1.50")
        >>> (op.i, op.v, op.w, op.f, op.t)
        (1, 2, 1, 50, 5)
    """

    n: float
    i: int
    v: int
    w: int
    f: int
    t: int
    e: int = 0

    @property
    def c(self) -> int:
        """Compact exponent; synonym of e."""
        return self.e

    @classmethod
    def from_decimal(cls, value: Decimal, suppressed_exponent: int = 0) -> "PluralOperand":
        """Extract operands from a Decimal, keeping its visible fraction digits.

        Args:
            value: Number; its sign is ignored
            suppressed_exponent: Compact exponent; value is scaled by 10**e

        Returns:
            PluralOperand

        Raises:
            PluralArgumentError: If value is NaN or infinite, or the exponent
                is outside [MIN_SUPPRESSED_EXPONENT, MAX_SUPPRESSED_EXPONENT]

        Example:
            >>> PluralOperand.from_decimal(Decimal("1.2"), 3)
            PluralOperand(n=1200.0, i=1200, v=0, w=0, f=0, t=0, e=3)
        """
        _check_exponent(suppressed_exponent)
        if not value.is_finite():
            raise PluralArgumentError(ErrorTemplate.operand_not_finite(value))

        # Exact scaling: adjust the exponent instead of multiplying, which
        # would round to the context precision.
        parts = value.as_tuple()
        digit_tuple = parts.digits
        exponent = int(parts.exponent) + suppressed_exponent
        digits = "".join(map(str, digit_tuple))
        magnitude = Decimal((0, digit_tuple, exponent))

        if exponent >= 0:
            significant = digits.lstrip("0")
            if not significant:
                i = 0
            elif len(significant) + exponent > _MAX_INTEGER_DIGITS:
                i = MAX_INTEGER_OPERAND
            else:
                i = _integer_operand(significant + "0" * exponent)
            return cls(n=_magnitude(magnitude), i=i, v=0, w=0, f=0, t=0, e=suppressed_exponent)

        scale = -exponent
        if len(digits) > scale:
            integer_digits = digits[:-scale]
            fraction = digits[-scale:]
        else:
            integer_digits = ""
            fraction = digits
        # Fraction digits not present in `digits` are leading zeros.
        leading_zeros = scale - len(fraction)

        stripped = fraction.rstrip("0")
        v = scale
        w = leading_zeros + len(stripped) if stripped else 0
        visible = ("0" * min(leading_zeros, MAX_FRACTION_DIGITS) + fraction)[:MAX_FRACTION_DIGITS]
        visible_stripped = ("0" * min(leading_zeros, MAX_FRACTION_DIGITS) + stripped)[
            :MAX_FRACTION_DIGITS
        ]

        return cls(
            n=_magnitude(magnitude),
            i=_integer_operand(integer_digits),
            v=v,
            w=w,
            f=int(visible) if visible else 0,
            t=int(visible_stripped) if stripped else 0,
            e=suppressed_exponent,
        )

    @classmethod
    def from_number(cls, value: int | float, suppressed_exponent: int = 0) -> "PluralOperand":
        """Extract operands from a native int or float.

        Integers are exact and have no fraction digits. Floats are read
        through repr(); integral floats (2.0) have no fraction digits.

        Raises:
            PluralArgumentError: If value is NaN or infinite, or the exponent
                is out of range
            TypeError: If value is a bool or not a number
        """
        if isinstance(value, bool) or not isinstance(value, int | float):
            msg = f"Expected int or float, got {type(value).__name__}"
            raise TypeError(msg)
        if isinstance(value, float):
            if not math.isfinite(value):
                _check_exponent(suppressed_exponent)
                raise PluralArgumentError(ErrorTemplate.operand_not_finite(value))
            if not value.is_integer():
                return cls.from_decimal(Decimal(repr(value)), suppressed_exponent)
            value = int(value)

        _check_exponent(suppressed_exponent)
        magnitude = abs(value) * 10**suppressed_exponent
        return cls(
            n=_magnitude(magnitude),
            i=min(magnitude, MAX_INTEGER_OPERAND),
            v=0,
            w=0,
            f=0,
            t=0,
            e=suppressed_exponent,
        )

    @classmethod
    def from_value(
        cls, value: int | float | Decimal, suppressed_exponent: int = 0
    ) -> "PluralOperand":
        """Dispatch to from_number or from_decimal by type.

        Raises:
            PluralArgumentError: Non-finite value or exponent out of range
            TypeError: If value is a bool or not int, float or Decimal
        """
        if isinstance(value, Decimal):
            return cls.from_decimal(value, suppressed_exponent)
        return cls.from_number(value, suppressed_exponent)

    @classmethod
    def from_text(cls, text: str) -> "PluralOperand | None":
        """Extract operands from numeral text.

        Accepts an optional sign, digits with an optional '.' fraction and an
        optional exponent ("1.50", "-3", "1.2e3"). Trailing zeros are kept.

        Returns:
            PluralOperand, or None if the text is not a finite decimal numeral

        Example:
            >>> PluralOperand.from_text("2.00").v
            2
            >>> PluralOperand.from_text("NaN") is None
            True
        """
        operand, _ = parse_operand(text)
        return operand


def parse_operand(text: str) -> tuple[PluralOperand | None, tuple[PluralParseError, ...]]:
    """Parse numeral text into operands, returning errors instead of raising.

    Args:
        text: Numeral text

    Returns:
        Tuple of (operand, errors): (PluralOperand, ()) on success,
        (None, (PluralParseError,)) on failure

    Example:
        >>> operand, errors = parse_operand("abc")
        >>> operand is None, errors[0].input_value
        (True, 'abc')
    """
    candidate = text.strip()
    if not _NUMERAL_PATTERN.fullmatch(candidate):
        error = PluralParseError(ErrorTemplate.operand_parse_failed(text), input_value=text)
        return None, (error,)
    return PluralOperand.from_decimal(Decimal(candidate)), ()
