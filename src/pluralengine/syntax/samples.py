"""Parser for CLDR @integer/@decimal sample annotations.

CLDR appends example numbers to every rule:

    i = 1 and v = 0 @integer 1
    @integer 0, 2~16, 100, 1000, … @decimal 0.0~1.5, 10.0, 1c6, …

Entries are comma-separated. "a~b" is an inclusive range stepping by the
unit of the last digit of a (0.0~0.3 is 0.0, 0.1, 0.2, 0.3). "…" marks an
open-ended list and is skipped. "<mantissa>c<exp>" (or the older "e" form)
is a compact number: 1.2c3 is 1200 with suppressed exponent 3.

Python 3.13+. Zero external dependencies.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Literal

from pluralengine.constants import MAX_SAMPLE_RANGE_SIZE
from pluralengine.diagnostics import ErrorTemplate, PluralParseError

if TYPE_CHECKING:
    from pluralengine.runtime.operands import PluralOperand

__all__ = ["Sample", "parse_samples"]

_ANNOTATION_PATTERN = re.compile(r"@(integer|decimal)\b")
_PLAIN_PATTERN = re.compile(r"\d+(?:\.\d+)?")
_COMPACT_PATTERN = re.compile(r"(\d+(?:\.\d+)?)[ce](\d+)")
_ELLIPSES = frozenset({"…", "..."})


@dataclass(frozen=True, slots=True)
class Sample:
    """One sample number from an annotation.

    Attributes:
        kind: Annotation the sample appeared under
        text: The sample as written (range members rendered individually)
        mantissa: Exact value before compact scaling
        exponent: Suppressed exponent (0 for non-compact samples)
    """

    kind: Literal["integer", "decimal"]
    text: str
    mantissa: Decimal
    exponent: int = 0

    def to_operand(self) -> "PluralOperand":
        """Build the operands this sample denotes.

        Raises:
            PluralArgumentError: If the compact exponent is out of range
        """
        from pluralengine.runtime.operands import PluralOperand  # noqa: PLC0415 - circular

        return PluralOperand.from_decimal(self.mantissa, self.exponent)


def parse_samples(text: str) -> tuple[Sample, ...]:
    """Extract sample numbers from annotated rule text.

    Args:
        text: Rule text; anything before the first '@' is ignored

    Returns:
        Samples in annotation order (empty when the text has no annotations)

    Raises:
        PluralParseError: If an entry is not a valid sample

    Example:
        >>> [s.text for s in parse_samples("n = 1 @integer 1 @decimal 1.0~1.2, …")]
        ['1', '1.0', '1.1', '1.2']
    """
    at = text.find("@")
    if at < 0:
        return ()

    parts = _ANNOTATION_PATTERN.split(text[at:])
    if parts[0].strip():
        raise PluralParseError(
            ErrorTemplate.sample_invalid(parts[0].strip(), text), input_value=parts[0].strip()
        )

    samples: list[Sample] = []
    for kind, body in zip(parts[1::2], parts[2::2], strict=True):
        for raw_entry in body.split(","):
            entry = raw_entry.strip()
            if not entry or entry in _ELLIPSES:
                continue
            samples.extend(_parse_entry(entry, kind, text))
    return tuple(samples)


def _parse_entry(entry: str, kind: str, text: str) -> list[Sample]:
    sample_kind: Literal["integer", "decimal"] = "integer" if kind == "integer" else "decimal"

    if "~" in entry:
        start_text, _, end_text = entry.partition("~")
        start_text, end_text = start_text.strip(), end_text.strip()
        if not (_PLAIN_PATTERN.fullmatch(start_text) and _PLAIN_PATTERN.fullmatch(end_text)):
            raise PluralParseError(ErrorTemplate.sample_invalid(entry, text), input_value=entry)
        return _expand_range(Decimal(start_text), Decimal(end_text), sample_kind, entry, text)

    if compact := _COMPACT_PATTERN.fullmatch(entry):
        return [Sample(sample_kind, entry, Decimal(compact.group(1)), int(compact.group(2)))]

    if _PLAIN_PATTERN.fullmatch(entry):
        return [Sample(sample_kind, entry, Decimal(entry))]

    raise PluralParseError(ErrorTemplate.sample_invalid(entry, text), input_value=entry)


def _expand_range(
    start: Decimal,
    end: Decimal,
    kind: Literal["integer", "decimal"],
    entry: str,
    text: str,
) -> list[Sample]:
    exponent = start.as_tuple().exponent
    if not isinstance(exponent, int) or start > end:
        raise PluralParseError(ErrorTemplate.sample_invalid(entry, text), input_value=entry)
    step = Decimal((0, (1,), exponent))
    if (end - start) / step >= MAX_SAMPLE_RANGE_SIZE:
        raise PluralParseError(ErrorTemplate.sample_invalid(entry, text), input_value=entry)

    samples: list[Sample] = []
    value = start
    while value <= end:
        samples.append(Sample(kind, format(value, "f"), value))
        value += step
    return samples
