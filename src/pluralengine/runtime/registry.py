"""Plural rule registry: both dispatch tables built from one data set.

build_registry() runs the whole pipeline once:

    PluralData -> group_rulesets (per type) -> alias_equivalent_rules
               -> DispatchTable.build (per type) -> PluralRuleRegistry

get_shared_registry() builds a registry from Babel's CLDR data on first
use and shares it process-wide.

Python 3.13+.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pluralengine.enums import PluralRuleType

from .compiler import CompiledRule
from .dispatch import DispatchTable
from .rulesets import alias_equivalent_rules, group_rulesets

if TYPE_CHECKING:
    from pluralengine.cldr import PluralData

__all__ = ["PluralRuleRegistry", "build_registry", "get_shared_registry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PluralRuleRegistry:
    """Compiled plural rules for every locale of one CLDR release.

    Immutable and safe to share between threads.

    Attributes:
        cldr_version: CLDR release the rules come from
        cardinal: Dispatch table for cardinal rules
        ordinal: Dispatch table for ordinal rules
    """

    cldr_version: str
    cardinal: DispatchTable
    ordinal: DispatchTable

    def table(self, rule_type: PluralRuleType) -> DispatchTable:
        """Dispatch table for a rule type."""
        match rule_type:
            case PluralRuleType.CARDINAL:
                return self.cardinal
            case PluralRuleType.ORDINAL:
                return self.ordinal
        msg = f"Unknown rule type: {rule_type!r}"
        raise TypeError(msg)

    def lookup(
        self,
        language: str,
        region: str = "",
        rule_type: PluralRuleType = PluralRuleType.CARDINAL,
    ) -> CompiledRule | None:
        """Find the compiled rule for a locale, or None for an unknown language."""
        return self.table(rule_type).lookup(language, region)


def build_registry(data: "PluralData") -> PluralRuleRegistry:
    """Compile all rules in a data set.

    Args:
        data: Rulesets per locale for both rule types

    Returns:
        PluralRuleRegistry

    Raises:
        PluralRuleSyntaxError: If any ruleset fails to compile
    """
    start = time.perf_counter()

    cardinal_classes = group_rulesets(data.cardinal, PluralRuleType.CARDINAL)
    ordinal_classes = alias_equivalent_rules(
        group_rulesets(data.ordinal, PluralRuleType.ORDINAL), cardinal_classes
    )
    registry = PluralRuleRegistry(
        cldr_version=data.version,
        cardinal=DispatchTable.build(cardinal_classes, PluralRuleType.CARDINAL),
        ordinal=DispatchTable.build(ordinal_classes, PluralRuleType.ORDINAL),
    )

    cardinal_ids = {id(c.rule) for c in cardinal_classes}
    shared = sum(1 for c in ordinal_classes if id(c.rule) in cardinal_ids)
    logger.info(
        "Built plural rules for CLDR %s: %d cardinal and %d ordinal rule classes "
        "(%d ordinal shared with cardinal), %d languages in %.1f ms",
        data.version,
        len(cardinal_classes),
        len(ordinal_classes),
        shared,
        len(registry.cardinal),
        (time.perf_counter() - start) * 1000,
    )
    return registry


# Module-level singleton, built on first use.
_SHARED_REGISTRY: PluralRuleRegistry | None = None
_SHARED_REGISTRY_LOCK = threading.Lock()


def get_shared_registry() -> PluralRuleRegistry:
    """Get the shared registry built from Babel's CLDR data.

    Built once, under a lock, on first call; later calls return the same
    object without locking.

    Returns:
        Shared PluralRuleRegistry

    Raises:
        BabelImportError: If Babel is not installed

    Example:
        >>> rule = get_shared_registry().lookup("en")
        >>> rule(PluralOperand.from_number(1))
        <PluralCategory.ONE: 'one'>
    """
    # pylint: disable=global-statement
    global _SHARED_REGISTRY  # noqa: PLW0603
    if _SHARED_REGISTRY is None:
        with _SHARED_REGISTRY_LOCK:
            if _SHARED_REGISTRY is None:
                from pluralengine.cldr import PluralData  # noqa: PLC0415 - circular

                _SHARED_REGISTRY = build_registry(PluralData.from_babel())
    return _SHARED_REGISTRY
