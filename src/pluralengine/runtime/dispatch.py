"""Locale dispatch: language (and sometimes region) to compiled rule.

Almost every language has one plural rule regardless of region. For the
few where CLDR distinguishes a regional variant (Portuguese: pt vs pt_PT),
the language entry carries region overrides that are checked before
falling through to the regionless rule.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pluralengine.constants import ROOT_LOCALE
from pluralengine.enums import PluralRuleType
from pluralengine.locale_utils import is_root_locale, split_locale

from .compiler import CompiledRule, constant_rule
from .rulesets import RuleClass

__all__ = ["DispatchTable", "LanguageEntry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    """Rules for one language.

    Attributes:
        default: Regionless rule, or None if CLDR only lists regional tags
        regions: (region, rule) overrides sorted by region, each differing
            from default
    """

    default: CompiledRule | None
    regions: tuple[tuple[str, CompiledRule], ...] = ()

    @property
    def is_region_sensitive(self) -> bool:
        return bool(self.regions)

    def resolve(self, region: str = "") -> CompiledRule | None:
        """Rule for a region, falling through to the regionless rule."""
        if region:
            for candidate, rule in self.regions:
                if candidate == region:
                    return rule
        return self.default


@dataclass(frozen=True, slots=True)
class DispatchTable:
    """Immutable map from locale to compiled rule for one rule type.

    Attributes:
        rule_type: Rule family of every rule in the table
        entries: Language -> LanguageEntry (read-only mapping)
        root: Rule for "", "root" and "und"

    Lookup order for ("pt", "PT"): the PT override if one exists, then the
    regionless pt rule. Unknown languages resolve to None.

    Regions without an override always fall through to the regionless
    rule; CLDR parent locales are not consulted here. Data read with
    PluralData.from_babel() already carries overrides for regions whose
    CLDR parent differs (pt_AO, pt_MZ and the other pt_PT children), while
    supplemental JSON documents list only pt_PT, so there ("pt", "AO")
    selects with the Brazilian rule.
    """

    rule_type: PluralRuleType
    entries: Mapping[str, LanguageEntry]
    root: CompiledRule

    @classmethod
    def build(cls, classes: Iterable[RuleClass], rule_type: PluralRuleType) -> "DispatchTable":
        """Build the table from rule classes.

        A region-qualified tag is kept as an override only when its rule
        differs from the regionless rule of its language; otherwise it is
        folded into the language.

        Args:
            classes: Rule classes of one rule type
            rule_type: Rule family

        Returns:
            DispatchTable
        """
        root: CompiledRule | None = None
        by_language: dict[str, dict[str, CompiledRule]] = {}

        for rule_class in classes:
            for tag in rule_class.locales:
                if is_root_locale(tag):
                    if root is None or tag == ROOT_LOCALE:
                        root = rule_class.rule
                    continue
                language, region = split_locale(tag)
                by_language.setdefault(language, {})[region] = rule_class.rule

        if root is None:
            root = constant_rule(name=f"{rule_type}_root", rule_type=rule_type)

        entries: dict[str, LanguageEntry] = {}
        for language in sorted(by_language):
            rules = by_language[language]
            default = rules.get("")
            overrides = tuple(
                (region, rule)
                for region, rule in sorted(rules.items())
                if region and rule is not default
            )
            entries[language] = LanguageEntry(default=default, regions=overrides)
            if overrides:
                logger.debug(
                    "%s rules for %s are region-sensitive: %s",
                    rule_type,
                    language,
                    ", ".join(region for region, _ in overrides),
                )

        return cls(rule_type=rule_type, entries=MappingProxyType(entries), root=root)

    def lookup(self, language: str, region: str = "") -> CompiledRule | None:
        """Find the rule for a language and optional region.

        Args:
            language: Language subtag, any case ("", "root" and "und" mean root)
            region: Region subtag, any case; may be empty

        Returns:
            CompiledRule, or None for an unknown language
        """
        normalized = language.strip().lower()
        if is_root_locale(normalized):
            return self.root
        entry = self.entries.get(normalized)
        if entry is None:
            return None
        return entry.resolve(region.strip().upper())

    @property
    def languages(self) -> tuple[str, ...]:
        """Known languages, sorted (root aliases excluded)."""
        return tuple(self.entries)

    @property
    def region_sensitive_languages(self) -> tuple[str, ...]:
        return tuple(lang for lang, entry in self.entries.items() if entry.is_region_sensitive)

    @property
    def rules(self) -> tuple[CompiledRule, ...]:
        """Distinct rules in the table, root first."""
        seen: dict[int, CompiledRule] = {id(self.root): self.root}
        for entry in self.entries.values():
            candidates = [rule for _, rule in entry.regions]
            if entry.default is not None:
                candidates.insert(0, entry.default)
            for rule in candidates:
                seen.setdefault(id(rule), rule)
        return tuple(seen.values())

    def __contains__(self, language: object) -> bool:
        if not isinstance(language, str):
            return False
        normalized = language.strip().lower()
        return is_root_locale(normalized) or normalized in self.entries

    def __len__(self) -> int:
        return len(self.entries)
