"""CLDR plural data sources.

PluralData holds the raw rulesets of one CLDR release for both rule types.
It is read either from CLDR supplemental JSON documents (plurals.json and
ordinals.json of the cldr-json "cldr-core" package, already decoded) or
from the CLDR data bundled with Babel.

Python 3.13+. Babel is only required by PluralData.from_babel().
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pluralengine.constants import ROOT_LOCALE
from pluralengine.core.babel_compat import (
    BabelPluralRuleProtocol,
    get_cldr_version,
    get_parent_exceptions,
    list_locale_identifiers,
    load_own_locale_data,
    require_babel,
)
from pluralengine.diagnostics import CLDRDataError, CLDRVersionMismatchError, ErrorTemplate
from pluralengine.enums import PluralRuleType
from pluralengine.runtime.rulesets import Ruleset

__all__ = ["PluralData"]

logger = logging.getLogger(__name__)

_SECTION_KEYS: dict[PluralRuleType, str] = {
    PluralRuleType.CARDINAL: "plurals-type-cardinal",
    PluralRuleType.ORDINAL: "plurals-type-ordinal",
}

_BABEL_KEYS: dict[PluralRuleType, str] = {
    PluralRuleType.CARDINAL: "plural_form",
    PluralRuleType.ORDINAL: "ordinal_form",
}

_UNKNOWN_VERSION = "unknown"


def _inherit_from_parents(
    rulesets: dict[str, Ruleset], identifiers: tuple[str, ...], parents: Mapping[str, str]
) -> list[str]:
    """Give locales with an explicit CLDR parent the rules of that parent.

    A locale without rules of its own normally resolves through its
    language at lookup time. When CLDR names a different parent (pt_AO
    inherits from pt_PT), the nearest such ancestor with rules is copied
    under the locale's own tag instead. Chains ending at root are left
    alone.

    Returns:
        Identifiers that received inherited rules, sorted
    """
    inherited: list[str] = []
    for identifier in identifiers:
        if identifier in rulesets:
            continue
        parent = parents.get(identifier)
        while parent is not None and parent != ROOT_LOCALE:
            ruleset = rulesets.get(parent)
            if ruleset is not None:
                rulesets[identifier] = ruleset
                inherited.append(identifier)
                break
            parent = parents.get(parent)
    return inherited


@dataclass(frozen=True, slots=True)
class PluralData:
    """Rulesets per locale tag for both rule types of one CLDR release.

    Attributes:
        version: CLDR release, e.g. "47"
        cardinal: Cardinal ruleset per locale tag (read-only mapping)
        ordinal: Ordinal ruleset per locale tag (read-only mapping)
    """

    version: str
    cardinal: Mapping[str, Ruleset]
    ordinal: Mapping[str, Ruleset]

    def rulesets(self, rule_type: PluralRuleType) -> Mapping[str, Ruleset]:
        """Rulesets of one rule type."""
        return self.cardinal if rule_type is PluralRuleType.CARDINAL else self.ordinal

    @classmethod
    def from_supplemental(cls, *documents: Mapping[str, Any]) -> "PluralData":
        """Read decoded CLDR supplemental JSON documents.

        Each document has the shape::

            {"supplemental": {
                "version": {"_cldrVersion": "47"},
                "plurals-type-cardinal": {"en": {"pluralRule-count-one": "..."}}
            }}

        with "plurals-type-ordinal" in place of the cardinal section for
        ordinal data. A single document may carry both sections.

        Args:
            documents: Decoded JSON documents

        Returns:
            PluralData

        Raises:
            CLDRDataError: If a document is malformed or a rule type is missing
            CLDRVersionMismatchError: If documents come from different releases
        """
        versions: dict[str, None] = {}
        sections: dict[PluralRuleType, dict[str, Ruleset]] = {}

        for document in documents:
            supplemental = document.get("supplemental") if isinstance(document, Mapping) else None
            if not isinstance(supplemental, Mapping):
                raise CLDRDataError(ErrorTemplate.cldr_data_invalid("no 'supplemental' object"))

            version_info = supplemental.get("version")
            version = version_info.get("_cldrVersion") if isinstance(version_info, Mapping) else None
            if not isinstance(version, str):
                raise CLDRDataError(ErrorTemplate.cldr_data_invalid("no '_cldrVersion' string"))
            versions[version] = None

            for rule_type, key in _SECTION_KEYS.items():
                if key not in supplemental:
                    continue
                section = supplemental[key]
                if not isinstance(section, Mapping):
                    raise CLDRDataError(ErrorTemplate.cldr_data_invalid(f"'{key}' is not an object"))
                target = sections.setdefault(rule_type, {})
                for tag, rules in section.items():
                    if not isinstance(rules, Mapping):
                        raise CLDRDataError(
                            ErrorTemplate.cldr_data_invalid(f"rules of '{tag}' are not an object")
                        )
                    target[tag] = Ruleset.from_mapping(rules)

        if len(versions) > 1:
            raise CLDRVersionMismatchError(
                ErrorTemplate.cldr_version_mismatch(versions), versions=tuple(versions)
            )
        for rule_type in PluralRuleType:
            if rule_type not in sections:
                raise CLDRDataError(ErrorTemplate.cldr_data_missing(f"{rule_type} rules"))

        return cls(
            version=next(iter(versions)),
            cardinal=MappingProxyType(sections[PluralRuleType.CARDINAL]),
            ordinal=MappingProxyType(sections[PluralRuleType.ORDINAL]),
        )

    @classmethod
    def from_babel(cls) -> "PluralData":
        """Read the plural rules bundled with Babel.

        Only rules a locale defines itself are read; locales inheriting
        their rules resolve through their language at lookup time. Locales
        with a CLDR parent exception (pt_AO -> pt_PT) take the rules of
        that parent.

        Returns:
            PluralData with Babel's CLDR version

        Raises:
            BabelImportError: If Babel is not installed
        """
        require_babel("PluralData.from_babel")
        version = get_cldr_version()
        if version is None:
            logger.warning("Babel does not report its CLDR version; using %r", _UNKNOWN_VERSION)
            version = _UNKNOWN_VERSION

        sections: dict[PluralRuleType, dict[str, Ruleset]] = {
            rule_type: {ROOT_LOCALE: Ruleset.other_only()} for rule_type in PluralRuleType
        }
        identifiers = list_locale_identifiers()
        for identifier in identifiers:
            data = load_own_locale_data(identifier)
            for rule_type, key in _BABEL_KEYS.items():
                plural_rule: BabelPluralRuleProtocol | None = data.get(key)
                if plural_rule is not None:
                    sections[rule_type][identifier] = Ruleset.from_mapping(plural_rule.rules)

        parents = get_parent_exceptions()
        for rule_type, rulesets in sections.items():
            inherited = _inherit_from_parents(rulesets, identifiers, parents)
            if inherited:
                logger.debug(
                    "%s rules inherited from parent locales: %s", rule_type, ", ".join(inherited)
                )

        logger.debug(
            "Read Babel plural data: %d locales scanned, %d cardinal and %d ordinal rulesets",
            len(identifiers),
            len(sections[PluralRuleType.CARDINAL]),
            len(sections[PluralRuleType.ORDINAL]),
        )
        return cls(
            version=version,
            cardinal=MappingProxyType(sections[PluralRuleType.CARDINAL]),
            ordinal=MappingProxyType(sections[PluralRuleType.ORDINAL]),
        )
