"""Tests for locale dispatch tables and the registry built from them."""

from __future__ import annotations

import logging
import threading

import pytest

from pluralengine.cldr import PluralData
from pluralengine.enums import PluralCategory, PluralRuleType
from pluralengine.runtime import registry as registry_module
from pluralengine.runtime.dispatch import DispatchTable, LanguageEntry
from pluralengine.runtime.operands import PluralOperand
from pluralengine.runtime.registry import PluralRuleRegistry, build_registry
from pluralengine.runtime.rulesets import Ruleset, group_rulesets

ONE_IS_1 = Ruleset.from_mapping({"one": "n = 1"})


def _table(rulesets: dict[str, Ruleset]) -> DispatchTable:
    classes = group_rulesets(rulesets, PluralRuleType.CARDINAL)
    return DispatchTable.build(classes, PluralRuleType.CARDINAL)


# ============================================================================
# DISPATCH TABLE
# ============================================================================


class TestDispatchLookup:
    """Language and region resolution."""

    def test_region_override(self, registry: PluralRuleRegistry) -> None:
        table = registry.cardinal

        assert table.lookup("pt", "PT") is table.lookup("en")
        assert table.lookup("pt", "PT") is not table.lookup("pt")

    def test_unlisted_region_falls_through(self, registry: PluralRuleRegistry) -> None:
        table = registry.cardinal
        assert table.lookup("pt", "BR") is table.lookup("pt")
        assert table.lookup("en", "GB") is table.lookup("en")

    def test_case_insensitive(self, registry: PluralRuleRegistry) -> None:
        table = registry.cardinal
        assert table.lookup("PT", "pt") is table.lookup("pt", "PT")
        assert table.lookup(" En ") is table.lookup("en")

    @pytest.mark.parametrize("language", ["", "root", "und", "ROOT"])
    def test_root_aliases(self, registry: PluralRuleRegistry, language: str) -> None:
        rule = registry.cardinal.lookup(language)
        assert rule is registry.cardinal.root
        assert rule is not None
        assert rule.is_constant

    def test_unknown_language(self, registry: PluralRuleRegistry) -> None:
        assert registry.cardinal.lookup("xx") is None
        assert registry.cardinal.lookup("xx", "PT") is None

    def test_shared_rules_are_one_object(self, registry: PluralRuleRegistry) -> None:
        table = registry.cardinal
        assert table.lookup("de") is table.lookup("en")
        assert table.lookup("uk") is table.lookup("ru")
        assert table.lookup("ja") is table.root


class TestDispatchIntrospection:
    """Languages, rules and container protocol."""

    def test_languages(self, registry: PluralRuleRegistry) -> None:
        assert registry.cardinal.languages == (
            "af", "ak", "ar", "de", "en", "fr", "ja", "lv", "pl", "pt", "ru", "uk",
        )
        assert len(registry.cardinal) == 12

    def test_region_sensitive_languages(self, registry: PluralRuleRegistry) -> None:
        assert registry.cardinal.region_sensitive_languages == ("pt",)
        assert registry.ordinal.region_sensitive_languages == ()

    def test_rules_are_distinct_root_first(self, registry: PluralRuleRegistry) -> None:
        rules = registry.cardinal.rules

        assert rules[0] is registry.cardinal.root
        assert len(rules) == 10
        assert len({id(rule) for rule in rules}) == 10

    def test_contains(self, registry: PluralRuleRegistry) -> None:
        table = registry.cardinal
        assert "pt" in table
        assert "EN" in table
        assert "und" in table
        assert "xx" not in table
        assert 5 not in table

    def test_entries_are_read_only(self, registry: PluralRuleRegistry) -> None:
        with pytest.raises(TypeError):
            registry.cardinal.entries["xx"] = LanguageEntry(None)  # type: ignore[index]


class TestDispatchBuild:
    """Table construction edge cases."""

    def test_missing_root_gets_constant_rule(self) -> None:
        table = _table({"en": ONE_IS_1})

        assert table.root.is_constant
        assert table.root.name == "cardinal_root"
        assert table.lookup("und") is table.root

    def test_identical_regional_rule_folded(self) -> None:
        table = _table({"de": ONE_IS_1, "de-AT": ONE_IS_1})

        assert not table.entries["de"].is_region_sensitive
        assert table.lookup("de", "AT") is table.lookup("de")

    def test_regional_tag_without_language_rule(self) -> None:
        table = _table({"zz-AA": ONE_IS_1})

        assert table.lookup("zz") is None
        rule = table.lookup("zz", "AA")
        assert rule is not None
        assert rule(PluralOperand.from_number(1)) is PluralCategory.ONE

    def test_region_override_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pluralengine.runtime.dispatch"):
            _table({"pt": ONE_IS_1, "pt-PT": Ruleset.from_mapping({"one": "i = 1 and v = 0"})})
        assert "region-sensitive: PT" in caplog.text

    def test_language_entry_resolve(self) -> None:
        table = _table({"pt": ONE_IS_1, "pt_PT": Ruleset.from_mapping({"one": "n = 2"})})
        entry = table.entries["pt"]

        assert entry.is_region_sensitive
        assert entry.resolve("PT") is not entry.default
        assert entry.resolve("BR") is entry.default
        assert entry.resolve() is entry.default


# ============================================================================
# REGISTRY
# ============================================================================


class TestRegistry:
    """Both rule types built from one data set."""

    def test_version_and_tables(self, registry: PluralRuleRegistry) -> None:
        assert registry.cldr_version == "38"
        assert registry.table(PluralRuleType.CARDINAL) is registry.cardinal
        assert registry.table(PluralRuleType.ORDINAL) is registry.ordinal
        assert registry.cardinal.rule_type is PluralRuleType.CARDINAL

    def test_unknown_rule_type(self, registry: PluralRuleRegistry) -> None:
        with pytest.raises(TypeError):
            registry.table("range")  # type: ignore[arg-type]

    def test_lookup(self, registry: PluralRuleRegistry) -> None:
        rule = registry.lookup("en", rule_type=PluralRuleType.ORDINAL)
        assert rule is not None
        assert rule(PluralOperand.from_number(22)) is PluralCategory.TWO

    def test_ordinal_shares_cardinal_rules(self, registry: PluralRuleRegistry) -> None:
        assert registry.ordinal.lookup("fr") is registry.cardinal.lookup("af")
        assert registry.ordinal.root is registry.cardinal.root
        assert registry.ordinal.lookup("pt") is registry.cardinal.root

    def test_build_is_logged(
        self, plural_data: PluralData, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="pluralengine.runtime.registry"):
            build_registry(plural_data)
        assert "Built plural rules for CLDR 38" in caplog.text
        assert "10 cardinal and 4 ordinal rule classes" in caplog.text
        assert "(2 ordinal shared with cardinal)" in caplog.text

    def test_registry_is_immutable(self, registry: PluralRuleRegistry) -> None:
        with pytest.raises(AttributeError):
            registry.cldr_version = "1"  # type: ignore[misc]

    def test_rebuild_agrees(self, plural_data: PluralData, registry: PluralRuleRegistry) -> None:
        """Building twice from the same data yields the same dispatch."""
        rebuilt = build_registry(plural_data)

        for rule_type in PluralRuleType:
            old, new = registry.table(rule_type), rebuilt.table(rule_type)
            assert old.languages == new.languages
            assert old.region_sensitive_languages == new.region_sensitive_languages
            for language in old.languages:
                for region in ("", "PT", "BR", "US"):
                    first = old.lookup(language, region)
                    second = new.lookup(language, region)
                    assert first is not None and second is not None
                    assert first == second
                    assert first.name == second.name


class TestSharedRegistry:
    """get_shared_registry builds once and shares the result."""

    def test_built_once_across_threads(
        self, registry: PluralRuleRegistry, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[PluralData] = []

        def fake_build(data: PluralData) -> PluralRuleRegistry:
            calls.append(data)
            return registry

        monkeypatch.setattr(registry_module, "_SHARED_REGISTRY", None)
        monkeypatch.setattr(registry_module, "build_registry", fake_build)
        monkeypatch.setattr(PluralData, "from_babel", classmethod(lambda cls: None))

        results: list[PluralRuleRegistry] = []
        threads = [
            threading.Thread(target=lambda: results.append(registry_module.get_shared_registry()))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert all(result is registry for result in results)
        assert len(results) == 8
