"""Tests for the shared registry built from Babel's CLDR data.

Selection is cross-checked against Babel's own plural evaluator: integers
for a sample of locales, and exact decimals (trailing zeros included) for
every locale Babel ships.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

babel = pytest.importorskip("babel")

from pluralengine import select_plural_category  # noqa: E402
from pluralengine.core.babel_compat import list_locale_identifiers  # noqa: E402
from pluralengine.enums import PluralCategory, PluralRuleType  # noqa: E402
from pluralengine.locale_utils import split_locale  # noqa: E402
from pluralengine.runtime.plural_rules import PluralRule  # noqa: E402
from pluralengine.runtime.registry import get_shared_registry  # noqa: E402

CROSS_CHECK_LOCALES = (
    "ar", "be", "br", "ca", "cs", "cy", "de_AT", "en", "en_GB", "es", "fr", "fr_CA", "ga",
    "gd", "he", "hu", "it", "ja", "kw", "lt", "lv", "mk", "mt", "pl", "pt", "pt_BR", "pt_PT",
    "ro", "ru", "sl", "sv", "uk", "zh",
)

DECIMAL_TEXTS = (
    "0", "1", "2", "3", "5", "11", "21", "101", "1000000",
    "0.0", "1.0", "2.0", "21.0", "3.00", "1.50", "2.10",
    "0.05", "0.1", "0.11", "1.1", "1.2", "2.5", "17.5", "100.01", "1.000",
)


def _babel_category(
    locale_code: str, number: int | Decimal, rule_type: PluralRuleType
) -> str:
    locale = babel.Locale.parse(locale_code)
    if rule_type is PluralRuleType.CARDINAL:
        return str(locale.plural_form(number))
    return str(locale.ordinal_form(number))


class TestSharedRegistry:
    """get_shared_registry() is built once from Babel data."""

    def test_singleton(self) -> None:
        assert get_shared_registry() is get_shared_registry()

    def test_version_matches_babel(self) -> None:
        from pluralengine.core.babel_compat import get_cldr_version

        assert get_shared_registry().cldr_version == (get_cldr_version() or "unknown")

    def test_region_sensitive_portuguese(self) -> None:
        assert "pt" in get_shared_registry().cardinal.region_sensitive_languages


class TestSelectPluralCategory:
    """select_plural_category() uses the shared registry."""

    @pytest.mark.parametrize(
        ("number", "locale", "rule_type", "expected"),
        [
            (0, "lv_LV", PluralRuleType.CARDINAL, PluralCategory.ZERO),
            (1, "en_US", PluralRuleType.CARDINAL, PluralCategory.ONE),
            (5, "ru_RU", PluralRuleType.CARDINAL, PluralCategory.MANY),
            (2, "ar_SA", PluralRuleType.CARDINAL, PluralCategory.TWO),
            (3, "en", PluralRuleType.ORDINAL, PluralCategory.FEW),
            (0, "pt-PT", PluralRuleType.CARDINAL, PluralCategory.OTHER),
            (0, "pt-BR", PluralRuleType.CARDINAL, PluralCategory.ONE),
            (0, "pt_AO", PluralRuleType.CARDINAL, PluralCategory.OTHER),
            (1, "pt-MZ", PluralRuleType.CARDINAL, PluralCategory.ONE),
        ],
    )
    def test_examples(
        self, number: int, locale: str, rule_type: PluralRuleType, expected: PluralCategory
    ) -> None:
        assert select_plural_category(number, locale, rule_type) is expected

    def test_unknown_locale_selects_other(self) -> None:
        assert select_plural_category(1, "xx_XX") is PluralCategory.OTHER
        assert select_plural_category(1, "xx", PluralRuleType.ORDINAL) is PluralCategory.OTHER

    def test_visible_zeros(self) -> None:
        from decimal import Decimal

        assert select_plural_category(Decimal("1.0"), "en") is PluralCategory.OTHER


class TestBabelCrossCheck:
    """Integer selection agrees with Babel for every tested locale."""

    @given(
        locale_code=st.sampled_from(CROSS_CHECK_LOCALES),
        number=st.integers(min_value=0, max_value=10**7),
        rule_type=st.sampled_from(PluralRuleType),
    )
    def test_integers(self, locale_code: str, number: int, rule_type: PluralRuleType) -> None:
        language, region = split_locale(locale_code)
        rule = PluralRule.create_or_default(language, region, rule_type)

        event(f"rule_type={rule_type}")
        assert rule.select(number) == _babel_category(locale_code, number, rule_type)

    @pytest.mark.parametrize("locale_code", CROSS_CHECK_LOCALES)
    def test_small_integers(self, locale_code: str) -> None:
        for rule_type in PluralRuleType:
            rule = PluralRule.create_or_default(*split_locale(locale_code), rule_type)
            for number in range(0, 200):
                assert rule.select(number) == _babel_category(locale_code, number, rule_type), (
                    locale_code, rule_type, number
                )


class TestBabelDecimalCrossCheck:
    """Exact decimal selection agrees with Babel for every locale it ships."""

    @pytest.mark.parametrize("rule_type", list(PluralRuleType))
    def test_every_locale(self, rule_type: PluralRuleType) -> None:
        mismatches = []
        for locale_code in list_locale_identifiers():
            rule = PluralRule.for_locale(locale_code, rule_type) or PluralRule.default(rule_type)
            for text in DECIMAL_TEXTS:
                expected = _babel_category(locale_code, Decimal(text), rule_type)
                if rule.select(text) != expected:
                    mismatches.append((locale_code, text, expected))
        assert mismatches == []

    @pytest.mark.parametrize(
        ("locale_code", "text", "expected"),
        [
            ("is", "0.1", PluralCategory.ONE),
            ("is", "0.11", PluralCategory.OTHER),
            ("is", "2.0", PluralCategory.OTHER),
            ("mk", "1.1", PluralCategory.ONE),
            ("mk", "1.0", PluralCategory.OTHER),
            ("lt", "17.5", PluralCategory.MANY),
            ("sl", "0.05", PluralCategory.FEW),
            ("hr", "2.10", PluralCategory.OTHER),
            ("pt_AO", "0.5", PluralCategory.OTHER),
        ],
    )
    def test_trailing_digits_reach_rules(
        self, locale_code: str, text: str, expected: PluralCategory
    ) -> None:
        rule = PluralRule.for_locale(locale_code)
        assert rule is not None
        assert rule.select(text) is expected
        assert _babel_category(locale_code, Decimal(text), PluralRuleType.CARDINAL) == expected
