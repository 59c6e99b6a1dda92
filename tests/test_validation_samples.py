"""Tests for sample validation of compiled plural rules."""

from __future__ import annotations

from pluralengine.cldr import PluralData
from pluralengine.diagnostics import ValidationResult
from pluralengine.enums import PluralRuleType
from pluralengine.runtime.compiler import compile_ruleset
from pluralengine.runtime.registry import PluralRuleRegistry
from pluralengine.runtime.rulesets import Ruleset
from pluralengine.validation import validate_plural_data, validate_ruleset


def _ruleset(**rules: str) -> Ruleset:
    return Ruleset.from_mapping(rules)


# ============================================================================
# SINGLE RULESET
# ============================================================================


class TestValidateRuleset:
    """validate_ruleset() selects every sample through one compiled rule."""

    def test_matching_samples(self) -> None:
        ruleset = _ruleset(one="n = 1 @integer 1 @decimal 1.0, 1.00", other=" @integer 0, 2~5")

        result = validate_ruleset(ruleset, compile_ruleset(ruleset), "af")

        assert result == ValidationResult.valid(checked_count=8)

    def test_mismatch_reports_annotated_category(self) -> None:
        ruleset = _ruleset(one="n = 1 @integer 1", other=" @integer 2, 3")
        wrong = compile_ruleset(_ruleset(one="n = 2"))

        result = validate_ruleset(ruleset, wrong, "en", PluralRuleType.CARDINAL)

        assert not result.is_valid
        assert result.checked_count == 3
        assert [(e.code, e.content, e.category) for e in result.errors] == [
            ("sample-mismatch", "1", "one"),
            ("sample-mismatch", "2", "other"),
        ]
        assert all(e.locale_code == "en" and e.rule_type == "cardinal" for e in result.errors)
        assert result.errors[0].message == "1 selects 'other'"

    def test_category_without_samples_warns(self) -> None:
        ruleset = _ruleset(one="n = 1", other=" @integer 2, 3")

        result = validate_ruleset(ruleset, compile_ruleset(ruleset))

        assert result.is_valid
        assert result.warning_count == 1
        (warning,) = result.warnings
        assert warning.code == "no-samples"
        assert warning.context == "(root)"
        assert "'one'" in warning.message

    def test_no_samples_at_all_is_silent(self) -> None:
        ruleset = _ruleset(one="n = 1", other="")

        assert validate_ruleset(ruleset, compile_ruleset(ruleset)) == ValidationResult.valid()

    def test_unparseable_annotation(self) -> None:
        ruleset = _ruleset(one="n = 1 @integer x", other=" @integer 2")

        result = validate_ruleset(ruleset, compile_ruleset(ruleset), "en", PluralRuleType.ORDINAL)

        (error,) = result.errors
        assert error.code == "sample-invalid"
        assert error.content == "n = 1 @integer x"
        assert error.category == "one"
        assert error.rule_type == "ordinal"
        assert result.checked_count == 1

    def test_compact_exponent_out_of_range(self) -> None:
        ruleset = _ruleset(many="e != 0..5 @integer 1c6, 1c30", other=" @integer 1")

        result = validate_ruleset(ruleset, compile_ruleset(ruleset), "fr")

        (error,) = result.errors
        assert (error.code, error.content, error.category) == ("sample-invalid", "1c30", "many")
        assert result.checked_count == 2


# ============================================================================
# WHOLE DATA SETS
# ============================================================================


class TestValidatePluralData:
    """validate_plural_data() covers both rule types of every locale."""

    def test_fixture_data_conforms(
        self, plural_data: PluralData, registry: PluralRuleRegistry
    ) -> None:
        result = validate_plural_data(plural_data, registry)

        assert result.is_valid, result.format()
        assert result.warning_count == 0
        assert result.checked_count > 100

    def test_builds_registry_when_missing(self, plural_data: PluralData) -> None:
        assert validate_plural_data(plural_data).is_valid

    def test_unresolvable_locale(
        self, plural_data: PluralData, registry: PluralRuleRegistry
    ) -> None:
        extended = PluralData(
            plural_data.version,
            {**plural_data.cardinal, "xx-YY": _ruleset(one="n = 1 @integer 1")},
            plural_data.ordinal,
        )

        result = validate_plural_data(extended, registry)

        (error,) = result.errors
        assert error.code == "no-rule"
        assert error.content == "xx-YY"
        assert error.locale_code == "xx_YY"
        assert error.rule_type == "cardinal"

    def test_format_names_locale_category_and_type(self) -> None:
        ruleset = _ruleset(one="n = 1 @integer 1", other="")
        result = validate_ruleset(
            ruleset, compile_ruleset(_ruleset(two="n = 1")), "en", PluralRuleType.CARDINAL
        )

        text = result.format()

        assert text.startswith("Errors (1):")
        assert "[sample-mismatch] en/one (cardinal): 1 selects 'two'" in text
