"""Quickstart example for pluralengine.

This example demonstrates plural category selection with rules compiled
from CLDR data: Babel's bundled data for the shared registry, and a
hand-written cldr-json excerpt for an explicit registry.

Note: Examples 1-3 need Babel (pip install pluralengine[babel]).
Example 4 runs on a compiler-only install.
"""

from decimal import Decimal

from pluralengine import (
    PluralData,
    PluralRule,
    PluralRuleType,
    build_registry,
    select_plural_category,
)
from pluralengine.validation import validate_plural_data

# Example 1: One-shot selection through the shared registry
print("=" * 50)
print("Example 1: select_plural_category")
print("=" * 50)

for locale in ("en_US", "lv_LV", "ru_RU", "ar_SA"):
    categories = [str(select_plural_category(n, locale)) for n in (0, 1, 2, 5, 21)]
    print(f"{locale:6} 0, 1, 2, 5, 21 -> {', '.join(categories)}")
# Output: en_US  0, 1, 2, 5, 21 -> other, one, other, other, other

# Example 2: Visible fraction digits matter
print("\n" + "=" * 50)
print("Example 2: Trailing zeros")
print("=" * 50)

english = PluralRule.create_or_default("en", None, PluralRuleType.CARDINAL)
print(f"1      -> {english.select(1)}")
print(f"'1.0'  -> {english.select('1.0')}")
print(f"1.0    -> {english.select(1.0)}")
print(f"Decimal('1.0') -> {english.select(Decimal('1.0'))}")
# Output: one, other, one, other

# Example 3: Ordinals and compact numbers
print("\n" + "=" * 50)
print("Example 3: Ordinals and compact numbers")
print("=" * 50)

ordinal = PluralRule.create_or_default("en", None, PluralRuleType.ORDINAL)
for n in (1, 2, 3, 4, 11, 22, 103):
    print(f"{n}: {ordinal.select(n)}")

french = PluralRule.create_or_default("fr", None, PluralRuleType.CARDINAL)
print(f"fr '1 million' (1, e=6) -> {french.select_compact(1, 6)}")
print(f"fr '1 millier' (1, e=3) -> {french.select_compact(1, 3)}")
# Output: many, other

# Example 4: Explicit registry from cldr-json documents
print("\n" + "=" * 50)
print("Example 4: Registry from supplemental JSON")
print("=" * 50)

plurals = {
    "supplemental": {
        "version": {"_cldrVersion": "47"},
        "plurals-type-cardinal": {
            "en": {
                "pluralRule-count-one": "i = 1 and v = 0 @integer 1",
                "pluralRule-count-other": " @integer 0, 2~16, 100 @decimal 0.0~1.5",
            },
            "de": {
                "pluralRule-count-one": "i = 1 and v = 0 @integer 1",
                "pluralRule-count-other": " @integer 0, 2~16, 100 @decimal 0.0~1.5",
            },
            "root": {"pluralRule-count-other": " @integer 0~15"},
        },
    }
}
ordinals = {
    "supplemental": {
        "version": {"_cldrVersion": "47"},
        "plurals-type-ordinal": {"root": {"pluralRule-count-other": " @integer 0~15"}},
    }
}

data = PluralData.from_supplemental(plurals, ordinals)
registry = build_registry(data)
german = PluralRule.create("de", "AT", PluralRuleType.CARDINAL, registry=registry)
assert german is not None
print(f"de_AT 1 -> {german.select(1)}")
print(f"en and de share one compiled rule: {registry.lookup('en') is registry.lookup('de')}")

result = validate_plural_data(data, registry)
print(result.format())
print(f"{result.checked_count} samples checked")
