"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent dispatch keys and lookups.

Plural rules depend on the language and, for a handful of languages, on the
region. Everything else in a locale tag is irrelevant to plural selection.

Python 3.13+.
"""

from __future__ import annotations

from pluralengine.constants import ROOT_LOCALE_ALIASES

__all__ = [
    "base_language",
    "extract_region",
    "is_root_locale",
    "normalize_locale",
    "split_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    CLDR supplemental JSON keys use the hyphenated form ("pt-PT"); Babel
    locale identifiers use the underscore form ("pt_PT").

    This is the canonical normalization function. All locale handling should
    normalize at the system boundary (entry point) using this function, then
    use the normalized form for dispatch keys and lookups.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-PT")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_PT")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("pt-PT")
        'pt_PT'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


def split_locale(locale_code: str) -> tuple[str, str]:
    """Split a locale code into (language, region).

    The language is lower-cased; the region (everything after the first
    separator) is upper-cased. Encoding suffixes ("de_DE.UTF-8") and
    modifiers ("ca_ES@valencia") are dropped.

    Args:
        locale_code: Locale code in BCP-47 or POSIX format

    Returns:
        (language, region) tuple; region is "" when absent

    Example:
        >>> split_locale("pt-PT")
        ('pt', 'PT')
        >>> split_locale("EN")
        ('en', '')
        >>> split_locale("de_DE.UTF-8")
        ('de', 'DE')
    """
    code = normalize_locale(locale_code).split(".", 1)[0].split("@", 1)[0]
    language, _, region = code.partition("_")
    return language.lower(), region.upper()


def base_language(locale_code: str) -> str:
    """Extract the language subtag: "pt_PT" -> "pt"."""
    return split_locale(locale_code)[0]


def extract_region(locale_code: str) -> str:
    """Extract the region subtag: "pt_PT" -> "PT", "pt" -> ""."""
    return split_locale(locale_code)[1]


def is_root_locale(language: str) -> bool:
    """Check whether a language tag denotes the CLDR root locale.

    Example:
        >>> is_root_locale("und")
        True
        >>> is_root_locale("en")
        False
    """
    return language.strip().lower() in ROOT_LOCALE_ALIASES
