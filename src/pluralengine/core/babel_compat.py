"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across all Babel-dependent modules.

Design Rationale:
    PluralEngine supports two installation modes:
    - Compiler-only: `pip install pluralengine` (no external dependencies;
      rules come from CLDR supplemental JSON documents)
    - Full runtime: `pip install pluralengine[babel]` (includes Babel, whose
      bundled CLDR data backs the shared registry)

    This module ensures that:
    1. Compiler-only installations never trigger Babel imports
    2. Runtime modules get consistent, helpful error messages when Babel is missing
    3. Babel's PluralRule is typed through a Protocol, without importing Babel

Usage Pattern:
    from pluralengine.core.babel_compat import require_babel

    def my_function() -> None:
        require_babel("my_function")  # Raises ImportError if Babel missing
        from babel import localedata  # Safe to import Babel now
        ...

Python 3.13+.
"""

from __future__ import annotations

import pickle
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Protocol

__all__ = [
    "BabelImportError",
    "BabelPluralRuleProtocol",
    "get_cldr_version",
    "get_parent_exceptions",
    "is_babel_available",
    "list_locale_identifiers",
    "load_own_locale_data",
    "require_babel",
]


# pylint: disable=unnecessary-ellipsis
class BabelPluralRuleProtocol(Protocol):
    """Protocol for babel.plural.PluralRule.

    Defines the subset of the PluralRule API actually used by PluralEngine:
    the per-tag condition text. The implicit 'other' tag is not included.
    """

    @property
    def rules(self) -> Mapping[str, str]:
        """Condition text keyed by plural tag."""
        ...
# pylint: enable=unnecessary-ellipsis


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel dependency.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR plural data. "
            "Install with: pip install pluralengine[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses cached result to avoid repeated import attempts.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of functions/methods that require Babel.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_cldr_version() -> str | None:
    """Get the CLDR release Babel's locale data was built from.

    babel.core.get_cldr_version() exists since Babel 2.18; older releases
    expose the same value through the "cldr" global data entry.

    Returns:
        Version string such as "47", or None when Babel does not expose it

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_cldr_version")
    from babel import core  # noqa: PLC0415

    getter = getattr(core, "get_cldr_version", None)
    if getter is not None:
        return str(getter())
    try:
        return str(core.get_global("cldr")["version"])
    except KeyError:
        return None


def get_parent_exceptions() -> Mapping[str, str]:
    """Get CLDR's parent locale exceptions as bundled with Babel.

    Most locales inherit from the tag with their last subtag removed. The
    exceptions name a different parent, e.g. "pt_AO" inherits from "pt_PT"
    rather than "pt".

    Returns:
        Locale identifier -> parent locale identifier

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_parent_exceptions")
    from babel import core  # noqa: PLC0415

    parents: Mapping[str, str] = core.get_global("parent_exceptions")
    return parents


def list_locale_identifiers() -> tuple[str, ...]:
    """Get every locale identifier Babel ships data for, sorted.

    The root locale is not included.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("list_locale_identifiers")
    from babel import localedata  # noqa: PLC0415

    return tuple(sorted(localedata.locale_identifiers()))


def load_own_locale_data(identifier: str) -> Mapping[str, Any]:
    """Load the data a locale defines itself, without inherited entries.

    babel.localedata.load(name, merge_inherited=False) stores its result in
    Babel's shared locale cache, where later Locale(name) lookups would find
    the unmerged data. The locale file is therefore read directly.

    Args:
        identifier: Babel locale identifier (e.g. "pt_PT")

    Returns:
        The locale's own data mapping (e.g. "plural_form", "ordinal_form")

    Raises:
        BabelImportError: If Babel is not installed
        OSError: If Babel has no data file for the identifier
    """
    require_babel("load_own_locale_data")
    from babel import localedata  # noqa: PLC0415

    filename = localedata.resolve_locale_filename(identifier)
    with open(filename, "rb") as fileobj:
        data: Mapping[str, Any] = pickle.load(fileobj)  # noqa: S301 - Babel's own data
    return data
