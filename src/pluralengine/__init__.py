"""PluralEngine - CLDR plural rule compiler and category selection.

Parses CLDR plural conditions, compiles each distinct ruleset once,
aliases equivalent rules across locales and rule types, and dispatches
a (language, region) pair to its compiled rule. Numbers are reduced to
their CLDR operands (n, i, v, w, f, t, e) exactly, without float error.

Public API:
    PluralRule - Plural category selection for one locale and rule type
    PluralOperand - CLDR operands of a number
    PluralCategory - zero, one, two, few, many, other
    PluralRuleType - cardinal or ordinal
    PluralData - CLDR rulesets read from supplemental JSON or Babel
    build_registry - Compile PluralData into dispatch tables
    select_plural_category - One-shot category selection

Exceptions:
    PluralError - Base exception class
    PluralRuleSyntaxError - Malformed rule conditions
    PluralParseError - Unparseable numeric text or samples
    PluralArgumentError - Invalid selection arguments
    CLDRDataError - Malformed or incomplete CLDR documents

Submodules:
    pluralengine.syntax - Rule grammar: lexer, parser, AST, serializer, samples
    pluralengine.runtime - Operands, compiler, dispatch and the registry
    pluralengine.validation - Conformance checks against CLDR samples
    pluralengine.diagnostics - Error types, templates and formatting
"""

# Essential Public API - Minimal exports for clean namespace
from .cldr import PluralData
from .constants import PLURAL_RULES_SPEC_URL
from .diagnostics import (
    CLDRDataError,
    PluralArgumentError,
    PluralError,
    PluralParseError,
    PluralRuleSyntaxError,
)
from .enums import PluralCategory, PluralRuleType
from .runtime import (
    PluralOperand,
    PluralRule,
    PluralRuleRegistry,
    build_registry,
    select_plural_category,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("pluralengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__cldr_spec_url__ = PLURAL_RULES_SPEC_URL

__all__ = [
    "CLDRDataError",
    "PluralArgumentError",
    "PluralCategory",
    "PluralData",
    "PluralError",
    "PluralOperand",
    "PluralParseError",
    "PluralRule",
    "PluralRuleRegistry",
    "PluralRuleSyntaxError",
    "PluralRuleType",
    "__cldr_spec_url__",
    "__version__",
    "build_registry",
    "select_plural_category",
]
