"""Core utilities shared across syntax and runtime layers.

This package isolates access to optional third-party data sources so the
syntax layer (rule grammar) never imports them:

    core <- syntax <- runtime

Exports:
    BabelImportError: Exception raised when Babel is required but missing
    is_babel_available: Check whether Babel can be imported
    require_babel: Fail fast when Babel is missing

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
