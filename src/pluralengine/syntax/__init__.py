"""CLDR plural rule grammar: tokens, AST, parser, serializer and samples.

Python 3.13+. Zero external dependencies.
"""

from .ast import And, Comparison, Condition, Expression, Not, Or, Range, RangeItem, Value
from .cursor import Cursor, ParseResult
from .lexer import Token, TokenKind, tokenize
from .parser import parse_condition, strip_samples
from .samples import Sample, parse_samples
from .serializer import serialize_condition

__all__ = [
    "And",
    "Comparison",
    "Condition",
    "Cursor",
    "Expression",
    "Not",
    "Or",
    "ParseResult",
    "Range",
    "RangeItem",
    "Sample",
    "Token",
    "TokenKind",
    "Value",
    "parse_condition",
    "parse_samples",
    "serialize_condition",
    "strip_samples",
    "tokenize",
]
