"""Recursive-descent parser for CLDR plural conditions.

Grammar (UTS #35 Language Plural Rules, plus the legacy keyword forms
still emitted by Babel):

    condition     = and_condition ('or' and_condition)*
    and_condition = relation ('and' relation)*
    relation      = expr ('=' | '!=') range_list
                  | expr 'is' 'not'? value
                  | expr 'not'? ('in' | 'within') range_list
    expr          = operand (('mod' | '%') value)?
    operand       = 'n' | 'i' | 'v' | 'w' | 'f' | 't' | 'c' | 'e'
    range_list    = (range | value) (',' (range | value))*
    range         = value '..' value
    value         = digit+

Negated relations become Not(Comparison(...)). Any violation raises
PluralRuleSyntaxError with a Diagnostic pointing at the offending token.

Python 3.13+. Zero external dependencies.
"""

from pluralengine.constants import MAX_CONDITION_LENGTH
from pluralengine.diagnostics import ErrorTemplate, PluralRuleSyntaxError
from pluralengine.enums import OperandName

from .ast import And, Comparison, Condition, Expression, Not, Or, Range, RangeItem, Value
from .lexer import Token, TokenKind, tokenize

__all__ = ["parse_condition", "strip_samples"]

_KEYWORDS = frozenset({"and", "or", "mod", "is", "not", "in", "within"})
_OPERANDS = frozenset(OperandName)


def strip_samples(text: str) -> str:
    """Remove trailing @integer/@decimal sample annotations.

    Example:
        >>> strip_samples("i = 1 and v = 0 @integer 1")
        'i = 1 and v = 0'
        >>> strip_samples(" @integer 0, 2~16")
        ''
    """
    return text.split("@", 1)[0].strip()


def parse_condition(text: str) -> Condition | None:
    """Parse CLDR condition text into a Condition AST.

    Args:
        text: Condition text, optionally followed by sample annotations

    Returns:
        Condition, or None when the text holds no condition (only samples)

    Raises:
        PluralRuleSyntaxError: If the text is not a valid condition

    Example:
        >>> parse_condition("n is 1") == parse_condition("n = 1 @integer 1")
        True
        >>> parse_condition("@integer 0, 2~16") is None
        True
    """
    if len(text) > MAX_CONDITION_LENGTH:
        raise PluralRuleSyntaxError(
            ErrorTemplate.condition_too_long(len(text), MAX_CONDITION_LENGTH)
        )
    condition_text = strip_samples(text)
    if not condition_text:
        return None
    return _ConditionParser(condition_text).parse()


class _ConditionParser:
    """Single-use parser over the token stream of one condition."""

    __slots__ = ("_index", "_text", "_tokens")

    def __init__(self, text: str) -> None:
        self._text = text
        self._tokens = tokenize(text)
        self._index = 0

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    @property
    def _current(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind is not TokenKind.EOF:
            self._index += 1
        return token

    def _accept_word(self, word: str) -> bool:
        token = self._current
        if token.kind is TokenKind.WORD and token.text == word:
            self._index += 1
            return True
        return False

    def _accept(self, kind: TokenKind) -> bool:
        if self._current.kind is kind:
            self._index += 1
            return True
        return False

    def _error(self, expected: str) -> PluralRuleSyntaxError:
        token = self._current
        if token.kind is TokenKind.EOF:
            return PluralRuleSyntaxError(ErrorTemplate.unexpected_eof(expected, self._text))
        return PluralRuleSyntaxError(
            ErrorTemplate.unexpected_token(token.text, expected, self._text, token.pos)
        )

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def parse(self) -> Condition:
        condition = self._condition()
        if self._current.kind is not TokenKind.EOF:
            raise self._error("'and', 'or' or end of condition")
        return condition

    def _condition(self) -> Condition:
        branches = [self._and_condition()]
        while self._accept_word("or"):
            branches.append(self._and_condition())
        return branches[0] if len(branches) == 1 else Or(tuple(branches))

    def _and_condition(self) -> Condition:
        relations = [self._relation()]
        while self._accept_word("and"):
            relations.append(self._relation())
        return relations[0] if len(relations) == 1 else And(tuple(relations))

    def _relation(self) -> Condition:
        expression = self._expression()

        if self._accept(TokenKind.EQUALS):
            return Comparison(expression, self._range_list())
        if self._accept(TokenKind.NOT_EQUALS):
            return Not(Comparison(expression, self._range_list()))

        if self._accept_word("is"):
            negated = self._accept_word("not")
            comparison = Comparison(expression, (Value(self._value()),))
            return Not(comparison) if negated else comparison

        negated = self._accept_word("not")
        if self._accept_word("in"):
            comparison = Comparison(expression, self._range_list())
        elif self._accept_word("within"):
            comparison = Comparison(expression, self._range_list(), within=True)
        elif negated:
            raise self._error("'in' or 'within'")
        else:
            raise self._error("'=', '!=', 'is', 'in' or 'within'")
        return Not(comparison) if negated else comparison

    def _expression(self) -> Expression:
        token = self._current
        if token.kind is not TokenKind.WORD:
            raise self._error("operand")
        if token.text not in _OPERANDS:
            if token.text in _KEYWORDS:
                raise self._error("operand")
            raise PluralRuleSyntaxError(
                ErrorTemplate.unknown_operand(token.text, self._text, token.pos)
            )
        self._advance()
        operand = OperandName(token.text)

        if self._accept_word("mod") or self._accept(TokenKind.PERCENT):
            modulus_token = self._current
            modulus = self._value()
            if modulus == 0:
                raise PluralRuleSyntaxError(
                    ErrorTemplate.invalid_modulus(self._text, modulus_token.pos)
                )
            return Expression(operand, modulus)
        return Expression(operand)

    def _range_list(self) -> tuple[RangeItem, ...]:
        items = [self._range_or_value()]
        while self._accept(TokenKind.COMMA):
            items.append(self._range_or_value())
        return tuple(items)

    def _range_or_value(self) -> RangeItem:
        start_token = self._current
        low = self._value()
        if not self._accept(TokenKind.RANGE):
            return Value(low)
        high = self._value()
        if low > high:
            raise PluralRuleSyntaxError(
                ErrorTemplate.invalid_range(low, high, self._text, start_token.pos)
            )
        return Range(low, high)

    def _value(self) -> int:
        token = self._current
        if token.kind is not TokenKind.NUMBER:
            raise self._error("integer")
        self._advance()
        return int(token.text)
