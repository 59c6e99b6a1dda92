"""Tokenizer for CLDR plural conditions.

Splits condition text (sample annotations already removed) into words,
integers and symbols. Keyword and operand recognition is left to the
parser so error messages can name what the grammar expected.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

from pluralengine.diagnostics import ErrorTemplate, PluralRuleSyntaxError

from .cursor import Cursor

__all__ = ["Token", "TokenKind", "tokenize"]


class TokenKind(StrEnum):
    """Lexical token categories."""

    WORD = "word"
    NUMBER = "number"
    RANGE = ".."
    COMMA = ","
    EQUALS = "="
    NOT_EQUALS = "!="
    PERCENT = "%"
    EOF = "end of condition"


@dataclass(frozen=True, slots=True)
class Token:
    """Lexical token with its source offset."""

    kind: TokenKind
    text: str
    pos: int


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_ascii_letter(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z"


def tokenize(text: str) -> tuple[Token, ...]:
    """Split a condition into tokens.

    The result always ends with a single EOF token positioned at len(text).

    Args:
        text: Condition text without sample annotations

    Returns:
        Tuple of tokens

    Raises:
        PluralRuleSyntaxError: On a character that starts no token

    Example:
        >>> [t.text for t in tokenize("i % 10 = 2..4")]
        ['i', '%', '10', '=', '2', '..', '4', '']
    """
    tokens: list[Token] = []
    cursor = Cursor(text, 0).skip_whitespace()

    while not cursor.is_eof:
        char = cursor.current
        start = cursor.pos

        if _is_ascii_letter(char):
            result = cursor.take_while(_is_ascii_letter)
            tokens.append(Token(TokenKind.WORD, result.value, start))
            cursor = result.cursor
        elif _is_ascii_digit(char):
            result = cursor.take_while(_is_ascii_digit)
            tokens.append(Token(TokenKind.NUMBER, result.value, start))
            cursor = result.cursor
        elif char == "." and cursor.peek(1) == ".":
            tokens.append(Token(TokenKind.RANGE, "..", start))
            cursor = cursor.advance(2)
        elif char == "!" and cursor.peek(1) == "=":
            tokens.append(Token(TokenKind.NOT_EQUALS, "!=", start))
            cursor = cursor.advance(2)
        elif char == ",":
            tokens.append(Token(TokenKind.COMMA, char, start))
            cursor = cursor.advance()
        elif char == "=":
            tokens.append(Token(TokenKind.EQUALS, char, start))
            cursor = cursor.advance()
        elif char == "%":
            tokens.append(Token(TokenKind.PERCENT, char, start))
            cursor = cursor.advance()
        else:
            raise PluralRuleSyntaxError(ErrorTemplate.unexpected_character(char, text, start))

        cursor = cursor.skip_whitespace()

    tokens.append(Token(TokenKind.EOF, "", len(text)))
    return tuple(tokens)
