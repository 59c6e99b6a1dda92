"""Immutable cursor infrastructure for type-safe scanning.

Implements the immutable cursor pattern for zero-`None` scanning of plural
rule text.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (O(n) only for errors)
"""

from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]

# Whitespace accepted between tokens of a condition.
_WHITESPACE = frozenset(" \t\n\r\u00a0")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("n = 1", 0)
        >>> cursor.current
        'n'
        >>> cursor.advance().current
        ' '
        >>> cursor.current  # Original unchanged (immutability)
        'n'
        >>> Cursor("n", 1).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (original unchanged)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Skip spaces, tabs, line breaks and no-break spaces.

        Example:
            >>> Cursor("  \\tn", 0).skip_whitespace().pos
            3
        """
        c = self
        while not c.is_eof and c.current in _WHITESPACE:
            c = c.advance()
        return c

    def take_while(self, predicate: Callable[[str], bool]) -> "ParseResult[str]":
        """Consume characters while predicate holds.

        Returns:
            ParseResult with the consumed text and the cursor after it

        Example:
            >>> result = Cursor("123 and", 0).take_while(str.isdigit)
            >>> result.value, result.cursor.pos
            ('123', 3)
        """
        c = self
        while not c.is_eof and predicate(c.current):
            c = c.advance()
        return ParseResult(self.slice_to(c.pos), c)

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("n = 1 or\\nn = 2", 9).compute_line_col()
            (2, 1)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Scanner result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value
    """

    value: T
    cursor: Cursor
