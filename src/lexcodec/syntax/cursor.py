"""Immutable cursor infrastructure for literal parsing.

Implements the immutable cursor pattern: a cursor is a plain value
(source, position, label) and every advance returns a new cursor.
Parsing functions take a cursor and return a ParseResult holding the
parsed value and the cursor positioned after it.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Failures raise LiteralSyntaxError subclasses tagged with label and position
    - Line:column computed on-demand (only for errors)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from lexcodec.constants import DEFAULT_SOURCE_LABEL
from lexcodec.diagnostics import (
    ErrorTemplate,
    SourceSpan,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)

__all__ = ["Cursor", "ParseResult", "make_cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Attributes:
        source: The literal text being parsed
        pos: Character offset into source
        label: Origin of the text, used in diagnostics only

    Example:
        >>> cursor = Cursor('"hi"', 0)
        >>> cursor.current
        '"'
        >>> cursor.advance().current
        'h'
        >>> cursor.current  # Original unchanged (immutability)
        '"'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int = 0
    label: str = DEFAULT_SOURCE_LABEL

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            UnexpectedEndOfInputError: If at end of input
        """
        if self.is_eof:
            raise self.eof_error()
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF).

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.advance(99).pos
            5
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos, self.label)

    def expect(self, char: str) -> "Cursor":
        """Consume a required character.

        Args:
            char: Expected character

        Returns:
            New cursor advanced past char

        Raises:
            UnexpectedEndOfInputError: If at end of input
            UnexpectedCharacterError: If the current character differs
        """
        if self.is_eof:
            raise self.eof_error()
        found = self.source[self.pos]
        if found != char:
            raise self.unexpected_error(found, (char,))
        return self.advance()

    def accept(self, char: str) -> "Cursor | None":
        """Consume character if it matches, return None otherwise.

        Example:
            >>> Cursor("ab", 0).accept("a").pos
            1
            >>> Cursor("ab", 0).accept("x") is None
            True
        """
        if not self.is_eof and self.source[self.pos] == char:
            return self.advance()
        return None

    def slice_ahead(self, n: int) -> str:
        """Get up to n characters from the current position without advancing."""
        return self.source[self.pos : self.pos + n]

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Example:
            >>> start = Cursor("hello world", 0)
            >>> cursor = start.advance(5)
            >>> start.slice_to(cursor.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Skip spaces, tabs, and line breaks."""
        c = self
        while not c.is_eof and c.source[c.pos] in " \t\n\r":
            c = c.advance()
        return c

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("ab\\ncd", 4).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span(self, length: int = 1) -> SourceSpan:
        """Source span starting at the current position."""
        line, col = self.compute_line_col()
        end = min(self.pos + length, max(len(self.source), self.pos))
        return SourceSpan(start=self.pos, end=end, line=line, column=col)

    def eof_error(self) -> UnexpectedEndOfInputError:
        """Build the end-of-input error for this position."""
        return UnexpectedEndOfInputError(
            ErrorTemplate.unexpected_eof(self.pos, self.label, self.span(0)),
            position=self.pos,
            label=self.label,
        )

    def unexpected_error(
        self, found: str, expected: tuple[str, ...] = ()
    ) -> UnexpectedCharacterError:
        """Build a mismatch error for the character at this position."""
        return UnexpectedCharacterError(
            ErrorTemplate.unexpected_character(
                found, expected, self.pos, self.label, self.span()
            ),
            position=self.pos,
            label=self.label,
            expected=expected,
            found=found,
        )


def make_cursor(source: str, label: str = DEFAULT_SOURCE_LABEL) -> Cursor:
    """Create a cursor at the start of source.

    Args:
        source: Literal text to parse
        label: Origin of the text (file name, "<string>", ...)

    Returns:
        Cursor at position 0
    """
    return Cursor(source, 0, label)


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Parser result containing parsed value and new cursor position.

    Every parsing function has the signature:
        def parse_foo(cursor: Cursor, ...) -> ParseResult[Foo]

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
