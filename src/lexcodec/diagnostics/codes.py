"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for LexCodecError subclasses.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        ENCODING: UTF-8 or wide-sequence encoding failure
        BASE64: Base64 decoding failure
        SYNTAX: String literal parsing failure
    """

    ENCODING = "encoding"
    BASE64 = "base64"
    SYNTAX = "syntax"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Encoding errors (UTF-8 byte and codepoint violations)
        2000-2999: Base64 errors (alphabet and length violations)
        3000-3999: Syntax errors (string literal parser failures)
    """

    # Encoding errors (1000-1999)
    INVALID_LEAD_BYTE = 1001
    INVALID_CONTINUATION_BYTE = 1002
    TRUNCATED_SEQUENCE = 1003
    OVERLONG_ENCODING = 1004
    SURROGATE_CODEPOINT = 1005
    CODEPOINT_OUT_OF_RANGE = 1006

    # Base64 errors (2000-2999)
    INVALID_BASE64_CHARACTER = 2001
    INVALID_BASE64_LENGTH = 2002

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    UNEXPECTED_CHARACTER = 3002
    ILLEGAL_ESCAPE_SEQUENCE = 3003
    UNTERMINATED_LITERAL = 3004

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        if self.value < 2000:
            return ErrorCategory.ENCODING
        if self.value < 3000:
            return ErrorCategory.BASE64
        return ErrorCategory.SYNTAX


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Note:
        For literal parsing, positions are character offsets into the
        literal. For byte-level codecs, positions are byte offsets and
        line/column are not tracked (use ``SourceSpan.at_offset``).

    Attributes:
        start: Starting offset (0-indexed)
        end: Ending offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int = 1
    column: int = 1

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def at_offset(cls, offset: int, length: int = 1) -> "SourceSpan":
        """Span over a flat buffer (single line, column = offset + 1)."""
        return cls(start=offset, end=offset + length, line=1, column=offset + 1)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries everything a binding
    layer needs to present the failure in its own terms.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when no position applies)
        hint: Suggestion for fixing the error
        source_label: Label identifying the input's origin (e.g. "<string>")
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source_label: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[ILLEGAL_ESCAPE_SEQUENCE]: '\\q' is an illegal escape
              --> <string>:1:7
              = help: Valid escapes are \\n \\r \\t \\b \\f \\\\ \\" \\' \\/ \\uXXXX \\xXX

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
