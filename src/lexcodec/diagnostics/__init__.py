"""Diagnostic system for lexcodec errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
    EncodingError,
    IllegalEscapeSequenceError,
    InvalidBase64CharacterError,
    InvalidBase64Error,
    InvalidBase64LengthError,
    LexCodecError,
    LiteralSyntaxError,
    MalformedEncodingError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EncodingError",
    "ErrorCategory",
    "ErrorTemplate",
    "IllegalEscapeSequenceError",
    "InvalidBase64CharacterError",
    "InvalidBase64Error",
    "InvalidBase64LengthError",
    "LexCodecError",
    "LiteralSyntaxError",
    "MalformedEncodingError",
    "OutputFormat",
    "SourceSpan",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
]
