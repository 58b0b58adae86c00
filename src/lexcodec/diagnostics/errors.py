"""LexCodec exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Failures are deterministic: the same input always raises the same error,
so callers never retry.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "EncodingError",
    "IllegalEscapeSequenceError",
    "InvalidBase64CharacterError",
    "InvalidBase64Error",
    "InvalidBase64LengthError",
    "LexCodecError",
    "LiteralSyntaxError",
    "MalformedEncodingError",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
]


class LexCodecError(Exception):
    """Base exception for all lexcodec errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LexCodecError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def category(self) -> ErrorCategory | None:
        """Category of the attached diagnostic, if any."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.code.category


class EncodingError(LexCodecError):
    """Byte-level codec failure.

    Attributes:
        position: Byte offset (or sequence index) of the offending element
    """

    def __init__(self, message: str | Diagnostic, *, position: int) -> None:
        super().__init__(message)
        self.position = position


class MalformedEncodingError(EncodingError):
    """Invalid UTF-8 input or an unencodable codepoint.

    Raised for invalid lead or continuation bytes, truncated and overlong
    sequences, surrogates in strict mode, and values above U+10FFFF.
    """


class InvalidBase64Error(EncodingError):
    """Base64 input that no encoder could have produced."""


class InvalidBase64CharacterError(InvalidBase64Error):
    """Character outside the active alphabet and not valid padding.

    Attributes:
        character: The offending character
    """

    def __init__(self, message: str | Diagnostic, *, position: int, character: str) -> None:
        super().__init__(message, position=position)
        self.character = character


class InvalidBase64LengthError(InvalidBase64Error):
    """Base64 input whose length is impossible for the alphabet."""


class LiteralSyntaxError(LexCodecError):
    """String literal parse failure.

    Attributes:
        position: Character offset into the literal
        label: Label identifying the literal's origin
    """

    def __init__(self, message: str | Diagnostic, *, position: int, label: str) -> None:
        super().__init__(message)
        self.position = position
        self.label = label

    def __str__(self) -> str:
        base = super().__str__()
        if self.diagnostic is not None and self.diagnostic.span is not None:
            span = self.diagnostic.span
            return f"{self.label}:{span.line}:{span.column}: {base}"
        return f"{self.label}: {base}"


class UnexpectedEndOfInputError(LiteralSyntaxError):
    """Literal or escape sequence truncated before completion."""


class UnexpectedCharacterError(LiteralSyntaxError):
    """Character did not match what the parser expected.

    Attributes:
        expected: Acceptable characters
        found: The character actually present
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        position: int,
        label: str,
        expected: tuple[str, ...] = (),
        found: str = "",
    ) -> None:
        super().__init__(message, position=position, label=label)
        self.expected = expected
        self.found = found


class IllegalEscapeSequenceError(LiteralSyntaxError):
    """Unrecognized backslash escape or malformed hex/octal digits.

    Attributes:
        sequence: The escape text following the backslash
    """

    def __init__(
        self, message: str | Diagnostic, *, position: int, label: str, sequence: str
    ) -> None:
        super().__init__(message, position=position, label=label)
        self.sequence = sequence
