"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _byte_repr(value: int) -> str:
    return f"0x{value:02X}"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable, consistently formatted, and documents
    every error case in one place.
    """

    # =========================================================================
    # ENCODING ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def invalid_lead_byte(value: int, offset: int) -> Diagnostic:
        """Byte cannot start a UTF-8 sequence.

        Args:
            value: The offending byte
            offset: Byte offset in the buffer

        Returns:
            Diagnostic for INVALID_LEAD_BYTE
        """
        msg = f"Invalid UTF-8 lead byte {_byte_repr(value)} at offset {offset}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LEAD_BYTE,
            message=msg,
            span=SourceSpan.at_offset(offset),
            hint="Continuation bytes (0x80-0xBF) and 0xF8-0xFF never start a sequence",
        )

    @staticmethod
    def invalid_continuation_byte(value: int, offset: int) -> Diagnostic:
        """Expected a 10xxxxxx continuation byte.

        Args:
            value: The offending byte
            offset: Byte offset in the buffer

        Returns:
            Diagnostic for INVALID_CONTINUATION_BYTE
        """
        msg = f"Invalid UTF-8 continuation byte {_byte_repr(value)} at offset {offset}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CONTINUATION_BYTE,
            message=msg,
            span=SourceSpan.at_offset(offset),
            hint="Bytes following a multi-byte lead must match 10xxxxxx",
        )

    @staticmethod
    def truncated_sequence(offset: int, expected: int, available: int) -> Diagnostic:
        """Buffer ends in the middle of a multi-byte sequence.

        Args:
            offset: Offset of the sequence's lead byte
            expected: Sequence length announced by the lead byte
            available: Bytes actually present from the lead byte on

        Returns:
            Diagnostic for TRUNCATED_SEQUENCE
        """
        msg = (
            f"Truncated UTF-8 sequence at offset {offset}: "
            f"expected {expected} bytes, got {available}"
        )
        return Diagnostic(
            code=DiagnosticCode.TRUNCATED_SEQUENCE,
            message=msg,
            span=SourceSpan.at_offset(offset, available),
            hint="Use crop_utf8() to cut buffers on sequence boundaries",
        )

    @staticmethod
    def overlong_encoding(codepoint: int, length: int, offset: int) -> Diagnostic:
        """Codepoint encoded with more bytes than necessary.

        Args:
            codepoint: The decoded value
            length: Number of bytes used
            offset: Offset of the lead byte

        Returns:
            Diagnostic for OVERLONG_ENCODING
        """
        msg = f"Overlong {length}-byte encoding of U+{codepoint:04X} at offset {offset}"
        return Diagnostic(
            code=DiagnosticCode.OVERLONG_ENCODING,
            message=msg,
            span=SourceSpan.at_offset(offset, length),
            hint="Each codepoint has exactly one valid (shortest) UTF-8 form",
        )

    @staticmethod
    def surrogate_codepoint(codepoint: int, offset: int) -> Diagnostic:
        """Surrogate value in a strict UTF-8 context.

        Args:
            codepoint: The surrogate value (0xD800-0xDFFF)
            offset: Byte offset, or index in a codepoint sequence

        Returns:
            Diagnostic for SURROGATE_CODEPOINT
        """
        msg = f"Surrogate U+{codepoint:04X} is not a Unicode scalar value (at {offset})"
        return Diagnostic(
            code=DiagnosticCode.SURROGATE_CODEPOINT,
            message=msg,
            span=SourceSpan.at_offset(offset),
            hint="Pass allow_surrogates=True to carry unpaired surrogates through",
        )

    @staticmethod
    def encoded_surrogate_pair(high: int, low: int, offset: int) -> Diagnostic:
        """Surrogate pair written as two 3-byte sequences.

        Args:
            high: The preceding high surrogate
            low: The low surrogate
            offset: Byte offset of the low surrogate's sequence

        Returns:
            Diagnostic for SURROGATE_CODEPOINT
        """
        msg = (
            f"Encoded surrogate pair U+{high:04X} U+{low:04X} at offset {offset} "
            "must be a single 4-byte sequence"
        )
        return Diagnostic(
            code=DiagnosticCode.SURROGATE_CODEPOINT,
            message=msg,
            span=SourceSpan.at_offset(offset, 3),
            hint="Only unpaired surrogates may appear as 3-byte sequences",
        )

    @staticmethod
    def codepoint_out_of_range(codepoint: int, offset: int) -> Diagnostic:
        """Value outside 0..0x10FFFF.

        Args:
            codepoint: The offending value
            offset: Byte offset, or index in a codepoint sequence

        Returns:
            Diagnostic for CODEPOINT_OUT_OF_RANGE
        """
        msg = f"Codepoint {codepoint:#x} out of Unicode range (at {offset})"
        return Diagnostic(
            code=DiagnosticCode.CODEPOINT_OUT_OF_RANGE,
            message=msg,
            span=SourceSpan.at_offset(offset),
            hint="Unicode codepoints lie in 0x0-0x10FFFF",
        )

    # =========================================================================
    # BASE64 ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def invalid_base64_character(character: str, index: int) -> Diagnostic:
        """Character outside the active alphabet.

        Args:
            character: The offending character
            index: Character index in the input

        Returns:
            Diagnostic for INVALID_BASE64_CHARACTER
        """
        msg = f"Invalid base64 character {character!r} at index {index}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_BASE64_CHARACTER,
            message=msg,
            span=SourceSpan.at_offset(index),
            hint="Check that the input uses the matching (standard or URL-safe) alphabet",
        )

    @staticmethod
    def invalid_base64_length(length: int, *, padded: bool) -> Diagnostic:
        """Input length cannot come from the encoder.

        Args:
            length: Input length (padded) or symbol count (unpadded)
            padded: Whether the alphabet requires padding

        Returns:
            Diagnostic for INVALID_BASE64_LENGTH
        """
        if padded:
            msg = f"Invalid base64 length {length}: must be a multiple of 4"
        else:
            msg = f"Invalid base64 length {length}: a final group of one symbol is impossible"
        return Diagnostic(
            code=DiagnosticCode.INVALID_BASE64_LENGTH,
            message=msg,
            span=None,
            hint="The input was probably truncated",
        )

    # =========================================================================
    # SYNTAX ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def unexpected_eof(position: int, label: str, span: SourceSpan | None = None) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered
            label: Source label of the input
            span: Location (line/column) of the position

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected end of input at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=span,
            hint="Check for an unclosed quote or an incomplete escape sequence",
            source_label=label,
        )

    @staticmethod
    def unterminated_literal(position: int, label: str, span: SourceSpan | None = None) -> Diagnostic:
        """Raw line break inside a quoted literal.

        Args:
            position: Position of the line break
            label: Source label of the input
            span: Location (line/column) of the position

        Returns:
            Diagnostic for UNTERMINATED_LITERAL
        """
        msg = f"Unterminated string literal at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_LITERAL,
            message=msg,
            span=span,
            hint="Line breaks inside a literal must be written as \\n",
            source_label=label,
        )

    @staticmethod
    def unexpected_character(
        found: str,
        expected: tuple[str, ...],
        position: int,
        label: str,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Character does not match what the parser expects.

        Args:
            found: The character at the position
            expected: Acceptable characters or character classes
            position: Position of the character
            label: Source label of the input
            span: Location (line/column) of the position

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        expected_str = ", ".join(f"'{e}'" for e in expected)
        msg = f"Unexpected character {found!r} at position {position}"
        if expected_str:
            msg += f" (expected: {expected_str})"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            span=span,
            hint=None,
            source_label=label,
        )

    @staticmethod
    def illegal_escape(
        sequence: str, position: int, label: str, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Unrecognized or malformed backslash escape.

        Args:
            sequence: The escape text following the backslash
            position: Position of the backslash
            label: Source label of the input
            span: Location (line/column) of the position

        Returns:
            Diagnostic for ILLEGAL_ESCAPE_SEQUENCE
        """
        msg = f"'\\{sequence}' is an illegal escape at position {position}"
        return Diagnostic(
            code=DiagnosticCode.ILLEGAL_ESCAPE_SEQUENCE,
            message=msg,
            span=span,
            hint="Valid escapes are \\n \\r \\t \\b \\f \\\\ \\\" \\' \\/ \\uXXXX \\xXX and octal \\0-\\377",
            source_label=label,
        )
