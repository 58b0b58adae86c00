"""Primitive parsers over the immutable Cursor.

Free functions sharing one cursor interface: string literals (the inverse
of ``escape``), identifiers, and numbers. Each takes a Cursor and returns
a ParseResult; failures raise LiteralSyntaxError subclasses carrying the
cursor's label and position.

String literal escape sequences:
    \\n \\r \\t \\b \\f   -> control characters
    \\\\ \\" \\' \\/      -> the character itself
    \\uXXXX          -> UTF-16 code unit (4 hex digits); a high surrogate
                       followed by a \\u low surrogate combines into one
                       codepoint, an unpaired surrogate is kept as is
    \\xXX            -> codepoint below U+0100 (2 hex digits)
    \\0 .. \\377      -> octal, 1 to 3 digits
    \\ + line break  -> line continuation (produces nothing)
"""

import logging

from lexcodec.constants import (
    DEFAULT_SOURCE_LABEL,
    HEX_DIGITS,
    OCTAL_DIGITS,
    UNESCAPE_SHORTHANDS,
)
from lexcodec.diagnostics import (
    ErrorTemplate,
    IllegalEscapeSequenceError,
    UnexpectedEndOfInputError,
)
from lexcodec.encoding.wide import combine_surrogates, is_high_surrogate, is_low_surrogate

from .cursor import Cursor, ParseResult, make_cursor
from .escape import QUOTE_CHARACTERS

__all__ = [
    "parse_escape_sequence",
    "parse_identifier",
    "parse_number",
    "parse_string",
    "unescape",
]

logger = logging.getLogger(__name__)

# \uXXXX = 4 hex digits (one UTF-16 code unit)
_UNICODE_ESCAPE_LEN: int = 4

# \xXX = 2 hex digits
_BYTE_ESCAPE_LEN: int = 2

# Octal escapes stop before exceeding \377
_MAX_OCTAL_DIGITS: int = 3
_MAX_OCTAL_VALUE: int = 0o377

# ASCII digits only; str.isdigit() accepts Unicode digits like ² that int() rejects.
_ASCII_DIGITS: str = "0123456789"


def _illegal_escape(backslash: Cursor, sequence: str) -> IllegalEscapeSequenceError:
    return IllegalEscapeSequenceError(
        ErrorTemplate.illegal_escape(
            sequence, backslash.pos, backslash.label, backslash.span(len(sequence) + 1)
        ),
        position=backslash.pos,
        label=backslash.label,
        sequence=sequence,
    )


def _parse_hex(backslash: Cursor, cursor: Cursor, count: int, letter: str) -> tuple[int, Cursor]:
    """Read exactly count hex digits after an escape letter."""
    digits = cursor.slice_ahead(count)
    for i, digit in enumerate(digits):
        if digit not in HEX_DIGITS:
            raise _illegal_escape(backslash, letter + digits[: i + 1])
    if len(digits) < count:
        raise cursor.advance(len(digits)).eof_error()
    return int(digits, 16), cursor.advance(count)


def _parse_octal(cursor: Cursor) -> tuple[int, Cursor]:
    value = 0
    for _ in range(_MAX_OCTAL_DIGITS):
        digit = cursor.peek()
        if digit is None or digit not in OCTAL_DIGITS:
            break
        candidate = value * 8 + int(digit)
        if candidate > _MAX_OCTAL_VALUE:
            break
        value = candidate
        cursor = cursor.advance()
    return value, cursor


def parse_escape_sequence(cursor: Cursor) -> tuple[str, Cursor]:  # noqa: PLR0911
    """Parse an escape sequence.

    Note: PLR0911 (too many returns) is acceptable for parser grammar methods.
    Each return represents a successfully parsed grammar alternative.

    Args:
        cursor: Position AT the backslash

    Returns:
        (decoded_text, new_cursor); decoded_text is empty for a line
        continuation

    Raises:
        UnexpectedEndOfInputError: If input ends inside the escape
        IllegalEscapeSequenceError: For an unknown letter or bad hex digits
    """
    backslash = cursor
    cursor = cursor.advance()
    if cursor.is_eof:
        raise cursor.eof_error()

    escape_ch = cursor.current

    if escape_ch in UNESCAPE_SHORTHANDS:
        return (UNESCAPE_SHORTHANDS[escape_ch], cursor.advance())

    if escape_ch == "\n":
        return ("", cursor.advance())
    if escape_ch == "\r":
        cursor = cursor.advance()
        return ("", cursor.accept("\n") or cursor)

    if escape_ch == "u":
        unit, cursor = _parse_hex(backslash, cursor.advance(), _UNICODE_ESCAPE_LEN, "u")
        if is_high_surrogate(unit) and cursor.slice_ahead(2) == "\\u":
            digits = cursor.advance(2).slice_ahead(_UNICODE_ESCAPE_LEN)
            if len(digits) == _UNICODE_ESCAPE_LEN and all(c in HEX_DIGITS for c in digits):
                low = int(digits, 16)
                if is_low_surrogate(low):
                    pair_end = cursor.advance(2 + _UNICODE_ESCAPE_LEN)
                    return (chr(combine_surrogates(unit, low)), pair_end)
        return (chr(unit), cursor)

    if escape_ch == "x":
        value, cursor = _parse_hex(backslash, cursor.advance(), _BYTE_ESCAPE_LEN, "x")
        return (chr(value), cursor)

    if escape_ch in OCTAL_DIGITS:
        value, cursor = _parse_octal(cursor)
        return (chr(value), cursor)

    raise _illegal_escape(backslash, escape_ch)


def parse_string(
    cursor: Cursor, quote: str | None = None, *, close_required: bool = True
) -> ParseResult[str]:
    """Parse a quoted string literal.

    Examples:
        "hello"              -> hello
        "say \\"hi\\""         -> say "hi"
        "\\u0442\\u0435"       -> те

    Args:
        cursor: At the opening quote when quote is None, otherwise just
            past the opening quote
        quote: The closing quote character, or None to read it from input
        close_required: Require the closing quote; when False, end of input
            also ends the literal

    Returns:
        ParseResult(text, cursor after the closing quote)

    Raises:
        UnexpectedEndOfInputError: Input ended before the closing quote, or
            a raw line break appeared inside the literal
        IllegalEscapeSequenceError: Unknown or malformed escape
        UnexpectedCharacterError: quote is None and the cursor is not on a quote
    """
    if quote is None:
        quote = cursor.current
        if quote not in QUOTE_CHARACTERS:
            raise cursor.unexpected_error(quote, QUOTE_CHARACTERS)
        cursor = cursor.advance()

    parts: list[str] = []
    while not cursor.is_eof:
        ch = cursor.current

        if ch == quote:
            return ParseResult("".join(parts), cursor.advance())

        if ch == "\\":
            text, cursor = parse_escape_sequence(cursor)
            parts.append(text)
            continue

        if ch == "\n" and close_required:
            raise UnexpectedEndOfInputError(
                ErrorTemplate.unterminated_literal(cursor.pos, cursor.label, cursor.span()),
                position=cursor.pos,
                label=cursor.label,
            )

        parts.append(ch)
        cursor = cursor.advance()

    if close_required:
        raise cursor.eof_error()
    return ParseResult("".join(parts), cursor)


def parse_identifier(cursor: Cursor) -> ParseResult[str]:
    """Parse identifier: [a-zA-Z_][a-zA-Z0-9_]*

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(identifier, new_cursor)

    Raises:
        UnexpectedEndOfInputError: At end of input
        UnexpectedCharacterError: If the current character cannot start
            an identifier
    """
    first = cursor.current
    if not (first.isascii() and (first.isalpha() or first == "_")):
        raise cursor.unexpected_error(first, ("a-z", "A-Z", "_"))

    start = cursor
    cursor = cursor.advance()
    while not cursor.is_eof:
        ch = cursor.current
        if ch.isascii() and (ch.isalnum() or ch == "_"):
            cursor = cursor.advance()
        else:
            break

    return ParseResult(start.slice_to(cursor.pos), cursor)


def parse_number(cursor: Cursor) -> ParseResult[int | float]:
    """Parse number literal: -?[0-9]+(.[0-9]+)?

    Examples:
        42 -> 42
        -3.14 -> -3.14

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(int or float, new_cursor)

    Raises:
        UnexpectedEndOfInputError: If input ends before a digit
        UnexpectedCharacterError: If a required digit is missing
    """
    start = cursor

    if cursor.peek() == "-":
        cursor = cursor.advance()

    if cursor.current not in _ASCII_DIGITS:
        raise cursor.unexpected_error(cursor.current, ("0-9",))

    while not cursor.is_eof and cursor.current in _ASCII_DIGITS:
        cursor = cursor.advance()

    is_float = False
    if cursor.peek() == ".":
        cursor = cursor.advance()
        if cursor.current not in _ASCII_DIGITS:
            raise cursor.unexpected_error(cursor.current, ("0-9",))
        while not cursor.is_eof and cursor.current in _ASCII_DIGITS:
            cursor = cursor.advance()
        is_float = True

    text = start.slice_to(cursor.pos)
    return ParseResult(float(text) if is_float else int(text), cursor)


def unescape(literal: str, label: str = DEFAULT_SOURCE_LABEL) -> str:
    """Parse a complete quoted literal back into text.

    The whole input must be exactly one literal; the opening quote (" or ')
    selects the closing one.

    Args:
        literal: Quoted literal, as produced by ``escape``
        label: Origin of the literal, for diagnostics

    Returns:
        The unescaped text

    Raises:
        LiteralSyntaxError: If the literal is malformed or followed by
            trailing characters

    Example:
        >>> unescape('"\\\\u0442\\\\u0435\\\\u0441\\\\u04425"')
        'тест5'
    """
    logger.debug("Unescaping %d-character literal from %s", len(literal), label)
    result = parse_string(make_cursor(literal, label))
    if not result.cursor.is_eof:
        raise result.cursor.unexpected_error(result.cursor.current)
    return result.value
