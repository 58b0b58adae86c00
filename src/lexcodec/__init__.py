"""lexcodec - text encoding and string literal utilities.

Conversions between UTF-8 bytes, Unicode codepoints and 16-bit wide code
units; boundary-safe UTF-8 cropping; a Base64 codec with standard and
URL-safe alphabets; and a string literal escaper paired with an immutable
cursor parser that inverts it exactly.

Public API:
    crop_utf8 - Longest prefix that does not split a UTF-8 sequence
    utf8_to_codepoints / codepoints_to_utf8 - UTF-8 codec
    utf8_to_wide / wide_to_utf8 - UTF-8 <-> 16-bit code units
    base64_encode / base64_decode - Standard Base64 (padded)
    base64_urlsafe_encode / base64_urlsafe_decode - URL-safe Base64 (unpadded)
    escape - Text to quoted literal
    unescape - Quoted literal to text
    make_cursor / Cursor / parse_string - Cursor parsing primitives

Exceptions:
    LexCodecError - Base exception class
    MalformedEncodingError - Invalid UTF-8 or unencodable codepoint
    InvalidBase64CharacterError - Character outside the Base64 alphabet
    InvalidBase64LengthError - Impossible Base64 input length
    UnexpectedEndOfInputError - Literal truncated before completion
    UnexpectedCharacterError - Parser found a different character
    IllegalEscapeSequenceError - Unknown backslash escape

Submodules:
    lexcodec.encoding - UTF-8, wide, and Base64 codecs
    lexcodec.syntax - Escaper, cursor, and literal parsers
    lexcodec.diagnostics - Error types, codes, and formatting
"""

from .diagnostics import (
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
from .encoding import (
    base64_decode,
    base64_encode,
    base64_urlsafe_decode,
    base64_urlsafe_encode,
    codepoints_to_utf8,
    crop_utf8,
    utf8_to_codepoints,
    utf8_to_wide,
    wide_to_utf8,
)
from .syntax import Cursor, ParseResult, escape, make_cursor, parse_string, unescape

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("lexcodec")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Cursor",
    "IllegalEscapeSequenceError",
    "InvalidBase64CharacterError",
    "InvalidBase64Error",
    "InvalidBase64LengthError",
    "LexCodecError",
    "LiteralSyntaxError",
    "MalformedEncodingError",
    "ParseResult",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
    "__version__",
    "base64_decode",
    "base64_encode",
    "base64_urlsafe_decode",
    "base64_urlsafe_encode",
    "codepoints_to_utf8",
    "crop_utf8",
    "escape",
    "make_cursor",
    "parse_string",
    "unescape",
    "utf8_to_codepoints",
    "utf8_to_wide",
    "wide_to_utf8",
]
