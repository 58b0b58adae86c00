"""Shared constants for lexcodec.

This module provides centralized constants used across the encoding and
syntax packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Unicode limits: Scalar range and surrogate bounds
- UTF-8 structure: Lead byte classes and per-length minimum codepoints
- Base64: Symbol sets and padding
- Literal escapes: Shorthand tables shared by escaper and unescaper

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Unicode limits
    "MAX_CODEPOINT",
    "MAX_WIDE_UNIT",
    "SURROGATE_MIN",
    "SURROGATE_MAX",
    "HIGH_SURROGATE_MIN",
    "HIGH_SURROGATE_MAX",
    "LOW_SURROGATE_MIN",
    "LOW_SURROGATE_MAX",
    "SUPPLEMENTARY_BASE",
    # UTF-8 structure
    "UTF8_MAX_SEQUENCE_LENGTH",
    "UTF8_MIN_CODEPOINT",
    # Base64
    "BASE64_STANDARD_SYMBOLS",
    "BASE64_URLSAFE_SYMBOLS",
    "BASE64_PAD",
    # Literal escapes
    "DEFAULT_SOURCE_LABEL",
    "ESCAPE_SHORTHANDS",
    "UNESCAPE_SHORTHANDS",
    "HEX_DIGITS",
    "OCTAL_DIGITS",
]

# ============================================================================
# UNICODE LIMITS
# ============================================================================

# Highest Unicode codepoint. Values above cannot be encoded in UTF-8/UTF-16.
MAX_CODEPOINT: int = 0x10FFFF

# Highest value of a 16-bit wide code unit.
MAX_WIDE_UNIT: int = 0xFFFF

# UTF-16 surrogate range. Not scalar values; rejected by strict UTF-8.
SURROGATE_MIN: int = 0xD800
SURROGATE_MAX: int = 0xDFFF
HIGH_SURROGATE_MIN: int = 0xD800
HIGH_SURROGATE_MAX: int = 0xDBFF
LOW_SURROGATE_MIN: int = 0xDC00
LOW_SURROGATE_MAX: int = 0xDFFF

# First codepoint outside the Basic Multilingual Plane.
SUPPLEMENTARY_BASE: int = 0x10000

# ============================================================================
# UTF-8 STRUCTURE
# ============================================================================

UTF8_MAX_SEQUENCE_LENGTH: int = 4

# Smallest codepoint that legitimately needs N bytes, indexed by N.
# A decoded value below its entry is an overlong encoding.
UTF8_MIN_CODEPOINT: tuple[int, ...] = (0, 0x00, 0x80, 0x800, 0x10000)

# ============================================================================
# BASE64
# ============================================================================

_ALNUM = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

BASE64_STANDARD_SYMBOLS: str = _ALNUM + "+/"
BASE64_URLSAFE_SYMBOLS: str = _ALNUM + "-_"
BASE64_PAD: str = "="

# ============================================================================
# LITERAL ESCAPES
# ============================================================================

# Label used when a literal has no better origin description.
DEFAULT_SOURCE_LABEL: str = "<string>"

# Control character -> shorthand letter. Quote and backslash are handled
# by the escaper directly since the quote character is configurable.
ESCAPE_SHORTHANDS: dict[str, str] = {
    "\n": "n",
    "\r": "r",
    "\t": "t",
    "\b": "b",
    "\f": "f",
}

# Shorthand letter -> character, for the unescaper.
UNESCAPE_SHORTHANDS: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "/": "/",
}

HEX_DIGITS: str = "0123456789abcdefABCDEF"
OCTAL_DIGITS: str = "01234567"
