"""Byte-level text codecs.

Provides the UTF-8 codec and boundary cropper, wide (16-bit) conversion,
and the Base64 codec. All functions are pure and thread-safe.

Python 3.13+.
"""

from .base64 import (
    STANDARD_ALPHABET,
    URLSAFE_ALPHABET,
    Base64Alphabet,
    base64_decode,
    base64_encode,
    base64_urlsafe_decode,
    base64_urlsafe_encode,
)
from .utf8 import (
    codepoints_to_utf8,
    crop_utf8,
    crop_utf8_text,
    decode_codepoint,
    encode_codepoint,
    is_valid_utf8,
    utf8_length,
    utf8_sequence_length,
    utf8_to_codepoints,
)
from .wide import (
    codepoints_to_wide,
    str_to_wide,
    utf8_to_wide,
    wide_to_codepoints,
    wide_to_str,
    wide_to_utf8,
)

__all__ = [
    "STANDARD_ALPHABET",
    "URLSAFE_ALPHABET",
    "Base64Alphabet",
    "base64_decode",
    "base64_encode",
    "base64_urlsafe_decode",
    "base64_urlsafe_encode",
    "codepoints_to_utf8",
    "codepoints_to_wide",
    "crop_utf8",
    "crop_utf8_text",
    "decode_codepoint",
    "encode_codepoint",
    "is_valid_utf8",
    "str_to_wide",
    "utf8_length",
    "utf8_sequence_length",
    "utf8_to_codepoints",
    "utf8_to_wide",
    "wide_to_codepoints",
    "wide_to_str",
    "wide_to_utf8",
]
