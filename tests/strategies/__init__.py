"""Hypothesis strategies for lexcodec property-based testing.

Strategies are organized by domain:

- text: codepoints, UTF-8 buffers, wide sequences, and byte buffers

Usage:
    from tests.strategies import wide_sequences, utf8_buffers
"""

from .text import (
    byte_buffers,
    multibyte_text,
    scalar_codepoints,
    surrogate_text,
    utf8_buffers,
    wide_sequences,
    wide_sequences_with_surrogates,
)

__all__ = [
    "byte_buffers",
    "multibyte_text",
    "scalar_codepoints",
    "surrogate_text",
    "utf8_buffers",
    "wide_sequences",
    "wide_sequences_with_surrogates",
]
