"""String literal syntax: escaping and cursor-based parsing.

The escaper and the parser are exact inverses: ``unescape(escape(s, e)) == s``
for either setting of ``escape_unicode``. With ``escape_unicode=True`` this
holds for text without a lone high surrogate character directly followed by
a lone low one; such a pair is read back as one supplementary character.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult, make_cursor
from .escape import QUOTE_CHARACTERS, escape
from .primitives import (
    parse_escape_sequence,
    parse_identifier,
    parse_number,
    parse_string,
    unescape,
)

__all__ = [
    "QUOTE_CHARACTERS",
    "Cursor",
    "ParseResult",
    "escape",
    "make_cursor",
    "parse_escape_sequence",
    "parse_identifier",
    "parse_number",
    "parse_string",
    "unescape",
]
