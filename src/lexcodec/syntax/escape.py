"""String literal escaper.

Turns text into a quoted literal that ``parse_string`` reads back to the
exact same text. With ``escape_unicode=True`` the literal is pure ASCII.

Escape rules, per codepoint:
    quote, backslash        -> \\" \\' \\\\
    \\n \\r \\t \\b \\f          -> shorthand letter
    other C0 controls, DEL  -> \\u00XX
    printable ASCII         -> itself
    above U+007F            -> \\uXXXX (lowercase hex), surrogate pair above
                               U+FFFF; itself when escape_unicode is False

Python 3.13+. Zero external dependencies.
"""

from lexcodec.constants import ESCAPE_SHORTHANDS, MAX_WIDE_UNIT
from lexcodec.encoding.utf8 import utf8_to_codepoints
from lexcodec.encoding.wide import split_surrogates

__all__ = ["QUOTE_CHARACTERS", "escape"]

QUOTE_CHARACTERS: tuple[str, ...] = ('"', "'")

_DEL = 0x7F


def _codepoints(text: str | bytes) -> list[int]:
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    return utf8_to_codepoints(text, allow_surrogates=True)


def escape(text: str | bytes, escape_unicode: bool = False, *, quote: str = '"') -> str:
    """Escape text as a quoted literal.

    Args:
        text: A str, or UTF-8 bytes (encoded surrogates are accepted)
        escape_unicode: Escape every codepoint above U+007F as \\uXXXX
        quote: Quote character wrapping the literal (" or ')

    Returns:
        Quoted literal

    Raises:
        ValueError: If quote is not " or '
        MalformedEncodingError: If bytes input is not valid UTF-8

    Example:
        >>> print(escape("тест5", True))
        "\\u0442\\u0435\\u0441\\u04425"
        >>> print(escape('say "hi"\\n'))
        "say \\"hi\\"\\n"
    """
    if quote not in QUOTE_CHARACTERS:
        msg = f"quote must be one of {QUOTE_CHARACTERS}, got {quote!r}"
        raise ValueError(msg)

    out = [quote]
    for codepoint in _codepoints(text):
        ch = chr(codepoint)
        if ch in (quote, "\\"):
            out.append("\\" + ch)
        elif ch in ESCAPE_SHORTHANDS:
            out.append("\\" + ESCAPE_SHORTHANDS[ch])
        elif codepoint < 0x20 or codepoint == _DEL:
            out.append(f"\\u{codepoint:04x}")
        elif codepoint < 0x80 or not escape_unicode:
            out.append(ch)
        elif codepoint > MAX_WIDE_UNIT:
            high, low = split_surrogates(codepoint)
            out.append(f"\\u{high:04x}\\u{low:04x}")
        else:
            out.append(f"\\u{codepoint:04x}")
    out.append(quote)
    return "".join(out)
