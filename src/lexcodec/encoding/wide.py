"""Conversion between UTF-8 and 16-bit wide code units.

Codepoints above U+FFFF become surrogate pairs. Unpaired surrogate units
are carried through numerically in both directions, never replaced, so:

    wide_to_utf8(utf8_to_wide(s)) == s   for every valid UTF-8 buffer s
    utf8_to_wide(wide_to_utf8(w)) == w   for every wide sequence w

The UTF-8 side of unpaired surrogates uses surrogate pass mode (3-byte
encodings of U+D800..U+DFFF).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Sequence

from lexcodec.constants import (
    HIGH_SURROGATE_MAX,
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MAX,
    LOW_SURROGATE_MIN,
    MAX_WIDE_UNIT,
    SUPPLEMENTARY_BASE,
)

from .utf8 import codepoints_to_utf8, utf8_to_codepoints

__all__ = [
    "codepoints_to_wide",
    "combine_surrogates",
    "is_high_surrogate",
    "is_low_surrogate",
    "split_surrogates",
    "str_to_wide",
    "utf8_to_wide",
    "wide_to_codepoints",
    "wide_to_str",
    "wide_to_utf8",
]


def is_high_surrogate(unit: int) -> bool:
    """Check for a leading surrogate (0xD800-0xDBFF)."""
    return HIGH_SURROGATE_MIN <= unit <= HIGH_SURROGATE_MAX


def is_low_surrogate(unit: int) -> bool:
    """Check for a trailing surrogate (0xDC00-0xDFFF)."""
    return LOW_SURROGATE_MIN <= unit <= LOW_SURROGATE_MAX


def split_surrogates(codepoint: int) -> tuple[int, int]:
    """Split a supplementary codepoint into (high, low) surrogate units.

    Example:
        >>> [hex(u) for u in split_surrogates(0x1F600)]
        ['0xd83d', '0xde00']
    """
    offset = codepoint - SUPPLEMENTARY_BASE
    return HIGH_SURROGATE_MIN + (offset >> 10), LOW_SURROGATE_MIN + (offset & 0x3FF)


def combine_surrogates(high: int, low: int) -> int:
    """Combine a surrogate pair into its codepoint."""
    return SUPPLEMENTARY_BASE + ((high - HIGH_SURROGATE_MIN) << 10) + (low - LOW_SURROGATE_MIN)


def codepoints_to_wide(codepoints: Iterable[int]) -> list[int]:
    """Convert codepoints to wide units, splitting values above U+FFFF."""
    units: list[int] = []
    for codepoint in codepoints:
        if codepoint > MAX_WIDE_UNIT:
            units.extend(split_surrogates(codepoint))
        else:
            units.append(codepoint)
    return units


def wide_to_codepoints(units: Sequence[int]) -> list[int]:
    """Convert wide units to codepoints.

    A high surrogate immediately followed by a low surrogate becomes one
    codepoint. Every other unit, including an unpaired surrogate, is taken
    as a codepoint on its own.

    Raises:
        ValueError: If a unit is outside 0..0xFFFF
    """
    codepoints: list[int] = []
    i = 0
    count = len(units)
    while i < count:
        unit = units[i]
        if unit < 0 or unit > MAX_WIDE_UNIT:
            msg = f"Wide unit {unit:#x} at index {i} is not a 16-bit value"
            raise ValueError(msg)
        if is_high_surrogate(unit) and i + 1 < count and is_low_surrogate(units[i + 1]):
            codepoints.append(combine_surrogates(unit, units[i + 1]))
            i += 2
            continue
        codepoints.append(unit)
        i += 1
    return codepoints


def utf8_to_wide(data: bytes) -> list[int]:
    """Decode UTF-8 into 16-bit wide units.

    Raises:
        MalformedEncodingError: If data is not valid UTF-8 (surrogate
            pass mode: encoded surrogates are accepted)

    Example:
        >>> [hex(u) for u in utf8_to_wide("a😀".encode())]
        ['0x61', '0xd83d', '0xde00']
    """
    return codepoints_to_wide(utf8_to_codepoints(data, allow_surrogates=True))


def wide_to_utf8(units: Sequence[int]) -> bytes:
    """Encode 16-bit wide units as UTF-8.

    Raises:
        ValueError: If a unit is outside 0..0xFFFF
    """
    return codepoints_to_utf8(wide_to_codepoints(units), allow_surrogates=True)


def str_to_wide(text: str) -> list[int]:
    """Convert a Python string (which may hold lone surrogates) to wide units."""
    return codepoints_to_wide(ord(ch) for ch in text)


def wide_to_str(units: Sequence[int]) -> str:
    """Convert wide units to a Python string, pairing surrogates."""
    return "".join(chr(cp) for cp in wide_to_codepoints(units))
