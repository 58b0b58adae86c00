"""UTF-8 codec and boundary cropping.

Converts between UTF-8 bytes and sequences of integer codepoints with full
validation: invalid lead and continuation bytes, truncated sequences,
overlong forms, surrogates, and values above U+10FFFF are all rejected with
MalformedEncodingError at the offset of the offending byte.

Surrogate pass mode:
    With ``allow_surrogates=True`` the values U+D800..U+DFFF are treated as
    ordinary 3-byte codepoints. Wide conversion and the literal escaper use
    this mode so that unpaired surrogates survive a round trip unchanged.
    An encoded high surrogate directly followed by an encoded low one is
    still rejected: that pair has exactly one valid form, the 4-byte
    sequence.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable

from lexcodec.constants import (
    HIGH_SURROGATE_MAX,
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MAX,
    LOW_SURROGATE_MIN,
    MAX_CODEPOINT,
    SURROGATE_MAX,
    SURROGATE_MIN,
    UTF8_MAX_SEQUENCE_LENGTH,
    UTF8_MIN_CODEPOINT,
)
from lexcodec.diagnostics import ErrorTemplate, MalformedEncodingError

__all__ = [
    "codepoints_to_utf8",
    "crop_utf8",
    "crop_utf8_text",
    "decode_codepoint",
    "encode_codepoint",
    "is_continuation_byte",
    "is_valid_utf8",
    "utf8_length",
    "utf8_sequence_length",
    "utf8_to_codepoints",
]

logger = logging.getLogger(__name__)


def _build_sequence_lengths() -> tuple[int, ...]:
    """Sequence length for every possible lead byte (0 = cannot lead)."""
    table = []
    for byte in range(256):
        if byte < 0x80:
            table.append(1)  # 0xxxxxxx
        elif byte < 0xC0:
            table.append(0)  # 10xxxxxx continuation
        elif byte < 0xE0:
            table.append(2)  # 110xxxxx
        elif byte < 0xF0:
            table.append(3)  # 1110xxxx
        elif byte < 0xF8:
            table.append(UTF8_MAX_SEQUENCE_LENGTH)  # 11110xxx
        else:
            table.append(0)
    return tuple(table)


_SEQUENCE_LENGTHS: tuple[int, ...] = _build_sequence_lengths()


def utf8_sequence_length(lead: int) -> int:
    """Get the length of the UTF-8 sequence announced by a lead byte.

    Args:
        lead: Byte value (0-255)

    Returns:
        1-4 for valid lead bytes, 0 for continuation bytes and 0xF8-0xFF

    Example:
        >>> utf8_sequence_length(0x41)
        1
        >>> utf8_sequence_length(0xD0)
        2
        >>> utf8_sequence_length(0xBF)
        0
    """
    return _SEQUENCE_LENGTHS[lead]


def is_continuation_byte(value: int) -> bool:
    """Check for a 10xxxxxx byte."""
    return value & 0xC0 == 0x80


def _is_surrogate(codepoint: int) -> bool:
    return SURROGATE_MIN <= codepoint <= SURROGATE_MAX


def _is_high_surrogate(codepoint: int) -> bool:
    return HIGH_SURROGATE_MIN <= codepoint <= HIGH_SURROGATE_MAX


def _is_low_surrogate(codepoint: int) -> bool:
    return LOW_SURROGATE_MIN <= codepoint <= LOW_SURROGATE_MAX


def decode_codepoint(
    data: bytes, offset: int = 0, *, allow_surrogates: bool = False
) -> tuple[int, int]:
    """Decode a single codepoint starting at offset.

    Args:
        data: UTF-8 buffer
        offset: Offset of the lead byte
        allow_surrogates: Accept encoded U+D800..U+DFFF

    Returns:
        (codepoint, sequence_length) tuple

    Raises:
        MalformedEncodingError: If the sequence at offset is invalid
        IndexError: If offset is outside the buffer
    """
    lead = data[offset]
    length = _SEQUENCE_LENGTHS[lead]
    if length == 1:
        return lead, 1
    if length == 0:
        raise MalformedEncodingError(
            ErrorTemplate.invalid_lead_byte(lead, offset), position=offset
        )

    available = min(length, len(data) - offset)
    # 0x7F >> length keeps the payload bits of the lead byte
    codepoint = lead & (0x7F >> length)
    for i in range(1, available):
        byte = data[offset + i]
        if not is_continuation_byte(byte):
            raise MalformedEncodingError(
                ErrorTemplate.invalid_continuation_byte(byte, offset + i),
                position=offset + i,
            )
        codepoint = (codepoint << 6) | (byte & 0x3F)

    if available < length:
        raise MalformedEncodingError(
            ErrorTemplate.truncated_sequence(offset, length, available),
            position=offset,
        )
    if codepoint < UTF8_MIN_CODEPOINT[length]:
        raise MalformedEncodingError(
            ErrorTemplate.overlong_encoding(codepoint, length, offset), position=offset
        )
    if codepoint > MAX_CODEPOINT:
        raise MalformedEncodingError(
            ErrorTemplate.codepoint_out_of_range(codepoint, offset), position=offset
        )
    if not allow_surrogates and _is_surrogate(codepoint):
        raise MalformedEncodingError(
            ErrorTemplate.surrogate_codepoint(codepoint, offset), position=offset
        )
    return codepoint, length


def utf8_to_codepoints(data: bytes, *, allow_surrogates: bool = False) -> list[int]:
    """Decode a UTF-8 buffer into codepoints.

    Args:
        data: UTF-8 encoded bytes (any bytes-like object)
        allow_surrogates: Accept encoded U+D800..U+DFFF. Only unpaired
            surrogates are accepted: an encoded high surrogate directly
            followed by an encoded low one must have been written as a
            single 4-byte sequence.

    Returns:
        List of integer codepoints

    Raises:
        MalformedEncodingError: At the first invalid byte

    Example:
        >>> utf8_to_codepoints("hé".encode())
        [104, 233]
    """
    data = bytes(data)
    codepoints: list[int] = []
    pos = 0
    end = len(data)
    while pos < end:
        codepoint, size = decode_codepoint(data, pos, allow_surrogates=allow_surrogates)
        if (
            allow_surrogates
            and codepoints
            and _is_high_surrogate(codepoints[-1])
            and _is_low_surrogate(codepoint)
        ):
            raise MalformedEncodingError(
                ErrorTemplate.encoded_surrogate_pair(codepoints[-1], codepoint, pos),
                position=pos,
            )
        codepoints.append(codepoint)
        pos += size
    return codepoints


def _encode_into(
    out: bytearray, codepoint: int, index: int, *, allow_surrogates: bool
) -> None:
    if codepoint < 0 or codepoint > MAX_CODEPOINT:
        raise MalformedEncodingError(
            ErrorTemplate.codepoint_out_of_range(codepoint, index), position=index
        )
    if codepoint < 0x80:
        out.append(codepoint)
    elif codepoint < 0x800:
        out.append(0xC0 | (codepoint >> 6))
        out.append(0x80 | (codepoint & 0x3F))
    elif codepoint < 0x10000:
        if not allow_surrogates and _is_surrogate(codepoint):
            raise MalformedEncodingError(
                ErrorTemplate.surrogate_codepoint(codepoint, index), position=index
            )
        out.append(0xE0 | (codepoint >> 12))
        out.append(0x80 | ((codepoint >> 6) & 0x3F))
        out.append(0x80 | (codepoint & 0x3F))
    else:
        out.append(0xF0 | (codepoint >> 18))
        out.append(0x80 | ((codepoint >> 12) & 0x3F))
        out.append(0x80 | ((codepoint >> 6) & 0x3F))
        out.append(0x80 | (codepoint & 0x3F))


def encode_codepoint(codepoint: int, *, allow_surrogates: bool = False) -> bytes:
    """Encode one codepoint in its shortest UTF-8 form.

    Example:
        >>> encode_codepoint(0x442)
        b'\\xd1\\x82'
    """
    out = bytearray()
    _encode_into(out, codepoint, 0, allow_surrogates=allow_surrogates)
    return bytes(out)


def codepoints_to_utf8(codepoints: Iterable[int], *, allow_surrogates: bool = False) -> bytes:
    """Encode codepoints as UTF-8.

    Args:
        codepoints: Integer codepoints
        allow_surrogates: Encode U+D800..U+DFFF as 3-byte sequences

    Returns:
        UTF-8 bytes

    Raises:
        MalformedEncodingError: For a value outside 0..0x10FFFF, or a
            surrogate in strict mode. ``position`` is the sequence index.
    """
    out = bytearray()
    for index, codepoint in enumerate(codepoints):
        _encode_into(out, codepoint, index, allow_surrogates=allow_surrogates)
    return bytes(out)


def utf8_length(data: bytes) -> int:
    """Count codepoints in a valid UTF-8 buffer.

    Raises:
        MalformedEncodingError: If the buffer is not valid UTF-8
    """
    return len(utf8_to_codepoints(data))


def is_valid_utf8(data: bytes, *, allow_surrogates: bool = False) -> bool:
    """Check whether a buffer is valid UTF-8 without raising."""
    try:
        utf8_to_codepoints(data, allow_surrogates=allow_surrogates)
    except MalformedEncodingError:
        return False
    return True


def crop_utf8(data: bytes, max_len: int) -> int:
    """Find the longest prefix that does not split a multi-byte sequence.

    Only lead-byte classification is performed; the buffer is not
    validated.

    Args:
        data: UTF-8 buffer
        max_len: Maximum prefix length in bytes

    Returns:
        Prefix length n <= min(max_len, len(data))

    Raises:
        ValueError: If max_len is negative

    Example:
        >>> crop_utf8("пример".encode(), 7)
        6
    """
    if max_len < 0:
        msg = f"max_len must be >= 0, got {max_len}"
        raise ValueError(msg)
    if max_len >= len(data):
        return len(data)
    if not is_continuation_byte(data[max_len]):
        return max_len

    pos = max_len
    while pos > 0 and is_continuation_byte(data[pos]):
        pos -= 1
    # Stray continuation bytes after a complete sequence split nothing
    if pos + _SEQUENCE_LENGTHS[data[pos]] <= max_len:
        return max_len
    logger.debug("Cropped UTF-8 buffer at %d instead of %d", pos, max_len)
    return pos


def crop_utf8_text(data: bytes, max_len: int) -> bytes:
    """Return the longest prefix of data within max_len bytes.

    Example:
        >>> crop_utf8_text("пример".encode(), 7).decode()
        'при'
    """
    return bytes(data[: crop_utf8(data, max_len)])
