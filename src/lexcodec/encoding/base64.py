"""Base64 codec with standard and URL-safe alphabets.

Each 3-byte group becomes 4 symbols. The standard alphabet pads the final
partial group with ``=`` and requires that padding on decode; the URL-safe
alphabet emits no padding and tolerates it on decode.

Decoding is strict: any character outside the alphabet (including padding
that is not at the very end) raises InvalidBase64CharacterError carrying
its index.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from lexcodec.constants import BASE64_PAD, BASE64_STANDARD_SYMBOLS, BASE64_URLSAFE_SYMBOLS
from lexcodec.diagnostics import (
    ErrorTemplate,
    InvalidBase64CharacterError,
    InvalidBase64LengthError,
)

__all__ = [
    "STANDARD_ALPHABET",
    "URLSAFE_ALPHABET",
    "Base64Alphabet",
    "base64_decode",
    "base64_encode",
    "base64_urlsafe_decode",
    "base64_urlsafe_encode",
    "decode",
    "encode",
]

_ALPHABET_SIZE = 64

# Padding never exceeds two symbols: 1 leftover byte -> 2 symbols + "=="
_MAX_PAD = 2


@dataclass(frozen=True, slots=True)
class Base64Alphabet:
    """Immutable Base64 alphabet.

    Attributes:
        symbols: 64 distinct ASCII characters, indexed by 6-bit value
        padding: Emit ``=`` padding on encode and require it on decode.
            When False, padding is omitted on encode and tolerated on decode.
        name: Human-readable name (diagnostics only)

    Example:
        >>> alphabet = Base64Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789.,")
        >>> encode(b"\\xff\\xff", alphabet)
        ',,8='
    """

    symbols: str
    padding: bool = True
    name: str = "custom"
    _lookup: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the symbol set and build the reverse lookup.

        Raises:
            ValueError: If symbols is not 64 distinct ASCII characters, or
                contains the padding character.
        """
        if len(self.symbols) != _ALPHABET_SIZE:
            msg = f"Base64 alphabet needs {_ALPHABET_SIZE} symbols, got {len(self.symbols)}"
            raise ValueError(msg)
        if not self.symbols.isascii():
            msg = "Base64 alphabet symbols must be ASCII"
            raise ValueError(msg)
        if len(set(self.symbols)) != _ALPHABET_SIZE:
            msg = "Base64 alphabet symbols must be distinct"
            raise ValueError(msg)
        if BASE64_PAD in self.symbols:
            msg = f"Base64 alphabet must not contain the padding character {BASE64_PAD!r}"
            raise ValueError(msg)
        object.__setattr__(self, "_lookup", {ch: i for i, ch in enumerate(self.symbols)})

    def value_of(self, symbol: str) -> int | None:
        """Get the 6-bit value of a symbol, or None if not in the alphabet."""
        return self._lookup.get(symbol)


STANDARD_ALPHABET = Base64Alphabet(BASE64_STANDARD_SYMBOLS, padding=True, name="standard")
URLSAFE_ALPHABET = Base64Alphabet(BASE64_URLSAFE_SYMBOLS, padding=False, name="urlsafe")


def encode(data: bytes, alphabet: Base64Alphabet = STANDARD_ALPHABET) -> str:
    """Encode bytes as Base64 text.

    Args:
        data: Bytes to encode (any bytes-like object)
        alphabet: Alphabet to use

    Returns:
        Base64 string

    Example:
        >>> encode(b"hi")
        'aGk='
        >>> encode(b"hi", URLSAFE_ALPHABET)
        'aGk'
    """
    data = bytes(data)
    symbols = alphabet.symbols
    out: list[str] = []
    remainder = len(data) % 3
    full = len(data) - remainder

    for i in range(0, full, 3):
        group = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
        out.append(symbols[group >> 18])
        out.append(symbols[(group >> 12) & 0x3F])
        out.append(symbols[(group >> 6) & 0x3F])
        out.append(symbols[group & 0x3F])

    if remainder == 1:
        group = data[full] << 16
        out.append(symbols[group >> 18])
        out.append(symbols[(group >> 12) & 0x3F])
        if alphabet.padding:
            out.append(BASE64_PAD * 2)
    elif remainder == 2:
        group = (data[full] << 16) | (data[full + 1] << 8)
        out.append(symbols[group >> 18])
        out.append(symbols[(group >> 12) & 0x3F])
        out.append(symbols[(group >> 6) & 0x3F])
        if alphabet.padding:
            out.append(BASE64_PAD)

    return "".join(out)


def _symbol_values(text: str, end: int, alphabet: Base64Alphabet) -> list[int]:
    values: list[int] = []
    for index in range(end):
        value = alphabet.value_of(text[index])
        if value is None:
            raise InvalidBase64CharacterError(
                ErrorTemplate.invalid_base64_character(text[index], index),
                position=index,
                character=text[index],
            )
        values.append(value)
    return values


def decode(text: str | bytes, alphabet: Base64Alphabet = STANDARD_ALPHABET) -> bytes:
    """Decode Base64 text.

    Args:
        text: Base64 string (bytes are read as Latin-1 so indexes match)
        alphabet: Alphabet the text was encoded with

    Returns:
        Decoded bytes; length is floor(symbols * 3 / 4)

    Raises:
        InvalidBase64CharacterError: For a character outside the alphabet,
            misplaced padding, or more than two padding characters
        InvalidBase64LengthError: For a padded alphabet when the length is
            not a multiple of 4, or when the symbol count leaves one symbol
            in the final group

    Example:
        >>> decode("aGk=")
        b'hi'
        >>> decode("aGk", URLSAFE_ALPHABET)
        b'hi'
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("latin-1")

    length = len(text)
    end = length
    while end > 0 and text[end - 1] == BASE64_PAD:
        end -= 1
    pad_count = length - end
    values = _symbol_values(text, end, alphabet)
    if pad_count > _MAX_PAD:
        raise InvalidBase64CharacterError(
            ErrorTemplate.invalid_base64_character(BASE64_PAD, end),
            position=end,
            character=BASE64_PAD,
        )

    if (alphabet.padding or pad_count) and length % 4:
        raise InvalidBase64LengthError(
            ErrorTemplate.invalid_base64_length(length, padded=True), position=length
        )
    if end % 4 == 1:
        raise InvalidBase64LengthError(
            ErrorTemplate.invalid_base64_length(end, padded=False), position=end
        )

    out = bytearray()
    remainder = end % 4
    full = end - remainder
    for i in range(0, full, 4):
        group = (values[i] << 18) | (values[i + 1] << 12) | (values[i + 2] << 6) | values[i + 3]
        out.append(group >> 16)
        out.append((group >> 8) & 0xFF)
        out.append(group & 0xFF)

    if remainder == 2:
        group = (values[full] << 18) | (values[full + 1] << 12)
        out.append(group >> 16)
    elif remainder == 3:
        group = (values[full] << 18) | (values[full + 1] << 12) | (values[full + 2] << 6)
        out.append(group >> 16)
        out.append((group >> 8) & 0xFF)

    return bytes(out)


def base64_encode(data: bytes) -> str:
    """Encode with the standard alphabet (padded)."""
    return encode(data, STANDARD_ALPHABET)


def base64_decode(text: str | bytes) -> bytes:
    """Decode with the standard alphabet (padding required)."""
    return decode(text, STANDARD_ALPHABET)


def base64_urlsafe_encode(data: bytes) -> str:
    """Encode with the URL-safe alphabet (unpadded)."""
    return encode(data, URLSAFE_ALPHABET)


def base64_urlsafe_decode(text: str | bytes) -> bytes:
    """Decode with the URL-safe alphabet (padding optional)."""
    return decode(text, URLSAFE_ALPHABET)
