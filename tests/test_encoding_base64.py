"""Tests for encoding.base64: standard and URL-safe Base64.

RFC 4648 vectors, round trips for every length 0..29, strict rejection of
foreign characters and impossible lengths, and differential checks against
the standard library implementation.
"""

from __future__ import annotations

import base64 as stdlib_base64
import random
from collections.abc import Callable

import pytest
from hypothesis import event, given

from lexcodec.diagnostics import (
    DiagnosticCode,
    InvalidBase64CharacterError,
    InvalidBase64LengthError,
)
from lexcodec.encoding.base64 import (
    STANDARD_ALPHABET,
    URLSAFE_ALPHABET,
    Base64Alphabet,
    base64_decode,
    base64_encode,
    base64_urlsafe_decode,
    base64_urlsafe_encode,
    decode,
    encode,
)
from tests.strategies import byte_buffers

# ============================================================================
# ALPHABETS
# ============================================================================


class TestAlphabet:
    """Base64Alphabet construction and validation."""

    def test_builtin_alphabets(self) -> None:
        """Standard pads, URL-safe does not."""
        assert STANDARD_ALPHABET.padding
        assert not URLSAFE_ALPHABET.padding
        assert STANDARD_ALPHABET.symbols.endswith("+/")
        assert URLSAFE_ALPHABET.symbols.endswith("-_")

    def test_value_of(self) -> None:
        """Reverse lookup returns 6-bit values."""
        assert STANDARD_ALPHABET.value_of("A") == 0
        assert STANDARD_ALPHABET.value_of("/") == 63
        assert STANDARD_ALPHABET.value_of("-") is None
        assert URLSAFE_ALPHABET.value_of("_") == 63

    def test_frozen(self) -> None:
        """Alphabets are immutable."""
        with pytest.raises(AttributeError):
            STANDARD_ALPHABET.padding = False  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("symbols", "match"),
        [
            ("ABC", "64 symbols"),
            ("A" * 64, "distinct"),
            (STANDARD_ALPHABET.symbols[:63] + "=", "padding"),
            (STANDARD_ALPHABET.symbols[:63] + "é", "ASCII"),
        ],
    )
    def test_invalid_alphabets(self, symbols: str, match: str) -> None:
        """Invalid symbol sets are rejected at construction."""
        with pytest.raises(ValueError, match=match):
            Base64Alphabet(symbols)

    def test_custom_alphabet(self) -> None:
        """A custom alphabet encodes and decodes."""
        alphabet = Base64Alphabet(STANDARD_ALPHABET.symbols[:62] + ".,", name="dots")
        assert encode(b"\xff\xff", alphabet) == ",,8="
        assert decode(",,8=", alphabet) == b"\xff\xff"


# ============================================================================
# ENCODING
# ============================================================================


class TestEncode:
    """Encoding vectors."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (b"", ""),
            (b"f", "Zg=="),
            (b"fo", "Zm8="),
            (b"foo", "Zm9v"),
            (b"foob", "Zm9vYg=="),
            (b"fooba", "Zm9vYmE="),
            (b"foobar", "Zm9vYmFy"),
        ],
    )
    def test_rfc4648_vectors(self, raw: bytes, expected: str) -> None:
        """RFC 4648 test vectors."""
        assert base64_encode(raw) == expected
        assert base64_decode(expected) == raw

    def test_urlsafe_symbols_and_no_padding(self) -> None:
        """URL-safe swaps +/ for -_ and omits padding."""
        assert base64_encode(b"\xfb\xff") == "+/8="
        assert base64_urlsafe_encode(b"\xfb\xff") == "-_8"

    def test_urlsafe_unpadded_lengths(self) -> None:
        """Unpadded output length is ceil(4n/3)."""
        for size in range(10):
            assert len(base64_urlsafe_encode(bytes(size))) == (size * 4 + 2) // 3


# ============================================================================
# DECODING
# ============================================================================


class TestDecode:
    """Decoding and rejection rules."""

    def test_accepts_bytes_input(self) -> None:
        """ASCII bytes decode like text."""
        assert base64_decode(b"Zm9v") == b"foo"

    def test_urlsafe_tolerates_padding(self) -> None:
        """URL-safe decoding accepts correct padding."""
        assert base64_urlsafe_decode("Zm8=") == b"fo"
        assert base64_urlsafe_decode("Zm8") == b"fo"

    def test_foreign_character(self) -> None:
        """A character outside the alphabet is reported with its index."""
        with pytest.raises(InvalidBase64CharacterError) as exc_info:
            base64_decode("Zm9v!A==")

        error = exc_info.value
        assert error.position == 4
        assert error.character == "!"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.INVALID_BASE64_CHARACTER

    def test_other_alphabet_symbol_rejected(self) -> None:
        """Standard decoding rejects URL-safe symbols and vice versa."""
        with pytest.raises(InvalidBase64CharacterError) as exc_info:
            base64_decode("-_8=")
        assert exc_info.value.position == 0

        with pytest.raises(InvalidBase64CharacterError) as exc_info:
            base64_urlsafe_decode("+/8")
        assert exc_info.value.position == 0

    def test_padding_in_the_middle(self) -> None:
        """Padding before data is an invalid character."""
        with pytest.raises(InvalidBase64CharacterError) as exc_info:
            base64_decode("Zm=v")
        assert exc_info.value.position == 2

    def test_too_much_padding(self) -> None:
        """Three padding characters are never valid."""
        with pytest.raises(InvalidBase64CharacterError) as exc_info:
            base64_decode("Z===")
        assert exc_info.value.position == 1

    def test_foreign_character_before_excess_padding(self) -> None:
        """The earliest bad character wins over a later padding run."""
        with pytest.raises(InvalidBase64CharacterError) as exc_info:
            base64_decode("!AAA===")

        assert exc_info.value.position == 0
        assert exc_info.value.character == "!"

    def test_whitespace_rejected(self) -> None:
        """Whitespace is not part of the alphabet."""
        with pytest.raises(InvalidBase64CharacterError):
            base64_decode("Zm9v\n")

    def test_standard_requires_multiple_of_four(self) -> None:
        """Unpadded input is an invalid length for the standard alphabet."""
        with pytest.raises(InvalidBase64LengthError, match="multiple of 4"):
            base64_decode("Zm8")

    @pytest.mark.parametrize("text", ["Z", "Zm9vY"])
    def test_single_symbol_group(self, text: str) -> None:
        """A final group of one symbol cannot come from the encoder."""
        with pytest.raises(InvalidBase64LengthError):
            base64_urlsafe_decode(text)

    def test_urlsafe_wrong_padding_length(self) -> None:
        """Present padding must complete a 4-symbol group."""
        with pytest.raises(InvalidBase64LengthError):
            base64_urlsafe_decode("Zm8==")

    def test_overflow_bits_discarded(self) -> None:
        """Non-zero trailing bits in the last group are ignored."""
        assert base64_decode("Zm9=") == b"fo"


# ============================================================================
# ROUND TRIPS
# ============================================================================


class TestRoundTrip:
    """Every length 0..29 and differential properties."""

    @pytest.mark.parametrize(
        ("encoder", "decoder"),
        [
            (base64_encode, base64_decode),
            (base64_urlsafe_encode, base64_urlsafe_decode),
        ],
    )
    def test_lengths_zero_to_twenty_nine(
        self, encoder: Callable[[bytes], str], decoder: Callable[[str], bytes]
    ) -> None:
        """Random buffers of every length up to 29 survive."""
        rng = random.Random(2019)
        for size in range(30):
            raw = rng.randbytes(size)
            decoded = decoder(encoder(raw))
            assert len(decoded) == size
            assert decoded == raw

    @given(raw=byte_buffers)
    def test_matches_stdlib(self, raw: bytes) -> None:
        """PROPERTY: output equals the standard library's."""
        assert base64_encode(raw) == stdlib_base64.b64encode(raw).decode("ascii")
        expected_urlsafe = stdlib_base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")
        assert base64_urlsafe_encode(raw) == expected_urlsafe

    @given(raw=byte_buffers)
    def test_decoded_length(self, raw: bytes) -> None:
        """PROPERTY: decoded length is floor(symbols * 3 / 4)."""
        for text, decoder in (
            (base64_encode(raw), base64_decode),
            (base64_urlsafe_encode(raw), base64_urlsafe_decode),
        ):
            symbols = len(text.rstrip("="))
            assert len(decoder(text)) == symbols * 3 // 4
        event(f"b64_remainder={len(raw) % 3}")
