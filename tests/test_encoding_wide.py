"""Tests for encoding.wide: UTF-8 <-> 16-bit wide unit conversion.

Covers surrogate pair formation, the pass-through policy for unpaired
surrogates, and exact round trips in both directions.
"""

from __future__ import annotations

import random

import pytest
from hypothesis import given

from lexcodec.diagnostics import DiagnosticCode, MalformedEncodingError
from lexcodec.encoding.wide import (
    codepoints_to_wide,
    combine_surrogates,
    is_high_surrogate,
    is_low_surrogate,
    split_surrogates,
    str_to_wide,
    utf8_to_wide,
    wide_to_codepoints,
    wide_to_str,
    wide_to_utf8,
)
from tests.strategies import (
    surrogate_text,
    utf8_buffers,
    wide_sequences,
    wide_sequences_with_surrogates,
)

# ============================================================================
# SURROGATE HELPERS
# ============================================================================


class TestSurrogateHelpers:
    """Pair arithmetic and classification."""

    def test_split_known_value(self) -> None:
        """U+1F600 splits into D83D DE00."""
        assert split_surrogates(0x1F600) == (0xD83D, 0xDE00)

    def test_split_extremes(self) -> None:
        """First and last supplementary codepoints."""
        assert split_surrogates(0x10000) == (0xD800, 0xDC00)
        assert split_surrogates(0x10FFFF) == (0xDBFF, 0xDFFF)

    def test_combine_inverts_split(self) -> None:
        """combine_surrogates undoes split_surrogates."""
        for cp in (0x10000, 0x1F600, 0x10FFFF):
            assert combine_surrogates(*split_surrogates(cp)) == cp

    def test_classification(self) -> None:
        """High and low ranges do not overlap."""
        assert is_high_surrogate(0xD800)
        assert is_high_surrogate(0xDBFF)
        assert not is_high_surrogate(0xDC00)
        assert is_low_surrogate(0xDC00)
        assert is_low_surrogate(0xDFFF)
        assert not is_low_surrogate(0xDBFF)


# ============================================================================
# CONVERSION
# ============================================================================


class TestUtf8ToWide:
    """UTF-8 to wide units."""

    def test_bmp_text(self) -> None:
        """BMP codepoints map to single units."""
        assert utf8_to_wide("aт€".encode()) == [0x61, 0x442, 0x20AC]

    def test_supplementary_becomes_pair(self) -> None:
        """Codepoints above U+FFFF become surrogate pairs."""
        assert utf8_to_wide("\U0001f600".encode()) == [0xD83D, 0xDE00]

    def test_encoded_surrogate_passes_through(self) -> None:
        """A 3-byte encoded surrogate yields that unit."""
        assert utf8_to_wide(b"\xed\xa0\x80") == [0xD800]

    def test_invalid_utf8_rejected(self) -> None:
        """Malformed bytes still raise."""
        with pytest.raises(MalformedEncodingError):
            utf8_to_wide(b"\xc3")

    def test_encoded_surrogate_pair_rejected(self, split_surrogate_pair: bytes) -> None:
        """A high and a low surrogate as two 3-byte sequences are not merged."""
        with pytest.raises(MalformedEncodingError) as exc_info:
            utf8_to_wide(split_surrogate_pair)

        error = exc_info.value
        assert error.position == 3
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.SURROGATE_CODEPOINT

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (bytes.fromhex("edb080eda080"), [0xDC00, 0xD800]),
            (bytes.fromhex("eda08041edb080"), [0xD800, 0x41, 0xDC00]),
        ],
    )
    def test_separated_surrogates_pass_through(self, data: bytes, expected: list[int]) -> None:
        """Surrogates that do not form a pair stay accepted."""
        assert utf8_to_wide(data) == expected
        assert wide_to_utf8(expected) == data


class TestWideToUtf8:
    """Wide units to UTF-8."""

    def test_pair_combines(self) -> None:
        """A high/low pair becomes one 4-byte sequence."""
        assert wide_to_utf8([0xD83D, 0xDE00]) == "\U0001f600".encode()

    def test_unpaired_high_passes_through(self) -> None:
        """A high surrogate not followed by a low one is kept."""
        assert wide_to_utf8([0xD800, 0x41]) == b"\xed\xa0\x80A"

    def test_unpaired_low_passes_through(self) -> None:
        """A leading low surrogate is kept."""
        assert wide_to_utf8([0xDC00]) == b"\xed\xb0\x80"

    def test_reversed_pair_not_combined(self) -> None:
        """Low followed by high is two standalone units."""
        assert wide_to_codepoints([0xDC00, 0xD800]) == [0xDC00, 0xD800]

    def test_trailing_high(self) -> None:
        """A high surrogate at the very end is kept."""
        assert wide_to_codepoints([0x41, 0xD83D]) == [0x41, 0xD83D]

    @pytest.mark.parametrize("unit", [-1, 0x10000])
    def test_out_of_range_unit(self, unit: int) -> None:
        """Units must be 16-bit values."""
        with pytest.raises(ValueError, match="16-bit"):
            wide_to_utf8([0x41, unit])


class TestStrConvenience:
    """Python str wrappers."""

    def test_str_to_wide(self) -> None:
        """Strings split supplementary characters."""
        assert str_to_wide("a\U0001f600") == [0x61, 0xD83D, 0xDE00]

    def test_wide_to_str(self) -> None:
        """Units pair back into characters."""
        assert wide_to_str([0x61, 0xD83D, 0xDE00]) == "a\U0001f600"

    def test_width_samples(self, width_samples: list[tuple[str, bytes]]) -> None:
        """Only the 4-byte sample needs two units."""
        for text, data in width_samples:
            units = utf8_to_wide(data)
            assert units == str_to_wide(text)
            assert len(units) == (2 if len(data) == 4 else 1)
            assert wide_to_str(units) == text

    def test_codepoints_to_wide(self) -> None:
        """Only values above U+FFFF are split."""
        assert codepoints_to_wide([0xFFFF, 0x10000]) == [0xFFFF, 0xD800, 0xDC00]


# ============================================================================
# ROUND TRIPS
# ============================================================================


class TestRoundTrip:
    """Exact round trips in both directions."""

    def test_random_ten_thousand_units(self) -> None:
        """10,000 random 16-bit units (with unpaired surrogates) survive."""
        rng = random.Random(5436324)
        units = [rng.getrandbits(16) for _ in range(10_000)]

        assert utf8_to_wide(wide_to_utf8(units)) == units

    @given(data=utf8_buffers())
    def test_utf8_roundtrip(self, data: bytes) -> None:
        """PROPERTY: wide_to_utf8(utf8_to_wide(s)) == s."""
        assert wide_to_utf8(utf8_to_wide(data)) == data

    @given(units=wide_sequences)
    def test_wide_roundtrip(self, units: list[int]) -> None:
        """PROPERTY: utf8_to_wide(wide_to_utf8(w)) == w."""
        assert utf8_to_wide(wide_to_utf8(units)) == units

    @given(units=wide_sequences_with_surrogates())
    def test_wide_roundtrip_surrogate_heavy(self, units: list[int]) -> None:
        """PROPERTY: round trip holds for surrogate-dense sequences."""
        assert utf8_to_wide(wide_to_utf8(units)) == units

    @given(data=utf8_buffers())
    def test_matches_cpython_utf16(self, data: bytes) -> None:
        """PROPERTY: units match CPython's UTF-16 code units for valid text."""
        encoded = data.decode("utf-8").encode("utf-16-le")
        expected = [int.from_bytes(encoded[i : i + 2], "little") for i in range(0, len(encoded), 2)]
        assert utf8_to_wide(data) == expected

    @given(text=surrogate_text)
    def test_str_roundtrip(self, text: str) -> None:
        """PROPERTY: wide units of any str survive codepoint conversion."""
        units = str_to_wide(text)
        assert codepoints_to_wide(wide_to_codepoints(units)) == units
