"""Tests for the lexcodec package __init__.py module.

Covers:
- __all__ integrity: every exported name is accessible
- Top-level names are the submodule objects, not copies
- Fallback version when package metadata is unavailable
"""

from __future__ import annotations

import importlib
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import pytest

import lexcodec


class TestPublicAPI:
    """Exported names."""

    @pytest.mark.parametrize("name", lexcodec.__all__)
    def test_all_names_accessible(self, name: str) -> None:
        """Every name in __all__ resolves."""
        assert getattr(lexcodec, name) is not None

    def test_reexports_are_identical(self) -> None:
        """Top-level functions are the submodule functions."""
        from lexcodec.encoding.base64 import base64_decode
        from lexcodec.encoding.utf8 import crop_utf8
        from lexcodec.syntax.primitives import unescape

        assert lexcodec.crop_utf8 is crop_utf8
        assert lexcodec.base64_decode is base64_decode
        assert lexcodec.unescape is unescape

    def test_documented_example(self) -> None:
        """The package-level API covers the common round trips."""
        assert lexcodec.unescape(lexcodec.escape("тест5", True)) == "тест5"
        assert lexcodec.base64_decode(lexcodec.base64_encode(b"hi")) == b"hi"
        assert lexcodec.crop_utf8("пример".encode(), 7) == 6


class TestVersion:
    """__version__ resolution."""

    def test_version_is_string(self) -> None:
        """__version__ is always a non-empty string."""
        assert isinstance(lexcodec.__version__, str)
        assert lexcodec.__version__

    def test_fallback_version(self) -> None:
        """Without package metadata the dev version is used."""
        try:
            with patch(
                "importlib.metadata.version", side_effect=PackageNotFoundError("lexcodec")
            ):
                reloaded = importlib.reload(lexcodec)
                assert reloaded.__version__ == "0.0.0+dev"
        finally:
            importlib.reload(lexcodec)
