"""Pytest configuration for the lexcodec test suite.

Hypothesis profiles: dev (500 examples, default), ci (50, derandomized,
selected by CI=true), verbose (100). HYPOTHESIS_PROFILE overrides.

Tests marked @pytest.mark.fuzz run only with: pytest -m fuzz

Shared fixtures:
- width_samples: one character per UTF-8 sequence length with its bytes
- split_surrogate_pair: U+1F600 written as two 3-byte surrogate sequences
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run, others skipped
    """
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED TEXT VECTORS
# =============================================================================


@pytest.fixture
def width_samples() -> list[tuple[str, bytes]]:
    """One character per UTF-8 sequence length (1-4 bytes)."""
    return [
        ("A", b"\x41"),
        ("т", b"\xd1\x82"),
        ("€", b"\xe2\x82\xac"),
        ("\U0001f600", b"\xf0\x9f\x98\x80"),
    ]


@pytest.fixture
def split_surrogate_pair() -> bytes:
    """U+D83D U+DE00 encoded separately; valid form is b"\\xf0\\x9f\\x98\\x80"."""
    return bytes.fromhex("eda0bdedb880")
