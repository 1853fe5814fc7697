"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_harmony.core import Chord, TuningConfiguration


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in tuning library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_harmony" / "tunings" / "library"


@pytest.fixture
def c_major() -> Chord:
    """C4 major triad."""
    return Chord.from_pattern("C4", "1 3 5")


@pytest.fixture
def baroque_tuning() -> TuningConfiguration:
    """A4 = 415 Hz with flat spellings."""
    return TuningConfiguration(
        name="baroque",
        reference_frequency=415.0,
        prefer_flats=True,
    )
