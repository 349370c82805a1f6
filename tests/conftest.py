"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chordstack.core import Chord, Note


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def recipes_library_path() -> Path:
    """Path to the built-in recipe library."""
    return Path(__file__).parent.parent / "src" / "chordstack" / "recipes" / "library"


@pytest.fixture
def c4() -> Note:
    """Middle C."""
    return Note(60)


@pytest.fixture
def c_major(c4: Note) -> Chord:
    """C major triad in root position (C4, E4, G4)."""
    return Chord(c4).append_major_chord()
