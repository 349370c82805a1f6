"""
The transposable capability shared by notes and chords.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Transposable(Protocol):
    """Anything that can be moved up or down by a number of semitones, in place."""

    def transpose(self, semitones: int) -> Transposable: ...
