"""
Core chord primitives.

- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Distance between pitches in semitones
- Note: A single mutable pitch with a MIDI key number
- Chord: An ordered stack of notes, built interval by interval
- Transposable: The capability shared by Note and Chord
"""

from chordstack.core.chord import Chord
from chordstack.core.note import Note
from chordstack.core.pitch import Interval, PitchClass
from chordstack.core.transform import Transposable

__all__ = [
    # Pitch
    "PitchClass",
    "Interval",
    # Note
    "Note",
    # Chord
    "Chord",
    # Capabilities
    "Transposable",
]
