"""
chordstack - build, invert, transpose and stack chords.

Chords are ordered stacks of notes built interval by interval from a root.
The package also ships a YAML recipe library of common interval stacks and
an MCP server exposing chord tools.
"""

from chordstack.core import Chord, Interval, Note, PitchClass, Transposable

__version__ = "0.1.0"

__all__ = [
    "Chord",
    "Interval",
    "Note",
    "PitchClass",
    "Transposable",
]
