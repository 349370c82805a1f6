"""
Chord workbench - named, in-memory chords for the MCP tools.
"""

from chordstack.workbench.manager import ChordWorkbench, parse_note

__all__ = [
    "ChordWorkbench",
    "parse_note",
]
