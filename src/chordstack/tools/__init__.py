"""
MCP tool implementations.

Tools are organized by domain:
- chords - Chord building, inversion, transposition and stacking
- recipes - Recipe discovery, application and saving
"""

from chordstack.tools.chords import register_chord_tools
from chordstack.tools.recipes import register_recipe_tools

__all__ = [
    "register_chord_tools",
    "register_recipe_tools",
]
