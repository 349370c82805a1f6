"""
Recipe system - named interval stacks applied to chords.

A recipe generalises append_major_chord(): a list of intervals stacked,
one after another, on the chord's current top note.
"""

from chordstack.recipes.loader import RecipeLoader

__all__ = ["RecipeLoader"]
