"""
Pydantic models for the chord system.

This module provides:
- NoteModel: Snapshot of a note
- ChordModel: Snapshot of a chord in stacking order
- ChordRecipe: Named interval stack from the recipe library
- RecipeMetadata: Listing view of a recipe
"""

from chordstack.models.chord import ChordModel, ChordRecipe, NoteModel, RecipeMetadata

__all__ = [
    "ChordModel",
    "ChordRecipe",
    "NoteModel",
    "RecipeMetadata",
]
