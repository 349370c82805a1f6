"""
Chord models - serializable snapshots and recipes.

NoteModel and ChordModel are frozen snapshots of the mutable core types,
used wherever a chord leaves the process (tool responses, YAML).
ChordRecipe is a named interval stack loaded from the recipe library.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chordstack.constants import MIDI_MAX, MIDI_MIN, ErrorMessages
from chordstack.core import Chord, Interval, Note
from chordstack.core.note import check_midi_key


class NoteModel(BaseModel):
    """Snapshot of a single note."""

    midi_key: int = Field(..., ge=MIDI_MIN, le=MIDI_MAX, description="MIDI key number")
    pitch: str = Field("", description="Pitch label, e.g. 'C4'")

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: Note) -> NoteModel:
        return cls(midi_key=note.midi_key, pitch=note.pitch)

    def to_note(self) -> Note:
        return Note(self.midi_key)


class ChordModel(BaseModel):
    """
    Snapshot of a chord.

    Notes are kept in stacking order. The display string is the pitch-sorted
    rendering, taken without reordering the chord.
    """

    notes: list[NoteModel] = Field(default_factory=list, description="Notes in stacking order")
    display: str = Field("", description="Rendered chord, e.g. 'Chord: [C4, E4, G4]'")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, chord: Chord) -> ChordModel:
        return cls(
            notes=[NoteModel.from_note(note) for note in chord.notes],
            display=chord.render(),
        )

    def to_chord(self) -> Chord:
        """
        Build a new chord with fresh notes, in the same order.

        Raises:
            ValueError: If the snapshot has no notes
        """
        if not self.notes:
            raise ValueError(ErrorMessages.EMPTY_CHORD)
        root, *rest = self.notes
        chord = Chord(root.to_note())
        for note in rest:
            chord.append_note(note.to_note())
        return chord

    @property
    def midi_keys(self) -> list[int]:
        return [note.midi_key for note in self.notes]


class ChordRecipe(BaseModel):
    """
    A named stack of intervals.

    Applying a recipe adds each interval in turn on top of the chord's
    current last note, the same way append_major_chord() does.
    """

    schema_version: str = Field("recipe/v1", alias="schema")
    name: str = Field(..., description="Recipe name")
    description: str = Field("", description="Recipe description")
    intervals: list[str] = Field(..., min_length=1, description="Interval symbols, e.g. ['M3', 'm3']")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("intervals")
    @classmethod
    def intervals_must_parse(cls, value: list[str]) -> list[str]:
        for symbol in value:
            Interval.parse(symbol)
        return value

    def get_intervals(self) -> list[Interval]:
        return [Interval.parse(symbol) for symbol in self.intervals]

    def apply(self, chord: Chord) -> Chord:
        """
        Stack this recipe's intervals onto the chord, in place.

        Raises:
            ValueError: If the chord is empty or the stack would leave the
                MIDI range. The chord is unchanged.
        """
        if not chord.notes:
            raise ValueError(ErrorMessages.EMPTY_CHORD)
        check_midi_key(chord.notes[-1].midi_key + self.span())
        for interval in self.get_intervals():
            chord.add_interval(interval)
        return chord

    def span(self) -> int:
        """Total semitones from the starting note to the new top note."""
        return sum(interval.semitones for interval in self.get_intervals())

    def to_yaml_dict(self) -> dict[str, Any]:
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "intervals": list(self.intervals),
        }


class RecipeMetadata(BaseModel):
    """Lightweight metadata for listing recipes."""

    name: str
    description: str
    intervals: list[str]

    model_config = {"frozen": True}

    @classmethod
    def from_recipe(cls, recipe: ChordRecipe) -> RecipeMetadata:
        """Create metadata from a recipe."""
        return cls(
            name=recipe.name,
            description=recipe.description,
            intervals=list(recipe.intervals),
        )
