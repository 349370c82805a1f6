"""
Note - a single mutable pitch.

A note is identified by its MIDI key number. Octave and pitch label are
derived from the key, so transposing a note moves all three together.
"""

from __future__ import annotations

import re
from functools import total_ordering

from chordstack.constants import (
    DEFAULT_OCTAVE,
    MIDI_MAX,
    MIDI_MIN,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chordstack.core.pitch import PitchClass

# Pitch class letter + accidental, then an optional (possibly negative) octave
_NOTE_NAME = re.compile(r"^([A-Ga-g](?:#|b)?)(-?\d+)?$")


def check_midi_key(key: int) -> int:
    """Raise ValueError unless key is a valid MIDI key number."""
    if not MIDI_MIN <= key <= MIDI_MAX:
        raise ValueError(ErrorMessages.KEY_OUT_OF_RANGE.format(key=key, low=MIDI_MIN, high=MIDI_MAX))
    return key


@total_ordering
class Note:
    """
    A pitched note with a MIDI key number (C4 = 60).

    Mutable: transpose() and octave_shift() change the key in place.
    Notes compare and sort by key. Being mutable, they are not hashable.
    """

    __slots__ = ("_midi_key",)

    def __init__(self, midi_key: int) -> None:
        self._midi_key = check_midi_key(midi_key)

    @classmethod
    def from_name(cls, name: str) -> Note:
        """
        Parse a note from a label like 'C4', 'F#3', 'Bb' or 'C-1'.

        The octave defaults to 4 when omitted.
        """
        match = _NOTE_NAME.match(name.strip())
        if not match:
            raise ValueError(ErrorMessages.UNKNOWN_NOTE.format(name=name))

        letter = match.group(1)
        pitch_class = PitchClass.parse(letter[0].upper() + letter[1:])
        octave = int(match.group(2)) if match.group(2) is not None else DEFAULT_OCTAVE
        return cls(pitch_class.value + (octave + 1) * SEMITONES_PER_OCTAVE)

    @property
    def midi_key(self) -> int:
        """MIDI key number (0-127)."""
        return self._midi_key

    @property
    def octave(self) -> int:
        """Scientific pitch octave (C4 = 60 is octave 4)."""
        return self._midi_key // SEMITONES_PER_OCTAVE - 1

    @property
    def pitch_class(self) -> PitchClass:
        return PitchClass.from_midi(self._midi_key)

    @property
    def pitch(self) -> str:
        """Human-readable label, e.g. 'C4' or 'F#3'."""
        return f"{self.pitch_class.spell()}{self.octave}"

    def transpose(self, semitones: int) -> Note:
        """
        Move the note by a number of semitones, in place.

        Raises:
            ValueError: If the result leaves the MIDI range. The key is unchanged.
        """
        self._midi_key = check_midi_key(self._midi_key + semitones)
        return self

    def octave_shift(self, octaves: int) -> Note:
        """Move the note by whole octaves, in place."""
        return self.transpose(octaves * SEMITONES_PER_OCTAVE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self._midi_key == other._midi_key

    def __lt__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self._midi_key < other._midi_key

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Note({self._midi_key})"

    def __str__(self) -> str:
        return self.pitch
