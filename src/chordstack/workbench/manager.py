"""
Chord Workbench - holds named chords for the tool layer.

Chords live in memory for the lifetime of the server process.
"""

from __future__ import annotations

import logging

from chordstack.constants import ErrorMessages
from chordstack.core import Chord, Note
from chordstack.models.chord import ChordModel

logger = logging.getLogger(__name__)


def parse_note(value: str | int) -> Note:
    """Build a note from a MIDI key number ('60', 60) or a label ('C4')."""
    if isinstance(value, int):
        return Note(value)
    value = value.strip()
    if value.lstrip("-").isdigit():
        return Note(int(value))
    return Note.from_name(value)


class ChordWorkbench:
    """
    Registry of named chords.

    Chords are handed out by reference, so tools mutate them in place.
    """

    def __init__(self) -> None:
        self._chords: dict[str, Chord] = {}

    def create(self, name: str, root: Note | str | int) -> Chord:
        """
        Create a chord with a single root note.

        Args:
            name: Unique chord name
            root: Root note, as a Note, MIDI key or label

        Raises:
            ValueError: If the name is taken or the root cannot be parsed
        """
        if name in self._chords:
            raise ValueError(ErrorMessages.CHORD_EXISTS.format(name=name))
        root_note = root if isinstance(root, Note) else parse_note(root)
        chord = Chord(root_note)
        self._chords[name] = chord
        logger.debug("Created chord %r on %s", name, root_note.pitch)
        return chord

    def get(self, name: str) -> Chord | None:
        return self._chords.get(name)

    def require(self, name: str) -> Chord:
        """
        Get a chord by name.

        Raises:
            KeyError: If no chord has that name
        """
        chord = self._chords.get(name)
        if chord is None:
            raise KeyError(ErrorMessages.CHORD_NOT_FOUND.format(name=name))
        return chord

    def list_chords(self) -> list[str]:
        return sorted(self._chords)

    def delete(self, name: str) -> bool:
        """Remove a chord. Returns False if it did not exist."""
        return self._chords.pop(name, None) is not None

    def duplicate(self, name: str, new_name: str) -> Chord:
        """Copy a chord under a new name, with independent notes."""
        if new_name in self._chords:
            raise ValueError(ErrorMessages.CHORD_EXISTS.format(name=new_name))
        copy = ChordModel.from_chord(self.require(name)).to_chord()
        self._chords[new_name] = copy
        return copy

    def stack(self, bottom: str, top: str) -> Chord:
        """
        Stack the top chord onto the bottom chord.

        Notes are shared between the two afterwards, see Chord.stack_chords.
        """
        return Chord.stack_chords(self.require(bottom), self.require(top))

    def snapshot(self, name: str) -> ChordModel:
        return ChordModel.from_chord(self.require(name))
