"""
Chord - an ordered stack of notes.

Notes are kept in stacking order (the order they were added), not pitch
order. Interval appenders always build on the current top of the stack,
i.e. the last note added, not on the root.

All builders mutate the chord in place and return it, so calls chain:

    Chord(Note.from_name("C4")).add_major_3().add_minor_3().invert(1)

A Chord is a plain mutable container and is not thread-safe.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterator

from chordstack.constants import SEMITONES_PER_OCTAVE, ErrorMessages
from chordstack.core.note import Note, check_midi_key
from chordstack.core.pitch import Interval

logger = logging.getLogger(__name__)


def check_shift(notes: list[Note], semitones: int) -> None:
    """
    Raise ValueError if shifting every slot of notes would leave the MIDI range.

    A note held in several slots is shifted once per slot, so its total
    shift is checked.
    """
    slots = Counter(id(note) for note in notes)
    for note in notes:
        check_midi_key(note.midi_key + semitones * slots[id(note)])


class Chord:
    """
    A chord built from a root note and the notes stacked on top of it.

    The notes property is the chord's own list, not a copy. Changes made
    through it are seen by every later operation on the chord.
    """

    def __init__(self, root_note: Note) -> None:
        """
        Create a chord containing only its root note.

        Args:
            root_note: The root note of the chord
        """
        self._notes: list[Note] = [root_note]

    @property
    def notes(self) -> list[Note]:
        """The live list of notes, in stacking order."""
        return self._notes

    def modify_specific_note(self, index: int, modification: Callable[[Note], Note]) -> None:
        """
        Replace the note at index with modification(note).

        Args:
            index: Position of the note, 0 <= index < len(chord)
            modification: Function from the existing note to its replacement

        Raises:
            IndexError: If index is out of range. Negative indices are not wrapped.
        """
        if not 0 <= index < len(self._notes):
            raise IndexError(
                ErrorMessages.INDEX_OUT_OF_RANGE.format(index=index, length=len(self._notes))
            )
        self._notes[index] = modification(self._notes[index])

    # Interval appenders - each stacks a note above the current top note

    def add_minor_2(self) -> Chord:
        return self.add_interval(Interval.MINOR_SECOND)

    def add_major_2(self) -> Chord:
        return self.add_interval(Interval.MAJOR_SECOND)

    def add_minor_3(self) -> Chord:
        return self.add_interval(Interval.MINOR_THIRD)

    def add_major_3(self) -> Chord:
        return self.add_interval(Interval.MAJOR_THIRD)

    def add_perfect_4(self) -> Chord:
        return self.add_interval(Interval.PERFECT_FOURTH)

    def add_tritone(self) -> Chord:
        """Add an augmented fourth above the top note."""
        return self.add_interval(Interval.TRITONE)

    def add_perfect_5(self) -> Chord:
        return self.add_interval(Interval.PERFECT_FIFTH)

    def add_interval(self, interval: Interval | int) -> Chord:
        """
        Append a new note an interval above the last note of the chord.

        Args:
            interval: An Interval or a number of semitones

        Raises:
            ValueError: If the chord is empty, or the new note leaves the MIDI range
        """
        if not self._notes:
            raise ValueError(ErrorMessages.EMPTY_CHORD)
        semitones = interval.semitones if isinstance(interval, Interval) else interval
        return self.append_note(Note(self._notes[-1].midi_key + semitones))

    def append_note(self, note: Note) -> Chord:
        """Append a note after the last note of the chord."""
        self._notes.append(note)
        return self

    def append_major_chord(self) -> Chord:
        """Stack a major third then a minor third on the last note."""
        return self.add_major_3().add_minor_3()

    def append_minor_chord(self) -> Chord:
        """Stack a minor third then a major third on the last note."""
        return self.add_minor_3().add_major_3()

    def transpose(self, semitones: int) -> Chord:
        """
        Transpose every note by a number of semitones, in place.

        Raises:
            ValueError: If any note would leave the MIDI range. No note is moved.
        """
        check_shift(self._notes, semitones)
        for note in self._notes:
            note.transpose(semitones)
        logger.debug("Transposed %d notes by %d semitones", len(self._notes), semitones)
        return self

    def octave_shift(self, octaves: int) -> Chord:
        """Transpose every note by whole octaves."""
        return self.transpose(octaves * SEMITONES_PER_OCTAVE)

    def invert(self, root_note_index: int) -> Chord:
        """
        Lift the first root_note_index notes up one octave each.

        root_note_index == len(chord) is allowed and lifts every note.

        Args:
            root_note_index: How many notes, from the first, to shift up.
                In other words, the index of the new root note.

        Raises:
            ValueError: If root_note_index is negative or greater than the
                number of notes, or a lifted note would leave the MIDI range.
                Nothing is shifted.
        """
        if root_note_index < 0 or root_note_index > len(self._notes):
            raise ValueError(
                ErrorMessages.INVALID_INVERSION.format(length=len(self._notes), index=root_note_index)
            )
        check_shift(self._notes[:root_note_index], SEMITONES_PER_OCTAVE)

        for i in range(root_note_index):
            self.modify_specific_note(i, lambda note: note.octave_shift(1))
        logger.debug("Inverted chord, lifted %d of %d notes", root_note_index, len(self._notes))
        return self

    @staticmethod
    def stack_chords(bottom_chord: Chord, top_chord: Chord) -> Chord:
        """
        Stack top_chord on top of bottom_chord.

        The notes of top_chord are appended to bottom_chord in their current
        order. They are shared, not copied: transposing top_chord afterwards
        also moves those notes inside bottom_chord.

        Returns:
            bottom_chord, with top_chord's notes on top
        """
        # Snapshot first, bottom_chord may be top_chord
        top_notes = list(top_chord.notes)
        for note in top_notes:
            bottom_chord.append_note(note)
        logger.debug("Stacked %d notes onto chord", len(top_notes))
        return bottom_chord

    def sort_by_pitch(self) -> Chord:
        """Reorder the stored notes by ascending pitch."""
        self._notes.sort()
        return self

    def render(self) -> str:
        """Format the notes in pitch order without reordering the chord."""
        return f"Chord: [{', '.join(note.pitch for note in sorted(self._notes))}]"

    def __str__(self) -> str:
        # Sorts the stored notes as a side effect
        return self.sort_by_pitch().render()

    def __repr__(self) -> str:
        return f"Chord({self._notes!r})"

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)
