"""
Tests for core pitch primitives.

Tests cover:
- PitchClass and Interval (pitch.py)
- Note (note.py)
- Transposable (transform.py)
"""

import pytest

from chordstack.core import Chord, Interval, Note, PitchClass, Transposable


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.E == 4
        assert PitchClass.G == 7
        assert PitchClass.B == 11

    def test_from_midi(self) -> None:
        """Extract pitch class from MIDI key."""
        assert PitchClass.from_midi(60) == PitchClass.C
        assert PitchClass.from_midi(69) == PitchClass.A
        assert PitchClass.from_midi(0) == PitchClass.C

    def test_parse(self) -> None:
        """Parse pitch class from string."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("C#") == PitchClass.Cs
        assert PitchClass.parse("Db") == PitchClass.Cs
        assert PitchClass.parse("fs") == PitchClass.Fs

    def test_parse_unknown(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError):
            PitchClass.parse("H")

    def test_spell(self) -> None:
        """Spell pitch class as string."""
        assert PitchClass.Cs.spell() == "C#"
        assert PitchClass.Cs.spell(prefer_flats=True) == "Db"


class TestInterval:
    """Tests for Interval class."""

    def test_named_intervals(self) -> None:
        """Named intervals have correct values."""
        assert Interval.MINOR_SECOND.semitones == 1
        assert Interval.MAJOR_SECOND.semitones == 2
        assert Interval.MINOR_THIRD.semitones == 3
        assert Interval.MAJOR_THIRD.semitones == 4
        assert Interval.PERFECT_FOURTH.semitones == 5
        assert Interval.TRITONE.semitones == 6
        assert Interval.PERFECT_FIFTH.semitones == 7
        assert Interval.OCTAVE.semitones == 12

    def test_short_aliases(self) -> None:
        """Short aliases are the same intervals."""
        assert Interval.m3 == Interval.MINOR_THIRD
        assert Interval.M3 == Interval.MAJOR_THIRD
        assert Interval.TT == Interval.TRITONE
        assert Interval.P8 == Interval.OCTAVE

    def test_parse_short(self) -> None:
        """Short names parse case-sensitively."""
        assert Interval.parse("m3").semitones == 3
        assert Interval.parse("M3").semitones == 4
        assert Interval.parse("P5").semitones == 7

    def test_parse_long(self) -> None:
        """Long names parse in any case."""
        assert Interval.parse("major_third") == Interval.MAJOR_THIRD
        assert Interval.parse("Perfect Fifth") == Interval.PERFECT_FIFTH

    def test_parse_unknown(self) -> None:
        """Unknown interval symbols raise ValueError."""
        with pytest.raises(ValueError):
            Interval.parse("x9")

    def test_str(self) -> None:
        """String form is the short name."""
        assert str(Interval.MAJOR_THIRD) == "M3"
        assert str(Interval(19)) == "P5+1oct"

    def test_str_descending(self) -> None:
        """Descending intervals carry a leading minus sign."""
        assert str(Interval(-3)) == "-m3"
        assert str(Interval(-19)) == "-P5+1oct"

    def test_ordering_and_hash(self) -> None:
        """Intervals compare and hash by semitones."""
        assert Interval.MINOR_THIRD < Interval.MAJOR_THIRD
        assert len({Interval.m3, Interval.MINOR_THIRD, Interval(3)}) == 1


class TestNote:
    """Tests for Note class."""

    def test_middle_c(self) -> None:
        """MIDI 60 is C4."""
        note = Note(60)
        assert note.midi_key == 60
        assert note.octave == 4
        assert note.pitch_class == PitchClass.C
        assert note.pitch == "C4"

    def test_pitch_labels(self) -> None:
        """Labels combine pitch class and octave."""
        assert Note(66).pitch == "F#4"
        assert Note(0).pitch == "C-1"
        assert Note(127).pitch == "G9"

    def test_out_of_range(self) -> None:
        """Keys outside 0-127 are rejected."""
        with pytest.raises(ValueError):
            Note(-1)
        with pytest.raises(ValueError):
            Note(128)

    def test_from_name(self) -> None:
        """Parse notes from labels."""
        assert Note.from_name("C4").midi_key == 60
        assert Note.from_name("A4").midi_key == 69
        assert Note.from_name("Bb3").midi_key == 58
        assert Note.from_name("c#5").midi_key == 73
        assert Note.from_name("C-1").midi_key == 0

    def test_from_name_default_octave(self) -> None:
        """Octave defaults to 4."""
        assert Note.from_name("E").midi_key == 64

    def test_from_name_invalid(self) -> None:
        """Unparseable labels raise ValueError."""
        with pytest.raises(ValueError):
            Note.from_name("middle C")
        with pytest.raises(ValueError):
            Note.from_name("G#9")

    def test_transpose(self) -> None:
        """Transpose mutates in place and returns the note."""
        note = Note(60)
        assert note.transpose(4) is note
        assert note.midi_key == 64
        note.transpose(-5)
        assert note.midi_key == 59

    def test_transpose_out_of_range(self) -> None:
        """Out-of-range transposition leaves the key unchanged."""
        note = Note(127)
        with pytest.raises(ValueError):
            note.transpose(1)
        assert note.midi_key == 127

    def test_octave_shift(self) -> None:
        """Octave shift moves by 12 semitones per octave."""
        note = Note(60)
        note.octave_shift(1)
        assert note.midi_key == 72
        note.octave_shift(-2)
        assert note.midi_key == 48

    def test_ordering(self) -> None:
        """Notes order by key."""
        assert Note(60) < Note(64)
        assert Note(67) > Note(64)
        assert sorted([Note(67), Note(60), Note(64)]) == [Note(60), Note(64), Note(67)]

    def test_equality_and_hash(self) -> None:
        """Equal keys compare equal; notes are unhashable."""
        assert Note(60) == Note(60)
        assert Note(60) != Note(61)
        with pytest.raises(TypeError):
            hash(Note(60))


class TestTransposable:
    """Notes and chords share the transposable capability."""

    def test_note_is_transposable(self) -> None:
        assert isinstance(Note(60), Transposable)

    def test_chord_is_transposable(self) -> None:
        assert isinstance(Chord(Note(60)), Transposable)

    def test_transpose_through_protocol(self) -> None:
        """Mixed notes and chords transpose uniformly."""
        note = Note(60)
        chord = Chord(Note(48)).add_perfect_5()
        items: list[Transposable] = [note, chord]
        for item in items:
            item.transpose(2)
        assert note.midi_key == 62
        assert [n.midi_key for n in chord.notes] == [50, 57]
