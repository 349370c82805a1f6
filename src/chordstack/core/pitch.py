"""
Pitch primitives - PitchClass and Interval.

PitchClass names the 12 chromatic pitches (octave-independent) and gives
notes their labels. Interval is the distance a chord stacks between its
top note and the next one.
"""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering
from typing import ClassVar

from chordstack.constants import SEMITONES_PER_OCTAVE, ErrorMessages

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

# Long name -> short name, in ascending semitone order
_INTERVAL_NAMES: dict[str, str] = {
    "UNISON": "P1",
    "MINOR_SECOND": "m2",
    "MAJOR_SECOND": "M2",
    "MINOR_THIRD": "m3",
    "MAJOR_THIRD": "M3",
    "PERFECT_FOURTH": "P4",
    "TRITONE": "TT",
    "PERFECT_FIFTH": "P5",
    "MINOR_SIXTH": "m6",
    "MAJOR_SIXTH": "M6",
    "MINOR_SEVENTH": "m7",
    "MAJOR_SEVENTH": "M7",
    "OCTAVE": "P8",
}
_SHORT_NAMES: list[str] = list(_INTERVAL_NAMES.values())


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_key: int) -> PitchClass:
        """Extract pitch class from a MIDI key number."""
        return cls(midi_key % SEMITONES_PER_OCTAVE)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Enum names (Cs, Ds, ...) in any case
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(ErrorMessages.UNKNOWN_PITCH.format(name=name))


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Chords here are interval stacks: each appended note sits an interval
    above the current top note.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @classmethod
    def parse(cls, symbol: str) -> Interval:
        """
        Parse an interval from a symbol.

        Accepts short names ('m3', 'P5', 'TT') and long names in any case
        ('major_third', 'PERFECT_FIFTH'). Short names are case-sensitive,
        since 'm3' and 'M3' differ.
        """
        symbol = symbol.strip()
        if symbol in _SHORT_NAMES:
            return cls(_SHORT_NAMES.index(symbol))

        long_name = symbol.upper().replace(" ", "_").replace("-", "_")
        if long_name in _INTERVAL_NAMES:
            return cls(list(_INTERVAL_NAMES).index(long_name))

        raise ValueError(ErrorMessages.UNKNOWN_INTERVAL.format(symbol=symbol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        if 0 <= self._semitones <= SEMITONES_PER_OCTAVE:
            return f"Interval.{list(_INTERVAL_NAMES)[self._semitones]}"
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Short interval name, with an octave suffix for compound intervals."""
        if self._semitones < 0:
            return f"-{Interval(-self._semitones)}"
        if 0 <= self._semitones <= SEMITONES_PER_OCTAVE:
            return _SHORT_NAMES[self._semitones]
        octaves, mod = divmod(self._semitones, SEMITONES_PER_OCTAVE)
        return f"{_SHORT_NAMES[mod]}{octaves:+d}oct"


# Initialize class constants after class is defined
for _semitones, (_long, _short) in enumerate(_INTERVAL_NAMES.items()):
    _interval = Interval(_semitones)
    setattr(Interval, _long, _interval)
    setattr(Interval, _short, _interval)
del _semitones, _long, _short, _interval
