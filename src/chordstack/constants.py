"""
Constants for the chord system.

No magic numbers - MIDI bounds, octave size and error messages live here.
"""

# MIDI key range (inclusive)
MIDI_MIN = 0
MIDI_MAX = 127

SEMITONES_PER_OCTAVE = 12

# Octave assumed when a note name carries none ("C" -> C4)
DEFAULT_OCTAVE = 4


class ErrorMessages:
    """Standardized error messages."""

    KEY_OUT_OF_RANGE = "MIDI key {key} is out of range ({low}-{high})."
    INDEX_OUT_OF_RANGE = "Note index {index} is out of range for a chord of {length} notes."
    INVALID_INVERSION = "The number of inversions this chord has is {length}, got {index}."
    EMPTY_CHORD = "Chord has no notes to stack an interval on."
    UNKNOWN_PITCH = "Unknown pitch class: {name}"
    UNKNOWN_NOTE = "Cannot parse note name: '{name}'. Expected format like 'C4', 'F#3' or 'Bb'."
    UNKNOWN_INTERVAL = "Unknown interval: '{symbol}'."
    UNKNOWN_TRIAD = "Unknown triad quality: '{quality}'. Expected 'major' or 'minor'."
    CHORD_NOT_FOUND = "Chord '{name}' not found."
    CHORD_EXISTS = "Chord '{name}' already exists."
    RECIPE_NOT_FOUND = "Recipe '{name}' not found."
    INVALID_RECIPE_NAME = "Invalid recipe name: '{name}'. Names cannot contain path separators."
