#!/usr/bin/env python3
"""
Example: Building and transforming chords.

This walks through stacking intervals, inverting, transposing,
stacking chords and applying recipes from the built-in library.

Usage:
    python examples/build_chords.py
"""

from chordstack.core import Chord, Note
from chordstack.recipes import RecipeLoader


def main() -> None:
    """Demonstrate the chord API."""
    print("Chordstack Demo")
    print("=" * 40)
    print()

    # Root position triad, built interval by interval
    c_major = Chord(Note.from_name("C4")).append_major_chord()
    print(f"C major:           {c_major.render()}")

    # Inversions lift the first notes up an octave
    first = Chord(Note.from_name("C4")).append_major_chord().invert(1)
    second = Chord(Note.from_name("C4")).append_major_chord().invert(2)
    print(f"First inversion:   {first.render()}")
    print(f"Second inversion:  {second.render()}")

    # Triad helpers stack on the top note, not the root
    stacked = Chord(Note.from_name("C3")).add_perfect_5().append_major_chord()
    print(f"Fifth + triad:     {stacked.render()}")
    print()

    # Transposition moves every note
    d_major = Chord(Note.from_name("C4")).append_major_chord().transpose(2)
    print(f"Up a whole step:   {d_major.render()}")

    # Stacking shares notes between the two chords
    bass = Chord(Note.from_name("C2")).add_perfect_5()
    upper = Chord(Note.from_name("E4")).append_minor_chord()
    Chord.stack_chords(bass, upper)
    print(f"Stacked:           {bass.render()}")
    upper.transpose(1)
    print(f"After moving top:  {bass.render()}")
    print()

    # Recipes from the library
    loader = RecipeLoader()
    print("Recipes on G3:")
    for meta in loader.list_recipes():
        recipe = loader.get_recipe(meta.name)
        if recipe is None:
            continue
        chord = recipe.apply(Chord(Note.from_name("G3")))
        print(f"  {meta.name:<18} {' '.join(meta.intervals):<10} {chord}")


if __name__ == "__main__":
    main()
