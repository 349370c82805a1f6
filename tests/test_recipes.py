"""
Tests for chord models and the recipe system.

Tests cover:
- NoteModel and ChordModel snapshots
- ChordRecipe validation and application
- RecipeLoader discovery, precedence and saving
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chordstack.core import Chord, Note
from chordstack.models.chord import ChordModel, ChordRecipe, NoteModel, RecipeMetadata
from chordstack.recipes import RecipeLoader


class TestNoteModel:
    """Tests for NoteModel."""

    def test_from_note(self) -> None:
        model = NoteModel.from_note(Note(61))
        assert model.midi_key == 61
        assert model.pitch == "C#4"

    def test_range_validated(self) -> None:
        """Keys outside the MIDI range fail validation."""
        with pytest.raises(ValidationError):
            NoteModel(midi_key=200)


class TestChordModel:
    """Tests for ChordModel."""

    def test_from_chord_keeps_stacking_order(self) -> None:
        """Snapshot keeps insertion order and does not sort the chord."""
        chord = Chord(Note(67)).append_note(Note(60))
        model = ChordModel.from_chord(chord)
        assert model.midi_keys == [67, 60]
        assert model.display == "Chord: [C4, G4]"
        assert [n.midi_key for n in chord.notes] == [67, 60]

    def test_to_chord_copies_notes(self, c_major: Chord) -> None:
        """Rebuilt chord has equal keys but its own notes."""
        rebuilt = ChordModel.from_chord(c_major).to_chord()
        assert [n.midi_key for n in rebuilt.notes] == [60, 64, 67]
        rebuilt.transpose(1)
        assert [n.midi_key for n in c_major.notes] == [60, 64, 67]

    def test_to_chord_empty(self) -> None:
        with pytest.raises(ValueError):
            ChordModel().to_chord()


class TestChordRecipe:
    """Tests for ChordRecipe."""

    def test_create_recipe(self) -> None:
        recipe = ChordRecipe(name="test", intervals=["M3", "m3"])
        assert recipe.schema_version == "recipe/v1"
        assert [i.semitones for i in recipe.get_intervals()] == [4, 3]
        assert recipe.span() == 7

    def test_schema_alias(self) -> None:
        """The schema field loads from its YAML key."""
        recipe = ChordRecipe.model_validate({"schema": "recipe/v1", "name": "x", "intervals": ["P4"]})
        assert recipe.schema_version == "recipe/v1"

    def test_invalid_interval(self) -> None:
        """Unknown interval symbols fail validation."""
        with pytest.raises(ValidationError):
            ChordRecipe(name="bad", intervals=["M3", "nope"])

    def test_empty_intervals(self) -> None:
        with pytest.raises(ValidationError):
            ChordRecipe(name="empty", intervals=[])

    def test_apply_stacks_from_top(self) -> None:
        """Recipes stack on the last note, like the triad helpers."""
        recipe = ChordRecipe(name="sus4", intervals=["P4", "M2"])
        chord = Chord(Note(48)).add_perfect_5()
        assert recipe.apply(chord) is chord
        assert [n.midi_key for n in chord.notes] == [48, 55, 60, 62]

    def test_apply_is_atomic(self) -> None:
        """A recipe that would overflow leaves the chord unchanged."""
        recipe = ChordRecipe(name="tall", intervals=["M3", "m3"])
        chord = Chord(Note(122))
        with pytest.raises(ValueError):
            recipe.apply(chord)
        assert [n.midi_key for n in chord.notes] == [122]

    def test_to_yaml_dict(self) -> None:
        recipe = ChordRecipe(name="test", description="d", intervals=["m3"])
        assert recipe.to_yaml_dict() == {
            "schema": "recipe/v1",
            "name": "test",
            "description": "d",
            "intervals": ["m3"],
        }

    def test_metadata(self) -> None:
        recipe = ChordRecipe(name="test", description="d", intervals=["m3"])
        meta = RecipeMetadata.from_recipe(recipe)
        assert meta.name == "test"
        assert meta.intervals == ["m3"]


class TestRecipeLoader:
    """Tests for RecipeLoader."""

    def test_list_library(self, recipes_library_path: Path) -> None:
        """Built-in recipes are discovered."""
        loader = RecipeLoader(library_path=recipes_library_path)
        names = [meta.name for meta in loader.list_recipes()]
        assert "major" in names
        assert "minor" in names
        assert "dominant-7" in names
        assert names == sorted(names)

    def test_default_library_path(self) -> None:
        """Without a path the packaged library is used."""
        loader = RecipeLoader()
        assert loader.get_recipe("major") is not None

    def test_major_recipe_matches_append_major_chord(self, recipes_library_path: Path) -> None:
        loader = RecipeLoader(library_path=recipes_library_path)
        recipe = loader.get_recipe("major")
        assert recipe is not None
        chord = recipe.apply(Chord(Note(62)))
        expected = Chord(Note(62)).append_major_chord()
        assert [n.midi_key for n in chord.notes] == [n.midi_key for n in expected.notes]

    def test_minor_recipe_matches_append_minor_chord(self, recipes_library_path: Path) -> None:
        loader = RecipeLoader(library_path=recipes_library_path)
        recipe = loader.get_recipe("minor")
        assert recipe is not None
        chord = recipe.apply(Chord(Note(62)))
        expected = Chord(Note(62)).append_minor_chord()
        assert [n.midi_key for n in chord.notes] == [n.midi_key for n in expected.notes]

    def test_dominant_seventh(self, recipes_library_path: Path) -> None:
        """G3 dominant seventh is G B D F."""
        loader = RecipeLoader(library_path=recipes_library_path)
        recipe = loader.get_recipe("dominant-7")
        assert recipe is not None
        chord = recipe.apply(Chord(Note.from_name("G3")))
        assert str(chord) == "Chord: [G3, B3, D4, F4]"

    def test_missing_recipe(self, recipes_library_path: Path) -> None:
        loader = RecipeLoader(library_path=recipes_library_path)
        assert loader.get_recipe("nonexistent") is None

    def test_project_overrides_library(self, recipes_library_path: Path, temp_dir: Path) -> None:
        """A project recipe with a library name wins."""
        loader = RecipeLoader(library_path=recipes_library_path, project_path=temp_dir)
        loader.save_to_project(ChordRecipe(name="major", description="open", intervals=["P5", "M6"]))

        recipe = loader.get_recipe("major")
        assert recipe is not None
        assert recipe.intervals == ["P5", "M6"]

        listed = {meta.name: meta for meta in loader.list_recipes()}
        assert listed["major"].description == "open"

    def test_save_requires_project_path(self, recipes_library_path: Path) -> None:
        loader = RecipeLoader(library_path=recipes_library_path)
        with pytest.raises(ValueError):
            loader.save_to_project(ChordRecipe(name="x", intervals=["m3"]))

    def test_unreadable_file_skipped(self, temp_dir: Path) -> None:
        """Invalid YAML files are skipped, not raised."""
        (temp_dir / "broken.yaml").write_text("name: broken\nintervals: [zz]\n")
        (temp_dir / "good.yaml").write_text("name: good\nintervals: [m3]\n")
        loader = RecipeLoader(library_path=temp_dir)
        assert [meta.name for meta in loader.list_recipes()] == ["good"]
        assert loader.get_recipe("broken") is None

    def test_cache(self, recipes_library_path: Path, temp_dir: Path) -> None:
        """Recipes are cached, and saving a recipe replaces its cached entry."""
        loader = RecipeLoader(library_path=recipes_library_path, project_path=temp_dir)
        first = loader.get_recipe("major")
        assert loader.get_recipe("major") is first

        loader.save_to_project(ChordRecipe(name="major", intervals=["M3", "m3", "P4"]))
        assert loader.get_recipe("major").intervals == ["M3", "m3", "P4"]

    @pytest.mark.parametrize("name", ["../major", "a/b", "..\\major", "..", ""])
    def test_rejects_path_names(self, recipes_library_path: Path, name: str) -> None:
        """Names with path separators never reach the filesystem."""
        loader = RecipeLoader(library_path=recipes_library_path)
        with pytest.raises(ValueError):
            loader.get_recipe(name)

    def test_save_rejects_path_names(self, temp_dir: Path) -> None:
        project = temp_dir / "project"
        loader = RecipeLoader(library_path=temp_dir, project_path=project)
        with pytest.raises(ValueError):
            loader.save_to_project(ChordRecipe(name="../escaped", intervals=["m3"]))
        assert not (temp_dir / "escaped.yaml").exists()
