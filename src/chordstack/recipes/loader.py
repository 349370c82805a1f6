"""
Recipe loader - discovers and loads chord recipes.

Recipes can come from:
1. Built-in library (shipped with package)
2. Project recipes (user's project/recipes directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chordstack.constants import ErrorMessages
from chordstack.models.chord import ChordRecipe, RecipeMetadata

logger = logging.getLogger(__name__)


def check_recipe_name(name: str) -> str:
    """Reject names that would resolve outside the recipe directories."""
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise ValueError(ErrorMessages.INVALID_RECIPE_NAME.format(name=name))
    return name


class RecipeLoader:
    """
    Discovers and loads recipe definitions.

    Recipes are loaded from YAML files in the library and project directories.
    Project recipes override library recipes with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the recipe loader.

        Args:
            library_path: Path to built-in recipe library
            project_path: Path to project recipes directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ChordRecipe] = {}

    def list_recipes(self) -> list[RecipeMetadata]:
        """
        List all available recipes, sorted by name.

        Project recipes take precedence over library recipes.
        """
        recipes: dict[str, RecipeMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                recipe = self._load_recipe_file(path)
                if recipe:
                    recipes[recipe.name] = RecipeMetadata.from_recipe(recipe)

        return [recipes[name] for name in sorted(recipes)]

    def get_recipe(self, name: str) -> ChordRecipe | None:
        """
        Get a recipe by name.

        Project recipes take precedence over library recipes.

        Args:
            name: Recipe name

        Returns:
            ChordRecipe if found, None otherwise

        Raises:
            ValueError: If name contains a path separator
        """
        check_recipe_name(name)
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                recipe = self._load_recipe_file(path)
                if recipe:
                    self._cache[name] = recipe
                    return recipe

        return None

    def save_to_project(self, recipe: ChordRecipe) -> Path:
        """
        Write a recipe into the project directory.

        Raises:
            ValueError: If no project path is configured, or the recipe name
                contains a path separator
        """
        if not self.project_path:
            raise ValueError("No project path configured")
        check_recipe_name(recipe.name)

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{recipe.name}.yaml"
        with open(path, "w") as f:
            yaml.safe_dump(recipe.to_yaml_dict(), f, sort_keys=False)

        self._cache.pop(recipe.name, None)
        return path

    def _load_recipe_file(self, path: Path) -> ChordRecipe | None:
        """Load a recipe from a YAML file, or None if it is unreadable."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return ChordRecipe.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError):
            logger.warning("Skipping unreadable recipe file %s", path, exc_info=True)
            return None
