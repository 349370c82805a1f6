"""
Recipe tools - MCP tools for recipe discovery, application and saving.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chordstack.constants import ErrorMessages
from chordstack.models import ChordRecipe
from chordstack.recipes import RecipeLoader
from chordstack.tools.chords import chord_payload
from chordstack.workbench import ChordWorkbench

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_recipe_tools(
    mcp: ChukMCPServer,
    workbench: ChordWorkbench,
    loader: RecipeLoader,
) -> dict[str, Any]:
    """
    Register recipe tools with the MCP server.

    Args:
        mcp: The MCP server instance
        workbench: The chord workbench
        loader: The recipe loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_list_recipes() -> str:
        """
        List available chord recipes.

        Returns:
            JSON string with recipe names, descriptions and intervals
        """
        try:
            recipes = [meta.model_dump() for meta in loader.list_recipes()]
            return json.dumps({"status": "success", "count": len(recipes), "recipes": recipes})
        except Exception as e:
            logger.exception("Failed to list recipes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_list_recipes"] = chord_list_recipes

    @mcp.tool  # type: ignore[arg-type]
    async def chord_describe_recipe(recipe: str) -> str:
        """
        Describe a chord recipe.

        Args:
            recipe: Recipe name (e.g. 'major', 'dominant-7')

        Returns:
            JSON string with recipe details and its total span in semitones
        """
        try:
            found = loader.get_recipe(recipe)
            if found is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.RECIPE_NOT_FOUND.format(name=recipe)}
                )
            return json.dumps(
                {"status": "success", "recipe": found.to_yaml_dict(), "span": found.span()}
            )
        except Exception as e:
            logger.exception("Failed to describe recipe")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_describe_recipe"] = chord_describe_recipe

    @mcp.tool  # type: ignore[arg-type]
    async def chord_apply_recipe(name: str, recipe: str) -> str:
        """
        Stack a recipe's intervals on a chord's last note.

        Args:
            name: Chord name
            recipe: Recipe name

        Returns:
            JSON string with updated chord

        Example:
            chord_create(name="g7", root="G3")
            chord_apply_recipe(name="g7", recipe="dominant-7")
        """
        try:
            chord = workbench.require(name)
            found = loader.get_recipe(recipe)
            if found is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.RECIPE_NOT_FOUND.format(name=recipe)}
                )
            found.apply(chord)
            return json.dumps({"status": "success", "chord": chord_payload(name, chord)})
        except Exception as e:
            logger.exception("Failed to apply recipe")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_apply_recipe"] = chord_apply_recipe

    @mcp.tool  # type: ignore[arg-type]
    async def chord_save_recipe(recipe: str, intervals: list[str], description: str = "") -> str:
        """
        Save an interval stack as a project recipe.

        A project recipe with a library recipe's name replaces it.

        Args:
            recipe: Recipe name, used as the file name
            intervals: Interval symbols stacked in order (e.g. ["M3", "m3", "m3"])
            description: Optional description

        Returns:
            JSON string with the saved recipe and its path

        Example:
            chord_save_recipe(recipe="add-9", intervals=["M3", "m3", "M3", "m3"])
        """
        try:
            saved = ChordRecipe(name=recipe, description=description, intervals=intervals)
            path = loader.save_to_project(saved)
            return json.dumps(
                {"status": "success", "recipe": saved.to_yaml_dict(), "path": str(path)}
            )
        except Exception as e:
            logger.exception("Failed to save recipe")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_save_recipe"] = chord_save_recipe

    return tools
