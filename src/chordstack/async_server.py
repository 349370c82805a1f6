#!/usr/bin/env python3
"""
Async Chord MCP Server using chuk-mcp-server

This server provides MCP tools for building and transforming chords.

The server provides tools for:
- Creating named chords from a root note
- Stacking intervals, triads and recipes on a chord's top note
- Inverting, transposing and octave-shifting chords
- Stacking chords on top of each other
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chordstack.recipes import RecipeLoader
from chordstack.tools import register_chord_tools, register_recipe_tools
from chordstack.workbench import ChordWorkbench

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chordstack")

# Paths - project recipes override the built-in library
BASE_PATH = Path.cwd()
RECIPES_DIR = BASE_PATH / "recipes"
RECIPES_LIBRARY_PATH = Path(__file__).parent / "recipes" / "library"

workbench = ChordWorkbench()
recipe_loader = RecipeLoader(
    library_path=RECIPES_LIBRARY_PATH,
    project_path=RECIPES_DIR,
)

# Register all tools
chord_tools = register_chord_tools(mcp, workbench)
recipe_tools = register_recipe_tools(mcp, workbench, recipe_loader)

# Export tool functions for direct access
chord_create = chord_tools["chord_create"]
chord_get = chord_tools["chord_get"]
chord_list = chord_tools["chord_list"]
chord_delete = chord_tools["chord_delete"]
chord_duplicate = chord_tools["chord_duplicate"]
chord_add_interval = chord_tools["chord_add_interval"]
chord_append_note = chord_tools["chord_append_note"]
chord_append_triad = chord_tools["chord_append_triad"]
chord_modify_note = chord_tools["chord_modify_note"]
chord_invert = chord_tools["chord_invert"]
chord_transpose = chord_tools["chord_transpose"]
chord_octave_shift = chord_tools["chord_octave_shift"]
chord_stack = chord_tools["chord_stack"]
chord_render = chord_tools["chord_render"]

chord_list_recipes = recipe_tools["chord_list_recipes"]
chord_describe_recipe = recipe_tools["chord_describe_recipe"]
chord_apply_recipe = recipe_tools["chord_apply_recipe"]
chord_save_recipe = recipe_tools["chord_save_recipe"]

logger.info("Chordstack MCP Server initialized")
logger.info(f"  Recipe library: {RECIPES_LIBRARY_PATH}")
logger.info(f"  Project recipes: {RECIPES_DIR}")
