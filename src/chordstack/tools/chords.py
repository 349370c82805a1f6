"""
Chord tools - MCP tools for building and transforming chords.

Tools for creating named chords, stacking intervals, inverting,
transposing and stacking chords on each other.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chordstack.constants import ErrorMessages
from chordstack.core import Chord, Interval
from chordstack.models.chord import ChordModel
from chordstack.workbench import ChordWorkbench, parse_note

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def chord_payload(name: str, chord: Chord) -> dict[str, Any]:
    """JSON-ready view of a chord."""
    return {"name": name, "size": len(chord), **ChordModel.from_chord(chord).model_dump()}


def register_chord_tools(
    mcp: ChukMCPServer,
    workbench: ChordWorkbench,
) -> dict[str, Any]:
    """
    Register chord building tools with the MCP server.

    Args:
        mcp: The MCP server instance
        workbench: The chord workbench

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_create(name: str, root: str) -> str:
        """
        Create a new chord from a root note.

        Args:
            name: Unique name for the chord
            root: Root note as a label ('C4', 'F#3', 'Bb') or MIDI key ('60')

        Returns:
            JSON string with chord details

        Example:
            chord_create(name="tonic", root="C4")
        """
        try:
            chord = workbench.create(name, root)
            return json.dumps({"status": "success", "chord": chord_payload(name, chord)})
        except Exception as e:
            logger.exception("Failed to create chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_create"] = chord_create

    @mcp.tool  # type: ignore[arg-type]
    async def chord_get(name: str) -> str:
        """
        Get chord details.

        Notes are listed in stacking order. The display field is the
        pitch-sorted rendering and does not reorder the chord.

        Args:
            name: Chord name

        Returns:
            JSON string with chord details
        """
        try:
            chord = workbench.get(name)
            if chord is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.CHORD_NOT_FOUND.format(name=name)}
                )
            return json.dumps({"status": "success", "chord": chord_payload(name, chord)})
        except Exception as e:
            logger.exception("Failed to get chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_get"] = chord_get

    @mcp.tool  # type: ignore[arg-type]
    async def chord_list() -> str:
        """
        List all chords on the workbench.

        Returns:
            JSON string with chord names and renderings
        """
        try:
            chords = [
                {"name": name, "display": workbench.require(name).render()}
                for name in workbench.list_chords()
            ]
            return json.dumps({"status": "success", "count": len(chords), "chords": chords})
        except Exception as e:
            logger.exception("Failed to list chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_list"] = chord_list

    @mcp.tool  # type: ignore[arg-type]
    async def chord_delete(name: str) -> str:
        """
        Delete a chord from the workbench.

        Args:
            name: Chord name

        Returns:
            JSON string with result
        """
        try:
            if not workbench.delete(name):
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.CHORD_NOT_FOUND.format(name=name)}
                )
            return json.dumps({"status": "success", "message": f"Deleted chord '{name}'."})
        except Exception as e:
            logger.exception("Failed to delete chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_delete"] = chord_delete

    @mcp.tool  # type: ignore[arg-type]
    async def chord_duplicate(name: str, new_name: str) -> str:
        """
        Copy a chord under a new name.

        The copy has its own notes; changing one chord leaves the other alone.

        Args:
            name: Chord to copy
            new_name: Name for the copy

        Returns:
            JSON string with the new chord
        """
        try:
            chord = workbench.duplicate(name, new_name)
            return json.dumps({"status": "success", "chord": chord_payload(new_name, chord)})
        except Exception as e:
            logger.exception("Failed to duplicate chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_duplicate"] = chord_duplicate

    @mcp.tool  # type: ignore[arg-type]
    async def chord_add_interval(name: str, interval: str) -> str:
        """
        Stack a note an interval above the chord's last note.

        Args:
            name: Chord name
            interval: Interval symbol ('m2', 'M2', 'm3', 'M3', 'P4', 'TT', 'P5', ...)
                or long name ('major_third')

        Returns:
            JSON string with updated chord

        Example:
            chord_add_interval(name="tonic", interval="M3")
        """
        try:
            chord = workbench.require(name).add_interval(Interval.parse(interval))
            return json.dumps({"status": "success", "chord": chord_payload(name, chord)})
        except Exception as e:
            logger.exception("Failed to add interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_add_interval"] = chord_add_interval

    @mcp.tool  # type: ignore[arg-type]
    async def chord_append_note(name: str, note: str) -> str:
        """
        Append an arbitrary note to the top of the chord.

        Args:
            name: Chord name
            note: Note label ('E5') or MIDI key ('76')

        Returns:
            JSON string with updated chord
        """
        try:
            chord = workbench.require(name).append_note(parse_note(note))
            return json.dumps({"status": "success", "chord": chord_payload(name, chord)})
        except Exception as e:
            logger.exception("Failed to append note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_append_note"] = chord_append_note

    @mcp.tool  # type: ignore[arg-type]
    async def chord_append_triad(name: str, quality: str = "major") -> str:
        """
        Stack a major or minor triad on the chord's last note.

        The triad is built from the current top note, not from the root.

        Args:
            name: Chord name
            quality: 'major' or 'minor'

        Returns:
            JSON string with updated chord
        """
        try:
            chord = workbench.require(name)
            if quality == "major":
                chord.append_major_chord()
            elif quality == "minor":
                chord.append_minor_chord()
            else:
                raise ValueError(ErrorMessages.UNKNOWN_TRIAD.format(quality=quality))
            return json.dumps({"status": "success", "chord": chord_payload(name, chord)})
        except Exception as e:
            logger.exception("Failed to append triad")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_append_triad"] = chord_append_triad

    @mcp.tool  # type: ignore[arg-type]
    async def chord_modify_note(name: str, index: int, semitones: int) -> str:
        """
        Transpose a single note of the chord.

        Args:
            name: Chord name
            index: Position of the note in stacking order (0-based)
            semitones: Semitones to move the note (negative moves down)

        Returns:
            JSON string with updated chord
        """
        try:
            chord = workbench.require(name)
            chord.modify_specific_note(index, lambda note: note.transpose(semitones))
            return json.dumps({"status": "success", "chord": chord_payload(name, chord)})
        except Exception as e:
            logger.exception("Failed to modify note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_modify_note"] = chord_modify_note

    @mcp.tool  # type: ignore[arg-type]
    async def chord_invert(name: str, root_note_index: int) -> str:
        """
        Invert a chord by lifting its first notes up an octave.

        Args:
            name: Chord name
            root_note_index: Number of notes, from the first, to lift.
                0 leaves the chord alone; the chord size lifts every note.

        Returns:
            JSON string with updated chord

        Example:
            chord_invert(name="tonic", root_note_index=1)  # first inversion
        """
        try:
            chord = workbench.require(name).invert(root_note_index)
            return json.dumps({"status": "success", "chord": chord_payload(name, chord)})
        except Exception as e:
            logger.exception("Failed to invert chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_invert"] = chord_invert

    @mcp.tool  # type: ignore[arg-type]
    async def chord_transpose(name: str, semitones: int) -> str:
        """
        Transpose every note of a chord.

        Args:
            name: Chord name
            semitones: Semitones to move (negative moves down)

        Returns:
            JSON string with updated chord
        """
        try:
            chord = workbench.require(name).transpose(semitones)
            return json.dumps({"status": "success", "chord": chord_payload(name, chord)})
        except Exception as e:
            logger.exception("Failed to transpose chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_transpose"] = chord_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def chord_octave_shift(name: str, octaves: int) -> str:
        """
        Shift every note of a chord by whole octaves.

        Args:
            name: Chord name
            octaves: Octaves to move (negative moves down)

        Returns:
            JSON string with updated chord
        """
        try:
            chord = workbench.require(name).octave_shift(octaves)
            return json.dumps({"status": "success", "chord": chord_payload(name, chord)})
        except Exception as e:
            logger.exception("Failed to shift chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_octave_shift"] = chord_octave_shift

    @mcp.tool  # type: ignore[arg-type]
    async def chord_stack(bottom: str, top: str) -> str:
        """
        Stack one chord on top of another.

        The top chord's notes are appended to the bottom chord. The notes
        are shared afterwards: transposing the top chord also moves them
        inside the bottom chord. Duplicate the top chord first to avoid this.

        Args:
            bottom: Name of the chord that receives the notes
            top: Name of the chord whose notes are added

        Returns:
            JSON string with the updated bottom chord
        """
        try:
            chord = workbench.stack(bottom, top)
            return json.dumps({"status": "success", "chord": chord_payload(bottom, chord)})
        except Exception as e:
            logger.exception("Failed to stack chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_stack"] = chord_stack

    @mcp.tool  # type: ignore[arg-type]
    async def chord_render(name: str) -> str:
        """
        Render a chord as text, e.g. 'Chord: [C4, E4, G4]'.

        Rendering sorts the chord's notes by pitch, so the stacking order
        afterwards is the pitch order.

        Args:
            name: Chord name

        Returns:
            JSON string with the rendering
        """
        try:
            chord = workbench.require(name)
            return json.dumps({"status": "success", "name": name, "display": str(chord)})
        except Exception as e:
            logger.exception("Failed to render chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_render"] = chord_render

    return tools
