"""
Mode tools - MCP tools for mode lookup and mode-derived harmony.

Tools for looking up modes, listing them, and deriving chord notes,
per-degree chords and scale rotations.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_modes.constants import ErrorMessages
from chuk_mcp_modes.core.scale import Scale
from chuk_mcp_modes.models.mode import Mode
from chuk_mcp_modes.modes import (
    chord_notes,
    entries,
    mode,
    mode_steps,
    mode_to_chords,
    scale_modes,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _mode_summary(m: Mode) -> dict[str, Any]:
    return {
        "name": m.name,
        "mode_num": m.mode_num,
        "chroma": m.chroma,
        "intervals": list(m.intervals),
        "alt": m.alt,
        "triad": m.triad,
        "seventh": m.seventh,
        "aliases": list(m.aliases),
    }


def _scale_summary(s: Scale) -> dict[str, Any]:
    return {
        "name": s.name,
        "type": s.type,
        "chroma": s.chroma,
        "intervals": list(s.intervals),
        "aliases": list(s.aliases),
    }


def register_mode_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register mode tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_mode(name: str) -> str:
        """
        Get a diatonic mode by name or alias.

        Lookup is case-insensitive; 'major' and 'minor' are accepted.

        Args:
            name: Mode name or alias

        Returns:
            JSON string with the mode's chroma, intervals and tonic chords

        Example:
            music_get_mode(name="Dorian")
        """
        try:
            found = mode(name)
            if found.empty:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.MODE_NOT_FOUND.format(name=name)}
                )
            return json.dumps({"status": "success", "mode": _mode_summary(found)})
        except Exception as e:
            logger.exception("Failed to get mode")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_get_mode"] = music_get_mode

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_modes() -> str:
        """
        List the seven diatonic modes in order, ionian to locrian.

        Returns:
            JSON string with list of modes

        Example:
            music_list_modes()
        """
        try:
            modes = entries()
            return json.dumps(
                {
                    "status": "success",
                    "modes": [_mode_summary(m) for m in modes],
                    "count": len(modes),
                }
            )
        except Exception as e:
            logger.exception("Failed to list modes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_modes"] = music_list_modes

    @mcp.tool  # type: ignore[arg-type]
    async def music_mode_steps(name: str) -> str:
        """
        Get the whole/half step pattern of a mode.

        Args:
            name: Mode name or alias

        Returns:
            JSON string with the steps ('W' or 'H')

        Example:
            music_mode_steps(name="phrygian")
        """
        try:
            steps = mode_steps(name)
            if not steps:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.MODE_NOT_FOUND.format(name=name)}
                )
            return json.dumps(
                {"status": "success", "mode": mode(name).name, "steps": [s.value for s in steps]}
            )
        except Exception as e:
            logger.exception("Failed to get mode steps")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_mode_steps"] = music_mode_steps

    @mcp.tool  # type: ignore[arg-type]
    async def music_chord_notes(root: str, chord: str, octaves: int = 1) -> str:
        """
        Spell a chord from a root note across one or more octaves.

        Notes are grouped per octave, not sorted by pitch. An unknown
        chord symbol gives an empty note list.

        Args:
            root: Root note like 'C4' or 'Bb3' ('C' means C4)
            chord: Chord symbol like 'maj7', 'm7', '7', 'o'
            octaves: Number of octave layers (default 1)

        Returns:
            JSON string with note names

        Example:
            music_chord_notes(root="D4", chord="m7", octaves=2)
        """
        try:
            notes = chord_notes(root, chord, octaves)
            return json.dumps(
                {
                    "status": "success",
                    "root": root,
                    "chord": chord,
                    "octaves": octaves,
                    "notes": notes,
                }
            )
        except Exception as e:
            logger.exception("Failed to build chord notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_chord_notes"] = music_chord_notes

    @mcp.tool  # type: ignore[arg-type]
    async def music_mode_chords(mode: str, root: str) -> str:
        """
        Get the triad on every degree of a mode.

        The mode must be one of the canonical lowercase names
        (ionian, dorian, phrygian, lydian, mixolydian, aeolian, locrian).

        Args:
            mode: Canonical mode name
            root: Tonic pitch class like 'D' or 'Eb'

        Returns:
            JSON string with seven chords, each a list of note names

        Example:
            music_mode_chords(mode="dorian", root="D")
        """
        try:
            chords = mode_to_chords(mode, root)
            return json.dumps(
                {"status": "success", "mode": mode, "root": root, "chords": chords}
            )
        except Exception as e:
            logger.exception("Failed to build mode chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_mode_chords"] = music_mode_chords

    @mcp.tool  # type: ignore[arg-type]
    async def music_scale_modes(scale: str) -> str:
        """
        Get every rotation (mode) of a scale.

        Rotations that match no known scale type have an empty name.

        Args:
            scale: Scale like 'C major', 'A harmonic minor', or a type name

        Returns:
            JSON string with one entry per rotation

        Example:
            music_scale_modes(scale="C major")
        """
        try:
            rotations = scale_modes(scale)
            if not rotations:
                message = ErrorMessages.SCALE_NOT_FOUND.format(scale=scale)
                return json.dumps({"status": "error", "message": message})
            return json.dumps(
                {
                    "status": "success",
                    "scale": scale,
                    "modes": [_scale_summary(s) for s in rotations],
                    "count": len(rotations),
                }
            )
        except Exception as e:
            logger.exception("Failed to enumerate scale modes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_scale_modes"] = music_scale_modes

    return tools
