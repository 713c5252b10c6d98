"""
Diatonic modes - table, registry, lookups and derived chord/scale operations.
"""

from chuk_mcp_modes.modes.chords import chord_notes, mode_to_chords
from chuk_mcp_modes.modes.errors import DuplicateModeKeyError, UnknownModeError
from chuk_mcp_modes.modes.lookup import (
    ByEntity,
    ByName,
    ModeQuery,
    entries,
    mode,
    mode_names,
    mode_steps,
)
from chuk_mcp_modes.modes.registry import REGISTRY, ModeRegistry
from chuk_mcp_modes.modes.rotations import scale_modes
from chuk_mcp_modes.modes.table import (
    MODE_CHORD_QUALITIES,
    MODE_DEFINITIONS,
    MODE_NAMES,
    MODE_STEPS,
)

__all__ = [
    # Lookup
    "mode",
    "entries",
    "mode_names",
    "mode_steps",
    "ByName",
    "ByEntity",
    "ModeQuery",
    # Registry
    "ModeRegistry",
    "REGISTRY",
    # Tables
    "MODE_DEFINITIONS",
    "MODE_NAMES",
    "MODE_CHORD_QUALITIES",
    "MODE_STEPS",
    # Operations
    "chord_notes",
    "mode_to_chords",
    "scale_modes",
    # Errors
    "UnknownModeError",
    "DuplicateModeKeyError",
]
