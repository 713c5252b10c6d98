"""
CHUK Modes - the seven diatonic modes as pitch-class sets.

    from chuk_mcp_modes import mode, chord_notes, mode_to_chords, scale_modes

    mode("minor").name                 # 'aeolian'
    chord_notes("C4", "maj7", 2)       # ['C4', 'E4', 'G4', 'B4', 'C5', ...]
    mode_to_chords("dorian", "D")[0]   # ['D', 'F', 'A']
    [s.name for s in scale_modes("C major")][:2]  # ['major', 'dorian']
"""

from chuk_mcp_modes.models import NO_MODE, Mode, ModeDefinition
from chuk_mcp_modes.modes import (
    ByEntity,
    ByName,
    DuplicateModeKeyError,
    UnknownModeError,
    chord_notes,
    entries,
    mode,
    mode_names,
    mode_steps,
    mode_to_chords,
    scale_modes,
)

__all__ = [
    "Mode",
    "ModeDefinition",
    "NO_MODE",
    "ByName",
    "ByEntity",
    "mode",
    "entries",
    "mode_names",
    "mode_steps",
    "chord_notes",
    "mode_to_chords",
    "scale_modes",
    "UnknownModeError",
    "DuplicateModeKeyError",
]
