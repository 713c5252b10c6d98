"""
Constants and enums for the modes system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal

# Octave used for a note name given without one (C = C4 = MIDI 60)
DEFAULT_OCTAVE = 4

# Pitch classes per octave, and the semitone span of one chord layer
PITCH_CLASSES = 12
OCTAVE_SEMITONES = 12

# Notes in a diatonic mode
DIATONIC_DEGREES = 7


class Step(str, Enum):
    """Scale step between adjacent degrees."""

    HALF = "H"  # 1 semitone
    WHOLE = "W"  # 2 semitones

    @property
    def semitones(self) -> int:
        return 1 if self is Step.HALF else 2


# Per-degree triad shorthand used by the chord tables
TriadSymbol = Literal["M", "m", "o"]


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_MODE = "Unrecognized mode: '{name}'."
    DUPLICATE_MODE_KEY = (
        "Mode key '{key}' already registered for '{existing}', cannot map to '{name}'."
    )
    INVALID_OCTAVES = "Invalid octave count: {octaves}. Must be at least 1."
    MODE_NOT_FOUND = "Mode '{name}' not found."
    SCALE_NOT_FOUND = "Scale '{scale}' not found."
