"""
Core music primitives - the layer the mode operations compose on.

- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Distance between pitches in semitones
- Note: A pitch class in an octave, convertible to/from MIDI
- Pcset: A pitch-class set decoded from its 12-bit chroma
- ScaleType / Scale: Interval patterns and their resolved form
- ChordQuality / Chord: Interval stacks and their resolved form
"""

from chuk_mcp_modes.core.chord import (
    CHORD_QUALITIES,
    Chord,
    ChordQuality,
    chord_formula,
    get_chord,
    get_quality,
)
from chuk_mcp_modes.core.pcset import (
    EMPTY_CHROMA,
    EMPTY_SET,
    Pcset,
    chroma_from_num,
    chroma_rotations,
    chroma_to_intervals,
    chroma_to_num,
    get_pcset,
    is_chroma,
    rotate,
)
from chuk_mcp_modes.core.pitch import Interval, Note, PitchClass
from chuk_mcp_modes.core.scale import (
    NO_SCALE,
    SCALE_TYPES,
    Scale,
    ScaleType,
    get_scale,
    get_scale_type,
)

__all__ = [
    # Pitch
    "PitchClass",
    "Interval",
    "Note",
    # Pitch-class sets
    "Pcset",
    "EMPTY_CHROMA",
    "EMPTY_SET",
    "chroma_from_num",
    "chroma_to_num",
    "chroma_to_intervals",
    "chroma_rotations",
    "get_pcset",
    "is_chroma",
    "rotate",
    # Scale
    "ScaleType",
    "Scale",
    "SCALE_TYPES",
    "NO_SCALE",
    "get_scale",
    "get_scale_type",
    # Chord
    "ChordQuality",
    "Chord",
    "CHORD_QUALITIES",
    "chord_formula",
    "get_chord",
    "get_quality",
]
