"""
Scale rotations - every mode of an arbitrary scale.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_modes.core.pcset import chroma_rotations
from chuk_mcp_modes.core.scale import Scale, get_scale


def scale_modes(descriptor: str | Sequence[str] | Scale) -> list[Scale]:
    """
    All rotations of a scale, each resolved back to a scale.

    Rotation 0 is the scale itself; rotation k starts on the scale's
    (k+1)th member. Rotations matching no known scale type come back with
    an empty name. An unknown descriptor gives an empty list.

    Example:
        [s.name for s in scale_modes("C major")]
        # => ['major', 'dorian', 'phrygian', 'lydian', 'mixolydian', 'aeolian', 'locrian']
    """
    chroma = get_scale(descriptor).chroma
    return [get_scale(rotation) for rotation in chroma_rotations(chroma)]
