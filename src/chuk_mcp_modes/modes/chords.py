"""
Chord operations over notes and modes.

- chord_notes: absolute note names of a chord, layered over several octaves
- mode_to_chords: the triad on every degree of a rooted mode
"""

from __future__ import annotations

from chuk_mcp_modes.constants import OCTAVE_SEMITONES, ErrorMessages
from chuk_mcp_modes.core.chord import chord_formula, get_chord
from chuk_mcp_modes.core.pitch import Note
from chuk_mcp_modes.core.scale import get_scale
from chuk_mcp_modes.modes.errors import UnknownModeError
from chuk_mcp_modes.modes.table import MODE_CHORD_QUALITIES


def transpose_formula(formula: list[int], octave: int) -> list[int]:
    """Shift every offset of a formula up by whole octaves."""
    return [offset + OCTAVE_SEMITONES * octave for offset in formula]


def chord_notes(root: str, chord_symbol: str, octaves: int = 1) -> list[str]:
    """
    Note names of a chord rooted at a note, repeated over octaves.

    Each octave is a block in formula order and blocks are concatenated
    lowest first; the result is grouped by octave, not sorted by pitch.
    An unknown chord symbol gives an empty list.

    Args:
        root: Note name; 'C' means C4
        chord_symbol: Chord symbol like 'maj7', 'm', '7'
        octaves: Number of octave layers (at least 1)

    Returns:
        len(formula) * octaves note names

    Example:
        chord_notes("C4", "maj7", 2)
        # => ['C4', 'E4', 'G4', 'B4', 'C5', 'E5', 'G5', 'B5']
    """
    if octaves < 1:
        raise ValueError(ErrorMessages.INVALID_OCTAVES.format(octaves=octaves))

    note = Note.parse(root)
    formula = chord_formula(chord_symbol)

    transposed: list[int] = []
    for octave in range(octaves):
        transposed.extend(transpose_formula(formula, octave))

    return [note.transpose(semitones).name for semitones in transposed]


def mode_to_chords(mode_name: str, root: str) -> list[list[str]]:
    """
    The triad on each degree of a mode built on root.

    mode_name must be one of the seven canonical lowercase names exactly;
    aliases and other casings are not accepted here. An octave on root
    ('D4') is ignored. Every chord is spelled like the root: flats when the
    root has a flat, sharps otherwise, so F ionian lists A# rather than Bb.

    Raises:
        UnknownModeError: If mode_name has no per-degree chord table
        ValueError: If root is not a note name

    Example:
        mode_to_chords("dorian", "D")
        # => [['D', 'F', 'A'], ['E', 'G', 'B'], ['F', 'A', 'C'], ...]
    """
    qualities = MODE_CHORD_QUALITIES.get(mode_name)
    if qualities is None:
        raise UnknownModeError(mode_name)

    tonic = Note.parse(root)
    scale = get_scale((tonic.pitch_class.spell(tonic.prefer_flats), mode_name))

    return [
        get_chord(note, quality, scale.prefer_flats).notes
        for note, quality in zip(scale.notes, qualities)
    ]
