"""
Pitch primitives - PitchClass, Interval and Note.

These are the foundational types for all pitch-related operations.
PitchClass represents the 12 chromatic pitches (octave-independent).
Interval represents the distance between pitches in semitones.
Note is a pitch class placed in an octave, convertible to and from MIDI.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering

from chuk_mcp_modes.constants import DEFAULT_OCTAVE

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

# Natural letters and their semitone offset from C
_LETTER_OFFSETS: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

# Letter, accidentals, optional octave: "C", "F#", "Bb3", "Ebb-1"
_NOTE_PATTERN = re.compile(r"^([A-Ga-g])(#*|b*)(-?\d+)?$")

# Interval short names by semitone class
_INTERVAL_NAMES: dict[int, str] = {
    0: "P1",
    1: "m2",
    2: "M2",
    3: "m3",
    4: "M3",
    5: "P4",
    6: "TT",
    7: "P5",
    8: "m6",
    9: "M6",
    10: "m7",
    11: "M7",
}


def _split_note_name(name: str) -> tuple[int, str, int | None]:
    """
    Split a note name into (semitone offset from C, accidentals, octave).

    The offset includes accidentals and may fall outside 0-11 (Cb, B#).
    """
    match = _NOTE_PATTERN.match(name.strip())
    if match is None:
        raise ValueError(f"Unknown note name: {name}")
    letter, accidentals, octave = match.groups()
    alteration = accidentals.count("#") - accidentals.count("b")
    offset = _LETTER_OFFSETS[letter.upper()] + alteration
    return offset, accidentals, int(octave) if octave is not None else None


def prefers_flats(name: str) -> bool:
    """True when a note name is spelled with flats (so derived notes should be too)."""
    try:
        _, accidentals, _ = _split_note_name(name)
    except ValueError:
        return False
    return "b" in accidentals


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern, handled at serialization.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def to_midi(self, octave: int = DEFAULT_OCTAVE) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a string like 'C', 'C#', 'Db', 'cbb'.

        Enum names (Cs, Ds, ...) are accepted too. An octave number is not.
        """
        name = name.strip()

        for member in cls:
            if member.name == name:
                return member

        offset, _, octave = _split_note_name(name)
        if octave is not None:
            raise ValueError(f"Unknown pitch class: {name}")
        return cls(offset % 12)


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Chroma members are named by their interval above the tonic,
    so this is how a pitch-class set becomes a readable interval list.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Short interval name (P1, m3, P5...), with octave suffix past P8."""
        mod = self._semitones % 12
        octaves = self._semitones // 12
        base = _INTERVAL_NAMES[mod]
        if octaves == 0:
            return base
        elif octaves == 1 and mod == 0:
            return "P8"
        else:
            return f"{base}+{octaves}oct" if octaves > 0 else f"{base}{octaves}oct"


@dataclass(frozen=True)
class Note:
    """
    A pitch class in a specific octave.

    Names round-trip through MIDI numbers: Note.from_midi(Note.parse(n).midi)
    gives back n whenever n is spelled the way from_midi spells it.

    Examples:
        Note.parse("C4").midi == 60
        Note.from_midi(70, prefer_flats=True).name == "Bb4"
    """

    pitch_class: PitchClass
    octave: int
    prefer_flats: bool = False

    @property
    def midi(self) -> int:
        """MIDI note number."""
        return self.pitch_class.to_midi(self.octave)

    @property
    def name(self) -> str:
        """Scientific pitch name, e.g. 'F#3'."""
        return f"{self.pitch_class.spell(self.prefer_flats)}{self.octave}"

    def transpose(self, semitones: int) -> Note:
        """Transpose by semitones, keeping the spelling preference."""
        return Note.from_midi(self.midi + semitones, prefer_flats=self.prefer_flats)

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_midi(cls, midi_note: int, prefer_flats: bool = False) -> Note:
        """Build a note from a MIDI number (60 = C4)."""
        return cls(PitchClass.from_midi(midi_note), midi_note // 12 - 1, prefer_flats)

    @classmethod
    def parse(cls, name: str, default_octave: int = DEFAULT_OCTAVE) -> Note:
        """
        Parse a note from a string like 'C4', 'Bb3', 'F#'.

        A name without an octave is placed in default_octave.
        Cb4 and B#3 are normalized through their MIDI number (B3 and C4).
        """
        offset, accidentals, octave = _split_note_name(name)
        if octave is None:
            octave = default_octave
        midi_note = (octave + 1) * 12 + offset
        return cls.from_midi(midi_note, prefer_flats="b" in accidentals)
