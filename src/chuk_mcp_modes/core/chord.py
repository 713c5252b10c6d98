"""
Chord primitives - ChordQuality and Chord.

Chords are stacks of intervals. Chord qualities define the interval pattern
and the symbols that name it ("m7", "Maj7", "o"...).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar

from .pitch import Interval, PitchClass, prefers_flats


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its intervals from the root.

    Intervals are measured from the root, not stacked, and kept in
    ascending order. For example, a major triad is root + M3 + P5
    (0, 4, 7 semitones).

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str = ""
    symbols: tuple[str, ...] = ()

    # Common chord qualities (defined after class)
    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]
    DIMINISHED: ClassVar[ChordQuality]
    AUGMENTED: ClassVar[ChordQuality]
    MAJOR_7: ClassVar[ChordQuality]
    MINOR_7: ClassVar[ChordQuality]
    DOMINANT_7: ClassVar[ChordQuality]
    DIMINISHED_7: ClassVar[ChordQuality]
    HALF_DIMINISHED_7: ClassVar[ChordQuality]
    EMPTY: ClassVar[ChordQuality]

    @property
    def formula(self) -> list[int]:
        """Semitone offsets from the root, ascending."""
        return [interval.semitones for interval in self.intervals]

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """Get all pitch classes in this chord, in formula order."""
        return [root.transpose(semitones) for semitones in self.formula]

    def __str__(self) -> str:
        return self.name or f"ChordQuality({self.intervals})"

    def __repr__(self) -> str:
        if self.name:
            return f"ChordQuality.{self.name.upper().replace(' ', '_').replace('-', '_')}"
        return f"ChordQuality({self.intervals!r})"


def _stack(*semitones: int) -> tuple[Interval, ...]:
    return tuple(Interval(s) for s in semitones)


# Define chord qualities
ChordQuality.MAJOR = ChordQuality(_stack(0, 4, 7), "major", ("M", "", "maj", "Major"))
ChordQuality.MINOR = ChordQuality(_stack(0, 3, 7), "minor", ("m", "min", "-"))
ChordQuality.DIMINISHED = ChordQuality(_stack(0, 3, 6), "diminished", ("o", "dim", "°"))
ChordQuality.AUGMENTED = ChordQuality(_stack(0, 4, 8), "augmented", ("aug", "+"))
ChordQuality.MAJOR_7 = ChordQuality(
    _stack(0, 4, 7, 11), "major 7", ("maj7", "Maj7", "M7", "Δ", "Δ7")
)
ChordQuality.MINOR_7 = ChordQuality(_stack(0, 3, 7, 10), "minor 7", ("m7", "min7", "-7"))
ChordQuality.DOMINANT_7 = ChordQuality(_stack(0, 4, 7, 10), "dominant 7", ("7", "dom"))
ChordQuality.DIMINISHED_7 = ChordQuality(_stack(0, 3, 6, 9), "diminished 7", ("o7", "dim7"))
ChordQuality.HALF_DIMINISHED_7 = ChordQuality(
    _stack(0, 3, 6, 10), "half-diminished 7", ("m7b5", "ø", "ø7")
)
ChordQuality.EMPTY = ChordQuality(())

CHORD_QUALITIES: tuple[ChordQuality, ...] = (
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
    ChordQuality.AUGMENTED,
    ChordQuality.MAJOR_7,
    ChordQuality.MINOR_7,
    ChordQuality.DOMINANT_7,
    ChordQuality.DIMINISHED_7,
    ChordQuality.HALF_DIMINISHED_7,
    ChordQuality(_stack(0, 2, 7), "sus2", ("sus2",)),
    ChordQuality(_stack(0, 5, 7), "sus4", ("sus4", "sus")),
    ChordQuality(_stack(0, 4, 7, 9), "major 6", ("6", "M6")),
    ChordQuality(_stack(0, 3, 7, 9), "minor 6", ("m6",)),
    ChordQuality(_stack(0, 3, 7, 11), "minor-major 7", ("mMaj7", "mM7")),
    ChordQuality(_stack(0, 4, 7, 14), "add 9", ("add9",)),
    ChordQuality(_stack(0, 4, 7, 10, 14), "dominant 9", ("9",)),
    ChordQuality(_stack(0, 4, 7, 11, 14), "major 9", ("maj9", "Maj9")),
    ChordQuality(_stack(0, 3, 7, 10, 14), "minor 9", ("m9",)),
)

# Symbols are case-sensitive: "M" is major, "m" is minor
_QUALITIES_BY_SYMBOL = MappingProxyType(
    {symbol: quality for quality in CHORD_QUALITIES for symbol in quality.symbols}
)


def get_quality(symbol: str) -> ChordQuality | None:
    """Find a chord quality by symbol."""
    return _QUALITIES_BY_SYMBOL.get(symbol)


def chord_formula(symbol: str) -> list[int]:
    """
    Semitone offsets of a chord symbol, or an empty list if unknown.

    chord_formula("maj7")  # => [0, 4, 7, 11]
    """
    quality = get_quality(symbol)
    return quality.formula if quality is not None else []


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord with a root pitch and quality.

    This is the resolved form - an actual chord that can be played.
    """

    root: PitchClass
    quality: ChordQuality
    prefer_flats: bool = False

    @property
    def empty(self) -> bool:
        return not self.quality.intervals

    @property
    def symbol(self) -> str:
        """The quality's primary symbol ('' when empty)."""
        return self.quality.symbols[0] if self.quality.symbols else ""

    def get_pitches(self) -> list[PitchClass]:
        """Get all pitch classes in this chord."""
        return self.quality.get_pitches(self.root)

    @property
    def notes(self) -> list[str]:
        """Spelled pitch-class names, root first."""
        return [pitch.spell(self.prefer_flats) for pitch in self.get_pitches()]

    def __str__(self) -> str:
        return f"{self.root.spell(self.prefer_flats)}{self.symbol}"


def get_chord(root: str, symbol: str, prefer_flats: bool | None = None) -> Chord:
    """
    Resolve a chord from a root name and symbol.

    Spelling follows the root name unless prefer_flats is given, so chords
    built on the degrees of a flat key can keep the key's spelling.
    An unknown symbol gives a chord with no notes rather than an error;
    an unparsable root raises ValueError.
    """
    quality = get_quality(symbol) or ChordQuality.EMPTY
    if prefer_flats is None:
        prefer_flats = prefers_flats(root)
    return Chord(PitchClass.parse(root), quality, prefer_flats)
