"""
Scale primitives - ScaleType and Scale.

Scale types are interval patterns from a root. A Scale is a scale type (or a
bare chroma) resolved against an optional tonic.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar

from .pcset import EMPTY_CHROMA, chroma_to_intervals, is_chroma
from .pitch import Interval, PitchClass, prefers_flats


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by its interval pattern.

    The intervals are from one degree to the next (not cumulative).
    A major scale is: W W H W W W H (2 2 1 2 2 2 1 semitones)

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str = ""
    aliases: tuple[str, ...] = ()

    # Common scale types (defined after class)
    MAJOR: ClassVar[ScaleType]
    DORIAN: ClassVar[ScaleType]
    PHRYGIAN: ClassVar[ScaleType]
    LYDIAN: ClassVar[ScaleType]
    MIXOLYDIAN: ClassVar[ScaleType]
    NATURAL_MINOR: ClassVar[ScaleType]
    LOCRIAN: ClassVar[ScaleType]
    HARMONIC_MINOR: ClassVar[ScaleType]
    MELODIC_MINOR: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        # Validate that intervals sum to an octave (12 semitones)
        total = sum(i.semitones for i in self.intervals)
        if total != 12:
            raise ValueError(f"Scale intervals must sum to 12 semitones, got {total}")

    @property
    def offsets(self) -> list[int]:
        """Semitones from the root to each degree (the octave is not included)."""
        offsets = [0]
        for interval in self.intervals[:-1]:
            offsets.append(offsets[-1] + interval.semitones)
        return offsets

    @property
    def chroma(self) -> str:
        """12-bit membership string of this scale type."""
        members = set(self.offsets)
        return "".join("1" if i in members else "0" for i in range(12))

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """
        Get all pitch classes in this scale starting from root.

        Returns one pitch per degree (the octave is not included).
        """
        return [root.transpose(offset) for offset in self.offsets]

    def __str__(self) -> str:
        return self.name or f"ScaleType({self.intervals})"

    def __repr__(self) -> str:
        if self.name:
            return f"ScaleType.{self.name.upper().replace(' ', '_')}"
        return f"ScaleType({self.intervals!r})"


def _steps(*semitones: int) -> tuple[Interval, ...]:
    return tuple(Interval(s) for s in semitones)


ScaleType.MAJOR = ScaleType(_steps(2, 2, 1, 2, 2, 2, 1), "major", ("ionian",))
ScaleType.DORIAN = ScaleType(_steps(2, 1, 2, 2, 2, 1, 2), "dorian")
ScaleType.PHRYGIAN = ScaleType(_steps(1, 2, 2, 2, 1, 2, 2), "phrygian")
ScaleType.LYDIAN = ScaleType(_steps(2, 2, 2, 1, 2, 2, 1), "lydian")
ScaleType.MIXOLYDIAN = ScaleType(_steps(2, 2, 1, 2, 2, 1, 2), "mixolydian", ("dominant",))
ScaleType.NATURAL_MINOR = ScaleType(
    _steps(2, 1, 2, 2, 1, 2, 2), "aeolian", ("minor", "natural minor")
)
ScaleType.LOCRIAN = ScaleType(_steps(1, 2, 2, 1, 2, 2, 2), "locrian")
ScaleType.HARMONIC_MINOR = ScaleType(_steps(2, 1, 2, 2, 1, 3, 1), "harmonic minor")
ScaleType.MELODIC_MINOR = ScaleType(_steps(2, 1, 2, 2, 2, 2, 1), "melodic minor")

SCALE_TYPES: tuple[ScaleType, ...] = (
    ScaleType.MAJOR,
    ScaleType.DORIAN,
    ScaleType.PHRYGIAN,
    ScaleType.LYDIAN,
    ScaleType.MIXOLYDIAN,
    ScaleType.NATURAL_MINOR,
    ScaleType.LOCRIAN,
    ScaleType.HARMONIC_MINOR,
    ScaleType.MELODIC_MINOR,
    ScaleType(_steps(2, 2, 3, 2, 3), "major pentatonic", ("pentatonic",)),
    ScaleType(_steps(3, 2, 2, 3, 2), "minor pentatonic"),
    ScaleType(_steps(3, 2, 1, 1, 3, 2), "minor blues", ("blues",)),
    ScaleType(_steps(2, 2, 2, 2, 2, 2), "whole tone"),
    ScaleType(_steps(2, 1, 2, 1, 2, 1, 2, 1), "diminished", ("whole-half diminished",)),
    ScaleType(_steps(*[1] * 12), "chromatic"),
)

_TYPES_BY_NAME = MappingProxyType(
    {key: st for st in SCALE_TYPES for key in (st.name, *st.aliases)}
)
_TYPES_BY_CHROMA = MappingProxyType({st.chroma: st for st in SCALE_TYPES})


def get_scale_type(name_or_chroma: str) -> ScaleType | None:
    """Find a scale type by name, alias (case-insensitive) or chroma."""
    if not isinstance(name_or_chroma, str):
        return None
    if is_chroma(name_or_chroma):
        return _TYPES_BY_CHROMA.get(name_or_chroma)
    return _TYPES_BY_NAME.get(name_or_chroma.strip().lower())


@dataclass(frozen=True)
class Scale:
    """
    A resolved scale: a chroma, optionally a known type, optionally a tonic.

    Scales resolved from a bare chroma have no tonic and therefore no notes.
    A chroma that matches no known type still resolves, with an empty type.

    Examples:
        get_scale("C major").notes == ("C", "D", "E", "F", "G", "A", "B")
        get_scale("101101010110").type == "dorian"
    """

    chroma: str
    type: str = ""
    tonic: PitchClass | None = None
    aliases: tuple[str, ...] = ()
    prefer_flats: bool = False
    intervals: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", tuple(chroma_to_intervals(self.chroma)))

    @property
    def empty(self) -> bool:
        return self.chroma == EMPTY_CHROMA

    @property
    def name(self) -> str:
        if self.tonic is not None and self.type:
            return f"{self.tonic.spell(self.prefer_flats)} {self.type}"
        return self.type

    @property
    def notes(self) -> tuple[str, ...]:
        """Spelled note names from the tonic up (empty without a tonic)."""
        if self.tonic is None:
            return ()
        return tuple(
            self.tonic.transpose(i).spell(self.prefer_flats)
            for i, bit in enumerate(self.chroma)
            if bit == "1"
        )

    def __str__(self) -> str:
        return self.name or f"Scale({self.chroma})"


NO_SCALE = Scale(EMPTY_CHROMA)


def _tokenize(descriptor: str) -> tuple[str, str]:
    """Split 'C major' into ('C', 'major'); 'major' into ('', 'major')."""
    parts = descriptor.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    try:
        PitchClass.parse(parts[0])
    except ValueError:
        return "", descriptor.strip()
    return parts[0], parts[1] if len(parts) > 1 else ""


def get_scale(descriptor: str | Sequence[str] | Scale) -> Scale:
    """
    Resolve a scale descriptor.

    Accepts 'C major', a (tonic, type) pair, a bare type name, or a chroma.
    Unknown types and unparsable tonics resolve to NO_SCALE; a chroma always
    resolves, named when a known type has that chroma.
    """
    if isinstance(descriptor, Scale):
        return descriptor

    if isinstance(descriptor, str):
        if is_chroma(descriptor):
            scale_type = _TYPES_BY_CHROMA.get(descriptor)
            if scale_type is None:
                return Scale(descriptor)
            return Scale(descriptor, scale_type.name, aliases=scale_type.aliases)
        tonic_name, type_name = _tokenize(descriptor)
    else:
        if len(descriptor) != 2 or not all(isinstance(token, str) for token in descriptor):
            return NO_SCALE
        tonic_name, type_name = descriptor

    scale_type = get_scale_type(type_name)
    if scale_type is None:
        return NO_SCALE

    tonic = None
    if tonic_name:
        try:
            tonic = PitchClass.parse(tonic_name)
        except ValueError:
            return NO_SCALE

    return Scale(
        scale_type.chroma,
        scale_type.name,
        tonic,
        scale_type.aliases,
        prefers_flats(tonic_name),
    )
