"""
Pitch-class set primitives.

A pitch-class set is stored as a chroma: a 12-character bitstring where
character i is "1" when the pitch class i semitones above the tonic is a
member. The same set can be written as a number (the chroma read as binary,
so the tonic is the most significant bit).

    ionian  = 2773 = "101011010101"
    dorian  = 2902 = "101101010110"
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chuk_mcp_modes.constants import PITCH_CLASSES

from .pitch import Interval

EMPTY_CHROMA = "0" * PITCH_CLASSES

_CHROMA_PATTERN = re.compile(r"^[01]{12}$")


@dataclass(frozen=True)
class Pcset:
    """
    A decoded pitch-class set.

    num: chroma as a number (0-4095)
    chroma: 12-bit membership string
    normalized: the rotation starting on a member with the smallest number
    intervals: member interval names ascending from pitch class 0
    """

    num: int
    chroma: str
    normalized: str
    intervals: tuple[str, ...]

    @property
    def empty(self) -> bool:
        return self.num == 0

    @property
    def size(self) -> int:
        """Number of member pitch classes."""
        return self.chroma.count("1")


EMPTY_SET = Pcset(0, EMPTY_CHROMA, EMPTY_CHROMA, ())


def is_chroma(value: object) -> bool:
    """True for a 12-character string of 0s and 1s."""
    return isinstance(value, str) and _CHROMA_PATTERN.match(value) is not None


def chroma_from_num(num: int) -> str:
    """
    Convert a set number to its chroma.

    The result is always padded to 12 characters: 1451 is "010110101011",
    not the 11-character "10110101011" plain binary would give.
    """
    if not 0 <= num < 2**PITCH_CLASSES:
        raise ValueError(f"Pitch-class set number out of range: {num}")
    return format(num, f"0{PITCH_CLASSES}b")


def chroma_to_num(chroma: str) -> int:
    """Read a chroma as a binary number."""
    if not is_chroma(chroma):
        raise ValueError(f"Invalid chroma: {chroma!r}")
    return int(chroma, 2)


def chroma_to_intervals(chroma: str) -> list[str]:
    """
    Interval names of the members of a chroma, ascending from the tonic.

    chroma_to_intervals("101101010110")
    # => ['P1', 'M2', 'm3', 'P4', 'P5', 'M6', 'm7']
    """
    if not is_chroma(chroma):
        raise ValueError(f"Invalid chroma: {chroma!r}")
    return [str(Interval(i)) for i, bit in enumerate(chroma) if bit == "1"]


def rotate(chroma: str, times: int) -> str:
    """Rotate a chroma left, so pitch class `times` becomes the new tonic."""
    times %= len(chroma)
    return chroma[times:] + chroma[:times]


def chroma_rotations(chroma: str, normalize: bool = True) -> list[str]:
    """
    All cyclic left-rotations of a chroma, starting with the identity.

    With normalize, only rotations starting on a member pitch class are
    kept - one per member, i.e. the modes of the set. The empty set has none.
    """
    if not is_chroma(chroma):
        raise ValueError(f"Invalid chroma: {chroma!r}")
    rotations = [rotate(chroma, i) for i in range(len(chroma))]
    if normalize:
        return [r for r in rotations if r[0] == "1"]
    return rotations


def get_pcset(chroma: str) -> Pcset:
    """Decode a chroma into a Pcset."""
    num = chroma_to_num(chroma)
    if num == 0:
        return EMPTY_SET
    normalized = min(chroma_rotations(chroma), key=chroma_to_num)
    return Pcset(num, chroma, normalized, tuple(chroma_to_intervals(chroma)))
