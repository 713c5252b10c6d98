"""
Mode models - the diatonic modes as pitch-class sets.

ModeDefinition is the literal, validated form written in the mode table.
Mode is the decoded entity handed out by lookups: shared, never copied,
never mutated.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_modes.constants import DIATONIC_DEGREES
from chuk_mcp_modes.core.pcset import EMPTY_SET, chroma_from_num


class ModeDefinition(BaseModel):
    """
    One row of the mode table.

    set_num is the mode's chroma read as a binary number, tonic first:
    ionian is 2773 = 0b101011010101.
    """

    mode_num: int = Field(..., ge=0, lt=DIATONIC_DEGREES, description="Rotation of ionian")
    set_num: int = Field(..., ge=0, lt=4096, description="Pitch-class set number")
    alt: int = Field(..., description="Circle-of-fifths offset from major")
    name: str = Field(..., description="Canonical lowercase name")
    triad: str = Field("", description="Tonic triad shorthand")
    seventh: str = Field(..., description="Tonic seventh chord shorthand")
    alias: str | None = Field(None, description="Alternate name")

    model_config = {"frozen": True}

    @field_validator("set_num")
    @classmethod
    def validate_set_num(cls, v: int) -> int:
        """A diatonic mode has seven members, one of them the tonic."""
        chroma = chroma_from_num(v)
        if chroma.count("1") != DIATONIC_DEGREES:
            raise ValueError(f"Mode chroma must have 7 members, got {chroma}")
        if chroma[0] != "1":
            raise ValueError(f"Mode chroma must contain the tonic, got {chroma}")
        return v

    @field_validator("name", "alias")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        """Ensure names are non-empty lowercase words."""
        if v is None:
            return v
        if not v or v != v.lower() or not v.isalpha():
            raise ValueError(f"Invalid mode name: {v!r}")
        return v


class Mode(BaseModel):
    """
    A diatonic mode.

    Example:
        mode("dorian")
        # Mode(mode_num=1, name='dorian', chroma='101101010110', num=2902,
        #      intervals=('P1', 'M2', 'm3', 'P4', 'P5', 'M6', 'm7'), alt=2,
        #      triad='m', seventh='m7', aliases=())
    """

    mode_num: int | float = Field(..., description="Rotation index (NaN for NO_MODE)")
    name: str = Field(..., description="Canonical lowercase name")
    chroma: str = Field(..., description="12-bit membership string")
    num: int = Field(..., description="Pitch-class set number")
    normalized: str = Field(..., description="Normalized chroma")
    empty: bool = Field(False, description="True only for NO_MODE")
    intervals: tuple[str, ...] = Field(..., description="Intervals above the tonic")
    alt: int = Field(0, description="Circle-of-fifths offset from major")
    triad: str = Field("", description="Tonic triad shorthand")
    seventh: str = Field("", description="Tonic seventh chord shorthand")
    aliases: tuple[str, ...] = Field(default=(), description="Alternate names")

    model_config = {"frozen": True}

    @property
    def is_valid(self) -> bool:
        """False for NO_MODE."""
        return not self.empty and not math.isnan(self.mode_num)


# Returned whenever a lookup fails
NO_MODE = Mode(
    mode_num=math.nan,
    name="",
    chroma=EMPTY_SET.chroma,
    num=EMPTY_SET.num,
    normalized=EMPTY_SET.normalized,
    empty=True,
    intervals=EMPTY_SET.intervals,
)
