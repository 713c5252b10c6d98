"""
Tests for the mode table, registry and lookups.
"""

import math

import pytest
from pydantic import ValidationError

from chuk_mcp_modes.constants import Step
from chuk_mcp_modes.core import get_scale
from chuk_mcp_modes.models import NO_MODE, Mode, ModeDefinition
from chuk_mcp_modes.modes import (
    MODE_CHORD_QUALITIES,
    MODE_DEFINITIONS,
    MODE_STEPS,
    REGISTRY,
    ByEntity,
    ByName,
    DuplicateModeKeyError,
    ModeRegistry,
    entries,
    mode,
    mode_names,
    mode_steps,
)

CANONICAL = ["ionian", "dorian", "phrygian", "lydian", "mixolydian", "aeolian", "locrian"]


class Named:
    """Minimal object carrying a name."""

    def __init__(self, name):
        self.name = name


class TestModeDefinition:
    """Tests for mode table validation."""

    def test_valid(self) -> None:
        """A well-formed row validates."""
        d = ModeDefinition(mode_num=1, set_num=2902, alt=2, name="dorian", seventh="m7")
        assert d.alias is None
        assert d.triad == ""

    def test_wrong_member_count(self) -> None:
        """A chroma with 6 members is rejected."""
        with pytest.raises(ValidationError):
            ModeDefinition(mode_num=0, set_num=2772, alt=0, name="broken", seventh="")

    def test_missing_tonic(self) -> None:
        """A chroma without the tonic bit is rejected."""
        # 1451 = 010110101011: seven members, no tonic
        with pytest.raises(ValidationError):
            ModeDefinition(mode_num=0, set_num=1451, alt=0, name="broken", seventh="")

    def test_out_of_range(self) -> None:
        """Set numbers and mode numbers are range checked."""
        with pytest.raises(ValidationError):
            ModeDefinition(mode_num=0, set_num=4096, alt=0, name="broken", seventh="")
        with pytest.raises(ValidationError):
            ModeDefinition(mode_num=7, set_num=2773, alt=0, name="broken", seventh="")

    def test_name_must_be_lowercase(self) -> None:
        """Names and aliases are lowercase words."""
        with pytest.raises(ValidationError):
            ModeDefinition(mode_num=0, set_num=2773, alt=0, name="Ionian", seventh="")
        with pytest.raises(ValidationError):
            ModeDefinition(mode_num=0, set_num=2773, alt=0, name="ionian", seventh="", alias="")


class TestModeTable:
    """Tests for the decoded modes."""

    def test_seven_members_with_tonic(self) -> None:
        """Every mode has 7 members including the tonic."""
        for m in entries():
            assert m.chroma.count("1") == 7
            assert m.chroma[0] == "1"
            assert len(m.chroma) == 12
            assert len(m.intervals) == 7
            assert m.intervals[0] == "P1"

    def test_dorian(self, dorian: Mode) -> None:
        """Dorian decodes fully."""
        assert dorian.mode_num == 1
        assert dorian.num == 2902
        assert dorian.chroma == "101101010110"
        assert dorian.normalized == dorian.chroma
        assert dorian.intervals == ("P1", "M2", "m3", "P4", "P5", "M6", "m7")
        assert dorian.alt == 2
        assert dorian.triad == "m"
        assert dorian.seventh == "m7"
        assert dorian.aliases == ()
        assert not dorian.empty
        assert dorian.is_valid

    def test_aliases(self) -> None:
        """Ionian and aeolian carry their common names."""
        assert mode("ionian").aliases == ("major",)
        assert mode("aeolian").aliases == ("minor",)

    def test_padding_keeps_tonic(self) -> None:
        """Chromas come from explicitly padded binary."""
        for d in MODE_DEFINITIONS:
            assert int(mode(d.name).chroma, 2) == d.set_num

    def test_modes_are_rotations_of_ionian(self) -> None:
        """Each mode is ionian started on a different degree."""
        ionian = mode("ionian").chroma
        members = [i for i, bit in enumerate(ionian) if bit == "1"]
        for m in entries():
            start = members[m.mode_num]
            assert m.chroma == ionian[start:] + ionian[:start]

    def test_frozen(self, dorian: Mode) -> None:
        """Shared modes cannot be mutated."""
        with pytest.raises(ValidationError):
            dorian.name = "changed"


class TestModeTables:
    """Tests for the per-degree and step tables."""

    def test_steps_match_chroma(self) -> None:
        """Step patterns walk exactly the mode's members."""
        for name, steps in MODE_STEPS.items():
            assert sum(s.semitones for s in steps) == 12
            position = 0
            members = [0]
            for step in steps[:-1]:
                position += step.semitones
                members.append(position)
            chroma = mode(name).chroma
            assert members == [i for i, bit in enumerate(chroma) if bit == "1"]

    def test_quality_tables_cover_all_modes(self) -> None:
        """Every canonical mode has seven degree qualities."""
        assert list(MODE_CHORD_QUALITIES) == CANONICAL
        for qualities in MODE_CHORD_QUALITIES.values():
            assert len(qualities) == 7
            assert set(qualities) <= {"M", "m", "o"}

    def test_tonic_quality_agrees(self) -> None:
        """Degree 1 quality agrees with the mode's tonic triad."""
        shorthand = {"": "M", "m": "m", "dim": "o"}
        for m in entries():
            assert MODE_CHORD_QUALITIES[m.name][0] == shorthand[m.triad]


class TestModeLookup:
    """Tests for mode()."""

    def test_case_insensitive(self) -> None:
        """Lookup ignores case and returns the shared entity."""
        assert mode("Dorian") is mode("dorian")
        assert mode("DORIAN") is mode("dorian")

    def test_alias(self) -> None:
        """Aliases resolve to the same entity."""
        assert mode("minor") is mode("aeolian")
        assert mode("Major") is mode("ionian")

    def test_miss(self) -> None:
        """Unknown names return NO_MODE."""
        assert mode("xyz") is NO_MODE
        assert mode("") is NO_MODE

    def test_no_mode(self) -> None:
        """NO_MODE is an empty pitch-class set."""
        assert NO_MODE.chroma == "000000000000"
        assert math.isnan(NO_MODE.mode_num)
        assert NO_MODE.name == ""
        assert NO_MODE.triad == ""
        assert NO_MODE.seventh == ""
        assert NO_MODE.intervals == ()
        assert NO_MODE.aliases == ()
        assert NO_MODE.empty
        assert not NO_MODE.is_valid

    def test_named_object(self) -> None:
        """Objects with a name attribute are looked up by it."""
        assert mode(Named("Lydian")) is mode("lydian")
        assert mode(mode("locrian")) is mode("locrian")
        assert mode(get_scale("101101010110")) is mode("dorian")

    def test_single_indirection(self) -> None:
        """A name that is itself named is not followed."""
        assert mode(Named(Named("dorian"))) is NO_MODE

    def test_explicit_variants(self) -> None:
        """ByName and ByEntity can be passed directly."""
        assert mode(ByName("Phrygian")) is mode("phrygian")
        assert mode(ByEntity(Named("minor"))) is mode("aeolian")
        assert mode(ByEntity(Named(None))) is NO_MODE

    def test_mapping(self) -> None:
        """Mappings are looked up by their "name" key, one level deep."""
        assert mode({"name": "Dorian"}) is mode("dorian")
        assert mode({"name": "minor", "tonic": "A"}) is mode("aeolian")
        assert mode({"name": {"name": "dorian"}}) is NO_MODE
        assert mode({"title": "dorian"}) is NO_MODE
        assert mode({}) is NO_MODE

    def test_never_raises(self) -> None:
        """Odd inputs return NO_MODE."""
        assert mode(None) is NO_MODE
        assert mode(42) is NO_MODE
        assert mode(NO_MODE) is NO_MODE


class TestEntries:
    """Tests for entries(), mode_names() and mode_steps()."""

    def test_order(self) -> None:
        """Modes come back in canonical order."""
        assert [m.name for m in entries()] == CANONICAL
        assert [m.mode_num for m in entries()] == list(range(7))

    def test_fresh_copy(self) -> None:
        """Callers can't corrupt the table through the returned list."""
        first = entries()
        first.clear()
        assert len(entries()) == 7
        assert entries() is not entries()

    def test_shared_entities(self) -> None:
        """The list holds the same entities mode() returns."""
        assert entries()[1] is mode("dorian")

    def test_mode_names(self) -> None:
        """Names in canonical order."""
        names = mode_names()
        assert names == CANONICAL
        names.append("extra")
        assert mode_names() == CANONICAL

    def test_mode_steps(self) -> None:
        """Steps resolve through mode()."""
        assert mode_steps("dorian") == [
            Step.WHOLE,
            Step.HALF,
            Step.WHOLE,
            Step.WHOLE,
            Step.WHOLE,
            Step.HALF,
            Step.WHOLE,
        ]
        assert mode_steps("Minor") == list(MODE_STEPS["aeolian"])
        assert mode_steps("xyz") == []


class TestModeRegistry:
    """Tests for ModeRegistry construction."""

    def test_default_registry(self) -> None:
        """The shared registry indexes names and aliases."""
        assert len(REGISTRY) == 7
        assert len(REGISTRY.keys) == 9
        assert "minor" in REGISTRY
        assert "Minor" not in REGISTRY

    def test_build_keeps_order(self) -> None:
        """Build decodes rows in order."""
        modes = ModeRegistry.build(MODE_DEFINITIONS[:2])
        assert [m.name for m in modes] == ["ionian", "dorian"]

    def test_duplicate_key(self) -> None:
        """Two modes can't share a key."""
        clash = ModeDefinition(
            mode_num=0, set_num=2773, alt=0, name="ionian", seventh="Maj7", alias="dorian"
        )
        with pytest.raises(DuplicateModeKeyError):
            ModeRegistry([clash, MODE_DEFINITIONS[1]])

    def test_duplicate_is_value_error(self) -> None:
        """Index collisions are ValueErrors."""
        clash = ModeDefinition(
            mode_num=1, set_num=2902, alt=2, name="dorian", seventh="m7", alias="minor"
        )
        with pytest.raises(ValueError, match="minor"):
            ModeRegistry([clash, MODE_DEFINITIONS[5]])

    def test_index_is_read_only(self) -> None:
        """The index can't be mutated through the registry."""
        with pytest.raises(TypeError):
            REGISTRY._index["new"] = NO_MODE  # type: ignore[index]
