"""
Tests for scale_modes().
"""

from chuk_mcp_modes.core import ScaleType, get_scale, rotate
from chuk_mcp_modes.modes import entries, scale_modes


class TestScaleModes:
    """Tests for scale rotation enumeration."""

    def test_c_major(self) -> None:
        """C major has seven rotations, the diatonic modes."""
        modes = scale_modes("C major")
        assert len(modes) == 7
        assert [s.name for s in modes] == [
            "major",
            "dorian",
            "phrygian",
            "lydian",
            "mixolydian",
            "aeolian",
            "locrian",
        ]

    def test_matches_mode_table(self) -> None:
        """Rotations of major are the mode table's chromas, in order."""
        assert [s.chroma for s in scale_modes("C major")] == [m.chroma for m in entries()]

    def test_rotation_property(self) -> None:
        """Rotation k is rotation 0 started on its kth member."""
        modes = scale_modes("C major")
        base = modes[0].chroma
        members = [i for i, bit in enumerate(base) if bit == "1"]
        for k, scale in enumerate(modes):
            assert scale.chroma == rotate(base, members[k])

    def test_wraps(self) -> None:
        """Rotating past the last member comes back to the start."""
        modes = scale_modes("C major")
        base = modes[0].chroma
        assert rotate(base, 12) == base
        assert rotate(modes[-1].chroma, 1) == base

    def test_identity_first(self) -> None:
        """Rotation 0 is the scale itself."""
        assert scale_modes("D dorian")[0].chroma == ScaleType.DORIAN.chroma
        assert scale_modes(("G", "mixolydian"))[0].name == "mixolydian"

    def test_unnamed_rotations(self) -> None:
        """Rotations with no known type keep their structure but no name."""
        modes = scale_modes("A harmonic minor")
        assert len(modes) == 7
        assert modes[0].name == "harmonic minor"
        for scale in modes[1:]:
            assert scale.name == ""
            assert len(scale.intervals) == 7
            assert scale.chroma[0] == "1"

    def test_pentatonic(self) -> None:
        """A five-note scale has five rotations."""
        names = [s.name for s in scale_modes("C major pentatonic")]
        assert names == ["major pentatonic", "", "", "", "minor pentatonic"]

    def test_symmetric(self) -> None:
        """Every rotation of the whole-tone scale is the same."""
        modes = scale_modes("whole tone")
        assert len(modes) == 6
        assert {s.chroma for s in modes} == {modes[0].chroma}

    def test_accepts_scale(self) -> None:
        """A resolved scale can be passed directly."""
        assert len(scale_modes(get_scale("E minor"))) == 7

    def test_unknown(self) -> None:
        """Unknown descriptors give no rotations."""
        assert scale_modes("C nonsense") == []
        assert scale_modes("") == []

    def test_non_string_tokens(self) -> None:
        """A token pair with a missing part gives no rotations."""
        assert scale_modes(("C", None)) == []
        assert scale_modes((None, "major")) == []
