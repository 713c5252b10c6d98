"""
The static mode tables.

Three independent tables, kept apart on purpose:
- MODE_DEFINITIONS: one row per mode, including the tonic triad/seventh
- MODE_CHORD_QUALITIES: the triad quality on every degree of each mode
- MODE_STEPS: the whole/half step pattern of each mode
"""

from __future__ import annotations

from types import MappingProxyType

from chuk_mcp_modes.constants import Step, TriadSymbol
from chuk_mcp_modes.models.mode import ModeDefinition

MODE_DEFINITIONS: tuple[ModeDefinition, ...] = (
    ModeDefinition(
        mode_num=0, set_num=2773, alt=0, name="ionian", triad="", seventh="Maj7", alias="major"
    ),
    ModeDefinition(mode_num=1, set_num=2902, alt=2, name="dorian", triad="m", seventh="m7"),
    ModeDefinition(mode_num=2, set_num=3418, alt=4, name="phrygian", triad="m", seventh="m7"),
    ModeDefinition(mode_num=3, set_num=2741, alt=-1, name="lydian", triad="", seventh="Maj7"),
    ModeDefinition(mode_num=4, set_num=2774, alt=1, name="mixolydian", triad="", seventh="7"),
    ModeDefinition(
        mode_num=5, set_num=2906, alt=3, name="aeolian", triad="m", seventh="m7", alias="minor"
    ),
    ModeDefinition(mode_num=6, set_num=3434, alt=5, name="locrian", triad="dim", seventh="m7b5"),
)

MODE_NAMES: tuple[str, ...] = tuple(definition.name for definition in MODE_DEFINITIONS)


def _qualities(row: str) -> tuple[TriadSymbol, ...]:
    return tuple(row.split())  # type: ignore[return-value]


# Triad quality per scale degree: M major, m minor, o diminished
MODE_CHORD_QUALITIES: MappingProxyType[str, tuple[TriadSymbol, ...]] = MappingProxyType(
    {
        "ionian": _qualities("M m m M M m o"),
        "dorian": _qualities("m m M M m o M"),
        "phrygian": _qualities("m M M m o M m"),
        "lydian": _qualities("M M m o M m m"),
        "mixolydian": _qualities("M m o M m m M"),
        "aeolian": _qualities("m o M m m M M"),
        "locrian": _qualities("o M m m M M m"),
    }
)


def _steps(row: str) -> tuple[Step, ...]:
    return tuple(Step(s) for s in row.split())


MODE_STEPS: MappingProxyType[str, tuple[Step, ...]] = MappingProxyType(
    {
        "ionian": _steps("W W H W W W H"),
        "dorian": _steps("W H W W W H W"),
        "phrygian": _steps("H W W W H W W"),
        "lydian": _steps("W W W H W W H"),
        "mixolydian": _steps("W W H W W H W"),
        "aeolian": _steps("W H W W H W W"),
        "locrian": _steps("H W W H W W W"),
    }
)
