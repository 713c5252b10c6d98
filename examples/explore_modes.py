#!/usr/bin/env python3
"""
Example: Exploring the diatonic modes.

Shows mode lookup, chord spelling across octaves, the chords on every
degree of a mode, and the rotations of a scale.

Usage:
    python examples/explore_modes.py
"""

from chuk_mcp_modes import chord_notes, entries, mode, mode_steps, mode_to_chords, scale_modes


def main() -> None:
    """Walk through the mode operations."""
    print("CHUK Modes Demo")
    print("=" * 40)
    print()

    print("Modes:")
    for m in entries():
        steps = " ".join(s.value for s in mode_steps(m))
        aliases = f" (aka {', '.join(m.aliases)})" if m.aliases else ""
        print(f"  {m.mode_num} {m.name:<11} {m.chroma}  {steps}{aliases}")
    print()

    minor = mode("Minor")
    print(f"mode('Minor') -> {minor.name}: {' '.join(minor.intervals)}")
    print(f"mode('xyz') empty: {mode('xyz').empty}")
    print()

    print("Cmaj7 over two octaves:")
    print(f"  {chord_notes('C3', 'maj7', 2)}")
    print()

    print("D dorian chords:")
    for degree, notes in enumerate(mode_to_chords("dorian", "D"), start=1):
        print(f"  {degree}: {' '.join(notes)}")
    print()

    print("Rotations of A harmonic minor:")
    for k, scale in enumerate(scale_modes("A harmonic minor")):
        print(f"  {k}: {scale.chroma} {scale.name or '(unnamed)'}")


if __name__ == "__main__":
    main()
