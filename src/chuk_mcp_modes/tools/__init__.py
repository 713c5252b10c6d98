"""
MCP tool implementations.

Tools are organized by domain:
- modes - Mode lookup, chord spelling, per-degree chords, scale rotations
"""

from chuk_mcp_modes.tools.modes import register_mode_tools

__all__ = [
    "register_mode_tools",
]
