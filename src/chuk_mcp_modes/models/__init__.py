"""
Pydantic models for the modes system.

This module provides:
- ModeDefinition: Validated row of the static mode table
- Mode: Decoded mode entity shared by every lookup
- NO_MODE: The entity returned when a lookup misses
"""

from chuk_mcp_modes.models.mode import NO_MODE, Mode, ModeDefinition

__all__ = [
    "Mode",
    "ModeDefinition",
    "NO_MODE",
]
