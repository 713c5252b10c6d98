#!/usr/bin/env python3
"""
Async Modes MCP Server using chuk-mcp-server

This server provides MCP tools for the seven diatonic modes.

The server provides tools for:
- Looking up modes by name or alias (case-insensitive)
- Listing modes and their step patterns
- Spelling chords across octaves
- Building the chord on every degree of a rooted mode
- Enumerating every rotation of a scale
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_modes.modes import REGISTRY
from chuk_mcp_modes.tools import register_mode_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-modes")

# Register all tools
mode_tools = register_mode_tools(mcp)

# Export tool functions for direct access
music_get_mode = mode_tools["music_get_mode"]
music_list_modes = mode_tools["music_list_modes"]
music_mode_steps = mode_tools["music_mode_steps"]
music_chord_notes = mode_tools["music_chord_notes"]
music_mode_chords = mode_tools["music_mode_chords"]
music_scale_modes = mode_tools["music_scale_modes"]

logger.info("CHUK Modes MCP Server initialized")
logger.info(f"  Modes: {len(REGISTRY)} ({len(REGISTRY.keys)} names and aliases)")
