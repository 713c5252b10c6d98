"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_modes.models import Mode
from chuk_mcp_modes.modes import mode


class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def mcp() -> MockMCPServer:
    """A fresh mock server."""
    return MockMCPServer("test")


@pytest.fixture
def dorian() -> Mode:
    """The dorian mode entity."""
    return mode("dorian")
