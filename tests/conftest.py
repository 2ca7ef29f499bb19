"""
Shared test fixtures for the DigitalOcean MCP server test suite.

Key fixtures:
- fake_client: a MagicMock standing in for pydo.Client. Tests set return
  values on the operations they expect, e.g.
  `fake_client.droplets.get.return_value = {...}`
- client_provider: a client provider returning fake_client
- tool_surface: an in-memory surface recording the tools attached to it

Testing approach:
- test_filters.py / test_catalog.py: pure functions and static tables
- test_registration.py: the registration driver against tool_surface
- test_tools.py: the assembled FastMCP server, driven through FastMCP's
  in-memory client, with the DigitalOcean API replaced by fake_client
"""

from unittest.mock import MagicMock

import pytest
from fastmcp.tools.tool import Tool


class ToolSurface:
    """Records tools the way FastMCP.add_tool would attach them."""

    def __init__(self):
        self.tools: list[Tool] = []

    def add_tool(self, tool: Tool) -> Tool:
        self.tools.append(tool)
        return tool

    @property
    def names(self) -> list[str]:
        return [tool.name for tool in self.tools]


@pytest.fixture
def fake_client():
    return MagicMock(name="pydo.Client")


@pytest.fixture
def client_provider(fake_client):
    def _get_client():
        return fake_client

    return _get_client


@pytest.fixture
def make_tool_surface():
    """Factory fixture for tests that need more than one surface."""
    return ToolSurface


@pytest.fixture
def tool_surface(make_tool_surface):
    return make_tool_surface()
