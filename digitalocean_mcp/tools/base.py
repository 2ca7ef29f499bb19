"""
Shared plumbing for DigitalOcean tool groups.

A tool group is a small class bundling the handlers for one API resource
(droplets, firewalls, invoices, ...). Every group:
- takes the client provider in its constructor and stores it
- lists its handlers in `definitions()` as (name, description, handler)
- exposes them as FastMCP `Tool` objects through `tools()`

Handlers are bound methods with typed parameters; FastMCP derives each tool's
input schema from the signature. They return compact JSON text.
"""

from abc import ABC, abstractmethod
from typing import Annotated, Any, Callable

from azure.core.exceptions import HttpResponseError
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool
from pydantic import Field
from pydo import Client

from digitalocean_mcp.client import ClientProvider
from digitalocean_mcp.response import compact_json

Page = Annotated[int, Field(ge=1, description="Page number to fetch")]
PerPage = Annotated[int, Field(ge=1, le=200, description="Number of items per page")]

ToolDefinition = tuple[str, str, Callable[..., Any]]


class ToolGroup(ABC):
    """Base class for a block of related tools sharing one client provider."""

    def __init__(self, get_client: ClientProvider):
        self._get_client = get_client

    @abstractmethod
    def definitions(self) -> list[ToolDefinition]:
        """The (name, description, handler) triples of this group."""

    def tools(self) -> list[Tool]:
        return [
            Tool.from_function(handler, name=name, description=description)
            for name, description, handler in self.definitions()
        ]

    def _call(self, operation: Callable[[Client], Any]) -> str:
        """
        Run one API operation and return its result as compact JSON.

        API failures become ToolError so FastMCP reports them to the agent as
        an error result instead of a protocol failure. Errors from the client
        provider (e.g. no token configured) propagate unchanged.
        """
        client = self._get_client()
        try:
            result = operation(client)
        except HttpResponseError as e:
            raise ToolError(f"api error: {e.message}") from e
        return compact_json(result)
