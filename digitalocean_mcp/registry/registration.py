"""
Registration of DigitalOcean tools on an MCP server.

register() turns a service specification into the set of tools attached to
the server:

    tokens -> filter map -> per-service categories -> capability groups -> tools

Registration runs once, synchronously, before the server starts serving.
Every group is constructed before the first tool is attached, so a failed
call leaves the server untouched.
"""

import logging
from typing import Any, Mapping, Protocol

from fastmcp.tools.tool import Tool

from digitalocean_mcp.client import ClientProvider
from digitalocean_mcp.registry.catalog import (
    COMMON_GROUPS,
    GROUP_TOOLSETS,
    SERVICE_CATALOG,
    Group,
    Service,
    default_categories,
    supported_services,
)
from digitalocean_mcp.registry.filters import parse_service_filters
from digitalocean_mcp.tools.base import ToolGroup

logger = logging.getLogger(__name__)


class ToolSurface(Protocol):
    """Anything tools can be attached to. FastMCP satisfies this."""

    def add_tool(self, tool: Tool) -> Any: ...


class RegistrationError(Exception):
    """Base class for errors raised while registering tools."""


class UnknownServiceError(RegistrationError):
    """
    Raised when the specification names a service missing from the catalog.

    Attributes:
        service: The unsupported service name
        supported: Every service name the catalog knows
    """

    def __init__(self, service: str, supported: list[str]):
        self.service = service
        self.supported = supported
        super().__init__(
            f"unsupported service: {service}, supported services are: {','.join(supported)}"
        )


class ToolConstructionError(RegistrationError):
    """
    Raised when a tool group of a service fails to build its tools.

    The original exception is chained as __cause__.

    Attributes:
        service: The service whose tools failed ("common" for common groups)
    """

    def __init__(self, service: str, error: Exception):
        self.service = service
        super().__init__(f"failed to register {service} tools: {error}")


def _resolve_services(filters: Mapping[str, list[str]]) -> list[tuple[Service, list[str]]]:
    resolved = []
    for name, categories in filters.items():
        try:
            service = Service(name)
        except ValueError:
            raise UnknownServiceError(name, supported_services()) from None
        resolved.append((service, categories))
    return resolved


def _build_tools(
    group: Group,
    get_client: ClientProvider,
    toolsets: Mapping[Group, tuple[type[ToolGroup], ...]],
) -> list[Tool]:
    tools: list[Tool] = []
    for toolset in toolsets[group]:
        tools.extend(toolset(get_client).tools())
    return tools


def register(
    surface: ToolSurface,
    get_client: ClientProvider,
    *services: str,
    toolsets: Mapping[Group, tuple[type[ToolGroup], ...]] = GROUP_TOOLSETS,
) -> list[Group]:
    """
    Register tools for the given services on `surface`.

    Services may carry a category: "droplets:actions". A bare name uses the
    service's default category ("basic"); "service:all" loads every tool of
    the service. With no services at all, the basic tools of every service
    are loaded. Common groups are always added.

    Args:
        surface: Destination for the tools, usually the FastMCP server
        get_client: Client provider handed to every tool group
        *services: Service specification tokens
        toolsets: Group -> tool group classes table

    Returns:
        The activated capability groups, in activation order

    Raises:
        UnknownServiceError: If any service is not in the catalog
        ToolConstructionError: If a tool group fails to build its tools
    """
    if not services:
        logger.warning("no services specified, loading basic tools for all services")
        services = tuple(supported_services())

    filters = parse_service_filters(services, default_categories())
    requested = _resolve_services(filters)

    activated: list[Group] = []
    pending: list[Tool] = []

    def activate(owner: str, groups: list[Group]) -> None:
        for group in groups:
            if group in activated:
                continue
            try:
                pending.extend(_build_tools(group, get_client, toolsets))
            except Exception as e:
                raise ToolConstructionError(owner, e) from e
            activated.append(group)

    for service, categories in requested:
        groups = SERVICE_CATALOG[service].activate(categories)
        logger.debug(
            "Registering tools for service",
            extra={
                "log_data": {
                    "service": service.value,
                    "categories": categories,
                    "groups": [g.value for g in groups],
                }
            },
        )
        activate(service.value, groups)

    activate("common", list(COMMON_GROUPS))

    for tool in pending:
        surface.add_tool(tool)

    logger.info(
        "Tools registered",
        extra={
            "log_data": {
                "groups": [g.value for g in activated],
                "tool_count": len(pending),
            }
        },
    )
    return activated
