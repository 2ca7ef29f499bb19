"""
DigitalOcean MCP server built on FastMCP v2.

This module assembles the server:
- registers the DigitalOcean tools selected by the services specification
  (see registry.registration)
- logs every tool call through a FastMCP middleware
- adds /health and /ready endpoints for the HTTP transport
- parses the command line and runs the chosen transport

Running the server:
    digitalocean-mcp --services droplets,networking:dns

    or, without installing the entry point:
    python -m digitalocean_mcp --services droplets

Services take an optional category ("droplets:actions"); "service:all"
loads every tool of a service. With no services, the basic tools of every
service are loaded.
"""

import argparse
import logging
import sys
import time
import uuid

from fastmcp import FastMCP
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools.tool import ToolResult
from mcp.types import CallToolRequestParams
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from digitalocean_mcp.client import ClientProvider, make_client_provider
from digitalocean_mcp.config import Settings, settings, split_services
from digitalocean_mcp.logging_config import configure_logging
from digitalocean_mcp.registry.registration import RegistrationError, register

logger = logging.getLogger("digitalocean-mcp")

INSTRUCTIONS = (
    "Tools for managing DigitalOcean resources: droplets, networking, "
    "databases, Kubernetes, App Platform, Spaces, monitoring and the account. "
    "Tool results are compact JSON documents returned by the DigitalOcean API."
)


class ToolCallLoggingMiddleware(Middleware):
    """
    Logs every tools/call request with its outcome and duration.

    API errors surface as ToolError inside the handler; they are logged as
    failures and re-raised so FastMCP turns them into an error result.
    """

    async def on_call_tool(
        self,
        context: MiddlewareContext[CallToolRequestParams],
        call_next: CallNext[CallToolRequestParams, ToolResult],
    ) -> ToolResult:
        request_id = str(uuid.uuid4())[:8]
        tool_name = context.message.name
        started = time.perf_counter()

        try:
            result = await call_next(context)
        except Exception as e:
            logger.warning(
                "Tool call failed",
                extra={
                    "log_data": {
                        "request_id": request_id,
                        "tool": tool_name,
                        "duration_ms": round((time.perf_counter() - started) * 1000, 1),
                        "error": str(e),
                    }
                },
            )
            raise

        logger.info(
            "Tool call completed",
            extra={
                "log_data": {
                    "request_id": request_id,
                    "tool": tool_name,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 1),
                }
            },
        )
        return result


def build_server(config: Settings, get_client: ClientProvider | None = None) -> FastMCP:
    """
    Create the FastMCP server and register the configured tools.

    Args:
        config: Settings holding the services specification and API settings
        get_client: Client provider override; defaults to one built from config

    Raises:
        RegistrationError: If the services specification is invalid or a
            tool group fails to build
    """
    mcp = FastMCP(
        name="digitalocean-mcp",
        instructions=INSTRUCTIONS,
        middleware=[ToolCallLoggingMiddleware()],
    )

    groups = register(mcp, get_client or make_client_provider(config), *config.service_list)

    # Plain HTTP endpoints for probes; only served under the HTTP transport.
    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> Response:
        return JSONResponse({"status": "healthy"})

    @mcp.custom_route("/ready", methods=["GET"])
    async def readiness_check(request: Request) -> Response:
        tools = await mcp.get_tools()
        return JSONResponse(
            {
                "status": "ready",
                "tool_count": len(tools),
                "groups": [g.value for g in groups],
            }
        )

    return mcp


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="digitalocean-mcp",
        description="MCP server exposing the DigitalOcean API as tools.",
    )
    parser.add_argument(
        "--services",
        action="append",
        help=(
            "Comma separated services to load, each optionally with a category, "
            "e.g. 'droplets,networking:dns,databases:all'. May be repeated."
        ),
    )
    parser.add_argument("--api-token", help="DigitalOcean API token (default: $DIGITALOCEAN_API_TOKEN)")
    parser.add_argument("--api-endpoint", help="DigitalOcean API base URL")
    parser.add_argument("--transport", choices=["stdio", "http"], help="MCP transport")
    parser.add_argument("--host", help="Bind address for the HTTP transport")
    parser.add_argument("--port", type=int, help="Port for the HTTP transport")
    parser.add_argument("--log-level", help="Logging level (debug, info, warning, error)")
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace, base: Settings = settings) -> Settings:
    """Overlay command line values on the environment-derived settings."""
    overrides = {
        "api_token": args.api_token,
        "api_endpoint": args.api_endpoint,
        "transport": args.transport,
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }
    if args.services:
        tokens = [token for value in args.services for token in split_services(value)]
        overrides["services"] = ",".join(tokens)
    return base.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> None:
    config = settings_from_args(parse_args(argv))
    configure_logging(config.log_level)

    try:
        mcp = build_server(config)
    except RegistrationError as e:
        logger.error("Failed to register tools: %s", e)
        sys.exit(1)

    if config.transport == "http":
        logger.info(
            "Starting MCP server on %s:%d (transport=streamable-http)",
            config.host,
            config.port,
        )
        mcp.run(
            transport="streamable-http",
            host=config.host,
            port=config.port,
            log_level=config.log_level,
        )
    else:
        logger.info("Starting MCP server (transport=stdio)")
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
