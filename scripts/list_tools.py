"""
CLI utility to preview which tools a services specification registers.

Resolves the specification exactly like the server does, but attaches the
tools to an in-memory collector instead of an MCP server. No API token is
needed and the DigitalOcean API is never contacted.

Usage examples:

    # Basic tools of every service
    python -m scripts.list_tools

    # Droplet basics plus droplet actions, and every networking tool
    python -m scripts.list_tools --services droplets,droplets:actions,networking:all

    # Show the capability groups instead of tool names
    python -m scripts.list_tools --services databases:all --groups
"""

import argparse
import sys

from fastmcp.tools.tool import Tool

from digitalocean_mcp.client import ClientError
from digitalocean_mcp.config import split_services
from digitalocean_mcp.registry.registration import RegistrationError, register


class ToolCollector:
    def __init__(self):
        self.tools: list[Tool] = []

    def add_tool(self, tool: Tool) -> Tool:
        self.tools.append(tool)
        return tool


def _no_client():
    raise ClientError("list_tools never calls the DigitalOcean API")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Preview the tools a services specification loads.")
    parser.add_argument(
        "--services",
        default="",
        help="Comma separated services specification, e.g. 'droplets,networking:dns'",
    )
    parser.add_argument(
        "--groups",
        action="store_true",
        help="Print the activated capability groups instead of tool names",
    )
    args = parser.parse_args(argv)

    collector = ToolCollector()
    try:
        groups = register(collector, _no_client, *split_services(args.services))
    except RegistrationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.groups:
        for group in groups:
            print(group.value)
    else:
        for tool in collector.tools:
            print(f"{tool.name:32} {tool.description}")
        print(f"\n{len(collector.tools)} tools", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
