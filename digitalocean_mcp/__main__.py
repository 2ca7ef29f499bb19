"""Entry point for `python -m digitalocean_mcp`."""

from digitalocean_mcp.server import main

main()
