"""
Application configuration loaded from environment variables.

Uses pydantic-settings to define typed configuration that automatically reads
from environment variables. Every value can also be overridden from the
command line (see server.main), which is how MCP clients usually launch the
server:

    DIGITALOCEAN_API_TOKEN=dop_v1_... digitalocean-mcp --services droplets,networking:all

Locally, you can set them via environment variables or a .env file.
"""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Server configuration with environment variable bindings.

    Each field maps to an environment variable with the DIGITALOCEAN_ prefix.
    For example, `api_token` reads from DIGITALOCEAN_API_TOKEN and `services`
    reads from DIGITALOCEAN_SERVICES.
    """

    # --- DigitalOcean API ---

    # Personal access token used when the request itself does not carry one.
    # In HTTP mode each caller may send its own token as a Bearer header.
    api_token: str = ""

    # Base URL of the DigitalOcean API. Only changed for testing against a
    # mock or a staging endpoint.
    api_endpoint: str = "https://api.digitalocean.com"

    # --- Tool selection ---

    # Comma separated service specification, e.g. "droplets,networking:dns".
    # Empty means "basic tools for every service".
    services: str = ""

    # --- Server settings ---

    # "stdio" for local MCP clients that spawn the server as a subprocess,
    # "http" for the streamable HTTP transport.
    transport: Literal["stdio", "http"] = "stdio"

    host: str = "127.0.0.1"
    port: int = 8080

    # Logging verbosity. Maps to Python's logging levels.
    log_level: str = "info"

    model_config = {
        "env_prefix": "DIGITALOCEAN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def service_list(self) -> list[str]:
        """The services specification split into individual tokens."""
        return split_services(self.services)


def split_services(value: str) -> list[str]:
    """Split a comma separated services specification, dropping blanks."""
    return [token.strip() for token in value.split(",") if token.strip()]


# Singleton instance: import this from other modules.
settings = Settings()
