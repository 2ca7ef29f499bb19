"""
DigitalOcean API client provider.

Tool handlers never build an API client themselves. They call a client
provider: a zero-argument callable that resolves the API token for the
current request and returns an authenticated `pydo.Client`.

Token resolution order:
1. In HTTP transport, the Bearer token from the current request's
   Authorization header. This lets several callers share one server, each
   acting with their own DigitalOcean token.
2. The token configured through DIGITALOCEAN_API_TOKEN / --api-token.

FastMCP keeps the current HTTP request in a ContextVar, so the provider reads
the request-scoped context without any parameters. Under stdio transport
there is no HTTP request and the configured token is used.
"""

from typing import Callable

from fastmcp.server.dependencies import get_http_request
from pydo import Client

from digitalocean_mcp.config import Settings

ClientProvider = Callable[[], Client]


class ClientError(Exception):
    """
    Raised when no authenticated client can be built for a request.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def extract_bearer_token(authorization_header: str | None) -> str | None:
    """
    Extract the token from a "Bearer <token>" Authorization header.

    Returns None when the header is absent or empty, so the caller can fall
    back to the configured token.

    Raises:
        ClientError: If a header is present but not in Bearer format
    """
    if not authorization_header:
        return None

    parts = authorization_header.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        raise ClientError("Invalid Authorization header format, expected 'Bearer <token>'")

    return parts[1].strip()


def _request_authorization_header() -> str | None:
    """Authorization header of the current HTTP request, or None under stdio."""
    try:
        request = get_http_request()
    except RuntimeError:
        return None
    return request.headers.get("authorization")


def make_client_provider(settings: Settings) -> ClientProvider:
    """
    Build the client provider used by every tool group.

    Args:
        settings: Server settings holding the fallback token and API endpoint

    Returns:
        A callable returning an authenticated pydo.Client for the current request
    """

    def get_client() -> Client:
        token = extract_bearer_token(_request_authorization_header()) or settings.api_token
        if not token:
            raise ClientError(
                "No DigitalOcean API token: set DIGITALOCEAN_API_TOKEN or send an "
                "'Authorization: Bearer <token>' header"
            )
        return Client(token=token, endpoint=settings.api_endpoint)

    return get_client
