"""Tests for token extraction and the client provider (digitalocean_mcp/client.py)."""

import pytest
from pydo import Client

from digitalocean_mcp.client import ClientError, extract_bearer_token, make_client_provider
from digitalocean_mcp.config import Settings


class TestExtractBearerToken:
    def test_valid_header(self):
        assert extract_bearer_token("Bearer dop_v1_abc") == "dop_v1_abc"

    def test_scheme_is_case_insensitive(self):
        assert extract_bearer_token("bearer dop_v1_abc") == "dop_v1_abc"

    def test_missing_header_falls_back(self):
        """No header means "use the configured token", not an error."""
        assert extract_bearer_token(None) is None
        assert extract_bearer_token("") is None

    def test_non_bearer_scheme_is_rejected(self):
        with pytest.raises(ClientError, match="Invalid Authorization header format"):
            extract_bearer_token("Basic dXNlcjpwYXNz")

    def test_bearer_without_token_is_rejected(self):
        with pytest.raises(ClientError, match="Invalid Authorization header format"):
            extract_bearer_token("Bearer ")


class TestClientProvider:
    def test_uses_configured_token_outside_http(self):
        get_client = make_client_provider(Settings(api_token="dop_v1_configured"))

        assert isinstance(get_client(), Client)

    def test_missing_token_raises(self):
        get_client = make_client_provider(Settings(api_token=""))

        with pytest.raises(ClientError, match="DIGITALOCEAN_API_TOKEN"):
            get_client()
