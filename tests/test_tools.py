"""
Integration tests for the assembled MCP server.

These tests build the real FastMCP server with build_server() and talk to
it through FastMCP's in-memory client, so every request goes through the
MCP protocol layer, the logging middleware and the tool handlers. Only the
DigitalOcean API is replaced: the client provider returns fake_client.
"""

import json

import httpx
import pytest
from azure.core.exceptions import HttpResponseError
from fastmcp import Client
from fastmcp.exceptions import ToolError

from digitalocean_mcp.config import Settings
from digitalocean_mcp.server import build_server


@pytest.fixture
def make_server(client_provider):
    def _make_server(services: str = ""):
        return build_server(Settings(services=services, api_token=""), get_client=client_provider)

    return _make_server


async def tool_names(mcp) -> list[str]:
    async with Client(mcp) as client:
        return [tool.name for tool in await client.list_tools()]


async def call(mcp, name: str, arguments: dict | None = None) -> str:
    async with Client(mcp) as client:
        result = await client.call_tool(name, arguments or {})
    return result.content[0].text


class TestToolListing:
    async def test_only_selected_services_are_listed(self, make_server):
        names = await tool_names(make_server("accounts:all"))

        assert "account-get-information" in names
        assert "balance-get" in names
        assert "invoice-list" in names
        assert "region-list" in names
        assert "droplet-list" not in names

    async def test_default_is_basic_for_every_service(self, make_server):
        names = await tool_names(make_server())

        assert "droplet-list" in names
        assert "lb-list" in names
        assert "uptime-check-list" in names
        assert "firewall-list" not in names
        assert "db-kafka-topic-list" not in names

    async def test_input_schema_comes_from_signature(self, make_server):
        async with Client(make_server("droplets")) as client:
            tools = {tool.name: tool for tool in await client.list_tools()}

        schema = tools["droplet-get"].inputSchema
        assert schema["required"] == ["droplet_id"]
        assert schema["properties"]["droplet_id"]["type"] == "integer"


class TestToolCalls:
    async def test_result_is_compact_json(self, make_server, fake_client):
        fake_client.account.get.return_value = {
            "account": {"email": "dev@example.com", "droplet_limit": 25}
        }

        text = await call(make_server("accounts"), "account-get-information")

        assert text == '{"account":{"email":"dev@example.com","droplet_limit":25}}'

    async def test_arguments_reach_the_api(self, make_server, fake_client):
        fake_client.droplets.get.return_value = {"droplet": {"id": 42}}

        text = await call(make_server("droplets"), "droplet-get", {"droplet_id": 42})

        fake_client.droplets.get.assert_called_once_with(42)
        assert json.loads(text) == {"droplet": {"id": 42}}

    async def test_action_body(self, make_server, fake_client):
        fake_client.droplet_actions.post.return_value = {"action": {"type": "reboot"}}

        await call(make_server("droplets:actions"), "droplet-reboot", {"droplet_id": 7})

        fake_client.droplet_actions.post.assert_called_once_with(7, body={"type": "reboot"})

    async def test_delete_returns_confirmation(self, make_server, fake_client):
        fake_client.droplets.destroy.return_value = None

        text = await call(make_server("droplets"), "droplet-delete", {"droplet_id": 7})

        assert text == "Droplet 7 deleted"

    async def test_engine_tools_filter_clusters(self, make_server, fake_client):
        fake_client.databases.list_clusters.return_value = {
            "databases": [
                {"id": "a", "engine": "kafka"},
                {"id": "b", "engine": "pg"},
            ]
        }

        text = await call(make_server("databases:kafka"), "db-kafka-cluster-list")

        assert json.loads(text) == {"databases": [{"id": "a", "engine": "kafka"}]}

    async def test_api_error_becomes_tool_error(self, make_server, fake_client):
        fake_client.balance.get.side_effect = HttpResponseError(message="Unable to authenticate you")

        with pytest.raises(ToolError, match="api error: Unable to authenticate you"):
            await call(make_server("accounts:billing"), "balance-get")


class TestHealthEndpoints:
    async def test_health(self, make_server):
        app = make_server("doks").http_app(transport="streamable-http")
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app)) as client:
            response = await client.get("http://testserver/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    async def test_ready_reports_tools_and_groups(self, make_server):
        app = make_server("doks").http_app(transport="streamable-http")
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app)) as client:
            response = await client.get("http://testserver/ready")

        assert response.json() == {
            "status": "ready",
            "tool_count": 7,
            "groups": ["doks", "common.regions"],
        }
