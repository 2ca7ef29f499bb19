"""
Tests for the registration driver (registry.registration.register).

The driver is exercised against an in-memory tool surface; no tool is ever
called, so the client provider is never used.
"""

import logging

import pytest

from digitalocean_mcp.registry.catalog import GROUP_TOOLSETS, Group, supported_services
from digitalocean_mcp.registry.registration import (
    RegistrationError,
    ToolConstructionError,
    UnknownServiceError,
    register,
)
from digitalocean_mcp.tools.base import ToolGroup


class BrokenTools(ToolGroup):
    def definitions(self):
        raise ValueError("missing app spec schema")


def with_broken(group: Group) -> dict:
    toolsets = dict(GROUP_TOOLSETS)
    toolsets[group] = (BrokenTools,)
    return toolsets


class TestUnknownService:
    def test_unknown_service_is_rejected(self, tool_surface, client_provider):
        with pytest.raises(UnknownServiceError, match="bogus") as exc_info:
            register(tool_surface, client_provider, "bogus:all")

        assert exc_info.value.service == "bogus"
        assert exc_info.value.supported == supported_services()
        assert "droplets" in str(exc_info.value)

    def test_nothing_is_attached_whatever_the_position(self, tool_surface, client_provider):
        with pytest.raises(UnknownServiceError):
            register(tool_surface, client_provider, "droplets", "networking:all", "bogus")

        assert tool_surface.tools == []

    def test_is_a_registration_error(self, tool_surface, client_provider):
        with pytest.raises(RegistrationError):
            register(tool_surface, client_provider, "nope")


class TestDefaults:
    def test_no_services_loads_basic_for_every_service(self, client_provider, make_tool_surface):
        implicit, explicit = make_tool_surface(), make_tool_surface()
        register(implicit, client_provider)
        register(explicit, client_provider, *supported_services())

        assert implicit.names == explicit.names
        assert "droplet-list" in implicit.names
        assert "droplet-reboot" not in implicit.names

    def test_no_services_logs_a_warning(self, tool_surface, client_provider, caplog):
        with caplog.at_level(logging.WARNING):
            register(tool_surface, client_provider)

        assert "no services specified" in caplog.text


class TestActivation:
    def test_category_selection(self, tool_surface, client_provider):
        groups = register(tool_surface, client_provider, "droplets", "droplets:actions")

        assert groups == [Group.DROPLETS, Group.DROPLET_ACTIONS, Group.REGIONS]
        assert "droplet-list" in tool_surface.names
        assert "droplet-reboot" in tool_surface.names
        assert "image-list" not in tool_surface.names

    def test_service_all(self, tool_surface, client_provider):
        register(tool_surface, client_provider, "networking:all")

        for name in [
            "lb-list", "firewall-list", "domain-list", "certificate-list",
            "vpc-list", "vpc-peering-list", "reserved-ip-list", "byoip-prefix-list",
        ]:
            assert name in tool_surface.names

    def test_repeated_groups_register_once(self, tool_surface, client_provider):
        """basic twice, and basic plus all, must not duplicate tools."""
        register(tool_surface, client_provider, "droplets:basic", "droplets:basic", "droplets:all")

        assert len(tool_surface.names) == len(set(tool_surface.names))
        assert tool_surface.names.count("droplet-list") == 1

    def test_common_tools_always_present(self, tool_surface, client_provider):
        register(tool_surface, client_provider, "doks")

        assert "region-list" in tool_surface.names
        assert "doks-cluster-list" in tool_surface.names

    def test_common_tools_without_service_tools(self, tool_surface, client_provider):
        """'droplets:' is dropped by the parser, leaving only common groups."""
        groups = register(tool_surface, client_provider, "droplets:")

        assert groups == [Group.REGIONS]
        assert tool_surface.names == ["region-list"]


class TestConstructionErrors:
    def test_error_names_the_service(self, tool_surface, client_provider):
        toolsets = with_broken(Group.DROPLET_ACTIONS)

        with pytest.raises(ToolConstructionError) as exc_info:
            register(tool_surface, client_provider, "droplets:all", toolsets=toolsets)

        assert exc_info.value.service == "droplets"
        assert str(exc_info.value).startswith("failed to register droplets tools")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_nothing_is_attached_on_failure(self, tool_surface, client_provider):
        toolsets = with_broken(Group.DB_KAFKA)

        with pytest.raises(ToolConstructionError):
            register(tool_surface, client_provider, "droplets", "databases:all", toolsets=toolsets)

        assert tool_surface.tools == []

    def test_common_group_failure(self, tool_surface, client_provider):
        toolsets = with_broken(Group.REGIONS)

        with pytest.raises(ToolConstructionError) as exc_info:
            register(tool_surface, client_provider, "apps", toolsets=toolsets)

        assert exc_info.value.service == "common"
