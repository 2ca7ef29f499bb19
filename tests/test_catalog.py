"""Tests for the static service catalog and capability group tables."""

import pytest

from digitalocean_mcp.registry.catalog import (
    COMMON_GROUPS,
    GROUP_TOOLSETS,
    SERVICE_CATALOG,
    Group,
    Service,
    default_categories,
    supported_services,
)

# Every category a service understands, "basic" excluded.
SERVICE_CATEGORIES = {
    Service.DROPLETS: ["actions", "images", "sizes"],
    Service.NETWORKING: ["lb", "firewall", "dns", "vpc", "ip"],
    Service.ACCOUNTS: ["info", "billing", "keys", "actions"],
    Service.SPACES: ["keys", "cdn"],
    Service.INSIGHTS: ["uptime", "alerts"],
    Service.DATABASES: [
        "cluster", "postgresql", "mysql", "mongodb", "redis", "kafka", "opensearch", "users", "firewall",
    ],
    Service.APPS: [],
    Service.DOKS: [],
    Service.MARKETPLACE: [],
}


def activate(service: Service, categories: list[str]) -> list[Group]:
    return SERVICE_CATALOG[service].activate(categories)


class TestCatalogShape:
    def test_supported_services(self):
        assert sorted(supported_services()) == sorted(
            ["apps", "networking", "droplets", "accounts", "spaces",
             "databases", "marketplace", "insights", "doks"]
        )

    def test_every_service_defaults_to_basic(self):
        assert {entry.default_category for entry in SERVICE_CATALOG.values()} == {"basic"}

    def test_default_categories_come_from_entries(self):
        defaults = default_categories()

        assert set(defaults) == set(supported_services())
        assert all(
            defaults[service.value] == entry.default_category
            for service, entry in SERVICE_CATALOG.items()
        )

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            SERVICE_CATALOG[Service.APPS] = SERVICE_CATALOG[Service.DOKS]
        with pytest.raises(TypeError):
            GROUP_TOOLSETS[Group.APPS] = ()

    def test_every_group_has_toolsets(self):
        assert set(GROUP_TOOLSETS) == set(Group)
        assert all(GROUP_TOOLSETS[group] for group in Group)

    def test_every_group_is_reachable(self):
        """Each group is activated by some service's "all", or is common."""
        reachable = set(COMMON_GROUPS)
        for service in Service:
            reachable.update(activate(service, ["all"]))

        assert reachable == set(Group)


class TestActivation:
    @pytest.mark.parametrize("service", list(Service))
    def test_basic_activates_at_least_one_group(self, service):
        assert activate(service, ["basic"])

    @pytest.mark.parametrize("service", list(Service))
    def test_all_is_superset_of_any_combination(self, service):
        everything = set(activate(service, ["all"]))
        for category in ["basic", *SERVICE_CATEGORIES[service]]:
            assert set(activate(service, [category])) <= everything
        assert set(activate(service, ["basic", *SERVICE_CATEGORIES[service]])) == everything

    def test_networking_all(self):
        assert activate(Service.NETWORKING, ["all"]) == [
            Group.LOAD_BALANCERS, Group.FIREWALLS, Group.DNS, Group.VPC, Group.IP,
        ]

    @pytest.mark.parametrize(
        "service, alias, group",
        [
            (Service.NETWORKING, "lb", Group.LOAD_BALANCERS),
            (Service.ACCOUNTS, "info", Group.ACCOUNT_INFO),
            (Service.SPACES, "keys", Group.SPACES_KEYS),
            (Service.INSIGHTS, "uptime", Group.UPTIME),
            (Service.DATABASES, "cluster", Group.DB_CLUSTER),
        ],
    )
    def test_basic_aliases(self, service, alias, group):
        assert activate(service, ["basic"]) == [group]
        assert activate(service, [alias]) == [group]

    def test_droplet_categories(self):
        assert activate(Service.DROPLETS, ["basic", "sizes"]) == [Group.DROPLETS, Group.DROPLET_SIZES]
        assert activate(Service.DROPLETS, ["images"]) == [Group.DROPLET_IMAGES]

    def test_unmatched_category_activates_nothing(self):
        assert activate(Service.DROPLETS, ["firewall"]) == []

    @pytest.mark.parametrize(
        "service, group",
        [
            (Service.APPS, Group.APPS),
            (Service.DOKS, Group.DOKS),
            (Service.MARKETPLACE, Group.MARKETPLACE),
        ],
    )
    def test_ungated_services_always_activate(self, service, group):
        for categories in (["basic"], ["all"], ["whatever"]):
            assert activate(service, categories) == [group]


class TestToolsets:
    def test_tool_names_are_unique(self, client_provider):
        names = [
            tool.name
            for toolsets in GROUP_TOOLSETS.values()
            for toolset in toolsets
            for tool in toolset(client_provider).tools()
        ]

        assert len(names) == len(set(names))

    def test_every_tool_has_a_description(self, client_provider):
        for toolsets in GROUP_TOOLSETS.values():
            for toolset in toolsets:
                for tool in toolset(client_provider).tools():
                    assert tool.description, tool.name

    def test_group_without_definitions_cannot_be_built(self, client_provider):
        from digitalocean_mcp.tools.base import ToolGroup

        class IncompleteTools(ToolGroup):
            pass

        with pytest.raises(TypeError):
            IncompleteTools(client_provider)
