"""
Static catalog of services and capability groups.

Three read-only tables drive registration:

- SERVICE_CATALOG: Service -> ServiceCatalogEntry. Each entry holds the
  service's default category and an activation function that turns the
  requested categories into the capability groups to activate.
- GROUP_TOOLSETS: Group -> the tool group classes that make up that
  capability group.
- COMMON_GROUPS: groups activated for every registration.

Categories per service:

    droplets     basic, actions, images, sizes
    networking   basic (= lb), lb, firewall, dns, vpc, ip
    accounts     basic (= info), info, billing, keys, actions
    spaces       basic (= keys), keys, cdn
    insights     basic (= uptime), uptime, alerts
    databases    basic (= cluster), cluster, postgresql, mysql, mongodb,
                 redis, kafka, opensearch, users, firewall
    apps, doks, marketplace
                 single group, activated for any category

"all" activates every group of a service.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Sequence

from digitalocean_mcp.registry.filters import DEFAULT_CATEGORY, has_category
from digitalocean_mcp.tools import accounts, apps, common, databases, doks, droplets
from digitalocean_mcp.tools import insights, marketplace, networking, spaces
from digitalocean_mcp.tools.base import ToolGroup


class Service(str, Enum):
    APPS = "apps"
    NETWORKING = "networking"
    DROPLETS = "droplets"
    ACCOUNTS = "accounts"
    SPACES = "spaces"
    DATABASES = "databases"
    MARKETPLACE = "marketplace"
    INSIGHTS = "insights"
    DOKS = "doks"


class Group(str, Enum):
    """A capability group: activated as a whole or not at all."""

    APPS = "apps"

    DROPLETS = "droplets"
    DROPLET_ACTIONS = "droplets.actions"
    DROPLET_IMAGES = "droplets.images"
    DROPLET_SIZES = "droplets.sizes"

    LOAD_BALANCERS = "networking.lb"
    FIREWALLS = "networking.firewall"
    DNS = "networking.dns"
    VPC = "networking.vpc"
    IP = "networking.ip"

    ACCOUNT_INFO = "accounts.info"
    BILLING = "accounts.billing"
    SSH_KEYS = "accounts.keys"
    ACCOUNT_ACTIONS = "accounts.actions"

    SPACES_KEYS = "spaces.keys"
    CDN = "spaces.cdn"

    UPTIME = "insights.uptime"
    ALERT_POLICIES = "insights.alerts"

    DB_CLUSTER = "databases.cluster"
    DB_POSTGRESQL = "databases.postgresql"
    DB_MYSQL = "databases.mysql"
    DB_MONGODB = "databases.mongodb"
    DB_REDIS = "databases.redis"
    DB_KAFKA = "databases.kafka"
    DB_OPENSEARCH = "databases.opensearch"
    DB_USERS = "databases.users"
    DB_FIREWALL = "databases.firewall"

    DOKS = "doks"
    MARKETPLACE = "marketplace"

    REGIONS = "common.regions"


ActivationFn = Callable[[Sequence[str]], list[Group]]


@dataclass(frozen=True)
class ServiceCatalogEntry:
    default_category: str
    activate: ActivationFn


def _gated(gates: Sequence[tuple[tuple[str, ...], Group]]) -> ActivationFn:
    """
    Build an activation function from (categories, group) gates.

    A group is activated when any of its categories is requested. Listing
    "basic" next to a service-specific name makes that group the service's
    default.
    """

    def activate(categories: Sequence[str]) -> list[Group]:
        return [
            group
            for names, group in gates
            if any(has_category(categories, name) for name in names)
        ]

    return activate


def _always(group: Group) -> ActivationFn:
    def activate(categories: Sequence[str]) -> list[Group]:
        return [group]

    return activate


_activate_droplets = _gated([
    (("basic",), Group.DROPLETS),
    (("actions",), Group.DROPLET_ACTIONS),
    (("images",), Group.DROPLET_IMAGES),
    (("sizes",), Group.DROPLET_SIZES),
])

# load balancers are the most common networking use case
_activate_networking = _gated([
    (("basic", "lb"), Group.LOAD_BALANCERS),
    (("firewall",), Group.FIREWALLS),
    (("dns",), Group.DNS),
    (("vpc",), Group.VPC),
    (("ip",), Group.IP),
])

_activate_accounts = _gated([
    (("basic", "info"), Group.ACCOUNT_INFO),
    (("billing",), Group.BILLING),
    (("keys",), Group.SSH_KEYS),
    (("actions",), Group.ACCOUNT_ACTIONS),
])

_activate_spaces = _gated([
    (("basic", "keys"), Group.SPACES_KEYS),
    (("cdn",), Group.CDN),
])

_activate_insights = _gated([
    (("basic", "uptime"), Group.UPTIME),
    (("alerts",), Group.ALERT_POLICIES),
])

_activate_databases = _gated([
    (("basic", "cluster"), Group.DB_CLUSTER),
    (("postgresql",), Group.DB_POSTGRESQL),
    (("mysql",), Group.DB_MYSQL),
    (("mongodb",), Group.DB_MONGODB),
    (("redis",), Group.DB_REDIS),
    (("kafka",), Group.DB_KAFKA),
    (("opensearch",), Group.DB_OPENSEARCH),
    (("users",), Group.DB_USERS),
    (("firewall",), Group.DB_FIREWALL),
])


SERVICE_CATALOG: Mapping[Service, ServiceCatalogEntry] = MappingProxyType({
    Service.APPS: ServiceCatalogEntry(DEFAULT_CATEGORY, _always(Group.APPS)),
    Service.NETWORKING: ServiceCatalogEntry(DEFAULT_CATEGORY, _activate_networking),
    Service.DROPLETS: ServiceCatalogEntry(DEFAULT_CATEGORY, _activate_droplets),
    Service.ACCOUNTS: ServiceCatalogEntry(DEFAULT_CATEGORY, _activate_accounts),
    Service.SPACES: ServiceCatalogEntry(DEFAULT_CATEGORY, _activate_spaces),
    Service.DATABASES: ServiceCatalogEntry(DEFAULT_CATEGORY, _activate_databases),
    Service.MARKETPLACE: ServiceCatalogEntry(DEFAULT_CATEGORY, _always(Group.MARKETPLACE)),
    Service.INSIGHTS: ServiceCatalogEntry(DEFAULT_CATEGORY, _activate_insights),
    Service.DOKS: ServiceCatalogEntry(DEFAULT_CATEGORY, _always(Group.DOKS)),
})


GROUP_TOOLSETS: Mapping[Group, tuple[type[ToolGroup], ...]] = MappingProxyType({
    Group.APPS: (apps.AppPlatformTools,),
    Group.DROPLETS: (droplets.DropletTools,),
    Group.DROPLET_ACTIONS: (droplets.DropletActionsTools,),
    Group.DROPLET_IMAGES: (droplets.ImageTools, droplets.ImageActionsTools),
    Group.DROPLET_SIZES: (droplets.SizesTools,),
    Group.LOAD_BALANCERS: (networking.LoadBalancersTools,),
    Group.FIREWALLS: (networking.FirewallTools,),
    Group.DNS: (networking.DomainsTools, networking.CertificateTools),
    Group.VPC: (networking.VPCTools, networking.VPCPeeringTools),
    Group.IP: (networking.ReservedIPTools, networking.BYOIPPrefixTools),
    Group.ACCOUNT_INFO: (accounts.AccountTools,),
    Group.BILLING: (accounts.BalanceTools, accounts.BillingTools, accounts.InvoiceTools),
    Group.SSH_KEYS: (accounts.KeysTools,),
    Group.ACCOUNT_ACTIONS: (accounts.ActionTools,),
    Group.SPACES_KEYS: (spaces.SpacesKeysTools,),
    Group.CDN: (spaces.CDNTools,),
    Group.UPTIME: (insights.UptimeTools, insights.UptimeCheckAlertTools),
    Group.ALERT_POLICIES: (insights.AlertPolicyTools,),
    Group.DB_CLUSTER: (databases.ClusterTools,),
    Group.DB_POSTGRESQL: (databases.PostgreSQLTools,),
    Group.DB_MYSQL: (databases.MysqlTools,),
    Group.DB_MONGODB: (databases.MongoTools,),
    Group.DB_REDIS: (databases.RedisTools,),
    Group.DB_KAFKA: (databases.KafkaTools,),
    Group.DB_OPENSEARCH: (databases.OpenSearchTools,),
    Group.DB_USERS: (databases.UserTools,),
    Group.DB_FIREWALL: (databases.FirewallTools,),
    Group.DOKS: (doks.DoksTools,),
    Group.MARKETPLACE: (marketplace.OneClickTools,),
    Group.REGIONS: (common.RegionTools,),
})

COMMON_GROUPS: tuple[Group, ...] = (Group.REGIONS,)


def supported_services() -> list[str]:
    """Names of every service in the catalog, in catalog order."""
    return [service.value for service in SERVICE_CATALOG]


def default_categories() -> dict[str, str]:
    """Service name -> the category a bare service token stands for."""
    return {service.value: entry.default_category for service, entry in SERVICE_CATALOG.items()}
