"""Load balancer, firewall, DNS, VPC and IP address tools."""

from typing import Annotated

from pydantic import Field

from digitalocean_mcp.tools.base import Page, PerPage, ToolDefinition, ToolGroup

DropletIds = Annotated[list[int], Field(description="IDs of the droplets")]


class LoadBalancersTools(ToolGroup):
    def list_load_balancers(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.load_balancers.list(page=page, per_page=per_page))

    def get_load_balancer(self, lb_id: str) -> str:
        return self._call(lambda c: c.load_balancers.get(lb_id))

    def delete_load_balancer(self, lb_id: str) -> str:
        self._call(lambda c: c.load_balancers.delete(lb_id))
        return f"Load balancer {lb_id} deleted"

    def add_droplets(self, lb_id: str, droplet_ids: DropletIds) -> str:
        self._call(lambda c: c.load_balancers.add_droplets(lb_id, body={"droplet_ids": droplet_ids}))
        return f"Droplets added to load balancer {lb_id}"

    def remove_droplets(self, lb_id: str, droplet_ids: DropletIds) -> str:
        self._call(
            lambda c: c.load_balancers.remove_droplets(lb_id, body={"droplet_ids": droplet_ids})
        )
        return f"Droplets removed from load balancer {lb_id}"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("lb-list", "List load balancers", self.list_load_balancers),
            ("lb-get", "Get a load balancer by ID", self.get_load_balancer),
            ("lb-delete", "Delete a load balancer", self.delete_load_balancer),
            ("lb-add-droplets", "Attach droplets to a load balancer", self.add_droplets),
            ("lb-remove-droplets", "Detach droplets from a load balancer", self.remove_droplets),
        ]


class FirewallTools(ToolGroup):
    def list_firewalls(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.firewalls.list(page=page, per_page=per_page))

    def get_firewall(self, firewall_id: str) -> str:
        return self._call(lambda c: c.firewalls.get(firewall_id))

    def delete_firewall(self, firewall_id: str) -> str:
        self._call(lambda c: c.firewalls.delete(firewall_id))
        return f"Firewall {firewall_id} deleted"

    def assign_droplets(self, firewall_id: str, droplet_ids: DropletIds) -> str:
        self._call(
            lambda c: c.firewalls.assign_droplets(firewall_id, body={"droplet_ids": droplet_ids})
        )
        return f"Droplets assigned to firewall {firewall_id}"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("firewall-list", "List cloud firewalls", self.list_firewalls),
            ("firewall-get", "Get a cloud firewall by ID", self.get_firewall),
            ("firewall-delete", "Delete a cloud firewall", self.delete_firewall),
            ("firewall-assign-droplets", "Apply a firewall to droplets", self.assign_droplets),
        ]


class DomainsTools(ToolGroup):
    def list_domains(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.domains.list(page=page, per_page=per_page))

    def get_domain(self, domain_name: str) -> str:
        return self._call(lambda c: c.domains.get(domain_name))

    def create_domain(
        self,
        domain_name: str,
        ip_address: Annotated[
            str | None, Field(description="Optional IP address for the apex A record")
        ] = None,
    ) -> str:
        body = {"name": domain_name}
        if ip_address:
            body["ip_address"] = ip_address
        return self._call(lambda c: c.domains.create(body=body))

    def delete_domain(self, domain_name: str) -> str:
        self._call(lambda c: c.domains.delete(domain_name))
        return f"Domain {domain_name} deleted"

    def list_records(self, domain_name: str, page: Page = 1, per_page: PerPage = 50) -> str:
        return self._call(
            lambda c: c.domains.list_records(domain_name, page=page, per_page=per_page)
        )

    def create_record(
        self,
        domain_name: str,
        record_type: Annotated[str, Field(description="A, AAAA, CNAME, MX, TXT, NS, SRV or CAA")],
        name: Annotated[str, Field(description="Host name, '@' for the apex")],
        data: str,
        ttl: int = 1800,
    ) -> str:
        body = {"type": record_type, "name": name, "data": data, "ttl": ttl}
        return self._call(lambda c: c.domains.create_record(domain_name, body=body))

    def delete_record(self, domain_name: str, record_id: int) -> str:
        self._call(lambda c: c.domains.delete_record(domain_name, record_id))
        return f"Record {record_id} deleted from {domain_name}"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("domain-list", "List DNS domains", self.list_domains),
            ("domain-get", "Get a DNS domain", self.get_domain),
            ("domain-create", "Add a DNS domain", self.create_domain),
            ("domain-delete", "Delete a DNS domain", self.delete_domain),
            ("domain-record-list", "List the records of a domain", self.list_records),
            ("domain-record-create", "Create a DNS record", self.create_record),
            ("domain-record-delete", "Delete a DNS record", self.delete_record),
        ]


class CertificateTools(ToolGroup):
    def list_certificates(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.certificates.list(page=page, per_page=per_page))

    def get_certificate(self, certificate_id: str) -> str:
        return self._call(lambda c: c.certificates.get(certificate_id))

    def delete_certificate(self, certificate_id: str) -> str:
        self._call(lambda c: c.certificates.delete(certificate_id))
        return f"Certificate {certificate_id} deleted"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("certificate-list", "List TLS certificates", self.list_certificates),
            ("certificate-get", "Get a TLS certificate by ID", self.get_certificate),
            ("certificate-delete", "Delete a TLS certificate", self.delete_certificate),
        ]


class VPCTools(ToolGroup):
    def list_vpcs(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.vpcs.list(page=page, per_page=per_page))

    def get_vpc(self, vpc_id: str) -> str:
        return self._call(lambda c: c.vpcs.get(vpc_id))

    def list_members(self, vpc_id: str) -> str:
        return self._call(lambda c: c.vpcs.list_members(vpc_id))

    def create_vpc(
        self,
        name: str,
        region: str,
        ip_range: Annotated[str | None, Field(description="CIDR block, e.g. 10.10.10.0/24")] = None,
    ) -> str:
        body = {"name": name, "region": region}
        if ip_range:
            body["ip_range"] = ip_range
        return self._call(lambda c: c.vpcs.create(body=body))

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("vpc-list", "List VPCs", self.list_vpcs),
            ("vpc-get", "Get a VPC by ID", self.get_vpc),
            ("vpc-list-members", "List resources inside a VPC", self.list_members),
            ("vpc-create", "Create a VPC", self.create_vpc),
        ]


class VPCPeeringTools(ToolGroup):
    def list_peerings(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.vpc_peerings.list(page=page, per_page=per_page))

    def get_peering(self, peering_id: str) -> str:
        return self._call(lambda c: c.vpc_peerings.get(peering_id))

    def delete_peering(self, peering_id: str) -> str:
        self._call(lambda c: c.vpc_peerings.delete(peering_id))
        return f"VPC peering {peering_id} deleted"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("vpc-peering-list", "List VPC peerings", self.list_peerings),
            ("vpc-peering-get", "Get a VPC peering by ID", self.get_peering),
            ("vpc-peering-delete", "Delete a VPC peering", self.delete_peering),
        ]


class ReservedIPTools(ToolGroup):
    def list_reserved_ips(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.reserved_ips.list(page=page, per_page=per_page))

    def get_reserved_ip(self, ip: str) -> str:
        return self._call(lambda c: c.reserved_ips.get(ip))

    def reserve(self, region: Annotated[str, Field(description="Region slug to reserve in")]) -> str:
        return self._call(lambda c: c.reserved_ips.create(body={"region": region}))

    def release(self, ip: str) -> str:
        self._call(lambda c: c.reserved_ips.delete(ip))
        return f"Reserved IP {ip} released"

    def assign(self, ip: str, droplet_id: int) -> str:
        return self._call(
            lambda c: c.reserved_ips_actions.post(
                ip, body={"type": "assign", "droplet_id": droplet_id}
            )
        )

    def unassign(self, ip: str) -> str:
        return self._call(lambda c: c.reserved_ips_actions.post(ip, body={"type": "unassign"}))

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("reserved-ip-list", "List reserved IPs", self.list_reserved_ips),
            ("reserved-ip-get", "Get a reserved IP", self.get_reserved_ip),
            ("reserved-ip-reserve", "Reserve a new IP in a region", self.reserve),
            ("reserved-ip-release", "Release a reserved IP", self.release),
            ("reserved-ip-assign", "Assign a reserved IP to a droplet", self.assign),
            ("reserved-ip-unassign", "Unassign a reserved IP", self.unassign),
        ]


class BYOIPPrefixTools(ToolGroup):
    def list_prefixes(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.byoip_prefixes.list(page=page, per_page=per_page))

    def get_prefix(self, prefix_uuid: str) -> str:
        return self._call(lambda c: c.byoip_prefixes.get(prefix_uuid))

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("byoip-prefix-list", "List bring-your-own-IP prefixes", self.list_prefixes),
            ("byoip-prefix-get", "Get a BYOIP prefix by UUID", self.get_prefix),
        ]
