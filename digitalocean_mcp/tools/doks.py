"""DigitalOcean Kubernetes (DOKS) tools."""

from typing import Annotated

from pydantic import Field

from digitalocean_mcp.tools.base import ToolDefinition, ToolGroup

ClusterId = Annotated[str, Field(description="ID of the Kubernetes cluster")]


class DoksTools(ToolGroup):
    def list_clusters(self) -> str:
        return self._call(lambda c: c.kubernetes.list_clusters())

    def get_cluster(self, cluster_id: ClusterId) -> str:
        return self._call(lambda c: c.kubernetes.get_cluster(cluster_id))

    def delete_cluster(self, cluster_id: ClusterId) -> str:
        self._call(lambda c: c.kubernetes.delete_cluster(cluster_id))
        return f"Kubernetes cluster {cluster_id} deleted"

    def list_node_pools(self, cluster_id: ClusterId) -> str:
        return self._call(lambda c: c.kubernetes.list_node_pools(cluster_id))

    def list_upgrades(self, cluster_id: ClusterId) -> str:
        return self._call(lambda c: c.kubernetes.get_available_upgrades(cluster_id))

    def list_options(self) -> str:
        return self._call(lambda c: c.kubernetes.list_options())

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("doks-cluster-list", "List Kubernetes clusters", self.list_clusters),
            ("doks-cluster-get", "Get a Kubernetes cluster", self.get_cluster),
            ("doks-cluster-delete", "Delete a Kubernetes cluster", self.delete_cluster),
            ("doks-nodepool-list", "List node pools of a Kubernetes cluster", self.list_node_pools),
            ("doks-upgrade-list", "List versions a cluster can upgrade to", self.list_upgrades),
            (
                "doks-options-list",
                "List available Kubernetes versions, regions and node sizes",
                self.list_options,
            ),
        ]
