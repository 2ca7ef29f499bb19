"""
Managed database tools.

ClusterTools covers engine-agnostic cluster operations. Each engine gets its
own small group so an agent working only with PostgreSQL does not carry the
Kafka or OpenSearch tools in its context. Engine groups share EngineTools,
which filters clusters by engine slug and reads the engine configuration.
"""

from typing import Annotated

from pydantic import Field

from digitalocean_mcp.tools.base import ToolDefinition, ToolGroup

ClusterId = Annotated[str, Field(description="UUID of the database cluster")]


class ClusterTools(ToolGroup):
    def list_clusters(
        self, tag_name: Annotated[str | None, Field(description="Only clusters with this tag")] = None
    ) -> str:
        if tag_name:
            return self._call(lambda c: c.databases.list_clusters(tag_name=tag_name))
        return self._call(lambda c: c.databases.list_clusters())

    def get_cluster(self, cluster_id: ClusterId) -> str:
        return self._call(lambda c: c.databases.get_cluster(cluster_id))

    def delete_cluster(self, cluster_id: ClusterId) -> str:
        self._call(lambda c: c.databases.destroy_cluster(cluster_id))
        return f"Database cluster {cluster_id} deleted"

    def list_backups(self, cluster_id: ClusterId) -> str:
        return self._call(lambda c: c.databases.list_backups(cluster_id))

    def list_options(self) -> str:
        return self._call(lambda c: c.databases.list_options())

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("db-cluster-list", "List managed database clusters", self.list_clusters),
            ("db-cluster-get", "Get a database cluster", self.get_cluster),
            ("db-cluster-delete", "Delete a database cluster", self.delete_cluster),
            ("db-cluster-backup-list", "List backups of a database cluster", self.list_backups),
            (
                "db-options-list",
                "List available engines, versions, regions and sizes",
                self.list_options,
            ),
        ]


class EngineTools(ToolGroup):
    """Base for engine-specific groups; subclasses set `engine` and `label`."""

    engine = ""
    label = ""

    def list_engine_clusters(self) -> str:
        def operation(client):
            clusters = client.databases.list_clusters().get("databases") or []
            return {"databases": [db for db in clusters if db.get("engine") == self.engine]}

        return self._call(operation)

    def get_config(self, cluster_id: ClusterId) -> str:
        return self._call(lambda c: c.databases.get_config(cluster_id))

    def extra_definitions(self) -> list[ToolDefinition]:
        return []

    def definitions(self) -> list[ToolDefinition]:
        return [
            (
                f"db-{self.label}-cluster-list",
                f"List {self.label} database clusters",
                self.list_engine_clusters,
            ),
            (
                f"db-{self.label}-config-get",
                f"Get the engine configuration of a {self.label} cluster",
                self.get_config,
            ),
            *self.extra_definitions(),
        ]


class PostgreSQLTools(EngineTools):
    engine = "pg"
    label = "postgresql"

    def list_connection_pools(self, cluster_id: ClusterId) -> str:
        return self._call(lambda c: c.databases.list_connection_pools(cluster_id))

    def extra_definitions(self) -> list[ToolDefinition]:
        return [
            (
                "db-postgresql-pool-list",
                "List PgBouncer connection pools of a PostgreSQL cluster",
                self.list_connection_pools,
            ),
        ]


class MysqlTools(EngineTools):
    engine = "mysql"
    label = "mysql"

    def get_sql_mode(self, cluster_id: ClusterId) -> str:
        return self._call(lambda c: c.databases.get_sql_mode(cluster_id))

    def extra_definitions(self) -> list[ToolDefinition]:
        return [("db-mysql-sql-mode-get", "Get the SQL modes of a MySQL cluster", self.get_sql_mode)]


class MongoTools(EngineTools):
    engine = "mongodb"
    label = "mongodb"


class RedisTools(EngineTools):
    engine = "redis"
    label = "redis"

    def get_eviction_policy(self, cluster_id: ClusterId) -> str:
        return self._call(lambda c: c.databases.get_eviction_policy(cluster_id))

    def extra_definitions(self) -> list[ToolDefinition]:
        return [
            (
                "db-redis-eviction-policy-get",
                "Get the eviction policy of a Redis cluster",
                self.get_eviction_policy,
            ),
        ]


class KafkaTools(EngineTools):
    engine = "kafka"
    label = "kafka"

    def list_topics(self, cluster_id: ClusterId) -> str:
        return self._call(lambda c: c.databases.list_kafka_topics(cluster_id))

    def get_topic(self, cluster_id: ClusterId, topic_name: str) -> str:
        return self._call(lambda c: c.databases.get_kafka_topic(cluster_id, topic_name))

    def extra_definitions(self) -> list[ToolDefinition]:
        return [
            ("db-kafka-topic-list", "List topics of a Kafka cluster", self.list_topics),
            ("db-kafka-topic-get", "Get a Kafka topic", self.get_topic),
        ]


class OpenSearchTools(EngineTools):
    engine = "opensearch"
    label = "opensearch"

    def list_indexes(self, cluster_id: ClusterId) -> str:
        # the generated client spells this operation "opeasearch"
        return self._call(lambda c: c.databases.list_opeasearch_indexes(cluster_id))

    def extra_definitions(self) -> list[ToolDefinition]:
        return [("db-opensearch-index-list", "List indexes of an OpenSearch cluster", self.list_indexes)]


class UserTools(ToolGroup):
    def list_users(self, cluster_id: ClusterId) -> str:
        return self._call(lambda c: c.databases.list_users(cluster_id))

    def get_user(self, cluster_id: ClusterId, username: str) -> str:
        return self._call(lambda c: c.databases.get_user(cluster_id, username))

    def add_user(self, cluster_id: ClusterId, username: str) -> str:
        return self._call(lambda c: c.databases.add_user(cluster_id, body={"name": username}))

    def delete_user(self, cluster_id: ClusterId, username: str) -> str:
        self._call(lambda c: c.databases.delete_user(cluster_id, username))
        return f"User {username} deleted from cluster {cluster_id}"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("db-user-list", "List users of a database cluster", self.list_users),
            ("db-user-get", "Get a database user", self.get_user),
            ("db-user-create", "Create a database user", self.add_user),
            ("db-user-delete", "Delete a database user", self.delete_user),
        ]


class FirewallTools(ToolGroup):
    """Trusted sources allowed to connect to a database cluster."""

    def list_rules(self, cluster_id: ClusterId) -> str:
        return self._call(lambda c: c.databases.list_firewall_rules(cluster_id))

    def update_rules(
        self,
        cluster_id: ClusterId,
        rules: Annotated[
            list[dict],
            Field(description="Full rule set, each {'type': 'ip_addr'|'droplet'|'k8s'|'tag'|'app', 'value': ...}"),
        ],
    ) -> str:
        self._call(lambda c: c.databases.update_firewall_rules(cluster_id, body={"rules": rules}))
        return f"Firewall rules updated for cluster {cluster_id}"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("db-firewall-list", "List trusted sources of a database cluster", self.list_rules),
            ("db-firewall-update", "Replace the trusted sources of a database cluster", self.update_rules),
        ]
