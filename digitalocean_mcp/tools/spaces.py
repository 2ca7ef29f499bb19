"""Spaces (object storage) access keys and CDN endpoint tools."""

from typing import Annotated

from pydantic import Field

from digitalocean_mcp.tools.base import Page, PerPage, ToolDefinition, ToolGroup


class SpacesKeysTools(ToolGroup):
    def list_keys(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.spaces_key.list(page=page, per_page=per_page))

    def create_key(
        self,
        name: str,
        bucket: Annotated[str | None, Field(description="Limit the key to one bucket")] = None,
        permission: Annotated[str, Field(description="'read', 'readwrite' or 'fullaccess'")] = "read",
    ) -> str:
        grant = {"bucket": bucket or "", "permission": permission}
        return self._call(lambda c: c.spaces_key.create(body={"name": name, "grants": [grant]}))

    def delete_key(self, access_key: str) -> str:
        self._call(lambda c: c.spaces_key.delete(access_key))
        return f"Spaces key {access_key} deleted"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("spaces-key-list", "List Spaces access keys", self.list_keys),
            ("spaces-key-create", "Create a Spaces access key", self.create_key),
            ("spaces-key-delete", "Delete a Spaces access key", self.delete_key),
        ]


class CDNTools(ToolGroup):
    def list_endpoints(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.cdn.list_endpoints(page=page, per_page=per_page))

    def get_endpoint(self, cdn_id: str) -> str:
        return self._call(lambda c: c.cdn.get_endpoint(cdn_id))

    def purge_cache(
        self,
        cdn_id: str,
        files: Annotated[list[str], Field(description="Paths to purge, '*' for everything")],
    ) -> str:
        self._call(lambda c: c.cdn.purge_cache(cdn_id, body={"files": files}))
        return f"Cache purge requested for CDN endpoint {cdn_id}"

    def delete_endpoint(self, cdn_id: str) -> str:
        self._call(lambda c: c.cdn.delete_endpoint(cdn_id))
        return f"CDN endpoint {cdn_id} deleted"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("cdn-list", "List CDN endpoints", self.list_endpoints),
            ("cdn-get", "Get a CDN endpoint by ID", self.get_endpoint),
            ("cdn-purge-cache", "Purge cached files from a CDN endpoint", self.purge_cache),
            ("cdn-delete", "Delete a CDN endpoint", self.delete_endpoint),
        ]
