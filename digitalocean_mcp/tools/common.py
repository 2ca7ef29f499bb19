"""Tools registered regardless of the service selection."""

from digitalocean_mcp.tools.base import Page, PerPage, ToolDefinition, ToolGroup


class RegionTools(ToolGroup):
    def list_regions(self, page: Page = 1, per_page: PerPage = 50) -> str:
        return self._call(lambda c: c.regions.list(page=page, per_page=per_page))

    def definitions(self) -> list[ToolDefinition]:
        return [("region-list", "List datacenter regions and their availability", self.list_regions)]
