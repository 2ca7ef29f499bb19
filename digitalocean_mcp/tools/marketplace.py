"""1-Click application tools."""

from typing import Annotated

from pydantic import Field

from digitalocean_mcp.tools.base import ToolDefinition, ToolGroup


class OneClickTools(ToolGroup):
    def list_one_clicks(
        self,
        app_type: Annotated[str | None, Field(description="'droplet' or 'kubernetes'")] = None,
    ) -> str:
        if app_type:
            return self._call(lambda c: c.one_clicks.list(type=app_type))
        return self._call(lambda c: c.one_clicks.list())

    def install_kubernetes(
        self,
        cluster_uuid: str,
        addon_slugs: Annotated[list[str], Field(description="1-Click slugs to install")],
    ) -> str:
        body = {"cluster_uuid": cluster_uuid, "addon_slugs": addon_slugs}
        return self._call(lambda c: c.one_clicks.install_kubernetes(body=body))

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("1-click-list", "List 1-Click applications from the marketplace", self.list_one_clicks),
            (
                "1-click-kubernetes-install",
                "Install 1-Click applications on a Kubernetes cluster",
                self.install_kubernetes,
            ),
        ]
