"""App Platform tools."""

from typing import Annotated

from pydantic import Field

from digitalocean_mcp.tools.base import Page, PerPage, ToolDefinition, ToolGroup

AppId = Annotated[str, Field(description="ID of the app")]


class AppPlatformTools(ToolGroup):
    def list_apps(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.apps.list(page=page, per_page=per_page))

    def get_app(self, app_id: AppId) -> str:
        return self._call(lambda c: c.apps.get(app_id))

    def delete_app(self, app_id: AppId) -> str:
        self._call(lambda c: c.apps.delete(app_id))
        return f"App {app_id} deleted"

    def list_deployments(self, app_id: AppId, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.apps.list_deployments(app_id, page=page, per_page=per_page))

    def create_deployment(
        self,
        app_id: AppId,
        force_build: Annotated[bool, Field(description="Rebuild even if the source is unchanged")] = False,
    ) -> str:
        return self._call(
            lambda c: c.apps.create_deployment(app_id, body={"force_build": force_build})
        )

    def get_logs(
        self,
        app_id: AppId,
        deployment_id: str,
        component_name: str,
        log_type: Annotated[str, Field(description="'BUILD', 'DEPLOY' or 'RUN'")] = "RUN",
    ) -> str:
        return self._call(
            lambda c: c.apps.get_logs(app_id, deployment_id, component_name, type=log_type)
        )

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("apps-list", "List App Platform apps", self.list_apps),
            ("apps-get", "Get an app by ID", self.get_app),
            ("apps-delete", "Delete an app", self.delete_app),
            ("apps-deployment-list", "List the deployments of an app", self.list_deployments),
            ("apps-deployment-create", "Trigger a new deployment of an app", self.create_deployment),
            ("apps-logs-get", "Get log URLs for an app component", self.get_logs),
        ]
