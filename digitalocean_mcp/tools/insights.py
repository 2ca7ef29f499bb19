"""Monitoring tools: uptime checks, their alerts, and metric alert policies."""

from typing import Annotated

from pydantic import Field

from digitalocean_mcp.tools.base import Page, PerPage, ToolDefinition, ToolGroup

CheckId = Annotated[str, Field(description="ID of the uptime check")]


class UptimeTools(ToolGroup):
    def list_checks(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.uptime.list_checks(page=page, per_page=per_page))

    def get_check(self, check_id: CheckId) -> str:
        return self._call(lambda c: c.uptime.get_check(check_id))

    def get_check_state(self, check_id: CheckId) -> str:
        return self._call(lambda c: c.uptime.get_check_state(check_id))

    def create_check(
        self,
        name: str,
        target: Annotated[str, Field(description="URL or host to probe")],
        check_type: Annotated[str, Field(description="'https', 'http' or 'ping'")] = "https",
        regions: list[str] | None = None,
    ) -> str:
        body = {
            "name": name,
            "type": check_type,
            "target": target,
            "regions": regions or ["us_east", "eu_west"],
            "enabled": True,
        }
        return self._call(lambda c: c.uptime.create_check(body=body))

    def delete_check(self, check_id: CheckId) -> str:
        self._call(lambda c: c.uptime.delete_check(check_id))
        return f"Uptime check {check_id} deleted"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("uptime-check-list", "List uptime checks", self.list_checks),
            ("uptime-check-get", "Get an uptime check", self.get_check),
            ("uptime-check-state", "Get the current state of an uptime check", self.get_check_state),
            ("uptime-check-create", "Create an uptime check", self.create_check),
            ("uptime-check-delete", "Delete an uptime check", self.delete_check),
        ]


class UptimeCheckAlertTools(ToolGroup):
    def list_alerts(self, check_id: CheckId, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(
            lambda c: c.uptime.list_alerts(check_id, page=page, per_page=per_page)
        )

    def get_alert(self, check_id: CheckId, alert_id: str) -> str:
        return self._call(lambda c: c.uptime.get_alert(check_id, alert_id))

    def delete_alert(self, check_id: CheckId, alert_id: str) -> str:
        self._call(lambda c: c.uptime.delete_alert(check_id, alert_id))
        return f"Alert {alert_id} deleted from uptime check {check_id}"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("uptime-alert-list", "List the alerts of an uptime check", self.list_alerts),
            ("uptime-alert-get", "Get an uptime check alert", self.get_alert),
            ("uptime-alert-delete", "Delete an uptime check alert", self.delete_alert),
        ]


class AlertPolicyTools(ToolGroup):
    def list_policies(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.monitoring.list_alert_policy(page=page, per_page=per_page))

    def get_policy(self, alert_uuid: str) -> str:
        return self._call(lambda c: c.monitoring.get_alert_policy(alert_uuid))

    def delete_policy(self, alert_uuid: str) -> str:
        self._call(lambda c: c.monitoring.delete_alert_policy(alert_uuid))
        return f"Alert policy {alert_uuid} deleted"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("alert-policy-list", "List metric alert policies", self.list_policies),
            ("alert-policy-get", "Get a metric alert policy", self.get_policy),
            ("alert-policy-delete", "Delete a metric alert policy", self.delete_policy),
        ]
