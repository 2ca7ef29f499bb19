"""Account, billing, SSH key and account action tools."""

from typing import Annotated

from pydantic import Field

from digitalocean_mcp.tools.base import Page, PerPage, ToolDefinition, ToolGroup


class AccountTools(ToolGroup):
    def get_account_information(self) -> str:
        return self._call(lambda c: c.account.get())

    def definitions(self) -> list[ToolDefinition]:
        return [
            (
                "account-get-information",
                "Retrieves account information for the current user",
                self.get_account_information,
            ),
        ]


class BalanceTools(ToolGroup):
    """Balance information for the user account."""

    def get_balance(self) -> str:
        return self._call(lambda c: c.balance.get())

    def definitions(self) -> list[ToolDefinition]:
        return [("balance-get", "Get balance information for the user account", self.get_balance)]


class BillingTools(ToolGroup):
    def list_billing_history(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.billing_history.list(page=page, per_page=per_page))

    def definitions(self) -> list[ToolDefinition]:
        return [
            (
                "billing-history-list",
                "List billing history entries (invoices, payments, credits)",
                self.list_billing_history,
            ),
        ]


class InvoiceTools(ToolGroup):
    def list_invoices(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.invoices.list(page=page, per_page=per_page))

    def get_invoice(self, invoice_uuid: str) -> str:
        return self._call(lambda c: c.invoices.get_by_uuid(invoice_uuid))

    def get_invoice_summary(self, invoice_uuid: str) -> str:
        return self._call(lambda c: c.invoices.get_summary_by_uuid(invoice_uuid))

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("invoice-list", "List invoices", self.list_invoices),
            ("invoice-get", "Get the line items of an invoice", self.get_invoice),
            ("invoice-get-summary", "Get the summary of an invoice", self.get_invoice_summary),
        ]


class KeysTools(ToolGroup):
    """SSH keys registered on the account."""

    def list_keys(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.ssh_keys.list(page=page, per_page=per_page))

    def get_key(
        self, key: Annotated[str, Field(description="Key ID or fingerprint")]
    ) -> str:
        return self._call(lambda c: c.ssh_keys.get(key))

    def create_key(self, name: str, public_key: str) -> str:
        return self._call(
            lambda c: c.ssh_keys.create(body={"name": name, "public_key": public_key})
        )

    def delete_key(
        self, key: Annotated[str, Field(description="Key ID or fingerprint")]
    ) -> str:
        self._call(lambda c: c.ssh_keys.delete(key))
        return f"SSH key {key} deleted"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("key-list", "List SSH keys on the account", self.list_keys),
            ("key-get", "Get an SSH key", self.get_key),
            ("key-create", "Add an SSH public key to the account", self.create_key),
            ("key-delete", "Remove an SSH key from the account", self.delete_key),
        ]


class ActionTools(ToolGroup):
    def list_actions(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.actions.list(page=page, per_page=per_page))

    def get_action(self, action_id: int) -> str:
        return self._call(lambda c: c.actions.get(action_id))

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("action-list", "List all actions performed on the account", self.list_actions),
            ("action-get", "Get an account action by ID", self.get_action),
        ]
