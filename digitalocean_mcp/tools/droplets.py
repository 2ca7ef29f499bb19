"""Droplet, image and size tools."""

from typing import Annotated

from pydantic import Field

from digitalocean_mcp.tools.base import Page, PerPage, ToolDefinition, ToolGroup

DropletId = Annotated[int, Field(description="ID of the droplet")]
ImageId = Annotated[int, Field(description="ID of the image")]


class DropletTools(ToolGroup):
    """Droplet CRUD and power control."""

    def list_droplets(self, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(lambda c: c.droplets.list(page=page, per_page=per_page))

    def get_droplet(self, droplet_id: DropletId) -> str:
        return self._call(lambda c: c.droplets.get(droplet_id))

    def create_droplet(
        self,
        name: str,
        region: Annotated[str, Field(description="Region slug, e.g. nyc3")],
        size: Annotated[str, Field(description="Size slug, e.g. s-1vcpu-1gb")],
        image: Annotated[str, Field(description="Image slug or ID")],
        ssh_keys: list[str] | None = None,
        tags: list[str] | None = None,
    ) -> str:
        body = {"name": name, "region": region, "size": size, "image": image}
        if ssh_keys:
            body["ssh_keys"] = ssh_keys
        if tags:
            body["tags"] = tags
        return self._call(lambda c: c.droplets.create(body=body))

    def delete_droplet(self, droplet_id: DropletId) -> str:
        self._call(lambda c: c.droplets.destroy(droplet_id))
        return f"Droplet {droplet_id} deleted"

    def power_on(self, droplet_id: DropletId) -> str:
        return self._call(
            lambda c: c.droplet_actions.post(droplet_id, body={"type": "power_on"})
        )

    def power_off(self, droplet_id: DropletId) -> str:
        return self._call(
            lambda c: c.droplet_actions.post(droplet_id, body={"type": "power_off"})
        )

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("droplet-list", "List droplets on the account", self.list_droplets),
            ("droplet-get", "Get a droplet by ID", self.get_droplet),
            ("droplet-create", "Create a new droplet", self.create_droplet),
            ("droplet-delete", "Delete a droplet by ID", self.delete_droplet),
            ("droplet-power-on", "Power on a droplet", self.power_on),
            ("droplet-power-off", "Power off a droplet (hard shutdown)", self.power_off),
        ]


class DropletActionsTools(ToolGroup):
    """Lifecycle actions on existing droplets."""

    def _post(self, droplet_id: int, body: dict) -> str:
        return self._call(lambda c: c.droplet_actions.post(droplet_id, body=body))

    def reboot(self, droplet_id: DropletId) -> str:
        return self._post(droplet_id, {"type": "reboot"})

    def shutdown(self, droplet_id: DropletId) -> str:
        return self._post(droplet_id, {"type": "shutdown"})

    def power_cycle(self, droplet_id: DropletId) -> str:
        return self._post(droplet_id, {"type": "power_cycle"})

    def resize(
        self,
        droplet_id: DropletId,
        size: Annotated[str, Field(description="Target size slug")],
        disk: Annotated[bool, Field(description="Also resize the disk (irreversible)")] = False,
    ) -> str:
        return self._post(droplet_id, {"type": "resize", "size": size, "disk": disk})

    def snapshot(self, droplet_id: DropletId, name: str) -> str:
        return self._post(droplet_id, {"type": "snapshot", "name": name})

    def rebuild(
        self,
        droplet_id: DropletId,
        image: Annotated[str, Field(description="Image slug or ID to rebuild from")],
    ) -> str:
        return self._post(droplet_id, {"type": "rebuild", "image": image})

    def rename(self, droplet_id: DropletId, name: str) -> str:
        return self._post(droplet_id, {"type": "rename", "name": name})

    def list_actions(self, droplet_id: DropletId, page: Page = 1, per_page: PerPage = 20) -> str:
        return self._call(
            lambda c: c.droplet_actions.list(droplet_id, page=page, per_page=per_page)
        )

    def get_action(self, droplet_id: DropletId, action_id: int) -> str:
        return self._call(lambda c: c.droplet_actions.get(droplet_id, action_id))

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("droplet-reboot", "Reboot a droplet", self.reboot),
            ("droplet-shutdown", "Gracefully shut down a droplet", self.shutdown),
            ("droplet-power-cycle", "Power cycle a droplet", self.power_cycle),
            ("droplet-resize", "Resize a droplet to a new size", self.resize),
            ("droplet-snapshot", "Take a snapshot of a droplet", self.snapshot),
            ("droplet-rebuild", "Rebuild a droplet from an image", self.rebuild),
            ("droplet-rename", "Rename a droplet", self.rename),
            ("droplet-action-list", "List actions performed on a droplet", self.list_actions),
            ("droplet-action-get", "Get a droplet action by ID", self.get_action),
        ]


class ImageTools(ToolGroup):
    def list_images(
        self,
        image_type: Annotated[
            str | None, Field(description="'distribution' or 'application'")
        ] = None,
        private: Annotated[bool, Field(description="Only list the user's own images")] = False,
        page: Page = 1,
        per_page: PerPage = 20,
    ) -> str:
        params = {"page": page, "per_page": per_page}
        if image_type:
            params["type"] = image_type
        if private:
            params["private"] = True
        return self._call(lambda c: c.images.list(**params))

    def get_image(self, image_id: ImageId) -> str:
        return self._call(lambda c: c.images.get(image_id))

    def delete_image(self, image_id: ImageId) -> str:
        self._call(lambda c: c.images.delete(image_id))
        return f"Image {image_id} deleted"

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("image-list", "List images, optionally filtered by type", self.list_images),
            ("image-get", "Get an image by ID", self.get_image),
            ("image-delete", "Delete a private image", self.delete_image),
        ]


class ImageActionsTools(ToolGroup):
    def transfer(
        self,
        image_id: ImageId,
        region: Annotated[str, Field(description="Destination region slug")],
    ) -> str:
        return self._call(
            lambda c: c.image_actions.post(image_id, body={"type": "transfer", "region": region})
        )

    def convert(self, image_id: ImageId) -> str:
        return self._call(lambda c: c.image_actions.post(image_id, body={"type": "convert"}))

    def list_actions(self, image_id: ImageId) -> str:
        return self._call(lambda c: c.image_actions.list(image_id))

    def definitions(self) -> list[ToolDefinition]:
        return [
            ("image-transfer", "Transfer an image to another region", self.transfer),
            ("image-convert", "Convert a backup into a snapshot", self.convert),
            ("image-action-list", "List actions performed on an image", self.list_actions),
        ]


class SizesTools(ToolGroup):
    def list_sizes(self, page: Page = 1, per_page: PerPage = 50) -> str:
        return self._call(lambda c: c.sizes.list(page=page, per_page=per_page))

    def definitions(self) -> list[ToolDefinition]:
        return [("size-list", "List available droplet sizes and their prices", self.list_sizes)]
