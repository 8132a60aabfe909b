"""Inventory item create/update handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from billingctl.domain.command import JsonCommand
    from billingctl.services.interfaces import InventoryItemWritePlatformService


class CreateInventoryItemCommandHandler:
    """Creates an item from the command's parameters."""

    def __init__(self, write_platform_service: InventoryItemWritePlatformService) -> None:
        self._write_platform_service = write_platform_service

    def process_command(self, command: JsonCommand) -> Any:
        return self._write_platform_service.create_inventory_item(command)


class UpdateInventoryItemCommandHandler:
    """Updates the item named by ``command.entity_id``."""

    def __init__(self, write_platform_service: InventoryItemWritePlatformService) -> None:
        self._write_platform_service = write_platform_service

    def process_command(self, command: JsonCommand) -> Any:
        return self._write_platform_service.update_inventory_item(command.entity_id, command)
