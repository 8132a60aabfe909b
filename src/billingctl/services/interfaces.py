"""Write-service interfaces consumed by command handlers.

Implementations live with the persistence layer. They own transactions
and raise their own errors (not found, constraint violations), which
reach the caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from billingctl.domain.command import JsonCommand


@runtime_checkable
class InventoryItemWritePlatformService(Protocol):
    def create_inventory_item(self, command: JsonCommand) -> Any: ...

    def update_inventory_item(self, item_id: int | None, command: JsonCommand) -> Any: ...


@runtime_checkable
class OrderWritePlatformService(Protocol):
    def retrack_osd_message(self, command: JsonCommand) -> Any: ...


@runtime_checkable
class CountryCurrencyWritePlatformService(Protocol):
    def delete_country_currency(self, entity_id: int | None) -> Any: ...
