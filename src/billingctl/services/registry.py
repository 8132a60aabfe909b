"""CommandRegistry — command type to handler routing, composed at startup.

Routes are registered explicitly by :func:`build_registry`; nothing is
discovered at runtime. A route pairs one handler with an optional
validator that must pass before the handler runs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from billingctl.domain.errors import UnsupportedCommandError
from billingctl.domain.json_helper import FromJsonHelper
from billingctl.domain.types import CommandType
from billingctl.handlers import (
    CreateInventoryItemCommandHandler,
    DeleteCountryCurrencyCommandHandler,
    RetrackOsdMessageOrderCommandHandler,
    UpdateInventoryItemCommandHandler,
)
from billingctl.serialization.inventory_item import InventoryItemCommandValidator

if TYPE_CHECKING:
    from billingctl.domain.command import JsonCommand
    from billingctl.handlers.base import CommandSourceHandler
    from billingctl.services.interfaces import (
        CountryCurrencyWritePlatformService,
        InventoryItemWritePlatformService,
        OrderWritePlatformService,
    )

logger = logging.getLogger(__name__)

Validator = Callable[["JsonCommand"], None]


@dataclass(frozen=True)
class CommandRoute:
    """One registered command type."""

    command_type: str
    handler: CommandSourceHandler
    validator: Validator | None = None


class CommandRegistry:
    """Maps command-type strings to routes.

    Populated once at startup and read-only afterwards.
    """

    def __init__(self) -> None:
        self._routes: dict[str, CommandRoute] = {}

    def register(
        self,
        command_type: str,
        handler: CommandSourceHandler,
        *,
        validator: Validator | None = None,
    ) -> CommandRoute:
        """Add a route.

        Raises:
            ValueError: If *command_type* is already registered.
        """
        key = str(command_type).upper()
        if key in self._routes:
            msg = f"Command type {key!r} is already registered"
            raise ValueError(msg)
        route = CommandRoute(command_type=key, handler=handler, validator=validator)
        self._routes[key] = route
        logger.debug("Registered command route: %s", key)
        return route

    def route_for(self, command_type: str | None) -> CommandRoute:
        """Return the route for *command_type*.

        Raises:
            UnsupportedCommandError: If no route is registered.
        """
        route = self._routes.get(command_type.upper()) if command_type else None
        if route is None:
            raise UnsupportedCommandError(command_type)
        return route

    def command_types(self) -> list[str]:
        return sorted(self._routes)

    def __contains__(self, command_type: object) -> bool:
        return isinstance(command_type, str) and command_type.upper() in self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[CommandRoute]:
        return iter(self._routes[key] for key in self.command_types())


def default_validators(helper: FromJsonHelper | None = None) -> dict[str, Validator]:
    """Validators keyed by command type, usable without any write service."""
    inventory = InventoryItemCommandValidator(helper or FromJsonHelper())
    return {
        CommandType.CREATE_INVENTORYITEM: inventory.validate_for_create,
        CommandType.UPDATE_INVENTORYITEM: inventory.validate_for_update,
    }


def build_registry(
    *,
    inventory_service: InventoryItemWritePlatformService,
    order_service: OrderWritePlatformService,
    currency_service: CountryCurrencyWritePlatformService,
    helper: FromJsonHelper | None = None,
) -> CommandRegistry:
    """Compose every known route from the given write services."""
    validators = default_validators(helper)
    registry = CommandRegistry()
    registry.register(
        CommandType.CREATE_INVENTORYITEM,
        CreateInventoryItemCommandHandler(inventory_service),
        validator=validators[CommandType.CREATE_INVENTORYITEM],
    )
    registry.register(
        CommandType.UPDATE_INVENTORYITEM,
        UpdateInventoryItemCommandHandler(inventory_service),
        validator=validators[CommandType.UPDATE_INVENTORYITEM],
    )
    registry.register(
        CommandType.RETRACKOSDMESSAGE_ORDER,
        RetrackOsdMessageOrderCommandHandler(order_service),
    )
    registry.register(
        CommandType.DELETE_COUNTRYCURRENCY,
        DeleteCountryCurrencyCommandHandler(currency_service),
    )
    return registry
