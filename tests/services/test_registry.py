"""Tests for CommandRegistry and the default routes."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from billingctl.domain.errors import UnsupportedCommandError
from billingctl.domain.types import CommandType
from billingctl.handlers import (
    CreateInventoryItemCommandHandler,
    DeleteCountryCurrencyCommandHandler,
    RetrackOsdMessageOrderCommandHandler,
    UpdateInventoryItemCommandHandler,
)
from billingctl.services.registry import CommandRegistry, default_validators


class TestCommandRegistry:
    def test_register_and_lookup(self) -> None:
        registry = CommandRegistry()
        handler = Mock()
        registry.register("create_thing", handler)
        route = registry.route_for("CREATE_THING")
        assert route.command_type == "CREATE_THING"
        assert route.handler is handler
        assert route.validator is None

    def test_duplicate_rejected(self) -> None:
        registry = CommandRegistry()
        registry.register("CREATE_THING", Mock())
        with pytest.raises(ValueError, match="already registered"):
            registry.register("create_thing", Mock())

    @pytest.mark.parametrize("command_type", ["NOPE_THING", "", None])
    def test_unknown_type(self, command_type: str | None) -> None:
        with pytest.raises(UnsupportedCommandError):
            CommandRegistry().route_for(command_type)

    def test_container_protocol(self) -> None:
        registry = CommandRegistry()
        registry.register("B_TWO", Mock())
        registry.register("A_ONE", Mock())
        assert "a_one" in registry
        assert 3 not in registry
        assert len(registry) == 2
        assert [r.command_type for r in registry] == ["A_ONE", "B_TWO"]


class TestBuildRegistry:
    def test_all_command_types_routed(self, registry: CommandRegistry) -> None:
        assert registry.command_types() == sorted(str(t) for t in CommandType)

    @pytest.mark.parametrize(
        ("command_type", "handler_cls", "validated"),
        [
            (CommandType.CREATE_INVENTORYITEM, CreateInventoryItemCommandHandler, True),
            (CommandType.UPDATE_INVENTORYITEM, UpdateInventoryItemCommandHandler, True),
            (CommandType.RETRACKOSDMESSAGE_ORDER, RetrackOsdMessageOrderCommandHandler, False),
            (CommandType.DELETE_COUNTRYCURRENCY, DeleteCountryCurrencyCommandHandler, False),
        ],
    )
    def test_route_shape(
        self,
        registry: CommandRegistry,
        command_type: CommandType,
        handler_cls: type,
        validated: bool,
    ) -> None:
        route = registry.route_for(command_type)
        assert isinstance(route.handler, handler_cls)
        assert (route.validator is not None) is validated


def test_default_validators_keys() -> None:
    assert set(default_validators()) == {
        CommandType.CREATE_INVENTORYITEM,
        CommandType.UPDATE_INVENTORYITEM,
    }
