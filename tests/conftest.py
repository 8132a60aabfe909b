"""Shared pytest fixtures and test helpers for billingctl tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any
from unittest.mock import Mock

import pytest
import structlog
from click.testing import CliRunner

from billingctl.domain.command import JsonCommand
from billingctl.domain.json_helper import FromJsonHelper
from billingctl.domain.result import CommandProcessingResult
from billingctl.serialization.inventory_item import InventoryItemCommandValidator
from billingctl.services.interfaces import (
    CountryCurrencyWritePlatformService,
    InventoryItemWritePlatformService,
    OrderWritePlatformService,
)
from billingctl.services.registry import CommandRegistry, build_registry

VALID_CREATE_PAYLOAD: dict[str, Any] = {
    "itemMasterId": 7,
    "serialNumber": "SN-0001",
    "provisioningSerialNumber": "PSN-0001",
    "status": "Available",
    "quality": "Good",
}


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def helper() -> FromJsonHelper:
    return FromJsonHelper()


@pytest.fixture
def validator(helper: FromJsonHelper) -> InventoryItemCommandValidator:
    return InventoryItemCommandValidator(helper)


@pytest.fixture
def inventory_service() -> Mock:
    service = Mock(spec=InventoryItemWritePlatformService)
    service.create_inventory_item.return_value = CommandProcessingResult.resource(101)
    service.update_inventory_item.return_value = CommandProcessingResult.resource(102)
    return service


@pytest.fixture
def order_service() -> Mock:
    service = Mock(spec=OrderWritePlatformService)
    service.retrack_osd_message.return_value = CommandProcessingResult.resource(201)
    return service


@pytest.fixture
def currency_service() -> Mock:
    service = Mock(spec=CountryCurrencyWritePlatformService)
    service.delete_country_currency.return_value = CommandProcessingResult.resource(301)
    return service


@pytest.fixture
def registry(inventory_service: Mock, order_service: Mock, currency_service: Mock) -> CommandRegistry:
    """Registry wired with mock write services."""
    return build_registry(
        inventory_service=inventory_service,
        order_service=order_service,
        currency_service=currency_service,
    )


@pytest.fixture
def _isolated_cwd(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run from an empty temp directory so no billingctl.toml is discovered.

    CLI invocations configure logging against the runner's streams, so the
    root logger is restored afterwards.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BILLINGCTL_CONFIG", raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_command(
    payload: dict[str, Any] | str,
    *,
    action: str | None = None,
    entity: str | None = None,
    entity_id: int | None = None,
) -> JsonCommand:
    """Build a JsonCommand from a dict (serialised) or raw JSON text."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return JsonCommand.from_json(
        text, action_name=action, entity_name=entity, entity_id=entity_id
    )


def create_payload(**overrides: Any) -> dict[str, Any]:
    """A valid create payload with *overrides* applied (None drops a key)."""
    payload = {**VALID_CREATE_PAYLOAD, **overrides}
    return {k: v for k, v in payload.items() if v is not None}
