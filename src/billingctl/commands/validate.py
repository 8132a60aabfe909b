"""Command: dry-run validation of a command payload."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from billingctl.commands._base import BillingCommand

if TYPE_CHECKING:
    from billingctl.commands._context import AppContext


@click.command(
    cls=BillingCommand,
    examples="""\
  billingctl validate CREATE_INVENTORYITEM item.json
  billingctl validate UPDATE_INVENTORYITEM patch.json --entity-id 42
  echo '{"name": "Decoder"}' | billingctl --json validate UPDATE_INVENTORYITEM -""",
)
@click.argument("command_type")
@click.argument("payload", type=click.File("rb"), default="-")
@click.option("--entity-id", type=int, default=None, help="Target entity id.")
@click.pass_obj
def validate(
    app: AppContext,
    command_type: str,
    payload: BinaryIO,
    entity_id: int | None,
) -> None:
    """Validate PAYLOAD (file or '-' for stdin) as a COMMAND_TYPE request."""
    from billingctl.services.validation import ValidationService

    svc = ValidationService(plugin_manager=app.plugin_manager)
    app.emit(svc.validate(command_type, payload.read(), entity_id=entity_id))
