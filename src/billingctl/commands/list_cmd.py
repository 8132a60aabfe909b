"""Command: list registered command types."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from billingctl.commands._base import BillingCommand

if TYPE_CHECKING:
    from billingctl.commands._context import AppContext


@click.command(
    "commands",
    cls=BillingCommand,
    examples="""\
  billingctl commands
  billingctl --json commands
  billingctl -q commands""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List known command types and whether each validates its payload."""
    from billingctl.services.validation import ValidationService

    app.emit(ValidationService().list_command_types())
