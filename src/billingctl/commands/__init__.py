"""Subcommand modules for billingctl.

Provides register_commands(), which uses deferred imports to keep
``billingctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from billingctl.commands.list_cmd import list_cmd
    from billingctl.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(list_cmd)
