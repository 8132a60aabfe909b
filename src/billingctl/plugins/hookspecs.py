"""Pluggy hook specifications for command lifecycle events.

Hooks fire synchronously after the outcome of a command is known. A
plugin can observe commands (audit trails, notifications) but cannot
change the outcome.
"""

from __future__ import annotations

from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("billingctl")
hookimpl = pluggy.HookimplMarker("billingctl")


class BillingctlHookSpec:
    """Hook specifications for the billingctl plugin system."""

    @hookspec
    def post_command_processed(
        self,
        command_type: str,
        entity_id: int | None,
        result: Any,
    ) -> None:
        """Called after a handler returned a result."""

    @hookspec
    def post_command_rejected(
        self,
        command_type: str,
        entity_id: int | None,
        error_code: str,
        errors: list[dict[str, Any]],
    ) -> None:
        """Called after a validator rejected a payload."""

    @hookspec
    def post_command_validated(self, command_type: str, entity_id: int | None) -> None:
        """Called after a dry-run validation passed."""
