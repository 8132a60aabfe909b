"""CommandProcessingService — the command bus entry point.

Pipeline: ROUTE → VALIDATE → HANDLE → NOTIFY

INVARIANT: A command reaches its handler only after its route's validator
passed. The handler's result is returned unchanged, and errors raised by
write services propagate unchanged with no lifecycle event.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from billingctl.domain.errors import PlatformApiError
from billingctl.services.base import BaseService

if TYPE_CHECKING:
    from billingctl.domain.command import JsonCommand
    from billingctl.plugins.manager import PluginManager
    from billingctl.services.registry import CommandRegistry

log = structlog.get_logger(__name__)


class CommandProcessingService(BaseService):
    """Routes each command to its validator and handler."""

    def __init__(
        self,
        registry: CommandRegistry,
        *,
        plugin_manager: PluginManager | None = None,
    ) -> None:
        super().__init__(plugin_manager)
        self._registry = registry

    def process(self, command: JsonCommand) -> Any:
        """Validate (when the route declares a validator) and handle *command*.

        Raises:
            UnsupportedCommandError: No route for ``command.command_type``.
            PlatformApiError: The route's validator rejected the payload.
        """
        route = self._registry.route_for(command.command_type)

        if route.validator is not None:
            try:
                route.validator(command)
            except PlatformApiError as exc:
                log.info(
                    "command.rejected",
                    command_type=route.command_type,
                    entity_id=command.entity_id,
                    code=exc.global_code,
                    parameters=exc.parameter_names,
                )
                self._dispatch_event(
                    "post_command_rejected",
                    {
                        "command_type": route.command_type,
                        "entity_id": command.entity_id,
                        "error_code": exc.global_code,
                        "errors": [e.model_dump(by_alias=True) for e in exc.errors],
                    },
                )
                raise

        result = route.handler.process_command(command)

        log.info(
            "command.processed",
            command_type=route.command_type,
            entity_id=command.entity_id,
        )
        self._dispatch_event(
            "post_command_processed",
            {
                "command_type": route.command_type,
                "entity_id": command.entity_id,
                "result": result,
            },
        )
        return result
