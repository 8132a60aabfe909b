"""Order handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from billingctl.domain.command import JsonCommand
    from billingctl.services.interfaces import OrderWritePlatformService


class RetrackOsdMessageOrderCommandHandler:
    """Re-sends the on-screen-display message for an order."""

    def __init__(self, write_platform_service: OrderWritePlatformService) -> None:
        self._write_platform_service = write_platform_service

    def process_command(self, command: JsonCommand) -> Any:
        return self._write_platform_service.retrack_osd_message(command)
