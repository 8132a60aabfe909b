"""Service-master country-currency handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from billingctl.domain.command import JsonCommand
    from billingctl.services.interfaces import CountryCurrencyWritePlatformService


class DeleteCountryCurrencyCommandHandler:
    """Deletes by entity id only; the payload is never read."""

    def __init__(self, write_platform_service: CountryCurrencyWritePlatformService) -> None:
        self._write_platform_service = write_platform_service

    def process_command(self, command: JsonCommand) -> Any:
        return self._write_platform_service.delete_country_currency(command.entity_id)
