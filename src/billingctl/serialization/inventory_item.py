"""Validator for inventory item create/update commands.

Pipeline: BLANK CHECK → WHITELIST → FIELD CHECKS → AGGREGATE RAISE

The whitelist runs before any field is inspected, so a payload carrying
an unknown key is rejected without field errors.
"""

from __future__ import annotations

from typing import Any

from billingctl.domain.command import JsonCommand
from billingctl.domain.data_validator import DataValidatorBuilder
from billingctl.domain.errors import ApiParameterError, InvalidJsonError
from billingctl.domain.json_helper import FromJsonHelper

RESOURCE_NAME = "item"
NAME_MAX_LENGTH = 100

SUPPORTED_PARAMETERS: frozenset[str] = frozenset(
    {
        "grnId",
        "itemMasterId",
        "quality",
        "serialNumber",
        "provisioningSerialNumber",
        "remarks",
        "status",
        "warranty",
        "locale",
        "officeId",
        "clientId",
        "inventorylisttable_length",
        "flag",
    }
)

UPDATE_SUPPORTED_PARAMETERS: frozenset[str] = SUPPORTED_PARAMETERS | {"name"}

REQUIRED_FOR_CREATE: tuple[str, ...] = (
    "itemMasterId",
    "serialNumber",
    "provisioningSerialNumber",
    "status",
    "quality",
)


def _raw_number(element: dict[str, Any], name: str) -> Any:
    """Raw numeric parameter, with blank strings read as absent."""
    value = element.get(name)
    if isinstance(value, str) and not value.strip():
        return None
    return value


class InventoryItemCommandValidator:
    """Validates inventory item payloads before they reach the write service."""

    def __init__(self, helper: FromJsonHelper) -> None:
        self._helper = helper

    def validate_for_create(self, command: JsonCommand) -> None:
        """Check a create payload; every required field must be present and valid.

        Raises:
            InvalidJsonError: Blank payload.
            UnsupportedParameterError: Key outside :data:`SUPPORTED_PARAMETERS`.
            PlatformApiDataValidationError: One or more field violations.
        """
        element = self._parse_checked(command, SUPPORTED_PARAMETERS)

        errors: list[ApiParameterError] = []
        builder = DataValidatorBuilder(errors).resource(RESOURCE_NAME)

        item_master_id = _raw_number(element, "itemMasterId")
        grn_id = element.get("grnId")
        serial_number = self._helper.extract_string_named("serialNumber", element)
        provisioning_serial_number = self._helper.extract_string_named(
            "provisioningSerialNumber", element
        )
        status = self._helper.extract_string_named("status", element)
        quality = self._helper.extract_string_named("quality", element)

        builder.reset().parameter("itemMasterId").value(item_master_id).not_null().integer()
        builder.reset().parameter("serialNumber").value(serial_number).not_blank().not_null()
        builder.reset().parameter("provisioningSerialNumber").value(
            provisioning_serial_number
        ).not_blank().not_null()
        builder.reset().parameter("status").value(status).not_null()
        builder.reset().parameter("quality").value(quality).not_null()
        grn_chain = builder.reset().parameter("grnId").value(grn_id).ignore_if_null().not_blank()
        if _raw_number(element, "grnId") is not None:
            grn_chain.integer()

        builder.raise_if_errors()

    def validate_for_update(self, command: JsonCommand) -> None:
        """Check an update payload; absent fields mean "no change".

        Raises:
            InvalidJsonError: Blank payload.
            UnsupportedParameterError: Key outside :data:`UPDATE_SUPPORTED_PARAMETERS`.
            PlatformApiDataValidationError: One or more field violations.
        """
        element = self._parse_checked(command, UPDATE_SUPPORTED_PARAMETERS)

        errors: list[ApiParameterError] = []
        builder = DataValidatorBuilder(errors).resource(RESOURCE_NAME)
        helper = self._helper

        if helper.parameter_exists("name", element):
            name = helper.extract_string_named("name", element)
            builder.reset().parameter("name").value(name).not_blank().not_exceeding_length_of(
                NAME_MAX_LENGTH
            )

        for field_name in ("serialNumber", "provisioningSerialNumber"):
            if helper.parameter_exists(field_name, element):
                value = helper.extract_string_named(field_name, element)
                builder.reset().parameter(field_name).value(value).not_blank()

        for field_name in ("itemMasterId", "grnId"):
            if helper.parameter_exists(field_name, element):
                value = _raw_number(element, field_name)
                builder.reset().parameter(field_name).value(value).not_null().integer()

        builder.raise_if_errors()

    def _parse_checked(self, command: JsonCommand, supported: frozenset[str]) -> dict[str, Any]:
        if not command.json or not command.json.strip():
            raise InvalidJsonError()
        element = self._helper.parse(command.json)
        self._helper.check_for_unsupported_parameters(element, supported)
        return element
