"""ValidationService — dry-run validation without any write service.

Runs the validator registered for a command type and reports the outcome
as a :class:`ServiceResult` instead of raising, so the CLI can render
the full error list.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from billingctl.domain.command import JsonCommand
from billingctl.domain.errors import PlatformApiError, UnsupportedCommandError
from billingctl.domain.json_helper import decode_body
from billingctl.domain.types import CommandType, split_command_type
from billingctl.services.base import BaseService
from billingctl.services.registry import default_validators
from billingctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from billingctl.domain.json_helper import FromJsonHelper
    from billingctl.plugins.manager import PluginManager
    from billingctl.services.registry import Validator


def error_result(op: str, exc: PlatformApiError, **detail: Any) -> ServiceResult:
    """Wrap a rejected request in a failed ServiceResult."""
    response = exc.to_response()
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=exc.global_code,
            message=exc.default_message,
            detail={
                "http_status_code": exc.status_code,
                "errors": [e.model_dump(by_alias=True) for e in response.errors],
                **detail,
            },
        ),
    )


class ValidationService(BaseService):
    """Validates payloads against the validator of each command type."""

    def __init__(
        self,
        validators: Mapping[str, Validator] | None = None,
        *,
        plugin_manager: PluginManager | None = None,
        helper: FromJsonHelper | None = None,
        known_command_types: list[str] | None = None,
    ) -> None:
        super().__init__(plugin_manager)
        self._helper = helper
        self._validators = dict(validators) if validators is not None else default_validators(helper)
        self._known = sorted(
            set(known_command_types or [str(t) for t in CommandType])
            | {str(k) for k in self._validators}
        )

    def validate(
        self,
        command_type: str,
        json: str | bytes,
        *,
        entity_id: int | None = None,
    ) -> ServiceResult:
        """Validate *json* as a *command_type* payload.

        Bytes are decoded as UTF-8; undecodable bytes are an invalid body.
        """
        op = "validate"
        key = command_type.upper()
        warnings: list[str] = []

        if key not in self._known:
            return error_result(op, UnsupportedCommandError(command_type), command_type=key)

        validator = self._validators.get(key)
        if validator is None:
            warnings.append(f"No validator declared for {key}; payload passes through unchecked")
            return ServiceResult(
                ok=True,
                op=op,
                data={"command_type": key, "validated": False},
                warnings=warnings,
            )

        action, entity = split_command_type(key)
        try:
            command = JsonCommand.from_json(
                decode_body(json),
                action_name=action,
                entity_name=entity,
                entity_id=entity_id,
                helper=self._helper,
            )
            validator(command)
        except PlatformApiError as exc:
            self._dispatch_event(
                "post_command_rejected",
                {
                    "command_type": key,
                    "entity_id": entity_id,
                    "error_code": exc.global_code,
                    "errors": [e.model_dump(by_alias=True) for e in exc.errors],
                },
                warnings,
            )
            result = error_result(op, exc, command_type=key)
            if warnings:
                result = result.model_copy(update={"warnings": warnings})
            return result

        self._dispatch_event(
            "post_command_validated",
            {"command_type": key, "entity_id": entity_id},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "command_type": key,
                "validated": True,
                "parameters": sorted(command.parameters),
            },
            warnings=warnings,
        )

    def list_command_types(self) -> ServiceResult:
        """Report every known command type and whether it declares a validator."""
        items = [
            {"command_type": key, "validated": key in self._validators} for key in self._known
        ]
        return ServiceResult(
            ok=True,
            op="list_commands",
            data={"count": len(items), "items": items},
        )
