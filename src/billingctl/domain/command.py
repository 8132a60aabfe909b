"""JsonCommand — the parsed form of one inbound write request.

Built once at the request boundary and consumed by exactly one validator
and one handler. Parameters are exposed through a read-only mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from billingctl.domain.json_helper import FromJsonHelper
from billingctl.domain.types import command_type_for

_DEFAULT_HELPER = FromJsonHelper()


@dataclass(frozen=True)
class JsonCommand:
    """Immutable bag of named parameters plus routing identifiers."""

    json: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    entity_name: str | None = None
    action_name: str | None = None
    entity_id: int | None = None
    helper: FromJsonHelper = field(default=_DEFAULT_HELPER, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.parameters, MappingProxyType):
            object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @classmethod
    def from_json(
        cls,
        json: str,
        *,
        entity_name: str | None = None,
        action_name: str | None = None,
        entity_id: int | None = None,
        helper: FromJsonHelper | None = None,
    ) -> JsonCommand:
        """Decode *json* and build a command.

        Raises:
            InvalidJsonError: If *json* is blank or not a JSON object.
        """
        helper = helper or _DEFAULT_HELPER
        return cls(
            json=json,
            parameters=helper.parse(json),
            entity_name=entity_name,
            action_name=action_name,
            entity_id=entity_id,
            helper=helper,
        )

    @property
    def command_type(self) -> str | None:
        return command_type_for(self.action_name, self.entity_name)

    # ------------------------------------------------------------------
    # Parameter accessors
    # ------------------------------------------------------------------

    def parameter_exists(self, name: str) -> bool:
        return self.helper.parameter_exists(name, self.parameters)

    def value_of_parameter_named(self, name: str) -> Any:
        """Raw decoded value, or None when absent."""
        return self.parameters.get(name)

    def string_value_of_parameter_named(self, name: str) -> str | None:
        return self.helper.extract_string_named(name, self.parameters)

    def integer_value_of_parameter_named(self, name: str) -> int | None:
        return self.helper.extract_integer_named(name, self.parameters)

    def boolean_value_of_parameter_named(self, name: str) -> bool | None:
        return self.helper.extract_boolean_named(name, self.parameters)

    def __str__(self) -> str:
        return self.json
