"""Command type identifiers.

A command type is ``{ACTION}_{ENTITY}`` in upper case, the same key the
command bus uses to select a handler.
"""

from __future__ import annotations

from enum import StrEnum


class CommandType(StrEnum):
    """Command types wired by :func:`billingctl.services.registry.build_registry`."""

    CREATE_INVENTORYITEM = "CREATE_INVENTORYITEM"
    UPDATE_INVENTORYITEM = "UPDATE_INVENTORYITEM"
    RETRACKOSDMESSAGE_ORDER = "RETRACKOSDMESSAGE_ORDER"
    DELETE_COUNTRYCURRENCY = "DELETE_COUNTRYCURRENCY"


def command_type_for(action_name: str | None, entity_name: str | None) -> str | None:
    """Build the routing key for an action/entity pair.

    Examples:
        >>> command_type_for("create", "inventoryitem")
        'CREATE_INVENTORYITEM'
        >>> command_type_for(None, "order") is None
        True
    """
    if not action_name or not entity_name:
        return None
    return f"{action_name}_{entity_name}".upper()


def split_command_type(command_type: str) -> tuple[str, str]:
    """Split ``ACTION_ENTITY`` into ``(action, entity)``.

    Raises:
        ValueError: If *command_type* has no ``_`` separator.
    """
    action, sep, entity = command_type.upper().partition("_")
    if not sep or not action or not entity:
        msg = f"Malformed command type: {command_type!r}"
        raise ValueError(msg)
    return action, entity
