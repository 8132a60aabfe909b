"""CommandSourceHandler — the handler contract."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from billingctl.domain.command import JsonCommand


@runtime_checkable
class CommandSourceHandler(Protocol):
    """Anything that turns a parsed command into a processing result."""

    def process_command(self, command: JsonCommand) -> Any: ...
