"""CommandProcessingResult — what a write service hands back.

Handlers and the processing service pass it through untouched; only the
caller that issued the command reads it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CommandProcessingResult(BaseModel):
    """Outcome of one state-mutating write-service call."""

    model_config = {"frozen": True}

    command_id: int | None = None
    resource_id: int | None = None
    entity_id: int | None = None
    office_id: int | None = None
    client_id: int | None = None
    changes: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def resource(cls, resource_id: int | None) -> CommandProcessingResult:
        return cls(resource_id=resource_id)

    @classmethod
    def empty(cls) -> CommandProcessingResult:
        return cls()
