"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich tables) or machines
(``--json``). ``--quiet`` trims output to a status line or bare keys.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from billingctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from billingctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags resolved from the CLI."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display in the requested mode."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
