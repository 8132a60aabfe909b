"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from billingctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from billingctl.services.result import ServiceResult


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("command_type", "")) for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="billing.ok"), Text(f"  {result.op}", style="billing.op"))


def _format_value(value: Any) -> str:
    if isinstance(value, dict | list):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        console.print(Text(f"  {key}: ", style="billing.key"), _format_value(value), sep="")


def _render_command_list(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Command type", style="billing.op")
    table.add_column("Validated")
    for item in result.data.get("items", []):
        table.add_row(item["command_type"], "yes" if item["validated"] else "no")
    console.print(table)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="billing.error"),
        Text(f"  {result.op}", style="billing.op"),
        Text(" — "),
        msg,
        sep="",
    )
    if err is None:
        return

    errors = err.detail.get("errors") or []
    if errors:
        table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
        table.add_column("Parameter", style="billing.param")
        table.add_column("Message")
        if verbose:
            table.add_column("Code", style="billing.code")
        for row in errors:
            cells = [row.get("parameterName", ""), row.get("defaultUserMessage", "")]
            if verbose:
                cells.append(row.get("userMessageGlobalisationCode", ""))
            table.add_row(*cells)
        console.print(table)

    if verbose:
        console.print(Text(f"  code: {err.code}", style="billing.key"))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list_commands": _render_command_list,
}
