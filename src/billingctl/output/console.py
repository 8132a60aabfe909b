"""Rich Console factory and theme for billingctl output.

Consoles render to a StringIO buffer so renderers keep a
``render_*() -> str`` contract. In non-TTY environments (tests, pipes)
Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BILLING_THEME = Theme(
    {
        "billing.ok": "bold green",
        "billing.error": "bold red",
        "billing.warning": "bold yellow",
        "billing.op": "bold cyan",
        "billing.key": "dim",
        "billing.param": "bold blue",
        "billing.code": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=BILLING_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
