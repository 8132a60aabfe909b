"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Plugins are loaded lazily so ``--help`` and
``--version`` never import plugin code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from billingctl.config.logging import configure_logging
from billingctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from billingctl.config.settings import BillingSettings
    from billingctl.plugins.manager import PluginManager
    from billingctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: BillingSettings) -> None:
        self.settings = settings
        self._plugin_manager: PluginManager | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugin_manager(self) -> PluginManager | None:
        """Loaded plugin manager, or None when plugins are disabled."""
        if not self.settings.plugins.enabled:
            return None
        if self._plugin_manager is None:
            from billingctl.plugins.manager import PluginManager

            self._plugin_manager = PluginManager()
            self._plugin_manager.discover_and_load(local_dir=self.settings.plugin_dir)
        return self._plugin_manager

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, normal return. Warnings go to stderr unless
          ``--json`` already carries them in the payload.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
