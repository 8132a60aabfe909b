"""BaseService — shared plumbing for billingctl services.

Services receive their collaborators at construction time. The optional
:class:`PluginManager` carries lifecycle hooks; a service built without
one dispatches nothing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from billingctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ProcessingService(BaseService):
            def process(self, command: JsonCommand) -> Any:
                ...
                self._dispatch_event("post_command_processed", {...})
    """

    def __init__(self, plugin_manager: PluginManager | None = None) -> None:
        self._plugin_manager = plugin_manager

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str] | None = None,
    ) -> None:
        """Call a lifecycle hook on every registered plugin.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugin_manager is None:
            return
        try:
            getattr(self._plugin_manager.hook, hook_name)(**payload)
        except Exception:
            logger.warning("Plugin hook %s failed", hook_name, exc_info=True)
            if warnings is not None:
                warnings.append(f"Plugin hook {hook_name} failed")
