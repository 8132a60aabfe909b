"""Plugin discovery and loading.

Two sources, loaded in order:
  1. Entry points in the ``billingctl.plugins`` group (pip-installed).
  2. Single-file plugins under ``.billingctl/plugins/`` in the project root.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType

import pluggy

from billingctl.plugins.hookspecs import BillingctlHookSpec

PROJECT_NAME = "billingctl"
ENTRY_POINT_GROUP = "billingctl.plugins"
LOCAL_MODULE_PREFIX = "billingctl_local_plugin_"

logger = logging.getLogger(__name__)


def _has_hook_impls(cls: type) -> bool:
    """Whether *cls* carries a method marked with ``@hookimpl``."""
    return any(
        callable(member) and getattr(member, f"{PROJECT_NAME}_impl", None)
        for name, member in inspect.getmembers(cls)
        if not name.startswith("_")
    )


def _import_plugin_file(py_file: Path) -> ModuleType | None:
    """Import *py_file* under a private module name; None if it fails."""
    module_name = f"{LOCAL_MODULE_PREFIX}{py_file.stem}"
    spec = importlib.util.spec_from_file_location(module_name, py_file)
    if spec is None or spec.loader is None:
        logger.warning("Could not create module spec for %s", py_file)
        return None
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
        sys.modules.pop(module_name, None)
        return None
    return module


def _hook_classes(module: ModuleType) -> Iterator[type]:
    """Classes defined in *module* (not imported into it) that implement hooks."""
    for _name, obj in inspect.getmembers(module, inspect.isclass):
        if obj.__module__ == module.__name__ and _has_hook_impls(obj):
            yield obj


class PluginManager:
    """Owns the pluggy manager and the command lifecycle hook relay."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(BillingctlHookSpec)
        self._loaded: bool = False

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then local ones from *local_dir*.

        Calling it again after a successful load is a no-op. Returns the
        names of all registered plugins.
        """
        if self._loaded:
            return self.list_plugin_names()
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_entry_point_classes()
        if local_dir is not None and local_dir.is_dir():
            self._load_local_dir(local_dir)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def _load_local_dir(self, local_dir: Path) -> None:
        """Register hook classes from each public ``*.py`` file in *local_dir*.

        A file that fails to import, or a class that fails to instantiate,
        is logged and skipped.
        """
        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module = _import_plugin_file(py_file)
            if module is None:
                continue
            for cls in _hook_classes(module):
                try:
                    self.register_plugin(cls(), name=module.__name__)
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        cls.__name__,
                        py_file,
                        exc_info=True,
                    )

    def _instantiate_entry_point_classes(self) -> None:
        """Swap plugin classes registered by entry points for instances.

        pluggy calls hooks on whatever object was registered, so a class
        would receive no ``self``.
        """
        for plugin in self.get_plugins():
            if not inspect.isclass(plugin) or not _has_hook_impls(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                self._pm.register(plugin(), name=plugin_name)
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s", plugin_name, exc_info=True
                )
