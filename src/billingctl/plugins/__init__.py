"""Extension layer — command lifecycle hooks via pluggy.

INVARIANT: Plugin failures are warnings, never errors.
"""

from billingctl.plugins.hookspecs import hookimpl
from billingctl.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
