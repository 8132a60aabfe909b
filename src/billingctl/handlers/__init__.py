"""Command handlers — one write-service call per command, nothing else.

Handlers never validate and never catch: validation runs before them in
:class:`~billingctl.services.processing.CommandProcessingService`, and
write-service errors propagate to the caller as raised.
"""

from billingctl.handlers.base import CommandSourceHandler
from billingctl.handlers.currency import DeleteCountryCurrencyCommandHandler
from billingctl.handlers.inventory import (
    CreateInventoryItemCommandHandler,
    UpdateInventoryItemCommandHandler,
)
from billingctl.handlers.order import RetrackOsdMessageOrderCommandHandler

__all__ = [
    "CommandSourceHandler",
    "CreateInventoryItemCommandHandler",
    "DeleteCountryCurrencyCommandHandler",
    "RetrackOsdMessageOrderCommandHandler",
    "UpdateInventoryItemCommandHandler",
]
