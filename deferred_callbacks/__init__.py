"""
Deferred Callbacks

Unified import layer for the deferred_callbacks package.
"""

from deferred_callbacks.core.events import (
    CallbackSlot,
    EventRegistry,
    current_context,
)
from deferred_callbacks.core.errors import (
    CallbackAlreadyRegisteredError,
    InvalidArgument,
    RegistryError,
    RegistryTornDownError,
    UndeclaredCallbackError,
)
from deferred_callbacks.core.types import PendingFulfillment

__all__ = [
    "CallbackSlot",
    "EventRegistry",
    "current_context",
    "CallbackAlreadyRegisteredError",
    "InvalidArgument",
    "RegistryError",
    "RegistryTornDownError",
    "UndeclaredCallbackError",
    "PendingFulfillment",
]
