"""
Registry Core

Event registry, its errors and shared types.
"""

# Event system
from .events import (
    CallbackSlot,
    EventRegistry,
    current_context,
)

# Errors
from .errors import (
    CallbackAlreadyRegisteredError,
    InvalidArgument,
    RegistryError,
    RegistryTornDownError,
    UndeclaredCallbackError,
)

# Types
from .types import (
    EntryPoint,
    ErrorSink,
    PendingFulfillment,
    RegistryCallback,
)

__all__ = [
    "CallbackSlot",
    "EventRegistry",
    "current_context",
    "CallbackAlreadyRegisteredError",
    "InvalidArgument",
    "RegistryError",
    "RegistryTornDownError",
    "UndeclaredCallbackError",
    "EntryPoint",
    "ErrorSink",
    "PendingFulfillment",
    "RegistryCallback",
]
