"""
Type Definitions

Shared types for the registry core.
"""

from .registry_types import (
    EntryPoint,
    ErrorSink,
    PendingFulfillment,
    RegistryCallback,
)

__all__ = [
    "EntryPoint",
    "ErrorSink",
    "PendingFulfillment",
    "RegistryCallback",
]
