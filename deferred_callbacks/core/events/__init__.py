"""
Event System

Deferred callback registry and callback invocation.
"""

from .event_registry import CallbackSlot, EventRegistry
from .invocation import current_context

__all__ = [
    "CallbackSlot",
    "EventRegistry",
    "current_context",
]
