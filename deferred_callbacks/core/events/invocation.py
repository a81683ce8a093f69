"""
Callback invocation with a receiver context.

Callbacks are plain Python callables, so the registry's invocation context
is published through a context variable for the duration of each call.
"""

from contextvars import ContextVar
from typing import Any, Sequence

from deferred_callbacks.core.types.registry_types import RegistryCallback

_current_context: ContextVar[Any] = ContextVar(
    "deferred_callbacks_context", default=None
)


def current_context() -> Any:
    """Return the context of the callback currently being invoked, or None."""
    return _current_context.get()


def invoke(callback: RegistryCallback, context: Any, args: Sequence[Any]) -> Any:
    """Call ``callback(*args)`` with ``context`` bound as the current context."""
    token = _current_context.set(context)
    try:
        return callback(*args)
    finally:
        _current_context.reset(token)
