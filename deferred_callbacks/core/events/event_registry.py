"""
Deferred Callback Registry

A producer announces named events through ``fulfill``; consumers register
interest through declared callback slots. Registration and fulfillment may
arrive in either order and every registered callback runs exactly once per
delivery, synchronously, on the caller's stack.

Usage:
    registry = EventRegistry(producer=request)
    registry.declare_callbacks("success", "error", "complete")

    registry.fulfill("success", payload)   # cached, nobody listening yet
    registry.register("success", on_success)  # runs on_success right here
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from deferred_callbacks.config.settings import get_settings
from deferred_callbacks.core.errors import (
    CallbackAlreadyRegisteredError,
    InvalidArgument,
    RegistryTornDownError,
    UndeclaredCallbackError,
)
from deferred_callbacks.core.events.invocation import invoke
from deferred_callbacks.core.types.registry_types import (
    EntryPoint,
    ErrorSink,
    PendingFulfillment,
    RegistryCallback,
)
from deferred_callbacks.utils.logging import Logger


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Any = _Unset()


class CallbackSlot:
    """
    Generated entry point for one event name.

    Calling the slot with a function either delivers a cached fulfillment to
    it immediately or stores it for the next ``fulfill`` of that name.
    """

    def __init__(self, name: str, registry: "EventRegistry"):
        self.name = name
        self.registry = registry

    def __call__(self, func: RegistryCallback) -> None:
        self.registry._accept(self.name, func)

    def __repr__(self) -> str:
        return f"CallbackSlot(name={self.name!r})"


class EventRegistry:
    """
    Registry of named callback slots and pending fulfillments.

    Every callback is invoked as ``callback(*args, producer, registry)`` with
    the effective context (``context`` if given, else ``producer``) available
    through ``current_context()`` while it runs.
    """

    # Process-wide error sink used by report_error; _UNSET resolves from settings
    _error_sink: Any = _UNSET

    def __init__(
        self,
        producer: Any = None,
        context: Any = None,
        error_sink: Optional[ErrorSink] = _UNSET,
    ):
        self.producer = producer
        self.context = context
        if error_sink is not _UNSET:
            _validate_sink(error_sink)
        self._instance_error_sink = error_sink

        self._entry_points: Optional[Dict[str, EntryPoint]] = {}
        self._callbacks: Optional[Dict[str, RegistryCallback]] = {}
        self._pending: Optional[Dict[str, PendingFulfillment]] = {}

        settings = get_settings()
        self.registry_logger = Logger(
            f"{settings.logger_name}.registry", "registry", settings.log_level
        )

        self._stats = {
            "fulfillments": 0,
            "deliveries": 0,
            "cached": 0,
            "overwritten": 0,
        }

    # === Error Sink ===

    @classmethod
    def set_error_sink(cls, sink: Optional[ErrorSink]) -> None:
        """Set the process-wide sink; None makes report_error re-raise."""
        _validate_sink(sink)
        EventRegistry._error_sink = sink

    @classmethod
    def reset_error_sink(cls) -> None:
        """Drop any configured sink so the settings default applies again."""
        EventRegistry._error_sink = _UNSET

    @classmethod
    def get_error_sink(cls) -> Optional[ErrorSink]:
        """Return the process-wide sink, creating the default on first use."""
        if EventRegistry._error_sink is _UNSET:
            settings = get_settings()
            if settings.error_sink == "console":
                EventRegistry._error_sink = Logger(
                    settings.logger_name, "sink", settings.log_level
                )
            else:
                EventRegistry._error_sink = None
        return EventRegistry._error_sink

    @property
    def error_sink(self) -> Optional[ErrorSink]:
        """The sink this instance reports to."""
        if self._instance_error_sink is not _UNSET:
            return self._instance_error_sink
        return self.get_error_sink()

    def report_error(self, error: BaseException) -> None:
        """Forward ``error`` to the error sink, or re-raise it if there is none."""
        sink = self.error_sink
        if sink is None:
            raise error
        sink.error(f"{type(error).__name__}: {error}", exc_info=error)

    # === Lifecycle ===

    @property
    def is_torn_down(self) -> bool:
        return self._callbacks is None

    def teardown(self) -> None:
        """Release callbacks, pending records, producer and context."""
        if self._entry_points is not None:
            self._entry_points.clear()
            self._entry_points = None

        if self._callbacks is not None:
            self._callbacks.clear()
            self._callbacks = None

        if self._pending is not None:
            self._pending.clear()
            self._pending = None

        self.context = self.producer = None
        self.registry_logger.debug("Registry torn down")

    def _ensure_active(self, operation: str) -> None:
        if self._callbacks is None:
            raise RegistryTornDownError(
                f"Cannot {operation} on a registry that has been torn down"
            )

    # === Declaration ===

    def declare_callback(
        self, name: str, entry_point: Optional[EntryPoint] = None
    ) -> None:
        """
        Declare a callback slot for ``name`` unless one already exists.

        Args:
            name: Event name
            entry_point: Custom entry point to install instead of a generated
                CallbackSlot. Ignored when ``name`` is already declared.
        """
        self._ensure_active("declare a callback")
        _validate_name(name)

        if name in self._entry_points:
            return

        self._entry_points[name] = (
            entry_point if entry_point is not None else CallbackSlot(name, self)
        )
        self.registry_logger.debug(f"Declared callback slot: {name}")

    def declare_callbacks(self, *names: Union[str, Iterable[str]]) -> None:
        """Declare several slots, given as one iterable or as separate names."""
        if len(names) == 1 and not isinstance(names[0], str):
            if not isinstance(names[0], Iterable):
                raise InvalidArgument(f"Expected event names, got {names[0]!r}")
            names = tuple(names[0])

        for name in names:
            self.declare_callback(name)

    # === Registration ===

    def slot(self, name: str) -> EntryPoint:
        """Return the entry point declared for ``name``."""
        if self._entry_points is None or name not in self._entry_points:
            raise UndeclaredCallbackError(name)
        return self._entry_points[name]

    def register(self, name: str, func: RegistryCallback) -> Any:
        """Pass ``func`` to the entry point declared for ``name``."""
        self._ensure_active("register a callback")
        return self.slot(name)(func)

    def _accept(self, name: str, func: RegistryCallback) -> None:
        self._ensure_active("register a callback")
        if not callable(func):
            raise InvalidArgument(f"Callback for '{name}' must be callable")

        pending = self._pending.pop(name, None)
        if pending is not None:
            # Consumed before the call so a failing callback cannot see it twice
            self._stats["deliveries"] += 1
            self.registry_logger.debug(f"Delivering cached fulfillment: {name}")
            invoke(func, pending.context, pending.args)
            return

        if name in self._callbacks:
            raise CallbackAlreadyRegisteredError(name)

        self._callbacks[name] = func
        self.registry_logger.debug(f"Registered callback: {name}")

    # === Fulfillment ===

    def fulfill(self, *args: Any) -> "EventRegistry":
        """
        Fulfill the event named by the first argument.

        The remaining arguments are passed to the callback, followed by the
        producer and this registry. Without a registered callback the
        fulfillment is cached, replacing any earlier cached one for the name.

        Returns:
            This registry, so fulfillments can be chained
        """
        if not args:
            raise InvalidArgument(
                "The first argument to fulfill must be the name of the event to fulfill"
            )
        self._ensure_active("fulfill")

        name = args[0]
        _validate_name(name)
        context = self.context if self.context is not None else self.producer
        call_args = (*args[1:], self.producer, self)

        self._stats["fulfillments"] += 1

        callback = self._callbacks.get(name)
        if callback is not None:
            self._stats["deliveries"] += 1
            self.registry_logger.debug(f"Delivering fulfillment: {name}")
            invoke(callback, context, call_args)
            return self

        if name in self._pending:
            self._stats["overwritten"] += 1
            self.registry_logger.warning(
                f"Replacing cached fulfillment that was never delivered: {name}"
            )
        self._stats["cached"] += 1
        self._pending[name] = PendingFulfillment(context=context, args=call_args)
        self.registry_logger.debug(f"Cached fulfillment: {name}")
        return self

    # === Introspection ===

    def callback_declared(self, name: str) -> bool:
        """True only if ``name`` has a generated callback slot."""
        if self._entry_points is None:
            return False
        return isinstance(self._entry_points.get(name), CallbackSlot)

    def declared_callbacks(self) -> List[str]:
        """Names that have a generated callback slot."""
        if self._entry_points is None:
            return []
        return [
            name
            for name, entry in self._entry_points.items()
            if isinstance(entry, CallbackSlot)
        ]

    def has_callback(self, name: str) -> bool:
        return bool(self._callbacks) and name in self._callbacks

    def has_pending(self, name: str) -> bool:
        return bool(self._pending) and name in self._pending

    def pending_fulfillment(self, name: str) -> Optional[PendingFulfillment]:
        if self._pending is None:
            return None
        return self._pending.get(name)

    def get_stats(self) -> Dict[str, Any]:
        """Get registry statistics."""
        return {
            **self._stats,
            "pending": len(self._pending or {}),
            "callbacks": len(self._callbacks or {}),
            "declared": len(self.declared_callbacks()),
        }

    def clear_stats(self) -> None:
        """Clear registry statistics."""
        self._stats = {
            "fulfillments": 0,
            "deliveries": 0,
            "cached": 0,
            "overwritten": 0,
        }

    def __repr__(self) -> str:
        if self.is_torn_down:
            return "EventRegistry(torn_down=True)"
        return (
            f"EventRegistry(declared={self.declared_callbacks()!r}, "
            f"pending={sorted(self._pending)!r})"
        )


def _validate_name(name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise InvalidArgument(f"Event name must be a non-empty string, got {name!r}")


def _validate_sink(sink: Any) -> None:
    if sink is not None and not isinstance(sink, ErrorSink):
        raise InvalidArgument(
            f"Error sink must provide an error() method, got {sink!r}"
        )
