from dataclasses import dataclass
from typing import Any, Callable, Protocol, Tuple, runtime_checkable

# A registered callback receives (*fulfillment_args, producer, registry)
RegistryCallback = Callable[..., Any]

# Anything that accepts a callback for one event name
EntryPoint = Callable[[RegistryCallback], Any]


@dataclass(frozen=True)
class PendingFulfillment:
    """A fulfillment cached until a callback is registered for its name"""

    context: Any
    args: Tuple[Any, ...]


@runtime_checkable
class ErrorSink(Protocol):
    """Receiver for errors passed to EventRegistry.report_error.

    logging.Logger, logging.LoggerAdapter and utils.logging.Logger all qualify.
    """

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> Any: ...
