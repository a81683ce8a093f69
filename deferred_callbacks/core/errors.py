"""
Registry Errors

Exceptions raised by EventRegistry. Errors raised by user callbacks are never
wrapped in these; they reach the caller unchanged.
"""


class RegistryError(Exception):
    """Base class for errors raised by the registry itself"""


class InvalidArgument(RegistryError, ValueError):
    """An operation was called without a usable event name or callback"""


class UndeclaredCallbackError(RegistryError, KeyError):
    """A callback was registered against a name with no declared entry point"""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No callback slot declared for '{self.name}'"


class CallbackAlreadyRegisteredError(RegistryError):
    """A second callback was registered for a name that already has one"""

    def __init__(self, name: str):
        super().__init__(f"A callback is already registered for '{name}'")
        self.name = name


class RegistryTornDownError(RegistryError, RuntimeError):
    """The registry was used after teardown()"""
