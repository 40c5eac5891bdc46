"""Exceptions raised by the service locator."""


class ServiceLocatorError(Exception):
    """Base class for service locator errors."""


class ServiceNotFoundError(ServiceLocatorError, LookupError):
    """Raised when resolving a name that has no registered service."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Service not registered: '{name}'")
