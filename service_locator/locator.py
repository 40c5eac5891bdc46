"""Service locator for dependency lookup by name."""

import logging
import threading
from typing import Any, Dict, TypeVar

from .exceptions import ServiceNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ServiceLocator:
    """Registry mapping service names to service instances.

    Services are registered under a string name and looked up by that name
    at the point of use. The locator holds shared references only; it never
    creates, copies or tears down the instances it stores.
    """

    def __init__(self):
        self._services: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def register(self, name: str, service_instance: T) -> None:
        """Register a service instance under ``name``.

        Registering an already bound name replaces the previous binding.

        Args:
            name: The name to register the service under.
            service_instance: The service instance to register.
        """
        with self._lock:
            replaced = name in self._services
            previous = self._services.get(name)
            self._services[name] = service_instance

        if replaced:
            logger.debug(
                "Replaced service '%s' (%s -> %s)",
                name,
                type(previous).__name__,
                type(service_instance).__name__,
            )
        else:
            logger.debug(
                "Registered service '%s': %s", name, type(service_instance).__name__
            )

    def resolve(self, name: str) -> Any:
        """Get the service instance registered under ``name``.

        Args:
            name: The name of the service to retrieve.

        Returns:
            The exact instance that was registered.

        Raises:
            ServiceNotFoundError: If no service is registered under ``name``.
        """
        try:
            return self._services[name]
        except KeyError:
            raise ServiceNotFoundError(name) from None
