from .bootstrap import build_locator, run_demo
from .exceptions import ServiceLocatorError, ServiceNotFoundError
from .locator import ServiceLocator

__all__ = [
    "ServiceLocator",
    "ServiceLocatorError",
    "ServiceNotFoundError",
    "build_locator",
    "run_demo",
]
