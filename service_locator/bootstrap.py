"""Composition root: wires the demonstration services and looks them up."""

from __future__ import annotations

import logging
from typing import Mapping

from .exceptions import ServiceNotFoundError
from .locator import ServiceLocator
from .services import NotificationService, ReportService

logger = logging.getLogger(__name__)

DEFAULT_REPORT_DATA = {"ventas": 200, "ganancias": 120}


def build_locator() -> ServiceLocator:
    """Create a locator with the notification and report services registered."""
    locator = ServiceLocator()
    locator.register("notification", NotificationService())
    locator.register("report", ReportService())
    return locator


def run_demo(
    locator: ServiceLocator,
    recipient: str = "Karen",
    message: str = "Tu reporte está listo.",
    report_data: Mapping[str, float] | None = None,
    missing: str = "email",
) -> bool:
    """Resolve and use the registered services, then look up a missing one.

    Returns:
        True if looking up ``missing`` failed as expected, False if a service
        was unexpectedly registered under that name.
    """
    notifier = locator.resolve("notification")
    notifier.send_notification(recipient, message)

    reporter = locator.resolve("report")
    reporter.generate_report(
        report_data if report_data is not None else DEFAULT_REPORT_DATA
    )

    try:
        service = locator.resolve(missing)
    except ServiceNotFoundError as e:
        logger.error("Lookup failed: %s", e)
        print(f"Error: {e}")
        return True

    logger.warning(
        "Expected '%s' to be unregistered, found %s", missing, type(service).__name__
    )
    return False
