"""Demonstration services resolved through the service locator."""

from .notification_channels import ConsoleChannel, NiceGuiChannel
from .notification_service import NotificationService
from .report_service import ReportService

__all__ = [
    "ConsoleChannel",
    "NiceGuiChannel",
    "NotificationService",
    "ReportService",
]
