"""Notification service for sending messages to recipients."""

import logging

from .notification_channels import ConsoleChannel

logger = logging.getLogger(__name__)


class NotificationService:
    """Send notifications to named recipients.

    Delivery is delegated to a channel object exposing
    ``deliver(recipient, message)``; the console channel is used when none
    is given.
    """

    def __init__(self, channel=None):
        """Initialize the notification service.

        Args:
            channel: Optional delivery channel. Defaults to ConsoleChannel.
        """
        self.channel = channel if channel is not None else ConsoleChannel()
        self._notifications_enabled = True

    def send_notification(self, recipient: str, message: str):
        """Send ``message`` to ``recipient``.

        Args:
            recipient: Identifier of the recipient.
            message: The message text.
        """
        if not self._notifications_enabled:
            logger.debug(f"Notifications disabled, skipped message to {recipient}")
            return
        self.channel.deliver(recipient, message)
        logger.info(f"Notification sent to {recipient}")

    def disable_notifications(self):
        """Disable all notifications."""
        self._notifications_enabled = False
        logger.debug("Notifications disabled")

    def enable_notifications(self):
        """Enable all notifications."""
        self._notifications_enabled = True
        logger.debug("Notifications enabled")

    def is_enabled(self) -> bool:
        """Check if notifications are enabled.

        Returns:
            True if notifications are enabled, False otherwise.
        """
        return self._notifications_enabled
