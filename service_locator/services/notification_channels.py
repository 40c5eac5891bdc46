"""Delivery channels used by the notification service."""

import logging
import sys

logger = logging.getLogger(__name__)


class ConsoleChannel:
    """Print notifications to a text stream (stdout by default)."""

    def __init__(self, stream=None):
        self._stream = stream

    def deliver(self, recipient: str, message: str):
        # Resolve stdout lazily so redirected/captured streams are honoured.
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"Notification for {recipient}: {message}", file=stream)


class NiceGuiChannel:
    """Show notifications as NiceGUI toasts.

    Must be used from inside a NiceGUI page context, as ``ui.notify`` needs a
    connected client.
    """

    def __init__(self, ui_framework=None, notify_type: str = "info"):
        """Initialize the channel.

        Args:
            ui_framework: Optional UI framework module (e.g., nicegui.ui).
                          If not provided, nicegui.ui is imported on first use.
            notify_type: NiceGUI notification type ("positive", "info", ...).
        """
        self._ui_framework = ui_framework
        self.notify_type = notify_type

    @property
    def ui(self):
        """Get the UI framework module, importing if necessary."""
        if self._ui_framework is None:
            from nicegui import ui

            self._ui_framework = ui
        return self._ui_framework

    def deliver(self, recipient: str, message: str):
        self.ui.notify(f"{recipient}: {message}", type=self.notify_type)
