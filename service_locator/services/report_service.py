"""Report generation service."""

import logging
import sys
from numbers import Real
from typing import Mapping

logger = logging.getLogger(__name__)


class ReportService:
    """Render simple key/value reports from numeric records."""

    title = "Report"

    def __init__(self, stream=None):
        self._stream = stream

    def render(self, data: Mapping[str, float]) -> str:
        """Render ``data`` as report text without printing it.

        Raises:
            TypeError: If a value is not a real number.
        """
        lines = [f"{self.title}:"]
        for key, value in data.items():
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(
                    f"Report field '{key}' must be numeric, got {type(value).__name__}"
                )
            lines.append(f"  {key}: {value}")
        if len(lines) == 1:
            lines.append("  (no data)")
        return "\n".join(lines)

    def generate_report(self, data: Mapping[str, float]) -> str:
        """Render ``data`` and print the report.

        Args:
            data: Mapping of field name to numeric value, printed in order.

        Returns:
            The rendered report text.
        """
        report = self.render(data)
        stream = self._stream if self._stream is not None else sys.stdout
        print(report, file=stream)
        logger.info("Generated report with %d field(s)", len(data))
        return report
