from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from bikespace_dashboard.core.analytics import AnalyticsNotifier, NullAnalytics

__all__ = ["AnalyticsNotifier", "NullAnalytics", "LoggingAnalytics"]


class LoggingAnalytics:
    """
    Records analytics events as structured log lines, so they end up in the JSON logs.
    """

    def __init__(self, logger_name: str = "bikespace_dashboard.analytics"):
        self._logger = logging.getLogger(logger_name)

    def track(self, event_name: str, data: Optional[Mapping[str, Any]] = None) -> None:
        self._logger.info(
            "Analytics event",
            extra={"event_name": event_name, "event_data": data},
        )
