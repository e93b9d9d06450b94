from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from .exceptions import AnalyticsUnavailableError


class AnalyticsNotifier(Protocol):
    """
    Best-effort telemetry backend. Components call 'track' and never rely on it
    succeeding.
    """

    def track(self, event_name: str, data: Optional[Mapping[str, Any]] = None) -> None:
        ...


class NullAnalytics:
    """Used when no analytics backend is configured; every call reports that."""

    def track(self, event_name: str, data: Optional[Mapping[str, Any]] = None) -> None:
        raise AnalyticsUnavailableError(f"Analytics not active to track '{event_name}'")
