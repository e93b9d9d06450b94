"""
Services used by dashboard components that sit outside the filtering core.
"""

from .analytics import AnalyticsNotifier, LoggingAnalytics, NullAnalytics

__all__ = ["AnalyticsNotifier", "LoggingAnalytics", "NullAnalytics"]
