from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    ROOT = "dashboard"
    SIDEBAR = "sidebar"
    SUMMARY = "summary-box"
    MAP = "report-map"
    ISSUE_CHART = "issue-chart"
    DURATION_CHART = "duration-chart"
