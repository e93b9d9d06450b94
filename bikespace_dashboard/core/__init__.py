"""
Core domain layer: reports, report filters, filter composition,
the shared state store and the component base class
"""

from .report import Report, ParkingDuration, IssueType
from .filters import (
    FilterKind,
    ReportFilter,
    IssuesFilter,
    Interval,
    DateRangeFilter,
    WeekDayPeriodFilter,
    ParkingDurationFilter,
    build_filter,
)
from .filtering import apply_filters, replace_filter, remove_filter
from .shared_state import SharedState
from .component import Component

__all__ = [
    "Report",
    "ParkingDuration",
    "IssueType",
    "FilterKind",
    "ReportFilter",
    "IssuesFilter",
    "Interval",
    "DateRangeFilter",
    "WeekDayPeriodFilter",
    "ParkingDurationFilter",
    "build_filter",
    "apply_filters",
    "replace_filter",
    "remove_filter",
    "SharedState",
    "Component",
]
