from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, ClassVar, Dict, List, Mapping, Sequence, Type, Union

import pandas as pd

from .exceptions import InvalidArgumentError
from .report import DEFAULT_TIMEZONE, Report


class FilterKind(str, Enum):
    """
    The kinds of report filter the dashboard knows about.
    The value doubles as the conventional key for that filter in a filter mapping.
    """
    ISSUES = "issues"
    DATE_RANGE = "date_range"
    WEEKDAY_PERIOD = "weekday_period"
    PARKING_DURATION = "parking_duration"


def _deep_equals(x1: Any, x2: Any) -> bool:
    if type(x1) is not type(x2):
        return False
    if isinstance(x1, Mapping):
        if len(x1) != len(x2):
            return False
        return all(k in x2 and _deep_equals(v, x2[k]) for k, v in x1.items())
    if isinstance(x1, (list, tuple)):
        if len(x1) != len(x2):
            return False
        return all(_deep_equals(a, b) for a, b in zip(x1, x2))
    return x1 == x2


class ReportFilter(ABC):
    """
    Abstract predicate over a single Report.

    Every filter is parameterised by an ordered list of accepted values ('state')
    and keeps a report if it matches ANY of them. Filters are combined with AND
    by {@link apply_filters}.

    Subclasses must:
    - set 'kind' to their FilterKind
    - implement 'test'
    """

    kind: ClassVar[FilterKind]

    def __init__(self, state: Sequence[Any]):
        if not isinstance(state, (list, tuple)):
            raise InvalidArgumentError(
                f"{type(self).__name__} state must be a list, got {type(state).__name__}"
            )
        self._state: List[Any] = list(state)

    @property
    def filter_key(self) -> str:
        return self.kind.value

    @property
    def state(self) -> List[Any]:
        # Copy so callers can't change what the filter accepts
        return list(self._state)

    @abstractmethod
    def test(self, report: Report) -> bool:
        """
        :param report: the report to check
        :return: True if the report should be kept
        """
        raise NotImplementedError()

    def state_equals(self, other_state: Any) -> bool:
        """
        Deep, order-sensitive, type-sensitive comparison of this filter's state
        against another state list. Used by widgets to skip no-op filter updates.
        """
        if not isinstance(other_state, (list, tuple)):
            return False
        if len(self._state) != len(other_state):
            return False
        return all(_deep_equals(a, b) for a, b in zip(self._state, other_state))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.state_equals(other._state)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._state!r})"


class IssuesFilter(ReportFilter):
    """Keep reports with at least one of the listed issue tags."""

    kind = FilterKind.ISSUES

    def test(self, report: Report) -> bool:
        return any(issue in report.issues for issue in self._state)


@dataclass(frozen=True)
class Interval:
    """
    Half-open time interval [start, end). Both ends must be timezone-aware.
    """
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            value = getattr(self, name)
            if not isinstance(value, datetime) or value.tzinfo is None:
                raise InvalidArgumentError(f"Interval {name} must be a timezone-aware datetime")
        if self.start > self.end:
            raise InvalidArgumentError(
                f"Interval start {self.start.isoformat()} is after end {self.end.isoformat()}"
            )

    def contains(self, dt: datetime) -> bool:
        return self.start <= dt < self.end

    @classmethod
    def for_dates(cls, start: date, end: date, tz: str = DEFAULT_TIMEZONE) -> Interval:
        """
        Interval covering whole calendar days from 'start' through 'end' (inclusive),
        as picked in a custom date range control.
        """
        start_ts = pd.Timestamp(start).normalize().tz_localize(tz)
        end_ts = (pd.Timestamp(end).normalize() + pd.Timedelta(days=1)).tz_localize(tz)
        return cls(start=start_ts.to_pydatetime(), end=end_ts.to_pydatetime())


class DateRangeFilter(ReportFilter):
    """Keep reports whose parking_time falls inside any of the listed Intervals."""

    kind = FilterKind.DATE_RANGE

    def __init__(self, state: Sequence[Interval]):
        super().__init__(state)
        bad = [i for i in self._state if not isinstance(i, Interval)]
        if bad:
            raise InvalidArgumentError(f"DateRangeFilter state must contain Intervals, got {bad!r}")

    def test(self, report: Report) -> bool:
        return any(interval.contains(report.parking_time) for interval in self._state)


WEEKDAY_INDEX: Dict[str, int] = {
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
    "sunday": 7,
}


class WeekDayPeriodFilter(ReportFilter):
    """
    Keep reports parked on one of the listed days of the week.

    Day names are case-insensitive and stored lowercased, e.g. ["saturday", "sunday"].
    """

    kind = FilterKind.WEEKDAY_PERIOD

    def __init__(self, state: Sequence[str]):
        super().__init__(state)
        if not all(isinstance(day, str) for day in self._state):
            raise InvalidArgumentError("WeekDayPeriodFilter state must contain weekday names")

        self._state = [day.lower() for day in self._state]
        unknown = [day for day in self._state if day not in WEEKDAY_INDEX]
        if unknown:
            raise InvalidArgumentError(f"Unknown weekday names: {unknown}")

        self._day_indices = frozenset(WEEKDAY_INDEX[day] for day in self._state)

    @property
    def day_indices(self) -> frozenset:
        """ISO weekday numbers (Monday=1 ... Sunday=7) accepted by this filter."""
        return self._day_indices

    def test(self, report: Report) -> bool:
        return report.parking_time.isoweekday() in self._day_indices


class ParkingDurationFilter(ReportFilter):
    """Keep reports whose parking_duration is one of the listed categories."""

    kind = FilterKind.PARKING_DURATION

    def test(self, report: Report) -> bool:
        return report.parking_duration in self._state


FILTER_CLASSES: Dict[FilterKind, Type[ReportFilter]] = {
    FilterKind.ISSUES: IssuesFilter,
    FilterKind.DATE_RANGE: DateRangeFilter,
    FilterKind.WEEKDAY_PERIOD: WeekDayPeriodFilter,
    FilterKind.PARKING_DURATION: ParkingDurationFilter,
}


def build_filter(kind: Union[FilterKind, str], state: Sequence[Any]) -> ReportFilter:
    """
    Instantiate the filter for 'kind' with the given state.

    :raises InvalidArgumentError: if 'kind' is unknown or the state is invalid for it
    """
    try:
        cls = FILTER_CLASSES[FilterKind(kind)]
    except ValueError:
        raise InvalidArgumentError(f"Unknown filter kind '{kind}'")
    return cls(state)
