from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping, Optional, Sequence, Tuple

import pandas as pd

from .exceptions import ReportSchemaError

DEFAULT_TIMEZONE = "America/Toronto"


class ParkingDuration(str, Enum):
    """
    How long the person wanted to park. Values match the submissions API.
    """
    MINUTES = "minutes"
    HOURS = "hours"
    OVERNIGHT = "overnight"
    MULTIDAY = "multiday"

    @property
    def description(self) -> str:
        return _DURATION_DESCRIPTIONS[self]


class IssueType(str, Enum):
    """
    Issue tags a submission can carry. Values match the submissions API.
    """
    NOT_PROVIDED = "not_provided"
    FULL = "full"
    DAMAGED = "damaged"
    ABANDONED = "abandoned"
    OTHER = "other"

    @property
    def description(self) -> str:
        return _ISSUE_DESCRIPTIONS[self]


_DURATION_DESCRIPTIONS = {
    ParkingDuration.MINUTES: "less than an hour",
    ParkingDuration.HOURS: "several hours",
    ParkingDuration.OVERNIGHT: "overnight",
    ParkingDuration.MULTIDAY: "several days",
}

_ISSUE_DESCRIPTIONS = {
    IssueType.NOT_PROVIDED: "Bicycle parking was not provided",
    IssueType.FULL: "Bicycle parking was full",
    IssueType.DAMAGED: "Bicycle parking was damaged",
    IssueType.ABANDONED: "Parked bicycle was abandoned",
    IssueType.OTHER: "Other issue",
}


def describe_duration(value: str) -> str:
    """Human-readable label for a parking duration; unknown values pass through."""
    try:
        return ParkingDuration(value).description
    except ValueError:
        return value


def describe_issue(value: str) -> str:
    """Human-readable label for an issue tag; unknown values pass through."""
    try:
        return IssueType(value).description
    except ValueError:
        return value


def parse_parking_time(raw: Any, tz: str = DEFAULT_TIMEZONE) -> datetime:
    """
    Parse a parking_time value into a timezone-aware datetime in `tz`.

    Accepts ISO-8601 strings ("2024-01-05T09:22:06+00:00"), RFC-1123 strings
    ("Fri, 05 Jan 2024 09:22:06 GMT") and datetime objects. Naive values are
    taken to already be in `tz`; aware values are converted to it.

    :raises ReportSchemaError: if the value is missing or can't be parsed
    """
    if not isinstance(raw, (str, datetime)):
        raise ReportSchemaError(f"parking_time must be a string, got {type(raw).__name__}")

    try:
        ts = pd.Timestamp(raw)
    except (ValueError, TypeError) as e:
        raise ReportSchemaError(f"Could not parse parking_time {raw!r}: {e}") from e

    if pd.isna(ts):
        raise ReportSchemaError(f"Could not parse parking_time {raw!r}")

    if ts.tzinfo is None:
        ts = ts.tz_localize(tz)
    else:
        ts = ts.tz_convert(tz)

    return ts.to_pydatetime()


@dataclass(frozen=True)
class Report:
    """
    One submitted bicycle-parking incident.

    Fields:

    - id: submission id from the API
    - latitude / longitude: where the person tried to park
    - parking_time: timezone-aware time the person wanted to park
    - parking_duration: duration category (see ParkingDuration); unknown values are kept as-is
    - issues: set of issue tags (see IssueType); may be empty
    - comments: optional free text
    """
    id: int
    latitude: float
    longitude: float
    parking_time: datetime
    parking_duration: str
    issues: FrozenSet[str] = frozenset()
    comments: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], tz: str = DEFAULT_TIMEZONE) -> Report:
        """
        Build a Report from one entry of the submissions payload.

        :raises ReportSchemaError: if a required field is missing or malformed
        """
        missing = [
            k for k in ("id", "latitude", "longitude", "parking_time", "parking_duration")
            if data.get(k) is None
        ]
        if missing:
            raise ReportSchemaError(f"Submission is missing fields: {missing}")

        try:
            latitude = float(data["latitude"])
            longitude = float(data["longitude"])
        except (TypeError, ValueError) as e:
            raise ReportSchemaError(f"Submission {data['id']} has invalid coordinates") from e

        issues = data.get("issues") or []
        if isinstance(issues, str) or not isinstance(issues, (list, tuple, set, frozenset)):
            raise ReportSchemaError(f"Submission {data['id']} has invalid issues: {issues!r}")

        comments = data.get("comments")

        return cls(
            id=data["id"],
            latitude=latitude,
            longitude=longitude,
            parking_time=parse_parking_time(data["parking_time"], tz),
            parking_duration=str(data["parking_duration"]),
            issues=frozenset(str(i) for i in issues),
            comments=str(comments) if comments else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "parking_time": self.parking_time.isoformat(),
            "parking_duration": self.parking_duration,
            "issues": sorted(self.issues),
            "comments": self.comments,
        }


def submissions_date_range(reports: Sequence[Report]) -> Optional[Tuple[datetime, datetime]]:
    """
    Earliest and latest parking_time across the given reports.

    Date pickers use this on the full (unfiltered) dataset to bound their inputs.
    Returns None for an empty sequence.
    """
    if not reports:
        return None
    times = [r.parking_time for r in reports]
    return min(times), max(times)
