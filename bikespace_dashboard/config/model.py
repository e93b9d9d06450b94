from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from bikespace_dashboard.core.report import DEFAULT_TIMEZONE


@dataclass(frozen=True)
class DashboardConfig:
    """
    Parsed global.json.

    Fields:

    - ui_title: page title
    - data_path: JSON file holding the submissions payload
    - timezone: IANA zone every parking_time is expressed in (weekday/date filters use it)
    - analytics_enabled: record analytics events in the logs instead of dropping them
    """
    ui_title: str
    data_path: Path
    timezone: str = DEFAULT_TIMEZONE
    analytics_enabled: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any], root: Optional[Path] = None) -> DashboardConfig:
        data_path = Path(data.get("data_path", "submissions.json"))
        if root is not None and not data_path.is_absolute():
            data_path = (root / data_path).resolve()

        return cls(
            ui_title=data.get("ui_title", "BikeSpace Dashboard"),
            data_path=data_path,
            timezone=data.get("timezone", DEFAULT_TIMEZONE),
            analytics_enabled=bool(data.get("analytics_enabled", False)),
        )
