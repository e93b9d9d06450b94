from __future__ import annotations

from typing import Sequence

import pandas as pd

from bikespace_dashboard.core.report import Report

REPORT_COLUMNS = [
    "id",
    "latitude",
    "longitude",
    "parking_time",
    "parking_duration",
    "issues",
    "comments",
]


def reports_frame(reports: Sequence[Report]) -> pd.DataFrame:
    """
    One row per report, in the given order. 'issues' holds a sorted list per row.
    """
    if not reports:
        return pd.DataFrame(columns=REPORT_COLUMNS)

    rows = []
    for r in reports:
        rows.append(
            {
                "id": r.id,
                "latitude": r.latitude,
                "longitude": r.longitude,
                "parking_time": r.parking_time,
                "parking_duration": r.parking_duration,
                "issues": sorted(r.issues),
                "comments": r.comments,
            }
        )
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)
