from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objs as go
from plotly.graph_objs import Figure

from bikespace_dashboard.core.report import Report, describe_duration, describe_issue
from bikespace_dashboard.views.base import FigureComponent
from bikespace_dashboard.views.frame import reports_frame

# Downtown Toronto
DEFAULT_CENTER = {"lat": 43.652771, "lon": -79.383756}
DEFAULT_ZOOM = 13


class ReportMap(FigureComponent):
    """
    Map of the displayed reports; hovering a point shows its issues,
    parking duration, time and comments.
    """

    def compute_data(self, reports: Sequence[Report]) -> pd.DataFrame:
        df = reports_frame(reports)
        if df.empty:
            return df

        df["issue_text"] = df["issues"].map(
            lambda issues: ", ".join(describe_issue(i) for i in issues) or "none"
        )
        df["duration_text"] = df["parking_duration"].map(describe_duration)
        df["time_text"] = df["parking_time"].map(lambda t: t.strftime("%A, %B %d, %Y %H:%M"))
        df["comments"] = df["comments"].fillna("none")
        return df

    def render_figure(self, data: pd.DataFrame) -> Figure:
        if data.empty:
            fig = go.Figure(go.Scattermap())
        else:
            fig = px.scatter_map(
                data,
                lat="latitude",
                lon="longitude",
                hover_name="id",
                hover_data={
                    "issue_text": True,
                    "duration_text": True,
                    "time_text": True,
                    "comments": True,
                    "latitude": False,
                    "longitude": False,
                },
            )

        fig.update_layout(
            map={"style": "open-street-map", "center": DEFAULT_CENTER, "zoom": DEFAULT_ZOOM},
            margin=dict(l=0, r=0, t=0, b=0),
        )
        return fig
