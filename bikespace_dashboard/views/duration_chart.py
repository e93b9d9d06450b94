from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.express as px
from plotly.graph_objs import Figure

from bikespace_dashboard.core.report import ParkingDuration, Report, describe_duration
from bikespace_dashboard.views.base import FigureComponent
from bikespace_dashboard.views.frame import reports_frame


class DurationChart(FigureComponent):
    """
    Bar chart of displayed reports per parking duration, shortest first.
    """

    def compute_data(self, reports: Sequence[Report]) -> pd.DataFrame:
        df = reports_frame(reports)
        if df.empty:
            return pd.DataFrame(columns=["parking_duration", "label", "count"])

        counts = df["parking_duration"].value_counts()
        known = [d.value for d in ParkingDuration]
        order = known + sorted(set(counts.index) - set(known))
        counts = counts.reindex(order, fill_value=0)

        data = counts.reset_index()
        data.columns = ["parking_duration", "count"]
        data["label"] = data["parking_duration"].map(describe_duration)
        return data[["parking_duration", "label", "count"]]

    def render_figure(self, data: pd.DataFrame) -> Figure:
        if data.empty:
            return self.empty_figure("No reports match the selected filters")

        fig = px.bar(data, x="label", y="count", title="Parking Duration")
        fig.update_layout(
            margin=dict(l=40, r=40, t=40, b=40),
            xaxis={"title": None},
            yaxis={"title": "Reports"},
        )
        return fig
