from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.express as px
from plotly.graph_objs import Figure

from bikespace_dashboard.core.filtering import remove_filter, replace_filter
from bikespace_dashboard.core.filters import FilterKind, IssuesFilter
from bikespace_dashboard.core.report import IssueType, Report, describe_issue
from bikespace_dashboard.views.base import FigureComponent
from bikespace_dashboard.views.frame import reports_frame


class IssueChart(FigureComponent):
    """
    Bar chart of how many displayed reports carry each issue type.

    A report with several issues is counted once per issue. Clicking a bar
    ({@link toggle_issue}) adds/removes that issue from the issues filter.
    """

    def compute_data(self, reports: Sequence[Report]) -> pd.DataFrame:
        df = reports_frame(reports)
        if df.empty:
            return pd.DataFrame(columns=["issue", "label", "count"])

        counts = df["issues"].explode().dropna().value_counts()

        # Known issue types first, in their usual order, then anything else
        order = [i.value for i in IssueType] + sorted(set(counts.index) - {i.value for i in IssueType})
        counts = counts.reindex(order, fill_value=0)

        data = counts.reset_index()
        data.columns = ["issue", "count"]
        data["label"] = data["issue"].map(describe_issue)
        return data[["issue", "label", "count"]]

    def render_figure(self, data: pd.DataFrame) -> Figure:
        if data.empty or data["count"].sum() == 0:
            return self.empty_figure("No issues in the selected reports")

        fig = px.bar(
            data,
            x="count",
            y="label",
            orientation="h",
            title="Issue Types",
        )
        fig.update_layout(
            margin=dict(l=40, r=40, t=40, b=40),
            yaxis={"autorange": "reversed", "title": None},
            xaxis={"title": "Reports"},
        )
        return fig

    def toggle_issue(self, issue: str) -> None:
        """
        Add 'issue' to the issues filter, or take it out if it is already there.
        Removing the last issue removes the filter entirely.
        """
        filters = self.shared_state.filters
        key = FilterKind.ISSUES.value
        current = filters.get(key)
        selected = current.state if current is not None else []

        if issue in selected:
            selected = [i for i in selected if i != issue]
        else:
            selected = selected + [issue]

        if selected:
            updated = replace_filter(filters, IssuesFilter(selected), key=key)
        else:
            updated = remove_filter(filters, key)

        if updated is None:
            return

        self.shared_state.filters = updated
        self.analytics_event("issue_chart_filter_click", {"issue": issue, "selected": selected})
