import plotly.graph_objs as go
import pytest
from dash import dcc, html

from bikespace_dashboard.core.filters import IssuesFilter, ParkingDurationFilter
from bikespace_dashboard.core.report import Report, parse_parking_time
from bikespace_dashboard.core.shared_state import SharedState
from bikespace_dashboard.views import DurationChart, IssueChart, ReportMap, SummaryBox
from bikespace_dashboard.views.frame import REPORT_COLUMNS, reports_frame


class _RecordingAnalytics:
    def __init__(self):
        self.events = []

    def track(self, event_name, data=None):
        self.events.append((event_name, data))


def _make_reports():
    rows = [
        (1, "2024-01-06T10:00:00", "hours", ["full", "damaged"], "Rack was full"),
        (2, "2024-01-10T10:00:00", "minutes", ["damaged"], None),
        (3, "2024-02-07T10:00:00", "minutes", ["full"], None),
        (4, "2024-02-08T10:00:00", "forever", [], None),
    ]
    return [
        Report(
            id=i,
            latitude=43.6 + i / 100,
            longitude=-79.4,
            parking_time=parse_parking_time(t),
            parking_duration=d,
            issues=frozenset(issues),
            comments=c,
        )
        for i, t, d, issues, c in rows
    ]


def _counts(data, key):
    return dict(zip(data[key], data["count"]))


def test_reports_frame():
    df = reports_frame(_make_reports())
    assert list(df.columns) == REPORT_COLUMNS
    assert list(df["id"]) == [1, 2, 3, 4]
    assert df.loc[0, "issues"] == ["damaged", "full"]

    empty = reports_frame([])
    assert empty.empty
    assert list(empty.columns) == REPORT_COLUMNS


def test_issue_chart_counts_each_issue():
    state = SharedState(_make_reports())
    chart = IssueChart(html.Div(children=[]), "issue-chart", state)

    data = chart.compute_data(state.display_data)
    counts = _counts(data, "issue")

    assert counts["full"] == 2
    assert counts["damaged"] == 2
    assert counts["abandoned"] == 0
    assert list(data["issue"])[:5] == ["not_provided", "full", "damaged", "abandoned", "other"]


def test_issue_chart_refresh_mounts_graph():
    state = SharedState(_make_reports())
    chart = IssueChart(html.Div(children=[]), "issue-chart", state)

    state.refresh()

    (graph,) = chart.get_root_elem().children
    assert isinstance(graph, dcc.Graph)
    assert isinstance(chart.figure, go.Figure)
    assert len(chart.figure.data) == 1


def test_issue_chart_toggle_issue_updates_filters_and_tracks():
    state = SharedState(_make_reports())
    analytics = _RecordingAnalytics()
    chart = IssueChart(html.Div(children=[]), "issue-chart", state, analytics=analytics)

    chart.toggle_issue("damaged")
    assert state.filters["issues"].state == ["damaged"]
    assert [r.id for r in state.display_data] == [1, 2]

    chart.toggle_issue("full")
    assert state.filters["issues"].state == ["damaged", "full"]

    chart.toggle_issue("damaged")
    chart.toggle_issue("full")
    assert "issues" not in state.filters
    assert len(state.display_data) == 4

    assert [name for name, _ in analytics.events] == ["issue_chart_filter_click"] * 4


def test_issue_chart_toggle_keeps_other_filters():
    state = SharedState(_make_reports())
    chart = IssueChart(html.Div(children=[]), "issue-chart", state)
    state.filters = {"parking_duration": ParkingDurationFilter(["minutes"])}

    chart.toggle_issue("full")

    assert sorted(state.filters) == ["issues", "parking_duration"]
    assert [r.id for r in state.display_data] == [3]


def test_issue_chart_empty_after_filtering():
    state = SharedState(_make_reports())
    chart = IssueChart(html.Div(children=[]), "issue-chart", state)

    state.filters = {"issues": IssuesFilter(["abandoned"])}

    assert chart.figure.layout.title.text == "No issues in the selected reports"


def test_duration_chart_orders_known_categories_first():
    state = SharedState(_make_reports())
    chart = DurationChart(html.Div(children=[]), "duration-chart", state)

    data = chart.compute_data(state.display_data)

    assert list(data["parking_duration"]) == ["minutes", "hours", "overnight", "multiday", "forever"]
    assert _counts(data, "parking_duration") == {
        "minutes": 2,
        "hours": 1,
        "overnight": 0,
        "multiday": 0,
        "forever": 1,
    }
    assert data["label"].iloc[0] == "less than an hour"


def test_report_map_follows_display_data():
    state = SharedState(_make_reports())
    report_map = ReportMap(html.Div(children=[]), "report-map", state)

    state.refresh()
    assert len(report_map.figure.data[0].lat) == 4

    state.filters = {"parking_duration": ParkingDurationFilter(["minutes"])}
    assert len(report_map.figure.data[0].lat) == 2
    assert report_map.figure.data[0].lat[0] == pytest.approx(43.62)


def test_report_map_empty():
    state = SharedState([])
    report_map = ReportMap(html.Div(children=[]), "report-map", state)

    state.refresh()

    assert isinstance(report_map.figure, go.Figure)


def test_summary_box_text():
    state = SharedState(_make_reports())
    box = SummaryBox(html.Div(children=[]), "summary-box", state)

    state.filters = {"issues": IssuesFilter(["full"])}

    assert box.text == "2 of 4 reports"
    strong, dates = box.get_root_elem().children
    assert dates.children == "Reports from 2024-01-06 to 2024-02-08"
