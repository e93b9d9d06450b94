from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dash import Dash, html

from bikespace_dashboard.config.loader import load_config, load_reports
from bikespace_dashboard.config.model import DashboardConfig
from bikespace_dashboard.core.component import Component
from bikespace_dashboard.core.shared_state import SharedState
from bikespace_dashboard.services.analytics import AnalyticsNotifier, LoggingAnalytics, NullAnalytics
from bikespace_dashboard.ui.ids import IDs
from bikespace_dashboard.views import DurationChart, IssueChart, ReportMap, SummaryBox

logger = logging.getLogger(__name__)


@dataclass
class Dashboard:
    config: DashboardConfig
    shared_state: SharedState
    layout: html.Div
    components: List[Component] = field(default_factory=list)


def build_dashboard(config: DashboardConfig, shared_state: SharedState) -> Dashboard:
    """
    Build the page layout and every widget around an existing SharedState,
    then draw them once with no filters applied.
    """
    analytics: AnalyticsNotifier = LoggingAnalytics() if config.analytics_enabled else NullAnalytics()

    layout = html.Div(id=IDs.ROOT, children=[])
    sidebar = html.Div(id=IDs.SIDEBAR, className="sidebar", children=[])
    layout.children.append(sidebar)

    components: List[Component] = [
        SummaryBox(sidebar, IDs.SUMMARY, shared_state, analytics=analytics),
        IssueChart(sidebar, IDs.ISSUE_CHART, shared_state, analytics=analytics),
        DurationChart(sidebar, IDs.DURATION_CHART, shared_state, analytics=analytics),
        ReportMap(layout, IDs.MAP, shared_state, class_name="map", analytics=analytics),
    ]

    shared_state.refresh()

    logger.info(
        "Dashboard built",
        extra={"components": [c.root_key for c in components]},
    )
    return Dashboard(config=config, shared_state=shared_state, layout=layout, components=components)


def create_dashboard(config_root: Path | str = Path("config")) -> Dashboard:
    config_root = Path(config_root)

    # 1) Load config + data
    config = load_config(config_root)
    reports = load_reports(config.data_path, tz=config.timezone)

    # 2) Store + widgets
    shared_state = SharedState(reports)
    return build_dashboard(config, shared_state)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    dashboard = create_dashboard(config_root)

    app = Dash(__name__)
    app.title = dashboard.config.ui_title
    app.layout = dashboard.layout
    return app
