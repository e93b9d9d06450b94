from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

import plotly.graph_objs as go
from dash import dcc

from bikespace_dashboard.core.component import Component
from bikespace_dashboard.core.report import Report


class FigureComponent(Component, ABC):
    """
    Base class for components drawn as a single Plotly figure.

    Defines the contract every figure component follows
    - implement 'compute_data' - summarise the reports currently displayed
    - implement 'render_figure' - build the Plotly figure from that summary

    {@link refresh} runs both against 'shared_state.display_data' and mounts the
    result in the component's root Div.
    """

    figure: go.Figure = None

    @abstractmethod
    def compute_data(self, reports: Sequence[Report]) -> Any:
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any) -> go.Figure:
        raise NotImplementedError()

    def refresh(self) -> None:
        data = self.compute_data(self.shared_state.display_data)
        self.figure = self.render_figure(data)
        self.get_root_elem().children = [
            dcc.Graph(id=f"{self.root_id}-graph", figure=self.figure)
        ]

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all figure components.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
