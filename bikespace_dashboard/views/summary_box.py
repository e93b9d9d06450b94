from __future__ import annotations

from dash import html

from bikespace_dashboard.core.component import Component


class SummaryBox(Component):
    """Shows how many reports are displayed out of the total, and over which dates."""

    text: str = ""

    def refresh(self) -> None:
        shown = len(self.shared_state.display_data)
        total = len(self.shared_state.response_data)
        self.text = f"{shown} of {total} reports"

        date_range = self.shared_state.date_range()
        children = [html.Strong(self.text)]
        if date_range is not None:
            first, last = date_range
            children.append(
                html.P(f"Reports from {first.date().isoformat()} to {last.date().isoformat()}")
            )
        self.get_root_elem().children = children
