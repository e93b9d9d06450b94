from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional

from dash import html

from .analytics import AnalyticsNotifier, NullAnalytics

if TYPE_CHECKING:
    from .shared_state import SharedState

logger = logging.getLogger(__name__)


class Component:
    """
    Base class for graphs, the map, summaries etc.

    On construction a component:
    - registers itself with the SharedState (once; there is no unregister)
    - appends an empty placeholder Div with id 'root_id' to 'parent'

    Subclasses override {@link refresh} to redraw themselves from
    'shared_state.display_data'.
    """

    def __init__(
            self,
            parent: html.Div,
            root_id: str,
            shared_state: SharedState,
            *,
            class_name: str = "",
            analytics: Optional[AnalyticsNotifier] = None,
    ):
        self.root_id = root_id
        self.shared_state = shared_state
        self.analytics = analytics if analytics is not None else NullAnalytics()
        self.root_key = shared_state.register_component(self)

        # add to page
        self._root = html.Div(id=root_id, className=class_name, children=[])
        children = getattr(parent, "children", None)
        if children is None:
            parent.children = []
        elif not isinstance(children, list):
            parent.children = [children]
        parent.children.append(self._root)

    def get_root_elem(self) -> html.Div:
        return self._root

    def refresh(self) -> None:
        pass

    def analytics_event(self, event_name: str, data: Optional[Mapping[str, Any]] = None) -> None:
        """
        Send an analytics event. Failures are logged and swallowed;
        analytics must never break the dashboard.
        """
        try:
            self.analytics.track(event_name, data)
        except Exception:
            logger.info(
                "Analytics not active to track event",
                extra={"event_name": event_name, "event_data": data},
                exc_info=True,
            )
