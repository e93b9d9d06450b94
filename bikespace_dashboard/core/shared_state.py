from __future__ import annotations

import logging
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .exceptions import DuplicateComponentError, InvalidArgumentError
from .filtering import FilterMapping, apply_filters
from .filters import ReportFilter
from .report import Report, submissions_date_range

if TYPE_CHECKING:
    from .component import Component

logger = logging.getLogger(__name__)


def element_id_to_component_key(root_id: str) -> str:
    """Registry key for a component's root element id ("issue-chart" -> "issue_chart")."""
    return root_id.replace("-", "_")


class SharedState:
    """
    Central store shared by every dashboard component.

    Owns:
    - response_data: the full report set as loaded, never changed after construction
    - filters: the active filter mapping
    - display_data: response_data with the active filters applied
    - the ordered registry of components (and plain subscribers) to refresh

    Design Notes:
    - Assigning 'filters' is the only way to change what is displayed. The assignment
      recomputes display_data and then refreshes every subscriber, in registration order,
      before returning.
    - Refresh errors are not caught here; a failing widget stops the broadcast and the
      error reaches whoever assigned the filters.
    - The store never merges filter updates; callers pass the full mapping
      (see {@link replace_filter} / {@link remove_filter}).
    """

    def __init__(self, reports: Sequence[Report]):
        self._response_data: Tuple[Report, ...] = tuple(reports)
        self._filters: Dict[str, ReportFilter] = {}
        # Data initially not filtered
        self._display_data: Sequence[Report] = self._response_data

        self._components: Dict[str, Component] = {}
        self._subscribers: List[Callable[[], None]] = []

        logger.info(
            "Shared state created",
            extra={"n_reports": len(self._response_data)},
        )

    # ------------------------------------------------------------------
    # Component registration
    # ------------------------------------------------------------------
    def register_component(self, component: Component) -> str:
        """
        Register a component so it is refreshed whenever the filters change.

        :param component: the component; its 'root_id' determines the registry key
        :return: the registry key

        Raises:
            DuplicateComponentError: if another component already uses the same key
        """
        key = element_id_to_component_key(component.root_id)
        if key in self._components:
            raise DuplicateComponentError(
                f"Component '{key}' already registered (root id '{component.root_id}')"
            )

        self._components[key] = component
        self._subscribers.append(component.refresh)

        logger.debug(
            "Component registered",
            extra={"component_key": key, "component": type(component).__name__},
        )
        return key

    def subscribe(self, callback: Callable[[], None]) -> None:
        """
        Add a plain callable to the refresh broadcast. It is called after every
        filter change, in the same order as registered components.
        """
        self._subscribers.append(callback)

    @property
    def components(self) -> Mapping[str, Component]:
        return MappingProxyType(self._components)

    def get_component(self, key: str) -> Optional[Component]:
        return self._components.get(key)

    # ------------------------------------------------------------------
    # Refresh broadcast
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        """Synchronously refresh every subscriber, in registration order."""
        logger.debug(
            "Refreshing components",
            extra={"n_subscribers": len(self._subscribers), "n_display": len(self._display_data)},
        )
        for callback in list(self._subscribers):
            callback()

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------
    @property
    def filters(self) -> Dict[str, ReportFilter]:
        # Copy: mutating the returned dict must not change the store
        return dict(self._filters)

    @filters.setter
    def filters(self, f: FilterMapping) -> None:
        self.set_filters(f)

    def set_filters(self, f: FilterMapping) -> None:
        """
        Replace the active filters, recompute display_data, then refresh all subscribers.

        Raises:
            InvalidArgumentError: if 'f' is not a mapping of str -> ReportFilter
                (the store is left unchanged)
        """
        if not isinstance(f, Mapping):
            raise InvalidArgumentError(f"filters must be a mapping, got {type(f).__name__}")

        bad = [k for k, v in f.items() if not isinstance(v, ReportFilter)]
        if bad:
            raise InvalidArgumentError(f"filters must map to ReportFilter instances; bad keys: {bad}")

        self._filters = dict(f)
        self._display_data = apply_filters(self._response_data, self._filters)

        logger.info(
            "Filters updated",
            extra={
                "filter_keys": sorted(self._filters.keys()),
                "n_display": len(self._display_data),
                "n_total": len(self._response_data),
            },
        )

        self.refresh()

    def apply_filters(self, filters: FilterMapping) -> Sequence[Report]:
        """
        Apply a custom filter mapping to the full dataset without touching the store.
        For visuals where applying all the current filters is not wanted.
        """
        return apply_filters(self._response_data, filters)

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------
    @property
    def display_data(self) -> Sequence[Report]:
        return self._display_data

    @property
    def response_data(self) -> Tuple[Report, ...]:
        return self._response_data

    def date_range(self) -> Optional[Tuple[datetime, datetime]]:
        """First and last parking_time over ALL reports, ignoring active filters."""
        return submissions_date_range(self._response_data)
