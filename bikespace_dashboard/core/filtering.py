from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

from .filters import ReportFilter
from .report import Report

FilterMapping = Mapping[str, ReportFilter]


def apply_filters(dataset: Sequence[Report], filters: FilterMapping) -> Sequence[Report]:
    """
    Apply every filter in the mapping to the dataset.

    - Filters are combined with AND across keys; each filter ORs over its own state.
    - The relative order of the source dataset is preserved.
    - With no filters the dataset itself is returned unchanged.

    :param dataset: the full, immutable report sequence
    :param filters: mapping of filter key -> ReportFilter
    :return: the reports that pass every filter
    """
    if not filters:
        return dataset

    active = list(filters.values())
    return tuple(r for r in dataset if all(f.test(r) for f in active))


def replace_filter(
        filters: FilterMapping,
        new_filter: ReportFilter,
        key: Optional[str] = None,
) -> Optional[Dict[str, ReportFilter]]:
    """
    Build the next filter mapping with 'new_filter' set under 'key'
    (defaults to the filter's own filter_key).

    Returns None when an equal filter is already in place, so callers can skip
    assigning (and the refresh broadcast that comes with it).
    """
    key = key or new_filter.filter_key
    current = filters.get(key)
    if current is not None and current == new_filter:
        return None

    updated = dict(filters)
    updated[key] = new_filter
    return updated


def remove_filter(filters: FilterMapping, key: str) -> Optional[Dict[str, ReportFilter]]:
    """
    Build the next filter mapping without 'key', or None if 'key' isn't set.
    """
    if key not in filters:
        return None
    return {k: f for k, f in filters.items() if k != key}
