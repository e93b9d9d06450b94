"""
Top-level package for the BikeSpace dashboard.

This package exposes the shared filtering/state core and the widgets built on it.
Most code should import from submodules such as:
    bikespace_dashboard.core
    bikespace_dashboard.views
    bikespace_dashboard.ui
"""

__all__: list[str] = []
