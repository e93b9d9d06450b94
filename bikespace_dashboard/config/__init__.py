"""
Config package for bikespace_dashboard.

Responsible for:
- the config model (DashboardConfig)
- config / submissions I/O helpers (load_config / load_reports)
"""

from .model import DashboardConfig
from .loader import load_config, load_reports

__all__ = ["DashboardConfig", "load_config", "load_reports"]
