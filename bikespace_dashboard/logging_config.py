from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

PACKAGE_LOGGER = "bikespace_dashboard"

# Dash's dev server logs every request (including each callback POST) at INFO
NOISY_LOGGERS = ("werkzeug",)


def _level_from_env(var: str, default: int) -> int:
    raw = os.getenv(var)
    if not raw:
        return default
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def configure_logging(
        level: int = logging.WARNING,
        package_level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure logging for the dashboard

    - root logger at 'level' (third-party libraries)
    - 'bikespace_dashboard' logger at 'package_level', so filter updates and
      component registration show up without turning on library chatter
    - request logs from the Dash dev server kept at WARNING

    Modes:
    - JSON (default) in prod
    - plain text (dev mode)

    Selection Order:
        format: force_format ("json" or "plain") > env BIKESPACE_LOG_FORMAT > "json"
        package level: package_level argument > env BIKESPACE_LOG_LEVEL > INFO
    """

    if force_format is not None:
        format_mode = force_format
    else:
        format_mode = os.getenv("BIKESPACE_LOG_FORMAT", "json").lower()

    if package_level is None:
        package_level = _level_from_env("BIKESPACE_LOG_LEVEL", logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger(PACKAGE_LOGGER).setLevel(package_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
