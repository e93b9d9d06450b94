from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from bikespace_dashboard.config.model import DashboardConfig
from bikespace_dashboard.core.exceptions import ConfigError, ReportSchemaError
from bikespace_dashboard.core.report import DEFAULT_TIMEZONE, Report

logger = logging.getLogger(__name__)


def load_config(root: Path) -> DashboardConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json
            submissions.json   (or wherever global.json's 'data_path' points)

    global.json keys:

    - ui_title: title for the page, defaults to 'BikeSpace Dashboard'
    - data_path: submissions file; relative paths are resolved against 'root'
    - timezone: IANA zone name, defaults to 'America/Toronto'
    - analytics_enabled: defaults to false

    :param root: Directory containing 'global.json'.
    :return: A DashboardConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not a JSON object or names an unknown timezone.
    """
    root = Path(root)
    logger.info(
        "Loading dashboard config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{global_path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    config = DashboardConfig.from_dict(raw, root=root)

    try:
        ZoneInfo(config.timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"Unknown timezone '{config.timezone}' in {global_path}") from e

    return config


def load_reports(path: Path, tz: str = DEFAULT_TIMEZONE) -> Tuple[Report, ...]:
    """
    Load the submissions payload and build Report objects.

    The file holds '{"submissions": [...]}' as returned by the BikeSpace API.

    1. Reads and parses the JSON file.
    2. Builds a Report from each submission, in file order.
    3. Skips any submission that doesn't match the Report shape, logging the error.

    :param path: Path to the submissions JSON file.
    :param tz: Timezone parking times are expressed in.
    :return: The reports, in file order.
    :raises ConfigError: if the file isn't a submissions payload.
    """
    path = Path(path)
    with path.open() as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path} is not valid JSON: {e}") from e

    submissions = raw.get("submissions") if isinstance(raw, dict) else None
    if not isinstance(submissions, list):
        raise ConfigError(f"{path} must contain a 'submissions' list")

    reports: List[Report] = []
    failed = 0

    for entry in submissions:
        if not isinstance(entry, dict):
            failed += 1
            logger.error(
                "Skipping submission that is not an object",
                extra={"entry_type": type(entry).__name__},
            )
            continue

        try:
            reports.append(Report.from_dict(entry, tz=tz))
        except ReportSchemaError as e:
            failed += 1
            logger.error(
                "Skipping submission due to schema error",
                extra={
                    "submission_id": entry.get("id"),
                    "error": str(e),
                },
            )

    logger.info(
        "Submissions loaded",
        extra={
            "path": str(path),
            "n_reports": len(reports),
            "n_failed": failed,
        },
    )

    return tuple(reports)
