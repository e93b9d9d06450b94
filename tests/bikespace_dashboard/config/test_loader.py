import json
from pathlib import Path

import pytest

from bikespace_dashboard.config.loader import load_config, load_reports
from bikespace_dashboard.core.exceptions import ConfigError


def _write_submissions(path: Path, submissions) -> Path:
    path.write_text(json.dumps({"submissions": submissions}))
    return path


def _submission(i, **overrides):
    raw = {
        "id": i,
        "latitude": 43.65,
        "longitude": -79.38,
        "parking_time": "2024-01-06T10:00:00",
        "parking_duration": "hours",
        "issues": ["full"],
        "comments": None,
    }
    raw.update(overrides)
    return raw


def test_load_config_resolves_relative_data_path(tmp_path):
    # Arrange: build config dir:
    # root/
    #   global.json
    config_root = tmp_path / "config"
    config_root.mkdir()
    (config_root / "global.json").write_text(
        json.dumps({"ui_title": "Test Dashboard", "data_path": "data/subs.json"})
    )

    config = load_config(config_root)

    assert config.ui_title == "Test Dashboard"
    assert config.data_path == (config_root / "data" / "subs.json").resolve()
    assert config.timezone == "America/Toronto"
    assert config.analytics_enabled is False


def test_load_config_missing_global_json(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path)


def test_load_config_rejects_unknown_timezone(tmp_path):
    (tmp_path / "global.json").write_text(json.dumps({"timezone": "Mars/Olympus_Mons"}))

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_non_object(tmp_path):
    (tmp_path / "global.json").write_text(json.dumps(["not", "an", "object"]))

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_reports_keeps_file_order(tmp_path):
    path = _write_submissions(
        tmp_path / "subs.json",
        [_submission(3), _submission(1), _submission(2, issues=[])],
    )

    reports = load_reports(path)

    assert [r.id for r in reports] == [3, 1, 2]
    assert reports[2].issues == frozenset()
    assert isinstance(reports, tuple)


def test_load_reports_skips_invalid_submissions(tmp_path, caplog):
    path = _write_submissions(
        tmp_path / "subs.json",
        [
            _submission(1),
            _submission(2, parking_time="yesterday-ish"),
            _submission(3, latitude=None),
            "not a submission",
            _submission(4),
        ],
    )

    reports = load_reports(path)

    assert [r.id for r in reports] == [1, 4]
    assert sum(1 for rec in caplog.records if rec.levelname == "ERROR") == 3


def test_load_reports_requires_submissions_list(tmp_path):
    path = tmp_path / "subs.json"
    path.write_text(json.dumps({"items": []}))

    with pytest.raises(ConfigError):
        load_reports(path)
