import logging

import pytest
from pythonjsonlogger import jsonlogger

from bikespace_dashboard.logging_config import PACKAGE_LOGGER, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    others = {name: logging.getLogger(name).level for name in (PACKAGE_LOGGER, "werkzeug")}
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, lvl in others.items():
        logging.getLogger(name).setLevel(lvl)


def test_configure_logging_json_by_default(restore_root_logger, monkeypatch):
    monkeypatch.delenv("BIKESPACE_LOG_FORMAT", raising=False)

    configure_logging(level=logging.DEBUG)

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_configure_logging_plain_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("BIKESPACE_LOG_FORMAT", "PLAIN")

    configure_logging()

    formatter = restore_root_logger.handlers[0].formatter
    assert not isinstance(formatter, jsonlogger.JsonFormatter)


def test_force_format_wins_over_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("BIKESPACE_LOG_FORMAT", "plain")

    configure_logging(force_format="json")

    assert isinstance(restore_root_logger.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_package_logger_is_more_verbose_than_libraries(restore_root_logger, monkeypatch):
    monkeypatch.delenv("BIKESPACE_LOG_LEVEL", raising=False)

    configure_logging()

    assert restore_root_logger.level == logging.WARNING
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
    assert logging.getLogger("bikespace_dashboard.core.shared_state").isEnabledFor(logging.INFO)
    assert logging.getLogger("werkzeug").level == logging.WARNING


def test_package_level_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("BIKESPACE_LOG_LEVEL", "debug")
    configure_logging()
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    monkeypatch.setenv("BIKESPACE_LOG_LEVEL", "nonsense")
    configure_logging()
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO

    configure_logging(package_level=logging.ERROR)
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR
