import io
import logging

import pytest

from txn_dashboard import logging_setup
from txn_dashboard.logging_setup import _parse_level, configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_package_logger(monkeypatch):
    logger = logging.getLogger("txn_dashboard")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_parse_level_names_and_numbers():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level(" Warning ") == logging.WARNING
    assert _parse_level("15") == 15
    assert _parse_level(logging.ERROR) == logging.ERROR


def test_unknown_level_uses_env(monkeypatch):
    monkeypatch.setenv("TXN_DASHBOARD_LOG_LEVEL", "error")
    assert _parse_level("VERBOSE") == logging.ERROR
    assert _parse_level(None) == logging.ERROR


@pytest.mark.parametrize("env_value", ["verbose", "Verbose", "VERBOSE", "  "])
def test_bad_env_level_falls_back_to_info(monkeypatch, env_value):
    monkeypatch.setenv("TXN_DASHBOARD_LOG_LEVEL", env_value)
    assert _parse_level("VERBOSE") == logging.INFO
    assert _parse_level(None) == logging.INFO


def test_configure_logging_with_bad_level_from_env(monkeypatch):
    monkeypatch.setenv("TXN_DASHBOARD_LOG_LEVEL", "verbose")
    stream = io.StringIO()

    configure_logging("VERBOSE", stream=stream)
    get_logger("txn_dashboard.test").info("dashboard started")

    assert logging.getLogger("txn_dashboard").level == logging.INFO
    assert "dashboard started" in stream.getvalue()


def test_configure_logging_attaches_one_handler():
    stream = io.StringIO()
    configure_logging("INFO", stream=stream)
    count = len(logging.getLogger("txn_dashboard").handlers)
    configure_logging("DEBUG", stream=stream)

    logger = logging.getLogger("txn_dashboard")
    assert len(logger.handlers) == count
    assert logger.level == logging.DEBUG
