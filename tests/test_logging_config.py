import logging

import pytest

from lorenzviz.config import LOG_FILE_ENV, LOG_LEVEL_ENV
from lorenzviz.logging_config import resolve_level, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(LOG_FILE_ENV, raising=False)
    logger = logging.getLogger("lorenzviz")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.mark.parametrize("level, expected", [
    (logging.DEBUG, logging.DEBUG),
    ("debug", logging.DEBUG),
    (" WARNING ", logging.WARNING),
    ("not-a-level", logging.INFO),
])
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected


def test_default_level_is_info():
    logger = setup_logging()
    assert logger.name == "lorenzviz"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    assert setup_logging().level == logging.DEBUG


def test_explicit_level_wins_over_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    assert setup_logging(level="ERROR").level == logging.ERROR


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_log_file_from_environment(monkeypatch, tmp_path):
    log_file = tmp_path / "lorenzviz.log"
    monkeypatch.setenv(LOG_FILE_ENV, str(log_file))
    logger = setup_logging()
    assert len(logger.handlers) == 2

    logging.getLogger("lorenzviz.model.state").info("Parameter r changed")
    for handler in logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized at INFO." in text
    assert "lorenzviz.model.state - INFO - Parameter r changed" in text
