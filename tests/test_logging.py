"""Tests for the project logging setup."""

from __future__ import annotations

import logging

import pytest

from sweet_shop_api.app.core.logging_config import APP_LOGGER, setup_logging


@pytest.fixture
def app_logger():
    logger = logging.getLogger(APP_LOGGER)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


def test_sets_project_level(app_logger: logging.Logger) -> None:
    assert setup_logging("debug") is app_logger
    assert app_logger.level == logging.DEBUG

    setup_logging("nonsense")
    assert app_logger.level == logging.INFO


def test_writes_log_file(app_logger: logging.Logger, tmp_path) -> None:
    logfile = tmp_path / "logs" / "sweet_shop.log"

    setup_logging("INFO", str(logfile))
    setup_logging("INFO", str(logfile))
    logging.getLogger("sweet_shop_api.app.services.sweet_service").info("Restocked t1")
    for handler in app_logger.handlers:
        handler.flush()

    file_handlers = [h for h in app_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    text = logfile.read_text(encoding="utf-8")
    assert "[INFO] sweet_shop_api.app.services.sweet_service: Restocked t1" in text
