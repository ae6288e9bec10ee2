"""Tests for the application logger utility.

The autouse ``isolate_logger`` fixture redirects user_log_dir to tmp_path.
"""

from __future__ import annotations

import logging
import logging.handlers

import pytest

from pomotodo_cli.utils.logger import get_logger, log_file_path, set_level


def test_get_logger_creates_log_file(tmp_path):
    logger = get_logger()
    assert isinstance(logger, logging.Logger)
    assert log_file_path() == tmp_path / "logs" / "pomotodo.log"
    assert log_file_path().exists()


def test_get_logger_returns_singleton():
    assert get_logger() is get_logger()


def test_get_logger_writes_message():
    logger = get_logger()
    logger.info("hello from test")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from test" in log_file_path().read_text()


def test_logger_does_not_propagate():
    assert get_logger().propagate is False


def test_set_level():
    set_level("debug")
    assert get_logger().level == logging.DEBUG
    set_level("WARNING")
    assert get_logger().level == logging.WARNING


def test_set_level_rejects_unknown():
    with pytest.raises(ValueError):
        set_level("chatty")


def test_file_handler_attached_alongside_foreign_handler():
    foreign = logging.NullHandler()
    logging.getLogger("pomotodo_cli").addHandler(foreign)

    logger = get_logger()
    assert foreign in logger.handlers
    assert any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    )

    logger.info("reaches the file")
    for handler in logger.handlers:
        handler.flush()
    assert "reaches the file" in log_file_path().read_text()
