"""Shared test fixtures and configuration.

Keeps tests away from the real platformdirs locations: the log file and the
config directory are redirected into *tmp_path*.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from pomotodo_cli.models.app_state import AppController
from pomotodo_cli.storage import TaskFile


@pytest.fixture(autouse=True)
def isolate_logger(tmp_path):
    """Send log output to a per-test directory and reset the singleton."""
    import pomotodo_cli.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("pomotodo_cli").handlers.clear()
    with patch(
        "pomotodo_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")
    ):
        yield
    for handler in logging.getLogger("pomotodo_cli").handlers:
        handler.close()
    logging.getLogger("pomotodo_cli").handlers.clear()
    logger_mod._logger = None


@pytest.fixture()
def isolate_config(tmp_path):
    """Point the config manager at a temporary directory."""
    import pomotodo_cli.config as config_mod

    config_mod._config_manager = None
    with patch(
        "pomotodo_cli.config.user_config_dir", return_value=str(tmp_path / "config")
    ):
        yield tmp_path / "config"
    config_mod._config_manager = None


@pytest.fixture()
def task_file(tmp_path) -> TaskFile:
    return TaskFile(tmp_path / "todo_list.txt")


@pytest.fixture()
def controller(task_file) -> AppController:
    """Controller with short durations: 3-tick work phase, 2-tick break."""
    ctrl = AppController(task_file, work_duration=3, break_duration=2, notice_ticks=2)
    ctrl.load()
    return ctrl


def type_text(ctrl: AppController, text: str) -> None:
    """Deliver each character of *text* as a key press."""
    for char in text:
        key = "space" if char == " " else char
        ctrl.handle_key(key, char)


def add_task(ctrl: AppController, name: str, language: str = "en") -> None:
    """Drive the input mode machine through a full task creation."""
    ctrl.handle_key("i")
    type_text(ctrl, name)
    ctrl.handle_key("enter")
    type_text(ctrl, language)
    ctrl.handle_key("enter")
