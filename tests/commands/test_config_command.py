"""Unit tests for the config sub-commands."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from pomotodo_cli.commands.config import app, parse_value
from pomotodo_cli.config import get_config_manager
from pomotodo_cli.utils.exit_codes import ERROR_INVALID_ARGS

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("isolate_config")


class TestParseValue:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("true", True),
            ("False", False),
            ("none", None),
            ("25", 25),
            ("0.5", 0.5),
            ("DEBUG", "DEBUG"),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_value(raw) == expected


class TestView:
    def test_view_json(self):
        result = runner.invoke(app, ["view", "-o", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["timer"]["work_minutes"] == 25

    def test_view_table(self):
        result = runner.invoke(app, ["view"])
        assert result.exit_code == 0
        assert "timer.work_minutes" in result.output


class TestGetSet:
    def test_set_then_get(self):
        result = runner.invoke(app, ["set", "timer.work_minutes", "50"])
        assert result.exit_code == 0
        assert get_config_manager().get("timer.work_minutes") == 50

        result = runner.invoke(app, ["get", "timer.work_minutes"])
        assert result.exit_code == 0
        assert "50" in result.output

    def test_set_unknown_key(self):
        result = runner.invoke(app, ["set", "timer.bogus", "1"])
        assert result.exit_code == ERROR_INVALID_ARGS

    def test_set_invalid_value(self):
        result = runner.invoke(app, ["set", "timer.work_minutes", "0"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert get_config_manager().get("timer.work_minutes") == 25

    def test_get_unset_key(self):
        result = runner.invoke(app, ["get", "storage.data_file"])
        assert result.exit_code == ERROR_INVALID_ARGS


class TestReset:
    def test_reset_key_with_yes(self):
        runner.invoke(app, ["set", "timer.break_minutes", "15"])
        result = runner.invoke(app, ["reset", "timer.break_minutes", "--yes"])
        assert result.exit_code == 0
        assert get_config_manager().get("timer.break_minutes") == 5

    def test_reset_declined(self):
        runner.invoke(app, ["set", "timer.break_minutes", "15"])
        result = runner.invoke(app, ["reset"], input="n\n")
        assert result.exit_code == 0
        assert get_config_manager().get("timer.break_minutes") == 15


class TestLoggingLevel:
    def test_set_lowercase_level(self):
        result = runner.invoke(app, ["set", "logging.level", "debug"])
        assert result.exit_code == 0
        assert get_config_manager().get("logging.level") == "DEBUG"

    def test_set_unknown_level_is_rejected(self):
        result = runner.invoke(app, ["set", "logging.level", "verbose"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert get_config_manager().get("logging.level") == "INFO"
