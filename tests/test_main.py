"""Tests for the click entry point."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from main import __version__, main


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_session_runs_until_exit(cli_runner: CliRunner) -> None:
    with patch("main.setup_logging") as mock_setup:
        result = cli_runner.invoke(
            main,
            ["--no-alt-screen"],
            input="add Plan trip\nadd Pay rent @ 2026-10-18\nexit\n",
        )
    assert result.exit_code == 0
    mock_setup.assert_called_once_with("WARNING", None)
    assert "1. [ ] Pay rent" in result.output
    assert "2. [ ] Plan trip" in result.output
    assert "Goodbye." in result.output
    assert "\033[?1049h" not in result.output


def test_options_from_environment(cli_runner: CliRunner) -> None:
    with patch("main.setup_logging") as mock_setup, patch("main.CLI") as mock_cli:
        result = cli_runner.invoke(
            main,
            [],
            env={"TASKS_ALT_SCREEN": "0", "TASKS_LOG_LEVEL": "DEBUG", "TASKS_LOG_FILE": "tasks.log"},
        )
    assert result.exit_code == 0
    mock_setup.assert_called_once_with("DEBUG", "tasks.log")
    assert mock_cli.call_args.kwargs["alt_screen"] is False
    mock_cli.return_value.run.assert_called_once_with()


def test_invalid_log_level(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(main, ["--log-level", "LOUD"])
    assert result.exit_code != 0
