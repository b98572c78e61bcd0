"""Tests for the cmdloop CLI entry point."""

from __future__ import annotations

import importlib
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from cmdloop.frontends.cli.commands import SESSION_COMMANDS
from cmdloop.frontends.cli.main import cli

# The package re-exports main(), which hides the module attribute of the same name
cli_module = importlib.import_module("cmdloop.frontends.cli.main")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove CMDLOOP_* settings inherited from the environment."""
    for var in (
        "CMDLOOP_CONFIG",
        "CMDLOOP_PROMPT",
        "CMDLOOP_HISTORY_SIZE",
        "CMDLOOP_THEME",
        "CMDLOOP_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def start():
    """Patch Repl.start so the CLI does not open a prompt."""
    with patch.object(cli_module.Repl, "start", new_callable=AsyncMock) as mock_start:
        yield mock_start


@pytest.fixture(autouse=True)
def configure_logging():
    """Keep the CLI from installing log handlers during tests."""
    with patch.object(cli_module, "configure_logging") as mock_configure:
        yield mock_configure


class TestCli:
    """Tests for the cmdloop command."""

    def test_starts_repl_with_session_commands(self, start, configure_logging):
        """Without arguments the REPL starts with default config."""
        result = CliRunner().invoke(cli, [])

        assert result.exit_code == 0, result.output
        args, kwargs = start.call_args
        assert args == (SESSION_COMMANDS,)
        assert kwargs["argv"] == []
        assert kwargs["config"].prompt_message == "cli"
        configure_logging.assert_called_once_with(level="WARNING")

    def test_script_argument(self, start, tmp_path):
        """A script path is forwarded as the last argv entry."""
        script = tmp_path / "setup.txt"
        script.write_text("echo hi")

        result = CliRunner().invoke(cli, [str(script)])

        assert result.exit_code == 0, result.output
        assert start.call_args.kwargs["argv"] == [str(script)]

    def test_options_override_config(self, start):
        """Options become config values."""
        result = CliRunner().invoke(
            cli, ["--theme", "nord", "--prompt", "app", "--log-level", "debug"]
        )

        assert result.exit_code == 0, result.output
        config = start.call_args.kwargs["config"]
        assert config.theme == "nord"
        assert config.prompt_message == "app"
        assert config.log_level == "DEBUG"

    def test_config_file(self, start, tmp_path):
        """--config reads a YAML file."""
        config_file = tmp_path / "cmdloop.yaml"
        config_file.write_text("prompt_message: fromfile\nhistory_size: 10\n")

        result = CliRunner().invoke(cli, ["--config", str(config_file)])

        assert result.exit_code == 0, result.output
        config = start.call_args.kwargs["config"]
        assert config.prompt_message == "fromfile"
        assert config.history_size == 10

    def test_invalid_config_exits(self, start, tmp_path):
        """A bad config file exits with status 1 and never starts the REPL."""
        config_file = tmp_path / "cmdloop.yaml"
        config_file.write_text("colour: red\n")

        result = CliRunner().invoke(cli, ["--config", str(config_file)])

        assert result.exit_code == 1
        assert "Unknown config keys" in result.output
        start.assert_not_called()

    def test_unknown_theme_rejected(self, start):
        """Unknown theme names are rejected by option parsing."""
        result = CliRunner().invoke(cli, ["--theme", "neon"])
        assert result.exit_code == 2
        start.assert_not_called()
