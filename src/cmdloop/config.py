"""REPL configuration.

Each value resolves with priority: argument > environment > YAML file >
default.

Environment Variables:
    CMDLOOP_CONFIG: Path to a YAML configuration file
    CMDLOOP_PROMPT: Prompt message
    CMDLOOP_HISTORY_SIZE: Maximum number of history entries
    CMDLOOP_THEME: Output theme name
    CMDLOOP_LOG_LEVEL: Log level

Example config file:
    prompt_message: app
    history_size: 500
    theme: nord
    log_level: INFO
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from cmdloop.core.errors import ConfigError
from cmdloop.core.history import DEFAULT_HISTORY_SIZE
from cmdloop.core.logging_config import DEFAULT_LEVEL, LOG_LEVELS

CONFIG_ENV = "CMDLOOP_CONFIG"

_ENV_KEYS = {
    "prompt_message": "CMDLOOP_PROMPT",
    "history_size": "CMDLOOP_HISTORY_SIZE",
    "theme": "CMDLOOP_THEME",
    "log_level": "CMDLOOP_LOG_LEVEL",
}


@dataclass
class ReplConfig:
    """Settings for a REPL instance.

    Attributes:
        prompt_message: Text shown before the input line.
        history_size: Maximum number of scripts kept in history.
        theme: Name of the output theme.
        log_level: Level passed to configure_logging by the CLI.
    """

    prompt_message: str = "cli"
    history_size: int = DEFAULT_HISTORY_SIZE
    theme: str = "default"
    log_level: str = DEFAULT_LEVEL

    def __post_init__(self) -> None:
        from cmdloop.frontends.repl.themes import THEMES

        if isinstance(self.history_size, bool) or not isinstance(self.history_size, int):
            raise ConfigError(f"history_size must be an integer, got {self.history_size!r}")
        if self.history_size < 1:
            raise ConfigError(f"history_size must be positive, got {self.history_size}")
        self.theme = str(self.theme).lower()
        if self.theme not in THEMES:
            raise ConfigError(
                f"Unknown theme: {self.theme}. Available: {', '.join(sorted(THEMES))}"
            )
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")


def _read_config_file(path: str) -> dict[str, Any]:
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(ReplConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(map(str, unknown))}")
    return data


def load_config(config_file: str | None = None, **overrides: Any) -> ReplConfig:
    """Build a ReplConfig from arguments, environment and an optional file.

    Args:
        config_file: YAML file path. Defaults to CMDLOOP_CONFIG.
        **overrides: Field values that win over everything else. None
            values are ignored.

    Raises:
        ConfigError: On unreadable files or invalid values.
    """
    unknown = sorted(set(overrides) - set(_ENV_KEYS))
    if unknown:
        raise ConfigError(f"Unknown config options: {', '.join(unknown)}")

    path = config_file or os.environ.get(CONFIG_ENV)
    file_config = _read_config_file(path) if path else {}

    values: dict[str, Any] = {}
    for f in fields(ReplConfig):
        if overrides.get(f.name) is not None:
            values[f.name] = overrides[f.name]
        elif os.environ.get(_ENV_KEYS[f.name]):
            values[f.name] = os.environ[_ENV_KEYS[f.name]]
        elif f.name in file_config:
            values[f.name] = file_config[f.name]

    if "history_size" in values and isinstance(values["history_size"], str):
        try:
            values["history_size"] = int(values["history_size"])
        except ValueError as e:
            raise ConfigError(
                f"history_size must be an integer, got {values['history_size']!r}"
            ) from e

    return ReplConfig(**values)
