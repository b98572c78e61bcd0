"""Error types for command dispatch.

Errors fall into two kinds:
- UnknownCommandError: a statement names a command that is not registered.
  Found before anything runs and aborts the whole script.
- HandlerFailure: a registered handler raised while running. Recorded per
  statement; the remaining statements still run.
"""

from __future__ import annotations

from dataclasses import dataclass


class CmdloopError(Exception):
    """Base error for cmdloop operations."""


class UnknownCommandError(CmdloopError):
    """A statement's first token has no registry entry.

    Attributes:
        command_name: The offending command name.
        script: The full script the statement came from.
    """

    def __init__(self, command_name: str, script: str) -> None:
        self.command_name = command_name
        self.script = script
        super().__init__(f'unknown or missing command "{command_name}" in "{script}"')


class ConfigError(CmdloopError):
    """Invalid configuration value or configuration file."""


@dataclass(frozen=True)
class HandlerFailure:
    """A handler that raised while executing one statement."""

    command_name: str
    statement: str
    error: BaseException

    def __str__(self) -> str:
        return f"{self.command_name}: {type(self.error).__name__}: {self.error}"
