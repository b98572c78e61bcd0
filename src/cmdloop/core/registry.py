"""Command registry.

This module provides:
- CommandContext: everything a handler receives for one invocation
- Command: a handler bound to one or more alias names
- CommandRegistry: alias -> Command lookup, append-only
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cmdloop.core.arguments import ParsedParameters
    from cmdloop.core.session import Session
    from cmdloop.frontends.repl.core import Repl

logger = logging.getLogger(__name__)


@dataclass
class CommandContext:
    """State passed to a command handler.

    Attributes:
        params: Parsed arguments of the statement.
        cli: The REPL running the command (None when the executor is
            driven without one).
        session: Session shared by every statement of the REPL.
    """

    params: ParsedParameters
    cli: Repl | None
    session: Session


# Handlers may be plain functions or coroutine functions
CommandHandler = Callable[[CommandContext], Any]


@dataclass(frozen=True)
class Command:
    """A handler reachable through one or more names."""

    names: tuple[str, ...]
    handler: CommandHandler
    description: str = ""

    def __post_init__(self) -> None:
        if not self.names:
            raise ValueError("A command needs at least one name")
        for name in self.names:
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"Invalid command name: {name!r}")
            if any(ch.isspace() or ch in ';"' for ch in name):
                raise ValueError(f"Command name must be a single token: {name!r}")

    @property
    def name(self) -> str:
        """Primary name (the first alias)."""
        return self.names[0]

    @classmethod
    def create(
        cls,
        name: str | Sequence[str],
        handler: CommandHandler,
        description: str = "",
    ) -> Command:
        """Build a command from one name or a sequence of names.

        Duplicate names are collapsed, keeping first-seen order.
        """
        names = (name,) if isinstance(name, str) else tuple(dict.fromkeys(name))
        if not description:
            doc = (getattr(handler, "__doc__", None) or "").strip()
            description = doc.splitlines()[0] if doc else ""
        return cls(names=names, handler=handler, description=description)


class CommandRegistry:
    """Maps alias names to commands.

    Registering an alias that already exists replaces the command for that
    alias only; other aliases of the old command keep pointing to it.
    """

    def __init__(self, commands: Iterable[Command] = ()) -> None:
        self._commands: dict[str, Command] = {}
        for command in commands:
            self.add(command)

    def add(self, command: Command) -> Command:
        """Register a pre-built command under all of its names."""
        for alias in command.names:
            if alias in self._commands:
                logger.debug("Command alias %r replaced", alias)
            self._commands[alias] = command
        return command

    def register(
        self,
        names: str | Sequence[str],
        handler: CommandHandler,
        description: str = "",
    ) -> Command:
        """Register handler under one or more names."""
        return self.add(Command.create(names, handler, description))

    def lookup(self, name: str) -> Command | None:
        """Return the command for name, or None if not registered."""
        return self._commands.get(name)

    def list(self) -> Mapping[str, Command]:
        """Return a read-only view of alias -> command."""
        return MappingProxyType(self._commands)

    def names(self) -> list[str]:
        """Return all aliases, sorted."""
        return sorted(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
