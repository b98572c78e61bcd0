"""Built-in REPL commands.

Registered before any caller command, so a host application can replace
any of them by registering the same name.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from cmdloop.core.registry import Command, CommandContext

if TYPE_CHECKING:
    from cmdloop.frontends.repl.core import Repl


def _require_cli(ctx: CommandContext) -> Repl:
    if ctx.cli is None:
        raise RuntimeError("This command needs a running REPL")
    return ctx.cli


def cmd_exit(ctx: CommandContext) -> None:
    """Exit the REPL."""
    sys.exit()


def cmd_help(ctx: CommandContext) -> None:
    """List available commands."""
    cli = _require_cli(ctx)

    # Group reachable aliases by command so "exit, quit" share one line
    grouped: dict[int, tuple[Command, list[str]]] = {}
    for alias, command in cli.commands.items():
        grouped.setdefault(id(command), (command, []))[1].append(alias)

    rows = sorted(
        (", ".join(sorted(aliases)), command.description) for command, aliases in grouped.values()
    )
    width = max(len(names) for names, _ in rows)
    cli.print("Commands:")
    for names, description in rows:
        cli.dark(f"  {names.ljust(width)}  {description}".rstrip())


def cmd_session(ctx: CommandContext) -> None:
    """Show the keys stored in the session."""
    cli = _require_cli(ctx)
    status = ctx.session.status()
    if status:
        cli.print(status)
    else:
        cli.dark("(empty session)")


BUILTIN_COMMANDS: tuple[Command, ...] = (
    Command.create(["exit", "quit"], cmd_exit),
    Command.create("help", cmd_help),
    Command.create("session", cmd_session),
)
