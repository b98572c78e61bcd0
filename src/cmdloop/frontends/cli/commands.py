"""Session commands shipped with the ``cmdloop`` console script."""

from __future__ import annotations

from cmdloop.core.registry import Command, CommandContext
from cmdloop.core.session import MISSING


def cmd_set(ctx: CommandContext) -> None:
    """Store a value: set <key> <value>"""
    if len(ctx.params) != 2:
        raise ValueError("usage: set <key> <value>")
    key, value = ctx.params.args
    ctx.session.set(key, value)
    if ctx.cli is not None:
        ctx.cli.success(f"{key} = {value}")


def cmd_get(ctx: CommandContext) -> None:
    """Show one value, or every value: get [key]"""
    if ctx.cli is None:
        return
    if not ctx.params.args:
        ctx.cli.print_object({key: ctx.session.get(key) for key in ctx.session.keys()})
        return
    for key in ctx.params.args:
        value = ctx.session.get(key)
        if value is MISSING:
            ctx.cli.dark(f"{key} is not set")
        else:
            ctx.cli.print(value)


def cmd_echo(ctx: CommandContext) -> None:
    """Print the arguments: echo [--upper] <text>..."""
    if ctx.cli is None:
        return
    text = " ".join(ctx.params.args)
    if ctx.params.get("upper"):
        text = text.upper()
    ctx.cli.print(text)


SESSION_COMMANDS: tuple[Command, ...] = (
    Command.create("set", cmd_set),
    Command.create("get", cmd_get),
    Command.create("echo", cmd_echo),
)
