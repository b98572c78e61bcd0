"""cmdloop - an embeddable interactive command loop.

The host application supplies named commands; cmdloop reads lines
(interactively or from a script file), splits them into ";"-separated
statements, and dispatches each to its handler with parsed arguments and a
session shared across the whole run.

Layers:
    core/       Dispatch engine (tokenizer, arguments, registry, executor,
                history, session)
    frontends/  REPL (prompt_toolkit input, rich output) and the CLI

Quick Start:
    >>> import asyncio
    >>> from cmdloop import Command, Repl
    >>>
    >>> def count(ctx):
    ...     n = ctx.session.get("count", 0) + 1
    ...     ctx.session.set("count", n)
    ...     ctx.cli.success(f"count is {n}")
    >>>
    >>> asyncio.run(Repl.start([Command.create(["count", "c"], count)]))
"""

from cmdloop.__version__ import __version__
from cmdloop.config import ReplConfig, load_config
from cmdloop.core import (
    MISSING,
    CmdloopError,
    Command,
    CommandContext,
    CommandRegistry,
    ConfigError,
    ExecutionResult,
    HandlerFailure,
    HistoryNavigator,
    ParsedParameters,
    Session,
    UnknownCommandError,
    execute,
    parse_arguments,
    tokenize,
    validate,
)
from cmdloop.frontends.repl import Repl, run_script_file

__all__ = [
    "__version__",
    # REPL
    "Repl",
    "run_script_file",
    "ReplConfig",
    "load_config",
    # Core
    "Command",
    "CommandContext",
    "CommandRegistry",
    "Session",
    "MISSING",
    "HistoryNavigator",
    "ParsedParameters",
    "ExecutionResult",
    "tokenize",
    "parse_arguments",
    "execute",
    "validate",
    # Errors
    "CmdloopError",
    "ConfigError",
    "HandlerFailure",
    "UnknownCommandError",
]
