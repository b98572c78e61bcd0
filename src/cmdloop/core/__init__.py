"""Core - the command dispatch engine.

Nothing in here knows about terminals, prompts or colors:

    tokenizer   Split a statement into tokens (double quotes group words)
    arguments   Turn argument tokens into positional args and flags
    session     Key/value store shared across statements
    registry    Command aliases -> handlers
    executor    Split scripts on ";", validate, run statements in order
    history     Submitted scripts with previous/next recall
    errors      UnknownCommandError, HandlerFailure, ConfigError

Example:
    >>> from cmdloop.core import CommandRegistry, Session, execute
    >>>
    >>> registry = CommandRegistry()
    >>> registry.register("inc", lambda ctx: ctx.session.set("n", ctx.session.get("n", 0) + 1))
    >>> session = Session()
    >>> result = await execute("inc; inc", registry, session)
    >>> session.get("n")
    2
"""

from cmdloop.core.arguments import ParsedParameters, parse_arguments
from cmdloop.core.errors import (
    CmdloopError,
    ConfigError,
    HandlerFailure,
    UnknownCommandError,
)
from cmdloop.core.executor import (
    ExecutionResult,
    StatementResult,
    execute,
    split_script,
    validate,
)
from cmdloop.core.history import HistoryNavigator
from cmdloop.core.registry import Command, CommandContext, CommandHandler, CommandRegistry
from cmdloop.core.session import MISSING, Session
from cmdloop.core.tokenizer import split_statement, tokenize

__all__ = [
    # Parsing
    "tokenize",
    "split_statement",
    "parse_arguments",
    "ParsedParameters",
    # Session
    "Session",
    "MISSING",
    # Registry
    "Command",
    "CommandContext",
    "CommandHandler",
    "CommandRegistry",
    # Execution
    "execute",
    "validate",
    "split_script",
    "ExecutionResult",
    "StatementResult",
    # History
    "HistoryNavigator",
    # Errors
    "CmdloopError",
    "ConfigError",
    "HandlerFailure",
    "UnknownCommandError",
]
