"""Script execution and pre-flight validation.

A script is split on ";" into statements. Every statement's command name
is resolved before anything runs, so an unknown name aborts the whole
script. Resolved statements then run strictly in order; a handler that
raises is recorded and the next statement still runs.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from cmdloop.core.arguments import parse_arguments
from cmdloop.core.errors import HandlerFailure, UnknownCommandError
from cmdloop.core.registry import CommandContext
from cmdloop.core.tokenizer import split_statement

if TYPE_CHECKING:
    from cmdloop.core.registry import Command, CommandRegistry
    from cmdloop.core.session import Session
    from cmdloop.frontends.repl.core import Repl

logger = logging.getLogger(__name__)


@dataclass
class StatementResult:
    """Outcome of one executed statement."""

    statement: str
    command_name: str
    failure: HandlerFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass
class ExecutionResult:
    """Outcome of one execute() call.

    Attributes:
        script: The script as submitted.
        statements: Results of the statements that ran, in order.
        unknown_command: Set when the script was rejected before running.
    """

    script: str
    statements: list[StatementResult] = field(default_factory=list)
    unknown_command: UnknownCommandError | None = None

    @property
    def failures(self) -> list[HandlerFailure]:
        return [r.failure for r in self.statements if r.failure is not None]

    @property
    def ok(self) -> bool:
        return self.unknown_command is None and not self.failures


def split_script(script: str) -> list[str]:
    """Split a script into trimmed, non-empty statements."""
    parts = (part.strip() for part in script.split(";"))
    return [part for part in parts if part]


def validate(script: str, registry: CommandRegistry) -> Literal[True] | str:
    """Check that every statement names a registered command.

    Runs nothing. Used by the prompt to reject input before submission.

    Returns:
        True if the script is valid (the empty script is valid),
        otherwise a message naming the first unknown command.
    """
    for statement in split_script(script):
        command_name, _ = split_statement(statement)
        if command_name not in registry:
            return f'unknown command "{command_name}"'
    return True


def _resolve(
    script: str, registry: CommandRegistry
) -> list[tuple[str, str, list[str], Command]] | UnknownCommandError:
    resolved = []
    for statement in split_script(script):
        command_name, arg_tokens = split_statement(statement)
        command = registry.lookup(command_name)
        if command is None:
            return UnknownCommandError(command_name, script)
        resolved.append((statement, command_name, arg_tokens, command))
    return resolved


async def execute(
    script: str,
    registry: CommandRegistry,
    session: Session,
    cli: Repl | None = None,
) -> ExecutionResult:
    """Execute a script statement by statement.

    Args:
        script: Raw script text, statements separated by ";".
        registry: Registry used to resolve command names.
        session: Session handed to every handler.
        cli: REPL handed to every handler as ctx.cli.

    Returns:
        ExecutionResult describing what ran. Unknown commands and handler
        errors are reported in the result, never raised.
    """
    result = ExecutionResult(script=script)

    resolved = _resolve(script, registry)
    if isinstance(resolved, UnknownCommandError):
        logger.debug("Rejected script: %s", resolved)
        result.unknown_command = resolved
        return result

    for statement, command_name, arg_tokens, command in resolved:
        ctx = CommandContext(params=parse_arguments(arg_tokens), cli=cli, session=session)
        statement_result = StatementResult(statement=statement, command_name=command_name)
        logger.debug("Dispatching %r", statement)
        try:
            outcome = command.handler(ctx)
            if inspect.isawaitable(outcome):
                await outcome
        except Exception as e:
            logger.debug("Command %r failed: %s", command_name, e, exc_info=True)
            statement_result.failure = HandlerFailure(
                command_name=command_name, statement=statement, error=e
            )
        result.statements.append(statement_result)

    return result
