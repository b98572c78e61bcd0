"""Core REPL loop and command execution."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Literal

from rich.console import Console

from cmdloop.config import ReplConfig
from cmdloop.core import executor
from cmdloop.core.executor import ExecutionResult
from cmdloop.core.history import HistoryNavigator
from cmdloop.core.registry import Command, CommandHandler, CommandRegistry
from cmdloop.core.session import Session
from cmdloop.frontends.repl.builtins import BUILTIN_COMMANDS
from cmdloop.frontends.repl.display import Display
from cmdloop.frontends.repl.file_runner import run_script_file
from cmdloop.frontends.repl.prompt import LineReader, PromptReader
from cmdloop.frontends.repl.themes import get_prompt_style

logger = logging.getLogger(__name__)

CommandSpec = Command | Mapping[str, Any]


def _to_command(spec: CommandSpec) -> Command:
    """Accept a Command or a {"name": ..., "impl": ...} mapping."""
    if isinstance(spec, Command):
        return spec
    try:
        return Command.create(spec["name"], spec["impl"], spec.get("description", ""))
    except KeyError as e:
        raise ValueError(f"Command spec is missing {e.args[0]!r}: {spec!r}") from e


class Repl:
    """Interactive command loop.

    Reads a line, runs it as a script of ";"-separated statements, records
    it in history unless it was rejected for an unknown command, and
    prompts again. Handlers receive a CommandContext
    whose ``cli`` is this REPL, so they can print through it.

    Example:
        >>> def greet(ctx):
        ...     ctx.cli.success("hello", *ctx.params.args)
        >>> repl = Repl.create([Command.create(["greet", "hi"], greet)])
        >>> await repl.execute("greet world; hi again")
        >>> await repl.run()
    """

    def __init__(
        self,
        commands: Iterable[CommandSpec] = (),
        *,
        config: ReplConfig | None = None,
        console: Console | None = None,
        reader: LineReader | None = None,
    ) -> None:
        self.config = config or ReplConfig()
        self._session = Session()
        self._history = HistoryNavigator(self.config.history_size)
        self._display = Display(console, theme=self.config.theme)
        self._reader: LineReader = reader or PromptReader(
            self._history, prompt_style=get_prompt_style(self.config.theme)
        )

        self._registry = CommandRegistry(BUILTIN_COMMANDS)
        for spec in commands:
            self._registry.add(_to_command(spec))

    # -------------------------------------------------------------------------
    # Commands and state
    # -------------------------------------------------------------------------

    def register(
        self, name: str | Sequence[str], impl: CommandHandler, description: str = ""
    ) -> Command:
        """Register a command that can be executed in this REPL."""
        return self._registry.register(name, impl, description)

    @property
    def commands(self) -> Mapping[str, Command]:
        """Read-only view of alias -> command."""
        return self._registry.list()

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def session(self) -> Session:
        return self._session

    @property
    def history(self) -> HistoryNavigator:
        return self._history

    @property
    def reader(self) -> LineReader:
        return self._reader

    # -------------------------------------------------------------------------
    # Execution
    # -------------------------------------------------------------------------

    def validate(self, script: str) -> Literal[True] | str:
        """Check a script for unknown commands without running it."""
        return executor.validate(script, self._registry)

    async def execute(self, script: str) -> ExecutionResult:
        """Execute a script of ";"-separated statements.

        Unknown commands and handler errors are printed on the danger
        channel, never raised.
        """
        result = await executor.execute(script, self._registry, self._session, cli=self)
        if result.unknown_command is not None:
            self.danger(str(result.unknown_command))
        for failure in result.failures:
            self.danger(str(failure))
        return result

    async def prompt_context_message(self) -> str:
        """Extra text appended to the prompt message. Override in subclasses."""
        return ""

    async def run(self) -> None:
        """Prompt, execute, repeat.

        Returns only when the reader runs out of input (EOFError). The
        ``exit`` command ends the process through SystemExit.
        """
        while True:
            message = f"{self.config.prompt_message}{await self.prompt_context_message()}"
            try:
                line = await self._reader.read_line(message, self.validate)
            except KeyboardInterrupt:
                logger.debug("Prompt cancelled")
                continue
            except EOFError:
                logger.debug("Input exhausted, leaving REPL loop")
                return

            if not line.strip():
                continue

            result = await self.execute(line)
            if result.unknown_command is None:
                self._history.append(line)

    # -------------------------------------------------------------------------
    # Presentation
    # -------------------------------------------------------------------------

    @property
    def display(self) -> Display:
        return self._display

    def print(self, *objects: Any) -> None:
        self._display.print(*objects)

    def success(self, *objects: Any) -> None:
        self._display.success(*objects)

    def warning(self, *objects: Any) -> None:
        self._display.warning(*objects)

    def danger(self, *objects: Any) -> None:
        self._display.danger(*objects)

    def error(self, *objects: Any) -> None:
        self._display.danger(*objects)

    def dark(self, *objects: Any) -> None:
        self._display.dark(*objects)

    def print_object(self, obj: Any) -> None:
        self._display.print_object(obj)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, commands: Iterable[CommandSpec] = (), **kwargs: Any) -> Repl:
        return cls(commands, **kwargs)

    @classmethod
    async def start(
        cls,
        commands: Iterable[CommandSpec] = (),
        argv: Sequence[str] | None = None,
        **kwargs: Any,
    ) -> Repl:
        """Create a REPL, run an optional script file, then run the loop.

        Args:
            commands: Commands to register after the built-ins.
            argv: Process arguments without the program name. Defaults to
                sys.argv[1:]. If the last one does not start with "--" it
                is read as a script file and executed before the loop.
            **kwargs: Passed to the Repl constructor.
        """
        argv = sys.argv[1:] if argv is None else list(argv)
        repl = cls.create(commands, **kwargs)

        if argv and not argv[-1].startswith("--"):
            await run_script_file(repl, argv[-1])

        await repl.run()
        return repl
