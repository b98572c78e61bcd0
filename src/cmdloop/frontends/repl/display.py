"""Presentation channel for the REPL.

Wraps a rich Console with the severity-tagged output operations that
command handlers use through ``ctx.cli``.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.pretty import Pretty

from cmdloop.frontends.repl.themes import get_theme


class Display:
    """Severity-tagged printing on a rich Console.

    Arguments are joined with spaces like print(). Strings are printed
    as-is: rich markup in command output is not interpreted.
    """

    def __init__(self, console: Console | None = None, theme: str = "default") -> None:
        self.console = console or Console(highlight=False)
        self.console.push_theme(get_theme(theme))

    def _emit(self, style: str, objects: tuple[Any, ...]) -> None:
        text = " ".join(str(obj) for obj in objects)
        self.console.print(text, style=style, markup=False, highlight=False)

    def print(self, *objects: Any) -> None:
        self._emit("primary", objects)

    def success(self, *objects: Any) -> None:
        self._emit("success", objects)

    def warning(self, *objects: Any) -> None:
        self._emit("warning", objects)

    def danger(self, *objects: Any) -> None:
        self._emit("danger", objects)

    def error(self, *objects: Any) -> None:
        """Alias of danger()."""
        self.danger(*objects)

    def dark(self, *objects: Any) -> None:
        self._emit("dark", objects)

    def print_object(self, obj: Any) -> None:
        """Pretty-print arbitrary data (dicts, lists, dataclasses...)."""
        self.console.print(Pretty(obj, expand_all=True))
