"""Pytest configuration and fixtures."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from cmdloop.frontends.repl import Repl


class ScriptedReader:
    """LineReader that replays canned input.

    Items are returned in order; exception classes or instances are raised
    instead. EOFError is raised once the items run out.
    """

    def __init__(self, lines=()):
        self.lines = list(lines)
        self.messages: list[str] = []
        self.close_calls = 0

    async def read_line(self, message, validate):
        self.messages.append(message)
        if not self.lines:
            raise EOFError
        item = self.lines.pop(0)
        if isinstance(item, BaseException) or (
            isinstance(item, type) and issubclass(item, BaseException)
        ):
            raise item
        return item

    def close(self):
        self.close_calls += 1


@pytest.fixture
def console():
    """Plain-text console writing to a buffer."""
    return Console(file=StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture
def output(console):
    """Return everything printed to the test console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def make_repl(console):
    """Build a Repl on the test console fed by a ScriptedReader."""

    def factory(commands=(), lines=(), **kwargs):
        return Repl(commands, console=console, reader=ScriptedReader(lines), **kwargs)

    return factory


@pytest.fixture
def scripted_reader():
    """The ScriptedReader class, for tests that build a Repl themselves."""
    return ScriptedReader
