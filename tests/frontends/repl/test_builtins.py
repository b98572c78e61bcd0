"""Tests for built-in REPL commands."""

from __future__ import annotations

import pytest

from cmdloop.core.arguments import ParsedParameters
from cmdloop.core.registry import Command, CommandContext
from cmdloop.core.session import Session
from cmdloop.frontends.repl.builtins import cmd_help, cmd_session


class TestHelp:
    """Tests for the help command."""

    @pytest.mark.asyncio
    async def test_lists_commands_with_aliases(self, make_repl, output):
        """Aliases of one command share a row with its description."""

        def deploy(ctx):
            """Deploy the thing."""

        repl = make_repl([Command.create(["deploy", "ship"], deploy)])
        await repl.execute("help")

        lines = output().splitlines()
        assert lines[0] == "Commands:"
        rows = [line.strip() for line in lines[1:]]
        assert any(row.startswith("deploy, ship") and "Deploy the thing." in row for row in rows)
        assert any(row.startswith("exit, quit") and "Exit the REPL." in row for row in rows)
        assert any(row.startswith("help") for row in rows)

    @pytest.mark.asyncio
    async def test_replaced_alias_listed_with_new_command(self, make_repl, output):
        """An alias taken over by another command is listed under it."""

        def leave(ctx):
            """Leave politely."""

        repl = make_repl([Command.create("quit", leave)])
        await repl.execute("help")

        rows = [line.strip() for line in output().splitlines()[1:]]
        assert any(row.startswith("exit ") and "Exit the REPL." in row for row in rows)
        assert any(row.startswith("quit ") and "Leave politely." in row for row in rows)

    def test_requires_repl(self):
        """help needs a REPL to print through."""
        ctx = CommandContext(params=ParsedParameters(), cli=None, session=Session())
        with pytest.raises(RuntimeError):
            cmd_help(ctx)


class TestSession:
    """Tests for the session command."""

    @pytest.mark.asyncio
    async def test_empty(self, make_repl, output):
        """An empty session says so."""
        await make_repl().execute("session")
        assert output() == "(empty session)\n"

    @pytest.mark.asyncio
    async def test_lists_keys(self, make_repl, output):
        """Stored keys are listed one per line."""
        repl = make_repl()
        repl.session.set("user", "ada")
        repl.session.set("count", 0)
        await repl.execute("session")
        assert output() == "user\ncount\n"

    def test_requires_repl(self):
        """session needs a REPL to print through."""
        ctx = CommandContext(params=ParsedParameters(), cli=None, session=Session())
        with pytest.raises(RuntimeError):
            cmd_session(ctx)


class TestExit:
    """Tests for exit and quit."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["exit", "quit"])
    async def test_exits(self, make_repl, name):
        """Both aliases raise SystemExit."""
        with pytest.raises(SystemExit):
            await make_repl().execute(name)

    @pytest.mark.asyncio
    async def test_later_statements_skipped(self, make_repl):
        """Statements after exit do not run."""
        repl = make_repl()
        repl.register("mark", lambda ctx: ctx.session.set("ran", True))
        with pytest.raises(SystemExit):
            await repl.execute("exit; mark")
        assert "ran" not in repl.session
