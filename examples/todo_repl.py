"""Todo list REPL.

Shows a host application registering its own commands, storing state in
the session, and using flags and async handlers.

Usage:
    python examples/todo_repl.py
    python examples/todo_repl.py examples/todo_setup.txt

Try:
    cli> add "buy milk"; add "call mum" --urgent; list
    cli> done 1; list --all
"""

import asyncio

from cmdloop import Command, Repl


def _todos(ctx):
    todos = ctx.session.get("todos", None)
    if todos is None:
        todos = []
        ctx.session.set("todos", todos)
    return todos


def add(ctx):
    """Add a todo: add <text> [--urgent]"""
    urgent = bool(ctx.params.get("urgent"))
    for text in ctx.params.args:
        _todos(ctx).append({"text": text, "done": False, "urgent": urgent})
        ctx.cli.success(f"added: {text}")


def done(ctx):
    """Mark todos as done by number: done <n>..."""
    todos = _todos(ctx)
    for number in ctx.params.args:
        todos[int(number) - 1]["done"] = True


def list_todos(ctx):
    """Show open todos: list [--all]"""
    show_all = ctx.params.get("all", False)
    for i, todo in enumerate(_todos(ctx), start=1):
        if todo["done"] and not show_all:
            continue
        line = f"{i}. {todo['text']}"
        if todo["done"]:
            ctx.cli.dark(line)
        elif todo["urgent"]:
            ctx.cli.warning(line)
        else:
            ctx.cli.print(line)


async def wait(ctx):
    """Pause: wait <seconds>"""
    await asyncio.sleep(float(ctx.params.args[0]) if ctx.params.args else 1.0)


COMMANDS = [
    Command.create(["add", "a"], add),
    Command.create("done", done),
    Command.create(["list", "ls"], list_todos),
    Command.create("wait", wait),
]


if __name__ == "__main__":
    asyncio.run(Repl.start(COMMANDS))
