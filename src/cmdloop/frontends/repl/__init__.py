"""Interactive REPL built on the dispatch core.

Public API:
    Repl: The command loop
    run_script_file: Execute a script file in a REPL
    Display: Severity-tagged output on a rich Console
    PromptReader: prompt_toolkit line reader with history recall
    LineReader: Protocol for alternative input sources
"""

from __future__ import annotations

from cmdloop.frontends.repl.core import Repl
from cmdloop.frontends.repl.display import Display
from cmdloop.frontends.repl.file_runner import run_script_file
from cmdloop.frontends.repl.prompt import LineReader, PromptReader

__all__ = [
    "Repl",
    "run_script_file",
    "Display",
    "PromptReader",
    "LineReader",
]
