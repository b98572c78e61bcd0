"""Frontends - user-facing layers around the dispatch core.

Submodules:
    repl/   Interactive REPL (prompt, output styling, built-in commands)
    cli/    The ``cmdloop`` console script
"""
