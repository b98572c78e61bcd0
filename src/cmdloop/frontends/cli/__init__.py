"""CLI frontend for cmdloop.

Commands:
    cmdloop             Start an interactive session
    cmdloop script.txt  Run script.txt first, then start the session

Example:
    $ cmdloop
    cli> set name "Ada Lovelace"; get name
"""

from cmdloop.frontends.cli.main import main

__all__ = ["main"]
