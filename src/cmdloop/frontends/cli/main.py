"""CLI entry point."""

from __future__ import annotations

import asyncio
import sys

import rich_click as click

from cmdloop.config import load_config
from cmdloop.core.errors import ConfigError
from cmdloop.core.logging_config import LOG_LEVELS, configure_logging
from cmdloop.frontends.cli.commands import SESSION_COMMANDS
from cmdloop.frontends.repl import Repl
from cmdloop.frontends.repl.themes import THEMES

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.USE_MARKDOWN = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running '--help' for more information."
click.rich_click.MAX_WIDTH = 100


@click.command()
@click.version_option(package_name="cmdloop")
@click.argument("script", required=False, type=click.Path(dir_okay=False))
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (default: CMDLOOP_LOG_LEVEL or WARNING)",
)
@click.option(
    "--theme",
    type=click.Choice(sorted(THEMES), case_sensitive=False),
    default=None,
    help="Output theme",
)
@click.option("--prompt", "prompt_message", default=None, help="Prompt message")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML config file (default: CMDLOOP_CONFIG)",
)
def cli(
    script: str | None,
    log_level: str | None,
    theme: str | None,
    prompt_message: str | None,
    config_file: str | None,
) -> None:
    """Interactive command loop.

    Statements are separated by **;** and run left to right. Quote
    arguments containing spaces with double quotes.

    **Examples:**

        cmdloop

        cmdloop setup.txt

        cmdloop --theme nord --log-level DEBUG
    """
    try:
        config = load_config(
            config_file,
            log_level=log_level,
            theme=theme,
            prompt_message=prompt_message,
        )
        configure_logging(level=config.log_level)
    except ConfigError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    argv = [script] if script else []
    asyncio.run(Repl.start(SESSION_COMMANDS, argv=argv, config=config))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
