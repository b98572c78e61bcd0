"""Script file execution for REPL start-up."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmdloop.core.executor import ExecutionResult
    from cmdloop.frontends.repl.core import Repl

logger = logging.getLogger(__name__)


async def run_script_file(repl: Repl, filepath: str | Path) -> ExecutionResult | None:
    """Run a whole file as one script.

    The contents are passed to Repl.execute unchanged, so statements are
    separated by ";" only.

    Args:
        repl: REPL to run the script in.
        filepath: Path of a UTF-8 text file.

    Returns:
        The execution result, or None if the file could not be read.
    """
    path = Path(filepath)
    try:
        script = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Script file not found: %s", path)
        repl.danger(f"Error: File not found: {path}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read script file %s: %s", path, e)
        repl.danger(f"Error: Cannot read {path}: {e}")
        return None

    logger.debug("Running script file %s", path)
    return await repl.execute(script)
