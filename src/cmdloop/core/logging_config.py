"""Logging setup for cmdloop.

Every module logs through ``logging.getLogger(__name__)``. Applications
embedding a REPL normally configure logging themselves; the ``cmdloop``
command calls configure_logging() once at start-up.

Environment Variables:
    CMDLOOP_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CMDLOOP_LOG_FORMAT: Output format ("text" or "json")
    CMDLOOP_LOG_FILE: Optional log file path
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime
from typing import Any, Literal

TEXT_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Quiet by default so log lines do not interleave with the prompt
DEFAULT_LEVEL = "WARNING"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Attributes every LogRecord has; anything else came in through `extra=`
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}

_configured = False


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        extra = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        if extra:
            payload["extra"] = extra

        return json.dumps(payload, default=str)


def configure_logging(
    level: str | None = None,
    format: Literal["text", "json"] | None = None,
    file_path: str | None = None,
    force: bool = False,
) -> None:
    """Install handlers on the ``cmdloop`` logger.

    Only the first call has an effect unless force=True. Arguments win
    over the CMDLOOP_LOG_* environment variables.

    Args:
        level: Log level name. Defaults to CMDLOOP_LOG_LEVEL or WARNING.
        format: "text" or "json". Defaults to CMDLOOP_LOG_FORMAT or "text".
        file_path: Also log to this file. Defaults to CMDLOOP_LOG_FILE.
        force: Reconfigure even if already configured.

    Raises:
        ValueError: If the level name is unknown.
    """
    global _configured
    if _configured and not force:
        return

    level = (level or os.environ.get("CMDLOOP_LOG_LEVEL") or DEFAULT_LEVEL).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    format = format or os.environ.get("CMDLOOP_LOG_FORMAT", "text")  # type: ignore[assignment]
    file_path = file_path or os.environ.get("CMDLOOP_LOG_FILE")

    formatter: logging.Formatter
    if format == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger("cmdloop")
    logger.setLevel(getattr(logging, level))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if file_path:
        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _configured = True
