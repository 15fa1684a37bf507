"""
structlog setup.

While the viewer is open the terminal belongs to Textual, so anything that
must be visible during a session should go to ``log_file``.  Without a log
file, records go to stderr and the default WARNING level keeps the screen
clean.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

import structlog

VIEWER_STDERR_FLOOR = "WARNING"

_log_handle: TextIO | None = None


def configure_logging(level: str = "WARNING", log_file: str = "") -> None:
    """Configure structlog globally.  Safe to call more than once."""
    global _log_handle

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if _log_handle is not None:
        _log_handle.close()
        _log_handle = None

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        _log_handle = path.open("a", encoding="utf-8")
        processors.append(structlog.processors.JSONRenderer())
        factory = structlog.WriteLoggerFactory(file=_log_handle)
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
        factory = structlog.WriteLoggerFactory(file=sys.stderr)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        logger_factory=factory,
        cache_logger_on_first_use=False,
    )


def viewer_log_level(level: str, log_file: str = "") -> str:
    """Level to use while the viewer owns the terminal.

    Records below WARNING would be drawn over the alternate screen when they
    go to stderr, so the level is raised to WARNING unless a log file is set.
    """
    level = level.upper()
    if log_file:
        return level
    if logging.getLevelName(level) < logging.getLevelName(VIEWER_STDERR_FLOOR):
        return VIEWER_STDERR_FLOOR
    return level
