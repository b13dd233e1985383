# topmark:header:start
#
#   project      : DocBlocks
#   file         : logging.py
#   file_relpath : src/docblocks/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocBlocks logging with a TRACE level.

The line classifier reports every per-line decision at TRACE, below DEBUG, so
it stays silent unless ``-vvv`` or ``DOCBLOCKS_LOG_LEVEL=TRACE`` asks for it.
Records go to stderr, colored by severity with ``yachalk``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "DOCBLOCKS_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s: %(message)s"

logging.addLevelName(TRACE_LEVEL, "TRACE")


class DocblocksLogger(logging.Logger):
    """Logger exposing [`trace`][docblocks.config.logging.DocblocksLogger.trace]."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.setLoggerClass(DocblocksLogger)


# Highest threshold first; the first one a record reaches picks its color.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the formatted record wrapped in its level color."""
        message: str = super().format(record)
        for threshold, paint in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return paint(message)
        return message


def resolve_env_log_level() -> int | None:
    """Return the level named by ``DOCBLOCKS_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names ("TRACE", "debug", ...) and numbers ("10").
    """
    value: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not value:
        return None
    if value.isdigit():
        return int(value)
    level: int | str = logging.getLevelName(value)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Route all DocBlocks records to stderr at ``level``.

    When ``level`` is None the environment decides, falling back to CRITICAL.
    Handlers installed by an earlier call are replaced.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> DocblocksLogger:
    """Return the DocBlocks logger called ``name``."""
    return cast("DocblocksLogger", logging.getLogger(name))
