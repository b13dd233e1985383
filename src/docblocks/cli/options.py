# topmark:header:start
#
#   project      : DocBlocks
#   file         : options.py
#   file_relpath : src/docblocks/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

Centralizes reusable options (verbosity, language, output format) and their
resolution logic, so commands and the group can stay thin.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from docblocks.cli.errors import DocblocksUsageError
from docblocks.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable).
    """

    DEFAULT = "default"
    JSON = "json"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v``/``-q`` counts.

    Raises:
        DocblocksUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DocblocksUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress log output except errors.",
    )(f)
    return f


def language_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--language ID`` to a command (overrides detection by file name)."""
    return click.option(
        "-l",
        "--language",
        "language",
        default=None,
        metavar="ID",
        help="Language identifier (see 'docblocks languages'). Default: detect from file name.",
    )(f)


def format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format default|json`` to a command."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False),
        default=OutputFormat.DEFAULT.value,
        show_default=True,
        help="Output format.",
    )(f)
