# topmark:header:start
#
#   project      : DocBlocks
#   file         : errors.py
#   file_relpath : src/docblocks/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DocBlocks CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. Engine errors are translated here; the engine itself never
depends on Click.
"""

from __future__ import annotations

import click

from docblocks.cli.exit_codes import ExitCode


class DocblocksCliError(click.ClickException):
    """Base class for all DocBlocks CLI errors."""

    exit_code = ExitCode.FAILURE


class DocblocksUsageError(DocblocksCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DocblocksDataError(DocblocksCliError):
    """Error for malformed input data (edit records, JSON)."""

    exit_code = ExitCode.DATA_ERROR


class DocblocksConfigError(DocblocksCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class DocblocksFileNotFoundError(DocblocksCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DocblocksIOError(DocblocksCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class DocblocksUnsupportedLanguageError(DocblocksCliError):
    """Error when no comment syntax applies to a file."""

    exit_code = ExitCode.UNSUPPORTED_LANGUAGE


class DocblocksCollisionError(DocblocksCliError):
    """Error when edited doc contents cannot be re-wrapped (document not saved)."""

    exit_code = ExitCode.ENGINE_ERROR


class DocblocksReloadRequiredError(DocblocksCliError):
    """Error when edit records are stale (reload and retry)."""

    exit_code = ExitCode.TEMP_FAILURE
