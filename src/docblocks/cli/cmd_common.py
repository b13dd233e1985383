# topmark:header:start
#
#   project      : DocBlocks
#   file         : cmd_common.py
#   file_relpath : src/docblocks/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by DocBlocks CLI commands.

Every command loads documents through [`open_session`][docblocks.cli.cmd_common.open_session],
which translates filesystem and engine errors into CLI errors with stable exit
codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from docblocks.api import DocumentSession
from docblocks.cli.errors import (
    DocblocksFileNotFoundError,
    DocblocksIOError,
    DocblocksUnsupportedLanguageError,
)
from docblocks.config import Config
from docblocks.config.logging import DocblocksLogger, get_logger

if TYPE_CHECKING:
    from docblocks.cli.console import ClickConsole

logger: DocblocksLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the Click context by the group."""
    return ctx.obj["console"]


def get_config(ctx: click.Context) -> Config:
    """Return the frozen configuration stored on the Click context."""
    config: Config | None = ctx.obj.get("config")
    return config if config is not None else Config.from_defaults()


def open_session(
    path: Path,
    *,
    language: str | None,
    config: Config,
    require_language: bool = True,
) -> DocumentSession:
    """Load ``path`` into a new session.

    Args:
        path (Path): Source file.
        language (str | None): Explicit language id, or None to detect it.
        config (Config): Runtime configuration.
        require_language (bool): Fail when no comment syntax applies instead of
            degrading to an all-code model.

    Returns:
        DocumentSession: The loaded session.

    Raises:
        DocblocksFileNotFoundError: If ``path`` does not exist.
        DocblocksIOError: If ``path`` cannot be read.
        DocblocksUnsupportedLanguageError: If ``require_language`` is set and the
            language is unknown or cannot be detected.
    """
    if not path.is_file():
        raise DocblocksFileNotFoundError(f"No such file: {path}")
    try:
        session: DocumentSession = DocumentSession.open(path, language=language, config=config)
    except OSError as exc:
        raise DocblocksIOError(f"Cannot read {path}: {exc}") from exc

    lang: str | None = session.document.language
    logger.debug("Opened %s (language=%s)", path, lang)
    if require_language and (lang is None or lang not in session.registry):
        what: str = f"language '{lang}'" if lang else "a language"
        raise DocblocksUnsupportedLanguageError(
            f"Cannot resolve {what} for {path}; pass --language (see 'docblocks languages')"
        )
    return session
