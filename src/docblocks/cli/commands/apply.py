# topmark:header:start
#
#   project      : DocBlocks
#   file         : apply.py
#   file_relpath : src/docblocks/cli/commands/apply.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocBlocks `apply` command.

Applies edited doc block records (as produced by ``docblocks export`` and
modified by an editor) to a file, then prints or writes the reconstructed
source.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from docblocks.cli.cmd_common import get_config, get_console, open_session
from docblocks.cli.errors import (
    DocblocksCollisionError,
    DocblocksDataError,
    DocblocksIOError,
    DocblocksReloadRequiredError,
)
from docblocks.cli.options import language_option
from docblocks.config.logging import DocblocksLogger, get_logger
from docblocks.engine.editable import DocBlockRecord, EditableDocument
from docblocks.engine.errors import DelimiterCollision, SpanMismatch

logger: DocblocksLogger = get_logger(__name__)


def _read_records(edits: Path) -> list[DocBlockRecord]:
    """Read records from either an exported document or a bare list of records."""
    try:
        data: Any = json.loads(edits.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DocblocksIOError(f"Cannot read {edits}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DocblocksDataError(f"{edits} is not valid JSON: {exc}") from exc
    try:
        if isinstance(data, dict):
            return EditableDocument.from_json(data).doc_blocks
        if isinstance(data, list):
            return [DocBlockRecord.from_json(item) for item in data]
    except ValueError as exc:
        raise DocblocksDataError(f"{edits}: {exc}") from exc
    raise DocblocksDataError(f"{edits}: expected an exported document or a list of records")


@click.command(
    name="apply",
    help="Apply edited doc block records to a file.",
    epilog="Without --write the reconstructed source is printed to stdout.",
)
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.argument("edits", type=click.Path(path_type=Path, dir_okay=False, exists=True))
@language_option
@click.option("--write", "write", is_flag=True, help="Write the result back to PATH.")
@click.option(
    "--fallback-inline",
    "fallback_inline",
    is_flag=True,
    help="Use inline comments when edited text contains a block comment's closing delimiter.",
)
def apply_command(
    *,
    path: Path,
    edits: Path,
    language: str | None,
    write: bool,
    fallback_inline: bool,
) -> None:
    """Apply EDITS to PATH."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = get_config(ctx)
    if fallback_inline:
        mutable = config.thaw()
        mutable.fallback_to_inline = True
        config = mutable.freeze()

    session = open_session(path, language=language, config=config)
    records: list[DocBlockRecord] = _read_records(edits)
    logger.debug("Read %d edit records from %s", len(records), edits)

    try:
        edited: list[int] = session.apply(records)
        if write:
            session.save()
            console.print(f"Updated {path} ({len(edited)} doc blocks edited)")
        else:
            console.write_bytes(session.render_bytes())
    except SpanMismatch as exc:
        raise DocblocksReloadRequiredError(f"{exc}") from exc
    except DelimiterCollision as exc:
        raise DocblocksCollisionError(f"{exc}; {path} was not saved") from exc
    except OSError as exc:
        raise DocblocksIOError(f"Cannot write {path}: {exc}") from exc
