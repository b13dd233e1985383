# topmark:header:start
#
#   project      : DocBlocks
#   file         : export.py
#   file_relpath : src/docblocks/cli/commands/export.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocBlocks `export` command.

Prints the editable representation of a file as JSON: the hydrated view text
and the ``[from, to, indent, delimiter, contents]`` doc block records.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from docblocks.cli.cmd_common import get_config, get_console, open_session
from docblocks.cli.options import language_option


@click.command(
    name="export",
    help="Print the editable doc block records of a file as JSON.",
)
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@language_option
def export_command(*, path: Path, language: str | None) -> None:
    """Export the editable document for PATH."""
    ctx = click.get_current_context()
    session = open_session(path, language=language, config=get_config(ctx))
    get_console(ctx).print(json.dumps(session.editable().as_json(), indent=2))
