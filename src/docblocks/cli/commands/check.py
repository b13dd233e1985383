# topmark:header:start
#
#   project      : DocBlocks
#   file         : check.py
#   file_relpath : src/docblocks/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocBlocks `check` command.

Verifies the round-trip law for each file: classifying, grouping, and
reconstructing without edits must reproduce the file byte for byte.
"""

from __future__ import annotations

from pathlib import Path

import click

from docblocks.cli.cmd_common import get_config, get_console, open_session
from docblocks.cli.exit_codes import ExitCode
from docblocks.cli.options import language_option


@click.command(
    name="check",
    help="Verify that files reconstruct byte-identically.",
    epilog="Exits with 2 if any file does not reproduce itself.",
)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path, dir_okay=False),
)
@language_option
def check_command(*, paths: tuple[Path, ...], language: str | None) -> None:
    """Check the round trip of every PATH."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = get_config(ctx)

    failures: int = 0
    for path in paths:
        session = open_session(path, language=language, config=config, require_language=False)
        original: bytes = path.read_bytes()
        ok: bool = session.render_bytes() == original
        n_doc: int = len(session.model.doc_blocks())
        if ok:
            console.print(f"{console.styled('ok', fg='green')}    {path} ({n_doc} doc blocks)")
        else:
            failures += 1
            console.print(f"{console.styled('FAIL', fg='red')}  {path}")

    if failures:
        console.warn(f"{failures} of {len(paths)} file(s) did not round-trip")
        ctx.exit(ExitCode.WOULD_CHANGE)
