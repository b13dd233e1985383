# topmark:header:start
#
#   project      : DocBlocks
#   file         : blocks.py
#   file_relpath : src/docblocks/cli/commands/blocks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocBlocks `blocks` command.

Shows how a file is partitioned into code blocks and doc blocks.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from docblocks.cli.cmd_common import get_config, get_console, open_session
from docblocks.cli.options import OutputFormat, format_option, language_option
from docblocks.engine.codec import ENCODING, encode_source
from docblocks.engine.model import CodeBlock

if TYPE_CHECKING:
    from docblocks.engine.model import Block


def _serialize(index: int, block: Block) -> dict[str, Any]:
    if isinstance(block, CodeBlock):
        return {"index": index, "kind": "code", "start": block.start, "end": block.end}
    return {
        "index": index,
        "kind": "doc",
        "start": block.start,
        "end": block.end,
        "indent": block.indent,
        "delimiter": block.style.tag,
        "contents": block.contents,
    }


def _displayable(text: str) -> str:
    """Return ``text`` with undecodable source bytes shown as replacement characters."""
    return encode_source(text).decode(ENCODING, errors="replace")


@click.command(
    name="blocks",
    help="Show the code blocks and doc blocks of a file.",
)
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@language_option
@format_option
def blocks_command(*, path: Path, language: str | None, output_format: str) -> None:
    """Print the block model of PATH."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    session = open_session(path, language=language, config=get_config(ctx))
    blocks = session.model.blocks

    if OutputFormat(output_format.lower()) is OutputFormat.JSON:
        payload = {
            "path": str(path),
            "language": session.document.language,
            "blocks": [_serialize(i, b) for i, b in enumerate(blocks)],
        }
        console.print(json.dumps(payload, indent=2))
        return

    for i, block in enumerate(blocks):
        span: str = f"{block.start + 1}-{block.end + 1}"
        if isinstance(block, CodeBlock):
            console.print(console.styled(f"[{i}] code  lines {span}", dim=True))
            continue
        header: str = f"[{i}] doc   lines {span}  delimiter {block.style.tag!r}  indent {block.indent!r}"
        console.print(console.styled(header, fg="cyan"))
        for line in block.contents.split("\n"):
            console.print(f"    {_displayable(line)}")
