# topmark:header:start
#
#   project      : DocBlocks
#   file         : languages.py
#   file_relpath : src/docblocks/cli/commands/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocBlocks `languages` command.

Lists every language in the comment syntax registry (built-ins, plugins, and
configured languages) with its delimiters.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from docblocks.api import build_registry
from docblocks.cli.cmd_common import get_config, get_console
from docblocks.cli.options import OutputFormat, format_option

if TYPE_CHECKING:
    from docblocks.syntax.base import CommentSyntax


def _serialize(item: CommentSyntax, *, long: bool) -> dict[str, Any]:
    data: dict[str, Any] = {"name": item.name, "description": item.description}
    if long:
        data.update(
            {
                "inline": [s.opening for s in item.inline],
                "block": [[s.opening, s.closing] for s in item.block],
                "extensions": list(item.extensions),
                "filenames": list(item.filenames),
            }
        )
    return data


def _delimiters(item: CommentSyntax) -> str:
    parts: list[str] = [s.opening for s in item.inline]
    parts.extend(f"{s.opening} {s.closing}" for s in item.block)
    return ", ".join(parts) if parts else "(none)"


@click.command(
    name="languages",
    help="List the languages DocBlocks can classify.",
)
@format_option
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show delimiters, extensions, and file names.",
)
def languages_command(*, output_format: str, show_details: bool) -> None:
    """List registered comment syntaxes."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    registry = build_registry(get_config(ctx))

    if OutputFormat(output_format.lower()) is OutputFormat.JSON:
        payload = [_serialize(item, long=show_details) for item in registry.values()]
        console.print(json.dumps(payload, indent=2))
        return

    width: int = max((len(name) for name in registry), default=0)
    for name, item in registry.items():
        line: str = f"{console.styled(name.ljust(width), bold=True)}  {item.description}"
        console.print(line)
        if show_details:
            console.print(f"{' ' * width}  delimiters: {_delimiters(item)}")
            rules: list[str] = [*item.extensions, *item.filenames]
            console.print(f"{' ' * width}  files:      {', '.join(rules) or '(none)'}")
