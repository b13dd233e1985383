# topmark:header:start
#
#   project      : DocBlocks
#   file         : reconstructor.py
#   file_relpath : src/docblocks/engine/reconstructor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reconstructor: turn a (possibly edited) block model back into source text.

Round-trip law: a model with no edits reconstructs to exactly the text it was
classified from. Code blocks and unedited doc blocks are emitted from their
stored raw text; only edited doc blocks are re-synthesized.

Re-synthesis uses the block's representative style:

* inline style: every contents line becomes ``indent + open + " " + line``;
* block style: the contents are wrapped once, ``indent + open + " "`` before
  the first line, ``indent`` before each further non-empty line, and
  ``" " + close`` after the last line.

A merged block that mixed styles in the source comes out in a single style
once edited. Block-style contents that contain the closing delimiter would
produce ambiguous source and raise
[`DelimiterCollision`][docblocks.engine.errors.DelimiterCollision] unless an
inline fallback is allowed and available.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docblocks.config.logging import DocblocksLogger, get_logger
from docblocks.engine.codec import encode_source
from docblocks.engine.errors import DelimiterCollision, SpanMismatch
from docblocks.engine.model import CodeBlock, DocBlock
from docblocks.syntax.base import BlockStyle, InlineStyle

if TYPE_CHECKING:
    from docblocks.engine.model import Block, BlockModel
    from docblocks.syntax.base import CommentStyle, CommentSyntax

logger: DocblocksLogger = get_logger(__name__)


def _normalize_newlines(contents: str) -> str:
    return contents.replace("\r\n", "\n").replace("\r", "\n")


def render_inline(contents: str, *, indent: str, style: InlineStyle, newline: str, last: str) -> str:
    """Render ``contents`` as inline comment lines.

    Args:
        contents (str): De-delimited text, lines separated by ``"\\n"``.
        indent (str): Whitespace emitted before every delimiter.
        style (InlineStyle): Style to render with.
        newline (str): Terminator for every line but the last.
        last (str): Terminator for the last line (may be empty at end of file).

    Returns:
        str: The rendered lines.
    """
    lines: list[str] = _normalize_newlines(contents).split("\n")
    out: list[str] = [f"{indent}{style.opening} {line}{newline}" for line in lines[:-1]]
    out.append(f"{indent}{style.opening} {lines[-1]}{last}")
    return "".join(out)


def render_block(contents: str, *, indent: str, style: BlockStyle, newline: str, last: str) -> str:
    """Render ``contents`` wrapped once in a block comment.

    The caller is responsible for checking that ``contents`` does not contain
    ``style.closing``.
    """
    lines: list[str] = _normalize_newlines(contents).split("\n")
    rendered: list[str] = []
    for i, line in enumerate(lines):
        if i == 0:
            text = f"{indent}{style.opening} {line}"
        elif line:
            text = f"{indent}{line}"
        else:
            text = ""
        if i == len(lines) - 1:
            if i > 0 and not line:
                text = indent
            rendered.append(f"{text} {style.closing}{last}")
        else:
            rendered.append(f"{text}{newline}")
    return "".join(rendered)


class Reconstructor:
    """Serialize a [`BlockModel`][docblocks.engine.model.BlockModel] back to source text.

    Args:
        syntax (CommentSyntax | None): Syntax of the document's language; required only
            to resolve an inline fallback style.
        fallback_to_inline (bool): When True, edited block-style contents that contain
            the closing delimiter are written with the language's inline style instead
            of raising ``DelimiterCollision``.
    """

    def __init__(
        self,
        *,
        syntax: CommentSyntax | None = None,
        fallback_to_inline: bool = False,
    ) -> None:
        self.syntax: CommentSyntax | None = syntax
        self.fallback_to_inline: bool = fallback_to_inline

    def run(self, model: BlockModel) -> str:
        """Return the full source text of ``model``.

        Raises:
            SpanMismatch: If a block's span does not follow the previous block.
            DelimiterCollision: If an edited block cannot be wrapped safely.
        """
        parts: list[str] = []
        expected_start: int = 0
        for index, block in enumerate(model.blocks):
            self._check_span(index, block, expected_start)
            expected_start = block.end + 1
            if isinstance(block, CodeBlock):
                parts.append(block.text)
            elif not model.is_edited(index):
                parts.append(block.text)
            else:
                parts.append(self._synthesize(index, block, model.contents_of(index), model.newline))
        logger.debug(
            "Reconstructed %d blocks (%d re-synthesized)",
            len(model.blocks),
            len(model.edited_indices()),
        )
        return "".join(parts)

    @staticmethod
    def _check_span(index: int, block: Block, expected_start: int) -> None:
        if block.start != expected_start:
            raise SpanMismatch(
                f"Block {index} starts at line {block.start}, expected line {expected_start}"
            )
        if isinstance(block, DocBlock) and len(block.raw_lines) != block.line_count:
            raise SpanMismatch(
                f"Doc block {index} spans {block.line_count} lines but holds "
                f"{len(block.raw_lines)} raw lines"
            )

    def _synthesize(self, index: int, block: DocBlock, contents: str, newline: str) -> str:
        style: CommentStyle = block.style
        last: str = block.trailing_newline

        if isinstance(style, BlockStyle):
            if style.closing not in contents:
                return render_block(
                    contents, indent=block.indent, style=style, newline=newline, last=last
                )
            inline: InlineStyle | None = (
                self.syntax.preferred_inline()
                if self.fallback_to_inline and self.syntax is not None
                else None
            )
            if inline is None:
                raise DelimiterCollision(index, style.closing)
            logger.info(
                "Doc block %d contains '%s'; writing it with '%s' comments instead",
                index,
                style.closing,
                inline.opening,
            )
            style = inline

        return render_inline(contents, indent=block.indent, style=style, newline=newline, last=last)


def reconstruct(
    model: BlockModel,
    *,
    syntax: CommentSyntax | None = None,
    fallback_to_inline: bool = False,
) -> str:
    """Reconstruct the source text of ``model``.

    See [`Reconstructor`][docblocks.engine.reconstructor.Reconstructor] for the arguments.
    """
    return Reconstructor(syntax=syntax, fallback_to_inline=fallback_to_inline).run(model)


def reconstruct_bytes(
    model: BlockModel,
    *,
    leading_bom: bool = False,
    syntax: CommentSyntax | None = None,
    fallback_to_inline: bool = False,
) -> bytes:
    """Reconstruct ``model`` and encode it for a persister."""
    text: str = reconstruct(model, syntax=syntax, fallback_to_inline=fallback_to_inline)
    return encode_source(text, leading_bom=leading_bom)
