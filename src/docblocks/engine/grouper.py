# topmark:header:start
#
#   project      : DocBlocks
#   file         : grouper.py
#   file_relpath : src/docblocks/engine/grouper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block grouper: merge classified lines into code blocks and doc blocks.

Consecutive code lines form one [`CodeBlock`][docblocks.engine.model.CodeBlock].
Consecutive doc lines form one [`DocBlock`][docblocks.engine.model.DocBlock] as
long as their indent strings are character-identical; the comment style may
change freely from line to line. An indent change or a code line ends the
current doc block.

The representative style of a merged doc block is its first line's style.
Later lines only contribute their body text: per-line styles are dropped
here on purpose, and an edited block is re-synthesized in one style.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docblocks.config.logging import DocblocksLogger, get_logger
from docblocks.engine.model import Block, BlockModel, CodeBlock, DocBlock

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docblocks.engine.model import ClassifiedLine
    from docblocks.syntax.base import CommentStyle

logger: DocblocksLogger = get_logger(__name__)


def _code_block(run: list[ClassifiedLine]) -> CodeBlock:
    return CodeBlock(
        start=run[0].index,
        end=run[-1].index,
        text="".join(cl.text for cl in run),
    )


def _doc_block(run: list[ClassifiedLine]) -> DocBlock:
    first: ClassifiedLine = run[0]
    style: CommentStyle | None = first.style
    assert style is not None
    return DocBlock(
        start=first.index,
        end=run[-1].index,
        indent=first.indent,
        style=style,
        contents="\n".join(cl.body for cl in run),
        raw_lines=tuple(cl.text for cl in run),
    )


def group_lines(lines: Sequence[ClassifiedLine]) -> list[Block]:
    """Group classified lines into maximal code and doc runs.

    Args:
        lines (Sequence[ClassifiedLine]): Output of the classifier, in source order.

    Returns:
        list[Block]: Blocks partitioning the input lines.
    """
    blocks: list[Block] = []
    run: list[ClassifiedLine] = []

    def _flush() -> None:
        if not run:
            return
        blocks.append(_doc_block(run) if run[0].is_doc else _code_block(run))
        run.clear()

    for cl in lines:
        if run:
            head: ClassifiedLine = run[0]
            same_kind: bool = head.is_doc == cl.is_doc
            if not same_kind or (cl.is_doc and cl.indent != head.indent):
                _flush()
        run.append(cl)
    _flush()

    logger.debug(
        "Grouped %d lines into %d blocks (%d doc)",
        len(lines),
        len(blocks),
        sum(1 for b in blocks if isinstance(b, DocBlock)),
    )
    return blocks


def group(
    lines: Sequence[ClassifiedLine],
    *,
    newline: str = "\n",
    language: str | None = None,
) -> BlockModel:
    """Group classified lines and wrap the result in a [`BlockModel`][docblocks.engine.model.BlockModel].

    Args:
        lines (Sequence[ClassifiedLine]): Output of the classifier.
        newline (str): Newline sequence used later for synthesized lines.
        language (str | None): Language identifier recorded on the model.

    Returns:
        BlockModel: A fresh model with no pending edits.
    """
    return BlockModel(group_lines(lines), newline=newline, language=language)
