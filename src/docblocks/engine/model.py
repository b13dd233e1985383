# topmark:header:start
#
#   project      : DocBlocks
#   file         : model.py
#   file_relpath : src/docblocks/engine/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block model: the canonical, editable form of a classified document.

A document is an ordered sequence of blocks that partitions its lines
``[0, N)``:

* [`CodeBlock`][docblocks.engine.model.CodeBlock]: a contiguous run of lines
  that did not classify as documentation, stored as exact original text.
* [`DocBlock`][docblocks.engine.model.DocBlock]: a contiguous run of doc lines
  sharing one indent string, exposed as de-delimited ``contents``.

Blocks are immutable. Edits live in a small overlay on the
[`BlockModel`][docblocks.engine.model.BlockModel] keyed by block index, so the
"unchanged" test at reconstruction time is a local comparison between the
overlay and the contents captured at classification time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from docblocks.config.logging import DocblocksLogger, get_logger
from docblocks.engine.errors import SpanMismatch

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from docblocks.syntax.base import CommentStyle

logger: DocblocksLogger = get_logger(__name__)


class LineKind(Enum):
    """Classification of a single source line."""

    CODE = "code"
    DOC = "doc"


class LinePosition(Enum):
    """Role of a doc line inside the comment that produced it.

    Attributes:
        INLINE: Inline comment line.
        SINGLE: Block comment opened and closed on this line.
        OPEN: First line of a multi-line block comment.
        CONTINUE: Interior line of a multi-line block comment.
        CLOSE: Last line of a multi-line block comment.
    """

    INLINE = "inline"
    SINGLE = "single"
    OPEN = "open"
    CONTINUE = "continue"
    CLOSE = "close"


@dataclass(frozen=True)
class ClassifiedLine:
    """One raw source line with its classification.

    Attributes:
        index (int): Zero-based line index in the source.
        text (str): The exact raw line, including its terminator (if any).
        kind (LineKind): ``CODE`` or ``DOC``.
        indent (str): Leading whitespace before the opening delimiter (doc lines only).
        style (CommentStyle | None): The style that matched (doc lines only).
        body (str): De-delimited text of the line (doc lines only).
        position (LinePosition | None): Role of the line in its comment (doc lines only).
    """

    index: int
    text: str
    kind: LineKind
    indent: str = ""
    style: CommentStyle | None = None
    body: str = ""
    position: LinePosition | None = None

    @property
    def is_doc(self) -> bool:
        """Return True for doc lines."""
        return self.kind is LineKind.DOC

    @staticmethod
    def code(index: int, text: str) -> ClassifiedLine:
        """Return a code line for ``text``."""
        return ClassifiedLine(index=index, text=text, kind=LineKind.CODE)


@dataclass(frozen=True)
class CodeBlock:
    """A contiguous run of code lines, kept verbatim.

    Attributes:
        start (int): Index of the first line (inclusive).
        end (int): Index of the last line (inclusive).
        text (str): Exact original text of the lines, terminators included.
    """

    start: int
    end: int
    text: str

    @property
    def line_count(self) -> int:
        """Number of source lines spanned by this block."""
        return self.end - self.start + 1


@dataclass(frozen=True)
class DocBlock:
    """A contiguous run of doc lines sharing one indent string.

    Attributes:
        start (int): Index of the first line (inclusive).
        end (int): Index of the last line (inclusive).
        indent (str): Whitespace preceding the opening delimiter on every line.
        style (CommentStyle): Representative style (that of the first line).
        contents (str): Bodies of the constituent lines joined with ``"\\n"``.
        raw_lines (tuple[str, ...]): Exact original lines, terminators included.

    Notes:
        Only the first line's style survives grouping. A block merged from
        several styles is re-synthesized in its representative style when
        edited; the per-line styles are intentionally not retained.
    """

    start: int
    end: int
    indent: str
    style: CommentStyle
    contents: str
    raw_lines: tuple[str, ...]

    @property
    def line_count(self) -> int:
        """Number of source lines spanned by this block."""
        return self.end - self.start + 1

    @property
    def text(self) -> str:
        """Exact original text of the block."""
        return "".join(self.raw_lines)

    @property
    def trailing_newline(self) -> str:
        """Terminator of the block's last raw line (empty at end of file)."""
        last: str = self.raw_lines[-1] if self.raw_lines else ""
        stripped: str = last.rstrip("\r\n")
        return last[len(stripped) :]


Block = CodeBlock | DocBlock


class BlockModel:
    """Ordered blocks of one document plus an overlay of edited doc contents.

    The blocks themselves are immutable and partition the document's lines.
    Editing goes through [`set_contents`][docblocks.engine.model.BlockModel.set_contents],
    which records the new contents by block index; code text and block
    boundaries cannot be edited.

    Args:
        blocks (Sequence[Block]): Blocks in source order.
        newline (str): Newline sequence used for synthesized lines.
        language (str | None): Language identifier the document was classified with.
    """

    def __init__(
        self,
        blocks: Sequence[Block],
        *,
        newline: str = "\n",
        language: str | None = None,
    ) -> None:
        self.blocks: tuple[Block, ...] = tuple(blocks)
        self.newline: str = newline
        self.language: str | None = language
        self._edits: dict[int, str] = {}

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __getitem__(self, index: int) -> Block:
        return self.blocks[index]

    def __repr__(self) -> str:
        return (
            f"BlockModel(language={self.language!r}, blocks={len(self.blocks)}, "
            f"edited={sorted(self._edits)})"
        )

    @property
    def line_count(self) -> int:
        """Number of source lines covered by the model."""
        return self.blocks[-1].end + 1 if self.blocks else 0

    def doc_blocks(self) -> list[tuple[int, DocBlock]]:
        """Return ``(index, block)`` pairs for every doc block, in order."""
        return [(i, b) for i, b in enumerate(self.blocks) if isinstance(b, DocBlock)]

    def _doc_block(self, index: int) -> DocBlock:
        block: Block = self.blocks[index]
        if not isinstance(block, DocBlock):
            raise TypeError(f"Block {index} is a code block; only doc blocks are editable")
        return block

    def contents_of(self, index: int) -> str:
        """Return the current (possibly edited) contents of doc block ``index``."""
        block: DocBlock = self._doc_block(index)
        return self._edits.get(index, block.contents)

    def set_contents(self, index: int, contents: str) -> None:
        """Replace the contents of doc block ``index``.

        Setting a block back to its classified contents clears the edit, so the
        block reconstructs byte-identically again.

        Raises:
            TypeError: If ``index`` designates a code block.
        """
        block: DocBlock = self._doc_block(index)
        if contents == block.contents:
            self._edits.pop(index, None)
        else:
            self._edits[index] = contents
        logger.debug("Doc block %d contents set (edited=%s)", index, index in self._edits)

    def is_edited(self, index: int) -> bool:
        """Return True if doc block ``index`` carries an edit."""
        return index in self._edits

    def edited_indices(self) -> list[int]:
        """Return the indices of all edited doc blocks, sorted."""
        return sorted(self._edits)

    @property
    def is_dirty(self) -> bool:
        """Return True if any doc block has been edited."""
        return bool(self._edits)

    def discard_edits(self) -> None:
        """Drop every pending edit."""
        self._edits.clear()

    def validate(self) -> None:
        """Check that the blocks partition ``[0, N)`` with maximal runs.

        Raises:
            SpanMismatch: On a gap, an overlap, two adjacent code blocks, or two
                adjacent doc blocks sharing an indent.
        """
        expected: int = 0
        previous: Block | None = None
        for i, block in enumerate(self.blocks):
            if block.start != expected or block.end < block.start:
                raise SpanMismatch(
                    f"Block {i} spans lines {block.start}..{block.end}; expected to start at "
                    f"line {expected}"
                )
            if isinstance(previous, CodeBlock) and isinstance(block, CodeBlock):
                raise SpanMismatch(f"Blocks {i - 1} and {i} are adjacent code blocks")
            if (
                isinstance(previous, DocBlock)
                and isinstance(block, DocBlock)
                and previous.indent == block.indent
            ):
                raise SpanMismatch(f"Blocks {i - 1} and {i} are adjacent doc blocks with one indent")
            expected = block.end + 1
            previous = block
