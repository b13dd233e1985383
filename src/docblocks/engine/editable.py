# topmark:header:start
#
#   project      : DocBlocks
#   file         : editable.py
#   file_relpath : src/docblocks/engine/editable.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Editable representation handed to (and received from) an editing surface.

The editing surface sees a *hydrated view* of the document: code text appears
verbatim, and every doc block is replaced by a placeholder of one ``"\\n"`` per
source line it spans. Each doc block is described by a 5-element record::

    [from, to, indent, delimiter, contents]

``from``/``to`` are character offsets of the placeholder within the hydrated
view (not within the original source), ``delimiter`` is the opaque tag of the
block's representative style, and ``contents`` is the de-delimited text.
Only ``contents`` may be changed by the surface; changes to the other fields
are ignored when edits are applied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NamedTuple

from docblocks.config.logging import DocblocksLogger, get_logger
from docblocks.engine.errors import SpanMismatch
from docblocks.engine.model import CodeBlock

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docblocks.engine.model import BlockModel, DocBlock
    from docblocks.syntax.base import CommentSyntax

logger: DocblocksLogger = get_logger(__name__)


class DocBlockRecord(NamedTuple):
    """One doc block as exchanged with the editing surface."""

    from_: int
    to: int
    indent: str
    delimiter: str
    contents: str

    def as_json(self) -> list[Any]:
        """Return the record as the 5-element list ``[from, to, indent, delimiter, contents]``."""
        return [self.from_, self.to, self.indent, self.delimiter, self.contents]

    @classmethod
    def from_json(cls, value: Any) -> DocBlockRecord:
        """Parse a 5-element list produced by [`as_json`][docblocks.engine.editable.DocBlockRecord.as_json].

        Raises:
            ValueError: If ``value`` does not have the expected shape.
        """
        if not isinstance(value, (list, tuple)) or len(value) != 5:
            raise ValueError(f"Expected a 5-element doc block record, got {value!r}")
        from_, to, indent, delimiter, contents = value
        if not (isinstance(from_, int) and isinstance(to, int)):
            raise ValueError(f"Doc block offsets must be integers, got {from_!r}, {to!r}")
        if not all(isinstance(v, str) for v in (indent, delimiter, contents)):
            raise ValueError(f"Doc block indent/delimiter/contents must be strings: {value!r}")
        return cls(from_, to, indent, delimiter, contents)


@dataclass
class EditableDocument:
    """Hydrated view text plus the doc block records that overlay it.

    Attributes:
        doc (str): Code text with doc block placeholders.
        doc_blocks (list[DocBlockRecord]): Records in document order.
    """

    doc: str
    doc_blocks: list[DocBlockRecord] = field(default_factory=list)

    def as_json(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping ``{"doc": ..., "doc_blocks": [...]}``."""
        return {"doc": self.doc, "doc_blocks": [r.as_json() for r in self.doc_blocks]}

    @classmethod
    def from_json(cls, value: Any) -> EditableDocument:
        """Parse the mapping produced by [`as_json`][docblocks.engine.editable.EditableDocument.as_json].

        Raises:
            ValueError: If ``value`` does not have the expected shape.
        """
        if not isinstance(value, dict) or not isinstance(value.get("doc"), str):
            raise ValueError("Expected a mapping with a string 'doc' entry")
        records: Any = value.get("doc_blocks", [])
        if not isinstance(records, list):
            raise ValueError("'doc_blocks' must be a list")
        return cls(doc=value["doc"], doc_blocks=[DocBlockRecord.from_json(r) for r in records])


def _placeholder(block: DocBlock) -> str:
    return "\n" * block.line_count


def _spans(model: BlockModel) -> dict[tuple[int, int], int]:
    """Map each doc block's ``(from, to)`` offsets in the hydrated view to its block index."""
    spans: dict[tuple[int, int], int] = {}
    offset: int = 0
    for index, block in enumerate(model.blocks):
        if isinstance(block, CodeBlock):
            offset += len(block.text)
            continue
        end: int = offset + block.line_count
        spans[(offset, end)] = index
        offset = end
    return spans


def to_editable(model: BlockModel) -> EditableDocument:
    """Build the hydrated view and doc block records for ``model``.

    Records carry the *current* contents, so pending edits are visible.
    """
    parts: list[str] = []
    records: list[DocBlockRecord] = []
    offset: int = 0
    for index, block in enumerate(model.blocks):
        if isinstance(block, CodeBlock):
            parts.append(block.text)
            offset += len(block.text)
            continue
        placeholder: str = _placeholder(block)
        records.append(
            DocBlockRecord(
                from_=offset,
                to=offset + len(placeholder),
                indent=block.indent,
                delimiter=block.style.tag,
                contents=model.contents_of(index),
            )
        )
        parts.append(placeholder)
        offset += len(placeholder)
    return EditableDocument(doc="".join(parts), doc_blocks=records)


def apply_edits(
    model: BlockModel,
    records: Iterable[DocBlockRecord],
    *,
    syntax: CommentSyntax | None = None,
) -> list[int]:
    """Apply edited records to ``model``.

    All records are matched against the model before any of them is applied,
    so a stale record leaves the model untouched.

    Args:
        model (BlockModel): Model the records were produced from.
        records (Iterable[DocBlockRecord]): Records returned by the editing surface.
        syntax (CommentSyntax | None): Syntax the model was classified with. When
            given, a changed delimiter tag is resolved against it so that tags
            this language does not define are reported as such.

    Returns:
        list[int]: Indices of the doc blocks whose contents now differ from the source.

    Raises:
        SpanMismatch: If a record's ``(from, to)`` does not designate a doc block
            of the current model (reload required).
    """
    spans: dict[tuple[int, int], int] = _spans(model)
    resolved: list[tuple[int, DocBlockRecord]] = []
    for record in records:
        index: int | None = spans.get((record.from_, record.to))
        if index is None:
            raise SpanMismatch(
                f"No doc block spans {record.from_}..{record.to} in the current document; "
                "reload required"
            )
        resolved.append((index, record))

    for index, record in resolved:
        block = model.blocks[index]
        assert not isinstance(block, CodeBlock)
        if record.delimiter != block.style.tag and syntax is not None and (
            syntax.style_for_tag(record.delimiter) is None
        ):
            logger.warning(
                "Doc block %d: %r is not a %s comment delimiter; keeping %r",
                index,
                record.delimiter,
                syntax.name,
                block.style.tag,
            )
        elif record.indent != block.indent or record.delimiter != block.style.tag:
            logger.warning(
                "Ignoring indent/delimiter change on doc block %d; only contents are editable",
                index,
            )
        model.set_contents(index, record.contents)
    return model.edited_indices()
