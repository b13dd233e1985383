# topmark:header:start
#
#   project      : DocBlocks
#   file         : __init__.py
#   file_relpath : src/docblocks/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Doc block engine: classify, group, edit, and reconstruct source documents.

Data flows in one direction per load/save cycle::

    text -> classify() -> group() -> BlockModel -> (edits) -> reconstruct() -> text
"""

from __future__ import annotations

from docblocks.engine.classifier import classify, detect_newline, split_lines
from docblocks.engine.editable import DocBlockRecord, EditableDocument, apply_edits, to_editable
from docblocks.engine.errors import (
    DelimiterCollision,
    DocblocksError,
    SpanMismatch,
    UnknownLanguage,
)
from docblocks.engine.grouper import group
from docblocks.engine.model import (
    Block,
    BlockModel,
    ClassifiedLine,
    CodeBlock,
    DocBlock,
    LineKind,
    LinePosition,
)
from docblocks.engine.reconstructor import reconstruct, reconstruct_bytes

__all__ = [
    "Block",
    "BlockModel",
    "ClassifiedLine",
    "CodeBlock",
    "DelimiterCollision",
    "DocBlock",
    "DocBlockRecord",
    "DocblocksError",
    "EditableDocument",
    "LineKind",
    "LinePosition",
    "SpanMismatch",
    "UnknownLanguage",
    "apply_edits",
    "classify",
    "detect_newline",
    "group",
    "reconstruct",
    "reconstruct_bytes",
    "split_lines",
    "to_editable",
]
