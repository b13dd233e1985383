# topmark:header:start
#
#   project      : DocBlocks
#   file         : errors.py
#   file_relpath : src/docblocks/engine/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the doc block engine.

All errors are recoverable at the session level: none of them leave a
[`BlockModel`][docblocks.engine.model.BlockModel] of another document in an
inconsistent state. Malformed *input* never raises here; it degrades to a
coarser classification (more code, less documentation) instead.
"""

from __future__ import annotations


class DocblocksError(Exception):
    """Base class for all DocBlocks engine errors."""


class UnknownLanguage(DocblocksError):
    """No comment syntax is registered for the requested language.

    Callers that load documents treat this as a degradation (every line is
    code) rather than a failure.
    """

    def __init__(self, language: str) -> None:
        super().__init__(f"No comment syntax registered for language '{language}'")
        self.language = language


class DelimiterCollision(DocblocksError):
    """Edited doc block contents cannot be re-wrapped in their block comment style.

    Raised when the contents contain the closing delimiter of the block style
    chosen for re-synthesis; emitting them would produce ambiguous source.
    """

    def __init__(self, block_index: int, delimiter: str) -> None:
        super().__init__(
            f"Doc block {block_index} contains the closing delimiter '{delimiter}' "
            "and cannot be written as a block comment"
        )
        self.block_index = block_index
        self.delimiter = delimiter


class SpanMismatch(DocblocksError):
    """A block span no longer matches the current block model.

    Typically caused by a stale editable record after the document was
    re-classified. The condition is retryable: reload the document and
    re-apply the edit.
    """

    retryable: bool = True
