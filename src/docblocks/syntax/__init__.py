# topmark:header:start
#
#   project      : DocBlocks
#   file         : __init__.py
#   file_relpath : src/docblocks/syntax/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment syntax definitions and the process-wide registry."""

from __future__ import annotations

from docblocks.syntax.base import (
    BlockStyle,
    CommentStyle,
    CommentSyntax,
    InlineStyle,
    StyleKind,
    syntax,
)
from docblocks.syntax.registry import CommentSyntaxRegistry, get_default_registry

__all__ = [
    "BlockStyle",
    "CommentStyle",
    "CommentSyntax",
    "CommentSyntaxRegistry",
    "InlineStyle",
    "StyleKind",
    "get_default_registry",
    "syntax",
]
