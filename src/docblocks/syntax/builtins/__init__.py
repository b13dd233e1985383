# topmark:header:start
#
#   project      : DocBlocks
#   file         : __init__.py
#   file_relpath : src/docblocks/syntax/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in comment syntax groups for DocBlocks.

Each submodule exports a ``SYNTAXES`` list of
[`docblocks.syntax.base.CommentSyntax`][] instances. The aggregator in
``docblocks.syntax.registry`` concatenates these lists to build the default
registry.
"""

from __future__ import annotations
