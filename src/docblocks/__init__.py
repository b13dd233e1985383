# topmark:header:start
#
#   project      : DocBlocks
#   file         : __init__.py
#   file_relpath : src/docblocks/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocBlocks package.

DocBlocks partitions source files into code blocks and doc blocks using each
language's comment syntax, exposes the doc blocks as editable text, and writes
the result back as ordinary source: byte-identical when nothing changed.
"""

from __future__ import annotations
