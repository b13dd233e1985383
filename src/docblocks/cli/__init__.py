# topmark:header:start
#
#   project      : DocBlocks
#   file         : __init__.py
#   file_relpath : src/docblocks/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for DocBlocks."""

from __future__ import annotations
