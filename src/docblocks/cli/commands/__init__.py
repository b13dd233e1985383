# topmark:header:start
#
#   project      : DocBlocks
#   file         : __init__.py
#   file_relpath : src/docblocks/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocBlocks CLI subcommands."""

from __future__ import annotations
