# topmark:header:start
#
#   project      : DocBlocks
#   file         : constants.py
#   file_relpath : src/docblocks/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocBlocks constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DOCBLOCKS_VERSION: str = get_version("docblocks")
