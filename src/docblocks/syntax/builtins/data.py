# topmark:header:start
#
#   project      : DocBlocks
#   file         : data.py
#   file_relpath : src/docblocks/syntax/builtins/data.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data, configuration, and operations formats.

Exports:
    SYNTAXES (list[CommentSyntax]): Definitions for Dockerfile, INI, JSON,
        SQL, TOML, YAML, and plain text.

Notes:
    JSON and plain text declare no comment styles: they are recognized, but
    every line classifies as code.
"""

from __future__ import annotations

from docblocks.syntax.base import CommentSyntax, syntax

SYNTAXES: list[CommentSyntax] = [
    syntax(
        "dockerfile",
        inline=["#"],
        filenames=["Dockerfile", "Containerfile"],
        description="Container build files (Dockerfile)",
    ),
    syntax(
        "ini",
        inline=[";", "#"],
        extensions=[".ini", ".cfg"],
        filenames=[".editorconfig"],
        description="INI-style configuration files (*.ini, *.cfg)",
    ),
    syntax(
        "json",
        extensions=[".json"],
        description="JSON documents (*.json), no comments",
    ),
    syntax(
        "sql",
        inline=["--"],
        block=[("/*", "*/")],
        extensions=[".sql"],
        description="SQL scripts (*.sql)",
    ),
    syntax(
        "text",
        extensions=[".txt"],
        description="Plain text (*.txt), no comments",
    ),
    syntax(
        "toml",
        inline=["#"],
        extensions=[".toml"],
        description="TOML configuration files (*.toml)",
    ),
    syntax(
        "yaml",
        inline=["#"],
        extensions=[".yaml", ".yml"],
        description="YAML configuration files (*.yaml, *.yml)",
    ),
]
