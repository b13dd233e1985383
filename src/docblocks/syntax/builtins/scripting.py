# topmark:header:start
#
#   project      : DocBlocks
#   file         : scripting.py
#   file_relpath : src/docblocks/syntax/builtins/scripting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scripting and interpreter-driven languages.

Exports:
    SYNTAXES (list[CommentSyntax]): Definitions for Lua, Makefile, MATLAB,
        Perl, Python (and stubs), R, Ruby, and POSIX shell scripts.

Notes:
    Python docstrings are string literals, not comments; only ``#`` lines
    are doc block candidates.
"""

from __future__ import annotations

from docblocks.syntax.base import CommentSyntax, syntax

SYNTAXES: list[CommentSyntax] = [
    syntax(
        "lua",
        inline=["--"],
        block=[("--[[", "]]")],
        extensions=[".lua"],
        description="Lua scripts (*.lua)",
    ),
    syntax(
        "makefile",
        inline=["#"],
        filenames=["Makefile", "makefile", "GNUmakefile"],
        description="Make build scripts (Makefile)",
    ),
    syntax(
        "matlab",
        inline=["%"],
        block=[("%{", "%}")],
        extensions=[".m"],
        description="MATLAB / Octave scripts (*.m)",
    ),
    syntax(
        "perl",
        inline=["#"],
        extensions=[".pl", ".pm"],
        description="Perl scripts/modules (*.pl, *.pm)",
    ),
    syntax(
        "python",
        inline=["#"],
        extensions=[".py", ".pyi"],
        description="Python sources and stubs (*.py, *.pyi)",
    ),
    syntax(
        "r",
        inline=["#"],
        extensions=[".r"],
        description="R scripts (*.R, *.r)",
    ),
    syntax(
        "ruby",
        inline=["#"],
        block=[("=begin", "=end")],
        extensions=[".rb"],
        description="Ruby scripts (*.rb)",
    ),
    syntax(
        "shell",
        inline=["#"],
        extensions=[".sh", ".bash", ".zsh"],
        description="POSIX/Bash/Zsh shell scripts (*.sh, *.bash, *.zsh)",
    ),
]
