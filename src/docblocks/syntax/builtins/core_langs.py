# topmark:header:start
#
#   project      : DocBlocks
#   file         : core_langs.py
#   file_relpath : src/docblocks/syntax/builtins/core_langs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, curly-brace, and compiled languages.

Groups C-family and similar languages that use ``//`` line comments and
``/* ... */`` block comments.

Exports:
    SYNTAXES (list[CommentSyntax]): Definitions for C, C++, C#, Go, Java,
        Kotlin, Rust, Swift, and Verilog.
"""

from __future__ import annotations

from docblocks.syntax.base import CommentSyntax, syntax

_C_INLINE: tuple[str, ...] = ("//",)
_C_BLOCK: tuple[tuple[str, str], ...] = (("/*", "*/"),)

SYNTAXES: list[CommentSyntax] = [
    syntax(
        "c",
        inline=_C_INLINE,
        block=_C_BLOCK,
        extensions=[".c", ".h"],
        description="C sources and headers (*.c, *.h)",
    ),
    syntax(
        "cpp",
        inline=_C_INLINE,
        block=_C_BLOCK,
        extensions=[".cc", ".cxx", ".cpp", ".hh", ".hpp", ".hxx"],
        description="C++ sources and headers (*.cc, *.cxx, *.cpp, *.hh, *.hpp, *.hxx)",
    ),
    syntax(
        "cs",
        inline=_C_INLINE,
        block=_C_BLOCK,
        extensions=[".cs"],
        description="C# sources (*.cs)",
    ),
    syntax(
        "go",
        inline=_C_INLINE,
        block=_C_BLOCK,
        extensions=[".go"],
        description="Go sources (*.go)",
    ),
    syntax(
        "java",
        inline=_C_INLINE,
        block=_C_BLOCK,
        extensions=[".java"],
        description="Java sources (*.java)",
    ),
    syntax(
        "kotlin",
        inline=_C_INLINE,
        block=_C_BLOCK,
        extensions=[".kt", ".kts"],
        description="Kotlin sources (*.kt, *.kts)",
    ),
    syntax(
        "rust",
        inline=_C_INLINE,
        block=_C_BLOCK,
        extensions=[".rs"],
        description="Rust sources (*.rs)",
    ),
    syntax(
        "swift",
        inline=_C_INLINE,
        block=_C_BLOCK,
        extensions=[".swift"],
        description="Swift sources (*.swift)",
    ),
    syntax(
        "verilog",
        inline=_C_INLINE,
        block=_C_BLOCK,
        extensions=[".v", ".sv", ".svh"],
        description="Verilog / SystemVerilog sources (*.v, *.sv, *.svh)",
    ),
]
