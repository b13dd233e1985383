# topmark:header:start
#
#   project      : DocBlocks
#   file         : web.py
#   file_relpath : src/docblocks/syntax/builtins/web.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Web and markup languages.

Exports:
    SYNTAXES (list[CommentSyntax]): Definitions for CSS (and preprocessors),
        HTML, JavaScript, TypeScript, and XML.
"""

from __future__ import annotations

from docblocks.syntax.base import CommentSyntax, syntax

_XML_BLOCK: tuple[tuple[str, str], ...] = (("<!--", "-->"),)

SYNTAXES: list[CommentSyntax] = [
    syntax(
        "css",
        block=[("/*", "*/")],
        extensions=[".css"],
        description="Cascading Style Sheets (*.css)",
    ),
    syntax(
        "scss",
        inline=["//"],
        block=[("/*", "*/")],
        extensions=[".scss", ".less"],
        description="SCSS and Less style sheets (*.scss, *.less)",
    ),
    syntax(
        "html",
        block=_XML_BLOCK,
        extensions=[".html", ".htm", ".xhtml"],
        description="HTML documents (*.html, *.htm, *.xhtml)",
    ),
    syntax(
        "javascript",
        inline=["//"],
        block=[("/*", "*/")],
        extensions=[".js", ".mjs", ".cjs", ".jsx"],
        description="JavaScript sources (*.js, *.mjs, *.cjs, *.jsx)",
    ),
    syntax(
        "typescript",
        inline=["//"],
        block=[("/*", "*/")],
        extensions=[".ts", ".tsx", ".mts", ".cts"],
        description="TypeScript sources (*.ts, *.tsx, *.mts, *.cts)",
    ),
    syntax(
        "xml",
        block=_XML_BLOCK,
        extensions=[".xml", ".svg", ".xsl", ".xslt"],
        description="XML documents (*.xml, *.svg, *.xsl, *.xslt)",
    ),
]
