# topmark:header:start
#
#   project      : DocBlocks
#   file         : classifier.py
#   file_relpath : src/docblocks/engine/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classifier: split source text into code lines and doc lines.

A line is a *doc line* when a comment opening delimiter is its first
non-whitespace token and is immediately followed by one whitespace character
(a line terminator counts). Everything else is code. The classifier never
raises: malformed or unusual input only yields more code lines.

Rules, in order of precedence:

1. Candidate styles are tried block styles first, then inline styles; the
   longest opening delimiter wins within each kind.
2. The whitespace before the delimiter becomes the line's indent.
3. A block comment must be followed by nothing but whitespace after its
   closing delimiter; otherwise every line it spans is code.
4. A block comment still open at end of file is unterminated: its opening
   line and every remaining line are code.

The scan is a two-state machine (seeking, or inside a block comment) that
buffers the lines of an open block comment until its fate is known.

Example:
    >>> from docblocks.syntax import syntax
    >>> c = syntax("c", inline=["//"], block=[("/*", "*/")])
    >>> [line.kind.value for line in classify("// doc\\nint x;\\n", c)]
    ['doc', 'code']
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from docblocks.config.logging import DocblocksLogger, get_logger
from docblocks.engine.model import ClassifiedLine, LineKind, LinePosition
from docblocks.syntax.base import BlockStyle, InlineStyle

if TYPE_CHECKING:
    from docblocks.syntax.base import CommentSyntax

logger: DocblocksLogger = get_logger(__name__)

# A line is any run of non-terminator characters followed by one terminator, or
# the unterminated tail of the text.
_LINE_RE: Final[re.Pattern[str]] = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+")


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` into lines, keeping each line's own terminator.

    Only ``\n``, ``\r\n`` and ``\r`` terminate lines. ``"".join(split_lines(t)) == t``
    holds for every string.
    """
    return _LINE_RE.findall(text)


def split_terminator(line: str) -> tuple[str, str]:
    """Return ``(content, terminator)`` for a raw line."""
    content: str = line.rstrip("\r\n")
    return content, line[len(content) :]


def detect_newline(lines: list[str]) -> str:
    r"""Detect the newline sequence used by the provided lines.

    Returns the first terminator encountered (``"\r\n"``, ``"\n"``, or ``"\r"``),
    falling back to ``"\n"`` when no line is terminated.
    """
    for ln in lines:
        _content, terminator = split_terminator(ln)
        if terminator:
            return terminator
    return "\n"


def _leading_whitespace(content: str) -> str:
    return content[: len(content) - len(content.lstrip())]


def _strip_one_trailing_space(text: str) -> str:
    if text and text[-1].isspace():
        return text[:-1]
    return text


def _after_opening(rest: str, opening: str, terminated: bool) -> str | None:
    """Return the text after ``opening`` and its mandatory whitespace, or None.

    ``rest`` is the line content with the indent removed. A missing character
    after the delimiter is acceptable only when the line has a terminator.
    """
    if not rest.startswith(opening):
        return None
    after: str = rest[len(opening) :]
    if not after:
        return "" if terminated else None
    if not after[0].isspace():
        return None
    return after[1:]


@dataclass
class _OpenBlock:
    """State while inside a multi-line block comment."""

    style: BlockStyle
    indent: str
    lines: list[ClassifiedLine]


class LineClassifier:
    """Classify the lines of one document against one comment syntax.

    Instances are cheap and single-use; prefer the module-level
    [`classify`][docblocks.engine.classifier.classify] function.
    """

    def __init__(self, syntax: CommentSyntax) -> None:
        self.syntax: CommentSyntax = syntax
        self._out: list[ClassifiedLine] = []
        self._open: _OpenBlock | None = None

    def run(self, text: str) -> list[ClassifiedLine]:
        """Classify ``text`` and return one entry per line."""
        lines: list[str] = split_lines(text)
        if not self.syntax.has_styles:
            logger.debug("Language '%s' declares no comment styles", self.syntax.name)
            return [ClassifiedLine.code(i, line) for i, line in enumerate(lines)]

        for index, line in enumerate(lines):
            if self._open is None:
                self._seek(index, line)
            else:
                self._continue_block(index, line)

        if self._open is not None:
            logger.warning(
                "Unterminated '%s' comment opened at line %d; treating the rest of the "
                "file as code",
                self._open.style.opening,
                self._open.lines[0].index + 1,
            )
            self._flush_as_code()
        return self._out

    def _seek(self, index: int, line: str) -> None:
        content, terminator = split_terminator(line)
        indent: str = _leading_whitespace(content)
        rest: str = content[len(indent) :]
        if not rest:
            self._out.append(ClassifiedLine.code(index, line))
            return

        for style in self.syntax.candidates():
            body: str | None = _after_opening(rest, style.opening, bool(terminator))
            if body is None:
                continue
            if isinstance(style, InlineStyle):
                logger.trace("Line %d: inline '%s' doc line", index + 1, style.opening)
                self._out.append(
                    ClassifiedLine(
                        index=index,
                        text=line,
                        kind=LineKind.DOC,
                        indent=indent,
                        style=style,
                        body=body,
                        position=LinePosition.INLINE,
                    )
                )
                return
            if self._open_block(index, line, style, indent, body):
                return

        logger.trace("Line %d: code", index + 1)
        self._out.append(ClassifiedLine.code(index, line))

    def _open_block(
        self,
        index: int,
        line: str,
        style: BlockStyle,
        indent: str,
        body: str,
    ) -> bool:
        """Start (or complete) a block comment; return False if the style does not apply."""
        close_at: int = body.find(style.closing)
        if close_at < 0:
            self._open = _OpenBlock(
                style=style,
                indent=indent,
                lines=[
                    ClassifiedLine(
                        index=index,
                        text=line,
                        kind=LineKind.DOC,
                        indent=indent,
                        style=style,
                        body=body,
                        position=LinePosition.OPEN,
                    )
                ],
            )
            return True

        trailing: str = body[close_at + len(style.closing) :]
        if trailing.strip():
            logger.trace(
                "Line %d: '%s' comment followed by code; not a doc line",
                index + 1,
                style.opening,
            )
            return False

        logger.trace("Line %d: single-line '%s' doc line", index + 1, style.opening)
        self._out.append(
            ClassifiedLine(
                index=index,
                text=line,
                kind=LineKind.DOC,
                indent=indent,
                style=style,
                body=_strip_one_trailing_space(body[:close_at]),
                position=LinePosition.SINGLE,
            )
        )
        return True

    def _continue_block(self, index: int, line: str) -> None:
        assert self._open is not None
        block: _OpenBlock = self._open
        content, _terminator = split_terminator(line)
        close_at: int = content.find(block.style.closing)

        inner: str = content if close_at < 0 else content[:close_at]
        if block.indent and inner.startswith(block.indent):
            inner = inner[len(block.indent) :]

        if close_at < 0:
            block.lines.append(
                ClassifiedLine(
                    index=index,
                    text=line,
                    kind=LineKind.DOC,
                    indent=block.indent,
                    style=block.style,
                    body=inner,
                    position=LinePosition.CONTINUE,
                )
            )
            return

        block.lines.append(
            ClassifiedLine(
                index=index,
                text=line,
                kind=LineKind.DOC,
                indent=block.indent,
                style=block.style,
                body=_strip_one_trailing_space(inner),
                position=LinePosition.CLOSE,
            )
        )
        trailing: str = content[close_at + len(block.style.closing) :]
        if trailing.strip():
            logger.trace(
                "Lines %d-%d: '%s' comment followed by code; not doc lines",
                block.lines[0].index + 1,
                index + 1,
                block.style.opening,
            )
            self._flush_as_code()
            return

        self._out.extend(block.lines)
        self._open = None

    def _flush_as_code(self) -> None:
        assert self._open is not None
        self._out.extend(ClassifiedLine.code(cl.index, cl.text) for cl in self._open.lines)
        self._open = None


def classify(text: str, syntax: CommentSyntax) -> list[ClassifiedLine]:
    """Classify every line of ``text`` as code or documentation.

    Args:
        text (str): Source text (line terminators preserved as found).
        syntax (CommentSyntax): Comment syntax of the document's language.

    Returns:
        list[ClassifiedLine]: One entry per line, in source order.
    """
    return LineClassifier(syntax).run(text)
