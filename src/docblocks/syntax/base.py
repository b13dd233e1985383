# topmark:header:start
#
#   project      : DocBlocks
#   file         : base.py
#   file_relpath : src/docblocks/syntax/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment syntax definitions.

Defines the value types describing how one language writes comments:

* [`InlineStyle`][docblocks.syntax.base.InlineStyle]: a single opening token
  terminated by the end of the line (``//``, ``#``, ``--``).
* [`BlockStyle`][docblocks.syntax.base.BlockStyle]: an opening and a closing
  token that may span several lines (``/* ... */``, ``<!-- ... -->``).
* [`CommentSyntax`][docblocks.syntax.base.CommentSyntax]: the set of styles a
  language declares, together with the file name rules used to recognize it.

All types are frozen: a syntax table is built once and shared read-only by
every classification call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class StyleKind(Enum):
    """Kind of a comment style."""

    INLINE = "inline"
    BLOCK = "block"


@dataclass(frozen=True)
class InlineStyle:
    """Comment style whose opening delimiter runs to the end of the line."""

    opening: str

    @property
    def kind(self) -> StyleKind:
        """Return ``StyleKind.INLINE``."""
        return StyleKind.INLINE

    @property
    def tag(self) -> str:
        """Opaque identifier of this style (its opening delimiter)."""
        return self.opening


@dataclass(frozen=True)
class BlockStyle:
    """Comment style delimited by an opening and a closing token."""

    opening: str
    closing: str

    @property
    def kind(self) -> StyleKind:
        """Return ``StyleKind.BLOCK``."""
        return StyleKind.BLOCK

    @property
    def tag(self) -> str:
        """Opaque identifier of this style (its opening delimiter)."""
        return self.opening


CommentStyle = InlineStyle | BlockStyle


@dataclass(frozen=True)
class CommentSyntax:
    """Comment delimiters declared by one language.

    Attributes:
        name (str): Language identifier (e.g. ``"python"``).
        inline (tuple[InlineStyle, ...]): Inline comment styles, possibly empty.
        block (tuple[BlockStyle, ...]): Block comment styles, possibly empty.
        extensions (tuple[str, ...]): File name extensions, including the leading dot.
        filenames (tuple[str, ...]): Exact base names (e.g. ``"Makefile"``).
        description (str): Human-readable description.
    """

    name: str
    inline: tuple[InlineStyle, ...] = ()
    block: tuple[BlockStyle, ...] = ()
    extensions: tuple[str, ...] = ()
    filenames: tuple[str, ...] = ()
    description: str = ""

    _candidates: tuple[CommentStyle, ...] = field(
        default=(), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # Block styles first; inside each kind the longest delimiter wins so that
        # a short delimiter never shadows a longer one sharing its prefix.
        ordered: tuple[CommentStyle, ...] = (
            *sorted(self.block, key=lambda s: -len(s.opening)),
            *sorted(self.inline, key=lambda s: -len(s.opening)),
        )
        object.__setattr__(self, "_candidates", ordered)

    @property
    def has_styles(self) -> bool:
        """Return True if the language declares at least one comment style."""
        return bool(self.inline or self.block)

    def candidates(self) -> tuple[CommentStyle, ...]:
        """Return all styles in match precedence order."""
        return self._candidates

    def style_for_tag(self, tag: str) -> CommentStyle | None:
        """Resolve an opaque delimiter tag back to one of this language's styles.

        Args:
            tag (str): Tag previously obtained from ``style.tag``.

        Returns:
            CommentStyle | None: The matching style, or None when the tag is unknown.
        """
        for style in self._candidates:
            if style.tag == tag:
                return style
        return None

    def preferred_inline(self) -> InlineStyle | None:
        """Return the inline style used when block re-synthesis must fall back.

        The longest inline delimiter is preferred, matching match precedence.
        """
        for style in self._candidates:
            if isinstance(style, InlineStyle):
                return style
        return None

    def matches(self, path: Path) -> bool:
        """Return True if ``path`` belongs to this language by name or extension."""
        if self.filenames and path.name in self.filenames:
            return True
        return bool(self.extensions) and path.suffix.lower() in self.extensions


def syntax(
    name: str,
    *,
    inline: tuple[str, ...] | list[str] = (),
    block: tuple[tuple[str, str], ...] | list[tuple[str, str]] = (),
    extensions: tuple[str, ...] | list[str] = (),
    filenames: tuple[str, ...] | list[str] = (),
    description: str = "",
) -> CommentSyntax:
    """Build a [`CommentSyntax`][docblocks.syntax.base.CommentSyntax] from plain delimiters.

    Convenience constructor used by the builtin tables and the configuration
    loader, which both describe styles as bare strings.

    Args:
        name (str): Language identifier.
        inline (tuple[str, ...] | list[str]): Inline opening delimiters.
        block (tuple[tuple[str, str], ...] | list[tuple[str, str]]): ``(open, close)`` pairs.
        extensions (tuple[str, ...] | list[str]): File extensions (leading dot).
        filenames (tuple[str, ...] | list[str]): Exact file names.
        description (str): Human-readable description.

    Returns:
        CommentSyntax: The frozen syntax definition.
    """
    return CommentSyntax(
        name=name,
        inline=tuple(InlineStyle(opening) for opening in inline),
        block=tuple(BlockStyle(opening, closing) for opening, closing in block),
        extensions=tuple(ext.lower() for ext in extensions),
        filenames=tuple(filenames),
        description=description,
    )
