# topmark:header:start
#
#   project      : DocBlocks
#   file         : __init__.py
#   file_relpath : src/docblocks/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocBlocks configuration.

Configuration is built in a mutable form ([`MutableConfig`][docblocks.config.MutableConfig])
while sources are merged, then frozen into an immutable
[`Config`][docblocks.config.Config] that is passed to the engine.

Sources, lowest precedence first:

1. Built-in defaults ([`MutableConfig.from_defaults`][docblocks.config.MutableConfig.from_defaults]).
2. ``[tool.docblocks]`` in ``pyproject.toml`` or a ``docblocks.toml`` file
   found in the working directory, or an explicit ``--config`` path.
3. CLI overrides applied by the command layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from docblocks.syntax.base import CommentSyntax


class ConfigError(ValueError):
    """A configuration source has an invalid shape or value."""


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        fallback_to_inline (bool): Write edited block-comment doc blocks with the
            language's inline style when their contents contain the closing delimiter.
        languages (tuple[CommentSyntax, ...]): User-defined languages overlaid on
            the built-in registry (they win over built-ins with the same id).
        config_files (tuple[Path, ...]): Files the configuration was read from.
    """

    fallback_to_inline: bool = False
    languages: tuple[CommentSyntax, ...] = ()
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            fallback_to_inline=self.fallback_to_inline,
            languages=list(self.languages),
            config_files=list(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the frozen built-in defaults."""
        return MutableConfig.from_defaults().freeze()


@dataclass
class MutableConfig:
    """Mutable configuration builder; see [`Config`][docblocks.config.Config] for fields."""

    fallback_to_inline: bool = False
    languages: list[CommentSyntax] = field(default_factory=list)
    config_files: list[Path] = field(default_factory=list)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls()

    def freeze(self) -> Config:
        """Return an immutable snapshot of this builder."""
        return Config(
            fallback_to_inline=self.fallback_to_inline,
            languages=tuple(self.languages),
            config_files=tuple(self.config_files),
        )


__all__ = ["Config", "ConfigError", "MutableConfig"]
