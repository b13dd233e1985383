# topmark:header:start
#
#   project      : DocBlocks
#   file         : registry.py
#   file_relpath : src/docblocks/syntax/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment syntax registry for DocBlocks.

Builds the process-wide table of [`CommentSyntax`][docblocks.syntax.base.CommentSyntax]
objects from the built-in groups and, optionally, from plugin entry points.
The default registry is constructed lazily on first access and cached.

Notes:
    * The registry is an immutable ``Mapping``: there is no way to add,
      replace, or delete an entry once it is built. Configuration overlays
      produce a *new* registry via
      [`CommentSyntaxRegistry.overlay`][docblocks.syntax.registry.CommentSyntaxRegistry.overlay].
    * Plugins are discovered via the ``docblocks.syntaxes`` entry point group.
      Each entry point must resolve to an iterable of ``CommentSyntax`` (or a
      callable returning one).
"""

from __future__ import annotations

from collections.abc import Iterable as IterABC
from collections.abc import Mapping
from functools import lru_cache
from importlib import import_module
from importlib.metadata import EntryPoints, entry_points
from typing import TYPE_CHECKING, Any, Final, cast

from docblocks.config.logging import DocblocksLogger, get_logger
from docblocks.engine.errors import UnknownLanguage
from docblocks.syntax.base import CommentSyntax

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence
    from pathlib import Path
    from types import ModuleType

logger: DocblocksLogger = get_logger(__name__)

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "docblocks.syntax.builtins.core_langs",
    "docblocks.syntax.builtins.scripting",
    "docblocks.syntax.builtins.web",
    "docblocks.syntax.builtins.data",
)

ENTRYPOINT_GROUP: Final[str] = "docblocks.syntaxes"


class CommentSyntaxRegistry(Mapping[str, CommentSyntax]):
    """Read-only mapping of language identifiers to comment syntaxes.

    Iteration order follows registration order, which is also the order used
    by [`resolve_path`][docblocks.syntax.registry.CommentSyntaxRegistry.resolve_path]
    when several languages claim the same extension.
    """

    __slots__ = ("_entries",)

    def __init__(self, syntaxes: Iterable[CommentSyntax] = ()) -> None:
        entries: dict[str, CommentSyntax] = {}
        for item in syntaxes:
            if item.name in entries:
                logger.warning("Duplicate comment syntax detected: %s (keeping first)", item.name)
                continue
            entries[item.name] = item
        self._entries: dict[str, CommentSyntax] = entries

    def __getitem__(self, key: str) -> CommentSyntax:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CommentSyntaxRegistry({len(self._entries)} languages)"

    def lookup(self, language: str) -> CommentSyntax:
        """Return the syntax for ``language``.

        Raises:
            UnknownLanguage: If no syntax is registered under that identifier.
        """
        try:
            return self._entries[language]
        except KeyError:
            raise UnknownLanguage(language) from None

    def resolve_path(self, path: Path) -> CommentSyntax | None:
        """Return the first syntax whose name rules match ``path``, if any."""
        for item in self._entries.values():
            if item.matches(path):
                logger.debug("Language '%s' detected for file: %s", item.name, path)
                return item
        logger.info("File '%s' cannot be resolved to a registered language", path)
        return None

    def overlay(self, syntaxes: Sequence[CommentSyntax]) -> CommentSyntaxRegistry:
        """Return a new registry where ``syntaxes`` replace or extend the current entries.

        Overlaid languages take precedence over existing ones, both for lookup by
        identifier and for path resolution.
        """
        names: set[str] = {s.name for s in syntaxes}
        kept: list[CommentSyntax] = [s for s in self._entries.values() if s.name not in names]
        return CommentSyntaxRegistry([*syntaxes, *kept])


def _iter_builtin_syntaxes() -> Iterable[CommentSyntax]:
    """Yield built-in CommentSyntax objects from the topical modules."""
    for modname in _BUILTIN_MODULES:
        mod: ModuleType = import_module(modname)
        syntaxes: Any = getattr(mod, "SYNTAXES", None)
        if not isinstance(syntaxes, list):
            logger.warning("Module %s has no SYNTAXES list; skipping", modname)
            continue
        for obj in cast("Sequence[object]", syntaxes):
            if isinstance(obj, CommentSyntax):
                yield obj
            else:
                logger.warning("Non-CommentSyntax entry in %s.SYNTAXES: %r", modname, obj)


def _iter_plugin_syntaxes() -> Iterable[CommentSyntax]:
    """Yield CommentSyntax objects provided by external plugins (entry points)."""
    candidates: EntryPoints = entry_points().select(group=ENTRYPOINT_GROUP)

    for ep in candidates:
        try:
            provider: Any = ep.load()
            provided: Any = provider() if callable(provider) else provider
        except Exception:
            logger.exception("Failed loading comment syntaxes from entry point %s", ep.name)
            continue
        if not isinstance(provided, IterABC):
            logger.warning(
                "Entry point %s did not return an iterable of CommentSyntax objects: %r",
                ep.name,
                provided,
            )
            continue
        for obj in cast("IterABC[object]", provided):
            if isinstance(obj, CommentSyntax):
                yield obj
            else:
                logger.warning("Entry point %s provided non-CommentSyntax: %r", ep.name, obj)


@lru_cache(maxsize=1)
def get_default_registry() -> CommentSyntaxRegistry:
    """Return (and cache) the registry of built-in and plugin comment syntaxes."""
    ordered: list[CommentSyntax] = list(_iter_builtin_syntaxes())
    ordered.extend(_iter_plugin_syntaxes())
    registry = CommentSyntaxRegistry(ordered)
    logger.debug("Loaded %d comment syntaxes", len(registry))
    return registry
