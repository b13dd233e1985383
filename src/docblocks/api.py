# topmark:header:start
#
#   project      : DocBlocks
#   file         : api.py
#   file_relpath : src/docblocks/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API: load a source file, edit its doc blocks, and save it back.

This module wires the engine to its collaborators:

* a [`SourceLoader`][docblocks.api.SourceLoader] supplying decoded text and a
  language id for a path,
* a [`Persister`][docblocks.api.Persister] accepting reconstructed bytes.

A [`DocumentSession`][docblocks.api.DocumentSession] owns exactly one
[`BlockModel`][docblocks.engine.model.BlockModel] for one load/save cycle.
Sessions share nothing but the read-only comment syntax registry, so any
number of them may run in parallel.

Example:
    ```python
    from pathlib import Path
    from docblocks.api import DocumentSession

    session = DocumentSession.open(Path("main.c"))
    doc = session.editable()
    first = doc.doc_blocks[0]
    session.apply([first._replace(contents="Updated text.")])
    session.save()
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from docblocks.config import Config
from docblocks.config.logging import DocblocksLogger, get_logger
from docblocks.engine.classifier import classify, detect_newline, split_lines
from docblocks.engine.codec import decode_source
from docblocks.engine.editable import apply_edits, to_editable
from docblocks.engine.errors import UnknownLanguage
from docblocks.engine.grouper import group
from docblocks.engine.reconstructor import reconstruct, reconstruct_bytes
from docblocks.syntax.base import CommentSyntax
from docblocks.syntax.registry import CommentSyntaxRegistry, get_default_registry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docblocks.engine.editable import DocBlockRecord, EditableDocument
    from docblocks.engine.model import BlockModel

logger: DocblocksLogger = get_logger(__name__)


def build_registry(config: Config | None = None) -> CommentSyntaxRegistry:
    """Return the registry for ``config``: built-ins overlaid with configured languages."""
    base: CommentSyntaxRegistry = get_default_registry()
    if config is None or not config.languages:
        return base
    return base.overlay(config.languages)


def resolve_syntax(
    language: str | None,
    registry: CommentSyntaxRegistry | None = None,
) -> CommentSyntax:
    """Return the syntax for ``language``, degrading to a style-less syntax.

    An unknown (or missing) language is not fatal: the returned syntax declares
    no comment styles, so every line classifies as code.
    """
    registry = registry if registry is not None else get_default_registry()
    if language is None:
        logger.warning("No language given; every line is treated as code")
        return CommentSyntax(name="")
    try:
        return registry.lookup(language)
    except UnknownLanguage as exc:
        logger.warning("%s; every line is treated as code", exc)
        return CommentSyntax(name=language)


def load_model(
    text: str,
    language: str | None,
    *,
    registry: CommentSyntaxRegistry | None = None,
) -> BlockModel:
    """Classify and group ``text`` into a fresh block model.

    Args:
        text (str): Decoded source text.
        language (str | None): Language identifier; unknown ids yield an all-code model.
        registry (CommentSyntaxRegistry | None): Registry to resolve ``language`` in
            (default: the built-in registry).

    Returns:
        BlockModel: Model with no pending edits.
    """
    syntax: CommentSyntax = resolve_syntax(language, registry)
    lines = classify(text, syntax)
    return group(lines, newline=detect_newline(split_lines(text)), language=language)


def roundtrip_ok(
    text: str,
    language: str | None,
    *,
    registry: CommentSyntaxRegistry | None = None,
) -> bool:
    """Return True if an unedited model of ``text`` reconstructs to ``text``."""
    return reconstruct(load_model(text, language, registry=registry)) == text


@dataclass(frozen=True)
class SourceDocument:
    """A decoded source file.

    Attributes:
        path (Path): Location the document was read from.
        text (str): Decoded text, without BOM.
        language (str | None): Language identifier, or None if unresolved.
        leading_bom (bool): Whether the raw bytes started with a UTF-8 BOM.
    """

    path: Path
    text: str
    language: str | None
    leading_bom: bool = False


@runtime_checkable
class SourceLoader(Protocol):
    """Supplies the text and language of a source path."""

    def load(self, path: Path, *, language: str | None = None) -> SourceDocument:
        """Return the decoded document at ``path``."""
        ...


@runtime_checkable
class Persister(Protocol):
    """Accepts reconstructed bytes for a source path."""

    def write(self, path: Path, data: bytes) -> None:
        """Persist ``data`` at ``path``."""
        ...


class FileSourceLoader:
    """Load source documents from the local filesystem.

    Args:
        registry (CommentSyntaxRegistry | None): Registry used to resolve a path's
            language when none is given explicitly.
    """

    def __init__(self, registry: CommentSyntaxRegistry | None = None) -> None:
        self.registry: CommentSyntaxRegistry = (
            registry if registry is not None else get_default_registry()
        )

    def load(self, path: Path, *, language: str | None = None) -> SourceDocument:
        """Read and decode ``path``.

        Raises:
            OSError: If the file cannot be read.
        """
        data: bytes = path.read_bytes()
        text, bom = decode_source(data)
        if language is None:
            resolved: CommentSyntax | None = self.registry.resolve_path(path)
            language = resolved.name if resolved is not None else None
        logger.debug("Loaded %s (%d bytes, language=%s, bom=%s)", path, len(data), language, bom)
        return SourceDocument(path=path, text=text, language=language, leading_bom=bom)


class FilePersister:
    """Write reconstructed bytes to the local filesystem."""

    def write(self, path: Path, data: bytes) -> None:
        """Write ``data`` to ``path``, replacing its contents.

        Raises:
            OSError: If the file cannot be written.
        """
        path.write_bytes(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)


class DocumentSession:
    """One load/edit/save cycle of one document.

    Args:
        document (SourceDocument): The loaded source.
        registry (CommentSyntaxRegistry | None): Registry used for classification.
        config (Config | None): Runtime configuration (default: built-in defaults).
        persister (Persister | None): Destination for :meth:`save` (default: filesystem).
    """

    def __init__(
        self,
        document: SourceDocument,
        *,
        registry: CommentSyntaxRegistry | None = None,
        config: Config | None = None,
        persister: Persister | None = None,
    ) -> None:
        self.config: Config = config if config is not None else Config.from_defaults()
        self.registry: CommentSyntaxRegistry = (
            registry if registry is not None else build_registry(self.config)
        )
        self.document: SourceDocument = document
        self.persister: Persister = persister if persister is not None else FilePersister()
        self.syntax: CommentSyntax = resolve_syntax(document.language, self.registry)
        self.model: BlockModel = group(
            classify(document.text, self.syntax),
            newline=detect_newline(split_lines(document.text)),
            language=document.language,
        )

    @classmethod
    def open(
        cls,
        path: Path,
        *,
        language: str | None = None,
        config: Config | None = None,
        loader: SourceLoader | None = None,
        persister: Persister | None = None,
    ) -> DocumentSession:
        """Load ``path`` and classify it.

        Args:
            path (Path): Source file.
            language (str | None): Explicit language id (default: resolved from the path).
            config (Config | None): Runtime configuration.
            loader (SourceLoader | None): Source loader (default: filesystem).
            persister (Persister | None): Persister used by :meth:`save`.

        Returns:
            DocumentSession: A session with a fresh block model.
        """
        config = config if config is not None else Config.from_defaults()
        registry: CommentSyntaxRegistry = build_registry(config)
        loader = loader if loader is not None else FileSourceLoader(registry)
        document: SourceDocument = loader.load(path, language=language)
        return cls(document, registry=registry, config=config, persister=persister)

    @property
    def is_dirty(self) -> bool:
        """Return True if any doc block has been edited."""
        return self.model.is_dirty

    def editable(self) -> EditableDocument:
        """Return the hydrated view and doc block records for the editing surface."""
        return to_editable(self.model)

    def apply(self, records: Iterable[DocBlockRecord]) -> list[int]:
        """Apply records returned by the editing surface; see [`apply_edits`][docblocks.engine.editable.apply_edits]."""
        return apply_edits(self.model, records, syntax=self.syntax)

    def render(self) -> str:
        """Return the reconstructed source text (BOM excluded)."""
        return reconstruct(
            self.model,
            syntax=self.syntax,
            fallback_to_inline=self.config.fallback_to_inline,
        )

    def render_bytes(self) -> bytes:
        """Return the reconstructed source bytes, BOM restored."""
        return reconstruct_bytes(
            self.model,
            leading_bom=self.document.leading_bom,
            syntax=self.syntax,
            fallback_to_inline=self.config.fallback_to_inline,
        )

    def save(self) -> bytes:
        """Reconstruct the document and hand it to the persister.

        Nothing is written when reconstruction fails.

        Returns:
            bytes: The bytes that were persisted.

        Raises:
            DelimiterCollision: If an edited doc block cannot be wrapped safely.
            SpanMismatch: If the model is internally inconsistent.
        """
        data: bytes = self.render_bytes()
        self.persister.write(self.document.path, data)
        logger.info("Saved %s (%d doc blocks edited)", self.document.path, len(self.model.edited_indices()))
        return data
