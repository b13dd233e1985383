# topmark:header:start
#
#   project      : DocBlocks
#   file         : io.py
#   file_relpath : src/docblocks/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load DocBlocks configuration from TOML sources.

Parsing is done with ``tomlkit`` and returned as plain ``dict`` structures,
which are then applied onto a [`MutableConfig`][docblocks.config.MutableConfig].

Recognized layout (``docblocks.toml``; the same tables live under
``[tool.docblocks]`` in ``pyproject.toml``)::

    fallback_to_inline = true

    [languages.asm]
    description = "Assembly"
    inline = [";"]
    block = [["/*", "*/"]]
    extensions = [".s", ".asm"]
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from docblocks.config import ConfigError, MutableConfig
from docblocks.config.logging import DocblocksLogger, get_logger
from docblocks.syntax.base import CommentSyntax, syntax

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: DocblocksLogger = get_logger(__name__)

TomlTable = dict[str, Any]

CONFIG_FILE_NAME: Final[str] = "docblocks.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

KEY_FALLBACK_TO_INLINE: Final[str] = "fallback_to_inline"
SECTION_LANGUAGES: Final[str] = "languages"


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        Errors are logged and an empty dict is returned on failure.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_docblocks_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the DocBlocks table of a parsed TOML file, or None if it has none.

    ``pyproject.toml`` files carry the settings under ``[tool.docblocks]``; any
    other file is taken as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    table: Any = tool.get("docblocks") if isinstance(tool, dict) else None
    return cast("TomlTable", table) if isinstance(table, dict) else None


def _string_list(value: Any, *, where: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{where} must be a list of strings")
    return cast("list[str]", value)


def _block_pairs(value: Any, *, where: str) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    if not isinstance(value, list):
        raise ConfigError(f"{where} must be a list of [open, close] pairs")
    for item in cast("list[Any]", value):
        if (
            not isinstance(item, list)
            or len(item) != 2
            or not all(isinstance(v, str) and v for v in item)
        ):
            raise ConfigError(f"{where} entries must be [open, close] pairs of non-empty strings")
        pairs.append((item[0], item[1]))
    return pairs


def parse_language(name: str, table: Mapping[str, Any]) -> CommentSyntax:
    """Build a [`CommentSyntax`][docblocks.syntax.base.CommentSyntax] from a ``[languages.<name>]`` table.

    Raises:
        ConfigError: If a key has the wrong type.
    """
    where: str = f"[{SECTION_LANGUAGES}.{name}]"
    inline: list[str] = _string_list(table.get("inline", []), where=f"{where} inline")
    if any(not d for d in inline):
        raise ConfigError(f"{where} inline delimiters must not be empty")
    description: Any = table.get("description", "")
    if not isinstance(description, str):
        raise ConfigError(f"{where} description must be a string")
    return syntax(
        name,
        inline=inline,
        block=_block_pairs(table.get("block", []), where=f"{where} block"),
        extensions=_string_list(table.get("extensions", []), where=f"{where} extensions"),
        filenames=_string_list(table.get("filenames", []), where=f"{where} filenames"),
        description=description,
    )


def apply_toml_dict(config: MutableConfig, data: TomlTable, *, source: Path | None = None) -> MutableConfig:
    """Apply the keys present in ``data`` onto ``config`` (in place).

    Args:
        config (MutableConfig): Builder to update.
        data (TomlTable): The DocBlocks table of one TOML source.
        source (Path | None): File the table was read from, recorded on the config.

    Returns:
        MutableConfig: The updated builder (same object).

    Raises:
        ConfigError: If a value has an invalid type.
    """
    if KEY_FALLBACK_TO_INLINE in data:
        value: Any = data[KEY_FALLBACK_TO_INLINE]
        if not isinstance(value, bool):
            raise ConfigError(f"'{KEY_FALLBACK_TO_INLINE}' must be a boolean")
        config.fallback_to_inline = value

    languages: Any = data.get(SECTION_LANGUAGES, {})
    if not isinstance(languages, dict):
        raise ConfigError(f"[{SECTION_LANGUAGES}] must be a table")
    for name, table in cast("dict[str, Any]", languages).items():
        if not isinstance(table, dict):
            raise ConfigError(f"[{SECTION_LANGUAGES}.{name}] must be a table")
        parsed: CommentSyntax = parse_language(name, cast("dict[str, Any]", table))
        config.languages = [s for s in config.languages if s.name != name] + [parsed]
        logger.debug("Configured language '%s' from %s", name, source)

    unknown: set[str] = set(data) - {KEY_FALLBACK_TO_INLINE, SECTION_LANGUAGES}
    for key in sorted(unknown):
        logger.warning("Ignoring unknown configuration key '%s' in %s", key, source)

    if source is not None:
        config.config_files.append(source)
    return config


def discover_config_file(cwd: Path) -> Path | None:
    """Return the configuration file for ``cwd``, if any.

    ``docblocks.toml`` wins over a ``pyproject.toml`` carrying ``[tool.docblocks]``.
    """
    candidate: Path = cwd / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    pyproject: Path = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file() and extract_docblocks_table(pyproject, load_toml_dict(pyproject)):
        return pyproject
    return None


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> MutableConfig:
    """Return a builder from defaults plus one TOML source.

    Args:
        path (Path | None): Explicit configuration file; when None, one is discovered
            in ``cwd`` (default: the current working directory).
        cwd (Path | None): Directory used for discovery.

    Returns:
        MutableConfig: Defaults with the source applied.

    Raises:
        ConfigError: If the explicit file is missing or a value is invalid.
    """
    config: MutableConfig = MutableConfig.from_defaults()
    if path is None:
        path = discover_config_file(cwd or Path.cwd())
        if path is None:
            logger.debug("No configuration file found; using defaults")
            return config
    elif not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")

    table: TomlTable | None = extract_docblocks_table(path, load_toml_dict(path))
    if table is None:
        logger.info("%s has no [tool.docblocks] table; using defaults", path)
        return config
    return apply_toml_dict(config, table, source=path)
