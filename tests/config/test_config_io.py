# topmark:header:start
#
#   project      : DocBlocks
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading DocBlocks configuration from TOML files."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from docblocks.api import build_registry
from docblocks.config import Config, ConfigError, MutableConfig
from docblocks.config.io import (
    apply_toml_dict,
    discover_config_file,
    load_config,
    load_toml_dict,
    parse_language,
)
from docblocks.syntax.base import BlockStyle, InlineStyle

if TYPE_CHECKING:
    from pathlib import Path

ASM_TOML = """\
fallback_to_inline = true

[languages.asm]
description = "Assembly"
inline = [";"]
block = [["/*", "*/"]]
extensions = [".S", ".asm"]
"""


def test_defaults() -> None:
    """The built-in defaults disable the inline fallback and add no languages."""
    config = Config.from_defaults()
    assert config.fallback_to_inline is False
    assert config.languages == ()
    assert config.config_files == ()


def test_freeze_and_thaw() -> None:
    """Frozen configs are immutable; thawing yields an editable copy."""
    config = MutableConfig(fallback_to_inline=True).freeze()
    with pytest.raises(AttributeError):
        config.fallback_to_inline = False  # type: ignore[misc]

    draft = config.thaw()
    draft.fallback_to_inline = False
    assert config.fallback_to_inline is True
    assert draft.freeze().fallback_to_inline is False


def test_load_explicit_file(tmp_path: Path) -> None:
    """An explicit docblocks.toml is applied onto the defaults."""
    path = tmp_path / "docblocks.toml"
    path.write_text(ASM_TOML, encoding="utf-8")

    config = load_config(path).freeze()

    assert config.fallback_to_inline is True
    assert config.config_files == (path,)
    (asm,) = config.languages
    assert asm.name == "asm"
    assert asm.description == "Assembly"
    assert asm.inline == (InlineStyle(";"),)
    assert asm.block == (BlockStyle("/*", "*/"),)
    assert asm.extensions == (".s", ".asm")


def test_missing_explicit_file_raises(tmp_path: Path) -> None:
    """A --config path that does not exist is an error."""
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.toml")


def test_discovery_prefers_docblocks_toml(tmp_path: Path) -> None:
    """docblocks.toml wins over pyproject.toml."""
    (tmp_path / "pyproject.toml").write_text("[tool.docblocks]\nfallback_to_inline = true\n")
    assert discover_config_file(tmp_path) == tmp_path / "pyproject.toml"

    (tmp_path / "docblocks.toml").write_text("fallback_to_inline = false\n")
    assert discover_config_file(tmp_path) == tmp_path / "docblocks.toml"


def test_pyproject_table(tmp_path: Path) -> None:
    """Settings are read from [tool.docblocks] in pyproject.toml."""
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.docblocks]\nfallback_to_inline = true\n'
    )
    config = load_config(cwd=tmp_path).freeze()
    assert config.fallback_to_inline is True


def test_pyproject_without_table_is_ignored(tmp_path: Path) -> None:
    """A pyproject.toml without [tool.docblocks] is not a configuration file."""
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')
    assert discover_config_file(tmp_path) is None
    assert load_config(cwd=tmp_path).freeze() == Config.from_defaults()


def test_malformed_toml_yields_empty_dict(tmp_path: Path) -> None:
    """Parse errors are logged and produce an empty table."""
    path = tmp_path / "bad.toml"
    path.write_text("this is = = not toml")
    assert load_toml_dict(path) == {}


@pytest.mark.parametrize(
    "table",
    [
        {"inline": "#"},
        {"inline": [""]},
        {"block": [["/*"]]},
        {"block": [["/*", ""]]},
        {"extensions": [1]},
        {"description": 3},
    ],
)
def test_parse_language_rejects_bad_values(table: dict[str, object]) -> None:
    """Invalid language tables raise ConfigError."""
    with pytest.raises(ConfigError):
        parse_language("bad", table)


def test_apply_rejects_non_boolean_fallback() -> None:
    """fallback_to_inline must be a boolean."""
    with pytest.raises(ConfigError):
        apply_toml_dict(MutableConfig(), {"fallback_to_inline": "yes"})


def test_unknown_keys_are_warned(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are ignored with a warning."""
    with caplog.at_level(logging.WARNING):
        config = apply_toml_dict(MutableConfig(), {"colour": "blue"})
    assert "colour" in caplog.text
    assert config.freeze() == Config.from_defaults()


def test_later_language_definition_replaces_earlier() -> None:
    """Re-defining a language keeps only the last definition."""
    draft = MutableConfig()
    apply_toml_dict(draft, {"languages": {"asm": {"inline": [";"]}}})
    apply_toml_dict(draft, {"languages": {"asm": {"inline": ["#"]}}})
    assert [s.inline for s in draft.languages] == [(InlineStyle("#"),)]


def test_build_registry_overlays_configured_languages(tmp_path: Path) -> None:
    """Configured languages are resolvable next to the builtins."""
    path = tmp_path / "docblocks.toml"
    path.write_text(ASM_TOML, encoding="utf-8")
    registry = build_registry(load_config(path).freeze())

    assert registry["asm"].description == "Assembly"
    assert "python" in registry
    resolved = registry.resolve_path(tmp_path / "boot.S")
    assert resolved is not None
    assert resolved.name == "asm"
