# topmark:header:start
#
#   project      : DocBlocks
#   file         : test_languages.py
#   file_relpath : tests/cli/test_languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `docblocks languages`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_languages_default_output() -> None:
    """The plain listing names builtin languages."""
    result = run_cli(["--no-color", "languages"])
    assert_SUCCESS(result)
    lines = result.stdout.splitlines()
    assert any(line.startswith("python ") for line in lines)
    assert any(line.startswith("c ") for line in lines)


def test_languages_long_shows_delimiters() -> None:
    """--long adds delimiters and file rules."""
    result = run_cli(["--no-color", "languages", "--long"])
    assert_SUCCESS(result)
    assert "delimiters: //, /* */" in result.stdout
    assert "(none)" in result.stdout


def test_languages_json() -> None:
    """JSON output is a list of objects with delimiter details under --long."""
    result = run_cli(["languages", "--format", "json", "--long"])
    assert_SUCCESS(result)
    data = json.loads(result.stdout)
    by_name = {entry["name"]: entry for entry in data}
    assert by_name["html"]["block"] == [["<!--", "-->"]]
    assert by_name["python"]["inline"] == ["#"]
    assert ".py" in by_name["python"]["extensions"]


def test_languages_include_configured(tmp_path: Path) -> None:
    """Languages from docblocks.toml are listed too."""
    (tmp_path / "docblocks.toml").write_text('[languages.asm]\ninline = [";"]\n')
    result = run_cli_in(tmp_path, ["languages", "--format", "json"])
    assert_SUCCESS(result)
    assert "asm" in {entry["name"] for entry in json.loads(result.stdout)}
