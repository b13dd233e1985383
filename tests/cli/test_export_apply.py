# topmark:header:start
#
#   project      : DocBlocks
#   file         : test_export_apply.py
#   file_relpath : tests/cli/test_export_apply.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `docblocks export` and `docblocks apply`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from docblocks.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli

SOURCE = "/* Title */\nint x;\n"


def export(tmp_path: Path) -> dict[str, object]:
    """Export ``main.c`` in ``tmp_path`` and return the parsed JSON."""
    result = run_cli_in(tmp_path, ["export", "main.c"])
    assert_SUCCESS(result)
    return json.loads(result.stdout)


def write_edits(tmp_path: Path, data: object) -> str:
    """Write ``data`` as ``edits.json`` and return its name."""
    (tmp_path / "edits.json").write_text(json.dumps(data))
    return "edits.json"


def test_export(tmp_path: Path) -> None:
    """The exported document holds the hydrated view and 5-element records."""
    (tmp_path / "main.c").write_text(SOURCE)
    data = export(tmp_path)
    assert data == {"doc": "\nint x;\n", "doc_blocks": [[0, 1, "", "/*", "Title"]]}


def test_apply_prints_result(tmp_path: Path) -> None:
    """Without --write the reconstructed source goes to stdout and the file is untouched."""
    (tmp_path / "main.c").write_text(SOURCE)
    data = export(tmp_path)
    data["doc_blocks"][0][4] = "New title"  # type: ignore[index]
    edits = write_edits(tmp_path, data)

    result = run_cli_in(tmp_path, ["apply", "main.c", edits])
    assert_SUCCESS(result)
    assert result.stdout == "/* New title */\nint x;\n"
    assert (tmp_path / "main.c").read_text() == SOURCE


def test_apply_write(tmp_path: Path) -> None:
    """--write saves the reconstructed source; bare record lists are accepted."""
    (tmp_path / "main.c").write_text(SOURCE)
    edits = write_edits(tmp_path, [[0, 1, "", "/*", "Saved"]])

    result = run_cli_in(tmp_path, ["apply", "main.c", edits, "--write"])
    assert_SUCCESS(result)
    assert (tmp_path / "main.c").read_text() == "/* Saved */\nint x;\n"


def test_apply_collision(tmp_path: Path) -> None:
    """Contents containing the closing delimiter are refused unless falling back."""
    (tmp_path / "main.c").write_text(SOURCE)
    edits = write_edits(tmp_path, [[0, 1, "", "/*", "a */ b"]])

    result = run_cli_in(tmp_path, ["apply", "main.c", edits, "--write"])
    assert result.exit_code == ExitCode.ENGINE_ERROR, result.output
    assert (tmp_path / "main.c").read_text() == SOURCE

    result = run_cli_in(tmp_path, ["apply", "main.c", edits, "--fallback-inline"])
    assert_SUCCESS(result)
    assert result.stdout == "// a */ b\nint x;\n"


def test_apply_fallback_from_config(tmp_path: Path) -> None:
    """fallback_to_inline in docblocks.toml enables the inline fallback."""
    (tmp_path / "main.c").write_text(SOURCE)
    (tmp_path / "docblocks.toml").write_text("fallback_to_inline = true\n")
    edits = write_edits(tmp_path, [[0, 1, "", "/*", "a */ b"]])

    result = run_cli_in(tmp_path, ["apply", "main.c", edits])
    assert_SUCCESS(result)
    assert result.stdout == "// a */ b\nint x;\n"


def test_apply_stale_records(tmp_path: Path) -> None:
    """Records whose span matches no doc block require a reload."""
    (tmp_path / "main.c").write_text(SOURCE)
    edits = write_edits(tmp_path, [[2, 3, "", "/*", "x"]])

    result = run_cli_in(tmp_path, ["apply", "main.c", edits])
    assert result.exit_code == ExitCode.TEMP_FAILURE, result.output


def test_apply_malformed_edits(tmp_path: Path) -> None:
    """Malformed edit files are data errors."""
    (tmp_path / "main.c").write_text(SOURCE)
    (tmp_path / "bad.json").write_text("{not json")
    result = run_cli_in(tmp_path, ["apply", "main.c", "bad.json"])
    assert result.exit_code == ExitCode.DATA_ERROR, result.output

    edits = write_edits(tmp_path, [[0, 1, "/*"]])
    result = run_cli_in(tmp_path, ["apply", "main.c", edits])
    assert result.exit_code == ExitCode.DATA_ERROR, result.output

    edits = write_edits(tmp_path, "just a string")
    result = run_cli_in(tmp_path, ["apply", "main.c", edits])
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


def test_apply_prints_undecodable_bytes_unchanged(tmp_path: Path) -> None:
    """Bytes that are not valid UTF-8 reach stdout exactly as they were read."""
    (tmp_path / "main.c").write_bytes(b'// doc\nchar *s = "\xff";\n')
    edits = write_edits(tmp_path, [[0, 1, "", "//", "new"]])

    result = run_cli_in(tmp_path, ["apply", "main.c", edits])
    assert_SUCCESS(result)
    assert result.stdout_bytes == b'// new\nchar *s = "\xff";\n'


def test_apply_prints_leading_bom(tmp_path: Path) -> None:
    """A leading BOM is kept in the printed source."""
    (tmp_path / "main.c").write_bytes(b"\xef\xbb\xbf// doc\nint x;\n")
    edits = write_edits(tmp_path, [[0, 1, "", "//", "new"]])

    result = run_cli_in(tmp_path, ["apply", "main.c", edits])
    assert_SUCCESS(result)
    assert result.stdout_bytes == b"\xef\xbb\xbf// new\nint x;\n"
