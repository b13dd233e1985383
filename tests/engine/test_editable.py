# topmark:header:start
#
#   project      : DocBlocks
#   file         : test_editable.py
#   file_relpath : tests/engine/test_editable.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the editable representation exchanged with editing surfaces."""

from __future__ import annotations

import logging

import pytest

from docblocks.engine.classifier import classify
from docblocks.engine.editable import DocBlockRecord, EditableDocument, apply_edits, to_editable
from docblocks.engine.errors import SpanMismatch
from docblocks.engine.grouper import group
from docblocks.engine.model import BlockModel
from docblocks.engine.reconstructor import reconstruct
from tests.conftest import c_syntax

SOURCE = "// Title\n// line two\nint x;\n    /* nested\n    doc */\nreturn;\n"


def make_model() -> BlockModel:
    """Return a fresh C model of `SOURCE`."""
    return group(classify(SOURCE, c_syntax()))


def test_hydrated_view_replaces_doc_blocks_with_newlines() -> None:
    """Code appears verbatim; each doc block becomes one newline per line."""
    doc = to_editable(make_model())

    assert doc.doc == "\n\nint x;\n\n\nreturn;\n"
    assert doc.doc_blocks == [
        DocBlockRecord(0, 2, "", "//", "Title\nline two"),
        DocBlockRecord(9, 11, "    ", "/*", "nested\ndoc"),
    ]


def test_record_offsets_point_at_placeholders() -> None:
    """Each record's span covers exactly its placeholder in the view."""
    doc = to_editable(make_model())
    for record in doc.doc_blocks:
        placeholder = doc.doc[record.from_ : record.to]
        assert placeholder == "\n" * (record.to - record.from_)


def test_apply_edits_updates_contents() -> None:
    """Changed contents are applied; unchanged records leave blocks unedited."""
    model = make_model()
    records = to_editable(model).doc_blocks
    edited = apply_edits(model, [records[0]._replace(contents="New title"), records[1]])

    assert edited == [0]
    assert reconstruct(model) == "// New title\nint x;\n    /* nested\n    doc */\nreturn;\n"


def test_apply_edits_ignores_indent_and_delimiter(caplog: pytest.LogCaptureFixture) -> None:
    """Only contents are editable; other field changes are logged and ignored."""
    model = make_model()
    record = to_editable(model).doc_blocks[1]
    changed = record._replace(indent="", delimiter="//", contents="flat")

    with caplog.at_level(logging.WARNING):
        apply_edits(model, [changed])

    assert "only contents are editable" in caplog.text
    assert reconstruct(model) == "// Title\n// line two\nint x;\n    /* flat */\nreturn;\n"


def test_apply_edits_reports_delimiter_unknown_to_the_language(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """A delimiter tag the syntax does not define is named in the warning and ignored."""
    model = make_model()
    record = to_editable(model).doc_blocks[0]
    changed = record._replace(delimiter="#", contents="Hashed")

    with caplog.at_level(logging.WARNING):
        apply_edits(model, [changed], syntax=c_syntax())

    assert "'#' is not a c comment delimiter" in caplog.text
    assert "only contents are editable" not in caplog.text
    assert reconstruct(model).startswith("// Hashed\nint x;\n")


def test_apply_edits_known_delimiter_change_is_ignored(caplog: pytest.LogCaptureFixture) -> None:
    """Switching to another style of the same language is resolved but still not applied."""
    model = make_model()
    record = to_editable(model).doc_blocks[0]
    changed = record._replace(delimiter="/*")

    with caplog.at_level(logging.WARNING):
        edited = apply_edits(model, [changed], syntax=c_syntax())

    assert "only contents are editable" in caplog.text
    assert edited == []


def test_unknown_span_raises_and_leaves_model_untouched() -> None:
    """A stale record fails the whole batch before anything is applied."""
    model = make_model()
    good = to_editable(model).doc_blocks[0]._replace(contents="x")
    stale = DocBlockRecord(3, 5, "", "//", "y")

    with pytest.raises(SpanMismatch):
        apply_edits(model, [good, stale])
    assert not model.is_dirty


def test_editable_shows_pending_edits() -> None:
    """Records carry the current contents, edits included."""
    model = make_model()
    model.set_contents(0, "edited")
    assert to_editable(model).doc_blocks[0].contents == "edited"


def test_record_json_round_trip() -> None:
    """Records serialize to the 5-element list form."""
    record = DocBlockRecord(0, 2, "  ", "#", "text")
    assert record.as_json() == [0, 2, "  ", "#", "text"]
    assert DocBlockRecord.from_json([0, 2, "  ", "#", "text"]) == record


@pytest.mark.parametrize(
    "value",
    [
        [0, 2, "", "#"],
        {"from": 0},
        ["0", 2, "", "#", "x"],
        [0, 2, "", "#", None],
    ],
)
def test_record_from_json_rejects_bad_shapes(value: object) -> None:
    """Malformed records raise ValueError."""
    with pytest.raises(ValueError):
        DocBlockRecord.from_json(value)


def test_document_json() -> None:
    """The document serializes to a mapping with ``doc`` and ``doc_blocks``."""
    doc = to_editable(make_model())
    data = doc.as_json()

    assert set(data) == {"doc", "doc_blocks"}
    assert EditableDocument.from_json(data) == doc

    with pytest.raises(ValueError):
        EditableDocument.from_json({"doc_blocks": []})
