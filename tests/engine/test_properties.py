# topmark:header:start
#
#   project      : DocBlocks
#   file         : test_properties.py
#   file_relpath : tests/engine/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the round-trip and partition laws.

For generated documents in several comment syntaxes:

1) an unedited model reconstructs to the exact input,
2) the blocks partition the lines with maximal runs,
3) the hydrated view has one character per doc line where doc blocks were,
4) a single-line edit survives reconstruction and re-classification.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from docblocks.api import load_model, roundtrip_ok
from docblocks.engine.classifier import split_lines
from docblocks.engine.editable import to_editable
from docblocks.engine.model import CodeBlock, DocBlock
from docblocks.engine.reconstructor import reconstruct
from tests.strategies_docblocks import s_document, s_single_line_contents

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

SETTINGS = settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=200,
)


@SETTINGS
@given(sample=s_document())
def test_unedited_round_trip(sample: tuple[str, str]) -> None:
    """Classify, group, and reconstruct without edits is the identity."""
    language, text = sample
    assert roundtrip_ok(text, language)


@SETTINGS
@given(sample=s_document())
def test_blocks_partition_lines(sample: tuple[str, str]) -> None:
    """Blocks cover ``[0, N)`` contiguously and no two neighbors could merge."""
    language, text = sample
    model = load_model(text, language)

    model.validate()
    assert model.line_count == len(split_lines(text))
    for block in model.blocks:
        if isinstance(block, DocBlock):
            assert len(block.raw_lines) == block.line_count


@SETTINGS
@given(sample=s_document())
def test_hydrated_view_length(sample: tuple[str, str]) -> None:
    """The view is the code text plus one newline per doc line."""
    language, text = sample
    model = load_model(text, language)
    doc = to_editable(model)

    code_len = sum(len(b.text) for b in model.blocks if isinstance(b, CodeBlock))
    doc_lines = sum(b.line_count for b in model.blocks if isinstance(b, DocBlock))
    assert len(doc.doc) == code_len + doc_lines
    assert len(doc.doc_blocks) == len(model.doc_blocks())


@SETTINGS
@given(sample=s_document(), contents=s_single_line_contents(), data=st.data())
def test_single_line_edit_survives_reclassification(
    sample: tuple[str, str],
    contents: str,
    data: st.DataObject,
) -> None:
    """An edited doc block classifies back to the edited contents."""
    language, text = sample
    model = load_model(text, language)
    doc_blocks = model.doc_blocks()
    if not doc_blocks:
        return

    position: int = data.draw(st.integers(min_value=0, max_value=len(doc_blocks) - 1))
    index, _block = doc_blocks[position]
    model.set_contents(index, contents)
    expected = [model.contents_of(i) for i, _ in doc_blocks]

    again = load_model(reconstruct(model), language)
    assert [again.contents_of(i) for i, _ in again.doc_blocks()] == expected
