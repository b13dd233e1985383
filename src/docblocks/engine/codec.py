# topmark:header:start
#
#   project      : DocBlocks
#   file         : codec.py
#   file_relpath : src/docblocks/engine/codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Byte/text conversion for source documents.

Sources are decoded as UTF-8 with ``surrogateescape`` so that any byte
sequence survives a decode/encode round trip unchanged. A leading UTF-8 BOM
is removed before classification (it would otherwise hide the indent of the
first line) and restored on encode.
"""

from __future__ import annotations

from typing import Final

ENCODING: Final[str] = "utf-8"
ERRORS: Final[str] = "surrogateescape"
BOM: Final[str] = "\ufeff"


def decode_source(data: bytes) -> tuple[str, bool]:
    """Decode raw source bytes.

    Returns:
        tuple[str, bool]: The decoded text without BOM, and whether a BOM was present.
    """
    text: str = data.decode(ENCODING, errors=ERRORS)
    if text.startswith(BOM):
        return text[len(BOM) :], True
    return text, False


def encode_source(text: str, *, leading_bom: bool = False) -> bytes:
    """Encode text produced by the reconstructor back to bytes."""
    if leading_bom:
        text = BOM + text
    return text.encode(ENCODING, errors=ERRORS)
