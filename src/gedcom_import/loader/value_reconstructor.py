# src/gedcom_import/loader/value_reconstructor.py

"""
Fold GEDCOM continuation lines into their parent value.

    1 NOTE Line one
    2 CONC  and more
    2 CONT Second line

becomes a NOTE whose value is "Line one and more\\nSecond line" and which
has no CONC/CONT children left. Every other child is kept and processed
recursively.
"""

from __future__ import annotations

from typing import List

from .segmenter import GEDCOMNode

_CONTINUATION_TAGS = {"CONC", "CONT"}


def _fold(node: GEDCOMNode) -> None:
    pieces: List[str] = [node.value or ""]
    kept: List[GEDCOMNode] = []

    for child in node.children:
        if child.tag == "CONC":
            pieces.append(child.value or "")
        elif child.tag == "CONT":
            pieces.append("\n" + (child.value or ""))
        else:
            _fold(child)
            kept.append(child)

    if len(kept) != len(node.children):
        node.value = "".join(pieces)
        node.children = kept


def reconstruct_values(records: List[GEDCOMNode]) -> List[GEDCOMNode]:
    """
    Reconstruct multi-line values in place for every record.

    Returns the same list for chaining.
    """
    for rec in records:
        if rec.tag in _CONTINUATION_TAGS:
            continue
        _fold(rec)
    return records
