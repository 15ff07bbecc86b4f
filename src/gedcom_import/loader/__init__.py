# src/gedcom_import/loader/__init__.py

"""
Tag-tree parser: GEDCOM text to GEDCOMNode records.

    from gedcom_import.loader import parse_gedcom_file

    records = parse_gedcom_file("family.ged")
"""

from __future__ import annotations

from .segmenter import GEDCOMNode, GEDCOMStructureError, segment_records
from .tokenizer import GedcomSyntaxError, Token, tokenize_file, tokenize_line
from .tree_builder import GEDCOMTree, build_tree, parse_gedcom_file
from .value_reconstructor import reconstruct_values

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "GEDCOMNode",
    "GEDCOMStructureError",
    "GEDCOMTree",
    "tokenize_file",
    "tokenize_line",
    "segment_records",
    "build_tree",
    "parse_gedcom_file",
    "reconstruct_values",
]
