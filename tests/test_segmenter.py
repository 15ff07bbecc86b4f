# tests/test_segmenter.py

from __future__ import annotations

import pytest

from gedcom_import.loader import (
    GEDCOMNode,
    GEDCOMStructureError,
    segment_records,
    tokenize_file,
    tokenize_line,
)
from gedcom_import.utils import tests_data_path


def _tokens(*lines):
    return [tokenize_line(line, lineno=i) for i, line in enumerate(lines, start=1)]


def test_segment_records_builds_top_level_records() -> None:
    tokens = list(tokenize_file(tests_data_path("minimal_family.ged")))
    records = segment_records(tokens)

    assert records[0].tag == "HEAD"
    assert all(r.level == 0 for r in records)
    assert [r.pointer for r in records if r.tag == "INDI"] == ["@I1@", "@I2@", "@I3@", "@I4@"]


def test_children_keep_file_order() -> None:
    records = segment_records(_tokens(
        "0 @F1@ FAM",
        "1 CHIL @I3@",
        "1 CHIL @I4@",
        "1 MARR",
        "2 DATE 12 JUN 1950",
    ))

    fam = records[0]
    assert [c.tag for c in fam.children] == ["CHIL", "CHIL", "MARR"]
    assert fam.first_child("MARR").child_value("DATE") == "12 JUN 1950"


def test_level_jump_is_reattached_in_lenient_mode() -> None:
    records = segment_records(_tokens(
        "0 @I1@ INDI",
        "1 BIRT",
        "3 DATE 1900",
    ))

    birt = records[0].first_child("BIRT")
    assert birt.child_value("DATE") == "1900"
    assert birt.first_child("DATE").level == 2


def test_level_jump_raises_in_strict_mode() -> None:
    with pytest.raises(GEDCOMStructureError):
        segment_records(_tokens("0 @I1@ INDI", "2 DATE 1900"), strict=True)


def test_orphan_lines_before_first_record_are_dropped() -> None:
    records = segment_records(_tokens("1 NAME Lost", "0 HEAD"))
    assert [r.tag for r in records] == ["HEAD"]


def test_accessors() -> None:
    node = GEDCOMNode(level=0, tag="INDI", pointer="@I1@", children=[
        GEDCOMNode(level=1, tag="NAME", value="A /B/"),
        GEDCOMNode(level=1, tag="NAME", value="C"),
        GEDCOMNode(level=1, tag="FAMC", value=" @F1@ "),
        GEDCOMNode(level=1, tag="HUSB", pointer="@I2@"),
    ])

    assert [n.value for n in node.children_of("NAME")] == ["A /B/", "C"]
    assert node.first_child("SEX") is None
    assert node.child_value("SEX", "U") == "U"
    assert node.first_child("FAMC").ref == "@F1@"
    assert node.first_child("HUSB").ref == "@I2@"


def test_text_folds_unreconstructed_continuations() -> None:
    note = GEDCOMNode(level=1, tag="NOTE", value="First", children=[
        GEDCOMNode(level=2, tag="CONC", value=" part"),
        GEDCOMNode(level=2, tag="CONT", value="Second"),
    ])
    assert note.text == "First part\nSecond"
