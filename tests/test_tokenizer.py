# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_import.loader import GedcomSyntaxError, tokenize_file, tokenize_line
from gedcom_import.utils import tests_data_path


def test_tokenize_line_simple_head() -> None:
    token = tokenize_line("0 HEAD", lineno=1)
    assert token.lineno == 1
    assert token.level == 0
    assert token.pointer is None
    assert token.tag == "HEAD"
    assert token.value == ""


def test_tokenize_line_with_pointer_and_tag_only() -> None:
    token = tokenize_line("0 @I1@ INDI", lineno=1)
    assert token.pointer == "@I1@"
    assert token.tag == "INDI"
    assert token.value == ""


def test_tokenize_line_keeps_reference_in_value() -> None:
    token = tokenize_line("1 HUSB @I1@", lineno=7)
    assert token.pointer is None
    assert token.tag == "HUSB"
    assert token.value == "@I1@"


def test_tokenize_line_with_value() -> None:
    line = "1 NAME John Henry /Smith/"
    token = tokenize_line(line, lineno=10)
    assert token.level == 1
    assert token.tag == "NAME"
    assert token.value == "John Henry /Smith/"
    assert token.raw == line


def test_tokenize_line_with_bom_on_first_line() -> None:
    token = tokenize_line("\ufeff0 HEAD", lineno=1)
    assert token.level == 0
    assert token.tag == "HEAD"


def test_tokenize_line_accepts_indented_lines() -> None:
    token = tokenize_line("    2 DATE 12 JUN 1950", lineno=3)
    assert token.level == 2
    assert token.value == "12 JUN 1950"


def test_tokenize_line_invalid_level_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("X HEAD", lineno=1)


def test_tokenize_line_missing_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 ", lineno=1)


def test_tokenize_file_reads_sample() -> None:
    tokens = list(tokenize_file(tests_data_path("minimal_family.ged")))
    assert tokens[0].tag == "HEAD"
    assert tokens[-1].tag == "TRLR"


def test_tokenize_file_missing_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        list(tokenize_file(tmp_path / "nope.ged"))


def test_tokenize_file_lenient_skips_bad_lines(tmp_path) -> None:
    path = tmp_path / "bad.ged"
    path.write_text("0 HEAD\nGARBAGE LINE\n\n0 TRLR\n", encoding="utf-8")

    tokens = list(tokenize_file(path))
    assert [t.tag for t in tokens] == ["HEAD", "TRLR"]


def test_tokenize_file_strict_raises_on_bad_line(tmp_path) -> None:
    path = tmp_path / "bad.ged"
    path.write_text("0 HEAD\nGARBAGE LINE\n0 TRLR\n", encoding="utf-8")

    with pytest.raises(GedcomSyntaxError):
        list(tokenize_file(path, strict=True))
