# tests/test_extract_person.py

from __future__ import annotations

from datetime import date

import pytest

from gedcom_import.extraction import build_person, extract_person
from gedcom_import.extraction.common import split_name
from gedcom_import.loader import build_tree, tokenize_line
from gedcom_import.registry import Gender, InMemoryStore


def _record(*lines):
    tokens = [tokenize_line(line, lineno=i) for i, line in enumerate(lines, start=1)]
    return build_tree(tokens).records[0]


def test_split_name_with_surname():
    name = split_name("John Henry /Smith/ Jr.")
    assert name.given == "John Henry"
    assert name.surname == "Smith"
    assert name.full == "John Henry Smith"


def test_split_name_without_slash():
    name = split_name("Maggie")
    assert (name.given, name.surname) == ("Maggie", "")
    assert split_name(None).full == ""


def test_build_person_reads_names_and_gender():
    person = build_person(_record(
        "0 @I1@ INDI",
        "1 NAME John /Smith/",
        "1 NAME Jack",
        "1 SEX M",
    ))

    assert [n.full for n in person.names] == ["John Smith", "Jack"]
    assert person.names[0].surname == "Smith"
    assert person.gender is Gender.MALE
    assert person.source_id == "@I1@"
    assert person.id == ""


def test_missing_sex_is_unknown():
    person = build_person(_record("0 @I1@ INDI", "1 NAME A /B/"))
    assert person.gender is Gender.UNKNOWN


def test_only_first_birth_is_summarized():
    person = build_person(_record(
        "0 @I1@ INDI",
        "1 BIRT",
        "2 DATE 12 JUN 1950",
        "2 PLAC Springfield",
        "1 BIRT",
        "2 DATE 1951",
        "1 DEAT",
        "2 DATE ABT 2010",
    ))

    assert person.birth.date == date(1950, 6, 12)
    assert person.birth.place == "Springfield"
    assert person.death.date == date(2010, 1, 1)
    assert person.death.place == ""


def test_notes_keep_continuation_lines():
    person = build_person(_record(
        "0 @I1@ INDI",
        "1 NOTE First line",
        "2 CONT second line",
        "2 CONC , continued",
        "1 NOTE Another note",
    ))

    assert person.notes == "First line\nsecond line, continued\n\nAnother note"


def test_custom_fields_collect_sources_and_families():
    person = build_person(_record(
        "0 @I1@ INDI",
        "1 SOUR @S1@",
        "2 PAGE p. 4",
        "1 SOUR @S2@",
        "1 FAMC @F1@",
        "1 FAMS @F2@",
        "1 FAMS @F3@",
        "1 EMAIL a@example.com",
    ))

    assert person.custom_fields == {
        "sources": ["@S1@ (p. 4)", "@S2@"],
        "childInFamilies": ["@F1@"],
        "spouseInFamilies": ["@F2@", "@F3@"],
        "email": "a@example.com",
    }


def test_build_person_rejects_other_records():
    with pytest.raises(ValueError):
        build_person(_record("0 @F1@ FAM"))


def test_extract_person_persists_with_id():
    store = InMemoryStore()
    person = extract_person(_record("0 @I7@ INDI", "1 NAME Ann /Lee/"), store)

    assert person.id
    assert store.get_person(person.id) is person
    assert store.find_person_by_source_id("@I7@") is person
