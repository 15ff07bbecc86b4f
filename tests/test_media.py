# tests/test_media.py

from __future__ import annotations

import pytest

from gedcom_import.identity import normalize_pointer
from gedcom_import.loader import build_tree, tokenize_line
from gedcom_import.media import extract_media_objects, link_media_objects
from gedcom_import.media.objects import build_media
from gedcom_import.media.types import determine_media_type, resolve_mime_type
from gedcom_import.registry import InMemoryStore, MediaType, Person


def _records(*lines):
    tokens = [tokenize_line(line, lineno=i) for i, line in enumerate(lines, start=1)]
    return build_tree(tokens).records


@pytest.mark.parametrize(
    "path, mime, expected",
    [
        ("photo.JPG", None, MediaType.PHOTO),
        ("scan.tif", None, MediaType.PHOTO),
        ("interview.mp3", None, MediaType.AUDIO),
        ("wedding.mov", None, MediaType.VIDEO),
        ("will.pdf", None, MediaType.DOCUMENT),
        ("blob", "image/heic", MediaType.PHOTO),
        ("blob", "video/x-matroska", MediaType.VIDEO),
        ("blob", None, MediaType.DOCUMENT),
    ],
)
def test_determine_media_type(path, mime, expected):
    assert determine_media_type(path, mime) is expected


def test_resolve_mime_type_prefers_form():
    assert resolve_mime_type("JPEG", "x.bin") == "image/jpeg"
    assert resolve_mime_type("image/png", None) == "image/png"
    assert resolve_mime_type(None, r"C:\scans\letter.PDF") == "application/pdf"
    assert resolve_mime_type("", "unknown.xyz") == "application/octet-stream"


def test_build_media_supports_both_layouts():
    nested, flat = _records(
        "0 @O1@ OBJE",
        "1 FILE photos/grandma.jpg",
        "2 FORM jpg",
        "2 TITL Grandma",
        "0 @O2@ OBJE",
        "1 FILE letter.pdf",
        "1 FORM pdf",
        "1 TITL Letter",
    )

    a = build_media(nested)
    assert (a.type, a.title) == (MediaType.PHOTO, "Grandma")
    assert a.file.original_name == "grandma.jpg"
    assert a.file.mime_type == "image/jpeg"

    b = build_media(flat)
    assert (b.type, b.title) == (MediaType.DOCUMENT, "Letter")


def test_build_media_requires_file():
    (obje,) = _records("0 @O1@ OBJE", "1 TITL Nothing")
    with pytest.raises(ValueError):
        build_media(obje)


def test_extract_media_objects_maps_xrefs():
    store = InMemoryStore()
    records = _records(
        "0 @O1@ OBJE",
        "1 FILE a.png",
        "0 @O2@ OBJE",
        "1 TITL no file",
        "0 @I1@ INDI",
    )

    media_map = extract_media_objects(records, store)

    assert list(media_map) == ["@O1@"]
    media = store.get_media(media_map["@O1@"])
    assert media.title == "a.png"
    assert media.persons == set()


def test_linker_creates_inline_media_for_person():
    store = InMemoryStore()
    records = _records(
        "0 @I1@ INDI",
        "1 OBJE",
        "2 FILE photo.jpg",
        "2 FORM jpg",
    )
    pid = store.create_person(Person(source_id="@I1@")).id

    created = link_media_objects(records, {"@I1@": pid}, {}, store)

    assert created == 1
    (media,) = store.media()
    assert media.type is MediaType.PHOTO
    assert media.persons == {pid}
    assert store.get_person(pid).media == {media.id}


def test_linker_links_references_both_ways_once():
    store = InMemoryStore()
    records = _records(
        "0 @O1@ OBJE",
        "1 FILE census.pdf",
        "0 @I1@ INDI",
        "1 OBJE @O1@",
        "1 OBJE @o1@",
        "1 OBJE @O404@",
    )
    pid = store.create_person(Person(source_id="@I1@")).id
    media_map = extract_media_objects(records, store)

    created = link_media_objects(records, {normalize_pointer("@I1@"): pid}, media_map, store)

    assert created == 0
    media_id = media_map["@O1@"]
    assert store.get_person(pid).media == {media_id}
    assert store.get_media(media_id).persons == {pid}
    assert len(store.media()) == 1


def test_linker_leaves_no_one_sided_link_when_media_is_gone():
    store = InMemoryStore()
    records = _records("0 @I1@ INDI", "1 OBJE @O1@")
    pid = store.create_person(Person(source_id="@I1@")).id

    created = link_media_objects(records, {"@I1@": pid}, {"@O1@": "deleted-media"}, store)

    assert created == 0
    assert store.get_person(pid).media == set()
