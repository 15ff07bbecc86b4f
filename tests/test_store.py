# tests/test_store.py

from __future__ import annotations

import pytest

from gedcom_import.core.exceptions import StoreError
from gedcom_import.registry import (
    Event,
    EventType,
    InMemoryStore,
    Media,
    MediaFile,
    MediaType,
    Person,
    Relationship,
    RelationshipType,
)


def test_ids_are_assigned_and_unique():
    store = InMemoryStore()
    a = store.create_person(Person())
    b = store.create_person(Person())

    assert a.id and b.id and a.id != b.id
    assert store.get_person(a.id) is a


def test_seeded_ids_are_stable():
    ids = []
    for _ in range(2):
        store = InMemoryStore(seed="abc")
        ids.append([store.create_person(Person()).id for _ in range(3)])

    assert ids[0] == ids[1]
    assert len(set(ids[0])) == 3
    assert InMemoryStore(seed="other").create_person(Person()).id not in ids[0]


def test_duplicate_explicit_id_is_rejected():
    store = InMemoryStore()
    store.create_person(Person(id="p1"))
    with pytest.raises(StoreError):
        store.create_person(Person(id="p1"))


def test_event_and_relationship_require_known_persons():
    store = InMemoryStore()
    pid = store.create_person(Person()).id

    with pytest.raises(StoreError):
        store.create_event(Event(type=EventType.BIRTH, title="Birth", persons=["nobody"]))
    with pytest.raises(StoreError):
        store.create_relationship(Relationship(type=RelationshipType.SIBLING, persons=[pid, "nobody"]))
    with pytest.raises(StoreError):
        store.create_relationship(Relationship(type=RelationshipType.SIBLING, persons=[pid]))


def test_relationships_for_filters_by_type():
    store = InMemoryStore()
    a, b, c = (store.create_person(Person()).id for _ in range(3))
    store.create_relationship(Relationship(type=RelationshipType.SPOUSE, persons=[a, b]))
    store.create_relationship(Relationship(type=RelationshipType.PARENT_CHILD, persons=[a, c]))

    assert len(store.relationships_for(a)) == 2
    assert [r.persons for r in store.relationships_for(a, RelationshipType.PARENT_CHILD)] == [[a, c]]
    assert store.relationships_for(c, RelationshipType.SPOUSE) == []


def test_media_links_are_sets():
    store = InMemoryStore()
    pid = store.create_person(Person()).id
    mid = store.create_media(Media(type=MediaType.PHOTO, title="x", file=MediaFile(path="x.jpg"))).id

    for _ in range(2):
        store.add_media_to_person(pid, mid)
        store.add_person_to_media(mid, pid)

    assert store.get_person(pid).media == {mid}
    assert store.get_media(mid).persons == {pid}

    with pytest.raises(StoreError):
        store.add_media_to_person("nobody", mid)
    with pytest.raises(StoreError):
        store.add_person_to_media("missing", pid)


def test_clear_selected_collections():
    store = InMemoryStore()
    pid = store.create_person(Person()).id
    event = store.create_event(Event(type=EventType.BIRTH, title="Birth", persons=[pid]))

    assert store.get_event(event.id) is event
    store.clear(["events"])
    assert store.events() == []
    assert len(store.persons()) == 1

    store.clear()
    assert store.persons() == []

    with pytest.raises(ValueError):
        store.clear(["people"])
