# tests/test_person_events.py

from __future__ import annotations

from datetime import date

import pytest

from gedcom_import.core.exceptions import StoreError
from gedcom_import.extraction import EVENT_TAGS, extract_events_for_person
from gedcom_import.loader import build_tree, tokenize_line
from gedcom_import.registry import EventType, InMemoryStore, Person


def _record(*lines):
    tokens = [tokenize_line(line, lineno=i) for i, line in enumerate(lines, start=1)]
    return build_tree(tokens).records[0]


@pytest.fixture
def store_and_person():
    store = InMemoryStore(seed="events")
    person = store.create_person(Person(source_id="@I1@"))
    return store, person.id


def test_event_table_covers_common_tags():
    assert EVENT_TAGS["BIRT"] == (EventType.BIRTH, "Birth")
    assert EVENT_TAGS["OCCU"] == (EventType.WORK, "Occupation")
    assert EVENT_TAGS["CREM"] == (EventType.BURIAL, "Cremation")
    assert EVENT_TAGS["UID"][0] is EventType.TECHNICAL
    assert "CHIL" not in EVENT_TAGS


def test_every_occurrence_becomes_an_event(store_and_person):
    store, pid = store_and_person
    node = _record(
        "0 @I1@ INDI",
        "1 RESI",
        "2 DATE 1901",
        "2 PLAC Boston",
        "1 RESI",
        "2 PLAC Chicago",
        "1 RESI",
        "1 SEX F",
    )

    assert extract_events_for_person(node, pid, store) == 3
    events = store.events_for(pid)
    assert [e.type for e in events] == [EventType.RESIDENCE] * 3
    assert [e.location.place for e in events] == ["Boston", "Chicago", ""]
    assert events[0].date.start == date(1901, 1, 1)


def test_event_reads_date_range_place_map_and_sources(store_and_person):
    store, pid = store_and_person
    node = _record(
        "0 @I1@ INDI",
        "1 OCCU Blacksmith",
        "2 DATE BET 1880 AND 1890",
        "2 PLAC Leeds",
        "3 MAP",
        "4 LATI N53.8",
        "4 LONG W1.55",
        "2 SOUR @S3@",
        "2 NOTE Apprenticed first",
    )

    extract_events_for_person(node, pid, store)
    (event,) = store.events()
    assert event.title == "Occupation"
    assert event.description == "Blacksmith"
    assert event.person == pid
    assert event.date.is_range
    assert (event.date.start, event.date.end) == (date(1880, 1, 1), date(1890, 1, 1))
    assert event.location.coordinates.latitude == pytest.approx(53.8)
    assert event.location.coordinates.longitude == pytest.approx(-1.55)
    assert event.sources == ["@S3@"]
    assert event.notes == "Apprenticed first"


def test_custom_event_title_comes_from_type(store_and_person):
    store, pid = store_and_person
    node = _record(
        "0 @I1@ INDI",
        "1 EVEN",
        "2 TYPE Land grant",
        "1 FACT Tall",
    )

    extract_events_for_person(node, pid, store)
    assert [e.title for e in store.events()] == ["Land grant", "Fact"]
    assert all(e.type is EventType.CUSTOM for e in store.events())


def test_address_and_email_events(store_and_person):
    store, pid = store_and_person
    node = _record(
        "0 @I1@ INDI",
        "1 ADDR",
        "2 CITY Dublin",
        "2 CTRY Ireland",
        "1 EMAIL x@example.com",
    )

    assert extract_events_for_person(node, pid, store) == 2
    address, email = store.events()
    assert (address.type, address.title) == (EventType.RESIDENCE, "Address")
    assert address.location.place == "Dublin, Ireland"
    assert address.description == "Address information"
    assert (email.type, email.title) == (EventType.CUSTOM, "Contact Information")
    assert email.description == "Email: x@example.com"


def test_address_is_skipped_when_residence_exists(store_and_person):
    store, pid = store_and_person
    node = _record(
        "0 @I1@ INDI",
        "1 RESI",
        "2 PLAC Dublin",
        "1 ADDR 5 Main St, Dublin",
    )

    assert extract_events_for_person(node, pid, store) == 1
    assert [(e.title, e.location.place) for e in store.events()] == [("Residence", "Dublin")]


class _FlakyStore(InMemoryStore):
    def create_event(self, event):
        if event.title == "Burial":
            raise StoreError("disk full")
        return super().create_event(event)


def test_failing_event_is_skipped():
    store = _FlakyStore()
    pid = store.create_person(Person()).id
    node = _record(
        "0 @I1@ INDI",
        "1 BIRT",
        "1 BURI",
        "1 DEAT",
    )

    assert extract_events_for_person(node, pid, store) == 2
    assert sorted(e.title for e in store.events()) == ["Birth", "Death"]
