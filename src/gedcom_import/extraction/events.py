# src/gedcom_import/extraction/events.py

from __future__ import annotations

from typing import Dict, List, Tuple

from gedcom_import.dates.normalizer import to_date_range
from gedcom_import.extraction.common import (
    address_text,
    collect_notes,
    extract_coordinates,
    source_citations,
)
from gedcom_import.loader import GEDCOMNode
from gedcom_import.logging import get_logger
from gedcom_import.registry.entities import Event, EventDate, EventLocation, EventType
from gedcom_import.registry.store import EntityStore

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Individual event tags -> (event type, title)
# ---------------------------------------------------------------------------

EVENT_TAGS: Dict[str, Tuple[EventType, str]] = {
    "BIRT": (EventType.BIRTH, "Birth"),
    "CHR": (EventType.BAPTISM, "Christening"),
    "DEAT": (EventType.DEATH, "Death"),
    "BURI": (EventType.BURIAL, "Burial"),
    "CREM": (EventType.BURIAL, "Cremation"),
    "NAME": (EventType.IDENTITY, "Name"),
    "NICK": (EventType.IDENTITY, "Nickname"),
    "TITL": (EventType.IDENTITY, "Title"),
    "MARR": (EventType.MARRIAGE, "Marriage"),
    "ENGA": (EventType.ENGAGEMENT, "Engagement"),
    "DIV": (EventType.DIVORCE, "Divorce"),
    "DIVF": (EventType.DIVORCE, "Divorce Filed"),
    "MARS": (EventType.MARRIAGE, "Marriage Settlement"),
    "ADOP": (EventType.ADOPTION, "Adoption"),
    "BAPM": (EventType.BAPTISM, "Baptism"),
    "BARM": (EventType.BAPTISM, "Bar Mitzvah"),
    "BASM": (EventType.BAPTISM, "Bas Mitzvah"),
    "CHRA": (EventType.BAPTISM, "Adult Christening"),
    "CONF": (EventType.BAPTISM, "Confirmation"),
    "EDUC": (EventType.EDUCATION, "Education"),
    "GRAD": (EventType.GRADUATION, "Graduation"),
    "OCCU": (EventType.WORK, "Occupation"),
    "RETI": (EventType.RETIREMENT, "Retirement"),
    "RESI": (EventType.RESIDENCE, "Residence"),
    "MILI": (EventType.MILITARY, "Military Service"),
    "PROB": (EventType.LEGAL, "Probate"),
    "WILL": (EventType.LEGAL, "Will"),
    "NATI": (EventType.CUSTOM, "Nationality"),
    "EMIG": (EventType.CUSTOM, "Emigration"),
    "IMMI": (EventType.CUSTOM, "Immigration"),
    "CITI": (EventType.CUSTOM, "Naturalization"),
    "NATU": (EventType.CUSTOM, "Naturalization"),
    "DSCR": (EventType.MEDICAL, "Physical Description"),
    "CAST": (EventType.CUSTOM, "Caste"),
    "RELI": (EventType.CUSTOM, "Religion"),
    "EVEN": (EventType.CUSTOM, "Custom Event"),
    "CENS": (EventType.CENSUS, "Census"),
    "FACT": (EventType.CUSTOM, "Fact"),
    "UID": (EventType.TECHNICAL, "Unique Identifier"),
}


def build_event(node: GEDCOMNode, event_type: EventType, title: str, persons: List[str]) -> Event:
    """
    Unsaved Event from an event-like node (BIRT, RESI, MARR, ...).

    DATE, PLAC (with optional MAP), NOTE and SOUR children are read the
    same way for every tag.
    """
    start, end, is_range = to_date_range(node.child_value("DATE"))
    return Event(
        type=event_type,
        title=title,
        persons=list(persons),
        description=(node.value or "").strip(),
        date=EventDate(start=start, end=end, is_range=is_range),
        location=EventLocation(
            place=node.child_value("PLAC"),
            coordinates=extract_coordinates(node),
        ),
        notes=collect_notes(node),
        sources=source_citations(node),
    )


def _title_for(node: GEDCOMNode, default: str) -> str:
    # EVEN/FACT carry their real name in TYPE
    if node.tag in ("EVEN", "FACT"):
        return node.child_value("TYPE") or default
    return default


def _save(store: EntityStore, event: Event, person_id: str) -> bool:
    try:
        store.create_event(event)
        return True
    except Exception as exc:
        log.warning("Could not create %s event for person %s: %s", event.title, person_id, exc)
        return False


def extract_events_for_person(node: GEDCOMNode, person_id: str, store: EntityStore) -> int:
    """
    Create one Event per event-tag child of an INDI record.

    Every occurrence counts (three RESI children give three events). A
    top-level ADDR becomes a Residence "Address" event unless a RESI
    already produced one, and each EMAIL a Custom "Contact Information"
    event. A failing event is logged and skipped.

    Returns:
        Number of events created.
    """
    created = 0
    residence_captured = False

    for child in node.children:
        spec = EVENT_TAGS.get(child.tag)
        if spec is None:
            continue
        event_type, title = spec
        try:
            event = build_event(child, event_type, _title_for(child, title), [person_id])
        except Exception as exc:
            log.warning("Could not read %s (line %d) for person %s: %s", child.tag, child.lineno, person_id, exc)
            continue
        if _save(store, event, person_id):
            created += 1
            residence_captured = residence_captured or child.tag == "RESI"

    addresses = [] if residence_captured else node.children_of("ADDR")
    for addr in addresses:
        place = address_text(addr)
        if not place:
            continue
        event = Event(
            type=EventType.RESIDENCE,
            title="Address",
            persons=[person_id],
            description="Address information",
            location=EventLocation(place=place),
        )
        if _save(store, event, person_id):
            created += 1

    for email in node.children_of("EMAIL"):
        value = (email.value or "").strip()
        if not value:
            continue
        event = Event(
            type=EventType.CUSTOM,
            title="Contact Information",
            persons=[person_id],
            description=f"Email: {value}",
        )
        if _save(store, event, person_id):
            created += 1

    return created
