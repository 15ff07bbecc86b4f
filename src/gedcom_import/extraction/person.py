from __future__ import annotations

from typing import Any, Dict, List, Optional

from gedcom_import.dates.normalizer import to_date
from gedcom_import.extraction.common import collect_notes, source_citations, split_name
from gedcom_import.loader import GEDCOMNode
from gedcom_import.logging import get_logger
from gedcom_import.registry.entities import Gender, LifeEvent, Person
from gedcom_import.registry.store import EntityStore

log = get_logger(__name__)


def extract_life_event(node: GEDCOMNode, tag: str) -> Optional[LifeEvent]:
    """
    Summary of the first `tag` child (BIRT or DEAT).

    Later occurrences are ignored here; they still become Events through
    the event table.
    """
    child = node.first_child(tag)
    if child is None:
        return None
    return LifeEvent(
        date=to_date(child.child_value("DATE")),
        place=child.child_value("PLAC"),
        notes=collect_notes(child),
    )


def _family_refs(node: GEDCOMNode, tag: str) -> List[str]:
    return [c.ref for c in node.children_of(tag) if c.ref]


def _custom_fields(node: GEDCOMNode) -> Dict[str, Any]:
    fields: Dict[str, Any] = {
        "sources": source_citations(node),
        "childInFamilies": _family_refs(node, "FAMC"),
        "spouseInFamilies": _family_refs(node, "FAMS"),
    }
    email = node.child_value("EMAIL")
    if email:
        fields["email"] = email
    return fields


def build_person(node: GEDCOMNode) -> Person:
    """Map an INDI record onto an unsaved Person."""
    if node.tag != "INDI":
        raise ValueError(f"Expected INDI node, got {node.tag}")

    return Person(
        names=[split_name(n.value) for n in node.children_of("NAME")],
        gender=Gender.from_gedcom(node.child_value("SEX", "U")),
        birth=extract_life_event(node, "BIRT"),
        death=extract_life_event(node, "DEAT"),
        notes=collect_notes(node),
        source_id=node.pointer,
        custom_fields=_custom_fields(node),
    )


def extract_person(node: GEDCOMNode, store: EntityStore) -> Person:
    """
    Build a Person from an INDI record and persist it.

    The caller records the xref -> person id mapping. Errors from the
    node shape or from the store propagate.
    """
    person = store.create_person(build_person(node))
    log.debug("Created person %s for %s", person.id, node.pointer)
    return person
