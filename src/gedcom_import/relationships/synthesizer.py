"""
Relationship synthesis from FAM records.

A FAM record names its spouses (HUSB, WIFE) and children (CHIL) by xref.
Once every INDI has been imported, each family yields:

  - one Spouse relationship when both spouses resolve, dated by MARR;
  - one Marriage event for the couple when MARR is present;
  - a Parent-Child relationship from each resolved parent to each
    resolved child;
  - a Sibling relationship for every unordered pair of resolved children.

Siblings never appear in GEDCOM directly, so this is their only source.
All children of one FAM are treated as full siblings.
"""

from __future__ import annotations

from itertools import combinations
from typing import Dict, List, Optional

from gedcom_import.core.stats import ImportStats
from gedcom_import.dates.normalizer import to_date
from gedcom_import.extraction.events import build_event
from gedcom_import.identity.uuid_factory import normalize_pointer
from gedcom_import.loader import GEDCOMNode
from gedcom_import.logging import get_logger
from gedcom_import.registry.entities import EventDate, EventType, Relationship, RelationshipType
from gedcom_import.registry.store import EntityStore

log = get_logger(__name__)


def _resolve(node: Optional[GEDCOMNode], id_map: Dict[str, str], family: str, role: str) -> Optional[str]:
    if node is None or not node.ref:
        return None
    person_id = id_map.get(normalize_pointer(node.ref) or "")
    if person_id is None:
        log.warning("%s reference %s not found in individual map (from family %s)", role, node.ref, family)
    return person_id


def _save_relationship(store: EntityStore, relationship: Relationship, family: str) -> bool:
    try:
        store.create_relationship(relationship)
        return True
    except Exception as exc:
        log.warning(
            "Could not create %s relationship %s in family %s: %s",
            relationship.type.value,
            relationship.persons,
            family,
            exc,
        )
        return False


def resolve_children(
    family_node: GEDCOMNode,
    id_map: Dict[str, str],
    stats: Optional[ImportStats] = None,
) -> List[str]:
    """Person ids of the family's CHIL references, in order, without repeats."""
    family = family_node.pointer or f"line {family_node.lineno}"
    children: List[str] = []

    for chil in family_node.children_of("CHIL"):
        child_id = id_map.get(normalize_pointer(chil.ref) or "")
        if child_id is None:
            message = f"Child reference {chil.ref} not found in individual map (from family {family})"
            log.warning(message)
            if stats is not None:
                stats.add_warning(message)
            continue
        if child_id not in children:
            children.append(child_id)

    return children


def process_family(
    family_node: GEDCOMNode,
    id_map: Dict[str, str],
    store: EntityStore,
    stats: Optional[ImportStats] = None,
    synthesize_siblings: bool = True,
) -> int:
    """
    Create the relationships and marriage event implied by one FAM record.

    Args:
        family_node: The FAM record.
        id_map: Normalized INDI xref -> person id, fully populated.
        store: Where relationships and events are written.
        stats: When given, unresolved CHIL references are added to
            its warnings.
        synthesize_siblings: Create pairwise Sibling relationships.

    Returns:
        Number of events created (0 or 1).
    """
    if family_node.tag != "FAM":
        raise ValueError(f"Expected FAM node, got {family_node.tag}")

    family = family_node.pointer or f"line {family_node.lineno}"
    husband = _resolve(family_node.first_child("HUSB"), id_map, family, "Husband")
    wife = _resolve(family_node.first_child("WIFE"), id_map, family, "Wife")
    parents = [p for p in (husband, wife) if p]

    events = 0
    marr = family_node.first_child("MARR")

    if husband and wife:
        if marr is not None:
            try:
                store.create_event(build_event(marr, EventType.MARRIAGE, "Marriage", [husband, wife]))
                events += 1
            except Exception as exc:
                log.warning("Could not create marriage event for family %s: %s", family, exc)

        spouse = Relationship(type=RelationshipType.SPOUSE, persons=[husband, wife])
        married_on = to_date(marr.child_value("DATE")) if marr is not None else None
        if married_on is not None:
            spouse.date = EventDate(start=married_on)
        _save_relationship(store, spouse, family)

    children = resolve_children(family_node, id_map, stats)

    for child in children:
        for parent in parents:
            _save_relationship(
                store,
                Relationship(type=RelationshipType.PARENT_CHILD, persons=[parent, child]),
                family,
            )

    if synthesize_siblings:
        for a, b in combinations(children, 2):
            _save_relationship(
                store,
                Relationship(type=RelationshipType.SIBLING, persons=[a, b]),
                family,
            )

    log.debug(
        "Family %s: %d parent(s), %d child(ren), %d event(s)",
        family,
        len(parents),
        len(children),
        events,
    )
    return events
