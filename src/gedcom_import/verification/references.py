from __future__ import annotations

from typing import Dict, Set

from gedcom_import.core.stats import ImportStats
from gedcom_import.identity.uuid_factory import normalize_pointer
from gedcom_import.logging import get_logger
from gedcom_import.registry.store import EntityStore

log = get_logger(__name__)

_ROLES = (
    ("childInFamilies", "child"),
    ("spouseInFamilies", "spouse"),
)


def verify_family_references(
    id_map: Dict[str, str],
    family_set: Set[str],
    store: EntityStore,
    stats: ImportStats,
) -> int:
    """
    Warn about FAMC/FAMS references to families that are not in the file.

    Only reads persons; appends one warning per dangling reference.

    Returns:
        Number of warnings added.
    """
    added = 0

    for person_id in id_map.values():
        person = store.get_person(person_id)
        if person is None:
            continue

        for key, role in _ROLES:
            for family in person.custom_fields.get(key) or []:
                if normalize_pointer(family) in family_set:
                    continue
                message = (
                    f"Person {person.id} ({person.source_id}) references "
                    f"non-existent family {family} as {role}"
                )
                log.warning(message)
                stats.add_warning(message)
                added += 1

    return added
