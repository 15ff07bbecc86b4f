from __future__ import annotations

from typing import Dict, List

from gedcom_import.core.exceptions import StoreError
from gedcom_import.identity.uuid_factory import normalize_pointer
from gedcom_import.loader import GEDCOMNode
from gedcom_import.logging import get_logger
from gedcom_import.media.objects import build_media
from gedcom_import.registry.store import EntityStore

log = get_logger(__name__)


def _link_reference(store: EntityStore, person_id: str, media_id: str) -> None:
    # neither side is written unless both ends exist
    if store.get_person(person_id) is None:
        raise StoreError(f"Unknown person {person_id}")
    if store.get_media(media_id) is None:
        raise StoreError(f"Unknown media {media_id}")
    store.add_media_to_person(person_id, media_id)
    store.add_person_to_media(media_id, person_id)


def link_media_objects(
    records: List[GEDCOMNode],
    id_map: Dict[str, str],
    media_map: Dict[str, str],
    store: EntityStore,
) -> int:
    """
    Attach OBJE references on individuals to their persons.

    Two shapes occur, often mixed in one file:
      - "1 OBJE @O1@": resolved through `media_map`; the person gains the
        media id and the media gains the person id (set semantics, so
        repeated links are harmless).
      - "1 OBJE" with FILE/FORM children: a new Media is created for
        that person on the spot.

    Each failing link is logged and skipped.

    Returns:
        Number of inline media records created.
    """
    created = 0

    for record in records:
        if record.tag != "INDI":
            continue
        person_id = id_map.get(normalize_pointer(record.pointer) or "")
        if person_id is None:
            continue

        for obje in record.children_of("OBJE"):
            ref = normalize_pointer(obje.ref) if obje.ref else None
            try:
                if ref and ref in media_map:
                    _link_reference(store, person_id, media_map[ref])
                elif obje.children:
                    media = store.create_media(build_media(obje, persons=[person_id]))
                    store.add_media_to_person(person_id, media.id)
                    created += 1
                else:
                    log.warning(
                        "Person %s (%s) references unknown media object %s",
                        person_id,
                        record.pointer,
                        obje.ref,
                    )
            except Exception as exc:
                log.warning(
                    "Could not link media (line %d) to person %s: %s",
                    obje.lineno,
                    person_id,
                    exc,
                )

    return created
