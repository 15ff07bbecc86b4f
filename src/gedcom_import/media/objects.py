from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from gedcom_import.extraction.common import collect_notes
from gedcom_import.identity.uuid_factory import normalize_pointer
from gedcom_import.loader import GEDCOMNode
from gedcom_import.logging import get_logger
from gedcom_import.media.types import determine_media_type, file_basename, resolve_mime_type
from gedcom_import.registry.entities import Media, MediaFile
from gedcom_import.registry.store import EntityStore

log = get_logger(__name__)


def find_file_and_form(obje: GEDCOMNode) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """
    Returns: (file_path, form, title)

    Supports both layouts:
      - 5.5.1: OBJE > FILE > FORM, TITL under FILE or OBJE
      - 5.5:   OBJE > FILE, FORM and TITL as siblings of FILE
    """
    file_node = obje.first_child("FILE")
    if file_node is None:
        return None, None, None

    path = (file_node.value or "").strip() or None
    form = file_node.child_value("FORM") or obje.child_value("FORM") or None
    title = file_node.child_value("TITL") or obje.child_value("TITL") or None
    return path, form, title


def build_media(obje: GEDCOMNode, persons: Optional[List[str]] = None) -> Media:
    """
    Unsaved Media from an OBJE structure (record or inline).

    Raises:
        ValueError: when there is no FILE value.
    """
    path, form, title = find_file_and_form(obje)
    if not path:
        raise ValueError(f"OBJE at line {obje.lineno} has no FILE")

    mime_type = resolve_mime_type(form, path)
    return Media(
        type=determine_media_type(path, mime_type),
        title=title or file_basename(path),
        file=MediaFile(path=path, original_name=file_basename(path), mime_type=mime_type),
        notes=collect_notes(obje),
        persons=set(persons or []),
    )


def extract_media_objects(records: List[GEDCOMNode], store: EntityStore) -> Dict[str, str]:
    """
    Create a Media for every top-level OBJE record.

    Returns:
        Normalized xref -> media id, for the media linker.
    """
    media_map: Dict[str, str] = {}

    for record in records:
        if record.tag != "OBJE":
            continue

        xref = normalize_pointer(record.pointer)
        if not xref:
            log.warning("Skipping OBJE record without xref (line %d)", record.lineno)
            continue

        try:
            media = store.create_media(build_media(record))
        except Exception as exc:
            log.warning("Skipping media object %s: %s", record.pointer, exc)
            continue

        media_map[xref] = media.id

    log.info("Extracted %d media objects", len(media_map))
    return media_map
