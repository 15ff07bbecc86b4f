"""
Small readers shared by the person, event, family and media extractors.

All of them work on GEDCOMNode accessors only and return plain values.
"""

from __future__ import annotations

import re
from typing import List, Optional

from gedcom_import.loader import GEDCOMNode
from gedcom_import.registry.entities import Coordinates, PersonName

NOTE_SEPARATOR = "\n\n"


def split_name(value: Optional[str]) -> PersonName:
    """
    "John Henry /Smith/" -> given "John Henry", surname "Smith".

    Text after the closing slash (suffixes) is dropped. Without a slash
    the whole value is the given name.
    """
    raw = (value or "").strip()
    if "/" not in raw:
        return PersonName(given=raw, surname="")

    parts = raw.split("/")
    return PersonName(given=parts[0].strip(), surname=parts[1].strip())


def collect_notes(node: Optional[GEDCOMNode]) -> str:
    """All NOTE children of `node`, continuation lines included, one blank line apart."""
    if node is None:
        return ""
    notes = [n.text.strip() for n in node.children_of("NOTE")]
    return NOTE_SEPARATOR.join(n for n in notes if n)


def source_citations(node: GEDCOMNode) -> List[str]:
    """SOUR children rendered as "<id>" or "<id> (<page>)"."""
    out: List[str] = []
    for sour in node.children_of("SOUR"):
        ident = sour.ref
        if not ident:
            continue
        page = sour.child_value("PAGE")
        out.append(f"{ident} ({page})" if page else ident)
    return out


def _parse_coord(raw: Optional[str]) -> Optional[float]:
    """'N51.5', 'W0.12', '-33.8' -> signed decimal degrees."""
    if not raw:
        return None
    s = raw.strip().upper()
    if not s:
        return None

    sign = 1.0
    if s[0] in "NSEW":
        if s[0] in "SW":
            sign = -1.0
        s = s[1:].strip()

    s = re.sub(r"[^\d.\-]+", "", s)
    if not s:
        return None
    try:
        return sign * float(s)
    except ValueError:
        return None


def extract_coordinates(node: GEDCOMNode) -> Optional[Coordinates]:
    """LATI/LONG from a MAP block under PLAC or directly under the event."""
    plac = node.first_child("PLAC")
    map_node = (plac.first_child("MAP") if plac else None) or node.first_child("MAP")
    if map_node is None:
        return None

    lat = _parse_coord(map_node.child_value("LATI"))
    lon = _parse_coord(map_node.child_value("LONG"))
    if lat is None or lon is None:
        return None
    return Coordinates(latitude=lat, longitude=lon)


def address_text(addr: GEDCOMNode) -> str:
    """
    Place text for an ADDR structure: a NOTE under ADDR wins, then the
    address lines, then CITY/STAE/POST/CTRY joined with commas.
    """
    note = addr.first_child("NOTE")
    if note is not None and note.text.strip():
        return note.text.strip()

    text = addr.text.strip()
    if text:
        return text

    parts = [addr.child_value(tag) for tag in ("CITY", "STAE", "POST", "CTRY")]
    return ", ".join(p for p in parts if p)
