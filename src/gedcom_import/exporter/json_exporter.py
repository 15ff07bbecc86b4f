"""
json_exporter.py
JSON dump of an InMemoryStore after an import.

- dataclasses become dicts (recursively)
- dates become ISO strings, enums their values
- sets become sorted lists so output is stable
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from gedcom_import.core.stats import ImportStats
from gedcom_import.logging import get_logger
from gedcom_import.registry.store import InMemoryStore

log = get_logger(__name__)


def _to_json_compatible(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if isinstance(obj, date):
        return obj.isoformat()

    # fields() rather than asdict() so sets survive to be sorted below
    if is_dataclass(obj):
        return {f.name: _to_json_compatible(getattr(obj, f.name)) for f in fields(obj)}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (set, frozenset)):
        return sorted(_to_json_compatible(v) for v in obj)

    if isinstance(obj, (list, tuple)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def build_store_dict(store: InMemoryStore, stats: Optional[ImportStats] = None) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "persons": [_to_json_compatible(p) for p in store.persons()],
        "relationships": [_to_json_compatible(r) for r in store.relationships()],
        "events": [_to_json_compatible(e) for e in store.events()],
        "media": [_to_json_compatible(m) for m in store.media()],
    }
    if stats is not None:
        data["stats"] = stats.to_dict()
    return data


def serialize_store_to_json_string(
    store: InMemoryStore,
    stats: Optional[ImportStats] = None,
    indent: Optional[int] = 2,
) -> str:
    return json.dumps(build_store_dict(store, stats), indent=indent, ensure_ascii=False)


def export_store_json(
    store: InMemoryStore,
    output_path: str | Path,
    stats: Optional[ImportStats] = None,
    indent: Optional[int] = 2,
) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting store JSON to: %s (persons=%d, relationships=%d, events=%d, media=%d)",
        output_path,
        len(store.people),
        len(store.relationship_records),
        len(store.event_records),
        len(store.media_records),
    )

    with output_path.open("w", encoding="utf-8") as f:
        f.write(serialize_store_to_json_string(store, stats, indent=indent))

    log.info("JSON export complete. size=%d bytes", output_path.stat().st_size)
    return output_path
