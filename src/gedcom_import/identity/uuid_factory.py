# src/gedcom_import/identity/uuid_factory.py
from __future__ import annotations

import hashlib
import uuid
from typing import Optional


def _stable_hash(key: str) -> str:
    # SHA1 is only used as a fingerprint here, not for security.
    return hashlib.sha1(key.encode("utf-8")).hexdigest()


def _uuid_from_key(key: str) -> str:
    """SHA1 of `key` formatted as 8-4-4-4-12. Same key, same id."""
    h = _stable_hash(key)[:32]
    return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"


def deterministic_uuid(*parts: object) -> str:
    key = "|".join("" if p is None else str(p) for p in parts)
    return _uuid_from_key(key)


def new_entity_id() -> str:
    """Fresh random id for a stored entity."""
    return str(uuid.uuid4())


def normalize_pointer(pointer: Optional[str]) -> Optional[str]:
    """
    Canonical form of a GEDCOM cross-reference:
      - strip whitespace
      - uppercase
      - wrapped in @...@
    """
    if pointer is None:
        return None

    p = pointer.strip().upper()
    if not p or p == "@@":
        return None

    if not p.startswith("@"):
        p = "@" + p
    if not p.endswith("@"):
        p = p + "@"
    return p


__all__ = [
    "deterministic_uuid",
    "new_entity_id",
    "normalize_pointer",
]
