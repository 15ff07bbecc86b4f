# tests/test_identity.py

from __future__ import annotations

import uuid

import pytest

from gedcom_import.identity import deterministic_uuid, new_entity_id, normalize_pointer


def test_deterministic_uuid_is_stable_and_uuid_shaped():
    a = deterministic_uuid("seed", "persons", 0)
    assert a == deterministic_uuid("seed", "persons", 0)
    assert a != deterministic_uuid("seed", "persons", 1)
    uuid.UUID(a)


def test_new_entity_id_is_random():
    assert new_entity_id() != new_entity_id()


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("@I1@", "@I1@"),
        (" @i1@ ", "@I1@"),
        ("I1", "@I1@"),
        ("", None),
        ("@@", None),
        (None, None),
    ],
)
def test_normalize_pointer(raw, expected):
    assert normalize_pointer(raw) == expected
