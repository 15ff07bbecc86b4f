"""
Domain model and entity store written to by the import pipeline.
"""

from __future__ import annotations

from .entities import (
    Coordinates,
    Event,
    EventDate,
    EventLocation,
    EventType,
    Gender,
    LifeEvent,
    Media,
    MediaFile,
    MediaType,
    Person,
    PersonName,
    Relationship,
    RelationshipType,
)
from .store import EntityStore, InMemoryStore

__all__ = [
    "Coordinates",
    "EntityStore",
    "Event",
    "EventDate",
    "EventLocation",
    "EventType",
    "Gender",
    "InMemoryStore",
    "LifeEvent",
    "Media",
    "MediaFile",
    "MediaType",
    "Person",
    "PersonName",
    "Relationship",
    "RelationshipType",
]
