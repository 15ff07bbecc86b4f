from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol

from gedcom_import.core.exceptions import StoreError
from gedcom_import.identity.uuid_factory import deterministic_uuid, new_entity_id
from gedcom_import.registry.entities import (
    Event,
    Media,
    Person,
    Relationship,
    RelationshipType,
)

COLLECTIONS = ("persons", "events", "relationships", "media")


class EntityStore(Protocol):
    """
    Persistence boundary written to by the import pipeline.

    `create_*` assigns an id when the entity has none, stores it and
    returns it. Implementations signal a rejected write with StoreError.
    """

    def create_person(self, person: Person) -> Person: ...

    def create_event(self, event: Event) -> Event: ...

    def create_relationship(self, relationship: Relationship) -> Relationship: ...

    def create_media(self, media: Media) -> Media: ...

    def get_person(self, person_id: str) -> Optional[Person]: ...

    def get_media(self, media_id: str) -> Optional[Media]: ...

    def add_media_to_person(self, person_id: str, media_id: str) -> None: ...

    def add_person_to_media(self, media_id: str, person_id: str) -> None: ...


@dataclass
class InMemoryStore:
    """
    Dict-backed EntityStore.

    With a `seed`, ids are derived from (seed, collection, sequence number)
    so two imports of the same file produce the same ids.
    """
    seed: Optional[str] = None
    people: Dict[str, Person] = field(default_factory=dict)
    event_records: Dict[str, Event] = field(default_factory=dict)
    relationship_records: Dict[str, Relationship] = field(default_factory=dict)
    media_records: Dict[str, Media] = field(default_factory=dict)
    _sequence: "itertools.count[int]" = field(default_factory=itertools.count, init=False, repr=False)

    def _new_id(self, collection: str) -> str:
        if self.seed is None:
            return new_entity_id()
        return deterministic_uuid(self.seed, collection, next(self._sequence))

    def _insert(self, table: Dict, collection: str, entity):
        if not entity.id:
            entity.id = self._new_id(collection)
        elif entity.id in table:
            raise StoreError(f"Duplicate {collection} id: {entity.id}")
        table[entity.id] = entity
        return entity

    # ---- writes ----

    def create_person(self, person: Person) -> Person:
        return self._insert(self.people, "persons", person)

    def create_event(self, event: Event) -> Event:
        for pid in event.persons:
            if pid not in self.people:
                raise StoreError(f"Event references unknown person {pid}")
        return self._insert(self.event_records, "events", event)

    def create_relationship(self, relationship: Relationship) -> Relationship:
        if len(relationship.persons) != 2:
            raise StoreError("A relationship links exactly two persons")
        for pid in relationship.persons:
            if pid not in self.people:
                raise StoreError(f"Relationship references unknown person {pid}")
        return self._insert(self.relationship_records, "relationships", relationship)

    def create_media(self, media: Media) -> Media:
        return self._insert(self.media_records, "media", media)

    def add_media_to_person(self, person_id: str, media_id: str) -> None:
        person = self.people.get(person_id)
        if person is None:
            raise StoreError(f"Unknown person {person_id}")
        person.media.add(media_id)

    def add_person_to_media(self, media_id: str, person_id: str) -> None:
        media = self.media_records.get(media_id)
        if media is None:
            raise StoreError(f"Unknown media {media_id}")
        media.persons.add(person_id)

    def clear(self, collections: Optional[Iterable[str]] = None) -> None:
        """Empty the given collections (default: all of them)."""
        targets = list(collections) if collections is not None else list(COLLECTIONS)
        tables = {
            "persons": self.people,
            "events": self.event_records,
            "relationships": self.relationship_records,
            "media": self.media_records,
        }
        for name in targets:
            if name not in tables:
                raise ValueError(f"Unknown collection: {name!r}")
            tables[name].clear()

    # ---- reads ----

    def get_person(self, person_id: str) -> Optional[Person]:
        return self.people.get(person_id)

    def get_event(self, event_id: str) -> Optional[Event]:
        return self.event_records.get(event_id)

    def get_media(self, media_id: str) -> Optional[Media]:
        return self.media_records.get(media_id)

    def persons(self) -> List[Person]:
        return list(self.people.values())

    def events(self) -> List[Event]:
        return list(self.event_records.values())

    def relationships(self) -> List[Relationship]:
        return list(self.relationship_records.values())

    def media(self) -> List[Media]:
        return list(self.media_records.values())

    def find_person_by_source_id(self, source_id: str) -> Optional[Person]:
        for person in self.people.values():
            if person.source_id == source_id:
                return person
        return None

    def relationships_for(
        self,
        person_id: str,
        type: Optional[RelationshipType] = None,
    ) -> List[Relationship]:
        return [
            r
            for r in self.relationship_records.values()
            if person_id in r.persons and (type is None or r.type == type)
        ]

    def events_for(self, person_id: str) -> List[Event]:
        return [e for e in self.event_records.values() if person_id in e.persons]
