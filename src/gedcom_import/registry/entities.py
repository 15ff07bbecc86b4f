from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Set


# -----------------------------
# Enumerations
# -----------------------------

class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    OTHER = "O"
    UNKNOWN = "U"

    @classmethod
    def from_gedcom(cls, value: Optional[str]) -> "Gender":
        v = (value or "").strip().upper()[:1]
        for g in cls:
            if g.value == v:
                return g
        return cls.UNKNOWN


class RelationshipType(str, Enum):
    SPOUSE = "Spouse"
    PARENT_CHILD = "Parent-Child"
    SIBLING = "Sibling"


class EventType(str, Enum):
    WORK = "Work"
    EDUCATION = "Education"
    RESIDENCE = "Residence"
    MILITARY = "Military"
    MEDICAL = "Medical"
    TRAVEL = "Travel"
    ACHIEVEMENT = "Achievement"
    CUSTOM = "Custom"
    MARRIAGE = "Marriage"
    DIVORCE = "Divorce"
    ENGAGEMENT = "Engagement"
    SEPARATION = "Separation"
    ANNULMENT = "Annulment"
    ADOPTION = "Adoption"
    BAPTISM = "Baptism"
    BURIAL = "Burial"
    BIRTH = "Birth"
    DEATH = "Death"
    RETIREMENT = "Retirement"
    GRADUATION = "Graduation"
    CENSUS = "Census"
    CONTACT = "Contact"
    RESEARCH_NOTE = "ResearchNote"
    IDENTITY = "Identity"
    LEGAL = "Legal"
    TECHNICAL = "Technical"


class MediaType(str, Enum):
    PHOTO = "Photo"
    DOCUMENT = "Document"
    AUDIO = "Audio"
    VIDEO = "Video"


# -----------------------------
# Value objects
# -----------------------------

@dataclass(slots=True)
class PersonName:
    given: str = ""
    surname: str = ""

    @property
    def full(self) -> str:
        return " ".join(p for p in (self.given, self.surname) if p)


@dataclass(slots=True)
class LifeEvent:
    """Birth or death summary kept on the Person itself."""
    date: Optional[date] = None
    place: str = ""
    notes: str = ""


@dataclass(slots=True)
class EventDate:
    start: Optional[date] = None
    end: Optional[date] = None
    is_range: bool = False


@dataclass(slots=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(slots=True)
class EventLocation:
    place: str = ""
    coordinates: Optional[Coordinates] = None


@dataclass(slots=True)
class MediaFile:
    path: str
    original_name: str = ""
    mime_type: str = "application/octet-stream"


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class Person:
    id: str = ""
    names: List[PersonName] = field(default_factory=list)
    gender: Gender = Gender.UNKNOWN
    birth: Optional[LifeEvent] = None
    death: Optional[LifeEvent] = None
    notes: str = ""
    source_id: Optional[str] = None
    custom_fields: Dict[str, Any] = field(default_factory=dict)
    media: Set[str] = field(default_factory=set)


@dataclass(slots=True)
class Relationship:
    type: RelationshipType
    persons: List[str]
    id: str = ""
    date: Optional[EventDate] = None
    notes: str = ""


@dataclass(slots=True)
class Event:
    type: EventType
    title: str
    persons: List[str] = field(default_factory=list)
    id: str = ""
    description: str = ""
    date: EventDate = field(default_factory=EventDate)
    location: EventLocation = field(default_factory=EventLocation)
    notes: str = ""
    sources: List[str] = field(default_factory=list)
    media: Set[str] = field(default_factory=set)
    custom_fields: Dict[str, Any] = field(default_factory=dict)

    @property
    def person(self) -> Optional[str]:
        """Primary participant."""
        return self.persons[0] if self.persons else None


@dataclass(slots=True)
class Media:
    type: MediaType
    title: str
    file: MediaFile
    id: str = ""
    notes: str = ""
    persons: Set[str] = field(default_factory=set)
    events: Set[str] = field(default_factory=set)
