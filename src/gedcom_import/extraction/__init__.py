"""
Entity extraction: INDI records to Persons and their Events.
"""

from __future__ import annotations

from .events import EVENT_TAGS, build_event, extract_events_for_person
from .person import build_person, extract_person

__all__ = [
    "EVENT_TAGS",
    "build_event",
    "build_person",
    "extract_events_for_person",
    "extract_person",
]
