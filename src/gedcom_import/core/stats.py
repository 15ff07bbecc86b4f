from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class ImportState(str, Enum):
    NOT_STARTED = "NotStarted"
    PARSING_FILE = "ParsingFile"
    EXTRACTING_MEDIA = "ExtractingMedia"
    EXTRACTING_INDIVIDUALS = "ExtractingIndividuals"
    EXTRACTING_FAMILIES = "ExtractingFamilies"
    VERIFYING_REFERENCES = "VerifyingReferences"
    LINKING_MEDIA = "LinkingMedia"
    COMPLETE = "Complete"
    FAILED = "Failed"

    @property
    def terminal(self) -> bool:
        return self in (ImportState.COMPLETE, ImportState.FAILED)


@dataclass
class ImportStats:
    """
    Result of one import run.

    Counts cover records that were created. `errors` holds one entry per
    individual or family that could not be imported; `warnings` holds
    data-quality findings that never block the import.
    """

    individuals: int = 0
    families: int = 0
    events: int = 0
    media: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "individuals": self.individuals,
            "families": self.families,
            "events": self.events,
            "media": self.media,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
