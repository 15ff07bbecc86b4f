from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from gedcom_import.core.stats import ImportState, ImportStats


@dataclass
class ImportContext:
    """
    State of one import run, threaded through every phase.

    The xref maps are written once per key and only read after the phase
    that fills them has finished.
    """

    config: Any
    logger: Any
    store: Any

    input_path: Optional[str] = None

    stats: ImportStats = field(default_factory=ImportStats)
    id_map: Dict[str, str] = field(default_factory=dict)
    media_map: Dict[str, str] = field(default_factory=dict)
    family_set: Set[str] = field(default_factory=set)

    state: ImportState = ImportState.NOT_STARTED
    history: List[ImportState] = field(default_factory=list)

    def enter(self, state: ImportState) -> None:
        self.logger.debug("Import state: %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)
