"""
gedcom_import: load GEDCOM genealogy files into persons, relationships,
events and media.

    from gedcom_import import InMemoryStore, import_file

    store = InMemoryStore()
    stats = import_file("family.ged", store)
"""

from __future__ import annotations

from gedcom_import.core.exceptions import ParseExecutionError, PipelineError, ValidationError
from gedcom_import.core.pipeline import ImportPipeline, import_file, import_records
from gedcom_import.core.stats import ImportState, ImportStats
from gedcom_import.registry.store import InMemoryStore

__version__ = "0.3.0"

__all__ = [
    "ImportPipeline",
    "ImportState",
    "ImportStats",
    "InMemoryStore",
    "ParseExecutionError",
    "PipelineError",
    "ValidationError",
    "import_file",
    "import_records",
]
