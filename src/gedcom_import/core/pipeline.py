from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Union

from gedcom_import.config import GPConfig, get_config
from gedcom_import.core.context import ImportContext
from gedcom_import.core.exceptions import ParseExecutionError, ValidationError
from gedcom_import.core.stats import ImportState, ImportStats
from gedcom_import.extraction import extract_events_for_person, extract_person
from gedcom_import.identity.uuid_factory import normalize_pointer
from gedcom_import.loader import GedcomSyntaxError, GEDCOMStructureError, parse_gedcom_file
from gedcom_import.logging import get_logger
from gedcom_import.media import extract_media_objects, link_media_objects
from gedcom_import.registry.store import EntityStore, InMemoryStore
from gedcom_import.relationships import process_family
from gedcom_import.verification import verify_family_references


class ImportPipeline:
    """
    Runs one GEDCOM import against an entity store.

    Phases run strictly in order, each finishing before the next starts:

        ParsingFile -> ExtractingMedia -> ExtractingIndividuals
        -> ExtractingFamilies -> VerifyingReferences -> LinkingMedia
        -> Complete

    Individual and family failures become entries in ``stats.errors``;
    only an unreadable file or malformed parse result raises (state
    Failed).
    """

    def __init__(
        self,
        store: Optional[EntityStore] = None,
        config: Optional[GPConfig] = None,
        logger: Any = None,
    ):
        self.store = store if store is not None else InMemoryStore()
        self.config = config or get_config()
        self.log = logger or get_logger(__name__)
        self.ctx = self._new_context()

    def _new_context(self, input_path: Optional[str] = None) -> ImportContext:
        return ImportContext(
            config=self.config,
            logger=self.log,
            store=self.store,
            input_path=input_path,
        )

    @property
    def state(self) -> ImportState:
        return self.ctx.state

    @property
    def history(self) -> List[ImportState]:
        return list(self.ctx.history)

    # ------------------------------------------------------------------ #
    # Entry points
    # ------------------------------------------------------------------ #

    def run_file(self, path: Union[str, Path]) -> ImportStats:
        self.ctx = self._new_context(str(path))
        self.log.info("Import starting: %s", path)
        self.ctx.enter(ImportState.PARSING_FILE)

        try:
            records = parse_gedcom_file(path, strict=self.config.strict)
        except (OSError, GedcomSyntaxError, GEDCOMStructureError) as exc:
            self.ctx.enter(ImportState.FAILED)
            self.log.exception("Could not parse %s", path)
            raise ParseExecutionError(f"Failed to parse GEDCOM file: {exc}") from exc

        return self._run(records)

    def run_records(self, records: Any) -> ImportStats:
        self.ctx = self._new_context()
        self.log.info("Import starting from parsed records")
        return self._run(records)

    # ------------------------------------------------------------------ #
    # Phases
    # ------------------------------------------------------------------ #

    def _run(self, records: Any) -> ImportStats:
        ctx = self.ctx

        if not isinstance(records, list):
            ctx.enter(ImportState.FAILED)
            self.log.error("Parsed GEDCOM data is %s, not a list", type(records).__name__)
            raise ValidationError("GEDCOM data is not a list")

        try:
            ctx.enter(ImportState.EXTRACTING_MEDIA)
            ctx.media_map = extract_media_objects(records, self.store)
            ctx.stats.media = len(ctx.media_map)

            ctx.enter(ImportState.EXTRACTING_INDIVIDUALS)
            self._extract_individuals(records)

            ctx.enter(ImportState.EXTRACTING_FAMILIES)
            self._extract_families(records)

            ctx.enter(ImportState.VERIFYING_REFERENCES)
            verify_family_references(ctx.id_map, ctx.family_set, self.store, ctx.stats)

            ctx.enter(ImportState.LINKING_MEDIA)
            ctx.stats.media += link_media_objects(records, ctx.id_map, ctx.media_map, self.store)
        except Exception as exc:
            ctx.enter(ImportState.FAILED)
            self.log.exception("Import aborted")
            raise ParseExecutionError(f"Failed to import GEDCOM data: {exc}") from exc

        ctx.enter(ImportState.COMPLETE)
        s = ctx.stats
        self.log.info(
            "Import complete (INDI=%d, FAM=%d, EVEN=%d, OBJE=%d, errors=%d, warnings=%d)",
            s.individuals,
            s.families,
            s.events,
            s.media,
            len(s.errors),
            len(s.warnings),
        )
        return s

    def _extract_individuals(self, records: List[Any]) -> None:
        ctx = self.ctx

        for record in records:
            if record.tag != "INDI":
                continue

            xref = normalize_pointer(record.pointer)
            if not xref:
                self.log.warning("Skipping INDI record without xref (line %d)", record.lineno)
                continue

            try:
                person = extract_person(record, self.store)
            except Exception as exc:
                message = f"Error importing individual {record.pointer}: {exc}"
                self.log.error(message)
                ctx.stats.add_error(message)
                continue

            if xref in ctx.id_map:
                ctx.stats.add_warning(f"Duplicate individual xref {record.pointer}; later record wins")
            ctx.id_map[xref] = person.id
            ctx.stats.individuals += 1
            ctx.stats.events += extract_events_for_person(record, person.id, self.store)

    def _extract_families(self, records: List[Any]) -> None:
        ctx = self.ctx
        child_warnings = ctx.stats if self.config.record_child_warnings else None

        for record in records:
            if record.tag != "FAM":
                continue

            xref = normalize_pointer(record.pointer)
            if xref:
                ctx.family_set.add(xref)

            try:
                ctx.stats.events += process_family(
                    record,
                    ctx.id_map,
                    self.store,
                    stats=child_warnings,
                    synthesize_siblings=self.config.synthesize_siblings,
                )
            except Exception as exc:
                message = f"Error importing family {record.pointer}: {exc}"
                self.log.error(message)
                ctx.stats.add_error(message)
                continue

            ctx.stats.families += 1


def import_file(
    path: Union[str, Path],
    store: Optional[EntityStore] = None,
    config: Optional[GPConfig] = None,
) -> ImportStats:
    """Import a GEDCOM file into `store` (a fresh InMemoryStore by default)."""
    return ImportPipeline(store=store, config=config).run_file(path)


def import_records(
    records: Any,
    store: Optional[EntityStore] = None,
    config: Optional[GPConfig] = None,
) -> ImportStats:
    """Import already-parsed top-level records."""
    return ImportPipeline(store=store, config=config).run_records(records)
