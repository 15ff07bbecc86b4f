# src/gedcom_import/loader/tree_builder.py

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Union

from gedcom_import.logging import get_logger

from .segmenter import GEDCOMNode, segment_records
from .tokenizer import Token, tokenize_file
from .value_reconstructor import reconstruct_values

log = get_logger(__name__)


@dataclass
class GEDCOMTree:
    """
    A parsed GEDCOM file: the list of level-0 records.

    Attributes:
        records:
            Level-0 GEDCOMNode instances (HEAD, INDI, FAM, OBJE, SOUR,
            NOTE, TRLR, ...), in file order.
    """

    records: List[GEDCOMNode]

    def __len__(self) -> int:
        return len(self.records)

    def tag_counts(self) -> Dict[str, int]:
        """Number of level-0 records per tag, most common first."""
        counts = Counter(rec.tag for rec in self.records if rec.tag)
        return dict(counts.most_common())

    def __repr__(self) -> str:
        return f"<GEDCOMTree records={len(self.records)}>"


def build_tree(tokens: Iterable[Token], strict: bool = False) -> GEDCOMTree:
    """
    tokens -> GEDCOMTree(records=[GEDCOMNode, ...])

    CONC/CONT continuation lines are folded into their parent values.
    """
    records = segment_records(list(tokens), strict=strict)
    reconstruct_values(records)
    return GEDCOMTree(records=records)


def parse_gedcom_file(path: Union[str, Path], strict: bool = False) -> List[GEDCOMNode]:
    """
    Read a GEDCOM file and return its top-level records.

    Raises:
        FileNotFoundError: if the file does not exist.
        GedcomSyntaxError / GEDCOMStructureError: in strict mode only.
    """
    tree = build_tree(tokenize_file(path, strict=strict), strict=strict)
    log.debug("Parsed %s: %d top-level records", path, len(tree))
    return tree.records
