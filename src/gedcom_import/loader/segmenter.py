# src/gedcom_import/loader/segmenter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from gedcom_import.logging import get_logger

from .tokenizer import Token

log = get_logger(__name__)


@dataclass
class GEDCOMNode:
    """
    A node of the GEDCOM tag tree.

    Attributes:
        level: GEDCOM level number (0 for records, >0 for substructures).
        tag: The GEDCOM tag (INDI, FAM, BIRT, DATE, NOTE, ...).
        value: The raw line value (string, may be empty).
        pointer: Cross-reference id declared on a record, e.g. "@I1@".
        lineno: Line number in the source file.
        children: Substructures in file order.
    """

    level: int
    tag: str
    value: Optional[str] = ""
    pointer: Optional[str] = None
    lineno: int = 0
    children: List["GEDCOMNode"] = field(default_factory=list)

    def add_child(self, child: "GEDCOMNode") -> None:
        self.children.append(child)

    # ---------- Typed accessors ----------

    def children_of(self, tag: str) -> List["GEDCOMNode"]:
        """Return all direct children with the given tag, in file order."""
        return [c for c in self.children if c.tag == tag]

    def first_child(self, tag: str) -> Optional["GEDCOMNode"]:
        """Return the first direct child with the given tag, or None."""
        for c in self.children:
            if c.tag == tag:
                return c
        return None

    def child_value(self, tag: str, default: str = "") -> str:
        """Return the stripped value of the first `tag` child, or `default`."""
        child = self.first_child(tag)
        if child is None or not child.value:
            return default
        return child.value.strip()

    @property
    def text(self) -> str:
        """Value with any unreconstructed CONC/CONT children folded in."""
        out = self.value or ""
        for c in self.children:
            if c.tag == "CONC":
                out += c.value or ""
            elif c.tag == "CONT":
                out += "\n" + (c.value or "")
        return out

    @property
    def ref(self) -> Optional[str]:
        """
        The cross-reference this node points at.

        "1 HUSB @I1@" carries the xref in its value; hand-built trees may
        carry it in `pointer` instead.
        """
        raw = (self.value or "").strip() or (self.pointer or "").strip()
        return raw or None

    def __repr__(self) -> str:
        ptr = f" {self.pointer}" if self.pointer else ""
        return f"<GEDCOMNode {self.level}{ptr} {self.tag}: {self.value!r}>"


class GEDCOMStructureError(Exception):
    """Raised when the level structure of a GEDCOM file is broken."""


def segment_records(tokens: List[Token], strict: bool = False) -> List[GEDCOMNode]:
    """
    Convert a flat list of Tokens into a list of level-0 record trees.

    Rules:
        - Level 0 tokens start a new record.
        - A level N token becomes a child of the nearest preceding node
          at level N-1.
        - A level may not jump by more than +1. In strict mode this raises
          GEDCOMStructureError; otherwise the node is attached to the
          deepest open node.
        - Lines before the first level-0 record have no parent and are
          dropped (or raise in strict mode).
    """
    if not tokens:
        return []

    root_nodes: List[GEDCOMNode] = []
    stack: List[GEDCOMNode] = []  # stack[level] = last node at that level

    for tok in tokens:
        node = GEDCOMNode(
            level=tok.level,
            tag=tok.tag,
            value=tok.value,
            pointer=tok.pointer,
            lineno=tok.lineno,
        )

        if tok.level == 0:
            root_nodes.append(node)
            stack = [node]
            continue

        if not stack:
            if strict:
                raise GEDCOMStructureError(
                    f"Line {tok.lineno}: level {tok.level} line before any record"
                )
            log.warning("Line %d: dropping orphan %s line before first record", tok.lineno, tok.tag)
            continue

        level = tok.level
        if level > len(stack):
            if strict:
                raise GEDCOMStructureError(
                    f"Line {tok.lineno}: Level jumped from {len(stack)-1} to {tok.level} without intermediate parent"
                )
            log.warning(
                "Line %d: level jump %d -> %d, attaching %s to nearest open parent",
                tok.lineno,
                len(stack) - 1,
                tok.level,
                tok.tag,
            )
            level = len(stack)
            node.level = level

        stack = stack[:level]
        stack[level - 1].add_child(node)
        stack.append(node)

    return root_nodes
