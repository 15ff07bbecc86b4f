# src/gedcom_import/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from gedcom_import.logging import get_logger

log = get_logger(__name__)

BOM = "\ufeff"

# <level> [<xref>] <tag> [<value>]; exactly one space separates tag and
# value so CONC payloads keep their leading blanks.
LINE_RE = re.compile(
    r"^[ \t]*(?P<level>\d+)[ \t]+"
    r"(?:(?P<pointer>@[^@\s]+@)[ \t]+)?"
    r"(?P<tag>[A-Za-z0-9_]+)"
    r"(?: (?P<value>.*))?$"
)


@dataclass(frozen=True)
class Token:
    """
    One GEDCOM line.

    Attributes:
        lineno: 1-based line number in the source file.
        level: GEDCOM level (0 for records).
        pointer: Cross-reference id declared on the line ("@I1@") or None.
        tag: Upper-cased GEDCOM tag, e.g. "INDI", "NAME", "CONT".
        value: Line payload, possibly empty. A reference such as the
            "@I1@" of "1 HUSB @I1@" stays here, not in `pointer`.
        raw: Original line without its line terminator.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line does not follow <level> [<xref>] <tag> [<value>]."""


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "    2 DATE 12 JUN 1950"   (indented exports)
    """
    raw = line.rstrip("\r\n")
    text = raw[1:] if lineno <= 1 and raw.startswith(BOM) else raw

    if not text.strip():
        raise GedcomSyntaxError(f"Line {lineno}: empty line")

    m = LINE_RE.match(text)
    if m is None:
        raise GedcomSyntaxError(
            f"Line {lineno}: expected '<level> [<xref>] <tag> [<value>]', got {raw!r}"
        )

    return Token(
        lineno=lineno,
        level=int(m.group("level")),
        pointer=m.group("pointer"),
        tag=m.group("tag").upper(),
        value=m.group("value") or "",
        raw=raw,
    )


def tokenize_file(path: Union[str, Path], strict: bool = False) -> Iterator[Token]:
    """
    Yield a Token for every non-blank line of a GEDCOM file.

    Undecodable bytes are replaced rather than aborting the read. With
    `strict` False, malformed lines are logged and skipped.

    Raises:
        FileNotFoundError: if `path` is not a file.
        GedcomSyntaxError: on a malformed line in strict mode.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    skipped = 0
    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip() or line.strip() == BOM:
                continue
            try:
                yield tokenize_line(line, lineno=lineno)
            except GedcomSyntaxError as exc:
                if strict:
                    raise
                skipped += 1
                log.warning("Skipping malformed line: %s", exc)

    if skipped:
        log.info("%s: skipped %d malformed line(s)", file_path.name, skipped)
