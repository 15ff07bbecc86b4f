from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_import.cli.utils import load_tree
from gedcom_import.loader import GedcomSyntaxError, GEDCOMStructureError

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on malformed lines instead of skipping them",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show parse timing",
    ),
):
    """
    Count top-level GEDCOM records by tag (no import).
    """
    try:
        tree = load_tree(gedcom, strict=strict, verbose=verbose)
    except (GedcomSyntaxError, GEDCOMStructureError) as exc:
        console.print(f"[red]Parse failed:[/red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title="GEDCOM Records")
    table.add_column("Tag", style="bold")
    table.add_column("Count", justify="right")

    for tag, count in tree.tag_counts().items():
        table.add_row(tag, str(count))

    console.print(table)
