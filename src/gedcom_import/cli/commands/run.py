from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_import.cli.utils import cli_config, stats_table
from gedcom_import.core.exceptions import PipelineError
from gedcom_import.core.pipeline import ImportPipeline
from gedcom_import.exporter import export_store_json
from gedcom_import.logging import set_console_level
from gedcom_import.registry.store import InMemoryStore

console = Console()


def run_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    json_out: Optional[Path] = typer.Option(
        None,
        "--json",
        "-j",
        help="Write imported entities and statistics as JSON",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on malformed lines instead of skipping them",
    ),
    seed: Optional[str] = typer.Option(
        None,
        "--seed",
        help="Derive entity ids from this seed (reproducible output)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
):
    """
    Import a GEDCOM file and report what was created.
    """
    if verbose:
        set_console_level(logging.DEBUG)

    store = InMemoryStore(seed=seed)
    pipeline = ImportPipeline(store=store, config=cli_config(strict=strict))

    try:
        stats = pipeline.run_file(gedcom)
    except PipelineError as exc:
        console.print(f"[red]Import failed:[/red] {exc}")
        raise typer.Exit(code=1)

    console.print(stats_table(stats, title=f"Import Summary: {gedcom.name}"))

    for message in stats.errors:
        console.print(f"[red]error[/red] {message}")
    for message in stats.warnings:
        console.print(f"[yellow]warning[/yellow] {message}")

    if json_out:
        export_store_json(store, json_out, stats=stats, indent=2 if pretty else None)
        if verbose:
            console.log(f"Wrote {json_out}")
