from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from gedcom_import.config import GPConfig, load_config
from gedcom_import.core.stats import ImportStats
from gedcom_import.loader import GEDCOMTree, build_tree, tokenize_file

console = Console()


def cli_config(strict: bool = False) -> GPConfig:
    """Fresh config with command-line overrides applied."""
    cfg = load_config()
    if strict:
        cfg.loader["strict"] = True
    return cfg


def load_tree(path: Path, *, strict: bool = False, verbose: bool = False) -> GEDCOMTree:
    """Parse a GEDCOM file without importing it."""
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()
    tree = build_tree(tokenize_file(path, strict=strict), strict=strict)

    if verbose:
        console.log(f"Parsed {len(tree)} records in {time.perf_counter() - t0:.2f}s")
    return tree


def stats_table(stats: ImportStats, title: Optional[str] = None) -> Table:
    table = Table(title=title or "Import Summary")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(stats.individuals))
    table.add_row("Families", str(stats.families))
    table.add_row("Events", str(stats.events))
    table.add_row("Media", str(stats.media))
    table.add_row("Errors", str(len(stats.errors)), style="red" if stats.errors else None)
    table.add_row("Warnings", str(len(stats.warnings)), style="yellow" if stats.warnings else None)
    return table
