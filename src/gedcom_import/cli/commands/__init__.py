"""
CLI command modules for gedcom_import.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_import.cli.commands.run import run_command
from gedcom_import.cli.commands.stats import stats_command

__all__ = [
    "run_command",
    "stats_command",
]
