"""
Import orchestration: context, statistics, exceptions and the pipeline.
"""

from __future__ import annotations

from .exceptions import ParseExecutionError, PipelineError, StoreError, ValidationError
from .stats import ImportState, ImportStats

__all__ = [
    "ImportState",
    "ImportStats",
    "ParseExecutionError",
    "PipelineError",
    "StoreError",
    "ValidationError",
]
