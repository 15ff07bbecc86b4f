# src/gedcom_import/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

# <project_root>/src/gedcom_import/utils/pathing.py -> parents[3] is the root
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """Directory holding src/, tests/ and config/."""
    return _PROJECT_ROOT


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """
    Absolute path to a file under tests/data/.

        tests_data_path("minimal_family.ged")
    """
    return _PROJECT_ROOT / "tests" / "data" / Path(*parts)
