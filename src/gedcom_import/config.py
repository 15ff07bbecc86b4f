import os
from pathlib import Path

import yaml

from gedcom_import.utils.pathing import project_root

CONFIG_ENV_VAR = "GEDCOM_IMPORT_CONFIG"
CONFIG_PATH = project_root() / "config" / "gedcom_import.yml"

DEFAULTS = {
    "paths": {},
    "loader": {"strict": False},
    "importer": {
        "synthesize_siblings": True,
        "record_child_warnings": True,
    },
    "logging": {
        "level": "INFO",
        "dir": "logs",
        "file": "gedcom_import.log",
        "rotate": False,
        "to_file": True,
    },
    "debug": False,
}


def _merge(base, override):
    out = dict(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


class GPConfig:
    def __init__(self, data):
        data = _merge(DEFAULTS, data)
        self.paths = data.get("paths", {})
        self.loader = data.get("loader", {})
        self.importer = data.get("importer", {})
        self.logging = data.get("logging", {})
        self.debug = bool(data.get("debug", False))

    @property
    def strict(self) -> bool:
        return bool(self.loader.get("strict", False))

    @property
    def synthesize_siblings(self) -> bool:
        return bool(self.importer.get("synthesize_siblings", True))

    @property
    def record_child_warnings(self) -> bool:
        return bool(self.importer.get("record_child_warnings", True))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path=None) -> 'GPConfig':
    """Load the YAML config; a missing file gives the built-in defaults."""
    path = Path(path) if path else config_path()
    if not path.exists():
        return GPConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GPConfig(data)


_config_cache = None


def get_config() -> 'GPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
