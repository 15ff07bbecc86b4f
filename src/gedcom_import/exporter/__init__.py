"""
Exporter package.

JSON dump of imported entities, used by the CLI ``--json`` option.
"""

from __future__ import annotations

from .json_exporter import build_store_dict, export_store_json, serialize_store_to_json_string

__all__ = ["build_store_dict", "export_store_json", "serialize_store_to_json_string"]
