"""
Media objects: type/MIME inference, OBJE record extraction and linking.
"""

from __future__ import annotations

from .linker import link_media_objects
from .objects import build_media, extract_media_objects
from .types import determine_media_type, mime_type_for_path, resolve_mime_type

__all__ = [
    "build_media",
    "determine_media_type",
    "extract_media_objects",
    "link_media_objects",
    "mime_type_for_path",
    "resolve_mime_type",
]
