from __future__ import annotations

from pathlib import PurePath
from typing import Dict, Optional

from gedcom_import.registry.entities import MediaType

DEFAULT_MIME_TYPE = "application/octet-stream"

EXTENSION_MEDIA_TYPES: Dict[str, MediaType] = {
    **dict.fromkeys((".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".tif", ".webp"), MediaType.PHOTO),
    **dict.fromkeys((".mp3", ".wav", ".ogg", ".m4a", ".flac"), MediaType.AUDIO),
    **dict.fromkeys((".mp4", ".avi", ".mov", ".wmv", ".flv", ".webm"), MediaType.VIDEO),
    **dict.fromkeys((".pdf", ".doc", ".docx", ".txt", ".rtf"), MediaType.DOCUMENT),
}

MIME_TYPES: Dict[str, str] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".tiff": "image/tiff",
    ".tif": "image/tiff",
    ".webp": "image/webp",
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".ogg": "audio/ogg",
    ".m4a": "audio/mp4",
    ".flac": "audio/flac",
    ".mp4": "video/mp4",
    ".avi": "video/x-msvideo",
    ".mov": "video/quicktime",
    ".wmv": "video/x-ms-wmv",
    ".flv": "video/x-flv",
    ".webm": "video/webm",
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".txt": "text/plain",
    ".rtf": "application/rtf",
}

_MIME_PREFIXES = (
    ("image/", MediaType.PHOTO),
    ("audio/", MediaType.AUDIO),
    ("video/", MediaType.VIDEO),
    ("application/", MediaType.DOCUMENT),
    ("text/", MediaType.DOCUMENT),
)


def _extension(path: Optional[str]) -> str:
    # GEDCOM files written on Windows use backslashes
    name = (path or "").replace("\\", "/")
    return PurePath(name).suffix.lower()


def file_basename(path: Optional[str]) -> str:
    return PurePath((path or "").replace("\\", "/")).name


def mime_type_for_path(path: Optional[str]) -> str:
    return MIME_TYPES.get(_extension(path), DEFAULT_MIME_TYPE)


def resolve_mime_type(form: Optional[str], path: Optional[str]) -> str:
    """
    MIME type for a FILE/FORM pair.

    FORM is usually a bare format ("jpg", "JPEG"); a value containing "/"
    is taken as a MIME type as-is.
    """
    f = (form or "").strip().lower()
    if "/" in f:
        return f
    if f:
        mapped = MIME_TYPES.get("." + f.lstrip("."))
        if mapped:
            return mapped
    return mime_type_for_path(path)


def determine_media_type(path: Optional[str], mime_type: Optional[str] = None) -> MediaType:
    """Extension first, then MIME prefix, else Document."""
    by_ext = EXTENSION_MEDIA_TYPES.get(_extension(path))
    if by_ext is not None:
        return by_ext

    mime = (mime_type or "").lower()
    for prefix, media_type in _MIME_PREFIXES:
        if mime.startswith(prefix):
            return media_type
    return MediaType.DOCUMENT
