"""Static extension -> content-type table used for every file response."""

from __future__ import annotations

import posixpath
from typing import Dict

DEFAULT_MIMETYPE = "application/octet-stream"

MIME_TYPES: Dict[str, str] = {
    # documents
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "text/javascript",
    ".mjs": "text/javascript",
    ".json": "application/json",
    ".map": "application/json",
    ".webmanifest": "application/manifest+json",
    ".txt": "text/plain",
    ".md": "text/markdown",
    ".csv": "text/csv",
    ".xml": "application/xml",
    ".pdf": "application/pdf",
    # images
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".avif": "image/avif",
    ".ico": "image/vnd.microsoft.icon",
    # fonts
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".eot": "application/vnd.ms-fontobject",
    # media
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".ogg": "audio/ogg",
    ".mp4": "video/mp4",
    ".webm": "video/webm",
    # binaries
    ".wasm": "application/wasm",
    ".zip": "application/zip",
}


def guess_mimetype(filename: str) -> str:
    """Return the content type for ``filename``, or `DEFAULT_MIMETYPE` if unknown."""
    _, ext = posixpath.splitext(filename)
    return MIME_TYPES.get(ext.lower(), DEFAULT_MIMETYPE)


__all__ = ["DEFAULT_MIMETYPE", "MIME_TYPES", "guess_mimetype"]
