"""Extension to content-type lookup for served assets."""

from pathlib import PurePath
from types import MappingProxyType
from typing import Union

DEFAULT_CONTENT_TYPE = "application/octet-stream"

MIME_TYPES = MappingProxyType({
    ".html": "text/html",
    ".js": "application/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".txt": "text/plain",
    ".pdf": "application/pdf",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
})


def content_type_for(path: Union[str, PurePath]) -> str:
    """Return the content type for *path* based on its last suffix."""
    extension = PurePath(path).suffix.lower()
    return MIME_TYPES.get(extension, DEFAULT_CONTENT_TYPE)
