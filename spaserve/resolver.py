"""Static file resolution with single-page-application fallback.

Every request path maps to exactly one of three outcomes:

* the requested file (or a directory's ``index.html``) with status 200,
* the root ``index.html`` with status 200 when nothing exists at the path,
  so a client-side router can take over,
* a plain-text 404 (no fallback document) or 500 (any other I/O failure).
"""

import logging
import posixpath
import stat
from pathlib import Path
from typing import Union

from spaserve.mime import content_type_for
from spaserve.schemas import ErrorKind, FileRead, ReadError, ResponseDescriptor

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT = "index.html"
FALLBACK_CONTENT_TYPE = "text/html"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"
NOT_FOUND_MESSAGE = "File not found"


def read_file(path: Path) -> FileRead:
    """Read *path* in full, returning a tagged error instead of raising."""
    try:
        return FileRead(path=path, content=path.read_bytes())
    except (OSError, ValueError) as e:
        return FileRead(path=path, error=ReadError.from_exception(e))


class StaticResolver:
    """Resolve request paths against a fixed root directory.

    The resolver holds no mutable state, so one instance can serve
    concurrent requests from any number of worker threads.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def candidate_path(self, request_path: str) -> Path:
        """Join *request_path* onto root without ever leaving it."""
        if request_path == "/":
            request_path = "/" + DEFAULT_DOCUMENT
        # normpath against a virtual "/" swallows any ".." that would climb above root
        normalized = posixpath.normpath("/" + request_path.lstrip("/"))
        relative = normalized.lstrip("/")
        return self.root / relative if relative else self.root

    def locate(self, candidate: Path) -> FileRead:
        """Stat *candidate* and read it, descending into directories once."""
        try:
            mode = candidate.stat().st_mode
        except (OSError, ValueError) as e:
            return FileRead(path=candidate, error=ReadError.from_exception(e))

        if stat.S_ISDIR(mode):
            candidate = candidate / DEFAULT_DOCUMENT
        return read_file(candidate)

    def resolve(self, request_path: str) -> ResponseDescriptor:
        result = self.locate(self.candidate_path(request_path))

        if result.ok:
            return ResponseDescriptor(
                status_code=200,
                content=result.content,
                content_type=content_type_for(result.path),
            )

        if result.error.kind is ErrorKind.NOT_FOUND:
            logger.debug(f"No file for {request_path!r}, serving {DEFAULT_DOCUMENT}")
            return self.fallback()

        logger.error(f"Failed to serve {request_path!r}: {result.error.message}")
        return ResponseDescriptor(
            status_code=500,
            content=f"Server error: {result.error.message}".encode("utf-8"),
            content_type=TEXT_CONTENT_TYPE,
        )

    def fallback(self) -> ResponseDescriptor:
        """Serve the root index.html, or 404 when it cannot be read."""
        result = read_file(self.root / DEFAULT_DOCUMENT)
        if result.ok:
            return ResponseDescriptor(
                status_code=200,
                content=result.content,
                content_type=FALLBACK_CONTENT_TYPE,
            )

        logger.warning(f"Fallback document unavailable: {result.error.message}")
        return ResponseDescriptor(
            status_code=404,
            content=NOT_FOUND_MESSAGE.encode("utf-8"),
            content_type=TEXT_CONTENT_TYPE,
        )
