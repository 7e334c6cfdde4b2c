"""Pydantic value types passed between the resolver and the HTTP layer."""

import enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    OTHER = "other"


class ReadError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str

    @classmethod
    def from_exception(cls, exc: Exception) -> "ReadError":
        """Tag a filesystem exception as NOT_FOUND or OTHER."""
        # ENOTDIR (a parent segment is a regular file) is deliberately NOT_FOUND so
        # paths like /app.js/child reach the SPA fallback instead of a 500
        if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
            return cls(kind=ErrorKind.NOT_FOUND, message=str(exc))
        return cls(kind=ErrorKind.OTHER, message=str(exc))


class FileRead(BaseModel):
    """Outcome of reading one file: either its content or a tagged error."""

    model_config = ConfigDict(frozen=True)

    path: Path
    content: Optional[bytes] = None
    error: Optional[ReadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ResponseDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    status_code: int
    content: bytes
    content_type: str
