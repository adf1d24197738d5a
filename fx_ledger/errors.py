"""Error taxonomy shared by every codec and the storage gateway."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

__all__ = [
    "ErrorKind",
    "RateFileError",
    "NotFoundError",
    "IoFailureError",
    "MalformedInputError",
    "UnsupportedFormatError",
]


class ErrorKind(str, Enum):
    """Failure categories callers branch on instead of library exception types."""

    NOT_FOUND = "not_found"
    IO_FAILURE = "io_failure"
    MALFORMED_INPUT = "malformed_input"
    UNSUPPORTED_FORMAT = "unsupported_format"


class RateFileError(Exception):
    """Base class for failures surfaced while reading or writing rate files."""

    kind: ErrorKind

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} ({self.path})"


class NotFoundError(RateFileError, FileNotFoundError):
    kind = ErrorKind.NOT_FOUND


class IoFailureError(RateFileError, OSError):
    kind = ErrorKind.IO_FAILURE


class MalformedInputError(RateFileError, ValueError):
    kind = ErrorKind.MALFORMED_INPUT


class UnsupportedFormatError(RateFileError, ValueError):
    kind = ErrorKind.UNSUPPORTED_FORMAT
