"""Error kinds raised while creating a module.

Every failure the CLI knows how to present is a ``ModgenError`` subclass
tagged with an ``ErrorKind``.  ``classify`` maps arbitrary exceptions onto
the same enumeration so presentation lives in a single place.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Sequence


class ErrorKind(str, Enum):
    """Classification of a failed module generation."""

    VALIDATION = "validation"
    ROOT_NOT_FOUND = "root_not_found"
    FILESYSTEM = "filesystem"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


class ModgenError(Exception):
    """Base class for all module generation errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN


class ValidationError(ModgenError):
    """Raised when a module name is empty or contains disallowed characters."""

    kind = ErrorKind.VALIDATION


class RootNotFoundError(ModgenError):
    """Raised when no project manifest exists above the start directory."""

    kind = ErrorKind.ROOT_NOT_FOUND

    def __init__(self, start: str | Path, markers: Sequence[str]) -> None:
        self.start = Path(start)
        self.markers = list(markers)
        super().__init__(
            f"Cannot find project root above {self.start}. "
            f"Make sure you run this inside a project containing one of: "
            f"{', '.join(self.markers)}"
        )


class FilesystemError(ModgenError):
    """Raised when a directory or file cannot be created."""

    kind = ErrorKind.FILESYSTEM

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


def classify(exc: BaseException) -> ErrorKind:
    """Return the ``ErrorKind`` for *exc*.

    ``ModgenError`` instances carry their own kind.  Bare ``OSError``
    instances are filesystem failures and ``KeyboardInterrupt`` is a
    cancellation; anything else is ``UNKNOWN``.
    """
    if isinstance(exc, ModgenError):
        return exc.kind
    if isinstance(exc, OSError):
        return ErrorKind.FILESYSTEM
    if isinstance(exc, KeyboardInterrupt):
        return ErrorKind.CANCELLED
    return ErrorKind.UNKNOWN
