"""Project root discovery.

Walks upward from a start directory until a directory containing one of the
manifest files is found.  The existence check is injectable so the walk can
be exercised without touching the real filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

from modgen.errors import RootNotFoundError

DEFAULT_MARKERS: tuple[str, ...] = ("package.json",)

ExistsFn = Callable[[Path], bool]


def _path_exists(path: Path) -> bool:
    return path.exists()


def locate_root(
    start: str | Path,
    markers: Sequence[str] = DEFAULT_MARKERS,
    *,
    exists: ExistsFn = _path_exists,
) -> Path | None:
    """Return the nearest directory at or above *start* holding a marker.

    Args:
        start: Directory the search begins from.  Relative paths are made
            absolute against the current working directory.
        markers: File names that identify a project root.
        exists: Predicate used to test candidate marker paths.

    Returns:
        The matching directory, or ``None`` once the filesystem root has
        been checked without a match.
    """
    current = Path(start).absolute()
    while True:
        if any(exists(current / marker) for marker in markers):
            return current
        parent = current.parent
        if parent == current:
            return None
        current = parent


def find_root(
    start: str | Path,
    markers: Sequence[str] = DEFAULT_MARKERS,
    *,
    exists: ExistsFn = _path_exists,
) -> Path:
    """Like ``locate_root`` but raise ``RootNotFoundError`` when nothing matches."""
    root = locate_root(start, markers, exists=exists)
    if root is None:
        raise RootNotFoundError(start, markers)
    return root
