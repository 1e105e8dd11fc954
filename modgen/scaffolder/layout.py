"""Layout planning: which files make up a generated module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .blueprints import blueprint_for

INDEX_STEM = "index"


class FileKind(str, Enum):
    """Role of a planned file within the module."""

    MODULE_INDEX = "module_index"
    PRIMARY = "primary"
    INDEX = "index"


@dataclass(frozen=True)
class FileTarget:
    """A file to create, relative to the module directory.

    ``folder`` is ``""`` for the module root index.  ``kind`` is set by
    ``plan`` and never inferred from the file name, since a module may
    itself be called ``index``.
    """

    folder: str
    name: str
    kind: FileKind

    @property
    def relative_path(self) -> str:
        return f"{self.folder}/{self.name}" if self.folder else self.name

    @property
    def is_index(self) -> bool:
        return self.kind is not FileKind.PRIMARY


def primary_file_name(module_name: str, folder: str, extension: str = "ts") -> str:
    """Return the primary file name for *folder*, e.g. ``user.controller.ts``."""
    suffix = blueprint_for(folder).suffix
    return f"{module_name.lower()}.{suffix}.{extension}"


def plan(
    module_name: str,
    subfolders: Sequence[str],
    extension: str = "ts",
) -> list[FileTarget]:
    """Enumerate every file of the module in write order.

    The root index comes first, then every subfolder's primary file, then
    every subfolder's index file.
    """
    index_name = f"{INDEX_STEM}.{extension}"
    targets = [FileTarget("", index_name, FileKind.MODULE_INDEX)]
    targets.extend(
        FileTarget(
            folder, primary_file_name(module_name, folder, extension), FileKind.PRIMARY
        )
        for folder in subfolders
    )
    targets.extend(FileTarget(folder, index_name, FileKind.INDEX) for folder in subfolders)
    return targets
