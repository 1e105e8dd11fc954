"""modgen configuration.

Typed configuration for module generation.  Settings use a Pydantic v2 model
so they are validated at construction time and can be loaded from JSON or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_SUBFOLDERS: tuple[str, ...] = (
    "controllers",
    "middlewares",
    "routes",
    "services",
    "repositories",
)


class Config(BaseModel):
    """Global modgen configuration.

    Instances are typically created once by the CLI entry point and then
    passed to ``ModuleGenerator``.
    """

    modules_dir: str = Field(
        default="src/Modules",
        description="Directory, relative to the project root, that holds modules",
    )
    subfolders: list[str] = Field(default_factory=lambda: list(DEFAULT_SUBFOLDERS))
    manifest_files: list[str] = Field(
        default_factory=lambda: ["package.json"],
        description="File names that mark the project root",
    )
    file_extension: str = Field(default="ts", min_length=1)
    encoding: str = Field(default="utf-8")

    @field_validator("subfolders", "manifest_files")
    @classmethod
    def _not_empty(cls, value: list[str]) -> list[str]:
        # Order-preserving dedupe; a repeated folder would plan the same files twice.
        cleaned = list(dict.fromkeys(item.strip() for item in value if item.strip()))
        if not cleaned:
            raise ValueError("must contain at least one entry")
        return cleaned

    @field_validator("file_extension")
    @classmethod
    def _strip_dot(cls, value: str) -> str:
        stripped = value.lstrip(".")
        if not stripped:
            raise ValueError("file extension must not be empty")
        return stripped

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def modules_path(self, project_root: Path) -> Path:
        """Directory containing every generated module."""
        return Path(project_root) / self.modules_dir

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a configuration from JSON.

        Args:
            path: The JSON file to read.

        Returns:
            A validated ``Config`` instance.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            MODGEN_MODULES_DIR, MODGEN_SUBFOLDERS, MODGEN_MANIFEST_FILES,
            MODGEN_FILE_EXTENSION, MODGEN_ENCODING.

        List values are comma-separated.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("MODGEN_MODULES_DIR"):
            kwargs["modules_dir"] = os.environ["MODGEN_MODULES_DIR"]
        if os.environ.get("MODGEN_SUBFOLDERS"):
            kwargs["subfolders"] = os.environ["MODGEN_SUBFOLDERS"].split(",")
        if os.environ.get("MODGEN_MANIFEST_FILES"):
            kwargs["manifest_files"] = os.environ["MODGEN_MANIFEST_FILES"].split(",")
        if os.environ.get("MODGEN_FILE_EXTENSION"):
            kwargs["file_extension"] = os.environ["MODGEN_FILE_EXTENSION"]
        if os.environ.get("MODGEN_ENCODING"):
            kwargs["encoding"] = os.environ["MODGEN_ENCODING"]
        return cls(**kwargs)
