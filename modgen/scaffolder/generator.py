"""Main module scaffolding orchestrator.

Takes a validated ``ModuleName`` and a project root and materialises the
module directory: one root index, one primary file per subfolder and one
aggregator index per subfolder.  Files that already exist are never
overwritten, so re-running the generator is safe.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from modgen.config import Config
from modgen.errors import FilesystemError, ValidationError
from modgen.utils import ensure_dir

from .casing import to_camel_case, to_kebab_case, to_pascal_case
from .layout import FileKind, FileTarget, plan
from .templates import TemplateRenderer
from .wiring import ExportWirer

_NAME_PATTERN = re.compile(r"[\w-]+", re.ASCII)


# ---------------------------------------------------------------------------
# Module name model
# ---------------------------------------------------------------------------


class ModuleName(BaseModel):
    """A validated module name and its casing variants."""

    model_config = ConfigDict(frozen=True)

    value: str

    @field_validator("value")
    @classmethod
    def _check_value(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Module name cannot be empty")
        if not _NAME_PATTERN.fullmatch(value):
            raise ValueError(
                "Invalid module name. Only alphanumeric characters, hyphens "
                "and underscores are allowed."
            )
        return value

    @property
    def pascal(self) -> str:
        return to_pascal_case(self.value)

    @property
    def camel(self) -> str:
        return to_camel_case(self.value)

    @property
    def lower(self) -> str:
        return self.value.lower()

    @property
    def kebab(self) -> str:
        return to_kebab_case(self.value)

    def __str__(self) -> str:
        return self.value


def parse_module_name(raw: str) -> ModuleName:
    """Validate *raw* and return a ``ModuleName``.

    Raises:
        ValidationError: If *raw* is empty or contains characters outside
            ``[A-Za-z0-9_-]``.
    """
    try:
        return ModuleName(value=raw)
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        message = error.get("ctx", {}).get("error", error["msg"])
        raise ValidationError(str(message)) from exc


# ---------------------------------------------------------------------------
# Generation result
# ---------------------------------------------------------------------------


@dataclass
class GenerationResult:
    """Outcome of a single module generation run."""

    module: ModuleName
    module_path: Path
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    @property
    def statuses(self) -> dict[str, str]:
        """Map each file (relative to the module) to ``created``/``skipped``."""
        rows = {str(p.relative_to(self.module_path)): "created" for p in self.created}
        rows.update(
            {str(p.relative_to(self.module_path)): "skipped" for p in self.skipped}
        )
        return rows


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ModuleGenerator:
    """Write a module's files under ``<root>/<modules_dir>/<Pascal>/``."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.renderer = TemplateRenderer()
        self.wirer = ExportWirer(self.renderer)

    # -- Public API --------------------------------------------------------

    def module_path(self, project_root: str | Path, module: ModuleName) -> Path:
        """Directory the module named *module* is generated into."""
        return self.config.modules_path(Path(project_root)) / module.pascal

    def targets(self, module: ModuleName) -> list[FileTarget]:
        return plan(module.value, self.config.subfolders, self.config.file_extension)

    def content_for(self, module: ModuleName, target: FileTarget) -> str:
        """Return the text to write for *target*."""
        if target.kind is FileKind.MODULE_INDEX:
            return self.wirer.render_module_index(module.value)
        if target.kind is FileKind.INDEX:
            return self.wirer.render_index(module.value, target.folder)
        return self.renderer.render(module.value, target.folder)

    def generate(self, module: ModuleName | str, project_root: str | Path) -> GenerationResult:
        """Create the module structure under *project_root*.

        Args:
            module: The module name, validated if given as a plain string.
            project_root: Directory containing the project manifest.

        Returns:
            A ``GenerationResult`` listing created and skipped files.

        Raises:
            FilesystemError: If a directory or file cannot be written.  Files
                written before the failure are left in place.
        """
        if isinstance(module, str):
            module = parse_module_name(module)

        module_path = self.module_path(project_root, module)
        result = GenerationResult(module=module, module_path=module_path)

        for target in self.targets(module):
            destination = module_path / target.relative_path
            try:
                ensure_dir(destination.parent)
                if destination.exists():
                    result.skipped.append(destination)
                    continue
                content = self.content_for(module, target)
                destination.write_text(content, encoding=self.config.encoding)
            except OSError as exc:
                raise FilesystemError(
                    f"Failed to write {destination}: {exc.strerror or exc}",
                    destination,
                ) from exc
            result.created.append(destination)

        return result
