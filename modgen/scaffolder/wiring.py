"""Aggregator (``index``) file content for generated modules."""

from __future__ import annotations

from .blueprints import MODULE_INDEX, blueprint_for
from .templates import TemplateRenderer


class ExportWirer:
    """Produce the re-export lines that tie a module's files together."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def render_index(self, module_name: str, folder: str) -> str:
        """Return the single export line for ``<folder>/index``."""
        blueprint = blueprint_for(folder)
        context = self.renderer.context_for(module_name, folder)
        return self.renderer.render_string(blueprint.index, context)

    def render_module_index(self, module_name: str) -> str:
        """Return the module root index mounting the routes under ``/<lower>``."""
        context = self.renderer.context_for(module_name)
        return self.renderer.render_string(MODULE_INDEX, context)
