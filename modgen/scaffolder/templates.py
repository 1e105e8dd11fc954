"""Jinja2 rendering of module primary files.

Provides the TemplateRenderer class which renders the per-folder blueprint
sources with a context derived from the module name.  The templates
themselves live in ``blueprints.py`` as inline strings, so everything here
goes through ``render_string``.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment

from .blueprints import blueprint_for, singularize
from .casing import to_camel_case, to_kebab_case, to_pascal_case


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders blueprint templates for module scaffolding.

    The environment keeps trailing newlines exactly as written in the
    blueprint so generated files are byte-for-byte stable.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["pascal_case"] = to_pascal_case
        self.env.filters["camel_case"] = to_camel_case
        self.env.filters["kebab_case"] = to_kebab_case

    # -- Context -----------------------------------------------------------

    @staticmethod
    def context_for(module_name: str, folder: str = "") -> dict[str, Any]:
        """Build the template context for *module_name* inside *folder*."""
        singular = singularize(folder)
        return {
            "name": module_name,
            "pascal": to_pascal_case(module_name),
            "camel": to_camel_case(module_name),
            "lower": module_name.lower(),
            "kebab": to_kebab_case(module_name),
            "folder": folder,
            "singular": singular,
            "singular_pascal": singular[:1].upper() + singular[1:],
        }

    # -- Rendering ---------------------------------------------------------

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        if not template_string:
            return ""
        template = self.env.from_string(template_string)
        return template.render(**context)

    def render(self, module_name: str, folder: str) -> str:
        """Return the primary file content of *folder* for *module_name*.

        Unknown folders render to an empty string.
        """
        blueprint = blueprint_for(folder)
        return self.render_string(blueprint.body, self.context_for(module_name, folder))
