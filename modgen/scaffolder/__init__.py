"""modgen scaffolder -- generates Express-style TypeScript module structures.

Quick usage::

    from modgen.scaffolder import ModuleGenerator, parse_module_name

    generator = ModuleGenerator()
    result = generator.generate(parse_module_name("blog_post"), "/path/to/project")
"""

from modgen.scaffolder.generator import (
    GenerationResult,
    ModuleGenerator,
    ModuleName,
    parse_module_name,
)
from modgen.scaffolder.layout import FileKind, FileTarget, plan
from modgen.scaffolder.templates import TemplateRenderer
from modgen.scaffolder.wiring import ExportWirer

__all__ = [
    "ExportWirer",
    "FileKind",
    "FileTarget",
    "GenerationResult",
    "ModuleGenerator",
    "ModuleName",
    "TemplateRenderer",
    "parse_module_name",
    "plan",
]
