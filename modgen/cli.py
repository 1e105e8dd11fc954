"""Command line entry point for modgen.

Usage::

    modgen                      # prompts for the module name
    modgen blog_post            # skips the prompt
    python -m modgen --cwd ./api --config modgen.json
"""

from __future__ import annotations

import argparse
from pathlib import PurePosixPath
from typing import Sequence

from rich.markup import escape
from rich.prompt import Prompt

from modgen.config import Config
from modgen.errors import ErrorKind, classify
from modgen.root import find_root
from modgen.scaffolder import GenerationResult, ModuleGenerator, parse_module_name
from modgen.utils import (
    console,
    print_banner,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

PROMPT_MESSAGE = "Enter the module name:"


class ModuleNamePrompt(Prompt):
    """Free-text prompt without Rich's default ``": "`` suffix."""

    prompt_suffix = " "


def prompt_module_name() -> str:
    """Ask for a module name until a non-blank answer is given."""
    while True:
        value = ModuleNamePrompt.ask(PROMPT_MESSAGE, console=console)
        if value.strip():
            return value
        print_error("Module name cannot be empty")


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------


def _import_path(config: Config, pascal: str) -> str:
    """Path the host app's ``src/index`` uses to import the module."""
    parts = PurePosixPath(config.modules_dir.replace("\\", "/")).parts
    if parts and parts[0] == "src":
        parts = parts[1:]
    return "./" + "/".join((*parts, pascal))


def report_success(result: GenerationResult, config: Config) -> None:
    pascal = result.module.pascal
    print_banner("Module Created", f"{pascal} -> {result.module_path}", style="green")
    print_summary_table(result.statuses, title=f"{pascal} module")
    if result.skipped:
        print_warning(f"{len(result.skipped)} existing file(s) were left untouched")

    console.print("You can add this module to your main index.ts file as follows:")
    console.print(
        escape(
            "//index.ts\n"
            f"import {{ {pascal}Module }} from '{_import_path(config, pascal)}';\n"
            "// Add the module to the Express app\n"
            f"app.use({pascal}Module);"
        ),
        highlight=False,
    )
    print_success(f"Module {result.module} generated")


def report_failure(exc: BaseException) -> None:
    """Print the error banner for *exc*."""
    kind = classify(exc)
    if kind is ErrorKind.UNKNOWN:
        print_banner("Error", repr(exc), style="red")
        print_error("An unknown error occurred")
        return
    if kind is ErrorKind.CANCELLED:
        print_banner("Error", f"[{kind.value}] Module creation cancelled", style="red")
        return
    print_banner("Error", f"[{kind.value}] {exc}", style="red")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modgen",
        description="Scaffold a controller/middleware/route/service/repository module",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  modgen\n"
            "  modgen blog_post\n"
            "  modgen user --cwd ./api --config modgen.json\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Module name (prompted for when omitted)",
    )
    parser.add_argument(
        "--cwd",
        default=".",
        help="Directory the project root search starts from (default: .)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: MODGEN_* environment variables)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``modgen`` and ``python -m modgen``."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.load(args.config) if args.config else Config.from_env()
        raw_name = args.name if args.name is not None else prompt_module_name()
        module = parse_module_name(raw_name)
        project_root = find_root(args.cwd, config.manifest_files)
        result = ModuleGenerator(config).generate(module, project_root)
    except (Exception, KeyboardInterrupt) as exc:
        report_failure(exc)
        return 1

    report_success(result, config)
    return 0
