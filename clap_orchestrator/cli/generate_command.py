"""Regenerate a module structure from the Template Set.

Non-interactive apart from the overwrite confirmation. Substitutes the
module name and timestamp placeholders; the slug placeholder is kept.

Usage:
    clap generate billing
    clap generate billing --force
"""

from __future__ import annotations

from pathlib import Path

import click

from clap_orchestrator.cli.common import (
    build_config,
    config_options,
    confirm_overwrite,
    print_generated_files,
)
from clap_orchestrator.cli.completions import complete_module_names
from clap_orchestrator.core.errors import ScaffoldError
from clap_orchestrator.core.module_scaffolder import generate_module
from clap_orchestrator.core.naming import module_path, sanitize_module_name
from clap_orchestrator.helpers.helpers_logging import (
    print_banner,
    print_command,
    print_error,
    print_info,
    print_success,
)


@click.command(
    name="generate",
    help="Generate a module structure from the Template Set",
)
@click.argument("name", required=False, default=None,
                shell_complete=complete_module_names)
@click.option("--force", "-f", is_flag=True,
              help="Overwrite an existing module without asking")
@config_options
def generate_cmd(
    name: str | None,
    force: bool,
    project_root: Path | None,
    template_root: Path | None,
    modules_root: Path | None,
) -> int:
    """Generate a module, substituting name and timestamp placeholders."""
    print_banner("CLAP Orchestrator - Template Generator")

    if not name:
        print_error("Please provide a module name")
        print("Usage: clap generate <module-name>")
        return 1

    config = build_config(project_root, template_root, modules_root)
    try:
        module_name = sanitize_module_name(name)
        target = module_path(config, module_name)
        if target.exists() and not force:
            if not confirm_overwrite(module_name, target):
                print("Cancelled.")
                return 0
            force = True

        print_info("Generating module structure from template...")
        print()
        result = generate_module(name, config, force=force)
    except ScaffoldError as exc:
        exc.print_error()
        return 1

    print_success("Module structure generated")
    print()
    print_generated_files(result)

    print_info("Next steps:")
    print("1. Customize the module specification")
    print("2. Update instructions if needed")
    print("3. Run validation:")
    print_command(f"clap validate {result.name}")
    print()
    return 0
