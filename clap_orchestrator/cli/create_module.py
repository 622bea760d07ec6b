"""Create a new module from the Template Set, interactively.

Usage:
    clap create-module "User Authentication"
    clap create-module billing --force --skip-details
    clap create-module                      # prompts for the name
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
from clap_orchestrator.core.module_scaffolder import (
    I18N_KEYS_FILE,
    INSTRUCTIONS_DIR,
    MODULE_SPEC_FILE,
    ScaffoldResult,
    scaffold_module,
)
from clap_orchestrator.core.naming import (
    display_module_path,
    module_path,
    publish_command,
    sanitize_module_name,
)
from clap_orchestrator.helpers.helpers_logging import (
    print_banner,
    print_command,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from clap_orchestrator.helpers.project_config import ModuleConfig


def _prompt_details() -> tuple[str, str]:
    """Ask for the module purpose and primary entity (operator context only)."""
    print_warning("Please provide some details about your module:")
    print()
    purpose = click.prompt(
        "Module purpose (brief description)", default="", show_default=False,
    )
    entity = click.prompt(
        "Primary entity name (e.g., User, Payment)", default="", show_default=False,
    )
    print()
    return purpose.strip(), entity.strip()


def _print_next_steps(
    result: ScaffoldResult,
    config: ModuleConfig,
    purpose: str,
    entity: str,
) -> None:
    """Print the follow-up steps after a module was created."""
    path = display_module_path(result.path, config)

    print_info("Module created successfully!")
    print()
    if purpose:
        print(f"   Purpose: {purpose}")
    if entity:
        print(f"   Primary entity: {entity}")
    if purpose or entity:
        print()

    print_warning("Next steps:")
    print("1. Edit the module specification:")
    print_command(f"{path}/{MODULE_SPEC_FILE}")
    print()
    print("2. Fill in the instructions:")
    print_command(f"{path}/{INSTRUCTIONS_DIR}/")
    print()
    print("3. Add i18n keys:")
    print_command(f"{path}/{I18N_KEYS_FILE}")
    print()
    print("4. Validate your module:")
    print_command(f"clap validate {result.name}")
    print()
    print("5. Trigger the GitHub workflow to create PRs:")
    print_command(publish_command(result.name, path))
    print()


@click.command(
    name="create-module",
    help="Create a new module from the Template Set",
)
@click.argument("name", required=False, default=None,
                shell_complete=complete_module_names)
@click.option("--force", "-f", is_flag=True,
              help="Overwrite an existing module without asking")
@click.option("--skip-details", is_flag=True,
              help="Do not prompt for module purpose and entity name")
@config_options
def create_module_cmd(
    name: str | None,
    force: bool,
    skip_details: bool,
    project_root: Path | None,
    template_root: Path | None,
    modules_root: Path | None,
) -> int:
    """Scaffold a module, substituting name, timestamp and slug placeholders."""
    print_banner("CLAP Orchestrator - Module Creator")

    if not name:
        print_warning("Please provide a module name:")
        name = click.prompt(
            "Module name (e.g., user-authentication)", default="", show_default=False,
        )
    if not name.strip():
        print_error("Module name is required")
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

        print_info(f"Creating module: {module_name}")
        result = scaffold_module(name, config, force=force)
    except ScaffoldError as exc:
        exc.print_error()
        return 1

    print_success("Module structure created")
    print()
    print_generated_files(result)

    purpose, entity = ("", "") if skip_details else _prompt_details()
    _print_next_steps(result, config, purpose, entity)
    return 0
