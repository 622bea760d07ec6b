"""Options and interactive helpers shared by the module commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import click

from clap_orchestrator.core.module_scaffolder import ScaffoldResult
from clap_orchestrator.helpers.helpers_logging import print_header, print_warning
from clap_orchestrator.helpers.project_config import ModuleConfig, load_config

F = TypeVar("F", bound=Callable[..., object])

_DIR = click.Path(file_okay=False, path_type=Path)


def config_options(func: F) -> F:
    """Attach --project-root / --template-root / --modules-root to a command."""
    func = click.option(
        "--modules-root", type=_DIR, default=None,
        help="Directory modules are written to (default: <project>/modules)",
    )(func)
    func = click.option(
        "--template-root", type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=None,
        help="Template Set directory (default: <project>/.template, then bundled)",
    )(func)
    func = click.option(
        "--project-root", type=_DIR, default=None,
        help="Project directory (default: nearest parent with .template/ or modules/)",
    )(func)
    return func


def build_config(
    project_root: Path | None,
    template_root: Path | None,
    modules_root: Path | None,
) -> ModuleConfig:
    """Build the module configuration from CLI overrides."""
    return load_config(
        project_root=project_root,
        template_root=template_root,
        modules_root=modules_root,
    )


def confirm_overwrite(name: str, path: Path) -> bool:
    """Ask whether an existing module may be removed and regenerated."""
    print_warning(f"Module '{name}' already exists at {path}")
    return click.confirm("Do you want to overwrite it?", default=False)


def print_generated_files(result: ScaffoldResult) -> None:
    """Print the generated file categories."""
    print_header("Generated files:")
    for relative in result.files:
        if relative not in result.instruction_files:
            print(f"  - {relative.as_posix()}")
    print(f"  - .instructions/ ({len(result.instruction_files)} files)")
    print()
