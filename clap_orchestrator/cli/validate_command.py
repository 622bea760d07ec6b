"""Validate a module before publishing it.

Usage:
    clap validate billing

Exit status is 0 when the module passes and 1 when it fails or is missing.
"""

from __future__ import annotations

from pathlib import Path

import click

from clap_orchestrator.cli.common import build_config, config_options
from clap_orchestrator.cli.completions import complete_module_names
from clap_orchestrator.core.errors import ScaffoldError
from clap_orchestrator.helpers.helpers_logging import print_banner, print_error
from clap_orchestrator.validators.module_validator import (
    print_validation_report,
    validate_module,
)


@click.command(
    name="validate",
    help="Validate a module's files, sections and status record",
)
@click.argument("name", required=False, default=None,
                shell_complete=complete_module_names)
@config_options
def validate_cmd(
    name: str | None,
    project_root: Path | None,
    template_root: Path | None,
    modules_root: Path | None,
) -> int:
    """Check a module for completeness and report pass/fail."""
    print_banner("CLAP Orchestrator - Module Validator")

    if not name:
        print_error("Please provide a module name")
        print("Usage: clap validate <module-name>")
        return 1

    config = build_config(project_root, template_root, modules_root)
    try:
        report = validate_module(name, config)
    except ScaffoldError as exc:
        exc.print_error()
        return 1

    print_validation_report(report)
    return 0 if report.passed else 1
