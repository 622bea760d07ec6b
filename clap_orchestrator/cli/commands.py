#!/usr/bin/env python3
"""CLAP Orchestrator CLI - Main Entry Point.

Usage:
    clap <command> [options]

Commands:
    create-module   Create a new module from the Template Set (interactive)
    generate        Generate a module structure from the Template Set
    validate        Validate a module before creating PRs
    help            Show this help message
"""

from __future__ import annotations

import contextlib
import os
import sys

import click

from clap_orchestrator.cli.create_module import create_module_cmd
from clap_orchestrator.cli.generate_command import generate_cmd
from clap_orchestrator.cli.validate_command import validate_cmd
from clap_orchestrator.helpers.project_config import load_config

# Minimum number of CLI args (program name + command)
_MIN_ARGS = 2

_EXIT_CANCELLED = 130

COMMANDS: dict[str, click.Command] = {
    "create-module": create_module_cmd,
    "generate": generate_cmd,
    "validate": validate_cmd,
}

# Aliases defer to the canonical command objects
COMMAND_ALIASES: dict[str, str] = {
    "new": "create-module",
    "gen": "generate",
    "check": "validate",
}


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)

    config = load_config()
    print(f"📍 Project root:  {config.project_root}")
    print(f"   Templates:     {config.template_root}")
    print(f"   Modules:       {config.modules_root}")

    print("\n⚡ Aliases:")
    for alias, canonical in COMMAND_ALIASES.items():
        print(f"  {alias:15} - alias for {canonical}")

    print("\n💡 Tip: Run 'clap <command> --help' for command options")


@click.group(invoke_without_command=True)
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Top-level CLAP command group."""
    if ctx.invoked_subcommand is not None:
        return 0
    print_help()
    return 0


def _register_commands() -> None:
    """Register all commands and their aliases in the click app."""
    for _name, cmd_obj in COMMANDS.items():
        _click_cli.add_command(cmd_obj)

    for alias, canonical in COMMAND_ALIASES.items():
        _click_cli.add_command(COMMANDS[canonical], name=alias)

    @click.command(name="help", help="Show help message")
    def _help_cmd() -> int:
        print_help()
        return 0

    _click_cli.add_command(_help_cmd)


_register_commands()


def main() -> int:
    """Main CLI entry point."""
    # Let Click handle shell completion protocol before anything else.
    # When _CLAP_COMPLETE is set, Click outputs completion data and exits.
    if os.environ.get("_CLAP_COMPLETE"):
        with contextlib.suppress(SystemExit):
            _click_cli.main(
                args=sys.argv[1:],
                prog_name="clap",
                standalone_mode=True,
            )
        return 0

    if len(sys.argv) < _MIN_ARGS or sys.argv[1] in ["help", "--help", "-h"]:
        print_help()
        return 0

    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="clap",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return _EXIT_CANCELLED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
