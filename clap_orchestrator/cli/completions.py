"""Shell completion callbacks for the Click-based CLAP CLI.

Each function follows the Click shell_complete callback signature:
    (ctx: click.Context, param: click.Parameter, incomplete: str) -> list[CompletionItem]
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.shell_completion import CompletionItem

from clap_orchestrator.core.naming import list_module_names
from clap_orchestrator.helpers.project_config import load_config

if TYPE_CHECKING:
    import click


def complete_module_names(
    ctx: click.Context,
    _param: click.Parameter,
    incomplete: str,
) -> list[CompletionItem]:
    """Complete names of modules that already exist under the modules root."""
    config = load_config(
        project_root=ctx.params.get("project_root"),
        modules_root=ctx.params.get("modules_root"),
    )
    return [
        CompletionItem(name, help="existing module")
        for name in list_module_names(config)
        if name.startswith(incomplete.lower())
    ]
