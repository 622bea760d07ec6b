"""Core template-set instantiation logic."""

from clap_orchestrator.core.module_scaffolder import (
    ScaffoldResult,
    generate_module,
    instantiate_template_set,
    scaffold_module,
)

__all__ = [
    "ScaffoldResult",
    "generate_module",
    "instantiate_template_set",
    "scaffold_module",
]
