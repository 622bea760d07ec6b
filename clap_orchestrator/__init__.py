"""
CLAP Orchestrator

Scaffolding and validation tooling for CLAP feature modules: copies the
module Template Set into ``modules/<name>-module``, fills in its placeholders,
and checks a module for completeness before PRs are created from it.
"""

__version__ = "0.1.0"

from clap_orchestrator.core.module_scaffolder import generate_module, scaffold_module
from clap_orchestrator.validators.module_validator import validate_module

__all__ = [
    "generate_module",
    "scaffold_module",
    "validate_module",
]
