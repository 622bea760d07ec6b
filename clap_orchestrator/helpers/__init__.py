"""Helper utilities for console output and project configuration."""

from clap_orchestrator.helpers.project_config import (
    ModuleConfig,
    get_project_root,
    load_config,
)

__all__ = ["ModuleConfig", "get_project_root", "load_config"]
