"""Module name normalization and path derivation."""

from __future__ import annotations

import re
from pathlib import Path

from clap_orchestrator.core.errors import InvalidModuleNameError
from clap_orchestrator.helpers.project_config import ModuleConfig

MODULE_DIR_SUFFIX = "-module"
PUBLISH_WORKFLOW = "create-module-prs.yml"
_RESERVED_NAMES = {".", ".."}
# Word characters, dots and hyphens: safe as a path component and inside JSON strings
_VALID_NAME = re.compile(r"[\w.-]+")


def sanitize_module_name(raw_name: str) -> str:
    """Normalize a user-supplied module name.

    Lower-cases the name and replaces spaces with hyphens,
    e.g. ``"User Authentication"`` -> ``"user-authentication"``.

    Raises:
        InvalidModuleNameError: If the name is empty or not usable as a
            single path component.
    """
    name = raw_name.strip().lower().replace(" ", "-")
    if not name:
        raise InvalidModuleNameError("Module name must not be empty")
    if name in _RESERVED_NAMES or not _VALID_NAME.fullmatch(name):
        raise InvalidModuleNameError(
            f"Invalid module name '{raw_name}': "
            + "use letters, digits, spaces, '-', '_' or '.'"
        )
    return name


def module_dir_name(name: str) -> str:
    """Return the directory name for a sanitized module name."""
    return f"{name}{MODULE_DIR_SUFFIX}"


def module_path(config: ModuleConfig, raw_name: str) -> Path:
    """Return ``<modules_root>/<sanitized-name>-module``."""
    return config.modules_root / module_dir_name(sanitize_module_name(raw_name))


def list_module_names(config: ModuleConfig) -> list[str]:
    """List sanitized names of the modules present under the modules root."""
    if not config.modules_root.is_dir():
        return []
    return sorted(
        entry.name[: -len(MODULE_DIR_SUFFIX)]
        for entry in config.modules_root.iterdir()
        if entry.is_dir()
        and entry.name.endswith(MODULE_DIR_SUFFIX)
        and len(entry.name) > len(MODULE_DIR_SUFFIX)
    )


def display_module_path(path: Path, config: ModuleConfig) -> str:
    """Return ``path`` relative to the project root when possible."""
    try:
        return path.relative_to(config.project_root).as_posix()
    except ValueError:
        return str(path)


def publish_command(name: str, display_path: str) -> str:
    """Return the command that hands a module to the PR workflow."""
    return (
        f"gh workflow run {PUBLISH_WORKFLOW} "
        + f"-f module_name={name} -f module_path={display_path}"
    )
