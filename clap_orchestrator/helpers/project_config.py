"""Project configuration: where templates are read from and modules written to.

Every core operation receives a ``ModuleConfig`` explicitly, so nothing in
``clap_orchestrator.core`` or ``clap_orchestrator.validators`` depends on the
current working directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PROJECT_TEMPLATE_DIR = ".template"
MODULES_DIR = "modules"


@dataclass(frozen=True)
class ModuleConfig:
    """Resolved filesystem locations for one invocation."""

    project_root: Path
    template_root: Path
    modules_root: Path


def get_project_root(start: Path | None = None) -> Path:
    """Get the orchestrator project root.

    Searches upwards from ``start`` (default: current working directory) for a
    directory containing a ``.template/`` or ``modules/`` directory, so the
    CLI works from any subdirectory of a project.

    Note:
        As a fallback, returns ``start`` instead of raising, so a fresh
        project gets its ``modules/`` directory where the command is executed.
    """
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        if (parent / PROJECT_TEMPLATE_DIR).is_dir() or (parent / MODULES_DIR).is_dir():
            return parent
    return current


def bundled_template_root() -> Path:
    """Return the Template Set shipped inside the package."""
    import clap_orchestrator

    return Path(clap_orchestrator.__file__).resolve().parent / "templates" / "module"


def _get_template_source_dirs(project_root: Path) -> list[Path]:
    """Return candidate template roots (project-local first, then bundled)."""
    candidates = [
        project_root / PROJECT_TEMPLATE_DIR,
        bundled_template_root(),
    ]
    return [candidate for candidate in candidates if candidate.is_dir()]


def resolve_template_root(project_root: Path) -> Path:
    """Resolve the Template Set directory for a project.

    Falls back to the bundled location even when it is missing, so the copy
    step reports the absent files instead of failing here.
    """
    sources = _get_template_source_dirs(project_root)
    if sources:
        return sources[0]
    return bundled_template_root()


def load_config(
    project_root: Path | None = None,
    template_root: Path | None = None,
    modules_root: Path | None = None,
) -> ModuleConfig:
    """Build a ``ModuleConfig``, filling unset locations with project defaults.

    Args:
        project_root: Project directory (default: detected from cwd)
        template_root: Template Set directory override
        modules_root: Output directory override (default: <project>/modules)
    """
    root = project_root.resolve() if project_root else get_project_root()
    return ModuleConfig(
        project_root=root,
        template_root=template_root.resolve() if template_root else resolve_template_root(root),
        modules_root=modules_root.resolve() if modules_root else root / MODULES_DIR,
    )
