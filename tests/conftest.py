"""Shared fixtures for the module scaffolding test suite.

Every test gets its own project directory under ``tmp_path`` with an empty
``modules/`` root. Tests that need to break the Template Set get a private
copy of the bundled templates in ``.template/`` so the packaged files are
never touched.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import pytest

from clap_orchestrator.helpers.project_config import ModuleConfig, bundled_template_root


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    """Empty project directory with a ``modules/`` root."""
    root = tmp_path / "project"
    (root / "modules").mkdir(parents=True)
    return root


@pytest.fixture()
def config(project_root: Path) -> ModuleConfig:
    """Configuration that reads the bundled Template Set."""
    return ModuleConfig(
        project_root=project_root,
        template_root=bundled_template_root(),
        modules_root=project_root / "modules",
    )


@pytest.fixture()
def local_templates(project_root: Path) -> Path:
    """Writable copy of the bundled Template Set at ``<project>/.template``."""
    target = project_root / ".template"
    shutil.copytree(bundled_template_root(), target)
    return target


@pytest.fixture()
def local_config(project_root: Path, local_templates: Path) -> ModuleConfig:
    """Configuration that reads the project-local Template Set copy."""
    return ModuleConfig(
        project_root=project_root,
        template_root=local_templates,
        modules_root=project_root / "modules",
    )


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2026, 10, 19, 8, 15, 30, 123456, tzinfo=timezone.utc)


SnapshotTree = Callable[[Path], dict[str, bytes]]


@pytest.fixture()
def snapshot_tree() -> SnapshotTree:
    """Return a helper mapping every file under a directory to its bytes."""

    def _snapshot(root: Path) -> dict[str, bytes]:
        return {
            path.relative_to(root).as_posix(): path.read_bytes()
            for path in sorted(root.rglob("*"))
            if path.is_file()
        }

    return _snapshot
