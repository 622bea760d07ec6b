"""Create module directories from the Template Set.

Both ``clap create-module`` and ``clap generate`` go through
``instantiate_template_set``; they differ only in the placeholder tokens they
substitute. Interactive decisions (overwrite confirmation, name prompts) live
in the CLI layer and arrive here as plain arguments.

Two concurrent runs against the same module name are not guarded against;
the last writer wins.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from clap_orchestrator.core.errors import (
    ModuleExistsError,
    ModuleWriteError,
    TemplateMissingError,
)
from clap_orchestrator.core.naming import module_dir_name, sanitize_module_name
from clap_orchestrator.core.placeholders import (
    TokenSet,
    creation_timestamp,
    generator_tokens,
    render_template,
    scaffold_tokens,
)
from clap_orchestrator.helpers.project_config import ModuleConfig

MODULE_SPEC_FILE = "module-spec.md"
I18N_KEYS_FILE = "i18n-keys.md"
STATUS_FILE = "status.json"
INSTRUCTIONS_DIR = ".instructions"

TokenFactory = Callable[[str, str], TokenSet]


@dataclass
class ScaffoldResult:
    """Outcome of a successful template-set instantiation."""

    name: str
    path: Path
    created_at: str
    files: list[Path] = field(default_factory=list)
    overwritten: bool = False

    @property
    def instruction_files(self) -> list[Path]:
        return [f for f in self.files if f.parts[0] == INSTRUCTIONS_DIR]


def template_set_files(template_root: Path) -> list[Path]:
    """Return the Template Set as paths relative to ``template_root``.

    The three top-level files are always listed, present or not, so that a
    missing one surfaces as a copy failure. Instruction documents are every
    ``*.md`` file in the ``.instructions/`` directory.
    """
    instructions_root = template_root / INSTRUCTIONS_DIR
    instruction_files = (
        sorted(instructions_root.glob("*.md")) if instructions_root.is_dir() else []
    )
    return [
        Path(MODULE_SPEC_FILE),
        *(Path(INSTRUCTIONS_DIR) / f.name for f in instruction_files),
        Path(I18N_KEYS_FILE),
        Path(STATUS_FILE),
    ]


def _render_template_set(
    template_root: Path, files: list[Path], tokens: TokenSet,
) -> dict[Path, str]:
    """Read and substitute every Template Set file without writing anything."""
    rendered: dict[Path, str] = {}
    for relative in files:
        source = template_root / relative
        if not source.is_file():
            raise TemplateMissingError(source)
        rendered[relative] = render_template(source, tokens)
    return rendered


def _write_module(
    template_root: Path, module_root: Path, rendered: dict[Path, str],
) -> None:
    """Create the module directory and write the rendered Template Set into it."""
    try:
        module_root.mkdir(parents=True)
        (module_root / INSTRUCTIONS_DIR).mkdir()
        for relative, content in rendered.items():
            target = module_root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(template_root / relative, target)
            target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ModuleWriteError(module_root, str(exc)) from exc


def instantiate_template_set(
    raw_name: str,
    config: ModuleConfig,
    token_factory: TokenFactory,
    force: bool = False,
    now: datetime | None = None,
) -> ScaffoldResult:
    """Copy the Template Set into a new module and substitute placeholders.

    Every template is read and substituted before the module directory is
    touched. An existing module is removed only after that succeeds.

    Args:
        raw_name: Module name as typed by the user (sanitized here)
        config: Template and output locations
        token_factory: Builds the token set from (name, created_at)
        force: Remove an existing module directory instead of failing
        now: Creation time override (default: current UTC time)

    Raises:
        InvalidModuleNameError: If the name cannot be sanitized
        ModuleExistsError: If the module exists and ``force`` is false
        TemplateMissingError: If a Template Set file does not exist
        TemplateReadError: If a Template Set file is unreadable or not UTF-8
        UnknownPlaceholderError: If a template contains an unknown placeholder
        ModuleWriteError: If the module directory cannot be removed or written
    """
    created_at = creation_timestamp(now)
    name = sanitize_module_name(raw_name)
    module_root = config.modules_root / module_dir_name(name)

    exists = module_root.exists()
    if exists and not force:
        raise ModuleExistsError(name, module_root)

    files = template_set_files(config.template_root)
    rendered = _render_template_set(
        config.template_root, files, token_factory(name, created_at),
    )

    if exists:
        try:
            shutil.rmtree(module_root)
        except OSError as exc:
            raise ModuleWriteError(module_root, str(exc)) from exc

    _write_module(config.template_root, module_root, rendered)

    return ScaffoldResult(
        name=name,
        path=module_root,
        created_at=created_at,
        files=files,
        overwritten=exists,
    )


def scaffold_module(
    raw_name: str,
    config: ModuleConfig,
    force: bool = False,
    now: datetime | None = None,
) -> ScaffoldResult:
    """Create a module, substituting the name, timestamp and slug tokens."""
    return instantiate_template_set(raw_name, config, scaffold_tokens, force=force, now=now)


def generate_module(
    raw_name: str,
    config: ModuleConfig,
    force: bool = False,
    now: datetime | None = None,
) -> ScaffoldResult:
    """(Re)generate a module, substituting only the name and timestamp tokens."""
    return instantiate_template_set(raw_name, config, generator_tokens, force=force, now=now)
