"""Structural validation of a scaffolded module.

Checks run in a fixed order and accumulate instead of stopping at the first
problem. Missing required files and an unparsable ``status.json`` fail the
module; missing section titles and leftover placeholders are only warnings,
because section wording is free-form prose and example placeholders may be
left in illustrative text on purpose.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from clap_orchestrator.core.errors import ModuleNotFoundInProjectError
from clap_orchestrator.core.module_scaffolder import (
    I18N_KEYS_FILE,
    INSTRUCTIONS_DIR,
    MODULE_SPEC_FILE,
    STATUS_FILE,
)
from clap_orchestrator.core.naming import (
    display_module_path,
    module_dir_name,
    publish_command,
    sanitize_module_name,
)
from clap_orchestrator.core.placeholders import ENTITY_TOKEN, MODULE_NAME_TOKEN
from clap_orchestrator.helpers.helpers_logging import (
    Colors,
    print_banner,
    print_command,
    print_header,
    print_info,
    print_success,
    print_warning,
)
from clap_orchestrator.helpers.project_config import ModuleConfig

REQUIRED_FILES: list[str] = [
    MODULE_SPEC_FILE,
    I18N_KEYS_FILE,
    STATUS_FILE,
    f"{INSTRUCTIONS_DIR}/01-domain.md",
    f"{INSTRUCTIONS_DIR}/02-infrastructure.md",
    f"{INSTRUCTIONS_DIR}/03-ui.md",
    f"{INSTRUCTIONS_DIR}/04-frontend-admin.md",
    f"{INSTRUCTIONS_DIR}/05-frontend-user.md",
    f"{INSTRUCTIONS_DIR}/06-kiwi-di.md",
]

REQUIRED_SECTIONS: list[str] = [
    "Module Overview",
    "Domain Layer",
    "Infrastructure Layer",
    "UI Layer",
    "Frontend Admin",
    "Frontend User",
    "i18n Keys",
    "Kiwi DI Setup",
]

LEFTOVER_PLACEHOLDERS: list[str] = [MODULE_NAME_TOKEN, ENTITY_TOKEN]


@dataclass
class FileCheck:
    """Presence of one required file."""

    path: str
    present: bool


@dataclass
class SectionCheck:
    """Presence of one required section title in module-spec.md."""

    title: str
    found: bool


@dataclass
class JsonCheck:
    """Result of parsing status.json."""

    present: bool
    valid: bool
    error: str | None = None


@dataclass
class PlaceholderHit:
    """A leftover placeholder marker and the files still containing it."""

    marker: str
    files: list[str]


@dataclass
class ValidationReport:
    """Itemized result of validating one module."""

    name: str
    path: Path
    display_path: str = ""
    files: list[FileCheck] = field(default_factory=list)
    sections: list[SectionCheck] = field(default_factory=list)
    status_json: JsonCheck = field(default_factory=lambda: JsonCheck(False, False))
    leftovers: list[PlaceholderHit] = field(default_factory=list)

    @property
    def missing_files(self) -> list[str]:
        return [check.path for check in self.files if not check.present]

    @property
    def missing_sections(self) -> list[str]:
        return [check.title for check in self.sections if not check.found]

    @property
    def errors(self) -> list[str]:
        errors = [f"{path} (missing)" for path in self.missing_files]
        if not self.status_json.present:
            errors.append(f"{STATUS_FILE} not found")
        elif not self.status_json.valid:
            errors.append(f"Invalid JSON format in {STATUS_FILE}: {self.status_json.error}")
        return errors

    @property
    def warnings(self) -> list[str]:
        warnings = [
            f"{title} (not found, may need to be added)"
            for title in self.missing_sections
        ]
        warnings.extend(
            f"Found {hit.marker} placeholders - please replace"
            for hit in self.leftovers
        )
        return warnings

    @property
    def passed(self) -> bool:
        return not self.errors

    def publish_command(self) -> str:
        """Return the command that hands the module to the PR workflow."""
        return publish_command(self.name, self.display_path or str(self.path))


def _check_files(module_root: Path) -> list[FileCheck]:
    return [
        FileCheck(path=relative, present=(module_root / relative).is_file())
        for relative in REQUIRED_FILES
    ]


def _check_sections(module_root: Path) -> list[SectionCheck]:
    spec_file = module_root / MODULE_SPEC_FILE
    text = ""
    if spec_file.is_file():
        text = spec_file.read_text(encoding="utf-8", errors="replace").lower()
    return [
        SectionCheck(title=title, found=title.lower() in text)
        for title in REQUIRED_SECTIONS
    ]


def _check_status_json(module_root: Path) -> JsonCheck:
    status_file = module_root / STATUS_FILE
    if not status_file.is_file():
        return JsonCheck(present=False, valid=False)
    try:
        json.loads(status_file.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        return JsonCheck(present=True, valid=False, error=str(exc))
    return JsonCheck(present=True, valid=True)


def _scan_leftovers(module_root: Path) -> list[PlaceholderHit]:
    """Search every file under the module for unsubstituted markers."""
    contents: dict[str, str] = {}
    for path in sorted(module_root.rglob("*")):
        if path.is_file():
            relative = path.relative_to(module_root).as_posix()
            contents[relative] = path.read_text(encoding="utf-8", errors="replace")

    hits: list[PlaceholderHit] = []
    for marker in LEFTOVER_PLACEHOLDERS:
        files = [relative for relative, text in contents.items() if marker in text]
        if files:
            hits.append(PlaceholderHit(marker=marker, files=files))
    return hits


def validate_module(raw_name: str, config: ModuleConfig) -> ValidationReport:
    """Validate the module named ``raw_name``. Does not modify the module.

    Raises:
        InvalidModuleNameError: If the name cannot be sanitized
        ModuleNotFoundInProjectError: If the module directory does not exist
    """
    name = sanitize_module_name(raw_name)
    module_root = config.modules_root / module_dir_name(name)
    if not module_root.is_dir():
        raise ModuleNotFoundInProjectError(name, module_root)

    return ValidationReport(
        name=name,
        path=module_root,
        display_path=display_module_path(module_root, config),
        files=_check_files(module_root),
        sections=_check_sections(module_root),
        status_json=_check_status_json(module_root),
        leftovers=_scan_leftovers(module_root),
    )


def _print_fail(msg: str) -> None:
    print(f"{Colors.RED}✗ {msg}{Colors.RESET}")


def print_validation_report(report: ValidationReport) -> None:
    """Print the itemized report followed by the overall result."""
    print_info(f"Validating module: {report.name}")
    print()

    print_header("Checking required files...")
    for check in report.files:
        if check.present:
            print_success(check.path)
        else:
            _print_fail(f"{check.path} (missing)")
    print()

    print_header(f"Validating {MODULE_SPEC_FILE} content...")
    for section in report.sections:
        if section.found:
            print_success(section.title)
        else:
            print_warning(f"{section.title} (not found, may need to be added)")
    print()

    print_header(f"Validating {STATUS_FILE}...")
    if not report.status_json.present:
        _print_fail(f"{STATUS_FILE} not found")
    elif report.status_json.valid:
        print_success("Valid JSON format")
    else:
        _print_fail(f"Invalid JSON format: {report.status_json.error}")
    print()

    print_header("Checking for placeholder text...")
    if not report.leftovers:
        print_success("No leftover placeholders")
    for hit in report.leftovers:
        print_warning(f"Found {hit.marker} placeholders - please replace")
        for path in hit.files:
            print(f"     {Colors.DIM}{path}{Colors.RESET}")
    print()

    if report.passed:
        print_banner("Validation PASSED ✓", Colors.GREEN)
        print_info("Your module is ready to be submitted!")
        print()
        print("To create PRs across all repositories, run:")
        print_command(report.publish_command())
        print()
    else:
        print_banner("Validation FAILED ✗", Colors.RED)
        print_warning("Please fix the issues above and run validation again.")
        print()
