"""Exceptions raised by module scaffolding and validation."""

from __future__ import annotations

from pathlib import Path

from clap_orchestrator.helpers.helpers_logging import print_error


class ScaffoldError(Exception):
    """Base error for template-set instantiation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def print_error(self) -> None:
        """Print the error message using the logging helper."""
        print_error(self.message)


class InvalidModuleNameError(ScaffoldError, ValueError):
    """Raised when a module name cannot be used as a path component."""


class ModuleExistsError(ScaffoldError):
    """Raised when the target module directory already exists."""

    def __init__(self, name: str, path: Path) -> None:
        super().__init__(f"Module '{name}' already exists at {path}")
        self.name = name
        self.path = path


class TemplateMissingError(ScaffoldError):
    """Raised when a Template Set file cannot be found or copied."""

    def __init__(self, template_file: Path) -> None:
        super().__init__(f"Template file not found: {template_file}")
        self.template_file = template_file


class TemplateReadError(ScaffoldError):
    """Raised when a Template Set file exists but cannot be read as UTF-8 text."""

    def __init__(self, template_file: Path, reason: str) -> None:
        super().__init__(f"Cannot read template file {template_file}: {reason}")
        self.template_file = template_file


class ModuleWriteError(ScaffoldError):
    """Raised when the module directory cannot be removed, created or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write module at {path}: {reason}")
        self.path = path


class UnknownPlaceholderError(ScaffoldError):
    """Raised when a file contains a placeholder the token set does not know."""

    def __init__(self, tokens: list[str], source: Path | None = None) -> None:
        where = f" in {source}" if source is not None else ""
        super().__init__(
            f"Unknown placeholder(s){where}: {', '.join(tokens)}"
        )
        self.tokens = tokens
        self.source = source


class ModuleNotFoundInProjectError(ScaffoldError):
    """Raised when validating a module whose directory does not exist."""

    def __init__(self, name: str, path: Path) -> None:
        super().__init__(f"Module '{name}' not found at {path}")
        self.name = name
        self.path = path
