"""Module validators."""

from clap_orchestrator.validators.module_validator import (
    ValidationReport,
    print_validation_report,
    validate_module,
)

__all__ = ["ValidationReport", "print_validation_report", "validate_module"]
