"""Pre-generation validation of model generation targets."""

from modelmapper.validation.analyzers import (
    ANALYZERS,
    check_closed_generics,
    check_records_not_used,
    check_single_target_per_module,
    check_unique_type_names,
    run_analyzers,
    suppressed_declarations,
)
from modelmapper.validation.rules import (
    ALL_RULES,
    Diagnostic,
    DiagnosticDescriptor,
    Severity,
)

__all__ = [
    "ALL_RULES",
    "ANALYZERS",
    "Diagnostic",
    "DiagnosticDescriptor",
    "Severity",
    "check_closed_generics",
    "check_records_not_used",
    "check_single_target_per_module",
    "check_unique_type_names",
    "run_analyzers",
    "suppressed_declarations",
]
