"""Schema validation with diagnostic collection."""

from .diagnostics import NO_ERRORS_MESSAGE, Diagnostic, Severity, ValidationReport
from .schema_validator import load_schema, validate, validate_document

__all__ = [
    "NO_ERRORS_MESSAGE",
    "Diagnostic",
    "Severity",
    "ValidationReport",
    "load_schema",
    "validate",
    "validate_document",
]
