"""Diagnostics."""

from supersql.diagnostics.codes import DiagnosticSpec
from supersql.diagnostics.diagnostic import (
    DIAGNOSTIC_SOURCE,
    LSP_SEVERITY,
    Diagnostic,
    DiagnosticKey,
    Severity,
)
from supersql.diagnostics.report import has_errors, sort_diagnostics

__all__ = [
    "DIAGNOSTIC_SOURCE",
    "LSP_SEVERITY",
    "Diagnostic",
    "DiagnosticKey",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
    "sort_diagnostics",
]
