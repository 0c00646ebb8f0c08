"""Diagnostics."""

from descentpy.diagnostics.codes import (
    PARSER_NO_MATCH,
    PARSER_TRAILING_INPUT,
    DiagnosticSpec,
)
from descentpy.diagnostics.diagnostic import Diagnostic, Severity
from descentpy.diagnostics.report import has_errors

__all__ = [
    "PARSER_NO_MATCH",
    "PARSER_TRAILING_INPUT",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
]
