"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from descentpy.diagnostics.codes import DiagnosticSpec
from descentpy.text import InputIndex

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic describing the outcome of a whole-input parse."""

    code: str
    message: str
    position: InputIndex
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, position: InputIndex) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.message,
            position=position,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
