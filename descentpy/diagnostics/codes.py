"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_NO_MATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NO_MATCH",
    message="Input does not match the grammar at its first character.",
    hint="Expressions start with a single digit, e.g. `1+2*3`.",
    severity="error",
    category="parser",
)

PARSER_TRAILING_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_INPUT",
    message="Input matched only partially; trailing text was not consumed.",
    hint="Numbers are single digits. Join operands with `+` or `*`.",
    severity="error",
    category="parser",
)
