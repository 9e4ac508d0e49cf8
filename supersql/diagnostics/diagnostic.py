"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Any, Final, Literal, TypeAlias

from supersql.text import Range

Severity = Literal["error", "warning", "information", "hint"]

DIAGNOSTIC_SOURCE: Final[str] = "supersql"

LSP_SEVERITY: Final[dict[str, int]] = {
    "error": 1,
    "warning": 2,
    "information": 3,
    "hint": 4,
}

DiagnosticKey: TypeAlias = tuple[str, int, int, int, int]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the migration scanner."""

    code: str
    message: str
    range: Range
    severity: Severity = "error"
    source: str = DIAGNOSTIC_SOURCE
    category: str | None = None

    @property
    def key(self) -> DiagnosticKey:
        """Identity used to match editor-supplied diagnostics: code plus range."""
        return (self.code, *self.range.as_tuple())

    def to_dict(self) -> dict[str, Any]:
        return {
            "range": self.range.to_dict(),
            "severity": LSP_SEVERITY[self.severity],
            "code": self.code,
            "source": self.source,
            "message": self.message,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Diagnostic":
        severity_by_number = {number: name for name, number in LSP_SEVERITY.items()}
        return Diagnostic(
            code=str(data.get("code", "")),
            message=str(data.get("message", "")),
            range=Range.from_dict(data["range"]),
            severity=severity_by_number.get(data.get("severity", 1), "error"),
            source=str(data.get("source", DIAGNOSTIC_SOURCE)),
        )
