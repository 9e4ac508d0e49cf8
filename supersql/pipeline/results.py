"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from supersql.diagnostics import Diagnostic
from supersql.migrate import MigrationFinding
from supersql.text import TextEdit


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting one document."""

    source_text: str
    formatted_text: str
    edits: list[TextEdit]

    @property
    def changed(self) -> bool:
        return self.formatted_text != self.source_text


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of scanning one document for deprecated syntax."""

    source_text: str
    findings: list[MigrationFinding]
    diagnostics: list[Diagnostic]
    has_errors: bool

    @property
    def fixable_count(self) -> int:
        return sum(1 for finding in self.findings if finding.fix is not None)


@dataclass(frozen=True, slots=True)
class FixRunResult:
    """Result of applying the fix-all batch to one document."""

    source_text: str
    fixed_text: str
    edits: list[TextEdit]
    remaining: list[Diagnostic]

    @property
    def changed(self) -> bool:
        return self.fixed_text != self.source_text
