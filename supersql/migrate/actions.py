"""Quick-fix and fix-all code actions for migration findings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
import logging
from typing import Any

from supersql.diagnostics import Diagnostic, DiagnosticKey
from supersql.migrate.rules import MigrationRule
from supersql.migrate.scanner import MigrationFinding, scan_migrations
from supersql.text import Position, TextEdit

logger = logging.getLogger(__name__)

FIX_ALL_TITLE = "Fix all deprecated syntax"


class CodeActionKind(StrEnum):
    QUICK_FIX = "quickfix"
    SOURCE_FIX_ALL = "source.fixAll"


@dataclass(frozen=True, slots=True)
class WorkspaceEdit:
    """Edits grouped by document id."""

    changes: dict[str, list[TextEdit]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "changes": {
                document_id: [edit.to_dict() for edit in edits] for document_id, edits in self.changes.items()
            }
        }


@dataclass(frozen=True, slots=True)
class CodeAction:
    title: str
    kind: CodeActionKind
    diagnostics: list[Diagnostic]
    edit: WorkspaceEdit
    is_preferred: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "kind": str(self.kind),
            "diagnostics": [diagnostic.to_dict() for diagnostic in self.diagnostics],
            "edit": self.edit.to_dict(),
        }
        if self.is_preferred:
            data["isPreferred"] = True
        return data


def select_fix_all(findings: Iterable[MigrationFinding]) -> list[MigrationFinding]:
    """Fixable findings whose edits do not overlap, in document order.

    On overlap the edit starting first wins; at the same start, the longer one.
    """
    return [finding for finding, _ in _select_fixes(findings)]


def _select_fixes(findings: Iterable[MigrationFinding]) -> list[tuple[MigrationFinding, TextEdit]]:
    candidates = [(finding, finding.fix) for finding in findings if finding.fix is not None]
    candidates.sort(key=lambda pair: pair[1].range.end, reverse=True)
    candidates.sort(key=lambda pair: pair[1].range.start)

    # Accepted edits are disjoint and sorted, so only the last end can collide.
    selected: list[tuple[MigrationFinding, TextEdit]] = []
    last_end: Position | None = None
    for finding, fix in candidates:
        if last_end is not None and fix.range.start < last_end:
            logger.debug("Dropping overlapping %s fix at %r", finding.diagnostic.code, fix.range)
            continue
        selected.append((finding, fix))
        last_end = fix.range.end
    return selected


def _last_to_first(edits: Iterable[TextEdit]) -> list[TextEdit]:
    return sorted(edits, key=lambda edit: edit.range.start, reverse=True)


def compose_fix_all(findings: Iterable[MigrationFinding]) -> list[TextEdit]:
    """One conflict-free batch of edits, ordered last-to-first.

    Applying the edits in the returned order keeps every range valid against
    the original document, since each edit only touches text after the ones
    still to come.
    """
    return _last_to_first(fix for _, fix in _select_fixes(findings))


def build_code_actions(
    document_id: str,
    text: str,
    requested: Iterable[Diagnostic],
    rules: Sequence[MigrationRule] | None = None,
) -> list[CodeAction]:
    """Code actions for the diagnostics an editor asks about.

    One quick-fix per requested diagnostic matching a fixable finding (by code
    and range), plus a fix-all action when the document has more than one
    fixable finding.
    """
    fixable: dict[DiagnosticKey, MigrationFinding] = {}
    for finding in scan_migrations(text, rules):
        if finding.fix is not None:
            fixable.setdefault(finding.diagnostic.key, finding)

    actions: list[CodeAction] = []
    for diagnostic in requested:
        finding = fixable.get(diagnostic.key)
        if finding is None or finding.fix is None:
            continue
        actions.append(
            CodeAction(
                title=f"Replace with '{finding.fix.new_text}'",
                kind=CodeActionKind.QUICK_FIX,
                diagnostics=[finding.diagnostic],
                edit=WorkspaceEdit({document_id: [finding.fix]}),
                is_preferred=True,
            )
        )

    if len(fixable) > 1:
        selected = _select_fixes(fixable.values())
        actions.append(
            CodeAction(
                title=FIX_ALL_TITLE,
                kind=CodeActionKind.SOURCE_FIX_ALL,
                diagnostics=[finding.diagnostic for finding, _ in selected],
                edit=WorkspaceEdit({document_id: _last_to_first(fix for _, fix in selected)}),
            )
        )

    logger.debug("Built %d code actions for %s", len(actions), document_id)
    return actions
