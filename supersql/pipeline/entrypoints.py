"""Unified entrypoints that run format/check/fix over one document."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from supersql.diagnostics import has_errors, sort_diagnostics
from supersql.format import FormatOptions, document_edits, format_document
from supersql.migrate import (
    MigrationRule,
    compose_fix_all,
    default_migration_rules,
    scan_migrations,
    validate_migration_rules,
)
from supersql.pipeline.results import CheckRunResult, FixRunResult, FormatRunResult
from supersql.text import apply_edits

logger = logging.getLogger(__name__)


def run_format(text: str, options: FormatOptions | None = None) -> FormatRunResult:
    """Format a document and describe the change as editor edits."""
    formatted = format_document(text, options)
    return FormatRunResult(source_text=text, formatted_text=formatted, edits=document_edits(text, formatted))


def run_check(text: str, rules: Sequence[MigrationRule] | None = None) -> CheckRunResult:
    """Scan a document for deprecated syntax."""
    resolved_rules = _resolve_rules(rules)
    findings = scan_migrations(text, resolved_rules)
    diagnostics = sort_diagnostics(finding.diagnostic for finding in findings)
    return CheckRunResult(
        source_text=text,
        findings=findings,
        diagnostics=diagnostics,
        has_errors=has_errors(diagnostics),
    )


def run_fix(text: str, rules: Sequence[MigrationRule] | None = None) -> FixRunResult:
    """Apply every non-conflicting automatic fix and rescan the result."""
    resolved_rules = _resolve_rules(rules)
    edits = compose_fix_all(scan_migrations(text, resolved_rules))
    fixed = apply_edits(text, edits)
    remaining = sort_diagnostics(finding.diagnostic for finding in scan_migrations(fixed, resolved_rules))
    logger.debug("Applied %d fixes, %d diagnostics remain", len(edits), len(remaining))
    return FixRunResult(source_text=text, fixed_text=fixed, edits=edits, remaining=remaining)


def _resolve_rules(rules: Sequence[MigrationRule] | None) -> tuple[MigrationRule, ...]:
    if rules is None:
        return default_migration_rules()
    resolved = tuple(rules)
    validate_migration_rules(resolved)
    return resolved
