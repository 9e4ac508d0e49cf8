"""Line-based scanner for deprecated syntax."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging

from supersql.diagnostics import Diagnostic
from supersql.migrate.rules import MigrationRule, default_migration_rules
from supersql.text import Range, TextEdit, byte_column

logger = logging.getLogger(__name__)

COMMENT_MARKER = "--"


@dataclass(frozen=True, slots=True)
class MigrationFinding:
    """A deprecated construct and, when the rule has one, the edit fixing it."""

    diagnostic: Diagnostic
    fix: TextEdit | None = None


def scan_migrations(text: str, rules: Sequence[MigrationRule] | None = None) -> list[MigrationFinding]:
    """Find deprecated constructs line by line.

    Positions are zero-based lines and UTF-8 byte columns. Matches starting
    after a line's first `--` are treated as comment text and skipped; this is
    a line-local heuristic that does not know about strings.
    """
    resolved_rules = tuple(rules) if rules is not None else default_migration_rules()
    findings: list[MigrationFinding] = []
    lines = text.split("\n")
    for line_number, line in enumerate(lines):
        findings.extend(_scan_line(line_number, line, resolved_rules))
    logger.debug("Scanned %d lines, %d migration findings", len(lines), len(findings))
    return findings


def _scan_line(line_number: int, line: str, rules: tuple[MigrationRule, ...]) -> list[MigrationFinding]:
    findings: list[MigrationFinding] = []
    comment_index = line.find(COMMENT_MARKER)
    for rule in rules:
        for match in rule.pattern.finditer(line):
            start, end = match.span()
            if comment_index >= 0 and start > comment_index:
                continue
            matched = match.group(0)
            if rule.skip_if_contains is not None and rule.skip_if_contains in matched:
                continue

            highlight_start = start
            suffix = rule.highlight_suffix
            if suffix is not None and len(matched) > len(suffix) and matched.endswith(suffix):
                highlight_start = end - len(suffix)

            start_column = byte_column(line, start)
            end_column = byte_column(line, end)
            diagnostic = Diagnostic(
                code=rule.code,
                message=rule.message,
                range=Range.on_line(line_number, byte_column(line, highlight_start), end_column),
                severity=rule.severity,
                category=rule.spec.category,
            )
            new_text = rule.new_text(match)
            fix = None
            if new_text is not None:
                fix = TextEdit(Range.on_line(line_number, start_column, end_column), new_text)
            findings.append(MigrationFinding(diagnostic=diagnostic, fix=fix))
    return findings
