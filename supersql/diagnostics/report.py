"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from supersql.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return sorted(
        diagnostics,
        key=lambda diagnostic: (
            diagnostic.range.start,
            diagnostic.range.end,
            diagnostic.code,
        ),
    )
