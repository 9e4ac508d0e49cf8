"""Deprecated-syntax migration: scanning, fixes and code actions."""

from supersql.migrate.actions import (
    FIX_ALL_TITLE,
    CodeAction,
    CodeActionKind,
    WorkspaceEdit,
    build_code_actions,
    compose_fix_all,
    select_fix_all,
)
from supersql.migrate.rules import (
    MIGRATION_RULES,
    MigrationRule,
    default_migration_rules,
    validate_migration_rules,
)
from supersql.migrate.scanner import MigrationFinding, scan_migrations

__all__ = [
    "FIX_ALL_TITLE",
    "MIGRATION_RULES",
    "CodeAction",
    "CodeActionKind",
    "MigrationFinding",
    "MigrationRule",
    "WorkspaceEdit",
    "build_code_actions",
    "compose_fix_all",
    "default_migration_rules",
    "scan_migrations",
    "select_fix_all",
    "validate_migration_rules",
]
