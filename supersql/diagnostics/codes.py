"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from supersql.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


# -------------------------
# Keyword and operator renames
# -------------------------
MIGRATION_DEPRECATED_YIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="deprecated-yield",
    message="'yield' is deprecated, use 'values'",
    severity="warning",
    category="migration",
)

MIGRATION_DEPRECATED_FUNC: Final[DiagnosticSpec] = DiagnosticSpec(
    code="deprecated-func",
    message="'func' is deprecated, use 'fn'",
    severity="warning",
    category="migration",
)

MIGRATION_DEPRECATED_ARROW: Final[DiagnosticSpec] = DiagnosticSpec(
    code="deprecated-arrow",
    message="'=>' is deprecated, use 'into'",
    severity="warning",
    category="migration",
)

MIGRATION_DEPRECATED_COMMENT_SLASH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="deprecated-comment-slash",
    message="'//' comments are deprecated, use '--'",
    severity="warning",
    category="migration",
)

MIGRATION_DEPRECATED_PARSE_ZSON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="deprecated-parse-zson",
    message="'parse_zson' is deprecated, use 'parse_sup'",
    severity="warning",
    category="migration",
)

# -------------------------
# Implicit `this` arguments
# -------------------------
MIGRATION_IMPLICIT_THIS_GREP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="implicit-this-grep",
    message="grep() requires explicit 'this' argument",
    severity="warning",
    category="migration",
)

MIGRATION_IMPLICIT_THIS_IS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="implicit-this-is",
    message="is() requires explicit 'this' argument",
    severity="warning",
    category="migration",
)

MIGRATION_IMPLICIT_THIS_NEST_DOTTED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="implicit-this-nest-dotted",
    message="nest_dotted() requires explicit 'this' argument",
    severity="warning",
    category="migration",
)

# -------------------------
# Function-style casts
# -------------------------
MIGRATION_DEPRECATED_CAST_TIME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="deprecated-cast-time",
    message="Function-style cast deprecated, use '::time'",
    severity="warning",
    category="migration",
)

MIGRATION_DEPRECATED_CAST_DURATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="deprecated-cast-duration",
    message="Function-style cast deprecated, use '::duration'",
    severity="warning",
    category="migration",
)

MIGRATION_DEPRECATED_CAST_IP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="deprecated-cast-ip",
    message="Function-style cast deprecated, use '::ip'",
    severity="warning",
    category="migration",
)

MIGRATION_DEPRECATED_CAST_NET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="deprecated-cast-net",
    message="Function-style cast deprecated, use '::net'",
    severity="warning",
    category="migration",
)

# -------------------------
# Removed functions (no automatic fix)
# -------------------------
MIGRATION_REMOVED_CROP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="removed-crop",
    message="'crop()' was removed, use explicit casting",
    severity="error",
    category="migration",
)

MIGRATION_REMOVED_FILL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="removed-fill",
    message="'fill()' was removed, use explicit casting",
    severity="error",
    category="migration",
)

MIGRATION_REMOVED_FIT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="removed-fit",
    message="'fit()' was removed, use explicit casting",
    severity="error",
    category="migration",
)

MIGRATION_REMOVED_ORDER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="removed-order",
    message="'order()' was removed, use explicit casting",
    severity="error",
    category="migration",
)

MIGRATION_REMOVED_SHAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="removed-shape",
    message="'shape()' was removed, use explicit casting",
    severity="error",
    category="migration",
)
