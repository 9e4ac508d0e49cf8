"""Migration rules for deprecated SuperSQL syntax."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import re
from typing import Final, TypeAlias

from supersql.diagnostics import DiagnosticSpec, Severity
from supersql.diagnostics.codes import (
    MIGRATION_DEPRECATED_ARROW,
    MIGRATION_DEPRECATED_CAST_DURATION,
    MIGRATION_DEPRECATED_CAST_IP,
    MIGRATION_DEPRECATED_CAST_NET,
    MIGRATION_DEPRECATED_CAST_TIME,
    MIGRATION_DEPRECATED_COMMENT_SLASH,
    MIGRATION_DEPRECATED_FUNC,
    MIGRATION_DEPRECATED_PARSE_ZSON,
    MIGRATION_DEPRECATED_YIELD,
    MIGRATION_IMPLICIT_THIS_GREP,
    MIGRATION_IMPLICIT_THIS_IS,
    MIGRATION_IMPLICIT_THIS_NEST_DOTTED,
    MIGRATION_REMOVED_CROP,
    MIGRATION_REMOVED_FILL,
    MIGRATION_REMOVED_FIT,
    MIGRATION_REMOVED_ORDER,
    MIGRATION_REMOVED_SHAPE,
)

FixFunction: TypeAlias = Callable[[re.Match[str]], str]


@dataclass(frozen=True, slots=True)
class MigrationRule:
    """One deprecated construct: where it matches and how to rewrite it.

    `replacement` is a fixed new text for the whole match; `fix` computes it
    from the match instead. Rules with neither only report.
    """

    spec: DiagnosticSpec
    pattern: re.Pattern[str]
    before: str
    after: str | None = None
    replacement: str | None = None
    fix: FixFunction | None = None
    # Matches containing this text are ignored.
    skip_if_contains: str | None = None
    # Narrow the reported range to this trailing marker; the edit still covers the match.
    highlight_suffix: str | None = None

    @property
    def code(self) -> str:
        return self.spec.code

    @property
    def message(self) -> str:
        return self.spec.message

    @property
    def severity(self) -> Severity:
        return self.spec.severity

    @property
    def has_fix(self) -> bool:
        return self.replacement is not None or self.fix is not None

    def new_text(self, match: re.Match[str]) -> str | None:
        """Replacement for `match`, or None if this rule only reports."""
        if self.fix is not None:
            return self.fix(match)
        return self.replacement


def _comment_marker(match: re.Match[str]) -> str:
    # The pattern consumes the character in front of `//`; keep it.
    return match.group(0)[:-2] + "--"


def _grep_with_this(match: re.Match[str]) -> str:
    pattern = match.group(1)
    if len(pattern) >= 2 and pattern.startswith("/") and pattern.endswith("/"):
        return f"grep('{pattern[1:-1]}', this)"
    return f"grep({pattern}, this)"


def _is_with_this(match: re.Match[str]) -> str:
    return f"is(this, {match.group(1)})"


def _cast_fix(type_name: str) -> FixFunction:
    def fix(match: re.Match[str]) -> str:
        return f"{match.group(1)}::{type_name}"

    return fix


def _cast_rule(spec: DiagnosticSpec, type_name: str) -> MigrationRule:
    return MigrationRule(
        spec=spec,
        pattern=re.compile(rf"""\b{type_name}\s*\(\s*('[^']*'|"[^"]*")\s*\)""", re.ASCII),
        before=f"{type_name}('...')",
        after=f"'...'::{type_name}",
        fix=_cast_fix(type_name),
    )


def _removed_function_rule(spec: DiagnosticSpec, name: str) -> MigrationRule:
    return MigrationRule(
        spec=spec,
        pattern=re.compile(rf"\b{name}\s*\(", re.ASCII),
        before=f"{name}()",
    )


MIGRATION_RULES: Final[tuple[MigrationRule, ...]] = (
    # Keyword renames
    MigrationRule(
        spec=MIGRATION_DEPRECATED_YIELD,
        pattern=re.compile(r"\byield\b", re.ASCII),
        before="yield",
        after="values",
        replacement="values",
    ),
    MigrationRule(
        spec=MIGRATION_DEPRECATED_FUNC,
        pattern=re.compile(r"\bfunc\b", re.ASCII),
        before="func",
        after="fn",
        replacement="fn",
    ),
    MigrationRule(
        spec=MIGRATION_DEPRECATED_ARROW,
        pattern=re.compile(r"=>", re.ASCII),
        before="=>",
        after="into",
        replacement="into",
    ),
    MigrationRule(
        spec=MIGRATION_DEPRECATED_COMMENT_SLASH,
        pattern=re.compile(r"(^|[^:])//", re.ASCII),
        before="//",
        after="--",
        fix=_comment_marker,
        skip_if_contains="://",
        highlight_suffix="//",
    ),
    # Function renames
    MigrationRule(
        spec=MIGRATION_DEPRECATED_PARSE_ZSON,
        pattern=re.compile(r"\bparse_zson\s*\(", re.ASCII),
        before="parse_zson",
        after="parse_sup",
        replacement="parse_sup(",
    ),
    # Implicit `this` argument
    MigrationRule(
        spec=MIGRATION_IMPLICIT_THIS_GREP,
        pattern=re.compile(r"""\bgrep\s*\(\s*(/[^/]*/|'[^']*'|"[^"]*")\s*\)""", re.ASCII),
        before="grep(pattern)",
        after="grep(pattern, this)",
        fix=_grep_with_this,
    ),
    MigrationRule(
        spec=MIGRATION_IMPLICIT_THIS_IS,
        pattern=re.compile(r"\bis\s*\(\s*(<[^>]+>)\s*\)", re.ASCII),
        before="is(<type>)",
        after="is(this, <type>)",
        fix=_is_with_this,
    ),
    MigrationRule(
        spec=MIGRATION_IMPLICIT_THIS_NEST_DOTTED,
        pattern=re.compile(r"\bnest_dotted\s*\(\s*\)", re.ASCII),
        before="nest_dotted()",
        after="nest_dotted(this)",
        replacement="nest_dotted(this)",
    ),
    # Function-style casts
    _cast_rule(MIGRATION_DEPRECATED_CAST_TIME, "time"),
    _cast_rule(MIGRATION_DEPRECATED_CAST_DURATION, "duration"),
    _cast_rule(MIGRATION_DEPRECATED_CAST_IP, "ip"),
    _cast_rule(MIGRATION_DEPRECATED_CAST_NET, "net"),
    # Removed functions
    _removed_function_rule(MIGRATION_REMOVED_CROP, "crop"),
    _removed_function_rule(MIGRATION_REMOVED_FILL, "fill"),
    _removed_function_rule(MIGRATION_REMOVED_FIT, "fit"),
    _removed_function_rule(MIGRATION_REMOVED_ORDER, "order"),
    _removed_function_rule(MIGRATION_REMOVED_SHAPE, "shape"),
)


def default_migration_rules() -> tuple[MigrationRule, ...]:
    return MIGRATION_RULES


def validate_migration_rules(rules: tuple[MigrationRule, ...]) -> None:
    seen: set[str] = set()
    for rule in rules:
        if rule.code in seen:
            raise ValueError(f"Migration rule `{rule.code}` is registered more than once.")
        seen.add(rule.code)
        if rule.replacement is not None and rule.fix is not None:
            raise ValueError(
                f"Migration rule `{rule.code}` has both a replacement and a fix function; expected at most one."
            )
        if rule.highlight_suffix is not None and not rule.highlight_suffix:
            raise ValueError(f"Migration rule `{rule.code}` has an empty highlight suffix.")
