"""Tool entrypoints and their result carriers."""

from supersql.pipeline.entrypoints import run_check, run_fix, run_format
from supersql.pipeline.results import CheckRunResult, FixRunResult, FormatRunResult

__all__ = [
    "CheckRunResult",
    "FixRunResult",
    "FormatRunResult",
    "run_check",
    "run_fix",
    "run_format",
]
