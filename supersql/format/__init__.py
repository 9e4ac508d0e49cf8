"""Formatter."""

from supersql.format.formatter import (
    TIGHT_OPERATORS,
    Formatter,
    document_edits,
    format_document,
    format_edits,
    format_tokens,
)
from supersql.format.options import FormatOptions

__all__ = [
    "TIGHT_OPERATORS",
    "FormatOptions",
    "Formatter",
    "document_edits",
    "format_document",
    "format_edits",
    "format_tokens",
]
