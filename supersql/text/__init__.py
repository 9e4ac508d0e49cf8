"""Text positions and edits."""

from supersql.text.edit import TextEdit, apply_edit, apply_edits
from supersql.text.text import (
    ORIGIN,
    Position,
    Range,
    byte_column,
    char_index,
    document_end,
    utf8_len,
)

__all__ = [
    "ORIGIN",
    "Position",
    "Range",
    "TextEdit",
    "apply_edit",
    "apply_edits",
    "byte_column",
    "char_index",
    "document_end",
    "utf8_len",
]
