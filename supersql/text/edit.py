"""Text edits addressed by (line, UTF-8 byte column) ranges."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from supersql.text.text import Range, char_index


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace `range` with `new_text`."""

    range: Range
    new_text: str

    def to_dict(self) -> dict[str, Any]:
        return {"range": self.range.to_dict(), "newText": self.new_text}

    @staticmethod
    def from_dict(data: dict[str, Any]) -> TextEdit:
        return TextEdit(Range.from_dict(data["range"]), str(data["newText"]))


def apply_edit(text: str, edit: TextEdit) -> str:
    """Apply one edit to `text`.

    Raises ValueError when the edit range does not exist in `text`.
    """
    lines = text.split("\n")
    start, end = edit.range.start, edit.range.end
    if end.line >= len(lines):
        raise ValueError(f"Edit range {edit.range!r} is past the last line ({len(lines) - 1})")
    start_index = _offset(lines, start.line) + char_index(lines[start.line], start.character)
    end_index = _offset(lines, end.line) + char_index(lines[end.line], end.character)
    return text[:start_index] + edit.new_text + text[end_index:]


def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """Apply edits one after another, each against the text left by the previous one.

    Edits are not re-resolved: pass them last-to-first (as `compose_fix_all`
    returns them) so every range still points at original text.
    """
    for edit in edits:
        text = apply_edit(text, edit)
    return text


def _offset(lines: list[str], line: int) -> int:
    return sum(len(previous) + 1 for previous in lines[:line])
