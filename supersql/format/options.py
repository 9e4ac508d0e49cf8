"""Formatter layout options."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Layout options controlling indentation and end-of-file handling."""

    indent_width: int = 2
    use_spaces: bool = True
    trim_trailing_whitespace: bool = False
    insert_final_newline: bool = False
    trim_final_newlines: bool = False

    def __post_init__(self):
        if self.indent_width < 0:
            raise ValueError("indent_width cannot be negative")

    @property
    def indent_unit(self) -> str:
        """Text written once per indent level."""
        return " " * self.indent_width if self.use_spaces else "\t"

    @staticmethod
    def from_lsp(options: Mapping[str, Any]) -> "FormatOptions":
        """Build options from editor-protocol `FormattingOptions` keys.

        A missing or zero `tabSize` falls back to 2.
        """
        return FormatOptions(
            indent_width=int(options.get("tabSize") or 2),
            use_spaces=bool(options.get("insertSpaces", True)),
            trim_trailing_whitespace=bool(options.get("trimTrailingWhitespace", False)),
            insert_final_newline=bool(options.get("insertFinalNewline", False)),
            trim_final_newlines=bool(options.get("trimFinalNewlines", False)),
        )
