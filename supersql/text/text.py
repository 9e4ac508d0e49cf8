from dataclasses import dataclass
from typing import Any, Final, Literal


def utf8_len(text: str) -> int:
    """Length of `text` in UTF-8 bytes."""
    return len(text.encode("utf-8"))


def byte_column(line: str, index: int) -> int:
    """Convert a Python string index within `line` into a UTF-8 byte column."""
    return utf8_len(line[:index])


def char_index(line: str, column: int) -> int:
    """Convert a UTF-8 byte column within `line` back into a string index.

    Raises if the column falls outside the line or inside a multi-byte character.
    """
    encoded = line.encode("utf-8")
    if column < 0 or column > len(encoded):
        raise ValueError(f"Column {column} is outside a line of {len(encoded)} bytes")
    try:
        return len(encoded[:column].decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise ValueError(f"Column {column} splits a multi-byte character") from exc


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based (line, character) position; `character` counts UTF-8 bytes."""

    line: int
    character: int

    def __post_init__(self):
        if self.line < 0 or self.character < 0:
            raise ValueError("Position cannot be negative")

    def as_tuple(self) -> tuple[int, int]:
        return (self.line, self.character)

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "character": self.character}

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Position":
        return Position(int(data["line"]), int(data["character"]))

    def __repr__(self) -> str:
        return f"Position({self.line}, {self.character})"


ORIGIN: Final[Position] = Position(0, 0)
"""Start of every document."""


@dataclass(frozen=True, slots=True, order=True)
class Range:
    """
    Half-open range [start, end) between two positions.

    Invariant:
    - start <= end
    """

    start: Position
    end: Position

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError("Range invariant violated: start > end")

    @staticmethod
    def on_line(line: int, start: int, end: int) -> "Range":
        """Create a single-line range from byte columns."""
        return Range(Position(line, start), Position(line, end))

    @staticmethod
    def empty(position: Position) -> "Range":
        """Create an empty range at the given position."""
        return Range(position, position)

    def is_empty(self) -> bool:
        return self.start == self.end

    def is_single_line(self) -> bool:
        return self.start.line == self.end.line

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Get the range as (start line, start col, end line, end col)."""
        return (*self.start.as_tuple(), *self.end.as_tuple())

    def contains(self, position: Position) -> bool:
        return self.start <= position < self.end

    def ordering(self, other: "Range") -> Literal[-1, 0, 1]:
        """Compare this range to another range for ordering.

        Returns:
        - -1 if this range is before the other range
        - 0 if the ranges overlap
        - 1 if this range is after the other range
        """
        if self.end <= other.start:
            return -1
        elif other.end <= self.start:
            return 1
        else:
            return 0

    def overlaps(self, other: "Range") -> bool:
        return self.ordering(other) == 0

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Range":
        return Range(Position.from_dict(data["start"]), Position.from_dict(data["end"]))

    def __repr__(self) -> str:
        return f"Range({self.start.line}:{self.start.character}, {self.end.line}:{self.end.character})"


def document_end(text: str) -> Position:
    """Position just past the last character of `text`."""
    line = text.count("\n")
    last_line = text[text.rfind("\n") + 1 :]
    return Position(line, utf8_len(last_line))
