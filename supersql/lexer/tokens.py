"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final


class TokenKind(IntEnum):
    # -------------------------
    # Trivia tokens
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    LINE_COMMENT = 12  # -- to end of line
    BLOCK_COMMENT = 13  # /* ... */, possibly unterminated

    # -------------------------
    # Literals / names
    # -------------------------
    STRING = 20  # "..." '...' f"..." r'...'
    REGEX = 21  # /.../
    IDENTIFIER = 22
    KEYWORD = 23
    NUMBER = 24  # 42 0xff 1.5e3 10ms

    # -------------------------
    # Operators / separators
    # -------------------------
    PIPE = 30  # | or |>
    OPERATOR = 31  # single- and multi-char operators
    PUNCTUATION = 32  # brackets, separators and unrecognized characters

    @property
    def is_trivia(self) -> bool:
        return self in (
            TokenKind.WHITESPACE,
            TokenKind.NEWLINE,
            TokenKind.LINE_COMMENT,
            TokenKind.BLOCK_COMMENT,
        )

    @property
    def is_comment(self) -> bool:
        return self in (TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT)

    @property
    def is_literal(self) -> bool:
        """Kinds whose text is opaque to formatting."""
        return self in (
            TokenKind.STRING,
            TokenKind.REGEX,
            TokenKind.LINE_COMMENT,
            TokenKind.BLOCK_COMMENT,
        )


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia) owning its source slice."""

    kind: TokenKind
    text: str

    def is_punct(self, *values: str) -> bool:
        return self.kind == TokenKind.PUNCTUATION and self.text in values

    def is_operator(self, *values: str) -> bool:
        return self.kind == TokenKind.OPERATOR and self.text in values

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r})"


OPENING_BRACKETS: Final[frozenset[str]] = frozenset("([{")
CLOSING_BRACKETS: Final[frozenset[str]] = frozenset(")]}")

THREE_CHAR_OPERATORS: Final[tuple[str, ...]] = ("...",)
TWO_CHAR_OPERATORS: Final[frozenset[str]] = frozenset(
    {":=", "::", "->", "=>", "==", "!=", "<>", "<=", ">=", "!~"}
)
ONE_CHAR_OPERATORS: Final[frozenset[str]] = frozenset("+-*/%<>=!~")
PUNCTUATION_CHARS: Final[frozenset[str]] = frozenset("()[]{},:;.?")

# Formatting keywords; lookups are case-insensitive.
KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "select", "from", "where", "group", "by", "having", "order", "limit",
        "offset", "with", "join", "inner", "left", "right", "outer", "full",
        "cross", "anti", "on", "using", "and", "or", "not", "in", "like", "is",
        "between", "case", "when", "then", "else", "end", "as", "distinct",
        "all", "union", "const", "fn", "op", "type", "let", "true", "false",
        "null", "asc", "desc",
    }
)  # fmt: skip


def is_keyword(word: str) -> bool:
    return word.lower() in KEYWORDS
