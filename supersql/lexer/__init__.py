"""Lexer."""

from supersql.lexer.lexer import Lexer, LexerCheckpoint, dump_tokens, tokenize
from supersql.lexer.tokens import (
    CLOSING_BRACKETS,
    KEYWORDS,
    OPENING_BRACKETS,
    Token,
    TokenKind,
    is_keyword,
)

__all__ = [
    "CLOSING_BRACKETS",
    "KEYWORDS",
    "OPENING_BRACKETS",
    "Lexer",
    "LexerCheckpoint",
    "Token",
    "TokenKind",
    "dump_tokens",
    "is_keyword",
    "tokenize",
]
