"""Lexer."""

from dataclasses import dataclass

from supersql.lexer.tokens import (
    ONE_CHAR_OPERATORS,
    PUNCTUATION_CHARS,
    THREE_CHAR_OPERATORS,
    TWO_CHAR_OPERATORS,
    Token,
    TokenKind,
    is_keyword,
)


@dataclass(frozen=True, slots=True)
class LexerCheckpoint:
    """Lexer checkpoint."""

    position: int
    current_start: int


class Lexer:
    """Lossless lexer that classifies every character of the source.

    Never raises: unterminated strings and block comments run to the end of the
    input, and unrecognized characters come out as one-character punctuation.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._current_start = 0
        self._previous: Token | None = None

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def previous(self) -> Token | None:
        """Last token emitted, trivia included."""
        return self._previous

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def checkpoint(self) -> LexerCheckpoint:
        return LexerCheckpoint(position=self._position, current_start=self._current_start)

    def rewind(self, checkpoint: LexerCheckpoint) -> None:
        self._position = checkpoint.position
        self._current_start = checkpoint.current_start

    def next_token(self) -> Token | None:
        """Lex one token, or return None at the end of input."""
        if self.is_eof:
            return None
        self._current_start = self._position
        kind = self._lex_token()
        token = Token(kind, self._source[self._current_start : self._position])
        self._previous = token
        return token

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while (token := self.next_token()) is not None:
            tokens.append(token)
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch == "\n":
            self._advance(1)
            return TokenKind.NEWLINE

        if ch == " " or ch == "\t" or ch == "\r":
            self._consume_whitespaces()
            return TokenKind.WHITESPACE

        if ch == "-" and self._peek_char() == "-":
            return self._lex_line_comment()

        if ch == "/" and self._peek_char() == "*":
            return self._lex_block_comment()

        if ch == '"' or ch == "'":
            return self._lex_string()
        if (ch == "f" or ch == "r") and self._peek_char() in ('"', "'"):
            # Template/raw prefix
            self._advance(1)
            return self._lex_string()

        if ch == "/" and self._can_start_regex():
            checkpoint = self.checkpoint
            if self._lex_regex():
                return TokenKind.REGEX
            # No closing slash before the end of the line: plain division.
            self.rewind(checkpoint)

        if ch == "|":
            return self._lex_pipe()

        for operator in THREE_CHAR_OPERATORS:
            if self._source.startswith(operator, self._position):
                self._advance(len(operator))
                return TokenKind.OPERATOR
        if self._source[self._position : self._position + 2] in TWO_CHAR_OPERATORS:
            self._advance(2)
            return TokenKind.OPERATOR
        if ch in ONE_CHAR_OPERATORS:
            self._advance(1)
            return TokenKind.OPERATOR
        if ch in PUNCTUATION_CHARS:
            self._advance(1)
            return TokenKind.PUNCTUATION

        if _is_digit(ch):
            return self._lex_number()

        if _is_letter(ch) or ch == "_" or ch == "`":
            return self._lex_identifier()

        # Fallback: keep the character so the token stream stays lossless.
        self._advance(1)
        return TokenKind.PUNCTUATION

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(2)
        while not self.is_eof and self._current_char() != "\n":
            self._advance(1)
        return TokenKind.LINE_COMMENT

    def _lex_block_comment(self) -> TokenKind:
        self._advance(2)
        while not self.is_eof:
            if self._current_char() == "*" and self._peek_char() == "/":
                self._advance(2)
                break
            self._advance(1)
        return TokenKind.BLOCK_COMMENT

    def _lex_string(self) -> TokenKind:
        quote = self._current_char()
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == quote:
                self._advance(1)
                break
            if ch == "\\":
                self._advance(1)
                if not self.is_eof:
                    self._advance(1)
                continue
            self._advance(1)
        return TokenKind.STRING

    def _lex_regex(self) -> bool:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "/":
                self._advance(1)
                return True
            if ch == "\n":
                return False
            if ch == "\\" and self._peek_char() != "\n":
                self._advance(1)
                if not self.is_eof:
                    self._advance(1)
                continue
            self._advance(1)
        return False

    def _can_start_regex(self) -> bool:
        previous = self._previous
        if previous is None:
            return True
        match previous.kind:
            case TokenKind.WHITESPACE | TokenKind.NEWLINE | TokenKind.PIPE | TokenKind.OPERATOR | TokenKind.KEYWORD:
                return True
            case TokenKind.PUNCTUATION:
                return previous.text in ("(", "[", ",", ":")
            case _:
                return False

    def _lex_pipe(self) -> TokenKind:
        next_ch = self._peek_char()
        if next_ch == ">":
            self._advance(2)
            return TokenKind.PIPE
        if next_ch == "|":
            # `||` is string concatenation, not two pipes.
            self._advance(2)
            return TokenKind.OPERATOR
        self._advance(1)
        return TokenKind.PIPE

    def _lex_number(self) -> TokenKind:
        if self._current_char() == "0" and self._peek_char() in ("x", "X"):
            self._advance(2)
            while not self.is_eof and _is_hex_digit(self._current_char()):
                self._advance(1)
        else:
            while not self.is_eof and (_is_digit(self._current_char()) or self._current_char() == "."):
                self._advance(1)
            if self._current_char() in ("e", "E"):
                self._advance(1)
                if self._current_char() in ("+", "-"):
                    self._advance(1)
                while not self.is_eof and _is_digit(self._current_char()):
                    self._advance(1)
        # Unit suffixes (durations, sizes) are kept with the number.
        while not self.is_eof and _is_letter(self._current_char()):
            self._advance(1)
        return TokenKind.NUMBER

    def _lex_identifier(self) -> TokenKind:
        if self._current_char() == "`":
            self._advance(1)
            while not self.is_eof and self._current_char() != "`":
                self._advance(1)
            if not self.is_eof:
                self._advance(1)
            return TokenKind.IDENTIFIER

        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if _is_letter(ch) or _is_digit(ch) or ch == "_":
                self._advance(1)
                continue
            break
        if is_keyword(self._source[self._current_start : self._position]):
            return TokenKind.KEYWORD
        return TokenKind.IDENTIFIER

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t" or ch == "\r":
                self._advance(1)
                continue
            break

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_hex_digit(ch: str) -> bool:
    return _is_digit(ch) or "a" <= ch <= "f" or "A" <= ch <= "F"


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def tokenize(text: str) -> list[Token]:
    """Split `text` into tokens whose texts concatenate back to `text`."""
    return Lexer(text).lex()


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<14} text={tok.text!r}")
