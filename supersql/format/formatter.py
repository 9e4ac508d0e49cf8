"""Token-driven pretty-printer."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Final

from supersql.format.options import FormatOptions
from supersql.lexer import CLOSING_BRACKETS, OPENING_BRACKETS, Token, TokenKind, tokenize
from supersql.text import ORIGIN, Range, TextEdit, document_end

logger = logging.getLogger(__name__)

TIGHT_OPERATORS: Final[frozenset[str]] = frozenset({"...", "::", "->"})

# Punctuation that a following value attaches to without a space. A bare
# colon is listed here; the record-field colon sets its own pending space.
_TIGHT_PUNCTUATION: Final[frozenset[str]] = OPENING_BRACKETS | frozenset({".", ":"})


class Formatter:
    """Single-pass renderer over a lossless token sequence.

    Every layout decision depends on the token at hand and its immediate
    neighbours, never on the width of the original whitespace, so formatting
    formatted output is a no-op.
    """

    def __init__(self, options: FormatOptions | None = None) -> None:
        self._options = options or FormatOptions()
        self._unit = self._options.indent_unit
        self._out: list[str] = []
        self._indent = 0
        self._line_start = True
        self._pending_space = False
        self._previous: Token | None = None

    @property
    def options(self) -> FormatOptions:
        return self._options

    def format(self, tokens: Sequence[Token]) -> str:
        self._out = []
        self._indent = 0
        self._line_start = True
        self._pending_space = False
        self._previous = None

        for i, token in enumerate(tokens):
            following = tokens[i + 1] if i + 1 < len(tokens) else None
            self._format_token(token, following)
            self._previous = token

        return self._finish("".join(self._out))

    def _format_token(self, token: Token, following: Token | None) -> None:
        match token.kind:
            case TokenKind.NEWLINE:
                self._newline()
            case TokenKind.WHITESPACE:
                # Collapsed to one space, written only if something follows on this line.
                if not self._line_start:
                    self._pending_space = True
            case TokenKind.LINE_COMMENT | TokenKind.BLOCK_COMMENT:
                self._write(token.text)
            case TokenKind.PIPE:
                if not self._line_start:
                    self._newline()
                self._write(token.text)
                self._pending_space = True
            case TokenKind.PUNCTUATION:
                self._format_punctuation(token)
            case TokenKind.OPERATOR:
                self._format_operator(token, following)
            case _:
                self._write(token.text, space=self._value_wants_space())

    def _format_punctuation(self, token: Token) -> None:
        text = token.text
        if text in OPENING_BRACKETS:
            self._write(text)
            self._indent += 1
        elif text in CLOSING_BRACKETS:
            self._indent = max(0, self._indent - 1)
            self._write(text)
        elif text == ",":
            self._write(text)
            self._pending_space = True
        elif text == ":":
            # Record field heuristic: `name: value`.
            previous = self._previous
            spaced = previous is not None and previous.kind in (TokenKind.IDENTIFIER, TokenKind.STRING)
            self._write(text)
            self._pending_space = spaced
        else:
            self._write(text)

    def _format_operator(self, token: Token, following: Token | None) -> None:
        text = token.text
        if text in TIGHT_OPERATORS:
            self._write(text)
            return
        if text == "/":
            # A space inserted before `/` could turn it into a regex opener on the next pass.
            self._write(text)
            return

        previous = self._previous
        after_opening = previous is not None and previous.is_punct(*OPENING_BRACKETS)
        self._write(text, space=not after_opening)
        if following is None or not following.is_punct(",", *CLOSING_BRACKETS):
            self._pending_space = True

    def _value_wants_space(self) -> bool:
        previous = self._previous
        if previous is None:
            return False
        match previous.kind:
            case TokenKind.WHITESPACE | TokenKind.NEWLINE | TokenKind.PIPE:
                return False
            case TokenKind.PUNCTUATION:
                return previous.text not in _TIGHT_PUNCTUATION
            case TokenKind.OPERATOR:
                return previous.text not in TIGHT_OPERATORS and previous.text != "/"
            case _:
                return True

    def _write(self, text: str, *, space: bool = False) -> None:
        if self._line_start:
            self._out.append(self._unit * self._indent)
        elif space or self._pending_space:
            self._out.append(" ")
        self._out.append(text)
        self._line_start = False
        self._pending_space = False

    def _newline(self) -> None:
        self._out.append("\n")
        self._line_start = True
        self._pending_space = False

    def _finish(self, formatted: str) -> str:
        options = self._options
        if options.trim_trailing_whitespace:
            formatted = "\n".join(line.rstrip(" \t\r") for line in formatted.split("\n"))
        if options.trim_final_newlines:
            formatted = formatted.rstrip("\n")
        if options.insert_final_newline and not formatted.endswith("\n"):
            formatted += "\n"
        return formatted


def format_tokens(tokens: Sequence[Token], options: FormatOptions | None = None) -> str:
    """Render a token sequence under the given layout options."""
    return Formatter(options).format(tokens)


def format_document(text: str, options: FormatOptions | None = None) -> str:
    """Tokenize and format a SuperSQL document."""
    tokens = tokenize(text)
    logger.debug("Formatting %d tokens", len(tokens))
    return format_tokens(tokens, options)


def format_edits(text: str, options: FormatOptions | None = None) -> list[TextEdit]:
    """Edits turning `text` into its formatted form.

    Empty when the document is already formatted, otherwise a single edit
    replacing the whole document.
    """
    return document_edits(text, format_document(text, options))


def document_edits(source: str, formatted: str) -> list[TextEdit]:
    if formatted == source:
        return []
    return [TextEdit(Range(ORIGIN, document_end(source)), formatted)]
