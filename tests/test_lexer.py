import pytest

from supersql.lexer import Lexer, Token, TokenKind, dump_tokens, is_keyword, tokenize
from tests._debug import debug_dump_tokens
from tests._shared_cases import QUERY_CASES, QueryCase, case_id, case_source


def kinds(text: str) -> list[tuple[TokenKind, str]]:
    return [(token.kind, token.text) for token in tokenize(text)]


def significant(text: str) -> list[tuple[TokenKind, str]]:
    return [(token.kind, token.text) for token in tokenize(text) if not token.kind.is_trivia]


@pytest.mark.parametrize("case", QUERY_CASES, ids=case_id)
def test_tokens_concatenate_back_to_source(case: QueryCase) -> None:
    tokens = tokenize(case.source)
    debug_dump_tokens(case.name, case.source, tokens)

    assert "".join(token.text for token in tokens) == case.source
    assert all(token.text for token in tokens)


def test_simple_pipeline_token_sequence() -> None:
    assert kinds("from test | count()") == [
        (TokenKind.KEYWORD, "from"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.IDENTIFIER, "test"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.PIPE, "|"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.IDENTIFIER, "count"),
        (TokenKind.PUNCTUATION, "("),
        (TokenKind.PUNCTUATION, ")"),
    ]


def test_pipes_and_concatenation() -> None:
    assert kinds("a|>b|c||d") == [
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.PIPE, "|>"),
        (TokenKind.IDENTIFIER, "b"),
        (TokenKind.PIPE, "|"),
        (TokenKind.IDENTIFIER, "c"),
        (TokenKind.OPERATOR, "||"),
        (TokenKind.IDENTIFIER, "d"),
    ]


def test_slash_after_operator_starts_regex() -> None:
    assert significant("x = /ab/") == [
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.OPERATOR, "="),
        (TokenKind.REGEX, "/ab/"),
    ]


def test_slash_after_value_is_division() -> None:
    assert kinds("x/2") == [
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.OPERATOR, "/"),
        (TokenKind.NUMBER, "2"),
    ]
    assert kinds("a/x/") == [
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.OPERATOR, "/"),
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.OPERATOR, "/"),
    ]


def test_regex_without_closing_slash_on_line_backtracks() -> None:
    assert kinds("a / b\nc") == [
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.OPERATOR, "/"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.IDENTIFIER, "b"),
        (TokenKind.NEWLINE, "\n"),
        (TokenKind.IDENTIFIER, "c"),
    ]
    assert kinds("/") == [(TokenKind.OPERATOR, "/")]


def test_regex_after_open_paren_and_keyword() -> None:
    assert kinds("(/a\\/b/)") == [
        (TokenKind.PUNCTUATION, "("),
        (TokenKind.REGEX, "/a\\/b/"),
        (TokenKind.PUNCTUATION, ")"),
    ]
    assert significant("where /x/") == [
        (TokenKind.KEYWORD, "where"),
        (TokenKind.REGEX, "/x/"),
    ]


def test_regex_after_pipe_and_comma() -> None:
    assert significant(case_source("regex_literals")) == [
        (TokenKind.IDENTIFIER, "grep"),
        (TokenKind.PUNCTUATION, "("),
        (TokenKind.REGEX, "/err(or)?/"),
        (TokenKind.PUNCTUATION, ","),
        (TokenKind.IDENTIFIER, "this"),
        (TokenKind.PUNCTUATION, ")"),
        (TokenKind.PIPE, "|"),
        (TokenKind.KEYWORD, "where"),
        (TokenKind.IDENTIFIER, "msg"),
        (TokenKind.IDENTIFIER, "matches"),
        (TokenKind.REGEX, "/a\\/b/"),
    ]


def test_comments() -> None:
    assert kinds("-- hi\n/* a\nb */x") == [
        (TokenKind.LINE_COMMENT, "-- hi"),
        (TokenKind.NEWLINE, "\n"),
        (TokenKind.BLOCK_COMMENT, "/* a\nb */"),
        (TokenKind.IDENTIFIER, "x"),
    ]
    assert kinds("a--b") == [
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.LINE_COMMENT, "--b"),
    ]


def test_unterminated_block_comment_runs_to_end() -> None:
    assert kinds("/* open") == [(TokenKind.BLOCK_COMMENT, "/* open")]
    assert kinds("x /* open\nmore") == [
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.BLOCK_COMMENT, "/* open\nmore"),
    ]


def test_strings_with_escapes_and_prefixes() -> None:
    assert kinds("'it\\'s'") == [(TokenKind.STRING, "'it\\'s'")]
    assert kinds('f"{x}" r\'\\d\'') == [
        (TokenKind.STRING, 'f"{x}"'),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.STRING, "r'\\d'"),
    ]
    assert kinds('"a -- b /* c */"') == [(TokenKind.STRING, '"a -- b /* c */"')]


def test_unterminated_string_runs_to_end() -> None:
    assert kinds('"abc') == [(TokenKind.STRING, '"abc')]
    assert kinds('"abc\\') == [(TokenKind.STRING, '"abc\\')]
    assert kinds("'a\nb") == [(TokenKind.STRING, "'a\nb")]


def test_numbers_hex_exponent_and_units() -> None:
    assert significant("0xFF 1.5e-3 10ms 1...3") == [
        (TokenKind.NUMBER, "0xFF"),
        (TokenKind.NUMBER, "1.5e-3"),
        (TokenKind.NUMBER, "10ms"),
        (TokenKind.NUMBER, "1...3"),
    ]
    assert kinds(".5") == [(TokenKind.PUNCTUATION, "."), (TokenKind.NUMBER, "5")]


def test_operators_prefer_longest_match() -> None:
    assert kinds("...a") == [(TokenKind.OPERATOR, "..."), (TokenKind.IDENTIFIER, "a")]
    assert [text for kind, text in kinds("a<=b") if kind == TokenKind.OPERATOR] == ["<="]
    assert [text for kind, text in kinds("g=>h") if kind == TokenKind.OPERATOR] == ["=>"]
    assert [text for kind, text in kinds("x::int64") if kind == TokenKind.OPERATOR] == ["::"]
    assert [text for kind, text in kinds("a:=1") if kind == TokenKind.OPERATOR] == [":="]
    assert [text for kind, text in kinds("a!~b") if kind == TokenKind.OPERATOR] == ["!~"]


def test_keywords_are_case_insensitive() -> None:
    assert kinds("FROM t") == [
        (TokenKind.KEYWORD, "FROM"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.IDENTIFIER, "t"),
    ]
    assert is_keyword("Select")
    assert is_keyword("null")
    assert not is_keyword("values")


def test_backtick_identifiers() -> None:
    assert kinds("`a b`.c") == [
        (TokenKind.IDENTIFIER, "`a b`"),
        (TokenKind.PUNCTUATION, "."),
        (TokenKind.IDENTIFIER, "c"),
    ]
    assert kinds("`open") == [(TokenKind.IDENTIFIER, "`open")]


def test_unrecognized_characters_become_single_punctuation() -> None:
    assert kinds("@x#") == [
        (TokenKind.PUNCTUATION, "@"),
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.PUNCTUATION, "#"),
    ]
    assert kinds("café") == [(TokenKind.IDENTIFIER, "caf"), (TokenKind.PUNCTUATION, "é")]


def test_carriage_return_is_whitespace() -> None:
    assert kinds("a\r\nb") == [
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.WHITESPACE, "\r"),
        (TokenKind.NEWLINE, "\n"),
        (TokenKind.IDENTIFIER, "b"),
    ]


def test_empty_source_has_no_tokens() -> None:
    assert tokenize("") == []


def test_lexer_checkpoint_and_rewind() -> None:
    lexer = Lexer("abc def")
    checkpoint = lexer.checkpoint

    first = lexer.next_token()
    assert first == Token(TokenKind.IDENTIFIER, "abc")
    assert lexer.previous == first
    assert lexer.position == 3

    lexer.rewind(checkpoint)
    assert lexer.position == 0
    assert lexer.next_token() == first


def test_lexer_reports_eof() -> None:
    lexer = Lexer("x")
    assert not lexer.is_eof
    assert lexer.next_token() == Token(TokenKind.IDENTIFIER, "x")
    assert lexer.is_eof
    assert lexer.next_token() is None


def test_token_helpers() -> None:
    token = Token(TokenKind.PUNCTUATION, "(")
    assert token.is_punct("(", "[")
    assert not token.is_operator("(")
    assert repr(token) == "Token(PUNCTUATION, '(')"
    assert TokenKind.BLOCK_COMMENT.is_trivia
    assert TokenKind.REGEX.is_literal
    assert not TokenKind.IDENTIFIER.is_literal


def test_dump_tokens_prints_one_line_per_token(capsys: pytest.CaptureFixture[str]) -> None:
    dump_tokens(tokenize("a|b"))

    assert capsys.readouterr().out.splitlines() == [
        "000 IDENTIFIER     text='a'",
        "001 PIPE           text='|'",
        "002 IDENTIFIER     text='b'",
    ]
