import pytest

from tfic.parser import parse_program
from tfic.tokenizer import Lexer, Token, TokenType, tokenize


def types(source):
    return [t.type for t in tokenize(source)]


def test_keyword_tokens():
    assert types("rrr pushpa bahubali magadheera karthikeya pokiri eega") == [
        TokenType.CONST,
        TokenType.LET,
        TokenType.PRINT,
        TokenType.IF,
        TokenType.ELSE,
        TokenType.WHILE,
        TokenType.FOR,
    ]


def test_identifier_and_number_tokens():
    assert tokenize("hello world 42 0") == [
        Token(TokenType.IDENTIFIER, "hello"),
        Token(TokenType.IDENTIFIER, "world"),
        Token(TokenType.NUMBER, 42),
        Token(TokenType.NUMBER, 0),
    ]


def test_statement_tokens():
    assert tokenize("rrr x = 42; bahubali(x);") == [
        Token(TokenType.CONST, "rrr"),
        Token(TokenType.IDENTIFIER, "x"),
        Token(TokenType.ASSIGN, "="),
        Token(TokenType.NUMBER, 42),
        Token(TokenType.SEMICOLON, ";"),
        Token(TokenType.PRINT, "bahubali"),
        Token(TokenType.LPAREN, "("),
        Token(TokenType.IDENTIFIER, "x"),
        Token(TokenType.RPAREN, ")"),
        Token(TokenType.SEMICOLON, ";"),
    ]


@pytest.mark.parametrize(
    "source, expected",
    [
        pytest.param(">=", [TokenType.GREATER_EQUAL], id="greater_equal"),
        pytest.param("<=", [TokenType.LESS_EQUAL], id="less_equal"),
        pytest.param("==", [TokenType.EQUAL], id="equal"),
        pytest.param("!=", [TokenType.NOT_EQUAL], id="not_equal"),
        pytest.param("> =", [TokenType.GREATER, TokenType.ASSIGN], id="split_by_space"),
        pytest.param("===", [TokenType.EQUAL, TokenType.ASSIGN], id="triple_equal"),
        pytest.param("= ( ) { } ; + - * / > <", [
            TokenType.ASSIGN, TokenType.LPAREN, TokenType.RPAREN, TokenType.LBRACE, TokenType.RBRACE,
            TokenType.SEMICOLON, TokenType.PLUS, TokenType.MINUS, TokenType.MULTIPLY,
            TokenType.DIVIDE, TokenType.GREATER, TokenType.LESS,
        ], id="single_character"),
    ],
)
def test_operator_tokens(source, expected):
    assert types(source) == expected


def test_keyword_prefix_is_an_identifier():
    assert tokenize("rrrx eegas") == [Token(TokenType.IDENTIFIER, "rrrx"), Token(TokenType.IDENTIFIER, "eegas")]


def test_identifiers_match_the_parser():
    source = "rrr x1 = 1; rrr max_count = x1;"
    names = [t.value for t in tokenize(source) if t.type == TokenType.IDENTIFIER]
    assert names == ["x1", "max_count", "x1"]
    assert [stmt.name for stmt in parse_program(source).statements] == ["x1", "max_count"]


def test_whitespace_is_skipped():
    assert types("rrr   pushpa\n\tbahubali") == [TokenType.CONST, TokenType.LET, TokenType.PRINT]


@pytest.mark.parametrize(
    "source, expected",
    [
        pytest.param("x @ y", ["x", "y"], id="unknown_character"),
        pytest.param("a, b", ["a", "b"], id="commas_are_skipped"),
        pytest.param('"hi"', ["hi"], id="quotes_are_skipped"),
    ],
)
def test_unrecognized_characters_are_dropped(source, expected):
    assert [t.value for t in tokenize(source)] == expected


def test_number_too_large_is_dropped():
    assert tokenize("1 99999999999 2") == [Token(TokenType.NUMBER, 1), Token(TokenType.NUMBER, 2)]
    assert tokenize("2147483647") == [Token(TokenType.NUMBER, 2147483647)]


def test_empty_source():
    assert tokenize("") == []
    assert tokenize("   \n ") == []


def test_token_methods():
    assert Token(TokenType.CONST, "rrr").is_keyword()
    assert Token(TokenType.CONST, "rrr").keyword_name() == "rrr"
    assert Token(TokenType.PLUS, "+").is_operator()
    assert Token(TokenType.PLUS, "+").operator_symbol() == "+"
    assert Token(TokenType.ASSIGN, "=").operator_symbol() == "="
    assert not Token(TokenType.IDENTIFIER, "x").is_keyword()
    assert Token(TokenType.IDENTIFIER, "x").keyword_name() is None
    assert Token(TokenType.LPAREN, "(").operator_symbol() is None


def test_lexer_cursor():
    lexer = Lexer("rrr x = 42")

    assert not lexer.is_eof()
    assert lexer.current() == Token(TokenType.CONST, "rrr")
    assert lexer.peek() == Token(TokenType.IDENTIFIER, "x")

    lexer.advance()
    lexer.advance()
    assert lexer.current() == Token(TokenType.ASSIGN, "=")
    lexer.advance()
    assert lexer.advance() is None
    assert lexer.is_eof()
    assert lexer.peek() is None

    # Advancing past the end stays at the end.
    lexer.advance()
    assert lexer.is_eof()

    lexer.reset()
    assert lexer.current() == Token(TokenType.CONST, "rrr")
    assert len(lexer.all_tokens()) == 4
