"""
The TFI tokenizer: turns source text into a flat list of tokens.

The parser does not consume these tokens (it lexes as part of parsing); the
token stream is the lexical view of a program used by tooling and tests. It
is produced by Lark from `parser/tokens.lark`, which imports its keyword,
identifier, number and operator terminals from the language grammar.
Characters which do not start any token are skipped without an error, and so
are digit runs that do not fit in a 32-bit integer. Such gaps only become
visible later, as parse errors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from lark import Lark

from .config.config import KEYWORDS, MAX_NUMBER, OPERATOR_TOKENS


class TokenType(Enum):
    # Keywords
    CONST = "rrr"
    LET = "pushpa"
    PRINT = "bahubali"
    IF = "magadheera"
    ELSE = "karthikeya"
    WHILE = "pokiri"
    FOR = "eega"

    IDENTIFIER = "identifier"
    NUMBER = "number"

    # Punctuation
    ASSIGN = "="
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    SEMICOLON = ";"

    # Operators
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    GREATER = ">"
    LESS = "<"
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="
    EQUAL = "=="
    NOT_EQUAL = "!="


KEYWORD_TYPES = {TokenType[name] for name in KEYWORDS.values()}
OPERATOR_TYPES = {TokenType[name] for name in OPERATOR_TOKENS.values()} | {TokenType.ASSIGN}

# Built once; the basic lexer is reusable across calls.
TOKEN_LEXER = Lark.open_from_package("tfic.parser", "tokens.lark", parser="lalr", lexer="basic")


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Union[str, int, None] = None

    def is_keyword(self) -> bool:
        return self.type in KEYWORD_TYPES

    def keyword_name(self) -> Optional[str]:
        """The source spelling of a keyword token, None for any other token."""
        return self.type.value if self.is_keyword() else None

    def is_operator(self) -> bool:
        return self.type in OPERATOR_TYPES

    def operator_symbol(self) -> Optional[str]:
        return self.type.value if self.is_operator() else None


def tokenize(source: str) -> List[Token]:
    tokens = []
    for tok in TOKEN_LEXER.lex(source):
        if tok.type == "IDENT":
            tokens.append(Token(TokenType.IDENTIFIER, tok.value))
        elif tok.type == "NUMBER":
            number = int(tok.value)
            if number <= MAX_NUMBER:
                tokens.append(Token(TokenType.NUMBER, number))
        elif tok.type == "OPERATOR":
            tokens.append(Token(TokenType(tok.value), tok.value))
        else:
            # Keyword and punctuation terminals are named after their token type.
            tokens.append(Token(TokenType[tok.type], tok.value))
    return tokens


class Lexer:
    """A cursor over the tokens of a source text."""

    def __init__(self, source: str):
        self.tokens = tokenize(source)
        self.position = 0

    def current(self) -> Optional[Token]:
        return self.tokens[self.position] if self.position < len(self.tokens) else None

    def peek(self) -> Optional[Token]:
        """The token after the current one, without moving."""
        nxt = self.position + 1
        return self.tokens[nxt] if nxt < len(self.tokens) else None

    def advance(self) -> Optional[Token]:
        if self.position < len(self.tokens):
            self.position += 1
        return self.current()

    def is_eof(self) -> bool:
        return self.position >= len(self.tokens)

    def all_tokens(self) -> List[Token]:
        return list(self.tokens)

    def reset(self):
        self.position = 0
