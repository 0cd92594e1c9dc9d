import os
from typing import Optional

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from ..config.config import MAX_NUMBER, PARSE_SUGGESTIONS
from ..exceptions import ErrorCode, ParseError, TFIError
from .classes import *
from .helpers import get_source_line, translate_lark_error

LARK_PARSER = None

try:
    # Use importlib.resources for robust package data access
    from importlib.resources import files as pkg_files

    tfi_grammar = (pkg_files("tfic.parser") / "tfi.lark").read_text()
except (ImportError, FileNotFoundError, ModuleNotFoundError):
    # Fallback for development environments or older Python versions
    grammar_path = os.path.join(os.path.dirname(__file__), "tfi.lark")
    with open(grammar_path, "r") as f:
        tfi_grammar = f.read()

# LALR keeps keyword handling deterministic (the contextual lexer never sees a keyword
# where an identifier is expected) and reports the expected terminals on errors.
LARK_PARSER = Lark(tfi_grammar, start="start", parser="lalr", maybe_placeholders=True)


class TFITransformer(Transformer):
    """
    Transforms the Lark parse tree into the typed AST defined in `classes.py`.
    Each method is called when the parser has matched the rule or terminal of the
    same name; transformation runs bottom-up, so a rule method receives children
    that have already been turned into AST nodes.
    """

    def __init__(self, source: str = ""):
        super().__init__()
        self.source = source

    def _parse_error(self, code: ErrorCode, token: Token, suggestion: str, **kwargs) -> ParseError:
        return ParseError(
            code,
            line=token.line,
            column=token.column,
            source_line=get_source_line(self.source, token.line),
            suggestion=PARSE_SUGGESTIONS[suggestion],
            **kwargs,
        )

    # --- Helper methods for creating spans ---
    def _create_span_from_token(self, token: Token) -> Span:
        return Span(s_line=token.line, s_col=token.column, e_line=token.end_line, e_col=token.end_column)

    def _get_span_from_items(self, items: list) -> Optional[Span]:
        """Calculates a Span that covers a list of tokens and/or AST nodes."""
        located = [item for item in items if isinstance(item, Token) or getattr(item, "span", None) is not None]
        if not located:
            return None
        first, last = located[0], located[-1]
        start = first.span if isinstance(first, ASTNode) else self._create_span_from_token(first)
        end = last.span if isinstance(last, ASTNode) else self._create_span_from_token(last)
        return Span(s_line=start.s_line, s_col=start.s_col, e_line=end.e_line, e_col=end.e_col)

    def _build_infix_tree(self, items):
        """Builds a left-associative tree: every operator binds as tightly as any other."""
        tree, i = items[0], 1
        while i < len(items):
            op, right = items[i], items[i + 1]
            tree = BinaryOp(left=tree, operator=op.value, right=right, span=self._get_span_from_items([tree, right]))
            i += 2
        return tree

    # --- Terminal Transformations ---
    def NUMBER(self, n: Token):
        value = int(n.value)
        if value > MAX_NUMBER:
            raise self._parse_error(ErrorCode.NUMBER_OUT_OF_RANGE, n, "number_out_of_range", value=n.value)
        return NumberLiteral(value=value, span=self._create_span_from_token(n))

    def IDENT(self, t: Token):
        return Identifier(name=t.value, span=self._create_span_from_token(t))

    def STRING(self, s: Token):
        return StringLiteral(value=s.value[1:-1], span=self._create_span_from_token(s))

    # --- Rule Transformations ---
    def expression(self, items):
        return self._build_infix_tree(items)

    def arguments(self, items):
        return items

    def block(self, items):
        return items

    def print_statement(self, items):
        print_token, args = items
        return PrintStatement(args=args or [], span=self._get_span_from_items([print_token] + (args or [])))

    def const_statement(self, items):
        _const_token, name_ident, value = items
        return ConstDeclaration(name=name_ident.name, value=value, span=self._get_span_from_items(items))

    def let_statement(self, items):
        _let_token, name_ident, value = items
        return LetDeclaration(name=name_ident.name, value=value, span=self._get_span_from_items(items))

    def if_statement(self, items):
        if_token, condition, then_block, _else_token, else_block = items
        span = self._get_span_from_items([if_token, condition] + then_block + (else_block or []))
        return IfStatement(condition=condition, then_block=then_block, else_block=else_block, span=span)

    def while_statement(self, items):
        while_token, condition, body = items
        return WhileStatement(condition=condition, body=body, span=self._get_span_from_items([while_token, condition] + body))

    def for_statement(self, items):
        for_token, init, condition, update, body = items

        # The grammar lets each header clause be empty so the error can say which one is missing.
        for clause, node in (("initialization", init), ("condition", condition), ("update expression", update)):
            if node is None:
                raise self._parse_error(ErrorCode.FOR_CLAUSE_MISSING, for_token, "for_clause", clause=clause)

        span = self._get_span_from_items([for_token, init, condition, update] + body)
        return ForStatement(init=init, condition=condition, update=update, body=body, span=span)

    def start(self, children):
        return Program(statements=children, span=self._get_span_from_items(children))


def parse_program(source: str) -> Program:
    """Parses TFI source text and lowers it into a Program."""

    try:
        parse_tree = LARK_PARSER.parse(source)
        program = TFITransformer(source).transform(parse_tree)
    except VisitError as e:
        # Errors raised inside the transformer arrive wrapped by Lark.
        if isinstance(e.orig_exc, TFIError):
            raise e.orig_exc from None
        raise
    except LarkError as e:
        raise translate_lark_error(e, source) from e

    if not program.statements:
        raise ParseError(
            ErrorCode.NO_STATEMENTS,
            line=1,
            column=1,
            source_line=get_source_line(source, 1),
            suggestion=PARSE_SUGGESTIONS["no_statements"],
        )

    return program
