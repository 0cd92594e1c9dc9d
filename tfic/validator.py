"""
Semantic validation of a parsed TFI program.

Top-level statements are numbered from 1 and that ordinal is the "line" every
error reports, including errors raised by statements nested inside a block.
Each nested block (then, else, loop body) is validated against its own copy of
the enclosing scope: declarations made inside it are invisible to the
enclosing scope and to sibling blocks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Set

from .config.config import VALID_OPERATORS, VALIDATION_SUGGESTIONS
from .exceptions import ErrorCode, InternalCompilerError, ValidationError
from .parser.classes import (
    BinaryOp,
    ConstDeclaration,
    Expression,
    ForStatement,
    Identifier,
    IfStatement,
    LetDeclaration,
    NumberLiteral,
    PrintStatement,
    Program,
    Statement,
    StringLiteral,
    WhileStatement,
)


class DeclarationType(Enum):
    CONST = "rrr"
    LET = "pushpa"


@dataclass(frozen=True)
class Binding:
    decl_type: DeclarationType
    line: int


def _validation_error(code: ErrorCode, line: int, **kwargs) -> ValidationError:
    template = VALIDATION_SUGGESTIONS.get(code.name)
    suggestion = template.format(**kwargs) if template else None
    return ValidationError(code, line=line, suggestion=suggestion, **kwargs)


class ValidationContext:
    """The variables visible in one lexical scope."""

    def __init__(self, bindings: Optional[Dict[str, Binding]] = None):
        self.bindings: Dict[str, Binding] = dict(bindings or {})

    def declare_variable(self, name: str, line: int, decl_type: DeclarationType):
        """
        Registers `name`. The only redeclaration allowed is a 'pushpa' over an
        'rrr' binding, which turns the constant into a mutable variable.
        """
        existing = self.bindings.get(name)
        if existing is not None:
            if not (existing.decl_type == DeclarationType.CONST and decl_type == DeclarationType.LET):
                raise _validation_error(ErrorCode.DUPLICATE_VARIABLE, line, name=name, original_line=existing.line)
        self.bindings[name] = Binding(decl_type, line)

    def is_variable_declared(self, name: str) -> bool:
        return name in self.bindings

    def get_declared_variables(self) -> Set[str]:
        return set(self.bindings)

    def copy(self) -> "ValidationContext":
        return ValidationContext(self.bindings)


def validate_program(program: Program):
    """Validates a program, raising the first ValidationError found."""
    context = ValidationContext()
    for line, stmt in enumerate(program.statements, start=1):
        validate_statement(stmt, line, context)


def validate_program_detailed(program: Program) -> List[ValidationError]:
    """
    Validates every top-level statement and returns all the errors found
    (an empty list for a valid program). A failing statement contributes its
    first error and validation carries on with the next statement.
    """
    context = ValidationContext()
    errors = []
    for line, stmt in enumerate(program.statements, start=1):
        try:
            validate_statement(stmt, line, context)
        except ValidationError as e:
            errors.append(e)
    return errors


def _validate_block(statements: List[Statement], line: int, context: ValidationContext):
    block_context = context.copy()
    for stmt in statements:
        validate_statement(stmt, line, block_context)


def validate_statement(stmt: Statement, line: int, context: ValidationContext):
    if isinstance(stmt, PrintStatement):
        if not stmt.args:
            raise _validation_error(ErrorCode.EMPTY_PRINT_STATEMENT, line)
        for arg in stmt.args:
            validate_expression(arg, line, context)

    elif isinstance(stmt, (ConstDeclaration, LetDeclaration)):
        decl_type = DeclarationType.CONST if isinstance(stmt, ConstDeclaration) else DeclarationType.LET
        if not stmt.name:
            raise _validation_error(ErrorCode.EMPTY_IDENTIFIER, line, construct=decl_type.value)
        context.declare_variable(stmt.name, line, decl_type)
        validate_expression(stmt.value, line, context)

    elif isinstance(stmt, IfStatement):
        validate_expression(stmt.condition, line, context)
        if not stmt.then_block:
            raise _validation_error(ErrorCode.EMPTY_BLOCK, line, construct="magadheera")
        _validate_block(stmt.then_block, line, context)

        if stmt.else_block is not None:
            if not stmt.else_block:
                raise _validation_error(ErrorCode.EMPTY_BLOCK, line, construct="karthikeya")
            _validate_block(stmt.else_block, line, context)

    elif isinstance(stmt, WhileStatement):
        validate_expression(stmt.condition, line, context)
        if not stmt.body:
            raise _validation_error(ErrorCode.EMPTY_BLOCK, line, construct="pokiri")
        _validate_block(stmt.body, line, context)

    elif isinstance(stmt, ForStatement):
        # The loop variable lives in the enclosing scope so the body can see it.
        validate_statement(stmt.init, line, context)
        validate_expression(stmt.condition, line, context)
        validate_expression(stmt.update, line, context)
        if not stmt.body:
            raise _validation_error(ErrorCode.EMPTY_BLOCK, line, construct="eega")
        _validate_block(stmt.body, line, context)

    else:
        raise InternalCompilerError(f"Unknown statement type: {type(stmt).__name__}")


def validate_expression(expr: Expression, line: int, context: ValidationContext):
    if isinstance(expr, (NumberLiteral, StringLiteral)):
        return

    if isinstance(expr, Identifier):
        if not context.is_variable_declared(expr.name):
            raise _validation_error(ErrorCode.UNDEFINED_VARIABLE, line, name=expr.name)
        return

    if isinstance(expr, BinaryOp):
        # Operator chains nest on the left, so walk down that side in a loop.
        spine = []
        while isinstance(expr, BinaryOp):
            spine.append(expr)
            expr = expr.left
        validate_expression(expr, line, context)
        for node in reversed(spine):
            validate_expression(node.right, line, context)
            if node.operator not in VALID_OPERATORS:
                raise _validation_error(ErrorCode.INVALID_EXPRESSION, line, operator=node.operator)
        return

    raise InternalCompilerError(f"Unknown expression type: {type(expr).__name__}")
