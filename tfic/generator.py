"""
JavaScript code generation.

Generation is purely structural: it trusts that the program has been
validated and never fails. Every binary expression is emitted fully
parenthesized, so the JavaScript evaluates in exactly the order the TFI
grouping dictates regardless of JavaScript's own operator precedence.
"""

from typing import List

from .config.config import INDENT_SIZE, JS_CONST_KEYWORD, JS_LET_KEYWORD, JS_PRINT_CALL
from .exceptions import InternalCompilerError
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


def generate_expression(expr: Expression) -> str:
    if isinstance(expr, NumberLiteral):
        return str(expr.value)
    if isinstance(expr, Identifier):
        return expr.name
    if isinstance(expr, StringLiteral):
        return f'"{expr.value}"'
    if isinstance(expr, BinaryOp):
        # Operator chains nest on the left: emit the innermost operand, then wrap it once per level.
        spine = []
        while isinstance(expr, BinaryOp):
            spine.append(expr)
            expr = expr.left
        code = generate_expression(expr)
        for node in reversed(spine):
            code = f"({code} {node.operator} {generate_expression(node.right)})"
        return code
    raise InternalCompilerError(f"Unknown expression type: {type(expr).__name__}")


def _generate_block(statements: List[Statement]) -> str:
    return "\n".join(generate_statement(stmt) for stmt in statements)


def generate_statement(stmt: Statement) -> str:
    if isinstance(stmt, PrintStatement):
        args = ", ".join(generate_expression(arg) for arg in stmt.args)
        return f"{JS_PRINT_CALL}({args});"

    if isinstance(stmt, ConstDeclaration):
        return f"{JS_CONST_KEYWORD} {stmt.name} = {generate_expression(stmt.value)};"

    if isinstance(stmt, LetDeclaration):
        return f"{JS_LET_KEYWORD} {stmt.name} = {generate_expression(stmt.value)};"

    if isinstance(stmt, IfStatement):
        code = f"if ({generate_expression(stmt.condition)}) {{\n{_generate_block(stmt.then_block)}\n}}"
        if stmt.else_block is not None:
            code += f" else {{\n{_generate_block(stmt.else_block)}\n}}"
        return code

    if isinstance(stmt, WhileStatement):
        return f"while ({generate_expression(stmt.condition)}) {{\n{_generate_block(stmt.body)}\n}}"

    if isinstance(stmt, ForStatement):
        # The init is a full statement; its own ';' would double the header separator.
        init = generate_statement(stmt.init).rstrip(";")
        condition = generate_expression(stmt.condition)
        update = generate_expression(stmt.update)
        return f"for ({init}; {condition}; {update}) {{\n{_generate_block(stmt.body)}\n}}"

    raise InternalCompilerError(f"Unknown statement type: {type(stmt).__name__}")


def generate_program(program: Program) -> str:
    return "\n".join(generate_statement(stmt) for stmt in program.statements)


def generate_formatted_statement(stmt: Statement, indent_level: int) -> str:
    """Generates a statement with every line prefixed by `indent_level` indentation units."""
    indent = " " * (INDENT_SIZE * indent_level)
    return "\n".join(f"{indent}{line}" for line in generate_statement(stmt).splitlines())


def generate_formatted_program(program: Program) -> str:
    return "\n".join(generate_formatted_statement(stmt, 0) for stmt in program.statements)


def format_js_code(js_code: str) -> str:
    """
    Re-indents generated code by brace depth: a line starting with '}' is
    dedented before it is written, a line ending with '{' indents the lines
    after it. Every output line ends with a newline; blank lines stay empty.
    """
    formatted = []
    indent_level = 0

    for line in js_code.splitlines():
        trimmed = line.strip()
        if not trimmed:
            formatted.append("\n")
            continue

        if trimmed.startswith("}"):
            indent_level = max(indent_level - 1, 0)

        formatted.append(" " * (indent_level * INDENT_SIZE) + trimmed + "\n")

        if trimmed.endswith("{"):
            indent_level += 1

    return "".join(formatted)
