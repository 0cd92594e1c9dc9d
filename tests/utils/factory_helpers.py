from typing import List, Optional, Union

from tfic.parser.classes import *


def get_number_literal(value: int):
    return NumberLiteral(value=value)


def get_identifier(name: str):
    return Identifier(name=name)


def get_string_literal(value: str):
    return StringLiteral(value=value)


def get_binary_op(left: Expression, operator: str, right: Expression):
    return BinaryOp(left=left, operator=operator, right=right)


def get_print(*args: Expression):
    return PrintStatement(args=list(args))


def get_const(name: str, value: Union[Expression, int]):
    if isinstance(value, int):
        value = get_number_literal(value)
    return ConstDeclaration(name=name, value=value)


def get_let(name: str, value: Union[Expression, int]):
    if isinstance(value, int):
        value = get_number_literal(value)
    return LetDeclaration(name=name, value=value)


def get_if(condition: Expression, then_block: List[Statement], else_block: Optional[List[Statement]] = None):
    return IfStatement(condition=condition, then_block=then_block, else_block=else_block)


def get_while(condition: Expression, body: List[Statement]):
    return WhileStatement(condition=condition, body=body)


def get_for(init: Statement, condition: Expression, update: Expression, body: List[Statement]):
    return ForStatement(init=init, condition=condition, update=update, body=body)


def get_program(*statements: Statement):
    return Program(statements=list(statements))
