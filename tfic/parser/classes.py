"""
Defines the formal data structures (contracts) for the Abstract Syntax Tree (AST)
produced by the parser stage.

Each node is an immutable pydantic model. Nodes built by the parser carry a
`Span` with their location in the source; nodes built by hand may leave it
unset. The later stages never look at spans.
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

# --- Core Data Structures ---


class Span(BaseModel):
    """Represents a location in the source code."""

    model_config = ConfigDict(frozen=True)

    s_line: int
    s_col: int
    e_line: int
    e_col: int


class ASTNode(BaseModel):
    """A base class for all AST nodes."""

    model_config = ConfigDict(frozen=True)

    span: Optional[Span] = None


# --- Expressions ---


class NumberLiteral(ASTNode):
    node_type: Literal["Number"] = "Number"
    value: int


class Identifier(ASTNode):
    node_type: Literal["Identifier"] = "Identifier"
    name: str


class StringLiteral(ASTNode):
    node_type: Literal["String"] = "String"
    value: str


class BinaryOp(ASTNode):
    node_type: Literal["BinaryOp"] = "BinaryOp"
    left: "Expression"
    operator: str
    right: "Expression"


Expression = Union[NumberLiteral, Identifier, StringLiteral, BinaryOp]


# --- Statements ---


class PrintStatement(ASTNode):
    node_type: Literal["Print"] = "Print"
    args: List[Expression]


class ConstDeclaration(ASTNode):
    node_type: Literal["Const"] = "Const"
    name: str
    value: Expression


class LetDeclaration(ASTNode):
    node_type: Literal["Let"] = "Let"
    name: str
    value: Expression


class IfStatement(ASTNode):
    node_type: Literal["If"] = "If"
    condition: Expression
    then_block: List["Statement"]
    else_block: Optional[List["Statement"]] = None


class WhileStatement(ASTNode):
    node_type: Literal["While"] = "While"
    condition: Expression
    body: List["Statement"]


class ForStatement(ASTNode):
    node_type: Literal["For"] = "For"
    init: "Statement"
    condition: Expression
    update: Expression
    body: List["Statement"]


Statement = Union[PrintStatement, ConstDeclaration, LetDeclaration, IfStatement, WhileStatement, ForStatement]


# --- Top-level Structure ---


class Program(ASTNode):
    """The root of the AST: the top-level statements of one source file, in order."""

    statements: List[Statement]


for _model in (BinaryOp, IfStatement, WhileStatement, ForStatement, PrintStatement, ConstDeclaration, LetDeclaration, Program):
    _model.model_rebuild()
