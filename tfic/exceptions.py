"""
Custom exception types for the TFI compiler.
"""

from enum import Enum
from typing import List, Optional


class ErrorCode(Enum):

    # --- Parse Errors ---
    NO_STATEMENTS = "No valid statements found. Check your syntax."
    FOR_CLAUSE_MISSING = "Expected {clause} in eega statement."
    NUMBER_OUT_OF_RANGE = "Number literal '{value}' does not fit in a 32-bit integer."

    # These come from translating the grammar engine's own errors.
    SYNTAX_UNEXPECTED_EOF = "Unexpected end of input or invalid syntax"
    SYNTAX_INVALID_STATEMENT = "Invalid statement syntax"
    SYNTAX_ERROR = "Syntax error"

    # --- Validation Errors ---
    EMPTY_PRINT_STATEMENT = "bahubali() requires at least one argument"
    EMPTY_IDENTIFIER = "{construct} declaration requires a valid identifier"
    EMPTY_BLOCK = "{construct} block cannot be empty"
    INVALID_EXPRESSION = "Unknown operator: {operator}"
    DUPLICATE_VARIABLE = "Variable '{name}' is already declared"
    UNDEFINED_VARIABLE = "Variable '{name}' is not defined"

    # --- Pipeline Errors ---
    PARSE_FAILED = "Failed to parse TFI code: {details}"
    VALIDATION_FAILED = "Validation failed: {details}"
    GENERATION_FAILED = "Failed to generate JavaScript: {details}"


# Validation codes and the names the language documentation uses for them.
VALIDATION_KINDS = {
    ErrorCode.EMPTY_PRINT_STATEMENT: "EmptyPrintStatement",
    ErrorCode.EMPTY_IDENTIFIER: "EmptyIdentifier",
    ErrorCode.EMPTY_BLOCK: "EmptyBlock",
    ErrorCode.INVALID_EXPRESSION: "InvalidExpression",
    ErrorCode.DUPLICATE_VARIABLE: "DuplicateVariable",
    ErrorCode.UNDEFINED_VARIABLE: "UndefinedVariable",
}


class TFIError(Exception):
    """Base class for every error the compiler reports to a user."""

    stage = "general"

    def __init__(
        self,
        code: ErrorCode,
        line: Optional[int] = None,
        column: Optional[int] = None,
        **kwargs,
    ):
        self.code = code
        self.line = line
        self.column = column
        self.details = kwargs

        # The format string (e.g., "Variable '{name}' is not defined") is populated
        # with any extra data it needs from kwargs.
        self.message = code.value.format(**kwargs)

        super().__init__(self.message)

    def render(self) -> str:
        return self.message


class ParseError(TFIError):
    """A grammar mismatch or a structural omission found while parsing."""

    stage = "parse"

    def __init__(
        self,
        code: ErrorCode,
        line: int = 1,
        column: int = 1,
        source_line: str = "",
        suggestion: Optional[str] = None,
        **kwargs,
    ):
        self.source_line = source_line
        self.suggestion = suggestion
        super().__init__(code, line=line, column=column, **kwargs)

    def render(self) -> str:
        lines = [
            f"Parse Error at line {self.line}, column {self.column}",
            f"   {self.message}",
            f"   {self.source_line}",
            f"   {' ' * max(self.column - 1, 0)}^",
        ]
        if self.details.get("expected"):
            lines.append(f"   {self.details['expected']}")
        if self.suggestion:
            lines.append(f"   Suggestion: {self.suggestion}")
        return "\n".join(lines)


class ValidationError(TFIError):
    """A semantic rule broken by a statement. `line` is the statement's ordinal."""

    stage = "validation"

    def __init__(self, code: ErrorCode, line: int, suggestion: Optional[str] = None, **kwargs):
        self.suggestion = suggestion
        self.name = kwargs.get("name")
        self.construct = kwargs.get("construct")
        super().__init__(code, line=line, **kwargs)

    @property
    def kind(self) -> str:
        return VALIDATION_KINDS[self.code]

    def render(self) -> str:
        lines = [f"Validation Error at statement {self.line}", f"   {self.message}"]
        if self.suggestion:
            lines.append(f"   Suggestion: {self.suggestion}")
        return "\n".join(lines)


class GenerationError(TFIError):
    """Reserved: JavaScript generation is total and does not raise it today."""

    stage = "generation"


class CompilationError(TFIError):
    """
    Raised by the pipeline when one of its stages fails. The stage's own error
    is chained as `__cause__` and kept in `cause`.
    """

    def __init__(self, code: ErrorCode, stage: str, cause: Optional[TFIError] = None, context: Optional[str] = None, **kwargs):
        self.stage = stage
        self.cause = cause
        self.context = context
        super().__init__(code, line=getattr(cause, "line", None), column=getattr(cause, "column", None), **kwargs)

    @property
    def errors(self) -> List[TFIError]:
        return [self.cause] if self.cause else []

    def render(self) -> str:
        lines = [f"Compilation Error ({self.stage} stage)", f"   {self.message}"]
        if self.context:
            lines.append(f"   Context: {self.context}")
        if self.cause is not None:
            lines.append(self.cause.render())
        return "\n".join(lines)


class InternalCompilerError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
