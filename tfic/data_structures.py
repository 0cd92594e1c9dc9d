"""
Defines the data structures handed back by the compiler entry points:
the options a caller can pass in, the result of a compilation and the
statement statistics of a program.
"""

from dataclasses import dataclass, field, replace
from typing import List


@dataclass(frozen=True)
class CompilationOptions:
    """
    Post-processing switches for `compile_with_options`.
    `strict_mode` and `minify` are accepted but do not change the output yet.
    """

    format_output: bool = False
    add_comments: bool = False
    strict_mode: bool = False
    minify: bool = False

    def with_formatting(self) -> "CompilationOptions":
        return replace(self, format_output=True)

    def with_comments(self) -> "CompilationOptions":
        return replace(self, add_comments=True)

    def with_strict_mode(self) -> "CompilationOptions":
        return replace(self, strict_mode=True)

    def with_minification(self) -> "CompilationOptions":
        return replace(self, minify=True)


@dataclass
class CompilationResult:
    """Generated JavaScript plus the advisory warnings found in the program."""

    js_code: str
    statement_count: int
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, warning: str):
        self.warnings.append(warning)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)


@dataclass
class CompilationStats:
    total_statements: int = 0
    print_statements: int = 0
    const_declarations: int = 0
    let_declarations: int = 0
    if_statements: int = 0
    while_loops: int = 0
    for_loops: int = 0

    @property
    def total_declarations(self) -> int:
        return self.const_declarations + self.let_declarations

    @property
    def total_control_structures(self) -> int:
        return self.if_statements + self.while_loops + self.for_loops

    def summary(self) -> str:
        return "\n".join(
            [
                "Compilation Summary:",
                f" - Total statements: {self.total_statements}",
                f" - Print statements: {self.print_statements}",
                f" - Variable declarations: {self.total_declarations}",
                f" - Control structures: {self.total_control_structures}",
            ]
        )
