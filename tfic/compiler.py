import json
import os
from typing import Any, Dict, List, Optional

from .config.config import MAX_LOOP_BODY_STATEMENTS, MAX_PRINT_ARGUMENTS
from .data_structures import CompilationOptions, CompilationResult, CompilationStats
from .exceptions import CompilationError, ErrorCode, InternalCompilerError, ParseError, TFIError, ValidationError
from .generator import format_js_code, generate_program
from .parser.classes import ConstDeclaration, ForStatement, IfStatement, LetDeclaration, PrintStatement, Program, Statement, WhileStatement
from .parser.parser import parse_program
from .utils import CompilerArtifactEncoder
from .validator import validate_program

PARSER_CONTEXT_NOTE = "The parser has already produced a detailed diagnostic (see the chained parse error)"


def _validate(program: Program) -> Program:
    validate_program(program)
    return program


class CompilationPipeline:
    """
    Orchestrates the compilation from TFI source to JavaScript.
    Stages run in order ('ast', 'validation', 'js'); the artifact of each stage
    is kept in `artifacts` and is the input of the next one.
    """

    STAGES = ("ast", "validation", "js")

    def __init__(
        self,
        source_content: str,
        file_path: Optional[str] = None,
        dump_stages: List[str] = [],
        stop_after_stage: Optional[str] = None,
    ):
        self.source_content = source_content
        self.file_path = os.path.abspath(file_path) if file_path else "<stdin>"
        self.dump_stages = dump_stages
        self.stop_after_stage = stop_after_stage
        self.artifacts: Dict[str, Any] = {}
        self.results: List[Any] = []
        self.saved_artifacts: Dict[str, str] = {}

    def run(self) -> Any:
        """
        Executes the pipeline stage by stage and returns the last artifact produced:
        the JavaScript text for a full run.
        """
        try:
            # --- Stage 1: Parsing ---
            self._run_simple_stage("ast", parse_program, self.source_content)
            if self.stop_after_stage == "ast":
                return self.results[-1]

            # --- Stage 2: Validation ---
            # The AST comes out unchanged; a failure aborts the pipeline.
            self._run_simple_stage("validation", _validate, self.results[-1])
            if self.stop_after_stage == "validation":
                return self.results[-1]

            # --- Stage 3: Code Generation ---
            return self._run_simple_stage("js", generate_program, self.results[-1])

        except ParseError as e:
            raise CompilationError(ErrorCode.PARSE_FAILED, stage="parse", cause=e, context=PARSER_CONTEXT_NOTE, details=e.message) from e
        except ValidationError as e:
            raise CompilationError(ErrorCode.VALIDATION_FAILED, stage="validation", cause=e, details=e.message) from e
        except TFIError:
            raise
        except Exception as e:
            raise InternalCompilerError(f"An unexpected internal error occurred: {e}") from e

    @property
    def program(self) -> Optional[Program]:
        return self.artifacts.get("ast")

    def _run_simple_stage(self, name: str, func, *args, **kwargs) -> Any:
        """Runs a single function as a stage, storing and returning its result."""
        result = func(*args, **kwargs)
        self.artifacts[name] = result
        self.results.append(result)
        if name in self.dump_stages:
            self.save_artifact(name, result)
        return result

    def save_artifact(self, name: str, data: Any) -> str:
        """Saves an intermediate artifact to a JSON file next to the input and returns its path."""

        if self.file_path == "<stdin>":
            base_name = "stdin_output"
        else:
            base_name = os.path.splitext(self.file_path)[0]

        output_path = f"{base_name}.{name}.json"
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=False, cls=CompilerArtifactEncoder)

        self.saved_artifacts[name] = output_path
        return output_path


# --- Warnings ---


def collect_warnings(program: Program) -> List[str]:
    """Advisory warnings for oversized top-level statements. They never stop a compilation."""
    warnings = []
    for i, stmt in enumerate(program.statements, start=1):
        if isinstance(stmt, PrintStatement) and len(stmt.args) > MAX_PRINT_ARGUMENTS:
            warnings.append(f"Statement {i}: Print statement has {len(stmt.args)} arguments, consider breaking it up")
        elif isinstance(stmt, WhileStatement) and len(stmt.body) > MAX_LOOP_BODY_STATEMENTS:
            warnings.append(f"Statement {i}: While loop has {len(stmt.body)} statements, consider refactoring")
        elif isinstance(stmt, ForStatement) and len(stmt.body) > MAX_LOOP_BODY_STATEMENTS:
            warnings.append(f"Statement {i}: For loop has {len(stmt.body)} statements, consider refactoring")
    return warnings


# --- Post-processing ---


def add_source_comments(js_code: str, source: str) -> str:
    """Prefixes the generated code with the non-blank lines of the TFI source, as comments."""
    header = ["// Generated from TFI source code", "// Original source:"]
    for i, line in enumerate(source.splitlines(), start=1):
        if line.strip():
            header.append(f"// {i}: {line.strip()}")
    return "\n".join(header) + "\n\n" + js_code


# --- Entry points ---


def compile_with_details(source: str, file_path: Optional[str] = None, dump_stages: List[str] = []) -> CompilationResult:
    """Compiles TFI source to JavaScript and reports the warnings found along the way."""
    pipeline = CompilationPipeline(source, file_path, dump_stages)
    js_code = pipeline.run()

    program = pipeline.program
    result = CompilationResult(js_code=js_code, statement_count=len(program.statements))
    for warning in collect_warnings(program):
        result.add_warning(warning)
    return result


def compile_tfi(source: str) -> str:
    """High-level entry point: TFI source in, JavaScript out."""
    return compile_with_details(source).js_code


def compile_with_options(
    source: str,
    options: Optional[CompilationOptions] = None,
    file_path: Optional[str] = None,
    dump_stages: List[str] = [],
) -> CompilationResult:
    options = options or CompilationOptions()
    result = compile_with_details(source, file_path, dump_stages)

    if options.format_output:
        result.js_code = format_js_code(result.js_code)

    if options.add_comments:
        result.js_code = add_source_comments(result.js_code, source)

    return result


# --- Statistics ---


def _count_statement(stmt: Statement, stats: CompilationStats):
    if isinstance(stmt, PrintStatement):
        stats.print_statements += 1
    elif isinstance(stmt, ConstDeclaration):
        stats.const_declarations += 1
    elif isinstance(stmt, LetDeclaration):
        stats.let_declarations += 1
    elif isinstance(stmt, IfStatement):
        stats.if_statements += 1
        for inner in stmt.then_block + (stmt.else_block or []):
            _count_statement(inner, stats)
    elif isinstance(stmt, WhileStatement):
        stats.while_loops += 1
        for inner in stmt.body:
            _count_statement(inner, stats)
    elif isinstance(stmt, ForStatement):
        stats.for_loops += 1
        for inner in stmt.body:
            _count_statement(inner, stats)


def get_compilation_stats(source: str) -> CompilationStats:
    """Counts the statements of a program by kind. Only parses: the program is not validated."""
    program = parse_program(source)

    stats = CompilationStats(total_statements=len(program.statements))
    for stmt in program.statements:
        _count_statement(stmt, stats)
    return stats
