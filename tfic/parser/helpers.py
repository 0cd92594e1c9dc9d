from typing import Optional, Set, Tuple

from lark.exceptions import LarkError, UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from ..config.config import FRIENDLY_TOKEN_NAMES, PARSE_SUGGESTIONS, STATEMENT_TERMINALS
from ..exceptions import ErrorCode, ParseError

# Keywords whose statements must be followed by an opening parenthesis.
PARENTHESIZED_KEYWORDS = ("bahubali", "magadheera", "pokiri", "eega")


def generate_suggestion(source_line: str) -> str:
    """Picks a hint for a syntax error from the content of the offending line."""
    if not source_line.strip():
        return PARSE_SUGGESTIONS["empty_line"]
    if "=" in source_line and "rrr" not in source_line and "pushpa" not in source_line:
        return PARSE_SUGGESTIONS["missing_declaration"]
    for keyword in PARENTHESIZED_KEYWORDS:
        if keyword in source_line and "(" not in source_line:
            return PARSE_SUGGESTIONS[keyword]
    return PARSE_SUGGESTIONS["generic"]


def get_source_line(source: str, line: int) -> str:
    lines = source.splitlines()
    if 1 <= line <= len(lines):
        return lines[line - 1]
    return ""


def _error_position(err: LarkError, source: str) -> Tuple[int, int]:
    """Best-effort 1-based (line, column) of a Lark error."""
    line = getattr(err, "line", None)
    column = getattr(err, "column", None)
    if isinstance(line, int) and line >= 1:
        return line, column if isinstance(column, int) and column >= 1 else 1

    # No usable position, which happens at the end of the input: point past the last line.
    lines = source.splitlines() or [""]
    return len(lines), len(lines[-1]) + 1


def _expected_terminals(err: LarkError) -> Set[str]:
    if isinstance(err, UnexpectedToken):
        return set(err.expected or ())
    if isinstance(err, UnexpectedCharacters):
        return set(err.allowed or ())
    return set()


def _classify(err: LarkError) -> ErrorCode:
    """Sorts a Lark error into one of three categories by looking at its text."""
    text = str(err)
    if isinstance(err, UnexpectedEOF) or "$END" in text:
        return ErrorCode.SYNTAX_UNEXPECTED_EOF
    if _expected_terminals(err) & STATEMENT_TERMINALS:
        return ErrorCode.SYNTAX_INVALID_STATEMENT
    return ErrorCode.SYNTAX_ERROR


def describe_expected(err: LarkError) -> Optional[str]:
    expected = sorted(_expected_terminals(err))
    if not expected:
        return None
    friendly = [FRIENDLY_TOKEN_NAMES.get(e, e) for e in expected]
    if len(friendly) == 1:
        return f"Expected {friendly[0]}"
    return f"Expected one of: {', '.join(friendly[:-1])} or {friendly[-1]}"


def translate_lark_error(err: LarkError, source: str) -> ParseError:
    """Translates a generic LarkError into a user-friendly ParseError."""

    if isinstance(err, UnexpectedInput):
        line, column = _error_position(err, source)
    else:
        line, column = 1, 1
    source_line = get_source_line(source, line)

    return ParseError(
        _classify(err),
        line=line,
        column=column,
        source_line=source_line,
        suggestion=generate_suggestion(source_line),
        expected=describe_expected(err),
    )
