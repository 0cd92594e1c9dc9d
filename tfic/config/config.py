"""
Static configuration data for the TFI compiler.
This includes the keyword vocabulary, operator tables, JavaScript output
conventions, warning thresholds and the texts used for diagnostics.
"""

VERSION = "1.0.0"

# Source spelling -> token tag.
KEYWORDS = {
    "rrr": "CONST",
    "pushpa": "LET",
    "bahubali": "PRINT",
    "magadheera": "IF",
    "karthikeya": "ELSE",
    "pokiri": "WHILE",
    "eega": "FOR",
}

# Operator spelling -> token tag. The lexical patterns themselves live in parser/tfi.lark.
OPERATOR_TOKENS = {
    ">=": "GREATER_EQUAL",
    "<=": "LESS_EQUAL",
    "==": "EQUAL",
    "!=": "NOT_EQUAL",
    "+": "PLUS",
    "-": "MINUS",
    "*": "MULTIPLY",
    "/": "DIVIDE",
    ">": "GREATER",
    "<": "LESS",
}

# The binary operators accepted by the validator.
VALID_OPERATORS = frozenset(OPERATOR_TOKENS.keys())

# Number literals are signed 32-bit integers.
MAX_NUMBER = 2**31 - 1

# --- JavaScript output ---
JS_PRINT_CALL = "console.log"
JS_CONST_KEYWORD = "const"
JS_LET_KEYWORD = "let"
INDENT_SIZE = 4

# --- Advisory warnings ---
MAX_PRINT_ARGUMENTS = 5
MAX_LOOP_BODY_STATEMENTS = 10

# A mapping from Lark's terminal names to friendly, human-readable names.
FRIENDLY_TOKEN_NAMES = {
    "IDENT": "a variable name",
    "NUMBER": "a number",
    "STRING": "a string in double quotes",
    "OPERATOR": "an operator",
    "CONST": "the 'rrr' keyword",
    "LET": "the 'pushpa' keyword",
    "PRINT": "the 'bahubali' keyword",
    "IF": "the 'magadheera' keyword",
    "ELSE": "the 'karthikeya' keyword",
    "WHILE": "the 'pokiri' keyword",
    "FOR": "the 'eega' keyword",
    "EQUAL": "an equals sign '='",
    "LPAR": "an opening parenthesis '('",
    "RPAR": "a closing parenthesis ')'",
    "LBRACE": "an opening brace '{'",
    "RBRACE": "a closing brace '}'",
    "SEMICOLON": "a semicolon ';'",
    "COMMA": "a comma ','",
    "$END": "the end of the file",
}

# Lark terminals which mean "a statement could start here".
STATEMENT_TERMINALS = {"CONST", "LET", "PRINT", "IF", "WHILE", "FOR"}

# Parse error suggestions, chosen from the content of the offending line.
PARSE_SUGGESTIONS = {
    "empty_line": "Add a valid TFI statement like 'bahubali(\"Hello\");'",
    "missing_declaration": "Variable assignments need 'rrr' (const) or 'pushpa' (let) keyword",
    "bahubali": 'bahubali statements need parentheses: bahubali("message");',
    "magadheera": "magadheera statements need parentheses: magadheera(condition) { ... }",
    "pokiri": "pokiri statements need parentheses: pokiri(condition) { ... }",
    "eega": "eega statements need parentheses: eega(init; condition; update) { ... }",
    "generic": "Check your syntax and make sure all statements end with semicolons",
    "no_statements": "Make sure your TFI file contains valid statements like 'bahubali(\"Hello\");' or 'rrr x = 10;'",
    "number_out_of_range": "Number literals must be between 0 and 2147483647",
    "for_clause": "eega needs all three clauses: eega(rrr i = 0; i < 10; i + 1) { ... }",
}

VALIDATION_SUGGESTIONS = {
    "EMPTY_PRINT_STATEMENT": 'bahubali("Hello, world!");',
    "EMPTY_IDENTIFIER": "{construct} variable_name = value;",
    "EMPTY_BLOCK": '{construct} (condition) {{ bahubali("action"); }}',
    "DUPLICATE_VARIABLE": "Use a different variable name or redeclare with 'pushpa'",
    "UNDEFINED_VARIABLE": "Declare the variable first with 'rrr {name} = value;' or 'pushpa {name} = value;'",
}
