import pytest
from textwrap import dedent

from tfic.generator import (
    format_js_code,
    generate_expression,
    generate_formatted_program,
    generate_formatted_statement,
    generate_program,
    generate_statement,
)
from tfic.parser import parse_program
from tests.utils.factory_helpers import *


def test_binary_expressions_are_fully_parenthesized():
    expr = get_binary_op(get_binary_op(get_number_literal(1), "+", get_number_literal(2)), "*", get_number_literal(3))
    assert generate_expression(expr) == "((1 + 2) * 3)"


@pytest.mark.parametrize(
    "expr, expected",
    [
        pytest.param(get_number_literal(42), "42", id="number"),
        pytest.param(get_identifier("total"), "total", id="identifier"),
        pytest.param(get_string_literal("hi there"), '"hi there"', id="string"),
        pytest.param(get_binary_op(get_identifier("a"), "==", get_identifier("b")), "(a == b)", id="equality_unchanged"),
        pytest.param(get_binary_op(get_identifier("a"), "!=", get_identifier("b")), "(a != b)", id="inequality_unchanged"),
    ],
)
def test_generate_expression(expr, expected):
    assert generate_expression(expr) == expected


@pytest.mark.parametrize(
    "stmt, expected",
    [
        pytest.param(get_print(get_string_literal("Hello"), get_identifier("x")), 'console.log("Hello", x);', id="print"),
        pytest.param(get_const("x", 42), "const x = 42;", id="const"),
        pytest.param(get_let("y", get_binary_op(get_identifier("x"), "-", get_number_literal(1))), "let y = (x - 1);", id="let"),
    ],
)
def test_generate_simple_statements(stmt, expected):
    assert generate_statement(stmt) == expected


def test_generate_if_else():
    stmt = get_if(
        get_binary_op(get_identifier("x"), ">", get_number_literal(5)),
        [get_print(get_string_literal("big"))],
        [get_print(get_string_literal("small"))],
    )
    assert generate_statement(stmt) == 'if ((x > 5)) {\nconsole.log("big");\n} else {\nconsole.log("small");\n}'


def test_generate_if_without_else():
    stmt = get_if(get_number_literal(1), [get_print(get_number_literal(1))])
    assert generate_statement(stmt) == "if (1) {\nconsole.log(1);\n}"


def test_generate_while():
    stmt = get_while(get_binary_op(get_identifier("i"), "<", get_number_literal(3)), [get_print(get_identifier("i"))])
    assert generate_statement(stmt) == "while ((i < 3)) {\nconsole.log(i);\n}"


def test_generate_for_strips_the_init_terminator():
    stmt = get_for(
        get_let("i", 0),
        get_binary_op(get_identifier("i"), "<", get_number_literal(5)),
        get_binary_op(get_identifier("i"), "+", get_number_literal(1)),
        [get_print(get_identifier("i"))],
    )
    assert generate_statement(stmt) == "for (let i = 0; (i < 5); (i + 1)) {\nconsole.log(i);\n}"


def test_generate_program_keeps_declaration_order():
    program = parse_program("rrr a = 1; pushpa b = 2; rrr c = a + b; bahubali(c);")
    js = generate_program(program)
    assert js.splitlines() == [
        "const a = 1;",
        "let b = 2;",
        "const c = (a + b);",
        "console.log(c);",
    ]


def test_generate_nested_blocks():
    program = parse_program("pokiri(1) { magadheera(2) { bahubali(3); } }")
    assert generate_program(program) == "while (1) {\nif (2) {\nconsole.log(3);\n}\n}"


def test_format_js_code_indents_by_brace_depth():
    js = "while (1) {\nif (2) {\nconsole.log(3);\n} else {\nconsole.log(4);\n}\n}\n\nconsole.log(5);"
    expected = dedent(
        """\
        while (1) {
            if (2) {
                console.log(3);
            } else {
                console.log(4);
            }
        }

        console.log(5);
        """
    )
    assert format_js_code(js) == expected


def test_format_js_code_is_idempotent():
    once = format_js_code(generate_program(parse_program("pokiri(1) { bahubali(1); }")))
    assert format_js_code(once) == once


def test_format_js_code_never_dedents_below_zero():
    assert format_js_code("}\nconsole.log(1);") == "}\nconsole.log(1);\n"


def test_generate_formatted_statement():
    stmt = get_while(get_number_literal(1), [get_print(get_number_literal(2))])
    assert generate_formatted_statement(stmt, 1) == "    while (1) {\n    console.log(2);\n    }"


def test_generate_formatted_program_matches_plain_output_at_top_level():
    program = parse_program("rrr x = 1; bahubali(x);")
    assert generate_formatted_program(program) == generate_program(program)
