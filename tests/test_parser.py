import pytest

from errors import MalformedExpression, UnknownOperator
from lexer import tokenize
from parser import Parser, parse


def p(text):
    return parse(tokenize(text))


def test_number_leaf():
    assert p("7") == ('num', 7)


def test_flat_operator():
    assert p("(+ 1 2 3)") == ('op', '+', (('num', 1), ('num', 2), ('num', 3)))


def test_nested_operator():
    assert p("(+ 1 (* 2 3))") == (
        'op', '+', (
            ('num', 1),
            ('op', '*', (('num', 2), ('num', 3))),
        ),
    )


def test_unary_operator():
    assert p("(- 5)") == ('op', '-', (('num', 5),))


def test_outer_parenthesis_is_optional():
    assert p("+ 1 2)") == p("(+ 1 2)")


def test_extra_parentheses_are_grouping():
    assert p("((+ 1 2))") == p("(+ 1 2)")
    assert p("(5)") == ('num', 5)
    assert p("(+ (4) 2)") == ('op', '+', (('num', 4), ('num', 2)))


def test_cursor_is_shared_between_calls():
    parser = Parser(tokenize("(+ 1 2) (* 3 4)"))
    first = parser.parse_expr()
    assert parser.pos == 5
    second = parser.parse_expr()
    assert first[1] == '+' and second[1] == '*'
    assert parser.pos == len(parser.tokens)


@pytest.mark.parametrize("text", [
    "(+ 1",        # missing close
    "(+ 1 2",
    "((+ 1 2)",    # unbalanced grouping
    "(",
    "",
])
def test_running_out_of_tokens(text):
    with pytest.raises(MalformedExpression):
        p(text)


def test_operator_without_operands():
    with pytest.raises(MalformedExpression, match="at least one operand"):
        p("(+)")


def test_stray_close():
    with pytest.raises(MalformedExpression, match=r"unexpected '\)'"):
        p(")")


def test_trailing_tokens():
    with pytest.raises(MalformedExpression, match="trailing"):
        p("(+ 1 2))")
    # multi-digit literals are not part of the grammar
    with pytest.raises(MalformedExpression):
        p("12")


def test_unknown_operator_in_operator_position():
    with pytest.raises(UnknownOperator) as info:
        p("(^ 1 2)")
    assert info.value.position == 1


def test_unknown_character_among_operands():
    with pytest.raises(UnknownOperator):
        p("(+ 1 a)")


def test_errors_are_syntax_errors():
    with pytest.raises(SyntaxError):
        p("(+ 1")


def test_deep_nesting_is_malformed_expression():
    deep = "(- " * 2000 + "1" + ")" * 2000
    with pytest.raises(MalformedExpression, match="nested too deeply"):
        p(deep)
