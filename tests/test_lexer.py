from lexer import tokenize


def kinds(text):
    return [(tok.type, tok.value) for tok in tokenize(text)]


def test_simple_expression():
    assert kinds("(+ 1 2)") == [
        ('OPEN', '('),
        ('OP', '+'),
        ('NUM', 1),
        ('NUM', 2),
        ('CLOSE', ')'),
    ]


def test_all_operators():
    assert [v for _, v in kinds("+-*/%")] == ['+', '-', '*', '/', '%']
    assert {t for t, _ in kinds("+-*/%")} == {'OP'}


def test_spaces_are_dropped():
    assert kinds("   7   ") == [('NUM', 7)]
    assert tokenize("") == []


def test_numbers_are_single_digits():
    assert kinds("12") == [('NUM', 1), ('NUM', 2)]


def test_unknown_characters_become_close():
    assert kinds("x") == [('CLOSE', 'x')]
    assert kinds("\t") == [('CLOSE', '\t')]


def test_positions_are_offsets_into_line():
    toks = tokenize("(*  3 4)")
    assert [t.lexpos for t in toks] == [0, 1, 4, 6, 7]


def test_newlines_are_skipped_and_counted():
    toks = tokenize("(+ 1\n2)")
    assert [t.value for t in toks] == ['(', '+', 1, 2, ')']
    assert toks[-1].lineno == 2


def test_each_call_starts_fresh():
    tokenize("1\n\n\n")
    assert tokenize("5")[0].lineno == 1
