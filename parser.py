from typing import Any, List, Tuple

from errors import MalformedExpression, UnknownOperator

# Μορφή κόμβων του δέντρου (όπως το AST με tuples):
#   ('num', value)
#   ('op', char, (child, child, ...))
# Ο γονέας είναι ο μόνος ιδιοκτήτης των παιδιών του. Δεν κρατάμε δείκτη προς τον γονέα,
# κανένα επόμενο στάδιο δεν ανεβαίνει προς τα πάνω στο δέντρο.


class Parser:
    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.pos = 0  # κοινός κέρσορας, προχωράει από κάθε αναδρομική κλήση

    # helper functions
    def _end_position(self):
        # θέση για μηνύματα "unexpected end": αμέσως μετά το τελευταίο token
        if not self.tokens:
            return 0
        return self.tokens[-1].lexpos + 1

    def _peek(self):
        if self.pos >= len(self.tokens):
            raise MalformedExpression("unexpected end of input", self._end_position())
        return self.tokens[self.pos]

    def _at_close(self):
        # True αν το τρέχον token είναι ')'. Ένα CLOSE με άλλο χαρακτήρα είναι άγνωστος τελεστής.
        tok = self._peek()
        if tok.type != 'CLOSE':
            return False
        if tok.value != ')':
            raise UnknownOperator(f"unknown operator {tok.value!r}", tok.lexpos)
        return True

    def _expect_close(self, opened_at):
        if not self._at_close():
            tok = self._peek()
            raise MalformedExpression(f"expected ')' for '(' at column {opened_at + 1}, got {tok.value!r}", tok.lexpos)
        self.pos += 1

    # Γραμματική:
    # expr ::= NUM | '(' OP expr+ ')' | '(' expr ')'
    # Το εξωτερικό '(' πριν από τελεστή μπορεί να λείπει ("+ 1 2)" == "(+ 1 2)").
    def parse(self):
        try:
            tree = self.parse_expr()
        except RecursionError:
            # πολύ βαθύ nesting: λάθος της γραμμής, όχι τερματισμός του προγράμματος
            raise MalformedExpression("expression nested too deeply") from None
        if self.pos < len(self.tokens):
            tok = self.tokens[self.pos]
            raise MalformedExpression(f"unexpected trailing {tok.value!r}", tok.lexpos)
        return tree

    def parse_expr(self):
        # Τα '(' είναι διαφανή: τα προσπερνάμε και κρατάμε πού άνοιξαν για να τα κλείσουμε μετά
        opens: List[int] = []
        tok = self._peek()
        while tok.type == 'OPEN':
            opens.append(tok.lexpos)
            self.pos += 1
            tok = self._peek()

        if tok.type == 'NUM':
            self.pos += 1
            node: Tuple[Any, ...] = ('num', tok.value)

        elif tok.type == 'OP':
            node = self._parse_operator(tok)
            # το ')' του τελεστή κλείνει το '(' ακριβώς πριν από αυτόν
            if opens:
                opens.pop()

        else:
            # ')' (ή άγνωστος χαρακτήρας) εκεί που περιμέναμε έκφραση
            self._at_close()  # πετάει UnknownOperator αν δεν είναι ')'
            raise MalformedExpression("unexpected ')'", tok.lexpos)

        # κάθε υπόλοιπο '(' θέλει το δικό του ')' μετά την έκφραση που τυλίγει
        for opened_at in reversed(opens):
            self._expect_close(opened_at)
        return node

    def _parse_operator(self, tok):
        op = tok.value
        self.pos += 1
        children = []
        while not self._at_close():
            children.append(self.parse_expr())
        self.pos += 1  # προσπερνάμε το ')'

        if not children:
            raise MalformedExpression(f"operator {op!r} needs at least one operand", tok.lexpos)
        return ('op', op, tuple(children))


def parse(tokens):
    # Ολόκληρη η λίστα tokens πρέπει να γίνει μία έκφραση
    return Parser(tokens).parse()
