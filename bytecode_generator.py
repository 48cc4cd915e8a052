from typing import List, Optional

from errors import MalformedExpression, UnknownOperator

# τελεστής -> mnemonic της μηχανής
MNEMONICS = {
    '+': 'ADD',
    '-': 'SUB',
    '*': 'MUL',
    '/': 'DIV',
    '%': 'MOD',
}


class BytecodeGenerator:
    def __init__(self, code: Optional[List[str]] = None):
        # λίστα με textual εντολές "MNEMONIC operand". Κάθε αποτίμηση φτιάχνει δικό της generator,
        # οπότε ο κώδικας μιας γραμμής δεν κολλάει ποτέ στον κώδικα της επόμενης.
        self.code: List[str] = [] if code is None else code

    # ---------------- low-level emit ----------------
    def _emit(self, op: str, operand: int):
        '''
        Προσθέτει μία εντολή στο self.code στη μορφή που διαβάζει ο assembler:
        τα 3 πρώτα γράμματα είναι το mnemonic, ο πρώτος αριθμός είναι το operand.
        '''
        self.code.append(f"{op} {operand}")

    def render(self) -> str:
        return "\n".join(self.code)

    # ---------------- public ----------------
    def gen_program(self, tree) -> List[str]:
        try:
            self._gen_expr(tree)
        except RecursionError:
            raise MalformedExpression("expression nested too deeply") from None
        return self.code

    # ---------------- expressions ----------------
    def _gen_expr(self, node):
        tag = node[0]

        # ---------------- αριθμός: PUSH value
        if tag == 'num':
            self._emit("PUSH", node[1])

        # ---------------- (op child child ...)
        elif tag == 'op':
            _, op, children = node
            if op not in MNEMONICS:
                raise UnknownOperator(f"unknown operator {op!r}")
            # post-order: πρώτα τα operands (αριστερά προς δεξιά) ώστε να είναι ήδη στη στοίβα,
            # μετά η εντολή που τα συνδυάζει με arity = πλήθος παιδιών
            args = 0
            for child in children:
                self._gen_expr(child)
                args += 1
            self._emit(MNEMONICS[op], args)

        else:
            raise MalformedExpression(f"unknown expression node {tag!r}")


def generate(tree, code: Optional[List[str]] = None) -> List[str]:
    # Ο accumulator περνάει ρητά και επιστρέφεται (νέα λίστα αν δεν δοθεί)
    return BytecodeGenerator(code).gen_program(tree)
