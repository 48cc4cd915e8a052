import operator
from functools import reduce
from typing import Callable, Dict, Iterable, List

from assembler import Instruction
from errors import CalcError, DivisionByZero, InvalidOperand, StackUnderflow, UnknownOperator


def _trunc_div(a: int, b: int) -> int:
    # ακέραια διαίρεση με αποκοπή προς το 0 (όχι floor όπως το // της Python)
    if b == 0:
        raise DivisionByZero("division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    # το υπόλοιπο παίρνει το πρόσημο του διαιρετέου: a == b * trunc(a / b) + r
    if b == 0:
        raise DivisionByZero("modulo by zero")
    return a - b * _trunc_div(a, b)


FOLDS: Dict[str, Callable[[int, int], int]] = {
    'ADD': operator.add,
    'SUB': operator.sub,
    'MUL': operator.mul,
    'DIV': _trunc_div,
    'MOD': _trunc_mod,
}


class VirtualMachine:
    def __init__(self, trace=None):
        self.stack: List[int] = []
        self.trace = trace  # stream για ίχνος εκτέλεσης (ή None)

    def execute(self, inst: Instruction):
        op, arg = inst.opcode, inst.operand

        if op == 'PUSH':
            self.stack.append(arg)
            return

        if op not in FOLDS:
            raise UnknownOperator(f"unknown opcode {op!r}")
        if arg < 1:
            raise InvalidOperand(f"{op} needs arity >= 1, got {arg}")
        if arg > len(self.stack):
            raise StackUnderflow(f"{op} {arg} with only {len(self.stack)} value(s) on the stack")

        # operands μπήκαν αριστερά προς δεξιά. pop με ανάποδη σειρά και αναστροφή
        args = [self.stack.pop() for _ in range(arg)][::-1]
        # fold: το πρώτο είναι ο αρχικός συσσωρευτής, τα υπόλοιπα συνδυάζονται με τη σειρά
        self.stack.append(reduce(FOLDS[op], args))

    def eval(self, program: Iterable[Instruction]) -> int:
        try:
            for ip, inst in enumerate(program):
                self.execute(inst)
                if self.trace:
                    print(f"{ip:04d}  {inst.opcode:<4} {inst.operand:<3} {self.stack}", file=self.trace)
            if not self.stack:
                raise StackUnderflow("program left no result on the stack")
            return self.stack.pop()
        except CalcError:
            if self.trace:
                print(f"      aborted, stack was {self.stack}", file=self.trace)
            raise
        finally:
            # ό,τι έμεινε πετιέται: η μηχανή είναι άδεια για το επόμενο πρόγραμμα
            self.stack.clear()
