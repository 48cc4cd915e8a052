from typing import Any, List, NamedTuple

from assembler import Instruction, assemble
from bytecode_generator import BytecodeGenerator
from lexer import tokenize
from parser import Parser
from vm import VirtualMachine


class Compilation(NamedTuple):
    # Τα ενδιάμεσα αποτελέσματα κάθε σταδίου για μία γραμμή
    source: str
    tokens: List[Any]
    tree: Any
    code: List[str]
    program: List[Instruction]


def compile_source(text: str) -> Compilation:
    # lexer -> parser -> bytecode generator -> assembler. Κάθε στάδιο αποτυγχάνει αμέσως με CalcError.
    tokens = tokenize(text)
    tree = Parser(tokens).parse()
    code = BytecodeGenerator().gen_program(tree)  # νέος accumulator για κάθε γραμμή
    program = assemble(code)
    return Compilation(text, tokens, tree, code, program)


def evaluate(text: str, trace=None) -> int:
    # νέα μηχανή ανά γραμμή: καμία κατάσταση δεν περνάει από γραμμή σε γραμμή
    return VirtualMachine(trace=trace).eval(compile_source(text).program)
