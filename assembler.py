import re
from typing import Iterable, List, NamedTuple, Optional

from errors import InvalidOperand

ARITHMETIC = ('ADD', 'SUB', 'MUL', 'DIV', 'MOD')

# Πρώτη μέγιστη ακολουθία ψηφίων οπουδήποτε στην εγγραφή (τα mnemonics δεν έχουν ψηφία)
_OPERAND_RE = re.compile(r'[0-9]+')


class Instruction(NamedTuple):
    opcode: str   # ADD, SUB, MUL, DIV, MOD ή PUSH
    operand: int  # PUSH: η τιμή, αλλιώς arity (πόσες τιμές βγαίνουν από τη στοίβα)


def assemble_record(record: str, lineno: Optional[int] = None) -> Instruction:
    mnemonic = record[:3]
    # ό,τι δεν είναι αριθμητική εντολή θεωρείται PUSH
    opcode = mnemonic if mnemonic in ARITHMETIC else 'PUSH'

    m = _OPERAND_RE.search(record)
    if not m:
        where = f" (line {lineno})" if lineno is not None else ""
        raise InvalidOperand(f"no integer operand in {record!r}{where}")
    return Instruction(opcode, int(m.group()))


def assemble(records: Iterable[str]) -> List[Instruction]:
    return [assemble_record(rec, i) for i, rec in enumerate(records, start=1)]


def assemble_text(text: str) -> List[Instruction]:
    '''
    Assembly ολόκληρης λίστας (π.χ. αρχείο bytecode.txt).
    Κενές γραμμές και σχόλια '#' αγνοούνται, ο αριθμός γραμμής μπαίνει στα μηνύματα λάθους.
    '''
    program = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        program.append(assemble_record(line, lineno))
    return program
