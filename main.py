import argparse
import os
import pprint
import sys

from bytecode_generator import BytecodeGenerator
from calculator import compile_source
from errors import CalcError
from vm import VirtualMachine

BANNER = "Prefix calculator (+ - * / %), single-digit operands. Empty line re-prompts, Ctrl-D exits."


def report_error(exc, stream=None):
    # Ένα μήνυμα ανά αποτυχημένη γραμμή, π.χ. "Syntax Error: unexpected end of input at column 5"
    print(f"{exc.kind} Error: {exc}", file=stream or sys.stderr)


def run_line(line, trace=None):
    # Επιστρέφει (compilation, result) ώστε ο καλών να μπορεί να γράψει και τα ενδιάμεσα αρχεία
    comp = compile_source(line)
    result = VirtualMachine(trace=trace).eval(comp.program)
    return comp, result


def dump_compilation(comp, output_dir, stream=None):
    stream = stream or sys.stdout

    # 1)Δημιουργία φακέλου
    os.makedirs(output_dir, exist_ok=True)

    # 2)Λεξική ανάλυση
    with open(os.path.join(output_dir, "lexical_analysis.txt"), "w", encoding="utf-8") as f:
        f.write("--- Lexical Analysis (tokens) ---\n\n")
        for tok in comp.tokens:
            f.write(f"{tok}\n")
    print(f"Lexical analysis generated at {output_dir}/lexical_analysis.txt", file=stream)

    # 3) Δέντρο έκφρασης
    with open(os.path.join(output_dir, "ast_output.txt"), "w", encoding="utf-8") as f:
        f.write("--- Expression Tree ---\n\n")
        pprint.pprint(comp.tree, stream=f)
    print(f"Expression tree generated at {output_dir}/ast_output.txt", file=stream)

    # 4) Textual bytecode (ξαναδιαβάζεται με assembler.assemble_text)
    with open(os.path.join(output_dir, "bytecode.txt"), "w", encoding="utf-8") as f:
        f.write(f"# {comp.source}\n")
        f.write(BytecodeGenerator(comp.code).render() + "\n")
    print(f"Bytecode generated at {output_dir}/bytecode.txt", file=stream)

    # 5) Assembled πρόγραμμα
    with open(os.path.join(output_dir, "program.txt"), "w", encoding="utf-8") as f:
        f.write("--- Assembled Program ---\n\n")
        for ip, inst in enumerate(comp.program):
            f.write(f"{ip:04d}  {inst.opcode:<4} {inst.operand}\n")
    print(f"Program generated at {output_dir}/program.txt", file=stream)


def repl(stdin=None, stdout=None, stderr=None, prompt="repl> ", trace=None):
    '''
    Read-print loop: διαβάζει μία γραμμή, τυπώνει ένα ακέραιο, ξανά.
    Κενή γραμμή -> ξανά prompt. Ένα σφάλμα αφορά μόνο τη γραμμή του, ο βρόχος συνεχίζει.
    Τέλος εισόδου (EOF) -> έξοδος.
    '''
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            _, result = run_line(line, trace=trace)
        except CalcError as exc:
            report_error(exc, stderr)
            continue
        print(result, file=stdout)


def run_lines(lines, output_dir=None, stdout=None, stderr=None, trace=None):
    # Batch mode: μία έκφραση ανά γραμμή. Επιστρέφει πόσες γραμμές απέτυχαν.
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    errors = 0
    last = None

    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            last, result = run_line(line, trace=trace)
        except CalcError as exc:
            report_error(exc, stderr)
            errors += 1
            continue
        print(result, file=stdout)

    if output_dir and last is not None:
        dump_compilation(last, output_dir, stream=stdout)
    return errors


def build_arg_parser():
    ap = argparse.ArgumentParser(
        prog="stackcalc",
        description="Evaluate prefix arithmetic expressions on a stack virtual machine.",
    )
    ap.add_argument("file", nargs="?", help="file with one expression per line")
    ap.add_argument("-c", "--command", metavar="EXPR", help="evaluate a single expression and exit")
    ap.add_argument("-o", "--output", metavar="DIR",
                    help="write tokens, tree, bytecode and program of the last expression to DIR")
    ap.add_argument("--trace", action="store_true", help="print every executed instruction to stderr")
    ap.add_argument("--prompt", default="repl> ", help="interactive prompt (default: %(default)r)")
    ap.add_argument("-q", "--quiet", action="store_true", help="do not print the banner")
    return ap


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    trace = sys.stderr if args.trace else None

    if args.command is not None:
        failed = run_lines([args.command], output_dir=args.output, trace=trace)
        return 1 if failed else 0

    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            failed = run_lines(f, output_dir=args.output, trace=trace)
        return 1 if failed else 0

    if not args.quiet:
        print(BANNER)
    repl(prompt=args.prompt, trace=trace)
    return 0


if __name__ == "__main__":
    sys.exit(main())
