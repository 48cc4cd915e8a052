from typing import Optional


class CalcError(Exception):
    # Κοινή βάση για κάθε σφάλμα μιας γραμμής: ο βρόχος πιάνει μόνο αυτήν
    kind = "Calc"

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position  # 0-based offset στη γραμμή εισόδου (ή None)

    def __str__(self):
        if self.position is None:
            return self.message
        return f"{self.message} at column {self.position + 1}"


class MalformedExpression(CalcError, SyntaxError):
    kind = "Syntax"


class UnknownOperator(CalcError, SyntaxError):
    kind = "Syntax"


class DivisionByZero(CalcError, ZeroDivisionError):
    kind = "Runtime"


class InvalidOperand(CalcError, ValueError):
    kind = "Assembly"


class StackUnderflow(CalcError, IndexError):
    kind = "Runtime"
