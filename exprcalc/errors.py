import enum
from dataclasses import dataclass

from exprcalc.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    # scanning
    INVALID_CHARACTER = enum.auto()
    INVALID_VARIABLE = enum.auto()
    NUMBER_PARSE_ERROR = enum.auto()
    UNKNOWN_KEYWORD = enum.auto()
    # parsing
    UNEXPECTED_TOKEN = enum.auto()
    MISSING_OPEN_PAREN = enum.auto()
    MISSING_CLOSE_PAREN = enum.auto()
    MISSING_COMMA = enum.auto()
    EXPECTED_EXPRESSION = enum.auto()
    # evaluation
    UNDEFINED_VARIABLE = enum.auto()
    INTERNAL_ERROR = enum.auto()


@dataclass
class CalcError(Exception):
    """Base class for everything the pipeline raises"""

    kind: ErrorKind
    errmsg: str

    def __str__(self) -> str:
        return f"{self.kind}: {self.errmsg}"


@dataclass
class EvalError(CalcError):
    def __str__(self) -> str:
        return f"[Evaluation error] {self.errmsg}"
