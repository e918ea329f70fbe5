"""Arithmetic expression calculator: scanning, parsing and evaluation of
single expressions, with optional per-session result variables."""

from exprcalc.errors import CalcError, ErrorKind, EvalError
from exprcalc.parser import BinaryOperation, Expression, ParserError, UnaryOperation, Variable, parse
from exprcalc.runtime import evaluate_expression
from exprcalc.scanner import Keyword, Operator, ScannerError, Token, TokenType, scan, unscan
from exprcalc.session import LAST_ANSWER_VARIABLE, Session, compile_expression, evaluate

__all__ = [
    "BinaryOperation",
    "CalcError",
    "ErrorKind",
    "EvalError",
    "Expression",
    "Keyword",
    "LAST_ANSWER_VARIABLE",
    "Operator",
    "ParserError",
    "ScannerError",
    "Session",
    "Token",
    "TokenType",
    "UnaryOperation",
    "Variable",
    "compile_expression",
    "evaluate",
    "evaluate_expression",
    "parse",
    "scan",
    "unscan",
]
