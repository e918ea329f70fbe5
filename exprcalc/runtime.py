from types import MappingProxyType
from typing import Mapping

from exprcalc.builtins import BINARY_FUNCS, UNARY_FUNCS
from exprcalc.errors import ErrorKind, EvalError
from exprcalc.parser import BinaryOperation, Expression, UnaryOperation, Variable

NO_VARIABLES: Mapping[str, float] = MappingProxyType({})


def evaluate(expression: Expression) -> float:
    """Evaluates a tree that does not reference any variables"""
    return evaluate_expression(expression, NO_VARIABLES)


def evaluate_expression(expression: Expression, variables: Mapping[str, float]) -> float:
    if isinstance(expression, float):
        return expression
    elif isinstance(expression, Variable):
        if expression.name in variables:
            return variables[expression.name]
        else:
            raise EvalError(ErrorKind.UNDEFINED_VARIABLE, f"Reference to undefined variable {expression.name}")
    elif isinstance(expression, UnaryOperation):
        operand = evaluate_expression(expression.operand, variables)
        unary_impl = UNARY_FUNCS.get(expression.operator)
        if unary_impl is None:
            raise EvalError(ErrorKind.INTERNAL_ERROR, f"Unexpected unary operator: {expression.operator}")
        return unary_impl(operand)
    elif isinstance(expression, BinaryOperation):
        left = evaluate_expression(expression.left, variables)
        right = evaluate_expression(expression.right, variables)
        binary_impl = BINARY_FUNCS.get(expression.operator)
        if binary_impl is None:
            raise EvalError(ErrorKind.INTERNAL_ERROR, f"Unexpected binary operator: {expression.operator}")
        return binary_impl(left, right)
    else:
        raise EvalError(ErrorKind.INTERNAL_ERROR, f"Unexpected expression type: {expression!r}")
