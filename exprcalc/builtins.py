import math
from typing import Callable

import numpy as np

from exprcalc.scanner import Keyword, Operator

UnaryImpl = Callable[[float], float]
BinaryImpl = Callable[[float, float], float]

CONSTANTS: dict[Keyword, float] = {
    Keyword.INF: math.inf,
    Keyword.PI: math.pi,
    Keyword.TAU: math.tau,
    Keyword.E: math.e,
    Keyword.PHI: 1.618033988749894848204586834365638118,
}

UNARY_FUNCS: dict[Operator | Keyword, UnaryImpl] = dict()
BINARY_FUNCS: dict[Operator | Keyword, BinaryImpl] = dict()


def register_unary(*operators: Operator | Keyword):
    def decorator(fn: Callable[[np.float64], np.float64]) -> UnaryImpl:
        def decorated(arg: float) -> float:
            with np.errstate(all="ignore"):
                return float(fn(np.float64(arg)))

        for op in operators:
            UNARY_FUNCS[op] = decorated
        return decorated

    return decorator


def register_binary(*operators: Operator | Keyword):
    def decorator(fn: Callable[[np.float64, np.float64], np.float64]) -> BinaryImpl:
        def decorated(left: float, right: float) -> float:
            with np.errstate(all="ignore"):
                return float(fn(np.float64(left), np.float64(right)))

        for op in operators:
            BINARY_FUNCS[op] = decorated
        return decorated

    return decorator


for _keyword, _ufunc in [
    (Keyword.SQRT, np.sqrt),
    (Keyword.CBRT, np.cbrt),
    (Keyword.EXP, np.exp),
    (Keyword.LOG2, np.log2),
    (Keyword.LOG10, np.log10),
    (Keyword.LN, np.log),
    (Keyword.SIN, np.sin),
    (Keyword.COS, np.cos),
    (Keyword.TAN, np.tan),
    (Keyword.ASIN, np.arcsin),
    (Keyword.ACOS, np.arccos),
    (Keyword.ATAN, np.arctan),
    (Keyword.SINH, np.sinh),
    (Keyword.COSH, np.cosh),
    (Keyword.TANH, np.tanh),
    (Keyword.ASINH, np.arcsinh),
    (Keyword.ACOSH, np.arccosh),
    (Keyword.ATANH, np.arctanh),
    (Keyword.RAD, np.radians),
    (Keyword.DEG, np.degrees),
    (Keyword.ABS, np.abs),
    (Keyword.FLOOR, np.floor),
    (Keyword.CEIL, np.ceil),
    (Keyword.TRUNC, np.trunc),
]:
    register_unary(_keyword)(_ufunc)


@register_unary(Operator.MINUS)
def negate(x: np.float64) -> np.float64:
    return -x


@register_unary(Keyword.ROUND)
def round_half_away_from_zero(x: np.float64) -> np.float64:
    """np.round rounds half to even, here 2.5 => 3 and -2.5 => -3"""
    truncated = np.trunc(x)
    if abs(x - truncated) >= 0.5:
        truncated += np.copysign(1.0, x)
    return truncated


@register_binary(Operator.PLUS)
def add(a: np.float64, b: np.float64) -> np.float64:
    return a + b


@register_binary(Operator.MINUS)
def sub(a: np.float64, b: np.float64) -> np.float64:
    return a - b


@register_binary(Operator.STAR)
def mul(a: np.float64, b: np.float64) -> np.float64:
    return a * b


@register_binary(Operator.SLASH)
def div(a: np.float64, b: np.float64) -> np.float64:
    return np.divide(a, b)


@register_binary(Operator.CARET, Keyword.POW)
def pow_(a: np.float64, b: np.float64) -> np.float64:
    return np.power(a, b)


@register_binary(Operator.PERCENT, Keyword.MOD)
def mod_(a: np.float64, b: np.float64) -> np.float64:
    """Remainder with the sign of the dividend, like C fmod"""
    return np.fmod(a, b)


@register_binary(Keyword.LOG)
def log_(value: np.float64, base: np.float64) -> np.float64:
    return np.log(value) / np.log(base)


@register_binary(Keyword.HYPOT)
def hypot_(a: np.float64, b: np.float64) -> np.float64:
    return np.hypot(a, b)


@register_binary(Keyword.ATAN2)
def atan2_(y: np.float64, x: np.float64) -> np.float64:
    return np.arctan2(y, x)


@register_binary(Keyword.MAX)
def max_(a: np.float64, b: np.float64) -> np.float64:
    # NaN operands are ignored
    return np.fmax(a, b)


@register_binary(Keyword.MIN)
def min_(a: np.float64, b: np.float64) -> np.float64:
    return np.fmin(a, b)
