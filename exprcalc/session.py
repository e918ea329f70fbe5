import logging
from types import MappingProxyType
from typing import Mapping

from exprcalc import runtime
from exprcalc.parser import Expression, parse
from exprcalc.runtime import evaluate_expression
from exprcalc.scanner import scan

logger = logging.getLogger(__name__)

RESULT_VARIABLE_PREFIX = "$"
LAST_ANSWER_VARIABLE = "$ans"


def compile_expression(code: str) -> Expression:
    return parse(scan(code))


def evaluate(code: str) -> float:
    """One-shot evaluation; variable references always fail"""
    return runtime.evaluate(compile_expression(code))


class Session:
    """Evaluates expressions against a variable table that persists between calls.

    Every stored result gets the next free name out of ``$0``, ``$1``, ... and also
    becomes ``$ans``. A call that raises leaves the table and the counter untouched.
    Sessions are not thread-safe; independent sessions share nothing.
    """

    def __init__(self) -> None:
        self._variables: dict[str, float] = dict()
        self._counter = 0

    @property
    def variables(self) -> Mapping[str, float]:
        return MappingProxyType(dict(self._variables))

    @property
    def counter(self) -> int:
        return self._counter

    def evaluate(self, code: str) -> tuple[str, float]:
        value = evaluate_expression(compile_expression(code), self._variables)

        name = f"{RESULT_VARIABLE_PREFIX}{self._counter}"
        self._variables[name] = value
        self._variables[LAST_ANSWER_VARIABLE] = value
        self._counter += 1
        logger.debug("Stored %s = %r", name, value)
        return name, value

    evaluate_and_store = evaluate

    def quick_evaluate(self, code: str) -> float:
        return evaluate_expression(compile_expression(code), MappingProxyType(self._variables))

    def reset(self) -> None:
        logger.debug("Resetting session with %d variable(s)", len(self._variables))
        self._variables.clear()
        self._counter = 0
