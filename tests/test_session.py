import math

import pytest

from exprcalc import LAST_ANSWER_VARIABLE, CalcError, ErrorKind, EvalError, Session


def test_results_are_stored() -> None:
    session = Session()
    assert session.evaluate("1 + 2") == ("$0", 3.0)
    assert session.evaluate("$0 * 3") == ("$1", 9.0)
    assert session.counter == 2
    assert dict(session.variables) == {"$0": 3.0, "$1": 9.0, LAST_ANSWER_VARIABLE: 9.0}


def test_last_answer() -> None:
    session = Session()
    session.evaluate("2")
    assert session.evaluate("$ans ^ 3") == ("$1", 8.0)
    assert session.quick_evaluate("$ans + $0") == 10.0


def test_evaluate_and_store_is_evaluate() -> None:
    session = Session()
    assert session.evaluate_and_store("sqrt(16)") == ("$0", 4.0)
    assert session.evaluate("$0") == ("$1", 4.0)


def test_reset() -> None:
    session = Session()
    assert session.evaluate("1 + 2") == ("$0", 3.0)

    session.reset()
    with pytest.raises(EvalError) as exc_info:
        session.quick_evaluate("$0")
    assert exc_info.value.kind is ErrorKind.UNDEFINED_VARIABLE
    with pytest.raises(EvalError):
        session.quick_evaluate("$ans")

    assert session.evaluate("1 + 3") == ("$0", 4.0)


def test_quick_evaluate_does_not_store() -> None:
    session = Session()
    session.evaluate("5")
    before = dict(session.variables)
    for _ in range(3):
        assert session.quick_evaluate("$0 * 2") == 10.0
    assert dict(session.variables) == before
    assert session.counter == 1
    assert session.evaluate("$0") == ("$1", 5.0)


@pytest.mark.parametrize("code", ["1 +", "1 # 2", "$missing", "1 2"])
def test_failed_evaluation_leaves_state_untouched(code: str) -> None:
    session = Session()
    session.evaluate("42")
    with pytest.raises(CalcError):
        session.evaluate(code)
    assert session.counter == 1
    assert dict(session.variables) == {"$0": 42.0, LAST_ANSWER_VARIABLE: 42.0}
    assert session.evaluate("1") == ("$1", 1.0)


def test_nan_and_infinity_are_stored() -> None:
    session = Session()
    assert session.evaluate("1 / 0") == ("$0", math.inf)
    name, value = session.evaluate("$0 - $0")
    assert name == "$1"
    assert math.isnan(value)


def test_sessions_are_isolated() -> None:
    first, second = Session(), Session()
    first.evaluate("1")
    assert second.evaluate("2") == ("$0", 2.0)
    assert first.quick_evaluate("$0") == 1.0
    assert second.quick_evaluate("$0") == 2.0


def test_variables_are_read_only() -> None:
    session = Session()
    session.evaluate("1")
    with pytest.raises(TypeError):
        session.variables["$0"] = 2.0  # type: ignore[index]
