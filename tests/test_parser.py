import math

import pytest

from exprcalc.errors import ErrorKind
from exprcalc.parser import BinaryOperation, Expression, ParserError, UnaryOperation, Variable, parse
from exprcalc.scanner import Keyword, Operator, scan


@pytest.mark.parametrize(
    "code, expected_ast",
    [
        pytest.param("1", 1.0),
        pytest.param("$x", Variable("$x")),
        pytest.param("pi", math.pi),
        pytest.param("inf", math.inf),
        pytest.param("-1", UnaryOperation(Operator.MINUS, 1.0)),
        pytest.param(
            "1 + 2 * 3",
            BinaryOperation(Operator.PLUS, 1.0, BinaryOperation(Operator.STAR, 2.0, 3.0)),
        ),
        pytest.param(
            "(1 + 2) * 3",
            BinaryOperation(Operator.STAR, BinaryOperation(Operator.PLUS, 1.0, 2.0), 3.0),
        ),
        pytest.param("7 % 2", BinaryOperation(Operator.PERCENT, 7.0, 2.0)),
        pytest.param(
            "-2^2",
            UnaryOperation(Operator.MINUS, BinaryOperation(Operator.CARET, 2.0, 2.0)),
        ),
        pytest.param(
            "2^-1",
            BinaryOperation(Operator.CARET, 2.0, UnaryOperation(Operator.MINUS, 1.0)),
        ),
        pytest.param(
            "1 - -2",
            BinaryOperation(Operator.MINUS, 1.0, UnaryOperation(Operator.MINUS, 2.0)),
        ),
        pytest.param("sqrt(4)", UnaryOperation(Keyword.SQRT, 4.0)),
        pytest.param("pow(2, 3)", BinaryOperation(Keyword.POW, 2.0, 3.0)),
        pytest.param("pow(2, 3,)", BinaryOperation(Keyword.POW, 2.0, 3.0)),
        pytest.param(
            "max($a, sqrt(2 * $b))",
            BinaryOperation(
                Keyword.MAX,
                Variable("$a"),
                UnaryOperation(Keyword.SQRT, BinaryOperation(Operator.STAR, 2.0, Variable("$b"))),
            ),
        ),
        pytest.param("log2(8)", UnaryOperation(Keyword.LOG2, 8.0)),
        pytest.param(
            "2^3^4",
            BinaryOperation(Operator.CARET, 2.0, BinaryOperation(Operator.CARET, 3.0, 4.0)),
            id="power-is-right-associative",
        ),
    ],
)
def test_parse(code: str, expected_ast: Expression) -> None:
    assert parse(scan(code)) == expected_ast


def test_trailing_comma_is_ignored() -> None:
    assert parse(scan("sqrt(4,)")) == parse(scan("sqrt(4)"))


@pytest.mark.parametrize(
    "code, kind, error_token_idx",
    [
        pytest.param("", ErrorKind.EXPECTED_EXPRESSION, 0, id="empty"),
        pytest.param("()", ErrorKind.EXPECTED_EXPRESSION, 1),
        pytest.param(")", ErrorKind.EXPECTED_EXPRESSION, 0),
        pytest.param("1 +", ErrorKind.EXPECTED_EXPRESSION, 2),
        pytest.param("--1", ErrorKind.EXPECTED_EXPRESSION, 1),
        pytest.param("+1", ErrorKind.EXPECTED_EXPRESSION, 0),
        pytest.param("1 2", ErrorKind.UNEXPECTED_TOKEN, 1),
        pytest.param("1 + 2 + 3", ErrorKind.UNEXPECTED_TOKEN, 3),
        pytest.param("2 * 3 / 4", ErrorKind.UNEXPECTED_TOKEN, 3),
        pytest.param("(1 + 2", ErrorKind.MISSING_CLOSE_PAREN, 4),
        pytest.param("sqrt(4,,)", ErrorKind.MISSING_CLOSE_PAREN, 4),
        pytest.param("sqrt(4, 5)", ErrorKind.MISSING_CLOSE_PAREN, 4),
        pytest.param("sqrt 4", ErrorKind.MISSING_OPEN_PAREN, 1),
        pytest.param("sqrt", ErrorKind.MISSING_OPEN_PAREN, 1),
        pytest.param("pow(2)", ErrorKind.MISSING_COMMA, 3),
        pytest.param("pow(2 3)", ErrorKind.MISSING_COMMA, 3),
        pytest.param("pi(2)", ErrorKind.UNEXPECTED_TOKEN, 1),
    ],
)
def test_parse_error(code: str, kind: ErrorKind, error_token_idx: int) -> None:
    with pytest.raises(ParserError) as exc_info:
        parse(scan(code))
    assert exc_info.value.kind is kind
    assert exc_info.value.error_token_idx == error_token_idx


def test_parser_error_points_at_token() -> None:
    with pytest.raises(ParserError) as exc_info:
        parse(scan("1 2"))
    assert str(exc_info.value).splitlines() == [
        "[Parser error] Unexpected token '2' after a complete expression",
        "1 2",
        "  ^",
    ]
