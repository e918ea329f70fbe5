import logging
from dataclasses import dataclass

from exprcalc.builtins import CONSTANTS
from exprcalc.errors import CalcError, ErrorKind
from exprcalc.scanner import Keyword, Operator, Token, TokenType
from exprcalc.utils import caret_line

logger = logging.getLogger(__name__)


@dataclass
class ParserError(CalcError):
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        parsed = " ".join(t.lexeme for t in self.tokens[: self.error_token_idx])
        offset = len(parsed) + 1 if parsed else 0
        return "\n".join(
            [
                f"[Parser error] {self.errmsg}",
                " ".join(t.lexeme for t in self.tokens),
                caret_line(offset),
            ]
        )


@dataclass(frozen=True)
class Variable:
    name: str


@dataclass(frozen=True)
class UnaryOperation:
    operator: Operator | Keyword
    operand: "Expression"


@dataclass(frozen=True)
class BinaryOperation:
    operator: Operator | Keyword
    left: "Expression"
    right: "Expression"


Expression = float | Variable | UnaryOperation | BinaryOperation


def parse(tokens: list[Token]) -> Expression:
    expr, i = _consume_expression(tokens, 0)
    if i < len(tokens):
        raise ParserError(
            ErrorKind.UNEXPECTED_TOKEN,
            f"Unexpected token {tokens[i].lexeme!r} after a complete expression",
            tokens=tokens,
            error_token_idx=i,
        )
    logger.debug("Parsed %d token(s) into %r", len(tokens), expr)
    return expr


def _peek(tokens: list[Token], i: int) -> Token | None:
    return tokens[i] if i < len(tokens) else None


def _describe(tokens: list[Token], i: int) -> str:
    token = _peek(tokens, i)
    return "end of input" if token is None else repr(token.lexeme)


def _expect(tokens: list[Token], i: int, token_type: TokenType, kind: ErrorKind, what: str) -> int:
    token = _peek(tokens, i)
    if token is None or token.type is not token_type:
        raise ParserError(
            kind, f"Expected {what}, found {_describe(tokens, i)}", tokens=tokens, error_token_idx=i
        )
    return i + 1


def _consume_expression(tokens: list[Token], i: int) -> tuple[Expression, int]:
    return _consume_term(tokens, i)


# Each binary level applies its operator at most once: "1 + 2 + 3" leaves "+ 3" unconsumed.


def _consume_term(tokens: list[Token], i: int) -> tuple[Expression, int]:
    left, i = _consume_factor(tokens, i)
    token = _peek(tokens, i)
    if token is not None and token.is_operator(Operator.PLUS, Operator.MINUS):
        right, i = _consume_factor(tokens, i + 1)
        return BinaryOperation(operator=token.value, left=left, right=right), i  # type: ignore
    return left, i


def _consume_factor(tokens: list[Token], i: int) -> tuple[Expression, int]:
    left, i = _consume_unary(tokens, i)
    token = _peek(tokens, i)
    if token is not None and token.is_operator(Operator.STAR, Operator.SLASH, Operator.PERCENT):
        right, i = _consume_unary(tokens, i + 1)
        return BinaryOperation(operator=token.value, left=left, right=right), i  # type: ignore
    return left, i


def _consume_unary(tokens: list[Token], i: int) -> tuple[Expression, int]:
    token = _peek(tokens, i)
    if token is not None and token.is_operator(Operator.MINUS):
        operand, i = _consume_power(tokens, i + 1)
        return UnaryOperation(operator=Operator.MINUS, operand=operand), i
    return _consume_power(tokens, i)


def _consume_power(tokens: list[Token], i: int) -> tuple[Expression, int]:
    base, i = _consume_primary(tokens, i)
    token = _peek(tokens, i)
    if token is not None and token.is_operator(Operator.CARET):
        exponent, i = _consume_unary(tokens, i + 1)
        return BinaryOperation(operator=Operator.CARET, left=base, right=exponent), i
    return base, i


def _consume_primary(tokens: list[Token], i: int) -> tuple[Expression, int]:
    token = _peek(tokens, i)
    if token is None:
        raise ParserError(
            ErrorKind.EXPECTED_EXPRESSION, "Expected expression, found end of input", tokens=tokens, error_token_idx=i
        )
    if token.type is TokenType.NUMBER:
        return token.value, i + 1  # type: ignore
    elif token.type is TokenType.VARIABLE:
        return Variable(name=token.value), i + 1  # type: ignore
    elif token.type is TokenType.KEYWORD:
        return _consume_call(tokens, i)
    elif token.type is TokenType.LPAREN:
        expr, i = _consume_expression(tokens, i + 1)
        i = _expect(tokens, i, TokenType.RPAREN, ErrorKind.MISSING_CLOSE_PAREN, "')'")
        return expr, i
    else:
        raise ParserError(
            ErrorKind.EXPECTED_EXPRESSION,
            f"Expected expression, found {token.lexeme!r}",
            tokens=tokens,
            error_token_idx=i,
        )


def _consume_call(tokens: list[Token], i: int) -> tuple[Expression, int]:
    keyword: Keyword = tokens[i].value  # type: ignore
    if keyword.is_constant():
        return CONSTANTS[keyword], i + 1

    i = _expect(tokens, i + 1, TokenType.LPAREN, ErrorKind.MISSING_OPEN_PAREN, f"'(' after {keyword.value!r}")
    first, i = _consume_expression(tokens, i)
    if keyword.is_binary():
        i = _expect(tokens, i, TokenType.COMMA, ErrorKind.MISSING_COMMA, f"',' between {keyword.value!r} arguments")
        second, i = _consume_expression(tokens, i)
        call: Expression = BinaryOperation(operator=keyword, left=first, right=second)
    else:
        call = UnaryOperation(operator=keyword, operand=first)

    token = _peek(tokens, i)
    if token is not None and token.type is TokenType.COMMA:
        i += 1  # trailing comma
    i = _expect(tokens, i, TokenType.RPAREN, ErrorKind.MISSING_CLOSE_PAREN, "')'")
    return call, i
