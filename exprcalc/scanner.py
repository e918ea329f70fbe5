import enum
import logging
import re
from dataclasses import dataclass

from exprcalc.errors import CalcError, ErrorKind
from exprcalc.utils import PrintableEnum, caret_line

logger = logging.getLogger(__name__)


@dataclass
class ScannerError(CalcError):
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[Scanner error] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + self.code[print_start_idx:print_end_idx]
                    + ("..." if print_ellipsis_post else "")
                ),
                caret_line(self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)),
            ]
        )


class Operator(PrintableEnum):
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    CARET = "^"
    PERCENT = "%"


class Keyword(PrintableEnum):
    """Reserved words; the value is the word as written in source"""

    # constants
    INF = "inf"
    PI = "pi"
    TAU = "tau"
    E = "e"
    PHI = "phi"

    # one-argument functions
    SQRT = "sqrt"
    CBRT = "cbrt"
    EXP = "exp"
    LOG2 = "log2"
    LOG10 = "log10"
    LN = "ln"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    ASINH = "asinh"
    ACOSH = "acosh"
    ATANH = "atanh"
    RAD = "rad"
    DEG = "deg"
    ABS = "abs"
    FLOOR = "floor"
    CEIL = "ceil"
    TRUNC = "trunc"
    ROUND = "round"

    # two-argument functions
    POW = "pow"
    LOG = "log"
    HYPOT = "hypot"
    ATAN2 = "atan2"
    MOD = "mod"
    MAX = "max"
    MIN = "min"

    def is_constant(self) -> bool:
        return self in CONSTANT_KEYWORDS

    def is_unary(self) -> bool:
        return self in UNARY_KEYWORDS

    def is_binary(self) -> bool:
        return self in BINARY_KEYWORDS


CONSTANT_KEYWORDS = frozenset([Keyword.INF, Keyword.PI, Keyword.TAU, Keyword.E, Keyword.PHI])
BINARY_KEYWORDS = frozenset(
    [Keyword.POW, Keyword.LOG, Keyword.HYPOT, Keyword.ATAN2, Keyword.MOD, Keyword.MAX, Keyword.MIN]
)
UNARY_KEYWORDS = frozenset(kw for kw in Keyword if kw not in CONSTANT_KEYWORDS and kw not in BINARY_KEYWORDS)

KEYWORDS_BY_WORD: dict[str, Keyword] = {kw.value: kw for kw in Keyword}


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    COMMA = enum.auto()
    VARIABLE = enum.auto()
    KEYWORD = enum.auto()


TokenValue = float | str | Operator | Keyword | None


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    value: TokenValue = None

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"

    def is_operator(self, *operators: Operator) -> bool:
        return self.type is TokenType.OPERATOR and self.value in operators


SINGLE_CHAR_TOKENS: dict[str, tuple[TokenType, TokenValue]] = {
    "+": (TokenType.OPERATOR, Operator.PLUS),
    "-": (TokenType.OPERATOR, Operator.MINUS),
    "*": (TokenType.OPERATOR, Operator.STAR),
    "/": (TokenType.OPERATOR, Operator.SLASH),
    "^": (TokenType.OPERATOR, Operator.CARET),
    "%": (TokenType.OPERATOR, Operator.PERCENT),
    "(": (TokenType.LPAREN, None),
    ")": (TokenType.RPAREN, None),
    ",": (TokenType.COMMA, None),
}


def _is_ascii_letter(s: str) -> bool:
    return s.isascii() and s.isalpha()


def _is_ascii_digit(s: str) -> bool:
    return s.isascii() and s.isdigit()


def _is_valid_in_number(s: str) -> bool:
    return _is_ascii_digit(s) or s == "."


def _is_valid_in_word(s: str) -> bool:
    # digits after the first letter make log2, log10 and atan2 reachable
    return _is_ascii_letter(s) or _is_ascii_digit(s)


def _is_valid_in_variable(s: str) -> bool:
    return _is_ascii_letter(s) or _is_ascii_digit(s) or s == "_"


def scan(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        c = code[i]
        if c == " ":
            i += 1
        elif c in SINGLE_CHAR_TOKENS:
            token_type, value = SINGLE_CHAR_TOKENS[c]
            tokens.append(Token(type=token_type, lexeme=c, value=value))
            i += 1
        elif _is_ascii_letter(c):
            token, i = _scan_word(code, i)
            tokens.append(token)
        elif c == "$":
            token, i = _scan_variable(code, i)
            tokens.append(token)
        elif _is_ascii_digit(c):
            token, i = _scan_number(code, i)
            tokens.append(token)
        else:
            raise ScannerError(
                ErrorKind.INVALID_CHARACTER, f"Invalid character: {c!r}", code=code, error_char_idx=i
            )

    logger.debug("Scanned %d token(s) from %r", len(tokens), code)
    return tokens


def _scan_number(code: str, i: int) -> tuple[Token, int]:
    """Consumes digits, dots and an exponent marker with an optional sign right after it;
    validation of the literal is left to float()"""
    end = i
    while end < len(code):
        if _is_valid_in_number(code[end]):
            end += 1
        elif code[end] in "eE":
            end += 1
            if end < len(code) and code[end] in "+-":
                end += 1
        else:
            break

    lexeme = code[i:end]
    try:
        value = float(lexeme)
    except ValueError as e:
        raise ScannerError(
            ErrorKind.NUMBER_PARSE_ERROR, f"Failed to parse number {lexeme!r}", code=code, error_char_idx=i
        ) from e
    return Token(type=TokenType.NUMBER, lexeme=lexeme, value=value), end


def _scan_variable(code: str, i: int) -> tuple[Token, int]:
    end = i + 1  # skipping $
    while end < len(code) and _is_valid_in_variable(code[end]):
        end += 1
    if end == i + 1:
        raise ScannerError(
            ErrorKind.INVALID_VARIABLE, "Expected variable name after '$'", code=code, error_char_idx=i
        )
    name = code[i:end]
    return Token(type=TokenType.VARIABLE, lexeme=name, value=name), end


def _scan_word(code: str, i: int) -> tuple[Token, int]:
    end = i + 1
    while end < len(code) and _is_valid_in_word(code[end]):
        end += 1
    word = code[i:end]
    keyword = KEYWORDS_BY_WORD.get(word)
    if keyword is None:
        raise ScannerError(ErrorKind.UNKNOWN_KEYWORD, f"Unknown keyword: {word!r}", code=code, error_char_idx=i)
    return Token(type=TokenType.KEYWORD, lexeme=word, value=keyword), end


def unscan(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)

    # sqrt (4) => sqrt(4)
    result = re.sub(r"([a-z0-9]) \(", r"\1(", result)

    # pow(2 , 3) => pow(2, 3)
    result = re.sub(r"\s+,", ",", result)

    # 4 ^ 5 => 4^5
    result = re.sub(r"\s+\^\s+", "^", result)
    return result
