import string

from prefixlex.errors import EmptyLiteral, IntegerOverflow
from prefixlex.token import SYMBOLS, Token, TokenType, new_token

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def is_int(fragment: str) -> bool:
    return all(char in string.digits for char in fragment)


def to_int(fragment: str, location: int) -> Token:
    if not fragment:
        raise EmptyLiteral(location)
    # int() refuses digit strings past sys.get_int_max_str_digits()
    digits = fragment.lstrip("0") or "0"
    if len(digits) > len(str(INT_MAX)):
        raise IntegerOverflow(fragment, location)
    value = int(digits)
    if not INT_MIN <= value <= INT_MAX:
        raise IntegerOverflow(fragment, location)
    return new_token(TokenType.IntegerLiteral, location, value, fragment)


def classify(fragment: str, location: int) -> Token:
    if fragment in SYMBOLS:
        return new_token(SYMBOLS[fragment], location, expression=fragment)
    if is_int(fragment):
        return to_int(fragment, location)
    return new_token(TokenType.Unknown, location, expression=fragment)


def tokenize(expression: str) -> list[Token]:
    """Split ``expression`` on single spaces and classify every fragment.

    The split is literal: consecutive, leading or trailing spaces produce
    empty fragments, which raise ``EmptyLiteral``. A digit-only fragment
    beyond the signed 32-bit range raises ``IntegerOverflow``.
    """
    tokens = []
    location = 0
    for fragment in expression.split(" "):
        tokens.append(classify(fragment, location))
        location += len(fragment) + 1
    return tokens
