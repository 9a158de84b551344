from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    IntegerLiteral = 1
    OpenBracket = 2
    CloseBracket = 3
    Multiply = 4
    Divide = 5
    Add = 6
    Subtract = 7
    Unknown = 8


SYMBOLS = {
    "(": TokenType.OpenBracket,
    ")": TokenType.CloseBracket,
    "*": TokenType.Multiply,
    "+": TokenType.Add,
    "/": TokenType.Divide,
    "-": TokenType.Subtract,
}


@dataclass(frozen=True, order=True)
class Token:
    kind: TokenType
    value: Optional[int] = None
    # position and source text are diagnostics only, not part of identity
    location: int = field(default=0, compare=False)
    expression: Optional[str] = field(default=None, compare=False)


def new_token(
    kind: TokenType,
    location: int = 0,
    value: Optional[int] = None,
    expression: Optional[str] = None,
) -> Token:
    return Token(kind, value, location, expression)


def describe(token: Token) -> str:
    if token.kind == TokenType.IntegerLiteral:
        return f"{token.kind.name} {token.value}"
    if token.kind == TokenType.Unknown and token.expression is not None:
        return f"{token.kind.name} {token.expression!r}"
    return token.kind.name
