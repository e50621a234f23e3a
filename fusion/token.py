from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    Number = 1
    Plus = 2
    Minus = 3
    Star = 4
    Slash = 5
    LeftParen = 6
    RightParen = 7
    EOF = 8


PUNCTUATORS = {
    "+": TokenType.Plus,
    "-": TokenType.Minus,
    "*": TokenType.Star,
    "/": TokenType.Slash,
    "(": TokenType.LeftParen,
    ")": TokenType.RightParen,
}


@dataclass(frozen=True)
class Token:
    kind: TokenType
    location: int
    expression: str = ""
    value: Optional[float] = None


def new_token(
    token_type: TokenType, expression: str, start: int, end: int
) -> Token:
    return Token(token_type, start, expression[start:end])


def new_number(expression: str, start: int, end: int) -> Token:
    lexeme = expression[start:end]
    return Token(TokenType.Number, start, lexeme, float(lexeme))


def describe(token: Token) -> str:
    if token.kind == TokenType.EOF:
        return "end of input"
    if token.kind == TokenType.Number:
        return f"number {token.expression}"
    return f"'{token.expression}'"
