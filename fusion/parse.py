import sys
from typing import Iterable, Optional

from fusion import config
from fusion.errors import (
    EmptyInput,
    NestingTooDeep,
    TrailingInput,
    UnexpectedToken,
    UnmatchedParenthesis,
)
from fusion.logging_config import get_logger
from fusion.node import (
    BinaryOperator,
    Expression,
    UnaryOperator,
    new_binary,
    new_number,
    new_unary,
)
from fusion.token import Token, TokenType, describe
from fusion.utils import Peekable

logger = get_logger("parse")

ADDITIVE = {TokenType.Plus: BinaryOperator.Add, TokenType.Minus: BinaryOperator.Sub}
MULTIPLICATIVE = {
    TokenType.Star: BinaryOperator.Mul,
    TokenType.Slash: BinaryOperator.Div,
}

# Python frames spent per nested group, and frames left for callers.
FRAMES_PER_GROUP = 5
RESERVED_FRAMES = 250


def safe_nesting_depth() -> int:
    return max((sys.getrecursionlimit() - RESERVED_FRAMES) // FRAMES_PER_GROUP, 1)


def end_of_input(tokens: list[Token]) -> Token:
    if not tokens:
        return Token(TokenType.EOF, 0)
    last = tokens[-1]
    return Token(TokenType.EOF, last.location + len(last.expression))


class Parse:
    """Recursive descent parser over a token sequence ending in EOF.

    expr   := term (('+' | '-') term)*
    term   := factor (('*' | '/') factor)*
    factor := '-' factor | NUMBER | '(' expr ')'
    """

    tokens: Peekable[Token]

    def __init__(self, tokens: Iterable[Token], max_depth: Optional[int] = None):
        tokens = list(tokens)
        if not tokens or tokens[-1].kind != TokenType.EOF:
            tokens.append(end_of_input(tokens))
        self.tokens = Peekable(tokens)
        requested = config.MAX_NESTING_DEPTH if max_depth is None else max_depth
        self.max_depth = min(requested, safe_nesting_depth())
        self.depth = 0
        self.open_parens: list[Token] = []

    def parse(self) -> Expression:
        token = self.tokens.peek()
        if token.kind == TokenType.EOF:
            raise EmptyInput(token.location)
        try:
            node = self.expression_parse()
        except RecursionError:
            location = self.open_parens[-1].location if self.open_parens else 0
            raise NestingTooDeep(location, self.depth) from None
        token = self.tokens.peek()
        if token.kind == TokenType.RightParen:
            raise UnmatchedParenthesis(token.location, "end of input", "unmatched ')'")
        if token.kind != TokenType.EOF:
            raise TrailingInput(token.location, "end of input", describe(token))
        return node

    def expression_parse(self) -> Expression:
        return self.convert_add_token()

    def convert_add_token(self) -> Expression:
        node = self.convert_mul_token()
        while (op := ADDITIVE.get(self.tokens.peek().kind)) is not None:
            token = next(self.tokens)
            next_node = self.convert_mul_token()
            node = new_binary(op, node, next_node, token)
        return node

    def convert_mul_token(self) -> Expression:
        node = self.convert_unary_token()
        while (op := MULTIPLICATIVE.get(self.tokens.peek().kind)) is not None:
            token = next(self.tokens)
            next_node = self.convert_unary_token()
            node = new_binary(op, node, next_node, token)
        return node

    def convert_unary_token(self) -> Expression:
        token = self.tokens.peek()
        if token.kind == TokenType.Minus:
            next(self.tokens)
            self.enter(token)
            node = self.convert_unary_token()
            self.depth -= 1
            return new_unary(UnaryOperator.Neg, node, token)
        return self.primary_token()

    def primary_token(self) -> Expression:
        token = self.tokens.peek()
        if token.kind == TokenType.Number:
            next(self.tokens)
            return new_number(token)
        if token.kind == TokenType.LeftParen:
            next(self.tokens)
            self.enter(token)
            self.open_parens.append(token)
            node = self.expression_parse()
            self.skip_right_paren()
            self.open_parens.pop()
            self.depth -= 1
            return node
        if token.kind == TokenType.RightParen and not self.open_parens:
            raise UnmatchedParenthesis(token.location, "an expression", "unmatched ')'")
        if token.kind == TokenType.EOF and self.open_parens:
            raise self.unclosed_group(token)
        raise UnexpectedToken(token.location, "an expression", describe(token))

    def skip_right_paren(self) -> None:
        token = self.tokens.peek()
        if token.kind == TokenType.RightParen:
            next(self.tokens)
            return
        if token.kind == TokenType.EOF:
            raise self.unclosed_group(token)
        raise UnexpectedToken(token.location, "')'", describe(token))

    def unclosed_group(self, token: Token) -> UnmatchedParenthesis:
        opening = self.open_parens[-1]
        return UnmatchedParenthesis(
            opening.location,
            f"')' to close '(' at offset {opening.location}",
            describe(token),
        )

    def enter(self, token: Token) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingTooDeep(token.location, self.max_depth)


def parse(tokens: Iterable[Token]) -> Expression:
    node = Parse(tokens).parse()
    logger.debug("parsed expression rooted at %s", type(node).__name__)
    return node
