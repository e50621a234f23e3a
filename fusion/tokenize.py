import string

from fusion.errors import LexError
from fusion.logging_config import get_logger
from fusion.token import PUNCTUATORS, Token, TokenType, new_number, new_token

logger = get_logger("tokenize")


def is_number_start(expression: str, index: int) -> bool:
    if expression[index] in string.digits:
        return True
    return (
        expression[index] == "."
        and index + 1 < len(expression)
        and expression[index + 1] in string.digits
    )


def read_number(expression: str, index: int) -> int:
    seen_point = False
    while index < len(expression):
        char = expression[index]
        if char in string.digits:
            index += 1
            continue
        if char == ".":
            if seen_point:
                raise LexError(index, char)
            seen_point = True
            index += 1
            continue
        break
    return index


def tokenize(expression: str) -> list[Token]:
    index = 0
    tokens = []
    while index < len(expression):
        if expression[index].isspace():
            index += 1
            continue
        if is_number_start(expression, index):
            end = read_number(expression, index)
            tokens.append(new_number(expression, index, end))
            index = end
            continue
        if (kind := PUNCTUATORS.get(expression[index])) is not None:
            tokens.append(new_token(kind, expression, index, index + 1))
            index += 1
            continue
        raise LexError(index, expression[index])
    tokens.append(Token(TokenType.EOF, index))
    logger.debug("tokenized %d characters into %d tokens", len(expression), len(tokens))
    return tokens
