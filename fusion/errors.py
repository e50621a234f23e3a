"""Error hierarchy for the lex, parse and eval stages."""

from typing import Optional


class FusionError(Exception):
    """Base class for every error the pipeline raises.

    Attributes:
        message: Human readable description
        code: Stable machine readable error code
        location: Character offset in the source, if known
        stage: Pipeline stage that produced the error
    """

    stage = "pipeline"
    default_code = "FUSION_ERROR"

    def __init__(
        self, message: str, location: Optional[int] = None, code: Optional[str] = None
    ):
        self.message = message
        self.location = location
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class LexError(FusionError):
    """Raised when the source contains a character no token starts with."""

    stage = "lex"
    default_code = "LEX_ERROR"

    def __init__(self, location: int, character: str):
        self.character = character
        super().__init__(
            f"unexpected character {character!r} at offset {location}", location
        )


class InputTooLong(FusionError):
    stage = "lex"
    default_code = "TOO_LONG"

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"input too long ({length} > {limit} characters)", limit)


class ParseError(FusionError):
    """Raised when the token sequence is not a well formed expression."""

    stage = "parse"
    default_code = "PARSE_ERROR"

    def __init__(self, location: int, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected}, found {found}", location)


class UnexpectedToken(ParseError):
    default_code = "UNEXPECTED_TOKEN"


class UnmatchedParenthesis(ParseError):
    default_code = "UNMATCHED_PARENTHESIS"


class TrailingInput(ParseError):
    default_code = "TRAILING_INPUT"


class EmptyInput(ParseError):
    default_code = "EMPTY_INPUT"

    def __init__(self, location: int = 0):
        super().__init__(location, "an expression", "end of input")


class NestingTooDeep(ParseError):
    default_code = "NESTING_TOO_DEEP"

    def __init__(self, location: int, limit: int):
        self.limit = limit
        super().__init__(
            location, f"at most {limit} nested groups", "deeper nesting"
        )


class EvalError(FusionError):
    """Raised when a well formed tree cannot be evaluated."""

    stage = "eval"
    default_code = "EVAL_ERROR"


class DivisionByZero(EvalError):
    default_code = "DIVISION_BY_ZERO"

    def __init__(self, location: Optional[int] = None):
        super().__init__("division by zero", location)
