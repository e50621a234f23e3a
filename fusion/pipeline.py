"""Public entry points composing tokenize, parse and evaluate."""

import math
from dataclasses import dataclass
from typing import Any, Optional

from fusion import config
from fusion.errors import FusionError, InputTooLong
from fusion.evaluate import evaluate as evaluate_tree
from fusion.logging_config import get_logger
from fusion.parse import parse
from fusion.tokenize import tokenize

logger = get_logger("pipeline")


@dataclass
class EvalResult:
    """Outcome of evaluating one line of source."""

    ok: bool
    value: Optional[float] = None
    error: Optional[str] = None
    stage: Optional[str] = None
    code: Optional[str] = None
    location: Optional[int] = None

    @classmethod
    def from_error(cls, exc: FusionError) -> "EvalResult":
        return cls(
            ok=False,
            error=exc.message,
            stage=exc.stage,
            code=exc.code,
            location=exc.location,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for JSON serialization."""
        if self.ok:
            if not math.isfinite(self.value):
                return {"ok": True, "value": repr(self.value)}
            return {"ok": True, "value": self.value}
        result_dict = {
            "ok": False,
            "error": self.error,
            "stage": self.stage,
            "code": self.code,
        }
        if self.location is not None:
            result_dict["location"] = self.location
        return result_dict


def check_length(source: str) -> None:
    if len(source) > config.MAX_INPUT_LENGTH:
        raise InputTooLong(len(source), config.MAX_INPUT_LENGTH)


def evaluate_source(source: str) -> float:
    """Run the full pipeline over ``source``.

    Args:
        source: One expression, e.g. ``"(7 + 8) * 8 / 2"``

    Returns:
        The numeric result

    Raises:
        FusionError: The first lex, parse or eval error encountered
    """
    check_length(source)
    tokens = tokenize(source)
    tree = parse(tokens)
    value = evaluate_tree(tree)
    logger.debug("evaluated %r to %r", source, value)
    return value


def evaluate(source: str) -> EvalResult:
    """Like :func:`evaluate_source`, but reports failures in the result."""
    try:
        return EvalResult(ok=True, value=evaluate_source(source))
    except FusionError as exc:
        return EvalResult.from_error(exc)
