from typing import TextIO

from fusion.errors import FusionError
from fusion.helper import error_message
from fusion.logging_config import get_logger
from fusion.pipeline import evaluate_source

logger = get_logger("session")

# Integral floats below this print without a fractional part.
EXACT_INTEGER_LIMIT = 2**53


def format_number(value: float) -> str:
    if value.is_integer() and abs(value) < EXACT_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)


class Session:
    """Line oriented read-eval-print loop.

    Each line is evaluated on its own; results go to ``output`` and
    diagnostics to ``errors``. Blank lines are skipped.
    """

    def __init__(
        self,
        input_stream: TextIO,
        output: TextIO,
        errors: TextIO,
        prompt: str = "",
    ) -> None:
        self.input_stream = input_stream
        self.output = output
        self.errors = errors
        self.prompt = prompt
        self.evaluated = 0
        self.failed = 0

    def read_line(self) -> str:
        if self.prompt:
            self.output.write(self.prompt)
            self.output.flush()
        return self.input_stream.readline()

    def evaluate_line(self, line: str) -> None:
        self.evaluated += 1
        try:
            value = evaluate_source(line)
        except FusionError as exc:
            self.failed += 1
            logger.info("%s error (%s) in %r", exc.stage, exc.code, line)
            self.errors.write(
                error_message(line, exc.location, f"{exc.stage} error: {exc.message}")
            )
            self.errors.flush()
            return
        self.output.write(f"{format_number(value)}\n")
        self.output.flush()

    def run(self) -> int:
        """Evaluate lines until the input ends; return the number that failed."""
        while line := self.read_line():
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            self.evaluate_line(line)
        if self.prompt:
            self.output.write("\n")
        return self.failed
