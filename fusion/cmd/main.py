import json

import typer

from fusion import config
from fusion.errors import FusionError
from fusion.evaluate import evaluate
from fusion.helper import error_message
from fusion.logging_config import setup_logging
from fusion.node import dump_tree
from fusion.parse import parse
from fusion.pipeline import EvalResult, check_length
from fusion.session import format_number
from fusion.tokenize import tokenize

app = typer.Typer()


def dump_tokens(expression: str) -> str:
    return "\n".join(
        f"{token.location:>4} {token.kind.name} {token.expression}".rstrip()
        for token in tokenize(expression)
    )


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expression: str,
    tokens: bool = typer.Option(False, "--tokens", help="Print the token list."),
    ast: bool = typer.Option(False, "--ast", help="Print the expression tree."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    log_level: str = typer.Option(config.LOG_LEVEL, "--log-level"),
):
    """Evaluate a single arithmetic expression."""
    setup_logging(log_level)
    try:
        check_length(expression)
        if tokens:
            typer.echo(dump_tokens(expression))
        tree = parse(tokenize(expression))
        if ast:
            typer.echo(dump_tree(tree))
        value = evaluate(tree)
    except FusionError as exc:
        if as_json:
            payload = EvalResult.from_error(exc).to_dict()
            typer.echo(json.dumps(payload, allow_nan=False))
        else:
            typer.echo(
                error_message(
                    expression, exc.location, f"{exc.stage} error: {exc.message}"
                ),
                err=True,
                nl=False,
            )
        raise typer.Exit(1)
    if as_json:
        payload = EvalResult(ok=True, value=value).to_dict()
        typer.echo(json.dumps(payload, allow_nan=False))
    else:
        typer.echo(format_number(value))


if __name__ == "__main__":
    app()
