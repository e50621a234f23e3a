import sys
from typing import TextIO

import click

from fusion import config
from fusion.logging_config import setup_logging
from fusion.session import Session


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option(
    "--log-level",
    default=config.LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
)
@click.option("--log-file", type=click.Path(dir_okay=False), default=None)
@click.version_option(config.VERSION, prog_name="fusion")
def main(filename: TextIO, log_level: str, log_file: str):
    """Evaluate one arithmetic expression per line of FILENAME (default: stdin)."""
    setup_logging(log_level, log_file)
    prompt = config.PROMPT if filename.isatty() else ""
    session = Session(filename, sys.stdout, sys.stderr, prompt)
    failed = session.run()
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
