"""CLI for cronfields - show the values each field of a cron expression expands to."""

import logging
from typing import Annotated, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cronfields import __version__
from cronfields.config import get_log_level
from cronfields.cron_parse import CronParseError, parse_cron, validate_argument
from cronfields.render import build_table, format_schedule

app = typer.Typer(name="cronfields", help="Expand a standard cron expression field by field.", add_completion=False)
console = Console()
logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    root = logging.getLogger()
    root.setLevel(get_log_level(verbose))
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"cronfields {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[Optional[bool], typer.Option("--version", "-v", callback=_version_callback, is_eager=True)] = None,
) -> None:
    pass


@app.command()
def parse(
    expression: Annotated[list[str], typer.Argument(help='Cron expression as one quoted argument, e.g. "*/15 0 1,15 * 1-5 /usr/bin/find"')],
    table: Annotated[bool, typer.Option("--table", "-t", help="Show the result as a table")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Log how each field was parsed")] = False,
) -> None:
    """Parse a cron expression and print the values of every field."""
    _setup_logging(verbose)
    logger.debug("Program arguments: %s", expression)

    try:
        raw = validate_argument(expression)
        parsed = parse_cron(raw)
    except CronParseError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if table:
        console.print(build_table(parsed))
    else:
        print(format_schedule(parsed))


if __name__ == "__main__":
    app()
