"""Command line interface for person_db using Typer."""

from enum import Enum
from typing import Annotated, Optional

import typer

from person_db import __version__
from person_db.logging_config import configure_logging

from .commands import db, persons
from .commands.run import run_command
from .console import console


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Log format options."""

    CONSOLE = "console"
    JSON = "json"


app = typer.Typer(
    name="person-db",
    help="Person DB - CRUD demonstration on a person table",
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)

app.add_typer(persons.app, name="persons", help="Inspect persons")
app.add_typer(db.app, name="db", help="Database management")
app.command(name="run")(run_command)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"person-db, version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option("--log-level", help="Logging level (default: PERSON_DB_LOG_LEVEL)"),
    ] = None,
    log_format: Annotated[
        Optional[LogFormat],
        typer.Option("--log-format", help="Log format (default: PERSON_DB_LOG_FORMAT)"),
    ] = None,
) -> None:
    """
    Person DB - CRUD demonstration on a person table.

    Without a command, runs the start-up routine (same as `run`).
    """
    configure_logging(
        level=log_level.value if log_level else None,
        format=log_format.value if log_format else None,
        force=True,
    )

    if ctx.invoked_subcommand is None:
        run_command()


def cli_main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    cli_main()
