"""Database management commands."""

from typing import Annotated

import typer

from person_db.config import get_settings
from person_db.db import database
from person_db.db import reset_db as db_reset

from ..console import console
from ..ui import render_error_panel, render_info_panel

app = typer.Typer(no_args_is_help=True)


@app.command("init")
def init_db_command() -> None:
    """Create the person table and load seed rows."""
    settings = get_settings()
    if settings.in_memory:
        render_error_panel(
            "Initialization Error",
            "An in-memory database does not outlive the command.",
            details=["Set PERSON_DB_DATABASE_PATH to a file path"],
        )
        raise typer.Exit(1)

    with database(settings) as conn:
        rows = conn.execute("SELECT COUNT(*) FROM person").fetchone()[0]

    render_info_panel(
        title="Database Initialized",
        content={"database": settings.database_path, "rows": rows},
    )


@app.command("reset")
def reset_db_command(
    force: Annotated[
        bool,
        typer.Option("--force", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Delete the database file."""
    settings = get_settings()
    if not force:
        console.print("[bold red]WARNING:[/bold red] This will delete ALL data!")
        confirm = typer.confirm("Are you sure you want to reset the database?")
        if not confirm:
            console.print("[yellow]Cancelled[/yellow]")
            return

    if db_reset(settings):
        render_info_panel(title="Database Reset", message=f"Removed {settings.database_path}")
    else:
        console.print("[yellow]Nothing to reset[/yellow]")
