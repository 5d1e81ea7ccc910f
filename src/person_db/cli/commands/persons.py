"""Person inspection commands."""

from typing import Annotated

import typer

from person_db.dao import PersonDao
from person_db.db import database
from person_db.exceptions import IncorrectResultSizeError

from ..console import console
from ..ui import render_error_panel, render_info_panel, render_persons_table

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_persons() -> None:
    """Show all persons."""
    with database() as conn:
        persons = PersonDao(conn).find_all()

    if not persons:
        console.print("[yellow]No persons found[/yellow]")
        return

    render_persons_table(persons)
    console.print(f"\n[dim]Showing {len(persons)} person(s)[/dim]")


@app.command("show")
def show_person(
    person_id: Annotated[int, typer.Argument(help="Person id")],
) -> None:
    """Show one person by id."""
    with database() as conn:
        try:
            person = PersonDao(conn).find_by_id(person_id)
        except IncorrectResultSizeError as e:
            render_error_panel("Person Not Found", f"No person with id {person_id}", [str(e)])
            raise typer.Exit(1)

    render_info_panel(
        title=f"Person {person.id}",
        content={
            "name": person.name,
            "location": person.location,
            "birth_date": person.birth_date.isoformat(sep=" ") if person.birth_date else "",
        },
    )
